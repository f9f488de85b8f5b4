"""
Core utilities shared across the accounts service.

This package hosts configuration, logging setup and the two cryptographic
collaborators used by the services: password hashing and token signing.
Services should depend on these primitives instead of reading os.environ or
calling argon2/jose directly.
"""
