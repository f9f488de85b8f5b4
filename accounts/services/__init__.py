"""
Use cases for the accounts service.

An HTTP layer should call these services instead of touching repositories,
password hashes or tokens directly.
"""
