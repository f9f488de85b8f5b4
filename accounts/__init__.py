"""User account service: persistence, password hashing and login tokens."""
