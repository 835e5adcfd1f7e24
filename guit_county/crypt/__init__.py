"""
The `crypt` package provides the password utilities behind the account
endpoints.

Contents
--------
- encrypt_decrypt
    Utility module exposing the `EncryptionDec` class:
        * `hash_password` — hashes plaintext passwords using bcrypt
        * `check_passwords` — verifies a plaintext password against a hashed one
        * `is_hashed` — detects values that already are bcrypt hashes, so
          updates through the users collection never double-hash
"""
