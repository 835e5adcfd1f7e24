import bcrypt

class EncryptionDec:
    """
    Utility class for password hashing and verification.

    Methods
    -------
    hash_password(text: str) -> str
        Hashes a plaintext password using bcrypt with a generated salt.
    check_passwords(plain_text: str, passwd: str) -> bool
        Verifies a plaintext password against a hashed password.
    is_hashed(value: str) -> bool
        Tells whether a stored value already is a bcrypt hash.
    """

    BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")
    BCRYPT_MAX_BYTES = 72

    def hash_password(self, text: str) -> str:
        """
        Hash a plaintext password using bcrypt.

        Parameters
        ----------
        text : str
            The plaintext password.

        Returns
        -------
        str
            The bcrypt-hashed password (UTF-8 decoded).
        """
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(text.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def check_passwords(self, plain_text: str, passwd: str) -> bool:
        """
        Verify if a plaintext password matches a hashed password.

        Parameters
        ----------
        plain_text : str
            The plaintext password to check.
        passwd : str
            The previously hashed password to verify against.

        Returns
        -------
        bool
            True if the password matches, False otherwise (including when
            ``passwd`` is not a bcrypt hash or ``plain_text`` exceeds 72 bytes).
        """
        if not self.is_hashed(passwd):
            return False
        # bcrypt rejects input above 72 bytes; no stored hash can match it
        if len(plain_text.encode("utf-8")) > self.BCRYPT_MAX_BYTES:
            return False
        return bcrypt.checkpw(plain_text.encode("utf-8"), passwd.encode("utf-8"))

    def is_hashed(self, value: str) -> bool:
        """Return True when ``value`` looks like a bcrypt hash."""
        return bool(value) and value.startswith(self.BCRYPT_PREFIXES) and len(value) == 60
