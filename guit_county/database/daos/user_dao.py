"""
User DAO

Purpose
-------
Account-specific lookups for the `User` ORM entity that the generic
``DocumentDao`` does not cover:
- Creation with password hashing
- Lookup by username or email (login accepts either)
- Lookup by email (registration uniqueness)
- Counting administrators (startup seeding)

Design
------
- The DAO expects an active SQLAlchemy `Session` supplied by the caller.
- Passwords are hashed using `EncryptionDec.hash_password(...)` before insert.

Error Handling
--------------
- Each method catches generic `Exception`, logs a message, and re-raises.
"""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from guit_county.crypt.encrypt_decrypt import EncryptionDec
from guit_county.database.entities.user import User

logger = logging.getLogger("uvicorn")


class UserDao:
    """
    Data Access Object (DAO) for managing User entities.
    """

    def createUser(self, session: Session, user_data: User) -> User:
        """
        Create a new user in the database with a hashed password.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        user_data : User
            User entity carrying the plaintext password.

        Returns
        -------
        User
            The flushed user.
        """
        try:
            enc = EncryptionDec()
            user_data.password = enc.hash_password(text=user_data.password)
            session.add(user_data)
            session.flush()
            return user_data
        except Exception as e:
            logger.error(f"Error in UserDao.createUser. Error Message: {e}")
            raise e

    def fetchUserByLogin(self, session: Session, login: str):
        """
        Fetch a user whose username or email equals ``login``.

        Returns
        -------
        list[User]
            At most one user.
        """
        try:
            return (
                session.query(User)
                .filter(or_(User.username == login, User.email == login))
                .limit(1)
                .all()
            )
        except Exception as e:
            logger.error(f"Error in UserDao.fetchUserByLogin. Error Message: {e}")
            raise e

    def fetchUserByEmail(self, session: Session, email: str):
        """
        Fetch a user by email.

        Returns
        -------
        list[User]
            At most one user.
        """
        try:
            return session.query(User).filter(User.email == email).limit(1).all()
        except Exception as e:
            logger.error(f"Error in UserDao.fetchUserByEmail. Error Message: {e}")
            raise e

    def fetchUserByUsername(self, session: Session, username: str):
        """Fetch a user by username (at most one)."""
        try:
            return session.query(User).filter(User.username == username).limit(1).all()
        except Exception as e:
            logger.error(f"Error in UserDao.fetchUserByUsername. Error Message: {e}")
            raise e

    def countAdmins(self, session: Session) -> int:
        """Number of accounts with the ``admin`` role."""
        try:
            return session.query(User).filter(User.role == "admin").count()
        except Exception as e:
            logger.error(f"Error in UserDao.countAdmins. Error Message: {e}")
            raise e
