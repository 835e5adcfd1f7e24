"""
Service-layer operations for collections, singletons, likes, stats and accounts.

All public functions are wrapped with the `@transactional` decorator, which
manages SQLAlchemy sessions and transactions automatically. Each function
accepts (and uses) an injected `session: Session` provided by the decorator,
so callers pass every other argument by keyword.

Documents leave this module already serialized (``to_document``), built while
the session is still open.
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from guit_county.api.models import RegistrationDetails
from guit_county.crypt.encrypt_decrypt import EncryptionDec
from guit_county.database.config.config import settings
from guit_county.database.core.resources import Resource, NEWS, MESSAGES, STATS_RESOURCES
from guit_county.database.daos.document_dao import DocumentDao
from guit_county.database.daos.user_dao import UserDao
from guit_county.database.entities.base import utcnow
from guit_county.database.entities.site import Message
from guit_county.database.entities.user import User
from guit_county.database.helpers.transactionManagement import transactional

logger = logging.getLogger("uvicorn")


def parse_identifier(value) -> Optional[UUID]:
    """Parse a path identifier; malformed values yield None (treated as not found)."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


@transactional
def list_documents(session: Session, resource: Resource) -> list[dict]:
    """
    List every document of a collection, most recently updated first.

    Returns
    -------
    list[dict]
        Serialized documents; an empty list for an empty collection.
    """
    dao = DocumentDao(resource.entity)
    documents = dao.fetchDocuments(session, order_by=[resource.entity.updated_at.desc()])
    return [document.to_document() for document in documents]


@transactional
def get_document(session: Session, resource: Resource, document_id: str) -> Optional[dict]:
    """Return one serialized document, or None when the id is unknown or malformed."""
    identifier = parse_identifier(document_id)
    if identifier is None:
        return None
    document = DocumentDao(resource.entity).fetchDocumentById(session, identifier)
    return document.to_document() if document else None


@transactional
def create_document(session: Session, resource: Resource, fields: dict) -> dict:
    """
    Insert a document built from validated ``fields``.

    The store assigns the id; both timestamps are set to the same instant.
    Column defaults fill whatever the caller did not send.
    """
    if resource.before_write:
        fields = resource.before_write(fields)
    now = utcnow()
    document = resource.entity(**fields)
    document.created_at = now
    document.updated_at = now
    DocumentDao(resource.entity).createDocument(session, document)
    logger.info(f"Created {resource.name} {document.id} '{document.display_title}'")
    return document.to_document()


@transactional
def update_document(session: Session, resource: Resource, document_id: str, fields: dict) -> Optional[dict]:
    """
    Merge ``fields`` onto an existing document and refresh ``updated_at``.

    Returns
    -------
    dict | None
        The updated document, or None when the id is unknown or malformed.
    """
    identifier = parse_identifier(document_id)
    if identifier is None:
        return None
    document = DocumentDao(resource.entity).fetchDocumentById(session, identifier)
    if document is None:
        return None
    if resource.before_write:
        fields = resource.before_write(fields)
    document.apply(fields)
    document.updated_at = utcnow()
    document.revision = (document.revision or 0) + 1
    session.flush()
    logger.info(f"Updated {resource.name} {document.id} '{document.display_title}'")
    return document.to_document()


@transactional
def delete_document(session: Session, resource: Resource, document_id: str) -> bool:
    """
    Hard-delete a document.

    Returns
    -------
    bool
        True if a row was removed. Callers report success either way.
    """
    identifier = parse_identifier(document_id)
    if identifier is None:
        return False
    deleted = DocumentDao(resource.entity).deleteDocumentById(session, identifier)
    if deleted:
        logger.info(f"Deleted {resource.name} {identifier}")
    return deleted > 0


@transactional
def get_singleton(session: Session, resource: Resource, create: bool = True) -> Optional[dict]:
    """
    Return the live document of a singleton collection.

    Parameters
    ----------
    resource : Resource
        Settings or commissioner.
    create : bool
        Insert an empty document when none exists (used by ``GET /api/settings``).
        The public snapshot passes False and gets None instead.
    """
    dao = DocumentDao(resource.entity)
    document = dao.fetchFirstDocument(session, order_by=[resource.entity.updated_at.desc()])
    if document is None:
        if not create:
            return None
        document = dao.createDocument(session, resource.entity())
        logger.info(f"Created default {resource.name} document {document.id}")
    return document.to_document()


@transactional
def save_singleton(session: Session, resource: Resource, fields: dict) -> tuple[dict, bool]:
    """
    Find-or-create save for a singleton collection.

    Returns
    -------
    tuple[dict, bool]
        The stored document and whether it was newly inserted.
    """
    dao = DocumentDao(resource.entity)
    document = dao.fetchFirstDocument(session, order_by=[resource.entity.updated_at.desc()])
    created = document is None
    if created:
        document = resource.entity()
        document.apply(fields)
        dao.createDocument(session, document)
    else:
        document.apply(fields)
        document.updated_at = utcnow()
        document.revision = (document.revision or 0) + 1
        session.flush()
    logger.info(f"Saved {resource.name} {document.id} (created={created})")
    return document.to_document(), created


@transactional
def like_news(session: Session, news_id: str) -> Optional[int]:
    """
    Increment the like counter of a news article.

    Returns
    -------
    int | None
        New like count, or None when the article does not exist.
    """
    identifier = parse_identifier(news_id)
    if identifier is None:
        return None
    return DocumentDao(NEWS.entity).incrementField(session, identifier, "likes")


@transactional
def count_documents(session: Session, resource: Resource, filters=None) -> int:
    """Count the documents of a collection matching ``filters``."""
    return DocumentDao(resource.entity).countDocuments(session, filters=filters)


@transactional
def collection_stats(session: Session) -> dict:
    """
    Per-collection document counts for the admin dashboard.

    Returns
    -------
    dict
        One count per collection plus ``unreadMessages`` (status missing or
        anything but ``read``) and ``publishedNews``.
    """
    stats = {
        resource.name: DocumentDao(resource.entity).countDocuments(session)
        for resource in STATS_RESOURCES
    }
    stats["unreadMessages"] = DocumentDao(MESSAGES.entity).countDocuments(
        session, filters=[or_(Message.status.is_(None), Message.status != "read")]
    )
    stats["publishedNews"] = DocumentDao(NEWS.entity).countDocuments(session, filters=NEWS.public_filters())
    return stats


@transactional
def fetch_public_collection(session: Session, resource: Resource) -> list[dict]:
    """Publicly visible documents of one collection, in its natural order."""
    dao = DocumentDao(resource.entity)
    documents = dao.fetchDocuments(
        session,
        filters=resource.public_filters(),
        order_by=resource.ordering(resource.public_order),
    )
    return [document.to_document() for document in documents]


def _account(user: User) -> dict:
    return {"username": user.username or user.first_name, "role": user.role, "id": str(user.id)}


@transactional
def register_user(session: Session, data: RegistrationDetails) -> dict:
    """
    Create an account from the public registration form.

    Returns
    -------
    dict
        - On success: {'res': True, 'detail': <user id>}
        - On failure: {'res': False, 'detail': <reason>}

    Notes
    -----
    - The username defaults to the email local part; when that is taken the
      full email is used instead.
    - The password is bcrypt-hashed by the DAO.
    """
    user_dao = UserDao()
    if user_dao.fetchUserByEmail(session=session, email=data.email):
        return {"res": False, "detail": "Email already registered"}
    username = data.email.split("@")[0]
    if user_dao.fetchUserByUsername(session=session, username=username):
        username = data.email
    user = User(
        username=username,
        email=data.email,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        gender=data.gender,
        location=data.location,
    )
    user = user_dao.createUser(session=session, user_data=user)
    logger.info(f"Registered user {user.id} '{user.display_title}'")
    return {"res": True, "detail": str(user.id)}


@transactional
def login_user(session: Session, username: str, password: str) -> dict:
    """
    Authenticate a user by username (or email) and password.

    Returns
    -------
    dict
        - authenticated (bool): True if credentials are valid.
        - detail (str): Error message on failure.
        - user_details (dict | None): {username, role, id} on success.
    """
    user_dao = UserDao()
    enc = EncryptionDec()
    users_fetched = user_dao.fetchUserByLogin(session, username)
    if not users_fetched or not enc.check_passwords(password, users_fetched[0].password):
        return {"authenticated": False, "detail": "Invalid credentials", "user_details": None}
    return {"authenticated": True, "detail": "", "user_details": _account(users_fetched[0])}


@transactional
def get_account(session: Session, user_id: str) -> Optional[dict]:
    """Return {username, role, id} for an existing account, or None."""
    identifier = parse_identifier(user_id)
    if identifier is None:
        return None
    user = DocumentDao(User).fetchDocumentById(session, identifier)
    return _account(user) if user else None


@transactional
def seed_admin(session: Session) -> bool:
    """
    Create the default administrator when no admin account exists.

    Returns
    -------
    bool
        True if an account was created.
    """
    user_dao = UserDao()
    if user_dao.countAdmins(session) > 0:
        return False
    admin = User(
        username=settings.ADMIN_USERNAME,
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        first_name="System",
        last_name="Administrator",
        role="admin",
    )
    user_dao.createUser(session=session, user_data=admin)
    logger.info(f"Default admin created: {settings.ADMIN_USERNAME}")
    return True
