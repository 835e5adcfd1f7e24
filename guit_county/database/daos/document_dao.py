"""
Document DAO

Purpose
-------
One data-access object for every collection table. A ``DocumentDao`` is bound
to an ORM entity (``DocumentDao(News)``) and provides:
- Create documents
- Query all / filtered / ordered documents, by id, or the first match
- Count documents
- Delete by id
- Atomic counter increments (news likes)

Design
------
- Requires an active SQLAlchemy `Session` supplied by the caller (no session
  creation inside the DAO). Transaction boundaries live in the service layer
  (``@transactional`` functions in ``guit_county.database.core``).
- Uses straightforward ORM queries (`session.query(...).filter(...)`).

Usage
-----
.. code-block:: python

    from guit_county.database.daos.document_dao import DocumentDao
    from guit_county.database.entities import News

    dao = DocumentDao(News)
    with SessionFactory() as session:
        dao.createDocument(session, News(title="Road Repairs Begin"))
        session.commit()
        published = dao.fetchDocuments(session, filters=[News.status == "published"],
                                       order_by=[News.date.desc()])

Error Handling
--------------
- Methods log the failing operation and re-raise; the API layer maps the
  exception to a client or server error.
"""

import logging
from uuid import UUID

from sqlalchemy import func, update
from sqlalchemy.orm import Session

logger = logging.getLogger("uvicorn")


class DocumentDao:
    """
    Data Access Object (DAO) for a single collection table.

    Parameters
    ----------
    entity : type
        ORM model class (a ``DocumentMixin`` subclass).
    """

    def __init__(self, entity):
        self.entity = entity

    def createDocument(self, session: Session, document):
        """
        Add a new document and flush so defaults (id, timestamps) are assigned.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        document : DocumentMixin
            Entity instance to persist.

        Returns
        -------
        DocumentMixin
            The flushed instance.
        """
        try:
            session.add(document)
            session.flush()
            return document
        except Exception as e:
            logger.error(f"Error in DocumentDao.createDocument ({self.entity.__tablename__}). Error: {e}")
            raise e

    def fetchDocuments(self, session: Session, filters=None, order_by=None):
        """
        Fetch documents matching every criterion in ``filters``, sorted by ``order_by``.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        filters : list | None
            SQLAlchemy boolean expressions, combined with AND.
        order_by : list | None
            SQLAlchemy ordering expressions.

        Returns
        -------
        list
            Matching entities (possibly empty).
        """
        try:
            query = session.query(self.entity)
            if filters:
                query = query.filter(*filters)
            if order_by:
                query = query.order_by(*order_by)
            return query.all()
        except Exception as e:
            logger.error(f"Error in DocumentDao.fetchDocuments ({self.entity.__tablename__}). Error: {e}")
            raise e

    def fetchDocumentById(self, session: Session, document_id: UUID):
        """Fetch a single document by primary key, or None."""
        try:
            return session.get(self.entity, document_id)
        except Exception as e:
            logger.error(f"Error in DocumentDao.fetchDocumentById ({self.entity.__tablename__}). Error: {e}")
            raise e

    def fetchFirstDocument(self, session: Session, filters=None, order_by=None):
        """Fetch the first document for the given criteria and ordering, or None."""
        try:
            query = session.query(self.entity)
            if filters:
                query = query.filter(*filters)
            if order_by:
                query = query.order_by(*order_by)
            return query.first()
        except Exception as e:
            logger.error(f"Error in DocumentDao.fetchFirstDocument ({self.entity.__tablename__}). Error: {e}")
            raise e

    def countDocuments(self, session: Session, filters=None) -> int:
        """Count documents matching ``filters`` (all documents when empty)."""
        try:
            query = session.query(self.entity)
            if filters:
                query = query.filter(*filters)
            return query.count()
        except Exception as e:
            logger.error(f"Error in DocumentDao.countDocuments ({self.entity.__tablename__}). Error: {e}")
            raise e

    def deleteDocumentById(self, session: Session, document_id: UUID) -> int:
        """
        Hard-delete a document.

        Returns
        -------
        int
            Number of deleted rows (0 when the id did not exist).
        """
        try:
            return session.query(self.entity).filter(self.entity.id == document_id).delete(synchronize_session=False)
        except Exception as e:
            logger.error(f"Error in DocumentDao.deleteDocumentById ({self.entity.__tablename__}). Error: {e}")
            raise e

    def incrementField(self, session: Session, document_id: UUID, field: str):
        """
        Atomically add one to an integer column (NULL counts as 0).

        Returns
        -------
        int | None
            The new value, or None when the document does not exist.
        """
        try:
            column = getattr(self.entity, field)
            result = session.execute(
                update(self.entity)
                .where(self.entity.id == document_id)
                .values({field: func.coalesce(column, 0) + 1})
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None
            session.expire_all()
            return getattr(session.get(self.entity, document_id), field)
        except Exception as e:
            logger.error(f"Error in DocumentDao.incrementField ({self.entity.__tablename__}). Error: {e}")
            raise e
