"""SQLModel-backed credential store."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from cookbook_auth.core.database import init_db
from cookbook_auth.core.errors import DuplicateIdentifier, InternalFailure
from cookbook_auth.models import User

logger = logging.getLogger(__name__)


class SQLCredentialStore:
    """Each call checks out one connection for one statement and returns it."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def create_schema(self) -> None:
        init_db(self.engine)

    def insert(self, full_name: str, email: str, password_hash: str) -> int:
        user = User(full_name=full_name, email=email, password_hash=password_hash)
        with Session(self.engine) as session:
            session.add(user)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                # The unique index on email is the only serialization point;
                # any other constraint failure is not a duplicate.
                if self._email_taken(session, email):
                    raise DuplicateIdentifier(email) from exc
                raise InternalFailure("insert into users violated a constraint") from exc
            except SQLAlchemyError as exc:
                session.rollback()
                raise InternalFailure("insert into users failed") from exc
            session.refresh(user)
            logger.debug("Inserted user %s (%s)", user.id, email)
            return user.id

    @staticmethod
    def _email_taken(session: Session, email: str) -> bool:
        return session.exec(select(User.id).where(User.email == email)).first() is not None

    def find_by_email(self, email: str) -> Optional[User]:
        with Session(self.engine) as session:
            try:
                return session.exec(select(User).where(User.email == email)).first()
            except SQLAlchemyError as exc:
                raise InternalFailure("lookup in users failed") from exc

    def count(self) -> int:
        with Session(self.engine) as session:
            return session.exec(select(func.count()).select_from(User)).one()
