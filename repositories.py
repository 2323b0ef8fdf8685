import logging
from typing import Generic, Optional, Type, TypeVar

from fastapi import Depends
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

import auth
import models
from database import Base, get_db

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """CRUD over a single mapped entity.

    Write operations report success as a bool instead of raising, so the
    controllers can tell a failed save apart from an unexpected error.
    """

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(self.model)

    def find_all(self) -> list[ModelT]:
        return self._query().order_by(self.model.id).all()

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self._query().filter(self.model.id == entity_id).first()

    def is_exists(self, entity_id: int) -> bool:
        return (
            self.db.query(self.model.id).filter(self.model.id == entity_id).first()
            is not None
        )

    def create(self, entity: ModelT) -> bool:
        self.db.add(entity)
        if not self.save():
            return False
        self.db.refresh(entity)
        return True

    def update(self, entity: ModelT) -> bool:
        self.db.merge(entity)
        return self.save()

    def delete(self, entity: ModelT) -> bool:
        self.db.delete(entity)
        return self.save()

    def save(self) -> bool:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Failed to save %s changes: %s", self.model.__name__, exc)
            return False
        return True


class AuthorRepository(BaseRepository[models.Author]):
    model = models.Author

    def _query(self):
        return self.db.query(models.Author).options(selectinload(models.Author.books))


class BookRepository(BaseRepository[models.Book]):
    model = models.Book

    def _query(self):
        return self.db.query(models.Book).options(joinedload(models.Book.author))


class RoleRepository(BaseRepository[models.Role]):
    model = models.Role

    def find_by_name(self, name: str) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.name == name).first()

    def role_exists(self, name: str) -> bool:
        return self.find_by_name(name) is not None


class UserRepository(BaseRepository[models.User]):
    model = models.User

    def find_by_email(self, email: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.email == email).first()

    def find_by_username(self, username: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.username == username).first()

    def find_by_login(self, login: str) -> Optional[models.User]:
        # Username wins over email when both happen to match different rows
        return self.find_by_username(login) or self.find_by_email(login)

    def is_taken(self, username: str, email: str) -> bool:
        return (
            self.db.query(models.User.id)
            .filter(or_(models.User.username == username, models.User.email == email))
            .first()
            is not None
        )

    def create_with_password(self, user: models.User, password: str) -> bool:
        user.password_hash = auth.hash_password(password)
        return self.create(user)

    def check_password(self, user: models.User, password: str) -> bool:
        return auth.verify_password(password, user.password_hash)


def get_author_repository(db: Session = Depends(get_db)) -> AuthorRepository:
    return AuthorRepository(db)


def get_book_repository(db: Session = Depends(get_db)) -> BookRepository:
    return BookRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_role_repository(db: Session = Depends(get_db)) -> RoleRepository:
    return RoleRepository(db)
