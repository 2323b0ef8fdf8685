"""Conversions between ORM entities and the API transfer objects."""

import models
import schemas


def to_author_dto(author: models.Author) -> schemas.AuthorDTO:
    return schemas.AuthorDTO.model_validate(author)


def to_author_dtos(authors: list[models.Author]) -> list[schemas.AuthorDTO]:
    return [to_author_dto(author) for author in authors]


def to_author(dto: schemas.AuthorCreateDTO | schemas.AuthorUpdateDTO) -> models.Author:
    return models.Author(**dto.model_dump())


def to_book_dto(book: models.Book) -> schemas.BookDTO:
    return schemas.BookDTO.model_validate(book)


def to_book_dtos(books: list[models.Book]) -> list[schemas.BookDTO]:
    return [to_book_dto(book) for book in books]


def to_book(dto: schemas.BookCreateDTO | schemas.BookUpdateDTO) -> models.Book:
    return models.Book(**dto.model_dump())


def to_user_public(user: models.User) -> schemas.UserPublic:
    return schemas.UserPublic(
        id=user.id,
        username=user.username,
        email=user.email,
        roles=user.role_names,
    )
