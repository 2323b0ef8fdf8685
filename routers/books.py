from fastapi import APIRouter, Depends, HTTPException, Response, status

import mappings, schemas
from errors import describe, internal_error
from logging_config import LoggerService, get_logger_service
from repositories import BookRepository, get_book_repository

router = APIRouter(prefix="/api/books", tags=["Books"])

ERROR_RESPONSES = {500: {"description": "Unexpected server error"}}


# Get Books
@router.get("", response_model=list[schemas.BookDTO], responses=ERROR_RESPONSES)
def get_books(
    repo: BookRepository = Depends(get_book_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info("Attempted to get all books")
        books = repo.find_all()
        response = mappings.to_book_dtos(books)
        logger.log_debug(f"Mapped {len(response)} books")
        logger.log_info("Successfully got all books")
        return response
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Get Book
@router.get(
    "/{book_id}",
    response_model=schemas.BookDTO,
    responses={404: {"description": "Book not found"}, **ERROR_RESPONSES},
)
def get_book(
    book_id: int,
    repo: BookRepository = Depends(get_book_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info(f"Attempted to get book with id:{book_id}")
        book = repo.find_by_id(book_id)
        if book is None:
            logger.log_warn(f"Book with id:{book_id} was not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
        response = mappings.to_book_dto(book)
        logger.log_info(f"Successfully got book with id:{book_id}")
        return response
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Add Book
@router.post(
    "",
    response_model=schemas.BookDTO,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Empty or incomplete book"}, **ERROR_RESPONSES},
)
def create_book(
    book_dto: schemas.BookCreateDTO,
    response: Response,
    repo: BookRepository = Depends(get_book_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info("Book submission attempted")
        book = mappings.to_book(book_dto)
        if not repo.create(book):
            raise internal_error(logger, "Book creation failed")
        logger.log_info(f"Book created with id:{book.id}")
        response.headers["Location"] = f"{router.prefix}/{book.id}"
        return mappings.to_book_dto(book)
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Update Book
@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: {"description": "Bad book data"},
        404: {"description": "Book not found"},
        **ERROR_RESPONSES,
    },
)
def update_book(
    book_id: int,
    book_dto: schemas.BookUpdateDTO,
    repo: BookRepository = Depends(get_book_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info(f"Book with id:{book_id} update attempted")
        if book_id < 1 or book_id != book_dto.id:
            logger.log_warn("Book update failed with bad data")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Book id mismatch")
        if not repo.is_exists(book_id):
            logger.log_warn(f"Book with id:{book_id} was not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")

        book = mappings.to_book(book_dto)
        if not repo.update(book):
            raise internal_error(logger, "Update operation failed")
        logger.log_info(f"Book with id:{book_id} successfully updated")
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Delete Book
@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: {"description": "Bad book id"},
        404: {"description": "Book not found"},
        **ERROR_RESPONSES,
    },
)
def delete_book(
    book_id: int,
    repo: BookRepository = Depends(get_book_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info(f"Book with id:{book_id} delete attempted")
        if book_id < 1:
            logger.log_warn("Book delete failed with bad data")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid book id")
        if not repo.is_exists(book_id):
            logger.log_warn(f"Book with id:{book_id} was not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")

        book = repo.find_by_id(book_id)
        if not repo.delete(book):
            raise internal_error(logger, "Book delete failed")
        logger.log_info(f"Book with id:{book_id} successfully deleted")
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc
