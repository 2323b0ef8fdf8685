from fastapi import APIRouter, Depends, HTTPException, Response, status

import mappings, schemas
from errors import describe, internal_error
from logging_config import LoggerService, get_logger_service
from repositories import AuthorRepository, get_author_repository

router = APIRouter(prefix="/api/authors", tags=["Authors"])

ERROR_RESPONSES = {500: {"description": "Unexpected server error"}}


# Get Authors
@router.get("", response_model=list[schemas.AuthorDTO], responses=ERROR_RESPONSES)
def get_authors(
    repo: AuthorRepository = Depends(get_author_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info("Attempted to get all authors")
        authors = repo.find_all()
        response = mappings.to_author_dtos(authors)
        logger.log_debug(f"Mapped {len(response)} authors")
        logger.log_info("Successfully got all authors")
        return response
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Get Author
@router.get(
    "/{author_id}",
    response_model=schemas.AuthorDTO,
    responses={404: {"description": "Author not found"}, **ERROR_RESPONSES},
)
def get_author(
    author_id: int,
    repo: AuthorRepository = Depends(get_author_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info(f"Attempted to get author with id:{author_id}")
        author = repo.find_by_id(author_id)
        if author is None:
            logger.log_warn(f"Author with id:{author_id} was not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
        response = mappings.to_author_dto(author)
        logger.log_info(f"Successfully got author with id:{author_id}")
        return response
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Create Author
@router.post(
    "",
    response_model=schemas.AuthorDTO,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Empty or incomplete author"}, **ERROR_RESPONSES},
)
def create_author(
    author_dto: schemas.AuthorCreateDTO,
    response: Response,
    repo: AuthorRepository = Depends(get_author_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info("Author submission attempted")
        author = mappings.to_author(author_dto)
        if not repo.create(author):
            raise internal_error(logger, "Author creation failed")
        logger.log_info(f"Author created with id:{author.id}")
        response.headers["Location"] = f"{router.prefix}/{author.id}"
        return mappings.to_author_dto(author)
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Update Author
@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: {"description": "Bad author data"},
        404: {"description": "Author not found"},
        **ERROR_RESPONSES,
    },
)
def update_author(
    author_id: int,
    author_dto: schemas.AuthorUpdateDTO,
    repo: AuthorRepository = Depends(get_author_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info(f"Author with id:{author_id} update attempted")
        if author_id < 1 or author_id != author_dto.id:
            logger.log_warn("Author update failed with bad data")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Author id mismatch")
        if not repo.is_exists(author_id):
            logger.log_warn(f"Author with id:{author_id} was not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")

        author = mappings.to_author(author_dto)
        if not repo.update(author):
            raise internal_error(logger, "Update operation failed")
        logger.log_info(f"Author with id:{author_id} successfully updated")
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Delete Author
@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: {"description": "Bad author id"},
        404: {"description": "Author not found"},
        **ERROR_RESPONSES,
    },
)
def delete_author(
    author_id: int,
    repo: AuthorRepository = Depends(get_author_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info(f"Author with id:{author_id} delete attempted")
        if author_id < 1:
            logger.log_warn("Author delete failed with bad data")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid author id")
        if not repo.is_exists(author_id):
            logger.log_warn(f"Author with id:{author_id} was not found")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")

        author = repo.find_by_id(author_id)
        if not repo.delete(author):
            raise internal_error(logger, "Author delete failed")
        logger.log_info(f"Author with id:{author_id} successfully deleted")
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc
