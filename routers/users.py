from fastapi import APIRouter, Depends, HTTPException, status

import auth, mappings, models, schemas
from errors import describe, internal_error
from logging_config import LoggerService, get_logger_service
from repositories import RoleRepository, UserRepository, get_role_repository, get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


# Register
@router.post(
    "/register",
    response_model=schemas.UserPublic,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Username or email already registered"}},
)
def register(
    user_dto: schemas.UserRegisterDTO,
    users: UserRepository = Depends(get_user_repository),
    roles: RoleRepository = Depends(get_role_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info(f"Registration attempt for {user_dto.email}")
        if users.is_taken(user_dto.username, user_dto.email):
            logger.log_warn(f"{user_dto.email} is already registered")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Username or email already registered",
            )

        role = roles.find_by_name(auth.CUSTOMER)
        if role is None:
            raise internal_error(logger, f"{auth.CUSTOMER} role is missing, cannot register {user_dto.email}")

        user = models.User(username=user_dto.username, email=user_dto.email, roles=[role])
        if not users.create_with_password(user, user_dto.password):
            raise internal_error(logger, f"{user_dto.email} user registration failed")

        logger.log_info(f"{user_dto.email} registered")
        return mappings.to_user_public(user)
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc


# Login
@router.post(
    "/login",
    response_model=schemas.TokenResponse,
    responses={401: {"description": "Invalid username or password"}},
)
def login(
    credentials: schemas.UserLoginDTO,
    users: UserRepository = Depends(get_user_repository),
    logger: LoggerService = Depends(get_logger_service),
):
    try:
        logger.log_info(f"Login attempt from user {credentials.username}")
        user = users.find_by_login(credentials.username)
        if user is None or not users.check_password(user, credentials.password):
            logger.log_warn(f"{credentials.username} not authenticated")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid username or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        token = auth.create_access_token(user.id, user.username, user.email, user.role_names)
        logger.log_info(f"{credentials.username} successfully authenticated")
        return {"token": token}
    except HTTPException:
        raise
    except Exception as exc:
        raise internal_error(logger, describe(exc)) from exc
