"""
User endpoints.

List, fetch, and create-or-update users. Trailing-slash variants are
registered explicitly so they are served instead of redirected.
"""

from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from ..dependencies import get_user_repository
from ..domain.entities import User
from ..domain.exceptions import UserNotFoundError, UserServiceException, ValidationException
from ..models import ErrorResponse, MessageResponse, UserListItem, UserPayload, UserResponse
from ..repositories.user_repository import UserRepository
from ..validators import parse_user_id

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Users"])

INTERNAL_ERROR_DETAIL = "internal server error"
GREETING_HTML = "<h1>Hello World</h1><div>User service backed by Redis</div>"


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def root():
    """Static greeting."""
    return HTMLResponse(content=GREETING_HTML)


@router.get(
    "/users",
    response_model=List[UserListItem],
    summary="List users",
    responses={500: {"model": ErrorResponse}},
)
@router.get("/users/", response_model=List[UserListItem], include_in_schema=False)
async def list_users(repository: UserRepository = Depends(get_user_repository)):
    """
    List every stored user.

    Returns an empty list when no users exist.
    """
    try:
        users = await repository.list_all_users()
    except UserServiceException as e:
        logger.error("Failed to list users", error=e.message, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL,
        )

    return [UserListItem.from_user(user) for user in users]


@router.post(
    "/users",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create or update a user",
    responses={
        200: {"description": "User updated", "model": MessageResponse},
        400: {"description": "Malformed body", "model": ErrorResponse},
        404: {"description": "Unknown id on update", "model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": UserPayload.model_json_schema()}},
        }
    },
)
@router.post("/users/", response_model=MessageResponse, include_in_schema=False)
async def create_or_update_user(
    request: Request,
    repository: UserRepository = Depends(get_user_repository),
):
    """
    Create a user, or overwrite an existing one.

    A body without an id (or with an id of 0 or less) creates a user
    and answers 201. A positive id overwrites that user and answers 200;
    404 if it does not exist.

    The body is decoded as JSON whatever Content-Type the client sends.
    """
    body = await request.body()
    try:
        payload = UserPayload.model_validate_json(body)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid request body",
        )

    is_update = payload.id > 0
    user = payload.to_user()

    try:
        await repository.create_or_update_user(user)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except UserServiceException as e:
        logger.error("Failed to save user", user_id=payload.id, error=e.message, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL,
        )

    if is_update:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=MessageResponse(message="user updated successfully").model_dump(),
        )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=MessageResponse(message="user created successfully").model_dump(),
    )


@router.get(
    "/user/{user_id:int}",
    response_model=UserResponse,
    summary="Get user by id",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@router.get("/user/{user_id:int}/", response_model=UserResponse, include_in_schema=False)
async def get_user_by_id(
    user_id: int,
    repository: UserRepository = Depends(get_user_repository),
):
    """
    Fetch one user by numeric path id.

    Non-numeric ids never reach this handler and answer 404.
    """
    return await _find_user(repository, user_id)


@router.get(
    "/user",
    response_model=UserResponse,
    summary="Get user by id query parameter",
    responses={
        400: {"description": "Non-numeric id", "model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@router.get("/user/", response_model=UserResponse, include_in_schema=False)
async def get_user_by_query(
    raw_id: Optional[str] = Query(default=None, alias="id", description="User id"),
    repository: UserRepository = Depends(get_user_repository),
):
    """
    Fetch one user by ``?id=``.

    Unlike the path route, a non-numeric id answers 400.
    """
    if raw_id is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    try:
        user_id = parse_user_id(raw_id)
    except ValidationException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return await _find_user(repository, user_id)


async def _find_user(repository: UserRepository, user_id: int) -> UserResponse:
    try:
        user: User = await repository.find_user_by_id(user_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except UserServiceException as e:
        logger.error("Failed to fetch user", user_id=user_id, error=e.message, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL,
        )

    return UserResponse.from_user(user)
