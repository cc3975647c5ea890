"""
Shared dependencies for the application.

Provides dependency injection functions used across routers. The
repository is built by create_app and kept on the application state.
"""

from fastapi import Request

from .repositories.user_repository import UserRepository


async def get_user_repository(request: Request) -> UserRepository:
    """
    Get the user repository for dependency injection.

    Used by all routers that need user storage.
    """
    repository = getattr(request.app.state, "user_repository", None)
    if repository is None:
        raise RuntimeError("User repository not initialized")
    return repository
