"""Run the user service with uvicorn."""

import uvicorn

from .config import settings

if __name__ == "__main__":
    uvicorn.run(
        "kv_user_service.main:app",
        host=settings.SERVICE_HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
