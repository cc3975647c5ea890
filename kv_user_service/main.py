"""
ASGI entry point for the user service.

Run with ``uvicorn kv_user_service.main:app`` or
``python -m kv_user_service``.
"""

from .app import create_app
from .config import settings
from .logging_config import setup_logging

setup_logging(log_level=settings.LOG_LEVEL, service_name=settings.SERVICE_NAME)

app = create_app(settings)
