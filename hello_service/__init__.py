# hello_service/__init__.py
from .service import app, create_app

__all__ = ["app", "create_app"]
