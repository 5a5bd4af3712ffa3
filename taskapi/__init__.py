"""Task CRUD service: FastAPI app factory and CLI entry point."""
from taskapi.app import create_app

__all__ = ["create_app"]
