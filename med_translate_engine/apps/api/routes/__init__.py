"""Router namespace exports for FastAPI include hooks."""

from . import health, translate

__all__ = ["health", "translate"]
