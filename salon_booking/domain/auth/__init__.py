"""Auth domain - accounts and the current session"""

from .router import router

__all__ = ["router"]
