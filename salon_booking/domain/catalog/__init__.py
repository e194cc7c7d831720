"""Catalog domain - service offerings CRUD"""

from .router import router

__all__ = ["router"]
