"""Advisor domain - AI style consultant"""

from .router import router

__all__ = ["router"]
