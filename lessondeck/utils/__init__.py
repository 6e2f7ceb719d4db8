"""LessonDeck utilities."""

from .api_client import ApiClient, ApiError

__all__ = ["ApiClient", "ApiError"]
