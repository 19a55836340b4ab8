"""Content index service package."""

from .router import router, get_content_service
from .service import ContentService

__all__ = ["router", "get_content_service", "ContentService"]
