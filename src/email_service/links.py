from fastapi import Request

from src.config.settings import settings


def get_link_base_url(request: Request) -> str:
    """Dependency: public base URL for links placed in outgoing emails."""
    return settings.get_base_url(fallback=str(request.base_url))
