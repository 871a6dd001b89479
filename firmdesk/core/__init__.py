"""Core: config, exception handlers, limiter and application lifespan."""

from firmdesk.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
