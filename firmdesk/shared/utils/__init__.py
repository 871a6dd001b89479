"""Shared utilities: datetime and id generators."""

from firmdesk.shared.utils.datetime import current_year, ensure_utc, utc_now
from firmdesk.shared.utils.generators import generate_cuid

__all__ = ["current_year", "ensure_utc", "generate_cuid", "utc_now"]
