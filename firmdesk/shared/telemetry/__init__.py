"""Shared telemetry: logging setup and request-id propagation."""

from firmdesk.shared.telemetry.logging import (
    RequestIdFilter,
    request_id_var,
    setup_logging,
)

__all__ = ["RequestIdFilter", "request_id_var", "setup_logging"]
