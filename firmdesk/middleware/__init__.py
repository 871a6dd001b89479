"""Raw ASGI middleware."""

from firmdesk.middleware.request_id import RequestIDMiddleware
from firmdesk.middleware.request_size_limit import RequestSizeLimitMiddleware

__all__ = ["RequestIDMiddleware", "RequestSizeLimitMiddleware"]
