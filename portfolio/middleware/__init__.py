"""HTTP middleware: timeout, request ID, security headers.

Applied in main app; order matters (last added = outermost).
"""

from portfolio.middleware.request_id import RequestIDMiddleware
from portfolio.middleware.security_headers import SecurityHeadersMiddleware
from portfolio.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
