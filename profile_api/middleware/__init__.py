"""HTTP middleware: request ID and security headers.

Applied in main app; order matters (first added = outermost).
"""

from profile_api.middleware.request_id import RequestIDMiddleware
from profile_api.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
