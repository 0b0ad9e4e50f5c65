"""Single-read response interception for httpx clients.

This module provides:
- Content-type based detection of structured error responses
- At most one read of the response body stream
- Replay of buffered bodies that turn out not to be structured errors
- Metrics collection for observability
"""

from client_errors.features.middleware.interceptor import (
    ProblemResponseInterceptor,
    media_type_of,
    replay_response,
)
from client_errors.features.middleware.metrics import InterceptorMetrics
from client_errors.features.middleware.transport import (
    AsyncProblemJsonTransport,
    ProblemJsonTransport,
)


__all__ = [
    "AsyncProblemJsonTransport",
    "InterceptorMetrics",
    "ProblemJsonTransport",
    "ProblemResponseInterceptor",
    "media_type_of",
    "replay_response",
]
