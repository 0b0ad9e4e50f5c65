"""Redaction of header values and URI query parameters.

This module provides:
- Composable redaction policies for request headers, response headers,
  and query parameters
- Immutable redaction configurations bundling the three policies
- Redacted views keeping the original value next to the redacted one
"""

from client_errors.features.redaction.allowed_headers import (
    DEFAULT_ALLOWED_HEADERS,
    is_default_allowed_header,
)
from client_errors.features.redaction.configuration import (
    DEFAULT_REDACTION,
    UNREDACTED,
    RedactionConfiguration,
)
from client_errors.features.redaction.policy import (
    QueryParamRedactor,
    RequestHeaderRedactor,
    ResponseHeaderRedactor,
    default_redact_value,
    redact_with_constant,
)
from client_errors.features.redaction.views import (
    RedactedRequestHeaders,
    RedactedResponseHeaders,
    RedactedUri,
    mask_url_credentials,
    redact_query,
    render_headers,
)


__all__ = [
    # Allow-list
    "DEFAULT_ALLOWED_HEADERS",
    "is_default_allowed_header",
    # Configuration
    "DEFAULT_REDACTION",
    "UNREDACTED",
    "RedactionConfiguration",
    # Policies
    "QueryParamRedactor",
    "RequestHeaderRedactor",
    "ResponseHeaderRedactor",
    "default_redact_value",
    "redact_with_constant",
    # Views
    "RedactedRequestHeaders",
    "RedactedResponseHeaders",
    "RedactedUri",
    "mask_url_credentials",
    "redact_query",
    "render_headers",
]
