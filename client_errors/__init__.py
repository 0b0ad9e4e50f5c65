"""Redacted, structured errors for unexpected HTTP client responses."""

from client_errors.errors import ResponseBodyDecodeError, StructuredError
from client_errors.features.client import (
    ClientResponseError,
    ClientResponseErrorTextBody,
    Decoded,
    DecodeFailed,
    NoBody,
    expect_success,
)
from client_errors.features.middleware import (
    AsyncProblemJsonTransport,
    ProblemJsonTransport,
    ProblemResponseInterceptor,
)
from client_errors.features.problem import HttpProblem
from client_errors.features.redaction import (
    DEFAULT_REDACTION,
    UNREDACTED,
    RedactionConfiguration,
)


__all__ = [
    "DEFAULT_REDACTION",
    "UNREDACTED",
    "AsyncProblemJsonTransport",
    "ClientResponseError",
    "ClientResponseErrorTextBody",
    "DecodeFailed",
    "Decoded",
    "HttpProblem",
    "NoBody",
    "ProblemJsonTransport",
    "ProblemResponseInterceptor",
    "RedactionConfiguration",
    "ResponseBodyDecodeError",
    "StructuredError",
    "expect_success",
]
