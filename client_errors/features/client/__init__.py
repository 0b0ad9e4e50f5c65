"""Structured errors for unexpected HTTP client responses."""

from client_errors.features.client.body import (
    NO_BODY,
    BodyOutcome,
    Decoded,
    DecodeFailed,
    NoBody,
)
from client_errors.features.client.expect import (
    aexpect_success,
    araise_for_client_error,
    expect_success,
    is_success,
    raise_for_client_error,
)
from client_errors.features.client.response_error import (
    ClientResponseError,
    format_status,
)
from client_errors.features.client.text_body import (
    ClientResponseErrorTextBody,
    decode_text,
)


__all__ = [
    # Body outcome
    "NO_BODY",
    "BodyOutcome",
    "Decoded",
    "DecodeFailed",
    "NoBody",
    # Errors
    "ClientResponseError",
    "ClientResponseErrorTextBody",
    "decode_text",
    "format_status",
    # Expect helpers
    "aexpect_success",
    "araise_for_client_error",
    "expect_success",
    "is_success",
    "raise_for_client_error",
]
