"""Redaction configuration bundling the three redaction functions."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from client_errors.features.redaction.policy import (
    QueryParamRedactor,
    RequestHeaderRedactor,
    ResponseHeaderRedactor,
)


if TYPE_CHECKING:
    from client_errors.settings.app import ClientErrorSettings


@dataclass(frozen=True, repr=False)
class RedactionConfiguration:
    """How to redact a request/response interaction.

    Any redaction can be undone: every redacted view keeps the original value
    in its ``unredacted`` field. That field never appears in ``repr()`` or in
    error messages, but callers can read it deliberately.

    Instances are immutable; the ``with_*`` methods return new values.
    """

    redact_request_header: RequestHeaderRedactor
    redact_response_header: ResponseHeaderRedactor
    redact_query_param: QueryParamRedactor

    def __repr__(self) -> str:
        return f"RedactionConfiguration(id={id(self):#x})"

    def with_request_header_redactor(
        self, redactor: RequestHeaderRedactor
    ) -> "RedactionConfiguration":
        """Return a copy using ``redactor`` for request headers."""
        return replace(self, redact_request_header=redactor)

    def with_response_header_redactor(
        self, redactor: ResponseHeaderRedactor
    ) -> "RedactionConfiguration":
        """Return a copy using ``redactor`` for response headers."""
        return replace(self, redact_response_header=redactor)

    def with_query_param_redactor(
        self, redactor: QueryParamRedactor
    ) -> "RedactionConfiguration":
        """Return a copy using ``redactor`` for URI query parameters."""
        return replace(self, redact_query_param=redactor)

    @classmethod
    def default(cls) -> "RedactionConfiguration":
        """Redact headers outside the default allow-list and all query values."""
        return DEFAULT_REDACTION

    @classmethod
    def unredacted(cls) -> "RedactionConfiguration":
        """Redact nothing at all."""
        return UNREDACTED

    @classmethod
    def allow_list(
        cls,
        request_header_names: Iterable[str] = (),
        response_header_names: Iterable[str] | None = None,
        query_param_keys: Iterable[str] = (),
    ) -> "RedactionConfiguration":
        """Keep only the listed headers and query values; redact everything else.

        Args:
            request_header_names: Request header names to keep.
            response_header_names: Response header names to keep. Defaults to
                the request header names.
            query_param_keys: Query parameter keys whose values are kept,
                compared case-insensitively.

        Returns:
            A new configuration.
        """
        request_names = tuple(request_header_names)
        response_names = (
            request_names
            if response_header_names is None
            else tuple(response_header_names)
        )
        return cls(
            redact_request_header=RequestHeaderRedactor.allow_list(request_names),
            redact_response_header=ResponseHeaderRedactor.allow_list(response_names),
            redact_query_param=QueryParamRedactor.allow_list(query_param_keys),
        )

    @classmethod
    def allow_list_or_default(
        cls,
        request_header_names: Iterable[str] = (),
        response_header_names: Iterable[str] | None = None,
        query_param_keys: Iterable[str] = (),
    ) -> "RedactionConfiguration":
        """Keep the listed headers and query values, falling back to ``default()``.

        Headers in the default allow-list stay visible as well, so this
        widens the default policy rather than replacing it.
        """
        request_names = tuple(request_header_names)
        response_names = (
            request_names
            if response_header_names is None
            else tuple(response_header_names)
        )
        return (
            DEFAULT_REDACTION.with_request_header_redactor(
                RequestHeaderRedactor.allow_list_or_default(request_names)
            )
            .with_response_header_redactor(
                ResponseHeaderRedactor.allow_list_or_default(response_names)
            )
            .with_query_param_redactor(
                QueryParamRedactor.allow_list_or_default(query_param_keys)
            )
        )

    @classmethod
    def from_settings(cls, settings: "ClientErrorSettings") -> "RedactionConfiguration":
        """Build a configuration from application settings.

        Args:
            settings: Loaded settings.

        Returns:
            ``unredacted()`` when redaction is disabled, an allow-list
            widening of ``default()`` when any allow-list is set, and
            ``default()`` otherwise.
        """
        if settings.redaction_mode == "unredacted":
            return UNREDACTED
        if (
            settings.allowed_request_headers
            or settings.allowed_response_headers
            or settings.allowed_query_params
        ):
            return cls.allow_list_or_default(
                request_header_names=settings.allowed_request_headers,
                response_header_names=settings.allowed_response_headers,
                query_param_keys=settings.allowed_query_params,
            )
        return DEFAULT_REDACTION


DEFAULT_REDACTION = RedactionConfiguration(
    redact_request_header=RequestHeaderRedactor.default(),
    redact_response_header=ResponseHeaderRedactor.default(),
    redact_query_param=QueryParamRedactor.default(),
)

UNREDACTED = RedactionConfiguration(
    redact_request_header=RequestHeaderRedactor.unredacted(),
    redact_response_header=ResponseHeaderRedactor.unredacted(),
    redact_query_param=QueryParamRedactor.unredacted(),
)
