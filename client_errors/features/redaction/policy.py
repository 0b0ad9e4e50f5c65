"""Redaction policies for header values and URI query parameters.

A policy is a total function: it never raises and never rejects input. Header
redactors map ``(name, value)`` to a possibly redacted value. Query parameter
redactors map ``(key, value)`` to a ``(key, value)`` pair; a missing value
stays missing.

Policies compose through the builders on each class. ``or_else`` takes a
*rule*, a callable returning the replacement or ``None`` when it does not
apply, and defers everything it does not match to a fallback.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Self

from client_errors.constants import REDACTED_VALUE
from client_errors.features.redaction.allowed_headers import is_default_allowed_header


QueryParam = tuple[str, str | None]
HeaderRule = Callable[[str, str], str | None]
QueryParamRule = Callable[[str, str | None], QueryParam | None]


def redact_with_constant(constant: str) -> Callable[[object], str]:
    """Build a value redactor that always yields ``constant``."""

    def redact(_value: object) -> str:
        return constant

    return redact


default_redact_value: Callable[[object], str] = redact_with_constant(REDACTED_VALUE)


def _fold_names(names: Iterable[str]) -> frozenset[str]:
    return frozenset(name.lower() for name in names)


@dataclass(frozen=True)
class _HeaderRedactor:
    """Callable wrapper around a ``(name, value) -> value`` function."""

    redact: Callable[[str, str], str]

    def __call__(self, name: str, value: str) -> str:
        return self.redact(name, value)

    @classmethod
    def default(cls) -> Self:
        """Redact every header not in the default allow-list."""

        def redact(name: str, value: str) -> str:
            if is_default_allowed_header(name):
                return value
            return default_redact_value(value)

        return cls(redact)

    @classmethod
    def unredacted(cls) -> Self:
        """Never redact anything."""
        return cls(lambda _name, value: value)

    @classmethod
    def allow_list(cls, header_names: Iterable[str]) -> Self:
        """Keep values of the named headers and redact all others.

        Args:
            header_names: Header names to keep, compared case-insensitively.
        """
        allowed = _fold_names(header_names)

        def redact(name: str, value: str) -> str:
            if name.lower() in allowed:
                return value
            return default_redact_value(value)

        return cls(redact)

    @classmethod
    def allow_list_or_default(cls, header_names: Iterable[str]) -> Self:
        """Keep values of the named headers, deferring others to ``default()``."""
        return cls.or_else(_allowing(_fold_names(header_names)), cls.default())

    @classmethod
    def or_else(cls, rule: HeaderRule, fallback: Callable[[str, str], str]) -> Self:
        """Apply ``rule`` first and ``fallback`` wherever it returns ``None``."""

        def redact(name: str, value: str) -> str:
            result = rule(name, value)
            if result is None:
                return fallback(name, value)
            return result

        return cls(redact)

    @classmethod
    def or_else_default(cls, rule: HeaderRule) -> Self:
        """As ``or_else`` with ``default()`` as the fallback."""
        return cls.or_else(rule, cls.default())


def _allowing(allowed: frozenset[str]) -> HeaderRule:
    def rule(name: str, value: str) -> str | None:
        return value if name.lower() in allowed else None

    return rule


class RequestHeaderRedactor(_HeaderRedactor):
    """Redaction function applied to request headers."""


class ResponseHeaderRedactor(_HeaderRedactor):
    """Redaction function applied to response headers."""


@dataclass(frozen=True)
class QueryParamRedactor:
    """Callable wrapper around a ``(key, value) -> (key, value)`` function.

    Keys are never redacted by the built-in policies, only values.

    Note:
        URI query keys are technically case sensitive but are usually
        treated as case insensitive. The allow-list builders compare keys
        case-insensitively unless ``case_sensitive=True`` is passed.
    """

    redact: Callable[[str, str | None], QueryParam]

    def __call__(self, key: str, value: str | None) -> QueryParam:
        return self.redact(key, value)

    @classmethod
    def default(cls) -> Self:
        """Redact every present value, keeping keys."""

        def redact(key: str, value: str | None) -> QueryParam:
            if value is None:
                return key, None
            return key, default_redact_value(value)

        return cls(redact)

    @classmethod
    def unredacted(cls) -> Self:
        """Never redact anything."""
        return cls(lambda key, value: (key, value))

    @classmethod
    def allow_list(
        cls,
        query_param_keys: Iterable[str],
        case_sensitive: bool = False,
    ) -> Self:
        """Keep values of the listed keys and redact all other values."""
        is_allowed = _key_matcher(query_param_keys, case_sensitive)

        def redact(key: str, value: str | None) -> QueryParam:
            if value is None or is_allowed(key):
                return key, value
            return key, default_redact_value(value)

        return cls(redact)

    @classmethod
    def allow_list_or_default(
        cls,
        query_param_keys: Iterable[str],
        case_sensitive: bool = False,
    ) -> Self:
        """Keep values of the listed keys, deferring others to ``default()``."""
        is_allowed = _key_matcher(query_param_keys, case_sensitive)

        def rule(key: str, value: str | None) -> QueryParam | None:
            return (key, value) if is_allowed(key) else None

        return cls.or_else(rule, cls.default())

    @classmethod
    def or_else(
        cls,
        rule: QueryParamRule,
        fallback: Callable[[str, str | None], QueryParam],
    ) -> Self:
        """Apply ``rule`` first and ``fallback`` wherever it returns ``None``."""

        def redact(key: str, value: str | None) -> QueryParam:
            result = rule(key, value)
            if result is None:
                return fallback(key, value)
            return result

        return cls(redact)

    @classmethod
    def or_else_default(cls, rule: QueryParamRule) -> Self:
        """As ``or_else`` with ``default()`` as the fallback."""
        return cls.or_else(rule, cls.default())


def _key_matcher(keys: Iterable[str], case_sensitive: bool) -> Callable[[str], bool]:
    if case_sensitive:
        exact = frozenset(keys)
        return lambda key: key in exact
    folded = _fold_names(keys)
    return lambda key: key.lower() in folded
