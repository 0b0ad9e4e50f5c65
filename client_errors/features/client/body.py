"""Outcome of the single attempt to decode an error response body."""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar


A = TypeVar("A")


@dataclass(frozen=True)
class NoBody:
    """No decode was attempted; the body is treated as absent."""


@dataclass(frozen=True)
class Decoded(Generic[A]):
    """The body decoded successfully."""

    value: A


@dataclass(frozen=True)
class DecodeFailed:
    """The decoder raised; the exception is kept as data."""

    cause: Exception


BodyOutcome: TypeAlias = NoBody | Decoded[A] | DecodeFailed

NO_BODY = NoBody()
