"""Data model for ``application/problem+json`` error bodies (RFC 7807)."""

from typing import Annotated, Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from client_errors.constants import HTTP_STATUS_MAX, HTTP_STATUS_MIN


class HttpProblem(BaseModel):
    """Structured error payload.

    Members other than the five standard ones are kept as extension fields
    and are available through ``extensions``.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: Annotated[str, Field(min_length=1, description="Problem type URI")]
    title: Annotated[str, Field(min_length=1, description="Short summary")]
    status: int = Field(
        ge=HTTP_STATUS_MIN, le=HTTP_STATUS_MAX, description="HTTP status code"
    )
    detail: str | None = Field(default=None, description="Occurrence details")
    instance: str | None = Field(
        default=None, description="URI identifying this occurrence"
    )

    @property
    def extensions(self) -> dict[str, Any]:
        """Caller-defined members beyond the standard fields."""
        return dict(self.model_extra or {})

    def to_json(self) -> str:
        """Serialize to JSON, omitting absent optional members."""
        return self.model_dump_json(exclude_none=True)


def decode_problem(response: httpx.Response) -> HttpProblem:
    """Decode a response body as an ``HttpProblem``.

    Args:
        response: Response whose body has been or can be read.

    Returns:
        The parsed problem.

    Raises:
        pydantic.ValidationError: If the body is not a valid problem object.
    """
    return HttpProblem.model_validate_json(response.read())


def render_problem(problem: HttpProblem) -> str | None:
    """Render a problem for error messages."""
    return problem.to_json()
