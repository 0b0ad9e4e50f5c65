"""Structured ``application/problem+json`` error payloads."""

from client_errors.features.problem.models import (
    HttpProblem,
    decode_problem,
    render_problem,
)


__all__ = ["HttpProblem", "decode_problem", "render_problem"]
