"""Unit tests for the HttpProblem model."""

import json

import httpx
import pytest
from pydantic import ValidationError

from client_errors.features.problem.models import (
    HttpProblem,
    decode_problem,
    render_problem,
)


class TestHttpProblem:
    """Tests for HttpProblem validation and serialization."""

    @pytest.mark.unit
    def test_minimal_problem(self) -> None:
        """Test the required members."""
        problem = HttpProblem.model_validate_json(
            '{"type":"about:blank","title":"Title","status":501}'
        )

        assert problem.type == "about:blank"
        assert problem.title == "Title"
        assert problem.status == 501
        assert problem.detail is None
        assert problem.instance is None
        assert problem.extensions == {}

    @pytest.mark.unit
    def test_extension_members_kept(self) -> None:
        """Test that unknown members are preserved as extensions."""
        problem = HttpProblem.model_validate(
            {
                "type": "https://example.com/probs/out-of-credit",
                "title": "You do not have enough credit.",
                "status": 403,
                "detail": "Your current balance is 30, but that costs 50.",
                "instance": "/account/12345/msgs/abc",
                "balance": 30,
            }
        )

        assert problem.extensions == {"balance": 30}
        assert json.loads(problem.to_json())["balance"] == 30

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "t", "status": 500},
            {"type": "", "title": "t", "status": 500},
            {"type": "about:blank", "title": "t", "status": 42},
            {"type": "about:blank", "title": "t", "status": 600},
            {"type": "about:blank", "status": 500},
        ],
    )
    @pytest.mark.unit
    def test_invalid_problem(self, payload: dict) -> None:
        """Test that invalid payloads are rejected."""
        with pytest.raises(ValidationError):
            HttpProblem.model_validate(payload)

    @pytest.mark.unit
    def test_is_frozen(self) -> None:
        """Test that problems are immutable."""
        problem = HttpProblem(type="about:blank", title="t", status=500)

        with pytest.raises(ValidationError):
            problem.title = "other"  # type: ignore[misc]

    @pytest.mark.unit
    def test_to_json_omits_absent_members(self) -> None:
        """Test that None members are not serialized."""
        problem = HttpProblem(type="about:blank", title="t", status=500)

        assert json.loads(problem.to_json()) == {
            "type": "about:blank",
            "title": "t",
            "status": 500,
        }


class TestDecodeProblem:
    """Tests for decode_problem and render_problem."""

    @pytest.mark.unit
    def test_decode_from_response(self) -> None:
        """Test decoding a response body."""
        response = httpx.Response(
            404,
            headers={"Content-Type": "application/problem+json"},
            content=b'{"type":"about:blank","title":"Not Found","status":404}',
        )

        problem = decode_problem(response)

        assert problem == HttpProblem(type="about:blank", title="Not Found", status=404)
        assert render_problem(problem) == problem.to_json()

    @pytest.mark.unit
    def test_decode_invalid_json(self) -> None:
        """Test that malformed JSON raises a validation error."""
        response = httpx.Response(500, content=b"not json")

        with pytest.raises(ValidationError):
            decode_problem(response)
