"""Metrics collection for the problem response interceptor."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class InterceptorMetrics:
    """Metrics for intercepted responses.

    Singleton class that tracks how many responses were inspected, passed
    through unread, raised as errors, or buffered and replayed after a
    failed decode.
    """

    responses_inspected_total: int = 0
    passthrough_total: int = 0
    problems_raised_total: int = 0
    decode_failures_total: int = 0
    bytes_buffered_total: int = 0

    _instance: ClassVar["InterceptorMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "InterceptorMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_inspected(self) -> None:
        self.responses_inspected_total += 1

    def record_passthrough(self) -> None:
        """Record a response forwarded without reading its body."""
        self.passthrough_total += 1

    def record_buffered(self, byte_count: int) -> None:
        """Record a body read into memory.

        Args:
            byte_count: Number of raw bytes buffered.
        """
        self.bytes_buffered_total += byte_count

    def record_problem_raised(self) -> None:
        self.problems_raised_total += 1

    def record_decode_failure(self) -> None:
        """Record a matching response whose body did not decode."""
        self.decode_failures_total += 1

    def to_dict(self) -> dict[str, int]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "responses_inspected_total": self.responses_inspected_total,
            "passthrough_total": self.passthrough_total,
            "problems_raised_total": self.problems_raised_total,
            "decode_failures_total": self.decode_failures_total,
            "bytes_buffered_total": self.bytes_buffered_total,
        }
