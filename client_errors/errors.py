"""Base error types with structured, printable messages."""


class StructuredError(Exception):
    """Exception rendered from a primary message, secondary messages, and causes.

    Subclasses override the three properties; ``str()`` combines them into a
    single line suitable for logs.
    """

    @property
    def primary_message(self) -> str:
        """The one-line summary of the error."""
        return super().__str__()

    @property
    def secondary_messages(self) -> list[str]:
        """Additional context lines, in display order."""
        return []

    @property
    def causes(self) -> list[BaseException]:
        """Underlying errors attached to this one."""
        return []

    def __str__(self) -> str:
        parts = [f"Primary Error: {self.primary_message}"]
        secondary = self.secondary_messages
        if secondary:
            parts.append(f"Secondary Errors({', '.join(secondary)})")
        causes = self.causes
        if causes:
            parts.append(f"Causes({', '.join(str(cause) for cause in causes)})")
        return ", ".join(parts)


class ResponseBodyDecodeError(StructuredError):
    """The body of an error response could not be decoded.

    Attributes:
        cause: The exception raised by the decoder.
    """

    MESSAGE = "Error occurred when attempting to decode the error response body."

    def __init__(self, cause: BaseException) -> None:
        super().__init__(self.MESSAGE)
        self.cause = cause
        self.__cause__ = cause

    @property
    def secondary_messages(self) -> list[str]:
        return [f"{type(self.cause).__name__}: {self.cause}"]
