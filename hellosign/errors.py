from typing import List, Tuple


class HelloSignError(Exception):
    """Base class for every error raised by this library."""


class APIError(HelloSignError):
    """An error returned from the HelloSign API."""

    def __init__(self, code: int, message: str, name: str):
        self.code = code  # HTTP response code
        self.message = message
        self.name = name
        super().__init__(f"{name}: {message}")


class APIWarning(HelloSignError):
    """A list of warnings returned from the HelloSign API in place of an error."""

    def __init__(self, code: int, warnings: List[Tuple[str, str]]):
        self.code = code
        self.warnings = warnings
        super().__init__("\n".join(f"{name}: {message}" for name, message in warnings))


class UnexpectedStatusError(HelloSignError):
    """Raised when an endpoint answers with a status other than the one expected."""

    def __init__(self, code: int, reason: str = ""):
        self.code = code
        self.reason = reason
        super().__init__(f"{code} {reason}".strip())
