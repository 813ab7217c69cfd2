"""Exception hierarchy for tool dispatch and the Synter API gateway."""

from typing import Iterable, Optional


class SynterError(Exception):
    pass


class UnknownToolError(SynterError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(SynterError):
    def __init__(self, tool: str, problems: Iterable[str]):
        self.tool = tool
        self.problems = list(problems)
        super().__init__(f"Invalid arguments for {tool}: " + "; ".join(self.problems))


class ApiError(SynterError):
    """Any failure talking to the Synter API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MissingCredentialError(ApiError):
    pass


class RemoteRejectionError(ApiError):
    """Upstream answered outside the 2xx range."""


class TransportFailureError(ApiError):
    """The request never produced an HTTP response."""
