from polyglot.schemas.result import UpstreamCause


class PolyglotError(Exception):
    """Base class for errors raised inside the package."""


class UpstreamError(PolyglotError):
    """
    Raised by a generation service when the upstream model call fails.

    The pipeline turns it into an ``upstream_failure`` result instead of letting it escape.
    """

    def __init__(self, message: str, cause: UpstreamCause = UpstreamCause.PROVIDER):
        super().__init__(message)
        self.cause = cause


class FlowAlreadyRegisteredError(PolyglotError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"flow '{name}' is already registered")
        self.name = name


class FlowNotFoundError(PolyglotError, LookupError):
    def __init__(self, name: str):
        super().__init__(f"unknown flow '{name}'")
        self.name = name
