"""Exceptions raised by the HTTP step context."""


class SteprestError(Exception):
    """Base class for errors raised by steprest."""


class CookieNotFoundError(SteprestError, LookupError):
    """Raised when a cookie is looked up by a name that was never stored."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Can't find cookie by name: {name}")


class MethodNotSetError(SteprestError):
    """Raised when a request is sent before an HTTP method was chosen."""

    def __init__(self):
        super().__init__("HTTP method is not set")


class WaitTimeoutError(SteprestError):
    """Raised when a poller runs out of attempts before its condition holds."""

    def __init__(self, attempts: int, last_result=None):
        self.attempts = attempts
        self.last_result = last_result
        super().__init__(f"Condition not met after {attempts} attempts")
