"""Errors raised by the GleSYS client and convergence helpers."""


class RemoteCallFailure(Exception):
    """A call to the GleSYS API failed (transport, auth or provider error)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class Unauthorized(RemoteCallFailure):
    def __init__(self):
        super().__init__("Unauthorized", status_code=401)


class NotFound(RemoteCallFailure):
    def __init__(self, message: str = "Not Found"):
        super().__init__(message, status_code=404)


class ConvergenceTimeout(Exception):
    """A listing did not reach the expected size within the polling budget."""
