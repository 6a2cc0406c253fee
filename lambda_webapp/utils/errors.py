"""Error handling utilities."""

from typing import Optional


class LambdaWebAppError(Exception):
    """Base exception for the lambda web app."""
    pass


class RouteConfigurationError(LambdaWebAppError):
    """Route table was registered with a duplicate or malformed entry."""
    pass


class RouteNotFound(LambdaWebAppError):
    """No handler resolves for the given method and path."""

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"The requested path {path} was not found.")


class HandlerFailure(LambdaWebAppError):
    """A route handler raised or returned an error."""

    def __init__(self, route: str, error: BaseException, stack: Optional[str] = None):
        self.route = route
        self.error = error
        self.stack = stack
        super().__init__(str(error))
