"""Route entries registered in the route table."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from lambda_webapp.models.request import Request
from lambda_webapp.models.response import Response
from lambda_webapp.models.result import HandlerResult
from lambda_webapp.utils.errors import RouteConfigurationError

Handler = Callable[[Request], Awaitable[Union[Response, HandlerResult]]]


class RouteKind(str, Enum):
    """How a route entry matches a request path."""
    EXACT = "EXACT"
    PARAM_SUFFIX = "PARAM_SUFFIX"


@dataclass(frozen=True)
class RouteEntry:
    """A tagged route definition.

    Exact:        ``path`` is the literal request path.
    Param suffix: ``path`` is the two-segment base path and ``param_name`` names
                  the single segment that follows it, e.g. ``/api/example/{id}``.
    """

    method: str
    kind: RouteKind
    path: str
    handler: Handler = field(compare=False)
    param_name: Optional[str] = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.method.upper(), self.pattern)

    @property
    def pattern(self) -> str:
        """Display pattern, as listed in the 404 body."""
        if self.kind is RouteKind.PARAM_SUFFIX:
            return f"{self.path}/{{{self.param_name}}}"
        return self.path

    @classmethod
    def parse(cls, method: str, pattern: str, handler: Handler) -> "RouteEntry":
        """
        Build an entry from a pattern string.

        ``/api/hello`` yields an exact entry; ``/api/example/{id}`` yields a
        parameterized entry whose base path is ``/api/example``.
        """
        if not pattern.startswith("/"):
            raise RouteConfigurationError(f"Route pattern must start with '/': {pattern!r}")

        base, _, last = pattern.rpartition("/")
        if last.startswith("{") and last.endswith("}"):
            param_name = last[1:-1]
            if not param_name or "{" in base:
                raise RouteConfigurationError(f"Unsupported route pattern: {pattern!r}")
            if len(base.split("/")) != 3:
                raise RouteConfigurationError(
                    f"Parameterized routes need a two-segment base path: {pattern!r}"
                )
            return cls(
                method=method.upper(),
                kind=RouteKind.PARAM_SUFFIX,
                path=base,
                handler=handler,
                param_name=param_name,
            )

        if "{" in pattern:
            raise RouteConfigurationError(f"Unsupported route pattern: {pattern!r}")
        return cls(method=method.upper(), kind=RouteKind.EXACT, path=pattern, handler=handler)


@dataclass(frozen=True)
class RouteMatch:
    """Result of a successful lookup."""

    entry: RouteEntry
    path_params: dict[str, str]
    unbound: tuple[str, ...] = ()
