"""Immutable route table with exact and single-parameter lookups.

The table is built once at startup and only read afterwards, so one instance
can be shared by every invocation the process serves.
"""

from collections.abc import Iterable
from types import MappingProxyType
from typing import Optional

from lambda_webapp.models.route import RouteEntry, RouteKind, RouteMatch
from lambda_webapp.utils.config import API_PREFIX
from lambda_webapp.utils.errors import RouteConfigurationError, RouteNotFound
from lambda_webapp.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


class RouteTable:
    """Lookup of (method, path) to route entries.

    Usage::

        table = RouteTable([
            RouteEntry.parse("GET", "/api/hello", hello),
            RouteEntry.parse("GET", "/api/example/{id}", example),
        ])
        match = table.resolve("GET", "/api/example/42")
        match.path_params  # {"id": "42"}
    """

    __slots__ = ("_api_prefix", "_entries", "_exact", "_param_suffix")

    def __init__(self, entries: Iterable[RouteEntry], api_prefix: str = API_PREFIX):
        exact: dict[tuple[str, str], RouteEntry] = {}
        param_suffix: dict[tuple[str, str], RouteEntry] = {}
        ordered: list[RouteEntry] = []
        seen: set[tuple[str, str]] = set()

        for entry in entries:
            if entry.key in seen:
                raise RouteConfigurationError(
                    f"Duplicate route: {entry.key[0]} {entry.key[1]}"
                )
            seen.add(entry.key)
            ordered.append(entry)
            if entry.kind is RouteKind.PARAM_SUFFIX:
                param_suffix[(entry.method.upper(), entry.path)] = entry
            else:
                exact[(entry.method.upper(), entry.path)] = entry

        self._entries = tuple(ordered)
        self._exact = MappingProxyType(exact)
        self._param_suffix = MappingProxyType(param_suffix)
        self._api_prefix = api_prefix
        logger.debug("Route table built", route_count=len(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        return self._entries

    def available_endpoints(self) -> list[str]:
        """Path patterns of every registered route, in registration order."""
        return [entry.pattern for entry in self._entries]

    def resolve(self, method: str, path: str) -> Optional[RouteMatch]:
        """
        Find the route for ``method`` and ``path``.

        An exact entry wins. Otherwise, for paths under the API prefix, the
        first three raw parts of ``path.split("/")`` form the base path
        (``/api/example``) and the part right after it is bound to the entry's
        parameter. A missing or empty part leaves the parameter unbound and
        listed in ``unbound`` so host-supplied values can be dropped; any
        parts after it are ignored.
        """
        method = method.upper()
        entry = self._exact.get((method, path))
        if entry is not None:
            return RouteMatch(entry=entry, path_params={})

        if not path.startswith(self._api_prefix):
            return None

        parts = path.split("/")
        if len(parts) <= 2:
            return None

        base_path = "/".join(parts[:3])
        entry = self._param_suffix.get((method, base_path))
        if entry is None:
            return None

        value = parts[3] if len(parts) > 3 else ""
        if not value:
            return RouteMatch(entry=entry, path_params={}, unbound=(entry.param_name,))
        return RouteMatch(entry=entry, path_params={entry.param_name: value})

    def require(self, method: str, path: str) -> RouteMatch:
        """Like :meth:`resolve` but raises :class:`RouteNotFound`."""
        match = self.resolve(method, path)
        if match is None:
            raise RouteNotFound(method, path)
        return match
