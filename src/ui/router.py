# src/ui/router.py

"""Maps plain paths to the app's pages."""

from dataclasses import dataclass, field


class RouteNotFoundError(LookupError):
    """Raised for a path that names no page."""


@dataclass(frozen=True)
class Route:
    """A resolved path: page name plus path parameters."""

    name: str
    params: dict[str, str] = field(default_factory=lambda: dict[str, str]())


_STATIC_ROUTES: dict[str, str] = {
    "": "listing",
    "create": "create",
    "profile": "profile",
}


def resolve(path: str) -> Route:
    """Resolve *path* (``/``, ``/create``, ``/nft/<id>``, ``/profile``)."""
    parts = [p for p in path.strip().split("/") if p]
    key = "/".join(parts)

    if key in _STATIC_ROUTES:
        return Route(_STATIC_ROUTES[key])
    if len(parts) == 2 and parts[0] == "nft":
        return Route("detail", {"id": parts[1]})

    raise RouteNotFoundError(f"No page for path '{path}'")
