from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Route:
    path: str
    name: str
    title: str


NOT_FOUND = Route(path="/:pathMatch(.*)*", name="NotFound", title="Page not found")


def _normalize(path: str) -> str:
    path = "/" + path.strip().lstrip("/")
    return path.rstrip("/") or "/"


@dataclass(frozen=True)
class Navigation:
    """The page table handed to the application shell at startup."""

    routes: tuple[Route, ...]
    redirects: Mapping[str, str] = field(default_factory=dict, hash=False)
    fallback: Route = NOT_FOUND

    def __post_init__(self) -> None:
        object.__setattr__(self, "redirects", MappingProxyType(dict(self.redirects)))
        names = [r.name for r in self.routes]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate route names: {names}")

    def resolve(self, path: str) -> Route:
        target = _normalize(path)
        visited: set[str] = set()
        while target in self.redirects:
            if target in visited:
                raise ValueError(f"Redirect loop at {target}")
            visited.add(target)
            target = _normalize(self.redirects[target])
        for route in self.routes:
            if route.path == target:
                return route
        return self.fallback

    def by_name(self, name: str) -> Route:
        for route in self.routes:
            if route.name == name:
                return route
        raise KeyError(name)


def build_navigation(routes: Iterable[Route], *, default_path: str) -> Navigation:
    return Navigation(routes=tuple(routes), redirects={"/": default_path})


def default_navigation() -> Navigation:
    return build_navigation(
        [
            Route("/notice", "Notice", "Notices"),
            Route("/skills", "Skills", "Skill list"),
            Route("/lineups", "Lineups", "Lineups"),
            Route("/players", "Players", "Player database"),
        ],
        default_path="/notice",
    )
