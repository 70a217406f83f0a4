"""Resolve namespaces to output directories."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping

from .errors import UnknownAliasError
from .naming import namespace_segments

__all__ = ["AliasPathResolver", "DirectoryPathResolver", "PathResolver"]


PathResolver = Callable[[str], Path]


class DirectoryPathResolver:
    """Map every namespace segment to a nested directory below ``base``."""

    def __init__(self, base: Path | str) -> None:
        self._base = Path(base)

    @property
    def base(self) -> Path:
        return self._base

    def __call__(self, namespace: str) -> Path:
        return self._base.joinpath(*namespace_segments(namespace))


class AliasPathResolver:
    """Resolve namespaces whose first segment names a registered root directory.

    ``AliasPathResolver({"app": "/srv/site"})`` maps ``app\\models\\enums`` to
    ``/srv/site/models/enums``. Alias names may be given with or without a
    leading ``@``. Namespaces with an unregistered first segment go to
    ``fallback`` when one is supplied and raise :class:`UnknownAliasError`
    otherwise.
    """

    def __init__(
        self,
        aliases: Mapping[str, Path | str],
        *,
        fallback: PathResolver | None = None,
    ) -> None:
        self._aliases = {name.lstrip("@"): Path(path) for name, path in aliases.items()}
        self._fallback = fallback

    def __call__(self, namespace: str) -> Path:
        segments = namespace_segments(namespace)
        if segments:
            alias = segments[0].lstrip("@")
            if alias in self._aliases:
                return self._aliases[alias].joinpath(*segments[1:])
        if self._fallback is not None:
            return self._fallback(namespace)
        raise UnknownAliasError(f"no alias registered for namespace '{namespace}'")
