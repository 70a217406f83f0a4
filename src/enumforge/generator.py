"""Produce and write enumerable class files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .config import GeneratorConfig
from .errors import OutputWriteError
from .normalizer import normalize_constants
from .paths import DirectoryPathResolver, PathResolver
from .renderer import EnumerableRenderer
from .schema import GenerationRequest

__all__ = ["CodeFile", "EnumerableGenerator", "SUCCESS_MESSAGE"]


LOGGER = logging.getLogger(__name__)

SUCCESS_MESSAGE = "The Enumerable class has been generated successfully."

OP_CREATE = "create"
OP_OVERWRITE = "overwrite"
OP_SKIP = "skip"


@dataclass(frozen=True, slots=True)
class CodeFile:
    """A generated file that has not necessarily been written yet."""

    path: Path
    content: str

    @property
    def operation(self) -> str:
        """What :meth:`save` would do: ``create``, ``overwrite`` or ``skip``."""

        if not self.path.exists():
            return OP_CREATE
        try:
            current = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return OP_OVERWRITE
        return OP_SKIP if current == self.content else OP_OVERWRITE

    def save(self, *, force: bool = False) -> bool:
        """Write :attr:`content` to :attr:`path`.

        Returns ``False`` when the file already holds identical content.
        Raises :class:`FileExistsError` when different content exists and
        ``force`` is not set.
        """

        operation = self.operation
        if operation == OP_SKIP:
            LOGGER.info("skip unchanged file path=%s", self.path)
            return False
        if operation == OP_OVERWRITE and not force:
            raise FileExistsError(f"{self.path} already exists")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(self.content, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"cannot write {self.path}: {exc}") from exc

        LOGGER.info("%s file path=%s bytes=%s", operation, self.path, len(self.content))
        return True


class EnumerableGenerator:
    """Turn a :class:`GenerationRequest` into files on disk."""

    def __init__(
        self,
        resolver: PathResolver | None = None,
        config: GeneratorConfig | None = None,
        renderer: EnumerableRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.resolver = resolver or DirectoryPathResolver(Path.cwd())
        self.renderer = renderer or EnumerableRenderer(self.config)

    @property
    def success_message(self) -> str:
        return SUCCESS_MESSAGE

    def render(self, request: GenerationRequest) -> str:
        constants = normalize_constants(request.values, sort=request.sort)
        return self.renderer.render(request, constants)

    def target_path(self, request: GenerationRequest) -> Path:
        """Return where the class described by ``request`` is written.

        An unset request namespace falls back to :attr:`GeneratorConfig.namespace`.
        """

        request = request.with_defaults(self.config)
        directory = self.resolver(request.namespace).joinpath(*request.subdirectory)
        return directory / f"{request.class_name}{self.config.extension}"

    def generate(self, request: GenerationRequest) -> list[CodeFile]:
        return [CodeFile(self.target_path(request), self.render(request))]

    def save(self, files: Iterable[CodeFile], *, force: bool = False) -> list[CodeFile]:
        """Write ``files`` and return the ones that actually changed on disk."""

        return [code_file for code_file in files if code_file.save(force=force)]
