"""Lightweight ``{{ placeholder|filter }}`` templating for generated sources."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping

from .naming import constant_name, humanize, php_namespace

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "php_comment",
    "php_string",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def php_string(value: Any) -> str:
    """Quote ``value`` as a single-quoted PHP string literal."""

    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def php_comment(value: Any) -> str:
    """Keep ``value`` from closing the surrounding ``/** ... */`` block."""

    return str(value).replace("*/", "*\\/")


@dataclass(slots=True)
class TemplateRenderer:
    """Substitute ``{{ key|filter|... }}`` placeholders from a flat mapping.

    Every placeholder must name a key of the context and every filter must be
    registered, otherwise :class:`TemplateRenderingError` is raised.
    Substituted values are never scanned for further placeholders.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "constant": lambda value: constant_name(str(value)),
                    "humanize": lambda value: humanize(str(value)),
                    "namespace": lambda value: php_namespace(str(value)),
                    "php_string": php_string,
                    "comment": php_comment,
                }
            )

    def _evaluate(self, expression: str, context: Mapping[str, Any]) -> str:
        key, *filter_names = (part.strip() for part in expression.split("|"))
        if key not in context:
            raise TemplateRenderingError(f"missing value for '{key}'")

        value = context[key]
        for name in filter_names:
            if name not in self.filters:
                raise TemplateRenderingError(f"unknown filter '{name}'")
            value = self.filters[name](value)
        return str(value)

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        return _PLACEHOLDER_PATTERN.sub(
            lambda match: self._evaluate(match.group("expression"), context), template
        )

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, Any],
        *,
        encoding: str = "utf-8",
    ) -> str:
        """Read ``template_path`` and render it with ``context``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(f"template not found: {template_path}")

        return self.render_string(template_path.read_text(encoding=encoding), context)
