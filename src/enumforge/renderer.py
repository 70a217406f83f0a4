"""Render normalised constants into an enumerable class source file."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Sequence

from .config import GeneratorConfig
from .naming import php_namespace
from .normalizer import NormalizedConstant
from .schema import GenerationRequest
from .template import TemplateRenderer

__all__ = ["EnumerableRenderer", "SKELETON_TEMPLATE", "render_enumerable"]


LOGGER = logging.getLogger(__name__)

# Placeholders available to custom skeletons: namespace, namespace_block,
# base_class, base_name, author, description, class_name, start, body.
SKELETON_TEMPLATE = """<?php
{{ namespace_block }}
use {{ base_class }};

/**
 * @author {{ author|comment }}
 * {{ description|comment }}
 */
class {{ class_name }} extends {{ base_name }}
{
{{ body }}
}
"""

NAMESPACE_TEMPLATE = "\nnamespace {{ namespace|namespace }};\n"
CONSTANT_TEMPLATE = "    const {{ identifier|constant }} = {{ value }};"
LIST_ENTRY_TEMPLATE = "        self::{{ identifier|constant }} => {{ identifier|humanize|php_string }},"
LIST_TEMPLATE = "    public static $list = [\n{{ entries }}\n    ];"
EMPTY_LIST = "    public static $list = [];"


class EnumerableRenderer:
    """Build the source of an enumerable class from plain data."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer()

    def render_body(self, constants: Sequence[NormalizedConstant], start: int) -> str:
        """Return the constant declarations followed by the ``$list`` table."""

        if not constants:
            return EMPTY_LIST

        clashes = [
            name for name, count in Counter(c.constant_name for c in constants).items() if count > 1
        ]
        if clashes:
            LOGGER.warning(
                "constant names collide after upper-casing, PHP will reject the class: %s",
                ", ".join(clashes),
            )

        rows = [{"identifier": c.identifier, "value": c.value(start)} for c in constants]
        declarations = "\n".join(self.renderer.render_string(CONSTANT_TEMPLATE, row) for row in rows)
        entries = "\n".join(self.renderer.render_string(LIST_ENTRY_TEMPLATE, row) for row in rows)
        return f"{declarations}\n\n{self.renderer.render_string(LIST_TEMPLATE, {'entries': entries})}"

    def render_source(
        self,
        class_name: str,
        constants: Sequence[NormalizedConstant],
        *,
        start: int = 0,
        namespace: str = "",
        author: str = "",
        description: str = "",
    ) -> str:
        """Render a complete source file for ``class_name``.

        A configured skeleton file replaces :data:`SKELETON_TEMPLATE`; a
        missing file raises :class:`FileNotFoundError` and an unknown
        placeholder :class:`~enumforge.template.TemplateRenderingError`.
        """

        namespace_block = ""
        if php_namespace(namespace):
            namespace_block = self.renderer.render_string(NAMESPACE_TEMPLATE, {"namespace": namespace})
        context = {
            "namespace": namespace,
            "namespace_block": namespace_block,
            "base_class": self.config.base_class,
            "base_name": self.config.base_name,
            "author": author,
            "description": description,
            "class_name": class_name,
            "start": start,
            "body": self.render_body(constants, start),
        }

        if self.config.template is not None:
            text = self.renderer.render_file(self.config.template, context)
        else:
            text = self.renderer.render_string(SKELETON_TEMPLATE, context)

        LOGGER.debug("render class=%s constants=%s start=%s", class_name, len(constants), start)
        return "\n".join(line.rstrip() for line in text.splitlines()) + "\n"

    def render(self, request: GenerationRequest, constants: Sequence[NormalizedConstant]) -> str:
        """Render ``constants`` using the metadata carried by ``request``.

        Namespace, author and description left unset on the request are taken
        from the renderer's :class:`~enumforge.config.GeneratorConfig`.
        """

        request = request.with_defaults(self.config)
        return self.render_source(
            request.class_name,
            constants,
            start=request.start,
            namespace=request.namespace,
            author=request.author,
            description=request.description,
        )


def render_enumerable(
    class_name: str,
    constants: Sequence[NormalizedConstant],
    *,
    start: int = 0,
    namespace: str = "",
    author: str = "",
    description: str = "",
) -> str:
    """Render an enumerable class with the default configuration."""

    return EnumerableRenderer().render_source(
        class_name,
        constants,
        start=start,
        namespace=namespace,
        author=author,
        description=description,
    )
