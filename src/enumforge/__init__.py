"""Generate enumerable classes from a free-text list of constant names.

The package normalises user supplied names into unique identifiers, renders
them into an enumerable class with a label lookup table, and ships a small
generator and command line interface for writing the result to disk.
"""

from __future__ import annotations

from .config import GeneratorConfig
from .errors import GenerationError, OutputWriteError, UnknownAliasError
from .generator import CodeFile, EnumerableGenerator
from .naming import humanize, id_to_camel, sanitize_identifier
from .normalizer import NormalizedConstant, normalize, normalize_constants
from .paths import AliasPathResolver, DirectoryPathResolver, PathResolver
from .renderer import EnumerableRenderer, render_enumerable
from .schema import GenerationRequest
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "AliasPathResolver",
    "CodeFile",
    "DirectoryPathResolver",
    "EnumerableGenerator",
    "EnumerableRenderer",
    "GenerationError",
    "GenerationRequest",
    "GeneratorConfig",
    "NormalizedConstant",
    "OutputWriteError",
    "PathResolver",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UnknownAliasError",
    "humanize",
    "id_to_camel",
    "normalize",
    "normalize_constants",
    "render_enumerable",
    "sanitize_identifier",
]

__version__ = "0.1.0"
