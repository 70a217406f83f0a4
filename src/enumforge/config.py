"""Configuration shared by the enumerable generator and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

__all__ = ["GeneratorConfig", "ENV_PREFIX"]


ENV_PREFIX = "ENUMFORGE_"


@dataclass(slots=True)
class GeneratorConfig:
    """Defaults applied when generating enumerable classes.

    Attributes
    ----------
    base_class:
        Fully qualified PHP class every generated enumerable extends. It is
        imported with a ``use`` statement and referenced by its short name.
    extension:
        Suffix of the generated file, including the leading dot.
    namespace:
        Namespace used when a request does not provide one.
    author:
        Default value for the ``@author`` tag of the class doc block.
    description:
        Default text placed in the class doc block.
    template:
        Optional path to a skeleton template replacing the built-in one. The
        file may reference the same placeholders as the default skeleton.
    """

    base_class: str = "yii2mod\\enum\\helpers\\BaseEnum"
    extension: str = ".php"
    namespace: str = "app\\models\\enumerables"
    author: str = ""
    description: str = "This is the CEnumerable class for"
    template: Path | None = None

    def __post_init__(self) -> None:
        if self.extension and not self.extension.startswith("."):
            self.extension = f".{self.extension}"

    @property
    def base_name(self) -> str:
        """Short name of :attr:`base_class` used after the ``extends`` keyword."""

        return self.base_class.rsplit("\\", 1)[-1]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GeneratorConfig":
        """Build a configuration from ``ENUMFORGE_*`` environment variables.

        Blank or unset variables keep the built-in defaults.
        """

        env = os.environ if environ is None else environ
        defaults = cls()

        def read(name: str, default: str) -> str:
            value = env.get(f"{ENV_PREFIX}{name}", "").strip()
            return value or default

        template = read("TEMPLATE", "")
        return cls(
            base_class=read("BASE_CLASS", defaults.base_class),
            extension=read("EXTENSION", defaults.extension),
            namespace=read("NAMESPACE", defaults.namespace),
            author=read("AUTHOR", defaults.author),
            description=read("DESCRIPTION", defaults.description),
            template=Path(template) if template else None,
        )
