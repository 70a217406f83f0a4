"""Validated input describing one enumerable class to generate."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from .config import GeneratorConfig
from .naming import id_to_camel, is_reserved_word, php_namespace

__all__ = ["CLASS_ID_PATTERN", "GenerationRequest"]


CLASS_ID_PATTERN = re.compile(r"^[a-z][a-z0-9\-/]*$")


class GenerationRequest(BaseModel):
    """Parameters collected from the user for a single generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    class_id: str = Field(..., description="Lower-case class id, e.g. 'order-item' or 'shop/order-item'.")
    values: str = Field(..., description="Constant names separated by commas.")
    namespace: str | None = Field(None, description="Namespace of the generated class; dots, slashes or backslashes.")
    author: str | None = Field(None, description="Author written into the class doc block.")
    description: str | None = Field(None, description="Description written into the class doc block.")
    start: StrictInt = Field(..., description="Value assigned to the first constant.")
    sort: bool = Field(False, description="Sort constant names before numbering them.")

    @field_validator("class_id", "values", "namespace", "description", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("class_id")
    @classmethod
    def _check_class_id(cls, value: str) -> str:
        if not value:
            raise ValueError("class id must not be empty")
        if not CLASS_ID_PATTERN.match(value):
            raise ValueError("Only a-z, 0-9, dashes (-) and slashes (/) are allowed.")
        if is_reserved_word(id_to_camel(value)):
            raise ValueError(f"'{id_to_camel(value)}' is a reserved word and cannot name a class")
        return value

    @property
    def class_name(self) -> str:
        """PascalCase class name derived from :attr:`class_id`."""

        return id_to_camel(self.class_id)

    @property
    def namespace_declaration(self) -> str:
        return php_namespace(self.namespace or "")

    @property
    def subdirectory(self) -> tuple[str, ...]:
        """Directories implied by slashes in :attr:`class_id` (``shop/order`` -> ``("shop",)``)."""

        return tuple(segment for segment in self.class_id.split("/")[:-1] if segment)

    def with_defaults(self, config: GeneratorConfig) -> "GenerationRequest":
        """Return a copy whose unset namespace, author and description come from ``config``.

        Only ``None`` counts as unset; an explicit empty namespace stays empty.
        """

        defaults = {
            "namespace": config.namespace,
            "author": config.author,
            "description": config.description,
        }
        update = {name: value for name, value in defaults.items() if getattr(self, name) is None}
        return self.model_copy(update=update) if update else self
