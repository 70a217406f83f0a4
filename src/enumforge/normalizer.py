"""Turn free-text constant lists into ordered, unique identifiers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .naming import constant_name, humanize, sanitize_identifier

__all__ = ["NormalizedConstant", "normalize", "normalize_constants"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NormalizedConstant:
    """An identifier paired with its zero-based position in the final list."""

    identifier: str
    ordinal_index: int

    @property
    def label(self) -> str:
        return humanize(self.identifier)

    @property
    def constant_name(self) -> str:
        return constant_name(self.identifier)

    def value(self, start: int = 0) -> int:
        """Return the emitted constant value when numbering begins at ``start``."""

        return self.ordinal_index + start


def normalize(raw_values: str, sort: bool = False) -> list[str]:
    """Split ``raw_values`` on commas and return unique identifiers.

    Tokens are trimmed, blank tokens dropped and every run of non-word
    characters replaced with a single underscore, so ``"a-b c"`` yields
    ``"a_b_c"``. Tokens left with nothing but underscores are dropped too.
    Duplicates keep their first position unless ``sort`` is set, in which
    case the list is ordered by code point.
    """

    tokens = (token.strip() for token in raw_values.split(","))
    identifiers = [sanitize_identifier(token) for token in tokens if token]
    identifiers = [identifier for identifier in identifiers if identifier.strip("_")]

    unique = list(dict.fromkeys(identifiers))
    if sort:
        unique.sort()

    LOGGER.debug(
        "normalize tokens=%s unique=%s sorted=%s",
        len(identifiers),
        len(unique),
        sort,
    )
    return unique


def normalize_constants(raw_values: str, sort: bool = False) -> list[NormalizedConstant]:
    """Normalise ``raw_values`` and attach ordinal indexes to each identifier."""

    return [
        NormalizedConstant(identifier=identifier, ordinal_index=index)
        for index, identifier in enumerate(normalize(raw_values, sort=sort))
    ]
