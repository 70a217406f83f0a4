"""Identifier and label conversions used by the normaliser and renderer."""

from __future__ import annotations

import re
import string

__all__ = [
    "constant_name",
    "humanize",
    "id_to_camel",
    "is_reserved_word",
    "is_word_char",
    "namespace_segments",
    "php_namespace",
    "sanitize_identifier",
]


_WORD_CHARACTERS = frozenset(string.ascii_letters + string.digits + "_")
_ID_SEPARATORS = re.compile(r"[\-/]+")
_NAMESPACE_SEPARATORS = re.compile(r"[./\\]+")

# Names PHP refuses as class names, compared case-insensitively.
_RESERVED_WORDS = frozenset(
    """
    abstract and array as break callable case catch class clone const continue
    declare default die do echo else elseif empty enddeclare endfor endforeach
    endif endswitch endwhile enum eval exit extends final finally fn for foreach
    function global goto if implements include include_once instanceof
    insteadof interface isset list match namespace new or print private
    protected public readonly require require_once return static switch throw
    trait try unset use var while xor yield bool float int string true false
    null void iterable object mixed never parent self
    """.split()
)


def is_word_char(char: str) -> bool:
    """Return ``True`` when ``char`` is an ASCII letter, digit or underscore."""

    return char in _WORD_CHARACTERS


def sanitize_identifier(token: str) -> str:
    """Replace every run of non-word characters in ``token`` with one underscore.

    Only ASCII letters, digits and ``_`` count as word characters, so accented
    letters and other unicode symbols are replaced as well.
    """

    pieces: list[str] = []
    in_gap = False
    for char in token:
        if is_word_char(char):
            pieces.append(char)
            in_gap = False
        elif not in_gap:
            pieces.append("_")
            in_gap = True
    return "".join(pieces)


def id_to_camel(class_id: str) -> str:
    """Convert a dash/slash separated id such as ``order-item`` into ``OrderItem``."""

    return "".join(segment.capitalize() for segment in _ID_SEPARATORS.split(class_id) if segment)


def humanize(identifier: str) -> str:
    """Return a display label for ``identifier``.

    Underscores become spaces and the first letter of every word is upper
    cased; the remaining letters are left untouched (``free_trial`` becomes
    ``Free Trial``, ``payPal`` becomes ``PayPal``).
    """

    words = [word for word in identifier.split("_") if word]
    if not words:
        return identifier
    return " ".join(word[0].upper() + word[1:] for word in words)


def constant_name(identifier: str) -> str:
    return identifier.upper()


def is_reserved_word(name: str) -> bool:
    """Return ``True`` if ``name`` cannot be used as a PHP class name."""

    return name.lower() in _RESERVED_WORDS


def namespace_segments(namespace: str) -> list[str]:
    """Split a dot, slash or backslash separated namespace into its parts."""

    return [segment for segment in _NAMESPACE_SEPARATORS.split(namespace.strip()) if segment]


def php_namespace(namespace: str) -> str:
    """Return ``namespace`` in PHP's backslash notation (``app.models`` -> ``app\\models``)."""

    return "\\".join(namespace_segments(namespace))
