"""Identifier model for a generated example module.

An :class:`Example` bundles the user supplied name, the optional title
override, and the container image the example runs. Templates consume the
derived case variants (``lower``, ``title``, ``lower_title``) rather than the
raw input, so every generated file spells the example the same way.

Examples
--------
>>> example = Example(name="MongoDB", image="mongo:6")
>>> example.lower, example.title, example.lower_title
('mongodb', 'Mongodb', 'Mongodb')
>>> example = Example(name="mongodb", title_name="MongoDB", image="mongo:6")
>>> example.title, example.lower_title
('MongoDB', 'mongoDB')
"""

from __future__ import annotations

import dataclasses as dc
import re

from .errors import ExampleValidationError

ALPHABETIC_PATTERN = re.compile(r"[A-Za-z]+")
_WORD_START = re.compile(r"\b([a-z])")


def title_case(text: str) -> str:
    """Capitalize the first letter of each word, leaving the rest untouched."""
    return _WORD_START.sub(lambda match: match.group(1).upper(), text)


def lower_first(text: str) -> str:
    """Lower-case only the first character of ``text``."""
    return text[:1].lower() + text[1:]


@dc.dataclass(slots=True, frozen=True)
class Example:
    """Describe the example module being scaffolded.

    Attributes
    ----------
    name : str
        Alphabetic example name, e.g. ``"redis"``.
    image : str
        Fully qualified container image reference used by the example.
    title_name : str
        Optional title override for names with internal capitals
        (``"MongoDB"``); empty when not supplied.
    tc_version : str
        Framework version pinned by the generated ``go.mod``.
    """

    name: str
    image: str
    title_name: str = ""
    tc_version: str = ""

    @property
    def lower(self) -> str:
        """Return the lower-case form used for paths and package names."""
        return self.name.lower()

    @property
    def title(self) -> str:
        """Return the title override, or the title-cased lower form."""
        if self.title_name:
            return self.title_name
        return title_case(self.lower)

    @property
    def lower_title(self) -> str:
        """Return the override with its first character lower-cased.

        Without an override this is the same title-cased form as :attr:`title`.
        """
        if self.title_name:
            return lower_first(self.title_name)
        return self.title

    def validate(self) -> None:
        """Check that the name and any title override are purely alphabetic.

        Raises
        ------
        ExampleValidationError
            If ``name`` is empty or contains anything but ASCII letters, or if
            a non-empty ``title_name`` does.
        """
        if not ALPHABETIC_PATTERN.fullmatch(self.name):
            msg = (
                f"invalid name: {self.name}. "
                "Only alphabetical characters are allowed"
            )
            raise ExampleValidationError(msg)
        if self.title_name and not ALPHABETIC_PATTERN.fullmatch(self.title_name):
            msg = (
                f"invalid title: {self.title_name}. "
                "Only alphabetical characters are allowed"
            )
            raise ExampleValidationError(msg)


__all__ = ["ALPHABETIC_PATTERN", "Example", "lower_first", "title_case"]
