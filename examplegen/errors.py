"""Exception hierarchy raised while generating an example module."""

from __future__ import annotations


class ExampleGenError(Exception):
    """Base class for every error reported by the example generator."""


class ExampleValidationError(ExampleGenError, ValueError):
    """Raised when the example name or title is not purely alphabetic."""


class GeneratorConfigError(ExampleGenError, ValueError):
    """Raised when the generator settings file cannot be used."""


class ManifestError(ExampleGenError):
    """Base class for failures touching ``mkdocs.yml`` or ``dependabot.yml``."""


class ManifestReadError(ManifestError):
    """Raised when a manifest is missing, unreadable, or malformed."""


class ManifestWriteError(ManifestError):
    """Raised when a manifest cannot be written back to disk."""


class ManifestStructureError(ManifestError):
    """Raised when a manifest lacks the section or pinned entries it needs."""


class MaterializeError(ExampleGenError):
    """Raised when a template cannot be rendered or written."""


__all__ = [
    "ExampleGenError",
    "ExampleValidationError",
    "GeneratorConfigError",
    "ManifestError",
    "ManifestReadError",
    "ManifestStructureError",
    "ManifestWriteError",
    "MaterializeError",
]
