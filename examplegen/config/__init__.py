"""Resolve where an example generator run reads templates and writes files.

This subpackage turns a project root (plus an optional ``.examplegen.toml``
settings file) into a :class:`GeneratorConfig` that the orchestrator and both
manifest synchronizers receive explicitly. The primary entry point is
:func:`load_generator_config`.

Examples
--------
>>> from pathlib import Path
>>> from examplegen.config import load_generator_config
>>> config = load_generator_config(Path("."))  # doctest: +SKIP
>>> config.navigation.index_page  # doctest: +SKIP
'examples/index.md'
"""

from .loader import load_generator_config
from .models import (
    PACKAGED_TEMPLATES_DIR,
    GeneratorConfig,
    LayoutConfig,
    NavigationConfig,
    UpdateDefaults,
)

__all__ = [
    "PACKAGED_TEMPLATES_DIR",
    "GeneratorConfig",
    "LayoutConfig",
    "NavigationConfig",
    "UpdateDefaults",
    "load_generator_config",
]
