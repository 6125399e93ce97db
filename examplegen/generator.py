"""Drive one example generation run from validation to manifest updates.

:class:`ExampleGenerator` runs the steps in a fixed, fail-fast order:

1. validate the example identifier (nothing is touched on failure);
2. render and write every template;
3. register the docs page in ``mkdocs.yml``;
4. register the module in ``.github/dependabot.yml``.

An error in any step aborts the run before the next one starts. Files written
by step 2 are not rolled back.

>>> from pathlib import Path
>>> from examplegen.config import load_generator_config
>>> from examplegen.example import Example
>>> generator = ExampleGenerator(load_generator_config(Path("..")))  # doctest: +SKIP
>>> result = generator.run(Example(name="redis", image="redis:latest"))  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import posixpath
import typing as typ

from .errors import ExampleValidationError
from .manifests import read_latest_version, update_dependabot, update_mkdocs_nav
from .manifests.navigation import example_page
from .materializer import TemplateMaterializer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import GeneratorConfig
    from .example import Example
    from .manifests.dependabot import UpdateEntry

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class GenerationResult:
    """Outcome of a successful run."""

    example: Example
    written: list[Path]
    navigation: list[str]
    updates: list[UpdateEntry]


class ExampleGenerator:
    """Scaffold an example module and register it in the project manifests."""

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.materializer = TemplateMaterializer(config)

    def run(self, example: Example) -> GenerationResult:
        """Generate ``example`` and return what was written.

        Raises
        ------
        ExampleValidationError
            If the name or title is not alphabetic, or the example page would
            replace the examples index page.
        ManifestReadError, ManifestStructureError, ManifestWriteError
            If either manifest cannot be read, lacks required entries, or
            cannot be rewritten.
        MaterializeError
            If a template cannot be rendered or written.
        """
        example.validate()
        self._check_page_is_free(example)
        layout = self.config.layout

        if not example.tc_version:
            version = read_latest_version(layout.mkdocs_path)
            example = dc.replace(example, tc_version=version)
            logger.debug("using framework version %r from %s", version, layout.mkdocs_path)

        written = self.materializer.run(example)
        navigation = update_mkdocs_nav(
            layout.mkdocs_path, example.lower, self.config.navigation
        )
        updates = update_dependabot(
            layout.dependabot_path, example.lower, self.config.updates
        )
        logger.info("generated example %s (%d files)", example.lower, len(written))
        return GenerationResult(
            example=example,
            written=written,
            navigation=navigation,
            updates=updates,
        )

    def _check_page_is_free(self, example: Example) -> None:
        navigation = self.config.navigation
        page = example_page(example.lower, navigation.prefix)
        if posixpath.basename(page) == posixpath.basename(navigation.index_page):
            msg = (
                f"invalid name: {example.name}. "
                f"It would overwrite the examples index page {navigation.index_page}"
            )
            raise ExampleValidationError(msg)


__all__ = ["ExampleGenerator", "GenerationResult"]
