"""Render example templates and write them into the project tree.

Each template named in :class:`~examplegen.config.GeneratorConfig` is stored as
``<name>.jinja`` in the templates directory. Rendering exposes the example's
case variants through the ``to_lower()``, ``title()``, and ``to_lower_title()``
template functions, plus the :class:`~examplegen.example.Example` itself as
``example`` for the image and framework version. :func:`destination_for`
decides where each rendered file lands.
"""

from __future__ import annotations

import logging
import typing as typ

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ._constants import TEMPLATE_SUFFIX
from .errors import MaterializeError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import GeneratorConfig, LayoutConfig
    from .example import Example

logger = logging.getLogger(__name__)

DOCS_TEMPLATE = "docs_example.md"
WORKFLOW_TEMPLATE = "ci.yml"
TOOLS_TEMPLATE = "tools.go"


def destination_for(template: str, example_lower: str, layout: LayoutConfig) -> Path:
    """Return the output path for ``template``.

    Examples
    --------
    >>> from pathlib import Path
    >>> from examplegen.config import LayoutConfig
    >>> layout = LayoutConfig.for_root(Path("/repo"))
    >>> destination_for("ci.yml", "redis", layout).as_posix()
    '/repo/.github/workflows/redis-example.yml'
    >>> destination_for("example_test.go", "redis", layout).as_posix()
    '/repo/examples/redis/redis_test.go'
    """
    kind = template.lower()
    if kind == DOCS_TEMPLATE.lower():
        return layout.docs_dir / f"{example_lower}.md"
    if kind == WORKFLOW_TEMPLATE.lower():
        return layout.workflows_dir / f"{example_lower}-example.yml"
    if kind == TOOLS_TEMPLATE.lower():
        return layout.examples_dir / example_lower / "tools" / template
    module_file = template.replace("example", example_lower)
    return layout.examples_dir / example_lower / module_file


class TemplateMaterializer:
    """Render the configured template set for one example."""

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize the Jinja environment over ``config.templates_dir``.

        Parameters
        ----------
        config : GeneratorConfig
            Supplies the template names, their directory, and the project
            layout receiving the rendered files.
        """
        self.config = config
        self.env = Environment(
            loader=FileSystemLoader(str(config.templates_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template: str, example: Example) -> str:
        """Render a single template for ``example``."""
        try:
            compiled = self.env.get_template(template + TEMPLATE_SUFFIX)
            return compiled.render(
                example=example,
                to_lower=lambda: example.lower,
                title=lambda: example.title,
                to_lower_title=lambda: example.lower_title,
            )
        except TemplateError as exc:
            msg = f"could not render template '{template}': {exc}"
            raise MaterializeError(msg) from exc

    def run(self, example: Example) -> list[Path]:
        """Render every template and write it, returning the written paths.

        Files written before a failure stay on disk; each write is
        independent.

        Raises
        ------
        MaterializeError
            If a template cannot be loaded or rendered, or a directory or file
            cannot be created.
        """
        written: list[Path] = []
        for template in self.config.templates:
            content = self.render(template, example)
            path = destination_for(template, example.lower, self.config.layout)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
            except OSError as exc:
                msg = f"could not write {path}: {exc}"
                raise MaterializeError(msg) from exc
            logger.debug("rendered %s into %s", template, path)
            written.append(path)
        return written


__all__ = ["TemplateMaterializer", "destination_for"]
