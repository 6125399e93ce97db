"""Cyclopts CLI entrypoint for scaffolding a new example module.

The ``examplegen`` console script renders the example templates into the
project, adds the example's docs page to the ``mkdocs.yml`` navigation, and
registers the example module in ``.github/dependabot.yml``. It is meant to be
run from the project's ``examples`` directory, so the project root defaults to
the parent of the current working directory.

Exit codes follow the usual flag conventions: ``2`` when a required flag is
missing, ``1`` for invalid input or any generation failure, ``0`` on success.

Examples
--------
>>> from examplegen.cli import main
>>> main(["--name", "redis", "--image", "redis:latest"])  # doctest: +SKIP

Override the title for names with internal capitals:

>>> main(
...     ["--name", "mongodb", "--title", "MongoDB", "--image", "mongo:6"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_generator_config
from .errors import ExampleGenError
from .example import Example
from .generator import ExampleGenerator

app = App(
    name="examplegen",
    help="Scaffold a new example module and register it in the project manifests.",
    config=cyclopts.config.Env("EXAMPLEGEN_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.default
def generate(
    *,
    name: typ.Annotated[
        str | None,
        Parameter(
            help="Name of the example. Only alphabetical characters are allowed."
        ),
    ] = None,
    image: typ.Annotated[
        str | None,
        Parameter(
            help="Fully-qualified name of the Docker image used by the example"
        ),
    ] = None,
    title: typ.Annotated[
        str | None,
        Parameter(
            help=(
                "Title override for mixed-case names (Mongodb -> MongoDB). "
                "Only alphabetical characters are allowed."
            )
        ),
    ] = None,
    root_dir: typ.Annotated[
        Path | None,
        Parameter(help="Project root (defaults to the parent of the current directory)"),
    ] = None,
    templates_dir: typ.Annotated[
        Path | None, Parameter(help="Directory holding the *.jinja templates")
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Settings TOML (defaults to <root>/.examplegen.toml)"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> int:
    """Generate an example module and update the project manifests.

    Parameters
    ----------
    name : str or None
        Example name; required.
    image : str or None
        Container image reference; required.
    title : str or None, optional
        Title override preserving internal capitals.
    root_dir : Path or None, optional
        Project root receiving the generated files.
    templates_dir : Path or None, optional
        Template directory overriding the packaged templates.
    config : Path or None, optional
        Explicit settings file.
    verbose : bool, optional
        Emit debug logs on stderr.

    Returns
    -------
    int
        Process exit code: ``0`` on success, ``1`` on failure, ``2`` when a
        required flag is missing.
    """
    _configure_logging(verbose)
    required = {"name": name, "image": image}
    for flag, value in required.items():
        if value is None:
            print(f"missing required --{flag} argument/flag", file=sys.stderr)
            return 2

    root = root_dir if root_dir is not None else Path.cwd().parent
    example = Example(
        name=typ.cast("str", name),
        image=typ.cast("str", image),
        title_name=title or "",
    )
    try:
        settings = load_generator_config(
            root.resolve(), settings_path=config, templates_dir=templates_dir
        )
        result = ExampleGenerator(settings).run(example)
    except ExampleGenError as exc:
        print(f">> error generating the example: {exc}")
        return 1

    for path in result.written:
        print(f"wrote {_format_path(path)}")
    print(
        f"Please go to {example.lower} directory and execute 'go mod tidy' "
        "to synchronize the dependencies"
    )
    print(
        "Commit the modified files and submit a pull request "
        "to include them into the project"
    )
    print("Thanks!")
    return 0


def main(tokens: cabc.Sequence[str] | None = None) -> None:
    """Invoke the Cyclopts application behind the ``examplegen`` command.

    Parameters
    ----------
    tokens : Sequence[str], optional
        Arguments to parse instead of ``sys.argv[1:]``.

    Raises
    ------
    SystemExit
        Always, carrying the exit code returned by :func:`generate`.
    """
    exit_code = app(tokens)
    raise SystemExit(exit_code)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
