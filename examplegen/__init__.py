"""Scaffold example modules and keep the project manifests in sync.

This package backs the ``examplegen`` console script, which renders a new
example module from templates and registers it in the MkDocs navigation and
the Dependabot configuration.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from examplegen import main
>>> main(["--name", "redis", "--image", "redis:latest"])  # doctest: +SKIP
>>> from examplegen import app
>>> app.name  # doctest: +SKIP
('examplegen',)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
