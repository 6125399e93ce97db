"""Round-trip YAML helpers shared by the manifest synchronizers.

Manifests are loaded with ``ruamel.yaml`` in round-trip mode so comments, key
order, quoting, and every field the synchronizers do not touch survive the
rewrite. Writes go through a temporary file in the target directory that is
moved over the original with :func:`os.replace`, so a failure never leaves a
half-written manifest behind.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from ..errors import ManifestReadError, ManifestWriteError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def build_roundtrip_yaml() -> YAML:
    """Return a round-trip YAML instance with the project's formatting."""
    yaml = YAML()
    yaml.preserve_quotes = True
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def load_document(path: Path, yaml: YAML | None = None) -> CommentedMap:
    """Load ``path`` as a round-trip mapping.

    Raises
    ------
    ManifestReadError
        If the file is missing, unreadable, not valid YAML, or its top level
        is not a mapping.
    """
    yaml = yaml or build_roundtrip_yaml()
    try:
        with path.open("r", encoding="utf-8") as handle:
            document = yaml.load(handle)
    except OSError as exc:
        msg = f"could not read {path}: {exc}"
        raise ManifestReadError(msg) from exc
    except YAMLError as exc:
        msg = f"could not parse {path}: {exc}"
        raise ManifestReadError(msg) from exc
    if not isinstance(document, CommentedMap):
        msg = f"top-level structure of {path} must be a mapping"
        raise ManifestReadError(msg)
    return document


def dump_document(document: CommentedMap, path: Path, yaml: YAML | None = None) -> None:
    """Atomically replace ``path`` with the serialized ``document``.

    Raises
    ------
    ManifestWriteError
        If serialization or any filesystem step fails; ``path`` keeps its
        previous content in that case.
    """
    yaml = yaml or build_roundtrip_yaml()
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", text=True
        )
    except OSError as exc:
        msg = f"could not write {path}: {exc}"
        raise ManifestWriteError(msg) from exc

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            yaml.dump(document, handle)
        _copy_mode(path, tmp_name)
        os.replace(tmp_name, path)
    except (OSError, YAMLError) as exc:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        msg = f"could not write {path}: {exc}"
        raise ManifestWriteError(msg) from exc
    logger.debug("rewrote %s", path)


def _copy_mode(source: Path, target: str) -> None:
    # mkstemp creates 0600 files; keep the manifest's original permissions.
    with contextlib.suppress(FileNotFoundError):
        os.chmod(target, source.stat().st_mode & 0o777)


__all__ = ["build_roundtrip_yaml", "dump_document", "load_document"]
