"""Register example pages in the MkDocs navigation tree.

The ``Examples`` section of ``mkdocs.yml`` lists one Markdown page per example
module. Its first entry is always the section landing page
(``examples/index.md``); every other page follows in ascending lexicographic
order. :func:`sync_examples_nav` applies that rule to an in-memory list and
:func:`update_mkdocs_nav` performs the read-modify-write cycle on disk.

Examples
--------
>>> sync_examples_nav(
...     ["examples/index.md", "examples/a.md", "examples/c.md"], "b"
... )
['examples/index.md', 'examples/a.md', 'examples/b.md', 'examples/c.md']
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import posixpath
import typing as typ

from ruamel.yaml.comments import CommentedMap, CommentedSeq

from .._constants import EXAMPLES_NAV_PREFIX, INDEX_PAGE
from ..config.models import NavigationConfig
from ..errors import ManifestStructureError
from ._yaml import build_roundtrip_yaml, dump_document, load_document

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def example_page(example_lower: str, prefix: str = EXAMPLES_NAV_PREFIX) -> str:
    """Return the navigation path of an example's docs page."""
    return f"{prefix}/{example_lower}.md"


def sync_examples_nav(
    current: cabc.Iterable[str],
    example_lower: str,
    *,
    index_page: str = INDEX_PAGE,
    prefix: str = EXAMPLES_NAV_PREFIX,
) -> list[str]:
    """Return the navigation list with the example page inserted in order.

    Every entry whose filename is the index filename is dropped wherever it
    occurs, the new page is added unless already listed, the remainder is
    sorted and ``index_page`` is put back in front. Duplicate entries
    collapse into one, and a new page that is the index page itself is not
    added a second time.
    """
    index_filename = posixpath.basename(index_page)
    pages = [
        entry for entry in current if posixpath.basename(entry) != index_filename
    ]
    page = example_page(example_lower, prefix)
    if posixpath.basename(page) != index_filename:
        pages.append(page)
    return [index_page, *sorted(dict.fromkeys(pages))]


def find_nav_section(document: cabc.Mapping[str, typ.Any], section: str) -> CommentedMap:
    """Return the ``nav`` item whose single key is ``section``.

    Raises
    ------
    ManifestStructureError
        If the document has no ``nav`` list, no item titled ``section``, or
        the section does not hold a list of page paths.
    """
    nav = document.get("nav")
    if not isinstance(nav, list):
        msg = "mkdocs configuration has no 'nav' list"
        raise ManifestStructureError(msg)
    for item in nav:
        if isinstance(item, cabc.MutableMapping) and section in item:
            pages = item[section]
            if not isinstance(pages, list) or not all(
                isinstance(page, str) for page in pages
            ):
                msg = f"nav section '{section}' must be a list of page paths"
                raise ManifestStructureError(msg)
            return item
    msg = f"nav section '{section}' not found in mkdocs configuration"
    raise ManifestStructureError(msg)


def read_latest_version(path: Path) -> str:
    """Return ``extra.latest_version`` from ``mkdocs.yml`` or an empty string."""
    document = load_document(path)
    extra = document.get("extra")
    if not isinstance(extra, cabc.Mapping):
        return ""
    version = extra.get("latest_version")
    return str(version) if version is not None else ""


def update_mkdocs_nav(
    path: Path,
    example_lower: str,
    navigation: NavigationConfig | None = None,
) -> list[str]:
    """Insert the example page into ``mkdocs.yml`` and rewrite the file.

    Parameters
    ----------
    path : Path
        Location of the MkDocs configuration.
    example_lower : str
        Lower-case example name; the page becomes ``<prefix>/<name>.md``.
    navigation : NavigationConfig, optional
        Section title, page prefix, and index page; defaults match the
        conventional ``Examples`` section.

    Returns
    -------
    list[str]
        The navigation list as written.

    Raises
    ------
    ManifestReadError
        If the file cannot be read or parsed.
    ManifestStructureError
        If the examples section is missing or malformed; nothing is written.
    ManifestWriteError
        If the file cannot be replaced; the previous content is kept.
    """
    navigation = navigation or NavigationConfig()
    yaml = build_roundtrip_yaml()
    document = load_document(path, yaml)
    section = find_nav_section(document, navigation.section)

    updated = sync_examples_nav(
        section[navigation.section],
        example_lower,
        index_page=navigation.index_page,
        prefix=navigation.prefix,
    )
    section[navigation.section] = CommentedSeq(updated)
    dump_document(document, path, yaml)
    logger.debug("nav section '%s' now lists %d pages", navigation.section, len(updated))
    return updated


__all__ = [
    "example_page",
    "find_nav_section",
    "read_latest_version",
    "sync_examples_nav",
    "update_mkdocs_nav",
]
