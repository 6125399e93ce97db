"""Common literal values used across examplegen.

These constants name the sentinel entries of the two project manifests so the
synchronizers, the configuration defaults, and the tests agree on them.
Intended for internal use within the examplegen package.

Examples
--------
>>> from examplegen import _constants
>>> _constants.INDEX_PAGE
'examples/index.md'
>>> _constants.PINNED_DIRECTORIES
('/', '/modules/compose')
"""

EXAMPLES_NAV_SECTION = "Examples"
EXAMPLES_NAV_PREFIX = "examples"
INDEX_FILENAME = "index.md"
INDEX_PAGE = f"{EXAMPLES_NAV_PREFIX}/{INDEX_FILENAME}"

ROOT_MODULE_DIRECTORY = "/"
COMPOSE_MODULE_DIRECTORY = "/modules/compose"
PINNED_DIRECTORIES = (ROOT_MODULE_DIRECTORY, COMPOSE_MODULE_DIRECTORY)

EXAMPLE_DIRECTORY_TEMPLATE = "/examples/{lower}"

DEFAULT_TEMPLATES = (
    "ci.yml",
    "docs_example.md",
    "example_test.go",
    "example.go",
    "go.mod",
    "go.sum",
    "Makefile",
    "tools.go",
)
TEMPLATE_SUFFIX = ".jinja"
SETTINGS_FILENAME = ".examplegen.toml"
