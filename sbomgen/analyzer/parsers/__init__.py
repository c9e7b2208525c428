"""Manifest parsers — auto-registered on import.

Import order fixes the dispatch order: npm, pypi, go, cargo, maven.
"""

from sbomgen.analyzer.parsers import (  # noqa: I001
    npm_package_json,  # noqa: F401
    pip_requirements,  # noqa: F401
    go_mod,  # noqa: F401
    cargo_toml,  # noqa: F401
    maven_pom,  # noqa: F401
)
