"""Load and validate build configuration YAML for apprentice sites.

This subpackage parses the project's ``pages.yaml`` file, resolves the output,
template, chapter, and asset directories, and produces typed dataclasses
(:class:`BuildConfig`, :class:`PageSpec`) that the builder consumes. The
primary entry point is :func:`load_build_config`, which ensures required
fields are present, rejects duplicate page names, and returns a
:class:`BuildConfig` ready for a build.

Examples
--------
>>> from pathlib import Path
>>> from apprentice_pages.config import load_build_config
>>> config = load_build_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> config.get_page("about").template  # doctest: +SKIP
'about.jinja'
"""

from .loader import load_build_config
from .models import BuildConfig, BuildConfigError, PageNotFoundError, PageSpec

__all__ = [
    "BuildConfig",
    "BuildConfigError",
    "PageNotFoundError",
    "PageSpec",
    "load_build_config",
]
