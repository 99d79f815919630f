"""Common literal values used across apprentice_pages.

These constants keep filenames and context keys centralized so the builder,
the configuration loader, and tests can import the same values without
drifting. Intended for internal use within the apprentice_pages package.

Examples
--------
>>> from apprentice_pages import _constants
>>> _constants.PAGE_FILENAME_TEMPLATE.format(name="about")
'about.html'
>>> _constants.DEFAULT_TEMPLATE
'default.jinja'
"""

HTML_SUFFIX = ".html"
PAGE_FILENAME_TEMPLATE = "{name}" + HTML_SUFFIX
DEFAULT_TEMPLATE = "default.jinja"
CHAPTER_KEY = "chapter"
PYGMENTS_CSS_KEY = "pygments_css"
