"""Literal constants used by helpdoc."""

APP_NAME = "helpdoc"

# Presentation assets the generated page links to, by file name.
# They must exist in the assets directory before a document is generated.
STYLESHEET_ASSETS = (
    "bootstrap.min.css",
    "helpdoc.css",
)
SCRIPT_ASSETS = (
    "jquery.min.js",
    "bootstrap.min.js",
    "helpdoc.js",
)
REQUIRED_ASSETS = STYLESHEET_ASSETS + SCRIPT_ASSETS

# Fixed sub-links of every command menu entry, in display order.
# Each value is used as both the link label and the anchor suffix.
COMMAND_SECTIONS = (
    "Synopsis",
    "Syntax",
    "Description",
    "Parameters",
    "Inputs",
    "Outputs",
    "Examples",
    "RelatedLinks",
    "Notes",
)

ABOUT_ANCHOR = "About"
MENU_ANCHOR = "menu"
CONTENT_ANCHOR = "content"
# Ids the page shell emits itself; command anchors must avoid them.
RESERVED_ANCHORS = (ABOUT_ANCHOR, MENU_ANCHOR, CONTENT_ANCHOR)
TITLE_SUFFIX = " | Command Help"
LINE_BREAK = "<br>"
ALLOWED_VALUES_SEPARATOR = " | "
KEYWORD_ONLY_POSITION = "named"

WARNING_PREFIX = "WARNING:"
