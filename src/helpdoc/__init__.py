"""helpdoc: render module command help into a static HTML page."""

__version__ = "0.1.0"
