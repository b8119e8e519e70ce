"""StyleMatch - catalog search and style matching engine.

Tag/color overlap scoring, structured filters and session state for a
shopping style-discovery app.
"""

__version__ = "0.1.0"
__author__ = "StyleMatch Team"
