"""PageActions — run plain-English action strings against a browser page."""

__version__ = "0.3.0"
