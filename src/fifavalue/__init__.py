"""Player market value analysis: load, clean, summarize and regress."""

__version__ = "0.1.0"
