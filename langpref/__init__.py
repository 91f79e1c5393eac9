"""langpref: preferred UI language with device fallback and refresh notification."""

__version__ = "0.1.0"
