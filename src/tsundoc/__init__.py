"""tsundoc: save text, browse it as a virtual bookshelf."""

__version__ = "0.1.0"
