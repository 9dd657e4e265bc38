"""Reader: lookahead-1 cursor over the JSON text."""

from .cursor import WHITESPACE, Cursor

__all__: tuple[str, ...] = ("Cursor", "WHITESPACE")
