"""termchess - a terminal chess program."""

__version__ = "0.1.0"
