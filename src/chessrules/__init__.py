"""chessrules: a rules engine for standard chess."""

__version__ = "0.1.0"
