"""A terminal board game of buying, upgrading and collecting fines on properties."""

__version__ = "0.1.0"
__all__ = ["board", "game", "player"]