"""Cards, hand analysis, joker scoring, tile maps and sprite animation for a poker-roguelike card game."""

__version__ = "0.1.0"