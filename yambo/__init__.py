"""
Yambo dice core.

State, holds, rolling and combination detection for the five dice of a
Yam (Yahtzee-style) game.
"""

__version__ = "0.1.0"
