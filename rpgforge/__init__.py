"""Role-playing weapons and characters, a factory for them, a random roster and a console duel."""

__version__ = "0.1.0"