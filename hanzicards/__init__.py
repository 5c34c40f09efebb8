"""Chinese vocabulary flashcards: deck storage, answer checking and a small web server."""

__version__ = "0.1.0"