"""reviewdesk — moderated product reviews and pre-sale questions."""

__version__ = "0.1.0"
