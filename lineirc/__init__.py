"""lineirc: a small line-oriented IRC client core (parser, dispatcher, session)."""

__version__ = "0.1.0"
