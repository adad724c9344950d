"""A self-playing snake game: rules, an A*-guided pilot and a pygame front end."""

__version__ = "0.1.0"