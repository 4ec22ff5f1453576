"""roverctl — grid rover command simulator."""

__version__ = "0.1.0"
