"""Find a random ISBN that is actually registered in a library catalog."""

__version__ = "0.1.0"
