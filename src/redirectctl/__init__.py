"""redirectctl — manage and validate URL-redirection rules."""

__version__ = "0.1.0"
