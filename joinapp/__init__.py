"""A layered WSGI service that greets users joining by name."""

__version__ = "0.1.0"