"""Terminal animation of a rotating hydroxymethylene molecule."""

__version__ = "0.1.0"
