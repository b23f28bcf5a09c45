"""flowwire: render flow engine input requests as chat channel messages."""

__version__ = "0.1.0"
__all__ = ["__version__"]
