"""Client for a HyperDbg debugger server reached over HTTP, with hex JSON helpers."""

__version__ = "0.1.0"
__all__ = ["client", "hexjson"]