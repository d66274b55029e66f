"""Inkwell blog backend; the ASGI app lives in ``inkwell.main``."""

__version__ = "1.0.0"
