"""Utility helper functions."""

from inkwell.utils.helpers import file_logger, get_summary, host, static_route_segments, today_str

__all__ = [
    "file_logger",
    "get_summary",
    "host",
    "static_route_segments",
    "today_str",
]
