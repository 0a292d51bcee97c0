"""Weighted A* route finding over digit-cost grid maps, with small string,
buffer, line-reading, linked-list and printf-style helpers."""

__version__ = "0.1.0"