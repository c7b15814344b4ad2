"""Bilibili parts proxy.

Resolves a BV id from raw input, fetches the video's pagelist from
Bilibili and returns it in a stable public schema.
"""

__version__ = "0.1.0"
