"""
Access to the remote content tree.

Provides an async fetcher for the GitHub Contents API that returns
directory listings or UTF-8 text decoded from base64 file entries.
"""

from .fetcher import ContentEntry, ContentFetcher, decode_content, DEFAULT_API_BASE

__all__ = [
    "ContentFetcher",
    "ContentEntry",
    "decode_content",
    "DEFAULT_API_BASE",
]
