"""Dialer adapters - Implementations of the dialer ports.

Available implementations:
- SystemUrlHandler: desktop URL handling (xdg-open, open, startfile)
"""

from .system_url_handler import SystemUrlHandler

__all__ = ["SystemUrlHandler"]
