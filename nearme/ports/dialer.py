"""Dialer ports - Abstractions over the host's URL handling.

The dialer needs two things from the host: to know whether a ``tel``
URL can be handled at all, and to hand such a URL off. Both are
injected so the dialer can be tested without a phone.
"""

from __future__ import annotations

from typing import Protocol


class DialCapabilityPort(Protocol):
    """Port answering whether the device can open a dial target.

    Implementation: adapters/dialer/system_url_handler.py
    """

    def can_open(self, url: str) -> bool:
        """Check whether the host has a handler for this URL.

        Args:
            url: The dial target (e.g., 'tel://5551234').

        Returns:
            True if opening the URL would reach a dialer.
        """
        ...


class DialOpenerPort(Protocol):
    """Port handing a dial target to the system dialer.

    Opening is fire-and-forget: the outcome of the call itself is
    never reported back.
    """

    def open(self, url: str) -> None:
        """Open the URL with the host's registered handler.

        Args:
            url: The dial target to open.
        """
        ...
