"""System URL handler adapter.

Implements both DialCapabilityPort and DialOpenerPort on top of the
desktop's own URL handling:
- Linux: xdg-mime / xdg-open
- macOS: open
- Windows: os.startfile
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass, field
from typing import List
from urllib.parse import urlsplit


@dataclass
class SystemUrlHandler:
    """Open URLs with whatever the host registered for their scheme.

    Attributes:
        platform: Platform identifier, as in ``sys.platform``
    """

    platform: str = field(default_factory=lambda: sys.platform)

    _children: List[subprocess.Popen] = field(default_factory=list, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def can_open(self, url: str) -> bool:
        """Check whether a handler is registered for the URL's scheme.

        Args:
            url: The URL to check.

        Returns:
            True if the host would route the URL to an application.
        """
        scheme = urlsplit(url).scheme
        if not scheme:
            return False

        if self.platform.startswith("linux"):
            return self._linux_has_handler(scheme)
        if self.platform == "darwin":
            return shutil.which("open") is not None
        if self.platform.startswith("win"):
            return True
        return False

    def open(self, url: str) -> None:
        """Hand the URL to the host without waiting for the result.

        The launcher runs in its own session with no stdio attached.
        Its handle is kept and reaped on a later call once it has exited.

        Args:
            url: The URL to open.
        """
        self._logger.debug("Opening URL", extra={"url": url, "platform": self.platform})
        self._reap_children()
        try:
            if self.platform.startswith("win"):
                os.startfile(url)  # type: ignore[attr-defined]
                return
            command = "open" if self.platform == "darwin" else "xdg-open"
            self._children.append(
                subprocess.Popen(
                    [command, url],
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
            )
        except OSError as e:
            self._logger.warning(
                "URL handler failed to start",
                extra={"url": url, "error": str(e)},
            )

    def _reap_children(self) -> None:
        self._children = [child for child in self._children if child.poll() is None]

    def _linux_has_handler(self, scheme: str) -> bool:
        if shutil.which("xdg-mime") is None or shutil.which("xdg-open") is None:
            return False

        try:
            completed = subprocess.run(
                ["xdg-mime", "query", "default", f"x-scheme-handler/{scheme}"],
                capture_output=True,
                text=True,
                timeout=5,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            self._logger.debug(
                "Handler lookup failed",
                extra={"scheme": scheme, "error": str(e)},
            )
            return False

        return completed.returncode == 0 and bool(completed.stdout.strip())
