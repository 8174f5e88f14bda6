"""Dialer service - place a phone call through the host's tel handler."""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import quote, urlsplit

from ..config import DialerConfig, get_config
from ..domain.models import DialOutcome
from ..ports.dialer import DialCapabilityPort, DialOpenerPort

# Kept verbatim in the dial target; anything else is percent-encoded.
_DIAL_SAFE_CHARS = "+-.()*#;,/=:@!$&'~_%"
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def build_dial_target(phone: str, scheme: str = "tel://") -> Optional[str]:
    """Prefix a phone number with the dial scheme.

    The number itself is not checked for digits or format. Characters
    that are not legal in a URL, such as spaces or non-ASCII digits, are
    percent-encoded; valid escapes are kept and a stray '%' becomes
    '%25'. Only blank input and input with control characters is
    rejected.

    Args:
        phone: The phone number as typed or provided.
        scheme: The dial URL prefix.

    Returns:
        The dial target, or None if no well-formed URL can be built.
    """
    if not phone or not phone.strip():
        return None
    if any(unicodedata.category(ch) == "Cc" for ch in phone):
        return None

    encoded = _BAD_PERCENT_ESCAPE.sub("%25", quote(phone, safe=_DIAL_SAFE_CHARS))

    target = f"{scheme}{encoded}"
    try:
        urlsplit(target)
    except ValueError:
        return None
    return target


@dataclass
class DialerService:
    """Best-effort, fire-and-forget phone dialer.

    Never raises on bad input. The returned DialOutcome tells tests and
    interested callers what happened; everyone else can ignore it.

    Attributes:
        capability: Answers whether the device can place calls
        opener: Hands the dial target to the system dialer
        config: Dialer configuration
    """

    capability: DialCapabilityPort
    opener: DialOpenerPort
    config: DialerConfig = field(default_factory=lambda: get_config().dialer)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def make_call(self, phone: str) -> DialOutcome:
        """Ask the system dialer to call a number.

        Args:
            phone: The phone number to call.

        Returns:
            ATTEMPTED if the dialer was opened, INCAPABLE if the device
            cannot place calls, INVALID_INPUT if no dial target could be built.
        """
        url = build_dial_target(phone, self.config.scheme)
        if url is None:
            return DialOutcome.INVALID_INPUT

        if not self.capability.can_open(url):
            self._logger.info("Device can't make phone calls", extra={"url": url})
            return DialOutcome.INCAPABLE

        self.opener.open(url)
        return DialOutcome.ATTEMPTED
