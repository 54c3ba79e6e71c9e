"""Map remaining time to colour and blink."""

from __future__ import annotations

from pompom.models import Urgency, UrgencyColor

WARNING_THRESHOLD = 60
CRITICAL_THRESHOLD = 15
BLINK_THRESHOLD = 5


def urgency_for(remaining_seconds: int) -> Urgency:
    """Return the colour tier and blink flag for ``remaining_seconds``."""
    if remaining_seconds > WARNING_THRESHOLD:
        color = UrgencyColor.NORMAL
    elif remaining_seconds > CRITICAL_THRESHOLD:
        color = UrgencyColor.WARNING
    else:
        color = UrgencyColor.CRITICAL
    return Urgency(color=color, blink=remaining_seconds < BLINK_THRESHOLD)
