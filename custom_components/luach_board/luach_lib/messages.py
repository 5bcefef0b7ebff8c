# custom_components/luach_board/luach_lib/messages.py
"""Announcement scheduling: a message is shown between its (inclusive) dates."""

from __future__ import annotations

import datetime
from collections.abc import Sequence

from .models import Message
from .parsing import to_gregorian_date


def is_message_active(message: Message, reference: datetime.date) -> bool:
    """
    Enabled and inside its date window.

    A message with no dates is always active; an unparseable bound counts as
    no bound at all.
    """
    if not message.enabled:
        return False

    start = to_gregorian_date(message.start_date)
    end = to_gregorian_date(message.end_date)
    if start is not None and reference < start:
        return False
    if end is not None and reference > end:
        return False
    return True


def is_message_expired(message: Message, reference: datetime.date) -> bool:
    end = to_gregorian_date(message.end_date)
    return end is not None and reference > end


def is_message_scheduled(message: Message, reference: datetime.date) -> bool:
    start = to_gregorian_date(message.start_date)
    return start is not None and reference < start


def filter_active_messages(
    messages: Sequence[Message], reference: datetime.date
) -> list[Message]:
    return [m for m in messages if is_message_active(m, reference)]
