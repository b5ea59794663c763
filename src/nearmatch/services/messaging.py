"""Chat transcripts, writable only once a match is accepted."""

from __future__ import annotations

import logging

from nearmatch.domain.errors import ForbiddenError, ValidationError
from nearmatch.domain.models import MatchStatus, Message
from nearmatch.store.base import Store

logger = logging.getLogger(__name__)


def send_message(store: Store, match_id: str | int | None, sender: str | None, text: str | None) -> Message:
    if match_id in (None, "") or not sender or not text:
        raise ValidationError("Missing fields")

    with store.lock:
        match = store.get_match(str(match_id))
        if match is None or match.status != MatchStatus.ACCEPTED:
            raise ForbiddenError("Chat not allowed")

        message = Message(sender=sender, text=text)
        store.append_message(match.id, message)
        logger.debug("Message in match %s from %s", match.id, sender)
        return message.model_copy(deep=True)


def get_messages(store: Store, match_id: str | int | None) -> list[Message]:
    # Reads are keyed by id only; transcripts of ignored matches stay readable.
    if match_id in (None, ""):
        raise ValidationError("matchId required")
    with store.lock:
        return [m.model_copy(deep=True) for m in store.list_messages(str(match_id))]
