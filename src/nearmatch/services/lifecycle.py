"""
Match lifecycle and the anonymous reveal handshake.

    pending --accept(receiver)--> accepted
    pending/accepted --ignore(receiver)--> removed

Reveal is a two-step consent on anonymous matches: the first participant records
a request, and a different participant completes it via either
`request_reveal` or `accept_reveal`. A revealed match switches to `visible` for
good, which also makes further reveal calls invalid.
"""

from __future__ import annotations

import logging

from nearmatch.domain.errors import ForbiddenError, NotFoundError, ValidationError
from nearmatch.domain.models import Match, MatchStatus, Mode
from nearmatch.store.base import Store

logger = logging.getLogger(__name__)


def accept_match(store: Store, match_id: str | int | None, email: str | None) -> Match:
    with store.lock:
        match = store.get_match(str(match_id)) if match_id is not None else None
        if match is None:
            raise NotFoundError("Match not found")
        if match.receiver != email:
            raise ForbiddenError("Not allowed", hint="Only the receiver can accept a match.")

        match.status = MatchStatus.ACCEPTED
        store.put_match(match)
        logger.info("Match %s accepted by %s", match.id, email)
        return match.model_copy(deep=True)


def ignore_match(store: Store, match_id: str | int | None, email: str | None) -> None:
    """Remove a match. Matches owned by another receiver look nonexistent."""
    with store.lock:
        match = store.get_match(str(match_id)) if match_id is not None else None
        if match is None or match.receiver != email:
            raise NotFoundError("Match not found")

        store.delete_match(match.id)
        logger.info("Match %s ignored by %s", match.id, email)


def _anonymous_match(store: Store, match_id: str | int | None) -> Match:
    match = store.get_match(str(match_id)) if match_id is not None else None
    if match is None or match.mode != Mode.ANONYMOUS:
        raise ValidationError("Invalid match")
    return match


def _reveal(store: Store, match: Match) -> None:
    match.revealed = True
    match.mode = Mode.VISIBLE
    store.put_match(match)
    logger.info("Match %s revealed", match.id)


def request_reveal(store: Store, match_id: str | int | None, email: str | None) -> Match:
    """Record a reveal request, or complete it if the other side asked first."""
    with store.lock:
        match = _anonymous_match(store, match_id)
        if not match.reveal_requested_by:
            match.reveal_requested_by = email
            store.put_match(match)
        elif match.reveal_requested_by != email:
            _reveal(store, match)
        return match.model_copy(deep=True)


def accept_reveal(store: Store, match_id: str | int | None, email: str | None) -> Match:
    """Complete a pending reveal request made by the other participant."""
    with store.lock:
        match = _anonymous_match(store, match_id)
        if match.reveal_requested_by and match.reveal_requested_by != email:
            _reveal(store, match)
        return match.model_copy(deep=True)
