"""
Proximity match engine.

When a user goes active we compare them against every other active user in the
same mode (brute force; active-user counts are small) and open a `pending` match
for each one within the radius, unless the pair already has a live match.

The user who triggered the scan is recorded as `initiator`; the user who was
already active becomes `receiver` and holds the accept/ignore decision.
"""

from __future__ import annotations

import logging

from nearmatch.core.geo import distance_m
from nearmatch.domain.errors import ValidationError
from nearmatch.domain.models import Match
from nearmatch.store.base import Store

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_M = 500.0


def find_match_between(store: Store, a: str, b: str) -> Match | None:
    """Return the live match for the unordered pair {a, b}, if any."""
    for match in store.iter_matches():
        if match.is_between(a, b):
            return match
    return None


def scan_for_matches(store: Store, current_email: str, *, radius_m: float = DEFAULT_RADIUS_M) -> list[Match]:
    """Create pending matches between `current_email` and nearby same-mode users.

    Returns the newly created matches (empty when the user is inactive, has no
    location, or nobody qualifies).
    """
    created: list[Match] = []
    with store.lock:
        current = store.get_user(current_email)
        if current is None or not current.is_active or current.location is None:
            return created

        here = current.location
        for other in store.iter_users():
            if other.email == current.email:
                continue
            if not other.is_active or other.location is None or other.mode != current.mode:
                continue

            d = distance_m(here.latitude, here.longitude, other.location.latitude, other.location.longitude)
            logger.debug("Distance check %s <-> %s: %dm", current.email, other.email, round(d))
            if d > radius_m:
                continue

            if find_match_between(store, current.email, other.email) is not None:
                continue

            match = Match(initiator=current.email, receiver=other.email, mode=current.mode)
            store.put_match(match)
            created.append(match.model_copy(deep=True))
            logger.info(
                "New match %s: %s -> %s (mode=%s, %dm)",
                match.id,
                match.initiator,
                match.receiver,
                match.mode.value,
                round(d),
            )
    return created


def list_matches(store: Store, email: str | None) -> list[Match]:
    """All live matches where `email` is either participant, in creation order."""
    if not email:
        raise ValidationError("Email required")
    with store.lock:
        return [m.model_copy(deep=True) for m in store.iter_matches() if m.involves(email)]
