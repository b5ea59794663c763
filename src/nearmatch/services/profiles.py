"""Profile reads gated by anonymity and reveal state."""

from __future__ import annotations

from nearmatch.domain.errors import ForbiddenError, NotFoundError
from nearmatch.domain.models import Mode, Profile
from nearmatch.store.base import Store


def get_profile(store: Store, email: str, requesting_user: str | None = None) -> Profile:
    """Return a user's public profile.

    While the target is active in anonymous mode, a requester only sees it if the
    two share a revealed match. Requests without a requester are not gated.
    """
    with store.lock:
        user = store.get_user(email)
        if user is None:
            raise NotFoundError("User not found")

        if user.is_active and user.mode == Mode.ANONYMOUS and requesting_user:
            revealed = any(m.revealed and m.is_between(email, requesting_user) for m in store.iter_matches())
            if not revealed:
                raise ForbiddenError(
                    "Profile not accessible",
                    hint="This user is anonymous. Reveal identities first.",
                )

        return user.profile()
