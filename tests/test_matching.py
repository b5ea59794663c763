import pytest

from nearmatch.domain.errors import ValidationError
from nearmatch.domain.models import MatchStatus, Mode
from nearmatch.services import presence
from nearmatch.services.matching import list_matches, scan_for_matches


def test_nearby_same_mode_users_get_one_pending_match(store, go_active):
    go_active("a@x", lat=0, lon=0)
    go_active("b@x", lat=0, lon=0.004)

    matches = list(store.iter_matches())
    assert len(matches) == 1
    m = matches[0]
    assert m.status == MatchStatus.PENDING
    assert m.mode == Mode.VISIBLE
    assert (m.initiator, m.receiver) == ("b@x", "a@x")
    assert m.revealed is False
    assert m.reveal_requested_by is None


def test_repeated_activations_never_duplicate_a_pair(store, go_active):
    go_active("a@x", lat=0, lon=0)
    go_active("b@x", lat=0, lon=0.004)
    go_active("a@x", lat=0, lon=0.001)
    go_active("b@x", lat=0, lon=0.002)
    go_active("a@x", lat=0, lon=0)

    assert len(list(store.iter_matches())) == 1


def test_three_users_in_range_pair_up_once_each(store, go_active):
    go_active("a@x", lat=0, lon=0)
    go_active("b@x", lat=0, lon=0.001)
    go_active("c@x", lat=0, lon=0.002)
    go_active("a@x", lat=0, lon=0)

    pairs = {frozenset((m.initiator, m.receiver)) for m in store.iter_matches()}
    assert len(list(store.iter_matches())) == 3
    assert pairs == {frozenset(p) for p in [("a@x", "b@x"), ("a@x", "c@x"), ("b@x", "c@x")]}


def test_users_beyond_radius_are_not_matched(store, go_active):
    go_active("a@x", lat=0, lon=0)
    go_active("b@x", lat=0, lon=0.006)  # ~667 m

    assert list(store.iter_matches()) == []


def test_mode_mismatch_never_matches(store, go_active):
    go_active("a@x", mode="anonymous", lat=0, lon=0)
    go_active("b@x", mode="visible", lat=0, lon=0)

    assert list(store.iter_matches()) == []


def test_inactive_candidate_is_skipped(store, go_active):
    go_active("a@x", lat=0, lon=0)
    presence.deactivate(store, "a@x")
    go_active("b@x", lat=0, lon=0)

    assert list(store.iter_matches()) == []


def test_candidate_without_location_is_skipped(store, settings, go_active):
    presence.get_or_create_user(store, "a@x")
    presence.activate(store, "a@x", mode="visible", latitude=None, longitude=None, settings=settings)
    go_active("b@x", lat=0, lon=0)

    assert store.get_user("a@x").location is None
    assert list(store.iter_matches()) == []


def test_scan_is_noop_for_inactive_or_unknown_user(store, go_active):
    go_active("a@x", lat=0, lon=0)
    presence.get_or_create_user(store, "b@x")
    store.get_user("b@x").location = store.get_user("a@x").location

    assert scan_for_matches(store, "b@x") == []
    assert scan_for_matches(store, "nobody@x") == []


def test_radius_is_configurable(store, go_active):
    go_active("a@x", lat=0, lon=0)
    go_active("b@x", lat=0, lon=0.006)
    assert list(store.iter_matches()) == []

    created = scan_for_matches(store, "b@x", radius_m=1000)
    assert [(m.initiator, m.receiver) for m in created] == [("b@x", "a@x")]


def test_list_matches_filters_by_participant(store, go_active):
    go_active("a@x", lat=0, lon=0)
    go_active("b@x", lat=0, lon=0.001)
    go_active("c@x", lat=10, lon=10)

    assert [m.receiver for m in list_matches(store, "a@x")] == ["a@x"]
    assert len(list_matches(store, "b@x")) == 1
    assert list_matches(store, "c@x") == []


def test_list_matches_requires_email(store):
    with pytest.raises(ValidationError):
        list_matches(store, "")
