"""Tests for the header flag reduction."""

from hypothesis import given, strategies as st

from annolist.domain.aggregate import aggregate
from annolist.domain.models import AggregateFlags, ObjectState, is_collapsed


def test_empty_collection_is_all_true():
    assert aggregate([], {}) == AggregateFlags(True, True, True)


def test_scenario_flags(two_states):
    flags = aggregate(two_states, {})

    assert flags.all_hidden is False
    assert flags.all_locked is False
    assert flags.all_collapsed is True


def test_missing_collapsed_entry_defaults_to_collapsed():
    assert is_collapsed({}, 42) is True
    assert is_collapsed({42: False}, 42) is False


def test_collapsed_map_may_reference_unknown_ids():
    states = [ObjectState(client_id=1)]
    flags = aggregate(states, {99: False})
    assert flags.all_collapsed is True


def test_one_expanded_item_clears_all_collapsed():
    states = [ObjectState(client_id=1), ObjectState(client_id=2)]
    flags = aggregate(states, {2: False})
    assert flags.all_collapsed is False


def test_accepts_generator():
    flags = aggregate((ObjectState(client_id=i, lock=True) for i in range(3)), {})
    assert flags.all_locked is True


@given(st.lists(st.tuples(st.booleans(), st.booleans(), st.booleans()), max_size=30))
def test_flag_true_iff_every_member_matches(rows):
    states = [
        ObjectState(client_id=index, hidden=hidden, lock=lock)
        for index, (hidden, lock, _) in enumerate(rows)
    ]
    collapsed = {index: value for index, (_, _, value) in enumerate(rows)}

    flags = aggregate(states, collapsed)

    assert flags.all_hidden == all(hidden for hidden, _, _ in rows)
    assert flags.all_locked == all(lock for _, lock, _ in rows)
    assert flags.all_collapsed == all(value for _, _, value in rows)
