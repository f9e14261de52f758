"""Tests for scoped read-only views returned by peek."""

import gc

import pytest

from cdllist import CdlList, Ref, StaleReferenceError


def test_ref_reads_value() -> None:
    """Test reading a value through a Ref."""
    lst = CdlList([1, 2])
    ref = lst.peek_front()
    assert isinstance(ref, Ref)
    assert ref.is_valid
    assert ref.value == 1
    assert repr(ref) == "Ref(1)"


def test_ref_does_not_copy() -> None:
    """Test that a Ref exposes the stored object itself."""
    payload = {"data": 123}
    lst = CdlList([payload])
    ref = lst.peek_back()
    assert ref is not None
    assert ref.value is payload


def test_ref_is_read_only() -> None:
    """Test that a Ref's value cannot be assigned."""
    lst = CdlList([1])
    ref = lst.peek_front()
    assert ref is not None
    with pytest.raises(AttributeError):
        ref.value = 2  # type: ignore[misc]


def test_ref_goes_stale_after_push() -> None:
    """Test that any mutation invalidates outstanding Refs."""
    lst = CdlList([1, 2])
    ref = lst.peek_front()
    assert ref is not None

    lst.push_back(3)

    assert not ref.is_valid
    assert repr(ref) == "Ref(<stale>)"
    with pytest.raises(StaleReferenceError):
        _ = ref.value


def test_ref_goes_stale_after_pop_of_its_node() -> None:
    """Test that a Ref to a popped node cannot be read."""
    lst = CdlList([1, 2])
    ref = lst.peek_back()
    assert ref is not None

    assert lst.pop_back() == 2
    with pytest.raises(StaleReferenceError):
        _ = ref.value


def test_ref_survives_failed_indexed_calls() -> None:
    """Test that out-of-range indexed calls do not invalidate Refs."""
    lst = CdlList([1, 2])
    ref = lst.peek_front()
    assert ref is not None

    lst.insert_at(10, 3)
    lst.remove_at(10)

    assert ref.value == 1


def test_ref_does_not_keep_list_alive() -> None:
    """Test that dropping the list makes its Refs stale."""
    lst = CdlList(["a"])
    ref = lst.peek_front()
    assert ref is not None

    del lst
    gc.collect()

    assert not ref.is_valid
    with pytest.raises(StaleReferenceError):
        _ = ref.value


def test_fresh_peek_after_mutation() -> None:
    """Test that peeking again after a mutation yields a valid Ref."""
    lst = CdlList([1, 2, 3])
    old = lst.peek_front()
    lst.pop_front()
    new = lst.peek_front()

    assert old is not None and not old.is_valid
    assert new is not None and new.value == 2
