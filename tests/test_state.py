"""Unit tests for metadata state changes."""

from __future__ import annotations

from page_meta.state import MetadataState, SetKey, SetVar, apply_change, placeholder


def test_placeholder_wraps_name() -> None:
    """Placeholder tokens should be delimited by percent signs."""
    assert placeholder("name") == "%name%", "expected %name% token"


def test_set_key_overwrites_and_keeps_vars() -> None:
    """SetKey should replace the key without touching recorded vars."""
    state = MetadataState(metadata_key="old", vars={"%a%": "1"})
    updated = apply_change(state, SetKey("new"))
    assert updated == MetadataState(metadata_key="new", vars={"%a%": "1"}), (
        f"unexpected state {updated!r}"
    )


def test_set_var_accumulates_without_mutating_input() -> None:
    """SetVar should add entries to a copy, leaving the original state intact."""
    state = MetadataState(metadata_key="page")
    first = apply_change(state, SetVar("%a%", "1"))
    second = apply_change(first, SetVar("%b%", "2"))
    assert second.vars == {"%a%": "1", "%b%": "2"}, "expected both vars recorded"
    assert second.metadata_key == "page", "expected key to survive var changes"
    assert state.vars == {}, "expected the original state to stay empty"
    assert first.vars == {"%a%": "1"}, "expected intermediate state unchanged"


def test_set_var_last_write_wins() -> None:
    """Recording a var twice should keep the latest value."""
    state = apply_change(MetadataState(), SetVar("%a%", "1"))
    state = apply_change(state, SetVar("%a%", "2"))
    assert state.vars == {"%a%": "2"}, "expected overwrite on conflict"
