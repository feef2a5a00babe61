"""Tests for diagnostic state and its snapshot."""

import json

import pytest

from esqldiag.state import SNAPSHOT_VERSION, DiagnosticSnapshot, DiagnosticState


def test_state_defaults():
    state = DiagnosticState()
    assert (state.description, state.context, state.line, state.column) == ("", "", 0, 0)


def test_state_is_immutable():
    state = DiagnosticState("syntax error", "line 1, column 2", 1, 2)
    with pytest.raises(AttributeError):
        state.line = 5


def test_state_rebuilt_from_fields():
    state = DiagnosticState("syntax error", "identifier, line 3, column 4", 3, 4)
    rebuilt = DiagnosticState(state.description, state.context, state.line, state.column)
    assert rebuilt == state


def test_snapshot_round_trip_through_json():
    state = DiagnosticState("Unknown type 'Foo'", "line 2, column 6", 2, 6)
    snapshot = DiagnosticSnapshot.capture("Unknown type 'Foo' near line 2, column 6.", state)
    data = json.loads(json.dumps(snapshot.to_dict()))
    restored = DiagnosticSnapshot.from_dict(data)
    assert restored == snapshot
    assert restored.state == state


def test_snapshot_fields():
    snapshot = DiagnosticSnapshot.capture("m.", DiagnosticState("m", "", 0, 0))
    assert snapshot.to_dict() == {
        "message": "m.",
        "description": "m",
        "context": "",
        "line": 0,
        "column": 0,
        "version": SNAPSHOT_VERSION,
    }


def test_snapshot_rejects_unknown_version():
    data = DiagnosticSnapshot("m.").to_dict()
    data["version"] = SNAPSHOT_VERSION + 1
    with pytest.raises(ValueError):
        DiagnosticSnapshot.from_dict(data)


def test_snapshot_rejects_missing_fields():
    data = DiagnosticSnapshot("m.").to_dict()
    del data["line"]
    with pytest.raises(ValueError, match="line"):
        DiagnosticSnapshot.from_dict(data)
