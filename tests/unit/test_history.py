"""Tests for the parameter undo/redo history."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from stitchpattern.config import FillShape, StyleParameters
from stitchpattern.core.history import ParameterHistory
from stitchpattern.exceptions import StorageUnavailableError

A = StyleParameters(threshold=100)
B = StyleParameters(threshold=110)
C = StyleParameters(threshold=120)


@pytest.fixture
def history() -> ParameterHistory:
    history = ParameterHistory()
    history.seed(A)
    return history


class TestParameterHistory:
    """Tests for ParameterHistory class."""

    def test_unseeded(self):
        """Test an empty history has no current entry."""
        history = ParameterHistory()
        assert history.current() is None
        assert history.cursor == -1
        assert not history.can_undo
        assert not history.can_redo
        assert history.undo() is False
        assert history.redo() is False

    def test_seed(self, history):
        """Test seeding yields a single current entry."""
        assert history.entries == (A,)
        assert history.cursor == 0
        assert history.current() == A

    def test_seed_resets(self, history):
        """Test seeding again discards earlier entries."""
        history.push(B)
        history.seed(C)
        assert history.entries == (C,)
        assert history.cursor == 0

    def test_push_after_undo_truncates(self, history):
        """Test a push after undo drops the redo branch."""
        history.push(B)
        assert history.undo()
        assert history.push(C)
        assert history.entries == (A, C)
        assert history.cursor == 1
        assert not history.can_redo

    def test_push_equal_is_noop(self, history):
        """Test pushing the current parameters changes nothing."""
        assert history.push(StyleParameters(threshold=100)) is False
        assert history.entries == (A,)
        assert history.cursor == 0

    def test_undo_redo_bounds(self, history):
        """Test the cursor stays within the entries."""
        history.push(B)
        history.push(C)
        assert history.undo() and history.undo()
        assert history.current() == A
        assert history.undo() is False
        assert history.cursor == 0
        assert history.redo() and history.redo()
        assert history.current() == C
        assert history.redo() is False
        assert history.cursor == 2

    def test_update_merges(self, history):
        """Test update replaces only the given fields."""
        assert history.update(fill_shape=FillShape.SQUARE)
        current = history.current()
        assert current.fill_shape is FillShape.SQUARE
        assert current.threshold == 100
        assert history.cursor == 1

    def test_update_unseeded(self):
        """Test update before seeding raises RuntimeError."""
        with pytest.raises(RuntimeError, match="not seeded"):
            ParameterHistory().update(threshold=10)

    def test_invalid_update_leaves_history(self, history):
        """Test a rejected value does not create an entry."""
        with pytest.raises(ValidationError):
            history.update(threshold=300)
        with pytest.raises(ValidationError):
            history.update(stitch_count_width=0)
        assert history.entries == (A,)
        assert history.cursor == 0

    def test_sink_receives_current(self):
        """Test the sink sees every new current entry."""
        sink = MagicMock()
        history = ParameterHistory(snapshot_sink=sink)
        history.seed(A)
        history.push(B)
        history.undo()
        history.redo()
        assert [call.args[0] for call in sink.call_args_list] == [A, B, A, B]

    def test_sink_failure_keeps_history(self):
        """Test an unavailable store does not corrupt the history."""
        sink = MagicMock(side_effect=StorageUnavailableError("quota exceeded"))
        history = ParameterHistory(snapshot_sink=sink)
        history.seed(A)
        assert history.push(B)
        assert history.undo()
        assert history.entries == (A, B)
        assert history.cursor == 0
        assert history.current() == A
        assert sink.call_count == 3

    def test_sink_other_errors_propagate(self):
        """Test unexpected sink errors are not swallowed."""
        sink = MagicMock(side_effect=KeyError("boom"))
        history = ParameterHistory(snapshot_sink=sink)
        with pytest.raises(KeyError):
            history.seed(A)
        assert history.current() == A
