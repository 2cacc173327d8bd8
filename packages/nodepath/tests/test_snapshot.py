"""Tests for controller snapshot and restore."""
import json

import pytest
from nodepath import NodePathController, SnapshotError

WAYPOINTS = [(0.0, 0.0), (8.0, 0.0), (8.0, 8.0)]


def _controller(**kwargs):
    kwargs.setdefault("waypoints", WAYPOINTS)
    kwargs.setdefault("durations", [1.0, 2.0, 1.0])
    return NodePathController.configure(**kwargs)


class TestSnapshot:
    """Test snapshot() output."""

    def test_snapshot_is_json_compatible(self):
        ctrl = _controller()
        ctrl.play()
        ctrl.advance(1.0)
        ctrl.advance(0.5)
        data = json.loads(json.dumps(ctrl.snapshot()))
        assert data["version"] == 1
        assert data["node_count"] == 3
        assert data["position"] == [2.0, 0.0]
        assert data["state"]["current_index"] == 1
        assert data["state"]["is_moving"] is True
        assert data["state"]["start_position"] == [0.0, 0.0]

    def test_snapshot_before_play(self):
        data = _controller().snapshot()
        assert data["state"]["start_position"] is None
        assert data["state"]["has_started"] is False


class TestRestore:
    """Test restore() into a fresh controller."""

    def test_restore_resumes_mid_segment(self):
        """A restored controller continues exactly where the original was."""
        original = _controller()
        original.play()
        original.advance(1.0)
        original.advance(0.5)
        data = json.loads(json.dumps(original.snapshot()))

        clone = _controller()
        clone.restore(data)
        assert clone.position == original.position
        original.advance(0.5)
        clone.advance(0.5)
        assert clone.position == original.position == (4.0, 0.0)
        assert clone.current_index == original.current_index

    def test_version_mismatch(self):
        data = _controller().snapshot()
        data["version"] = 99
        with pytest.raises(SnapshotError, match="version"):
            _controller().restore(data)

    def test_node_count_mismatch(self):
        data = _controller().snapshot()
        other = _controller(waypoints=WAYPOINTS[:2])
        with pytest.raises(SnapshotError, match="count"):
            other.restore(data)

    def test_malformed_state(self):
        data = _controller().snapshot()
        data["state"]["speed"] = 3
        with pytest.raises(SnapshotError):
            _controller().restore(data)

    @pytest.mark.parametrize("key", ["state", "position"])
    def test_missing_section(self, key):
        """A snapshot without state or position is rejected."""
        data = _controller().snapshot()
        del data[key]
        with pytest.raises(SnapshotError):
            _controller().restore(data)

    @pytest.mark.parametrize("index", [-1, 3, 7, "1"])
    def test_current_index_out_of_range(self, index):
        """current_index must address one of the path's waypoints."""
        data = _controller().snapshot()
        data["state"]["current_index"] = index
        ctrl = _controller()
        with pytest.raises(SnapshotError, match="current_index"):
            ctrl.restore(data)
        assert ctrl.current_index == 0

    def test_start_position_wrong_length(self):
        original = _controller()
        original.play()
        data = original.snapshot()
        data["state"]["start_position"] = [1.0, 2.0, 3.0]
        with pytest.raises(SnapshotError, match="start_position"):
            _controller().restore(data)

    def test_position_wrong_length(self):
        data = _controller().snapshot()
        data["position"] = [1.0]
        with pytest.raises(SnapshotError, match="position"):
            _controller().restore(data)

    def test_non_numeric_position(self):
        data = _controller().snapshot()
        data["position"] = ["a", "b"]
        with pytest.raises(SnapshotError):
            _controller().restore(data)

    def test_failed_restore_leaves_state_untouched(self):
        """A rejected snapshot does not partially overwrite the controller."""
        ctrl = _controller()
        ctrl.play()
        ctrl.advance(0.5)
        before = ctrl.snapshot()
        data = _controller().snapshot()
        data["state"]["current_index"] = 9
        with pytest.raises(SnapshotError):
            ctrl.restore(data)
        assert ctrl.snapshot() == before
