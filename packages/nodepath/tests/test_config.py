"""Tests for PathConfig validation and loading."""
import json

import pytest
from nodepath import DEFAULT_DURATION, ConfigurationError, EasingStyle, PathConfig


class TestPathConfig:
    """Test PathConfig construction and validation."""

    def test_defaults(self):
        config = PathConfig(waypoints=((1, 2),))
        assert config.durations == ()
        assert config.easing is EasingStyle.LINEAR
        assert config.dimensions == 2
        assert not config.loop
        assert not config.autoplay_on_start
        assert not config.trigger_on_click
        assert config.default_duration == DEFAULT_DURATION == 1.0

    def test_waypoints_normalized_to_floats(self):
        config = PathConfig(waypoints=[(1, 2), (3, 4)])
        assert config.waypoints == ((1.0, 2.0), (3.0, 4.0))
        assert all(isinstance(c, float) for wp in config.waypoints for c in wp)

    def test_config_is_frozen(self):
        config = PathConfig(waypoints=((0.0, 0.0),))
        with pytest.raises(AttributeError):
            config.loop = True

    def test_empty_waypoints(self):
        with pytest.raises(ConfigurationError, match="at least one waypoint"):
            PathConfig(waypoints=())

    @pytest.mark.parametrize("dims", [0, 1, 4])
    def test_bad_dimensions(self, dims):
        with pytest.raises(ConfigurationError):
            PathConfig(waypoints=((0.0, 0.0, 0.0, 0.0),), dimensions=dims)

    def test_short_waypoint_in_3d(self):
        """A 2-component waypoint cannot drive a 3D path."""
        with pytest.raises(ConfigurationError, match="waypoint 1"):
            PathConfig(waypoints=((0, 0, 0), (1, 1)), dimensions=3)

    def test_negative_duration(self):
        with pytest.raises(ConfigurationError):
            PathConfig(waypoints=((0, 0),), durations=(-1.0,))

    def test_negative_default_duration(self):
        with pytest.raises(ConfigurationError):
            PathConfig(waypoints=((0, 0),), default_duration=-0.5)

    def test_unknown_easing(self):
        with pytest.raises(ConfigurationError):
            PathConfig(waypoints=((0, 0),), easing="wobble")


class TestDurationFor:
    """Test duration table lookup."""

    def test_uses_table_entry(self):
        config = PathConfig(waypoints=((0, 0), (1, 1)), durations=(0.25, 3.0))
        assert config.duration_for(0) == 0.25
        assert config.duration_for(1) == 3.0

    def test_falls_back_to_default(self):
        config = PathConfig(waypoints=((0, 0), (1, 1), (2, 2)), durations=(2.0, 2.0))
        assert config.duration_for(2) == 1.0

    def test_custom_default(self):
        config = PathConfig(waypoints=((0, 0), (1, 1)), default_duration=0.5)
        assert config.duration_for(1) == 0.5


class TestFromDict:
    """Test loading from plain data."""

    def test_from_json(self):
        raw = json.loads(
            '{"waypoints": [[0, 0, 0], [1, 2, 3]], "durations": [0.5],'
            ' "easing": "CubicInOut", "dimensions": 3, "loop": true,'
            ' "trigger_on_click": true}'
        )
        config = PathConfig.from_dict(raw)
        assert config.waypoints == ((0.0, 0.0, 0.0), (1.0, 2.0, 3.0))
        assert config.durations == (0.5,)
        assert config.easing is EasingStyle.CUBIC_IN_OUT
        assert config.dimensions == 3
        assert config.loop
        assert config.trigger_on_click
        assert not config.autoplay_on_start

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="speed"):
            PathConfig.from_dict({"waypoints": [[0, 0]], "speed": 3})

    def test_missing_waypoints(self):
        with pytest.raises(ConfigurationError):
            PathConfig.from_dict({"loop": True})

    def test_malformed_waypoints(self):
        with pytest.raises(ConfigurationError):
            PathConfig.from_dict({"waypoints": [1, 2]})

    def test_to_dict_feeds_from_dict(self):
        config = PathConfig(
            waypoints=((0, 0), (5, 5)),
            durations=(2.0,),
            easing=EasingStyle.EXPO_OUT,
            autoplay_on_start=True,
        )
        data = config.to_dict()
        assert data["easing"] == "expo_out"
        assert PathConfig.from_dict(json.loads(json.dumps(data))) == config


class TestInvalidValues:
    """Non-numeric or malformed values surface as ConfigurationError."""

    def test_non_iterable_durations_from_dict(self):
        with pytest.raises(ConfigurationError, match="durations"):
            PathConfig.from_dict({"waypoints": [[1, 2]], "durations": 5})

    def test_non_numeric_duration(self):
        with pytest.raises(ConfigurationError):
            PathConfig(waypoints=((0, 0),), durations=("slow",))

    def test_non_numeric_default_duration(self):
        with pytest.raises(ConfigurationError):
            PathConfig(waypoints=((0, 0),), default_duration=None)

    def test_none_component(self):
        with pytest.raises(ConfigurationError, match="waypoint 0"):
            PathConfig(waypoints=((None, 1.0),))

    def test_non_numeric_component_from_dict(self):
        with pytest.raises(ConfigurationError, match="waypoint 1"):
            PathConfig.from_dict({"waypoints": [[0, 0], ["x", 1]]})

    def test_non_iterable_waypoint(self):
        with pytest.raises(ConfigurationError):
            PathConfig(waypoints=(3.0,))
