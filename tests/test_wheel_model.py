"""Tests for wheel geometry and resolution."""
import pytest

from habitarcade.wheel.model import (
    DEFAULT_WHEEL_VALUES,
    Segment,
    Wheel,
    default_wheel,
    resolve_segment_index,
)


class TestSegment:
    def test_rgb_from_hex(self):
        seg = Segment(label="5 XP", color="#4cc9f0", value=5)
        assert seg.rgb == (76, 201, 240)

    def test_negative_value_rejected(self):
        with pytest.raises(ValueError):
            Segment(label="bad", color="#000000", value=-1)

    @pytest.mark.parametrize("value", [2.5, 3.0, True, "5"])
    def test_non_integer_value_rejected(self, value):
        with pytest.raises(ValueError):
            Segment(label="bad", color="#000000", value=value)

    def test_bad_color_rejected(self):
        with pytest.raises(ValueError):
            Segment(label="bad", color="blue", value=1)

    def test_segments_are_immutable(self):
        seg = Segment(label="1 XP", color="#000000", value=1)
        with pytest.raises(AttributeError):
            seg.value = 3


class TestWheel:
    def test_empty_wheel_fails_fast(self):
        with pytest.raises(ValueError):
            Wheel([])

    def test_default_layout(self):
        wheel = default_wheel()
        assert len(wheel) == 8
        assert wheel.segment_angle == 45.0
        assert [s.value for s in wheel] == list(DEFAULT_WHEEL_VALUES)
        assert wheel[0].label == "5 XP"
        assert wheel[0].color == "#4cc9f0"
        assert wheel[1].color == "#3a4353"

    def test_rotation_zero_lands_on_first_segment(self):
        wheel = default_wheel()
        assert wheel.index_at(0) == 0
        assert wheel.segment_at(0).value == 5

    def test_rotation_46_lands_on_segment_six(self):
        # (360 - 46) % 360 = 314, floor(314 / 45) = 6
        wheel = default_wheel()
        assert wheel.index_at(46) == 6
        assert wheel.segment_at(46).value == 8

    def test_segment_boundaries(self):
        wheel = default_wheel()
        # Just past a boundary the previous wedge is under the indicator
        assert wheel.index_at(45.0) == 7
        assert wheel.index_at(44.9) == 7
        assert wheel.index_at(0.1) == 7
        assert wheel.index_at(315.0) == 1


class TestResolveSegmentIndex:
    @pytest.mark.parametrize("count", [1, 2, 3, 5, 7, 8, 12, 37])
    def test_index_always_in_range(self, count):
        steps = 3600
        for i in range(steps):
            rotation = 360.0 * i / steps
            idx = resolve_segment_index(rotation, count)
            assert 0 <= idx <= count - 1

    @pytest.mark.parametrize("rotation", [0.0, -0.0, 1e-300, 5e-15, 1e-13, 359.9999999999999, 359.99999])
    def test_wrap_boundary_stays_in_range(self, rotation):
        assert 0 <= resolve_segment_index(rotation, 8) <= 7

    def test_single_segment_wheel(self):
        assert resolve_segment_index(123.4, 1) == 0

    def test_zero_count_rejected(self):
        with pytest.raises(ValueError):
            resolve_segment_index(0.0, 0)
