"""Tests for the slippytile.bbox module."""

import numpy as np
import pytest

from slippytile import (BBox, BBoxFieldCountError, BBoxNumberError,
                        BBoxParseError, SlippyTileError)


class TestGeometry:
    """Tests for the geometric queries."""

    def test_contains_is_half_open(self):
        """contains should include the lower edges and exclude the upper ones."""
        bbox = BBox(0.0, 0.0, 10.0, 5.0)
        assert bbox.contains(0.0, 0.0)
        assert bbox.contains(9.999, 4.999)
        assert not bbox.contains(10.0, 2.0)
        assert not bbox.contains(2.0, 5.0)
        assert not bbox.contains(-0.001, 2.0)

    def test_width_and_height(self):
        """width and height should be the extent along each axis."""
        bbox = BBox(-2.0, 1.0, 3.0, 7.5)
        assert bbox.width() == 5.0
        assert bbox.height() == 6.5

    def test_inverted_box_has_negative_size(self):
        """An inverted box is not rejected and reports a negative size."""
        bbox = BBox(3.0, 3.0, 1.0, 2.0)
        assert bbox.width() == -2.0
        assert bbox.height() == -1.0
        assert not bbox.contains(2.0, 2.5)

    def test_to_buffered_grows(self):
        """to_buffered should move every side outwards."""
        assert BBox(0.0, 0.0, 10.0, 10.0).to_buffered(2.5) == BBox(-2.5, -2.5, 12.5, 12.5)

    def test_to_buffered_negative_shrinks(self):
        """A negative buffer should shrink the box."""
        assert BBox(0.0, 0.0, 10.0, 10.0).to_buffered(-1.0) == BBox(1.0, 1.0, 9.0, 9.0)

    def test_is_immutable(self):
        """BBox should be a frozen value."""
        bbox = BBox(0.0, 0.0, 1.0, 1.0)
        with pytest.raises(AttributeError):
            bbox.min_x = 5.0


class TestConversions:
    """Tests for sequence and tuple conversions."""

    def test_to_tuple_order(self):
        """to_tuple should use min_x, min_y, max_x, max_y order."""
        assert BBox(1.0, 2.0, 3.0, 4.0).to_tuple() == (1.0, 2.0, 3.0, 4.0)

    def test_to_list_order(self):
        """to_list should use min_x, min_y, max_x, max_y order."""
        assert BBox(1.0, 2.0, 3.0, 4.0).to_list() == [1.0, 2.0, 3.0, 4.0]

    def test_iteration_unpacks(self):
        """Iterating a box should yield its four values."""
        min_x, min_y, max_x, max_y = BBox(1.0, 2.0, 3.0, 4.0)
        assert (min_x, min_y, max_x, max_y) == (1.0, 2.0, 3.0, 4.0)

    def test_from_tuple(self):
        """from_tuple should read the fixed field order."""
        assert BBox.from_tuple((1.0, 2.0, 3.0, 4.0)) == BBox(1.0, 2.0, 3.0, 4.0)

    def test_from_sequence_accepts_numpy(self):
        """from_sequence should accept a numpy array."""
        bbox = BBox.from_sequence(np.array([1.0, 2.0, 3.0, 4.0]))
        assert bbox == BBox(1.0, 2.0, 3.0, 4.0)
        assert type(bbox.min_x) is float

    def test_from_sequence_wrong_length(self):
        """from_sequence should reject anything but four values."""
        with pytest.raises(ValueError):
            BBox.from_sequence([1.0, 2.0, 3.0])


class TestText:
    """Tests for formatting and parsing."""

    def test_str_format(self):
        """str should join the four values with commas."""
        assert str(BBox(1.0, -2.5, 3.0, 4.25)) == "1.0,-2.5,3.0,4.25"

    @pytest.mark.parametrize("bbox", [
        BBox(0.0, 0.0, 0.0, 0.0),
        BBox(-20037508.342789244, -20037508.342789244,
             20037508.342789244, 20037508.342789244),
        BBox(0.1, 0.2, 0.30000000000000004, 1e-300),
    ])
    def test_round_trip(self, bbox):
        """Parsing the text form should reproduce the box."""
        assert BBox.parse(str(bbox)) == bbox

    def test_parse_strips_whitespace(self):
        """Whitespace around the fields should be ignored."""
        assert BBox.parse(" 1 ,2,\t3 , 4\n") == BBox(1.0, 2.0, 3.0, 4.0)

    def test_from_str_alias(self):
        """from_str should behave like parse."""
        assert BBox.from_str("1,2,3,4") == BBox(1.0, 2.0, 3.0, 4.0)

    @pytest.mark.parametrize("text", ["", "1,2,3", "1,2,3,4,5", "1;2;3;4"])
    def test_wrong_field_count(self, text):
        """Field counts other than four should raise BBoxFieldCountError."""
        with pytest.raises(BBoxFieldCountError) as excinfo:
            BBox.parse(text)
        assert "Expected exactly 4 comma-separated values" in str(excinfo.value)

    def test_bad_number_wraps_cause(self):
        """A bad field should raise BBoxNumberError wrapping the float error."""
        with pytest.raises(BBoxNumberError) as excinfo:
            BBox.parse("1, abc ,3,4")
        err = excinfo.value
        assert err.field == "abc"
        assert isinstance(err.__cause__, ValueError)
        assert str(err) == str(err.__cause__)

    @pytest.mark.parametrize("text", ["1_000,0,1,1", "0,0,1,1_0", "0, 1_0.5 ,1,1"])
    def test_digit_separators_rejected(self, text):
        """Underscore digit separators should be a number error."""
        with pytest.raises(BBoxNumberError) as excinfo:
            BBox.parse(text)
        assert "_" in excinfo.value.field
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_empty_field_is_number_error(self):
        """An empty field counts as a bad number, not a bad count."""
        with pytest.raises(BBoxNumberError):
            BBox.parse("1,,3,4")

    def test_error_hierarchy(self):
        """Both parse errors should be catchable as ValueError."""
        for text in ["1,2", "1,2,x,4"]:
            with pytest.raises(BBoxParseError):
                BBox.parse(text)
            with pytest.raises(SlippyTileError):
                BBox.parse(text)
            with pytest.raises(ValueError):
                BBox.parse(text)
