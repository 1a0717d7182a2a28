"""Tests for the mapgeom.coords module."""

import dataclasses

import numpy as np
import pytest

from mapgeom import coords
from mapgeom.coords import GeoPoint, GeoPolygon


class TestPointToGeo:
    """Tests for the point_to_geo function."""

    def test_relabels_coordinates(self):
        """point_to_geo should map x to longitude and y to latitude."""
        assert coords.point_to_geo([12.5, -33.0]) == GeoPoint(longitude=12.5, latitude=-33.0)

    def test_passes_out_of_range_values(self):
        """point_to_geo should not clip values outside the valid range."""
        geo_point = coords.point_to_geo([540, -200])
        assert geo_point.longitude == 540
        assert geo_point.latitude == -200

    def test_accepts_tuples_and_arrays(self):
        """point_to_geo should accept any indexable pair."""
        assert coords.point_to_geo((1, 2)) == GeoPoint(1, 2)
        assert coords.point_to_geo(np.array([1.0, 2.0])) == GeoPoint(1.0, 2.0)

    def test_geo_point_is_frozen(self):
        """GeoPoint should be immutable."""
        geo_point = GeoPoint(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            geo_point.longitude = 3


class TestMultiPoint:
    """Tests for multi_point_to_geo and multi_geo_to_point."""

    def test_round_trip(self):
        """Converting to geo-points and back should return the input."""
        points = [[0, 0], [-179.5, 89.9], [45.25, -10.125], [0, 0]]
        assert coords.multi_geo_to_point(coords.multi_point_to_geo(points)) == points

    def test_preserves_order_and_duplicates(self):
        """multi_point_to_geo should keep every point in order."""
        points = [[3, 3], [1, 1], [3, 3]]
        geo_points = coords.multi_point_to_geo(points)
        assert [p.longitude for p in geo_points] == [3, 1, 3]

    def test_empty(self):
        """Empty sequences should convert to empty lists."""
        assert coords.multi_point_to_geo([]) == []
        assert coords.multi_geo_to_point([]) == []


class TestMultiLine:
    """Tests for multi_line_to_geo and multi_geo_line_to_multi_line."""

    def test_keeps_segments_separate(self, sample_multi_line):
        """multi_line_to_geo should convert each stroke on its own."""
        multi_geo_line = coords.multi_line_to_geo(sample_multi_line)
        assert len(multi_geo_line) == 2
        assert len(multi_geo_line[0]) == 3
        assert multi_geo_line[1][0] == GeoPoint(100, -45)

    def test_round_trip(self, sample_multi_line):
        """multi_geo_line_to_multi_line should invert multi_line_to_geo."""
        multi_geo_line = coords.multi_line_to_geo(sample_multi_line)
        assert coords.multi_geo_line_to_multi_line(multi_geo_line) == sample_multi_line

    def test_matches_point_conversion(self, sample_multi_line):
        """The explicit inverse should agree with multi_geo_to_point per line."""
        multi_geo_line = coords.multi_line_to_geo(sample_multi_line)
        expected = [coords.multi_geo_to_point(line) for line in multi_geo_line]
        assert coords.multi_geo_line_to_multi_line(multi_geo_line) == expected

    def test_empty_segment(self):
        """Empty segments should stay in place."""
        assert coords.multi_geo_line_to_multi_line([[], [GeoPoint(1, 2)]]) == [[], [[1, 2]]]


class TestMultiPolygon:
    """Tests for multi_polygon_to_geo and multi_geo_polygon_to_multi_polygon."""

    def test_surface_and_hole(self, sample_multi_polygon):
        """Both rings should land in their own slots."""
        multi_geo_polygon = coords.multi_polygon_to_geo(sample_multi_polygon)
        assert len(multi_geo_polygon) == 2
        assert multi_geo_polygon[0].surface[1] == GeoPoint(10, 0)
        assert multi_geo_polygon[0].hole[0] == GeoPoint(2, 2)
        assert multi_geo_polygon[1].hole is None

    def test_round_trip(self, sample_multi_polygon):
        """Converting to geo and back should return the input."""
        multi_geo_polygon = coords.multi_polygon_to_geo(sample_multi_polygon)
        assert coords.multi_geo_polygon_to_multi_polygon(multi_geo_polygon) == sample_multi_polygon

    def test_hole_without_surface_keeps_slot(self):
        """A hole without surface should stay in slot 1."""
        hole = [[1, 1], [2, 1], [2, 2]]
        multi_geo_polygon = coords.multi_polygon_to_geo([[None, hole]])
        assert multi_geo_polygon[0].surface is None
        assert multi_geo_polygon[0].hole == coords.multi_point_to_geo(hole)

        multi_polygon = coords.multi_geo_polygon_to_multi_polygon(multi_geo_polygon)
        assert multi_polygon == [[None, hole]]

    def test_polygon_without_rings(self):
        """A polygon without rings should convert to an empty polygon."""
        multi_geo_polygon = coords.multi_polygon_to_geo([[]])
        assert multi_geo_polygon == [GeoPolygon(None, None)]
        assert coords.multi_geo_polygon_to_multi_polygon(multi_geo_polygon) == [[]]

    def test_empty_ring_is_present(self):
        """An empty ring is present, only None marks an absent ring."""
        multi_geo_polygon = coords.multi_polygon_to_geo([[[]]])
        assert multi_geo_polygon[0].surface == []
        assert coords.multi_geo_polygon_to_multi_polygon(multi_geo_polygon) == [[[]]]

    def test_accepts_plain_sequences(self):
        """Geo polygons given as plain lists should convert as well."""
        multi_polygon = coords.multi_geo_polygon_to_multi_polygon(
            [[[GeoPoint(1, 2), GeoPoint(3, 4)]]])
        assert multi_polygon == [[[[1, 2], [3, 4]]]]
