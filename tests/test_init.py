"""Tests for the mapgeom package exports."""

import mapgeom


class TestPackageExports:
    """Tests for package-level exports."""

    def test_functions_are_accessible(self):
        """All conversion and generation functions should be exported."""
        for name in ("point_to_geo", "multi_point_to_geo", "multi_geo_to_point",
                     "multi_line_to_geo", "multi_geo_line_to_multi_line",
                     "multi_polygon_to_geo", "multi_geo_polygon_to_multi_polygon",
                     "get_circle", "get_background"):
            assert callable(getattr(mapgeom, name))

    def test_all_matches_exports(self):
        """__all__ should only name existing attributes."""
        for name in mapgeom.__all__:
            assert hasattr(mapgeom, name)

    def test_config_is_accessible(self):
        """mapgeom.config should be accessible."""
        assert hasattr(mapgeom, 'config')
