"""Tests for the public package interface."""

import linstead


class TestPublicApi:
    def test_all_names_importable(self):
        for name in linstead.__all__:
            assert hasattr(linstead, name), name

    def test_core_entry_points(self):
        from linstead import ViewerSession, create_mpl_surface, generate

        assert callable(generate)
        assert callable(create_mpl_surface)
        assert ViewerSession.__name__ == "ViewerSession"

    def test_catalogue_exposed(self):
        assert [c.id for c in linstead.COMPOUNDS][:2] == ["H16", "F16"]
