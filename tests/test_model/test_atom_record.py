"""Tests for AtomRecord and Element."""

import numpy as np
import pytest

from linstead.model import AtomRecord, Element, atoms_to_arrays


class TestElement:
    @pytest.mark.parametrize("symbol, expected", [
        ("C", Element.CARBON),
        ("zn", Element.ZINC),
        ("ZN", Element.ZINC),
        (" F ", Element.FLUORINE),
    ])
    def test_from_symbol(self, symbol, expected):
        assert Element.from_symbol(symbol) is expected

    def test_unsupported_symbol_raises(self):
        with pytest.raises(ValueError, match="Unsupported element"):
            Element.from_symbol("Fe")


class TestAtomRecord:
    def test_position(self):
        atom = AtomRecord(Element.NITROGEN, 1.0, 2.0, 3.0)
        np.testing.assert_allclose(atom.position, [1.0, 2.0, 3.0])

    def test_atoms_to_arrays(self):
        atoms = [
            AtomRecord(Element.ZINC, 0.0, 0.0, 0.0),
            AtomRecord(Element.FLUORINE, 1.0, 2.0, 3.0),
        ]
        species, coords = atoms_to_arrays(atoms)
        assert species == ["Zn", "F"]
        assert coords.shape == (2, 3)

    def test_atoms_to_arrays_empty(self):
        species, coords = atoms_to_arrays([])
        assert species == []
        assert coords.shape == (0, 3)
