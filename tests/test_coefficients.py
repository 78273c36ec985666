"""
Tests para el coeficiente C ponderado y la tabla de usos de suelo.
"""

import itertools

import pytest

from hidrocanal.config import LandUseAllocation
from hidrocanal.core.coefficients import (
    LAND_USE_C_TABLE,
    LandUseEntry,
    allocation_from_table,
    total_area,
    weighted_coefficient,
)


def _alloc(label, c, area):
    return LandUseAllocation(label=label, coefficient=c, area_m2=area)


class TestWeightedCoefficient:
    """Tests para weighted_coefficient."""

    def test_two_land_uses(self):
        """C = Σ(A×C)/ΣA."""
        allocations = [_alloc("A", 0.9, 100.0), _alloc("B", 0.3, 300.0)]
        assert weighted_coefficient(allocations) == pytest.approx(0.45)

    def test_single_allocation_returns_its_c(self):
        """Con un solo uso, C ponderado = C del uso."""
        assert weighted_coefficient([_alloc("Techos", 0.87, 523.0)]) == pytest.approx(0.87)

    def test_permutation_invariance(self):
        """El orden de los usos no cambia el resultado."""
        allocations = [
            _alloc("A", 0.95, 1200.0),
            _alloc("B", 0.35, 800.0),
            _alloc("C", 0.12, 4500.5),
        ]
        expected = weighted_coefficient(allocations)
        for perm in itertools.permutations(allocations):
            assert weighted_coefficient(list(perm)) == expected

    def test_rounded_to_two_decimals(self, land_uses):
        """(0.9×12000 + 0.2×7274.25) / 19274.25 = 0.6358 → 0.64."""
        assert weighted_coefficient(land_uses) == 0.64

    def test_empty_returns_none(self):
        """Sin usos de suelo no hay C (precondición no cumplida)."""
        assert weighted_coefficient([]) is None

    def test_empty_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="hidrocanal"):
            weighted_coefficient([])
        assert "sin usos de suelo" in caplog.text

    def test_result_within_bounds(self):
        """C ponderado queda entre el mínimo y el máximo de los usos."""
        allocations = [_alloc("A", 0.2, 10.0), _alloc("B", 0.8, 30.0), _alloc("C", 0.5, 5.0)]
        c = weighted_coefficient(allocations)
        assert 0.2 <= c <= 0.8


class TestTotalArea:
    """Tests para total_area."""

    def test_sum(self, land_uses):
        assert total_area(land_uses) == pytest.approx(19274.25)

    def test_empty(self):
        assert total_area([]) == 0


class TestLandUseTable:
    """Tests para LAND_USE_C_TABLE."""

    def test_entries_valid(self):
        """Todos los rangos dentro de [0, 1] y ordenados."""
        assert len(LAND_USE_C_TABLE) > 0
        for entry in LAND_USE_C_TABLE:
            assert isinstance(entry, LandUseEntry)
            assert 0 <= entry.c_min <= entry.c_max <= 1
            assert entry.c_min <= entry.c_recommended <= entry.c_max

    def test_recommended_uses_typical(self):
        entry = LandUseEntry("X", "y", 0.5, 0.7, 0.65)
        assert entry.c_recommended == 0.65

    def test_recommended_falls_back_to_midpoint(self):
        """Sin valor típico se usa el promedio del rango."""
        entry = LandUseEntry("X", "y", 0.25, 0.40)
        assert entry.c_recommended == pytest.approx(0.325)

    def test_label_and_range(self):
        entry = LandUseEntry("Comercial", "Centro", 0.7, 0.95)
        assert entry.label == "Comercial - Centro"
        assert entry.c_range == "0.70-0.95"


class TestAllocationFromTable:
    """Tests para allocation_from_table."""

    def test_uses_recommended_c(self):
        alloc = allocation_from_table(0, 1500.0)
        entry = LAND_USE_C_TABLE[0]
        assert alloc.label == entry.label
        assert alloc.coefficient == entry.c_recommended
        assert alloc.area_m2 == 1500.0

    def test_index_out_of_range(self):
        with pytest.raises(ValueError, match="fuera de rango"):
            allocation_from_table(len(LAND_USE_C_TABLE), 100.0)

    def test_negative_index(self):
        with pytest.raises(ValueError):
            allocation_from_table(-1, 100.0)
