"""Tests for species parameter models and loading."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from mosquito_suitability.reference import DEFAULT_SPECIES, SPECIES_A, SPECIES_B, load_species
from mosquito_suitability.schemas import BoundingBox, Species, SpeciesParameters

if TYPE_CHECKING:
    from pathlib import Path


class TestSpeciesParameters:
    """Validation happens once, at construction."""

    def test_valid(self) -> None:
        p = SpeciesParameters(tmin=8.7, tmax=39.6, scale=6.33e-5)
        assert p.tmin == 8.7
        assert p.tmax == 39.6
        assert p.scale == 6.33e-5

    def test_tmin_must_be_below_tmax(self) -> None:
        with pytest.raises(ValidationError, match="tmin"):
            SpeciesParameters(tmin=30.0, tmax=30.0, scale=1e-4)

    @pytest.mark.parametrize("scale", [0.0, -1e-5])
    def test_scale_must_be_positive(self, scale: float) -> None:
        with pytest.raises(ValidationError):
            SpeciesParameters(tmin=5.0, tmax=30.0, scale=scale)

    def test_immutable(self) -> None:
        p = SpeciesParameters(tmin=5.0, tmax=30.0, scale=1e-4)
        with pytest.raises(ValidationError):
            p.tmin = 1.0  # type: ignore[misc]

    def test_hashable(self) -> None:
        p = SpeciesParameters(tmin=5.0, tmax=30.0, scale=1e-4)
        assert p == SpeciesParameters(tmin=5.0, tmax=30.0, scale=1e-4)
        assert len({p, SpeciesParameters(tmin=5.0, tmax=30.0, scale=1e-4)}) == 1


class TestDefaultSpecies:
    def test_two_species(self) -> None:
        assert [s.key for s in DEFAULT_SPECIES] == ["species_a", "species_b"]

    def test_species_a_parameters(self) -> None:
        assert SPECIES_A.parameters == SpeciesParameters(tmin=8.7, tmax=39.6, scale=6.33e-5)

    def test_species_b_parameters(self) -> None:
        assert SPECIES_B.parameters == SpeciesParameters(tmin=0.1, tmax=38.5, scale=3.76e-5)


class TestLoadSpecies:
    def test_defaults_without_path(self) -> None:
        assert load_species() == list(DEFAULT_SPECIES)

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "species.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "key": "culex",
                        "name": " Culex pipiens ",
                        "parameters": {"tmin": 10.0, "tmax": 35.0, "scale": 5e-5},
                    }
                ]
            )
        )
        species = load_species(path)
        assert species == [
            Species(
                key="culex",
                name="Culex pipiens",
                parameters=SpeciesParameters(tmin=10.0, tmax=35.0, scale=5e-5),
            )
        ]

    def test_invalid_parameters_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "species.json"
        path.write_text(
            json.dumps(
                [{"key": "bad", "name": "Bad", "parameters": {"tmin": 40, "tmax": 10, "scale": 1}}]
            )
        )
        with pytest.raises(ValidationError):
            load_species(path)

    def test_duplicate_keys_rejected(self, tmp_path: Path) -> None:
        entry = {"key": "a", "name": "A", "parameters": {"tmin": 1, "tmax": 10, "scale": 1}}
        path = tmp_path / "species.json"
        path.write_text(json.dumps([entry, entry]))
        with pytest.raises(ValueError, match="Duplicate species keys"):
            load_species(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_species(tmp_path / "nope.json")


class TestBoundingBox:
    def test_default_region(self) -> None:
        bbox = BoundingBox.oregon_washington()
        assert bbox.south < bbox.north
        assert bbox.west < bbox.east

    def test_rejects_inverted_box(self) -> None:
        with pytest.raises(ValidationError):
            BoundingBox(south=10, west=0, north=5, east=1)

    def test_rejects_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            BoundingBox(south=-100, west=0, north=5, east=1)
