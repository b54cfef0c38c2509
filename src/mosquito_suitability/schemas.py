"""
Domain models for mosquito suitability.

Pydantic models for configuration-time values. Validation happens once,
when a model is constructed; downstream code assumes valid instances.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# Species
# =============================================================================


class SpeciesParameters(BaseModel):
    """Briere reaction-norm parameters for one species.

    ``tmin``/``tmax`` are the lower and upper developmental thresholds in
    degrees Celsius; ``scale`` is the fitted rate coefficient.
    """

    model_config = ConfigDict(frozen=True)

    tmin: float = Field(..., description="Lower developmental threshold (deg C)")
    tmax: float = Field(..., description="Upper developmental threshold (deg C)")
    scale: float = Field(..., gt=0, description="Rate-scaling coefficient")

    @model_validator(mode="after")
    def _check_thresholds(self) -> SpeciesParameters:
        if not self.tmin < self.tmax:
            msg = f"tmin ({self.tmin}) must be below tmax ({self.tmax})"
            raise ValueError(msg)
        return self


class Species(BaseModel):
    """A named species with its reaction-norm parameters."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    key: str = Field(..., min_length=1, description="Short identifier, e.g. 'species_a'")
    name: str = Field(..., min_length=1, description="Display name")
    parameters: SpeciesParameters


# =============================================================================
# Geographic
# =============================================================================


class BoundingBox(BaseModel):
    """Geographic bounding box for the study region."""

    south: float = Field(..., ge=-90, le=90)
    west: float = Field(..., ge=-180, le=180)
    north: float = Field(..., ge=-90, le=90)
    east: float = Field(..., ge=-180, le=180)

    @model_validator(mode="after")
    def _check_order(self) -> BoundingBox:
        if self.south >= self.north or self.west >= self.east:
            msg = "Bounding box must have south < north and west < east"
            raise ValueError(msg)
        return self

    @classmethod
    def oregon_washington(cls) -> BoundingBox:
        """Default bbox for OR/WA region."""
        return cls(south=41.99, west=-124.57, north=49.0, east=-116.46)
