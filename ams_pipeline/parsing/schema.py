from datetime import date as Date
from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import List, Optional

class StationRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    station_id: int = Field(ge=1)
    source_id: str = Field(min_length=1)
    name: str
    region: str
    latitude: float
    longitude: float
    years_of_data: int = Field(default=0, ge=0)

class Rainfall(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    value: float
    unit: str = "in"

class RainfallObservation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    station_id: int = Field(ge=1)
    date: Date
    year: int
    # None marks a gap-filled year
    rainfall: Optional[Rainfall] = None

    @model_validator(mode="after")
    def _year_matches_date(self) -> "RainfallObservation":
        if self.year != self.date.year:
            raise ValueError(f"year {self.year} does not match date {self.date.isoformat()}")
        return self

    @property
    def is_gap_filled(self) -> bool:
        return self.rainfall is None

class ArchiveHeader(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    raw: str
    fields: List[str] = Field(default_factory=list)
