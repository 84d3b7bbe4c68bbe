"""Pydantic schemas for JSON data validation."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator, model_validator

from .constants import (
    DEFAULT_STABLEFORD_BANDS,
    MAX_PAR,
    MIN_PAR,
    SEGMENT_HOLES,
    STABLEFORD_MAX_POINTS,
    STABLEFORD_MIN_POINTS,
)


class StablefordBand(BaseModel):
    """Points for a closed range of scores relative to par. None is an open end."""

    model_config = ConfigDict(extra='forbid')

    name: str = Field(..., min_length=1)
    low: Optional[int] = None
    high: Optional[int] = None
    points: int = Field(..., ge=STABLEFORD_MIN_POINTS, le=STABLEFORD_MAX_POINTS)

    @model_validator(mode='after')
    def validate_range(self):
        """Ensure the band's range is not inverted."""
        if self.low is not None and self.high is not None and self.low > self.high:
            raise ValueError(f'Band {self.name} has low {self.low} above high {self.high}')
        return self

    def contains(self, relative_to_par: int) -> bool:
        if self.low is not None and relative_to_par < self.low:
            return False
        if self.high is not None and relative_to_par > self.high:
            return False
        return True


class StablefordTable(BaseModel):
    """Stableford point table: ordered bands covering every score."""

    model_config = ConfigDict(extra='forbid')

    bands: list[StablefordBand]

    @field_validator('bands')
    @classmethod
    def validate_bands(cls, v):
        """Ensure bands run best to worst with no gaps or overlaps."""
        if not v:
            raise ValueError('Stableford table needs at least one band')
        if v[0].low is not None:
            raise ValueError(f'First band {v[0].name} must be open below')
        if v[-1].high is not None:
            raise ValueError(f'Last band {v[-1].name} must be open above')
        names = [band.name for band in v]
        if len(set(names)) != len(names):
            raise ValueError('Band names must be unique')
        for previous, band in zip(v, v[1:]):
            if previous.high is None or band.low is None or band.low != previous.high + 1:
                raise ValueError(f'Band {band.name} does not follow {previous.name}')
        return v

    @classmethod
    def default(cls) -> 'StablefordTable':
        """The standard table: 5, 4, 3, 2, 1, 0 from double eagle down."""
        return cls(
            bands=[
                StablefordBand(name=name, low=low, high=high, points=points)
                for name, (low, high, points) in DEFAULT_STABLEFORD_BANDS.items()
            ]
        )

    def points_by_band(self) -> dict[str, int]:
        return {band.name: band.points for band in self.bands}

    def with_points(self, **points: int) -> 'StablefordTable':
        """Copy of the table with some bands' points replaced."""
        unknown = set(points) - {band.name for band in self.bands}
        if unknown:
            raise ValueError(f'Unknown Stableford bands: {", ".join(sorted(unknown))}')
        return StablefordTable(
            bands=[
                StablefordBand(
                    name=band.name,
                    low=band.low,
                    high=band.high,
                    points=points.get(band.name, band.points),
                )
                for band in self.bands
            ]
        )


class HoleEntry(BaseModel):
    """Hole in a course definition."""

    model_config = ConfigDict(extra='forbid')

    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=MIN_PAR, le=MAX_PAR)
    stroke_index: int = Field(..., ge=1, le=18)
    yardages: dict[str, int] = Field(default_factory=dict)


class CourseEntry(BaseModel):
    """Course definition."""

    model_config = ConfigDict(extra='forbid')

    name: str = Field(..., min_length=1)
    holes: list[HoleEntry]

    @field_validator('holes')
    @classmethod
    def validate_holes(cls, v):
        """Ensure hole numbers and stroke indexes are unique."""
        numbers = [h.number for h in v]
        if len(set(numbers)) != len(numbers):
            raise ValueError('Duplicate hole numbers')
        indexes = [h.stroke_index for h in v]
        if len(set(indexes)) != len(indexes):
            raise ValueError('Duplicate stroke indexes')
        return v


class PlayerEntry(BaseModel):
    """Player in a round."""

    model_config = ConfigDict(extra='forbid')

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    handicap: float = Field(default=0.0, ge=-10, le=54)


class PressEntry(BaseModel):
    """Press recorded on a round."""

    model_config = ConfigDict(extra='forbid')

    segment: Literal['front9', 'back9']
    starting_hole: int = Field(..., ge=1, le=18)
    initiating_team: str = Field(..., min_length=1)

    @model_validator(mode='after')
    def validate_starting_hole(self):
        """Ensure the press starts on a hole of its own nine."""
        first, last = SEGMENT_HOLES[self.segment]
        if not first <= self.starting_hole <= last:
            raise ValueError(
                f'{self.segment} press cannot start on hole {self.starting_hole} '
                f'(expected {first}-{last})'
            )
        return self


class SkinsEntry(BaseModel):
    """Skins stakes."""

    model_config = ConfigDict(extra='forbid')

    carryover: bool = True
    pot_per_player: Optional[float] = Field(None, ge=0)
    value_per_skin: Optional[float] = Field(None, ge=0)


class RoundFile(BaseModel):
    """Complete round JSON file structure."""

    model_config = ConfigDict(extra='forbid')

    course: CourseEntry
    players: list[PlayerEntry]
    game_format: Literal[
        'stroke',
        'bestball',
        'bestball_matchplay',
        'nassau',
        'skins',
        'stableford',
        'team_stableford',
        'scramble',
    ] = 'stroke'
    teams: dict[str, list[str]] = Field(default_factory=dict)
    scores: dict[int, dict[str, PositiveInt]] = Field(default_factory=dict)
    presses: list[PressEntry] = Field(default_factory=list)
    skins: SkinsEntry = Field(default_factory=SkinsEntry)
    use_half_handicap: bool = False

    @field_validator('players')
    @classmethod
    def validate_players(cls, v):
        """Ensure player ids are unique."""
        ids = [p.id for p in v]
        if len(set(ids)) != len(ids):
            raise ValueError('Duplicate player ids')
        return v
