"""Data models for golfscore."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from .constants import SEGMENT_HOLES, SEGMENT_LABELS


class Segment(str, Enum):
    """One of the three Nassau matches."""

    FRONT_NINE = 'front9'
    BACK_NINE = 'back9'
    OVERALL = 'overall'

    @property
    def holes(self) -> range:
        start, end = SEGMENT_HOLES[self.value]
        return range(start, end + 1)

    @property
    def label(self) -> str:
        return SEGMENT_LABELS[self.value]


class GameFormat(str, Enum):
    """Game formats a round can be settled under."""

    STROKE_PLAY = 'stroke'
    BEST_BALL_STROKE = 'bestball'
    BEST_BALL_MATCH = 'bestball_matchplay'
    NASSAU = 'nassau'
    SKINS = 'skins'
    STABLEFORD = 'stableford'
    TEAM_STABLEFORD = 'team_stableford'
    SCRAMBLE = 'scramble'


@dataclass(frozen=True)
class Player:
    """A golfer and their resolved playing handicap."""
    id: str
    name: str
    handicap: float = 0.0  # negative for plus players


@dataclass(frozen=True)
class Hole:
    """A hole on the course."""
    number: int
    par: int
    stroke_index: int  # 1 = hardest
    yardages: Dict[str, int] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True)
class Course:
    """Course layout: holes keyed by number."""
    name: str
    holes: Tuple[Hole, ...] = ()

    def hole(self, number: int) -> Optional[Hole]:
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    @property
    def hole_numbers(self) -> list[int]:
        return sorted(h.number for h in self.holes)

    @property
    def par(self) -> int:
        return sum(h.par for h in self.holes)


@dataclass(frozen=True)
class Press:
    """A press laid on the Front 9 or Back 9 match. Never mutated."""
    segment: Segment
    starting_hole: int
    initiating_team: str


@dataclass(frozen=True)
class SkinsConfig:
    """
    Skins stakes.

    A positive pot_per_player selects the pot policy; otherwise a positive
    value_per_skin selects the per-skin policy. Neither means no money.
    """
    carryover: bool = True
    pot_per_player: Optional[float] = None
    value_per_skin: Optional[float] = None

    @property
    def uses_pot(self) -> bool:
        return bool(self.pot_per_player and self.pot_per_player > 0)

    @property
    def uses_value_per_skin(self) -> bool:
        return not self.uses_pot and bool(self.value_per_skin and self.value_per_skin > 0)


@dataclass(frozen=True)
class Round:
    """
    Immutable snapshot of everything the engine settles.

    scores[hole_number][player_id] = gross strokes. A missing entry means
    the player has not holed out yet.
    """
    course: Course
    players: Tuple[Player, ...]
    scores: Mapping[int, Mapping[str, int]] = field(default_factory=dict)
    teams: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    presses: Tuple[Press, ...] = ()
    game_format: GameFormat = GameFormat.STROKE_PLAY
    skins: SkinsConfig = field(default_factory=SkinsConfig)
    use_half_handicap: bool = False

    def player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def gross(self, player_id: str, hole_number: int) -> Optional[int]:
        return self.scores.get(hole_number, {}).get(player_id)

    @property
    def team_names(self) -> list[str]:
        return sorted(self.teams)

    def team_players(self, team: str) -> list[Player]:
        member_ids = self.teams.get(team, ())
        return [p for p in self.players if p.id in member_ids]


@dataclass(frozen=True)
class MatchSide:
    """One side of a match: a name and its net score per decided hole."""
    name: str
    scores: Mapping[int, int]


@dataclass(frozen=True)
class MatchStatus:
    """Running state of a head-to-head match over a hole range."""
    status: str
    side_a: str
    side_b: str
    side_a_holes_up: int = 0
    side_b_holes_up: int = 0
    holes_played: int = 0
    holes_remaining: int = 0
    is_closed: bool = False  # won outright, or dormie with holes left
    is_finished: bool = False  # result is final and worth points

    @property
    def leader(self) -> Optional[str]:
        if self.side_a_holes_up > 0:
            return self.side_a
        if self.side_b_holes_up > 0:
            return self.side_b
        return None

    @property
    def holes_up(self) -> int:
        return max(self.side_a_holes_up, self.side_b_holes_up)


@dataclass(frozen=True)
class PressOption:
    """A press the losing side is currently allowed to make."""
    segment: Segment
    losing_team: str
    holes_down: int
    next_hole: int


@dataclass(frozen=True)
class SkinsHoleResult:
    """Skins outcome of one hole."""
    hole: int
    winner: Optional[str] = None
    skins: int = 0
    contested: bool = False
    carryover_after: int = 0
