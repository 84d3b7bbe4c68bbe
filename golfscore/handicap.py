"""Handicap stroke allocation and net scores."""

import math
from typing import Iterable, Optional

from .constants import HOLES_PER_ROUND
from .models import Hole, Player, Round


def resolve_playing_handicap(handicap: float, use_half_handicap: bool = False) -> int:
    """
    Round a playing handicap to whole strokes.

    Halves round away from zero, so 12.5 -> 13 and -2.5 -> -3.

    Args:
        handicap: Playing handicap (negative for plus players)
        use_half_handicap: Halve the handicap before rounding

    Returns:
        Handicap in whole strokes
    """
    value = handicap / 2.0 if use_half_handicap else handicap
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def strokes_on_hole(handicap: float, stroke_index: int, holes: int = HOLES_PER_ROUND) -> int:
    """
    Number of strokes a player receives on a hole.

    Every hole gets handicap // holes strokes; the remainder goes one each
    to the holes ranked hardest (stroke index 1 first). A plus handicap
    mirrors this and gives strokes back on the same holes, so the result
    is negative there.

    Examples:
        strokes_on_hole(9, 7) -> 1
        strokes_on_hole(20, 2) -> 2
        strokes_on_hole(-2, 1) -> -1

    Args:
        handicap: Playing handicap
        stroke_index: Difficulty rank of the hole (1 = hardest)
        holes: Number of holes strokes are spread over

    Returns:
        Strokes received (negative means strokes given back)
    """
    whole = resolve_playing_handicap(handicap)
    if whole < 0:
        return -strokes_on_hole(-whole, stroke_index, holes)

    base, extra = divmod(whole, holes)
    return base + (1 if stroke_index <= extra else 0)


def player_gets_stroke_on_hole(handicap: float, stroke_index: int) -> bool:
    """Whether the player receives at least one stroke on the hole."""
    return strokes_on_hole(handicap, stroke_index) >= 1


def net_score(gross: Optional[int], handicap: float, stroke_index: int) -> Optional[int]:
    """
    Gross score less handicap strokes. None when there is no gross score.

    Not clamped: a plus player's net can exceed their gross.
    """
    if gross is None:
        return None
    return gross - strokes_on_hole(handicap, stroke_index)


def stroke_allocation(handicap: float, holes: Iterable[Hole]) -> dict[int, int]:
    """Strokes received on every hole, keyed by hole number."""
    return {hole.number: strokes_on_hole(handicap, hole.stroke_index) for hole in holes}


def effective_handicap(round_: Round, player: Player) -> int:
    """Player's handicap in whole strokes under the round's allowance."""
    return resolve_playing_handicap(player.handicap, round_.use_half_handicap)


def net_score_for_hole(round_: Round, player_id: str, hole_number: int) -> Optional[int]:
    """Net score of one player on one hole of a round, or None if unscored."""
    player = round_.player(player_id)
    hole = round_.course.hole(hole_number)
    if player is None or hole is None:
        return None
    return net_score(
        round_.gross(player_id, hole_number),
        effective_handicap(round_, player),
        hole.stroke_index,
    )


def net_scores_for_hole(round_: Round, hole_number: int) -> dict[str, int]:
    """Net scores of every player who has scored the hole."""
    nets = {}
    for player in round_.players:
        net = net_score_for_hole(round_, player.id, hole_number)
        if net is not None:
            nets[player.id] = net
    return nets
