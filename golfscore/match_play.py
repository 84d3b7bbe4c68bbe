"""Hole-by-hole match play between two sides."""

from typing import Iterable, Optional

from .constants import ALL_SQUARE
from .models import MatchSide, MatchStatus


def hole_winner(side_a: MatchSide, side_b: MatchSide, hole_number: int) -> Optional[str]:
    """
    Winner of a single hole.

    Returns:
        Name of the side with the lower net score, or None if the hole is
        halved or not yet decided (either side missing a score)
    """
    a = side_a.scores.get(hole_number)
    b = side_b.scores.get(hole_number)
    if a is None or b is None:
        return None
    if a < b:
        return side_a.name
    if b < a:
        return side_b.name
    return None


def _is_decided(side_a: MatchSide, side_b: MatchSide, hole_number: int) -> bool:
    return hole_number in side_a.scores and hole_number in side_b.scores


def _margin(side_a: MatchSide, side_b: MatchSide, holes: Iterable[int]) -> int:
    margin = 0
    for hole_number in holes:
        winner = hole_winner(side_a, side_b, hole_number)
        if winner == side_a.name:
            margin += 1
        elif winner == side_b.name:
            margin -= 1
    return margin


def _status_text(leader: Optional[str], up: int, remaining: int, closed: bool) -> str:
    if leader is None:
        return ALL_SQUARE
    if not closed:
        return f'{leader} {up} UP'
    if remaining > 0:
        return f'{leader} wins {up} & {remaining}'
    return f'{leader} wins {up} UP'


def _build_status(
    side_a: MatchSide,
    side_b: MatchSide,
    margin: int,
    played: int,
    remaining: int,
    closed: bool,
    finished: bool,
) -> MatchStatus:
    up = abs(margin)
    leader = side_a.name if margin > 0 else side_b.name if margin < 0 else None
    return MatchStatus(
        status=_status_text(leader, up, remaining, closed),
        side_a=side_a.name,
        side_b=side_b.name,
        side_a_holes_up=max(0, margin),
        side_b_holes_up=max(0, -margin),
        holes_played=played,
        holes_remaining=remaining,
        is_closed=closed,
        is_finished=finished,
    )


def match_status(side_a: MatchSide, side_b: MatchSide, holes: Iterable[int]) -> MatchStatus:
    """
    Status of a match over a range of holes.

    A hole counts only once both sides have a score on it. The result is
    frozen once the leader is more holes up than there are holes left; it
    is evaluated in hole order, so a match won on hole 15 keeps its
    "4 & 3" result even if the remaining holes are played out.

    A dormie match (as many up as holes left) reads as closed, so no press
    can be laid on it, but it is not finished until those holes are
    played: the trailing side can still halve it.

    Args:
        side_a: First side
        side_b: Second side
        holes: Hole numbers in the match (e.g. range(1, 10))

    Returns:
        MatchStatus with the holes-up count for each side
    """
    holes = sorted(holes)
    total = len(holes)
    if not total:
        return _build_status(side_a, side_b, 0, 0, 0, closed=False, finished=False)

    # Walk the holes in order while they are decided
    margin = 0
    for index, hole_number in enumerate(holes):
        if not _is_decided(side_a, side_b, hole_number):
            break
        winner = hole_winner(side_a, side_b, hole_number)
        if winner == side_a.name:
            margin += 1
        elif winner == side_b.name:
            margin -= 1
        remaining = total - index - 1
        if abs(margin) > remaining:
            return _build_status(
                side_a, side_b, margin, index + 1, remaining, closed=True, finished=True
            )

    # Scores entered out of order: settle on everything decided so far
    decided = [h for h in holes if _is_decided(side_a, side_b, h)]
    margin = _margin(side_a, side_b, decided)
    remaining = total - len(decided)
    won = abs(margin) > remaining
    dormie = margin != 0 and abs(margin) == remaining
    return _build_status(
        side_a,
        side_b,
        margin,
        len(decided),
        remaining,
        closed=won or dormie,
        finished=won or remaining == 0,
    )


def losing_side(status: MatchStatus) -> Optional[str]:
    """The side currently behind, or None if all square or the match is over."""
    if status.is_closed or status.is_finished:
        return None
    if status.side_a_holes_up > 0:
        return status.side_b
    if status.side_b_holes_up > 0:
        return status.side_a
    return None


def next_hole(side_a: MatchSide, side_b: MatchSide, holes: Iterable[int]) -> Optional[int]:
    """
    Lowest hole in range that still needs a score from either side.

    Returns:
        Hole number, or None if every hole is decided or the match is closed
    """
    holes = sorted(holes)
    if match_status(side_a, side_b, holes).is_closed:
        return None
    for hole_number in holes:
        if not _is_decided(side_a, side_b, hole_number):
            return hole_number
    return None


def match_points(status: MatchStatus) -> dict[str, float]:
    """
    Points a finished match is worth: 1 to the winner, 0.5 each if halved.

    Unfinished matches award nothing yet.
    """
    points = {status.side_a: 0.0, status.side_b: 0.0}
    if not status.is_finished:
        return points
    leader = status.leader
    if leader is None:
        points[status.side_a] = 0.5
        points[status.side_b] = 0.5
    else:
        points[leader] = 1.0
    return points
