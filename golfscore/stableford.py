"""Stableford points from net scores."""

from typing import Any, Optional

from .handicap import net_score_for_hole
from .models import Round
from .schemas import StablefordTable


def points_for_relative_score(relative_to_par: int, table: StablefordTable) -> int:
    """
    Points for a net score relative to par.

    Default table:
        -3 or better: 5 | -2: 4 | -1: 3 | 0: 2 | +1: 1 | +2 or worse: 0
    """
    for band in table.bands:
        if band.contains(relative_to_par):
            return band.points
    # Tables are validated to cover every score
    raise ValueError(f'No Stableford band covers {relative_to_par:+d}')


def stableford_points_for_hole(
    round_: Round, player_id: str, hole_number: int, table: StablefordTable
) -> Optional[int]:
    """Points on one hole, or None if the player has not scored it."""
    hole = round_.course.hole(hole_number)
    net = net_score_for_hole(round_, player_id, hole_number)
    if hole is None or net is None:
        return None
    return points_for_relative_score(net - hole.par, table)


def stableford_points(
    round_: Round, player_id: str, table: StablefordTable, holes: Optional[list[int]] = None
) -> int:
    """
    Total points over scored holes.

    Unscored holes are left out, so a partial round shows a partial total.
    """
    if holes is None:
        holes = round_.course.hole_numbers
    total = 0
    for hole_number in holes:
        points = stableford_points_for_hole(round_, player_id, hole_number, table)
        if points is not None:
            total += points
    return total


def stableford_standings(round_: Round, table: StablefordTable) -> list[dict[str, Any]]:
    """Players by total points, highest first. Ties keep roster order."""
    standings = [
        {
            'player': player.id,
            'name': player.name,
            'points': stableford_points(round_, player.id, table),
        }
        for player in round_.players
    ]
    standings.sort(key=lambda s: s['points'], reverse=True)
    for rank, standing in enumerate(standings, 1):
        standing['rank'] = rank
    return standings


def team_stableford_points_for_hole(
    round_: Round, team: str, hole_number: int, table: StablefordTable
) -> Optional[int]:
    """Sum of the team's players' points on a hole, or None if nobody scored it."""
    scored = [
        stableford_points_for_hole(round_, player.id, hole_number, table)
        for player in round_.team_players(team)
    ]
    scored = [points for points in scored if points is not None]
    return sum(scored) if scored else None


def team_stableford_points(round_: Round, team: str, table: StablefordTable) -> int:
    """Total team points over the round."""
    return sum(stableford_points(round_, player.id, table) for player in round_.team_players(team))


def team_stableford_standings(round_: Round, table: StablefordTable) -> list[dict[str, Any]]:
    """Teams by total points, highest first."""
    standings = [
        {'team': team, 'points': team_stableford_points(round_, team, table)}
        for team in round_.team_names
    ]
    standings.sort(key=lambda s: s['points'], reverse=True)
    for rank, standing in enumerate(standings, 1):
        standing['rank'] = rank
    return standings
