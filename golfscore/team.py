"""Best-ball team aggregation."""

from typing import Any, Optional

from .handicap import net_score_for_hole
from .models import MatchSide, Round


def _member_scores(round_: Round, team: str, hole_number: int, net: bool) -> dict[str, int]:
    scores = {}
    for player in round_.team_players(team):
        if net:
            value = net_score_for_hole(round_, player.id, hole_number)
        else:
            value = round_.gross(player.id, hole_number)
        if value is not None:
            scores[player.id] = value
    return scores


def best_gross_for_team(round_: Round, team: str, hole_number: int) -> Optional[int]:
    """Lowest gross score among the team's players on a hole, or None."""
    scores = _member_scores(round_, team, hole_number, net=False)
    return min(scores.values()) if scores else None


def best_net_for_team(round_: Round, team: str, hole_number: int) -> Optional[int]:
    """
    Lowest net score among the team's players on a hole, or None.

    Computed independently of the best gross: the player with the best
    net need not be the one with the best gross.
    """
    scores = _member_scores(round_, team, hole_number, net=True)
    return min(scores.values()) if scores else None


def best_ball_flags(round_: Round, team: str, hole_number: int, net: bool = True) -> set[str]:
    """
    Players whose score equals the team's best on a hole.

    Ties flag every tied player.
    """
    scores = _member_scores(round_, team, hole_number, net=net)
    if not scores:
        return set()
    best = min(scores.values())
    return {player_id for player_id, value in scores.items() if value == best}


def team_match_side(round_: Round, team: str, holes: Optional[list[int]] = None) -> MatchSide:
    """A team's best net per hole, as one side of a match."""
    if holes is None:
        holes = round_.course.hole_numbers
    scores = {}
    for hole_number in holes:
        best = best_net_for_team(round_, team, hole_number)
        if best is not None:
            scores[hole_number] = best
    return MatchSide(name=team, scores=scores)


def team_totals(round_: Round, team: str, holes: Optional[list[int]] = None) -> tuple[int, int]:
    """
    Total best-ball gross and net for a team.

    Only holes the team has scored count toward the totals.

    Returns:
        Tuple of (gross_total, net_total)
    """
    if holes is None:
        holes = round_.course.hole_numbers
    gross_total = 0
    net_total = 0
    for hole_number in holes:
        gross = best_gross_for_team(round_, team, hole_number)
        net = best_net_for_team(round_, team, hole_number)
        if gross is not None:
            gross_total += gross
        if net is not None:
            net_total += net
    return gross_total, net_total


def best_ball_standings(round_: Round) -> list[dict[str, Any]]:
    """
    Best-ball stroke play standings, lowest total net first.

    Returns:
        List of dicts with team, gross, net, holes_scored and rank
    """
    standings = []
    for team in round_.team_names:
        gross, net = team_totals(round_, team)
        holes_scored = sum(
            1
            for hole_number in round_.course.hole_numbers
            if best_net_for_team(round_, team, hole_number) is not None
        )
        standings.append(
            {'team': team, 'gross': gross, 'net': net, 'holes_scored': holes_scored}
        )

    standings.sort(key=lambda s: (s['net'], s['gross']))
    for rank, standing in enumerate(standings, 1):
        standing['rank'] = rank
    return standings
