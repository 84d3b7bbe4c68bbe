"""Scramble: one team score per hole, handicapped on the team average."""

from typing import Any, Optional

from .handicap import net_score, resolve_playing_handicap
from .models import Round


def team_score_holder(round_: Round, team: str) -> Optional[str]:
    """
    Player the team's scramble score is recorded under.

    The first player listed for the team carries the team score; the
    other members' entries are ignored.
    """
    members = round_.teams.get(team, ())
    return members[0] if members else None


def average_handicap_for_team(round_: Round, team: str) -> float:
    """Mean handicap of the team's players (0.0 for an empty team)."""
    players = round_.team_players(team)
    if not players:
        return 0.0
    return sum(p.handicap for p in players) / len(players)


def team_playing_handicap(round_: Round, team: str) -> int:
    """Team average handicap in whole strokes under the round's allowance."""
    return resolve_playing_handicap(average_handicap_for_team(round_, team), round_.use_half_handicap)


def scramble_score_for_team(round_: Round, team: str, hole_number: int) -> Optional[int]:
    holder = team_score_holder(round_, team)
    if holder is None:
        return None
    return round_.gross(holder, hole_number)


def scramble_net_score_for_team(round_: Round, team: str, hole_number: int) -> Optional[int]:
    """Team gross less the strokes the team average receives on the hole."""
    hole = round_.course.hole(hole_number)
    if hole is None:
        return None
    return net_score(
        scramble_score_for_team(round_, team, hole_number),
        team_playing_handicap(round_, team),
        hole.stroke_index,
    )


def scramble_standings(round_: Round) -> list[dict[str, Any]]:
    """
    Scramble standings, lowest total net first, then lowest gross.

    Only holes the team has scored count toward its totals.

    Returns:
        List of dicts with team, handicap, gross, net, holes_scored and rank
    """
    standings = []
    for team in round_.team_names:
        gross = 0
        net = 0
        holes_scored = 0
        for hole_number in round_.course.hole_numbers:
            score = scramble_score_for_team(round_, team, hole_number)
            if score is None:
                continue
            gross += score
            net += scramble_net_score_for_team(round_, team, hole_number)
            holes_scored += 1
        standings.append(
            {
                'team': team,
                'handicap': round(average_handicap_for_team(round_, team), 1),
                'gross': gross,
                'net': net,
                'holes_scored': holes_scored,
            }
        )

    standings.sort(key=lambda s: (s['net'], s['gross']))
    for rank, standing in enumerate(standings, 1):
        standing['rank'] = rank
    return standings
