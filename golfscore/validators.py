"""Validation functions for courses, rounds, and settlements."""

from typing import Any

from .constants import HOLES_PER_ROUND, MAX_PAR, MIN_PAR, PRESSABLE_SEGMENTS
from .models import Course, GameFormat, Round, Segment

# Formats that play one team against another
TWO_TEAM_FORMATS = (GameFormat.BEST_BALL_MATCH, GameFormat.NASSAU)
TEAM_FORMATS = TWO_TEAM_FORMATS + (
    GameFormat.BEST_BALL_STROKE,
    GameFormat.TEAM_STABLEFORD,
    GameFormat.SCRAMBLE,
)


def validate_course(course: Course) -> list[str]:
    """
    Validate a course layout.

    Checks:
    - Exactly 18 holes numbered 1-18
    - Par between 3 and 6 on every hole
    - Stroke indexes are a permutation of 1-18

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    numbers = [h.number for h in course.holes]
    if sorted(numbers) != list(range(1, HOLES_PER_ROUND + 1)):
        missing = sorted(set(range(1, HOLES_PER_ROUND + 1)) - set(numbers))
        extra = sorted(n for n in set(numbers) if not 1 <= n <= HOLES_PER_ROUND)
        if missing:
            errors.append(f'{course.name} is missing holes: {", ".join(map(str, missing))}')
        if extra:
            errors.append(f'{course.name} has invalid hole numbers: {", ".join(map(str, extra))}')
        if len(set(numbers)) != len(numbers):
            errors.append(f'{course.name} has duplicate hole numbers')

    for hole in course.holes:
        if not MIN_PAR <= hole.par <= MAX_PAR:
            errors.append(f'Hole {hole.number} has par {hole.par} (expected {MIN_PAR}-{MAX_PAR})')

    indexes = [h.stroke_index for h in course.holes]
    if sorted(indexes) != list(range(1, len(indexes) + 1)):
        errors.append(f'{course.name} stroke indexes are not a permutation of 1-{len(indexes)}')

    return errors


def validate_round(round_: Round) -> list[str]:
    """
    Validate a round before settling it.

    Checks:
    - Course layout (see validate_course)
    - Unique player ids, each player on at most one team
    - Teams and scores refer only to known players and holes
    - Gross scores are positive
    - The game format has the teams and players it needs
    - Presses name a known team and start inside their own nine

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = validate_course(round_.course)

    player_ids = [p.id for p in round_.players]
    duplicates = sorted({pid for pid in player_ids if player_ids.count(pid) > 1})
    if duplicates:
        errors.append(f'Duplicate player ids: {", ".join(duplicates)}')
    known = set(player_ids)

    seen_on_team: dict[str, str] = {}
    for team, members in round_.teams.items():
        if not members:
            errors.append(f'Team {team} has no players')
        for member in members:
            if member not in known:
                errors.append(f'Team {team} lists unknown player {member}')
            elif member in seen_on_team and seen_on_team[member] != team:
                errors.append(f'{member} is on both {seen_on_team[member]} and {team}')
            else:
                seen_on_team[member] = team

    hole_numbers = set(round_.course.hole_numbers)
    for hole_number, entries in sorted(round_.scores.items()):
        if hole_number not in hole_numbers:
            errors.append(f'Scores recorded for hole {hole_number}, which is not on the course')
        for player_id, gross in entries.items():
            if player_id not in known:
                errors.append(f'Hole {hole_number} has a score for unknown player {player_id}')
            if gross < 1:
                errors.append(f'Hole {hole_number}: {player_id} has non-positive score {gross}')

    game_format = GameFormat(round_.game_format)
    team_count = len(round_.teams)
    if game_format in TWO_TEAM_FORMATS and team_count != 2:
        errors.append(f'{game_format.value} needs exactly 2 teams (has {team_count})')
    elif game_format in TEAM_FORMATS and team_count < 1:
        errors.append(f'{game_format.value} needs at least one team')
    if game_format == GameFormat.SKINS and len(round_.players) < 2:
        errors.append('Skins needs at least 2 players')

    for press in round_.presses:
        if press.initiating_team not in round_.teams:
            errors.append(f'Press on hole {press.starting_hole} by unknown team {press.initiating_team}')
        segment = Segment(press.segment)
        if segment.value not in PRESSABLE_SEGMENTS:
            errors.append(f'Press on hole {press.starting_hole} is on the {segment.label} match')
        elif press.starting_hole not in segment.holes:
            errors.append(
                f'Press on hole {press.starting_hole} is outside the {segment.label}'
            )
    seen_presses = set()
    for press in round_.presses:
        if press in seen_presses:
            errors.append(
                f'Press on hole {press.starting_hole} by {press.initiating_team} is recorded twice'
            )
        seen_presses.add(press)

    return errors


def validate_settlement(settlement: dict[str, Any], tolerance: float = 0.01) -> list[str]:
    """
    Sanity checks on a settlement produced by ScoringSession.settle().

    Checks:
    - Skins awarded plus skins still carried equal the tied and won holes
    - Skins payouts sum to zero
    - Nassau points per team lie between 0 and the number of contests,
      and together never exceed it

    Returns:
        List of validation warning messages (empty if consistent)
    """
    warnings = []

    holes = settlement.get('holes')
    if holes is not None and 'skins' in settlement:
        awarded = sum(settlement['skins'].values())
        if settlement.get('carryover', True):
            carried = holes[-1]['carryover_after'] if holes else 0
            expected = sum(1 for h in holes if h['contested'])
            if awarded + carried != expected:
                warnings.append(
                    f'Skins awarded ({awarded}) plus carried ({carried}) '
                    f'does not match contested holes ({expected})'
                )
        elif awarded != sum(1 for h in holes if h['winner'] is not None):
            warnings.append(f'Skins awarded ({awarded}) does not match holes won outright')

    payouts = settlement.get('payouts')
    if payouts:
        total = sum(payouts.values())
        if abs(total) > tolerance:
            warnings.append(f'Skins payouts sum to {total:.2f}, expected 0')

    points = settlement.get('points')
    if points is not None and 'presses' in settlement:
        contests = 3 + len(settlement['presses'])
        for team, value in points.items():
            if not 0 <= value <= contests:
                warnings.append(f'{team} has {value} Nassau points (max {contests})')
        if sum(points.values()) > contests + tolerance:
            warnings.append(f'Nassau points total {sum(points.values())} exceeds {contests} contests')

    return warnings
