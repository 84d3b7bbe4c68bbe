"""Loading and saving rounds and settlements as JSON."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .models import (
    Course,
    GameFormat,
    Hole,
    Player,
    Press,
    Round,
    Segment,
    SkinsConfig,
)
from .schemas import (
    CourseEntry,
    HoleEntry,
    PlayerEntry,
    PressEntry,
    RoundFile,
    SkinsEntry,
)
from .utils import load_json, save_json

logger = logging.getLogger('golfscore.round_io')


def course_from_entry(entry: CourseEntry) -> Course:
    holes = tuple(
        Hole(
            number=h.number,
            par=h.par,
            stroke_index=h.stroke_index,
            yardages=dict(h.yardages),
        )
        for h in sorted(entry.holes, key=lambda h: h.number)
    )
    return Course(name=entry.name, holes=holes)


def round_from_file(data: RoundFile) -> Round:
    """Build a Round snapshot from a validated round file."""
    return Round(
        course=course_from_entry(data.course),
        players=tuple(Player(id=p.id, name=p.name, handicap=p.handicap) for p in data.players),
        scores={hole: dict(entries) for hole, entries in data.scores.items()},
        teams={team: tuple(members) for team, members in data.teams.items()},
        presses=tuple(
            Press(
                segment=Segment(p.segment),
                starting_hole=p.starting_hole,
                initiating_team=p.initiating_team,
            )
            for p in data.presses
        ),
        game_format=GameFormat(data.game_format),
        skins=SkinsConfig(
            carryover=data.skins.carryover,
            pot_per_player=data.skins.pot_per_player,
            value_per_skin=data.skins.value_per_skin,
        ),
        use_half_handicap=data.use_half_handicap,
    )


def round_to_file(round_: Round) -> RoundFile:
    """Inverse of round_from_file. Empty score holes are dropped."""
    return RoundFile(
        course=CourseEntry(
            name=round_.course.name,
            holes=[
                HoleEntry(
                    number=h.number,
                    par=h.par,
                    stroke_index=h.stroke_index,
                    yardages=dict(h.yardages),
                )
                for h in round_.course.holes
            ],
        ),
        players=[PlayerEntry(id=p.id, name=p.name, handicap=p.handicap) for p in round_.players],
        game_format=GameFormat(round_.game_format).value,
        teams={team: list(members) for team, members in round_.teams.items()},
        scores={
            hole: dict(entries) for hole, entries in sorted(round_.scores.items()) if entries
        },
        presses=[
            PressEntry(
                segment=Segment(p.segment).value,
                starting_hole=p.starting_hole,
                initiating_team=p.initiating_team,
            )
            for p in round_.presses
        ],
        skins=SkinsEntry(
            carryover=round_.skins.carryover,
            pot_per_player=round_.skins.pot_per_player,
            value_per_skin=round_.skins.value_per_skin,
        ),
        use_half_handicap=round_.use_half_handicap,
    )


def load_round(path: str | Path) -> Round:
    """
    Load a round file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file does not match the round schema
    """
    data = load_json(path, schema=RoundFile)
    round_ = round_from_file(data)
    logger.info(
        f'Loaded {round_.game_format.value} round at {round_.course.name} '
        f'with {len(round_.players)} players'
    )
    return round_


def save_round(path: str | Path, round_: Round) -> None:
    save_json(path, round_to_file(round_))
    logger.info(f'Round saved to {path}')


def save_settlement(path: str | Path, settlement: dict[str, Any]) -> None:
    """Save a settlement with the time it was produced."""
    data = dict(settlement)
    data['settled_at'] = datetime.now(timezone.utc).isoformat()
    save_json(path, data)
    logger.info(f'Settlement saved to {path}')
