"""Nassau matches and the press ledger."""

import logging
from typing import Any, Iterable, Optional

from .constants import PRESSABLE_SEGMENTS
from .match_play import losing_side, match_points, match_status, next_hole
from .models import MatchSide, MatchStatus, Press, PressOption, Segment

logger = logging.getLogger('golfscore.nassau')


class PressNotAllowedError(ValueError):
    """Raised when a press is requested that the match does not allow."""


def _holes_up(status: MatchStatus) -> dict[str, int]:
    return {status.side_a: status.side_a_holes_up, status.side_b: status.side_b_holes_up}


def press_holes(press: Press) -> range:
    """Holes a press covers: its starting hole through the end of its segment."""
    return range(press.starting_hole, press.segment.holes[-1] + 1)


class PressLedger:
    """
    Nassau contests between two sides: Front 9, Back 9, Overall, and the
    presses laid on the two nines.

    The ledger never edits a press. Presses are validated on the way in
    and kept in creation order; every status is recomputed from the
    sides' current scores.
    """

    def __init__(self, side_a: MatchSide, side_b: MatchSide, presses: Iterable[Press] = ()):
        self.side_a = side_a
        self.side_b = side_b
        self._presses: list[Press] = list(presses)

    @property
    def presses(self) -> tuple[Press, ...]:
        return tuple(self._presses)

    @property
    def teams(self) -> tuple[str, str]:
        return self.side_a.name, self.side_b.name

    def segment_status(self, segment: Segment) -> MatchStatus:
        """Status of the Front 9, Back 9 or Overall match."""
        return match_status(self.side_a, self.side_b, segment.holes)

    def press_status(self, press: Press) -> MatchStatus:
        """Status of a press, played as its own match to the end of its nine."""
        return match_status(self.side_a, self.side_b, press_holes(press))

    def losing_team_for_match(self, segment: Segment) -> Optional[str]:
        """Team behind in a segment's match, or None (all square or closed)."""
        return losing_side(self.segment_status(segment))

    def next_hole_for_match(self, segment: Segment) -> Optional[int]:
        """Next hole still to be played in a segment's match, or None."""
        return next_hole(self.side_a, self.side_b, segment.holes)

    def _parents(self, segment: Segment) -> list[tuple[MatchStatus, range]]:
        parents = [(self.segment_status(segment), segment.holes)]
        for press in self._presses:
            if press.segment == segment:
                parents.append((self.press_status(press), press_holes(press)))
        return parents

    def _is_decided(self, hole_number: int) -> bool:
        return hole_number in self.side_a.scores and hole_number in self.side_b.scores

    def available_presses(self) -> list[PressOption]:
        """
        Presses the losing side could make right now.

        One option per losing parent contest (the nine's match or an
        earlier press on it), starting on that contest's next hole.
        """
        options: list[PressOption] = []
        seen = set()
        for segment in (Segment.FRONT_NINE, Segment.BACK_NINE):
            for status, holes in self._parents(segment):
                team = losing_side(status)
                hole = next_hole(self.side_a, self.side_b, holes)
                if team is None or hole is None:
                    continue
                key = (segment, team, hole)
                if key in seen or Press(segment, hole, team) in self._presses:
                    continue
                seen.add(key)
                options.append(
                    PressOption(
                        segment=segment,
                        losing_team=team,
                        holes_down=status.holes_up,
                        next_hole=hole,
                    )
                )
        return options

    def check_press(self, press: Press) -> None:
        """
        Raise PressNotAllowedError unless the press may be created.

        A press must be on the Front 9 or Back 9, be made by a team that is
        losing that nine's match (or an earlier press on it), and start on
        a hole of that nine not yet decided, no earlier than the losing
        contest's next hole.
        """
        segment = press.segment
        if segment.value not in PRESSABLE_SEGMENTS:
            raise PressNotAllowedError('Presses are only allowed on the Front 9 or Back 9')
        if press.initiating_team not in self.teams:
            raise PressNotAllowedError(f'Unknown team: {press.initiating_team}')
        if press.starting_hole not in segment.holes:
            raise PressNotAllowedError(
                f'Hole {press.starting_hole} is not on the {segment.label}'
            )
        if self._is_decided(press.starting_hole):
            raise PressNotAllowedError(f'Hole {press.starting_hole} has already been played')
        if press in self._presses:
            raise PressNotAllowedError('That press has already been made')

        for status, holes in self._parents(segment):
            if losing_side(status) != press.initiating_team:
                continue
            hole = next_hole(self.side_a, self.side_b, holes)
            if hole is not None and press.starting_hole >= hole:
                return

        raise PressNotAllowedError(
            f'{press.initiating_team} is not losing an open {segment.label} match'
        )

    def add_press(self, segment: Segment, starting_hole: int, initiating_team: str) -> Press:
        """
        Validate and record a new press.

        Raises:
            PressNotAllowedError: If the press is not currently allowed
        """
        press = Press(
            segment=Segment(segment), starting_hole=starting_hole, initiating_team=initiating_team
        )
        try:
            self.check_press(press)
        except PressNotAllowedError as e:
            logger.warning(f'Press rejected ({segment}, hole {starting_hole}): {e}')
            raise
        self._presses.append(press)
        logger.info(
            f'{initiating_team} pressed the {press.segment.label} starting on hole {starting_hole}'
        )
        return press

    def contests(self) -> list[tuple[str, MatchStatus]]:
        """Every contest worth a point, labelled, in settlement order."""
        contests = [
            (segment.label, self.segment_status(segment))
            for segment in (Segment.FRONT_NINE, Segment.BACK_NINE, Segment.OVERALL)
        ]
        for press in self._presses:
            label = f'{press.segment.label} press (hole {press.starting_hole})'
            contests.append((label, self.press_status(press)))
        return contests

    def points(self) -> dict[str, float]:
        """Nassau points per team; each match and press is worth 1."""
        totals = {name: 0.0 for name in self.teams}
        for _label, status in self.contests():
            for name, value in match_points(status).items():
                totals[name] += value
        return totals

    def points_for_team(self, team: str) -> float:
        return self.points().get(team, 0.0)

    def summary(self) -> dict[str, Any]:
        """JSON-ready view of every contest and the points."""
        presses = []
        for press in self._presses:
            status = self.press_status(press)
            presses.append(
                {
                    'segment': press.segment.value,
                    'starting_hole': press.starting_hole,
                    'initiating_team': press.initiating_team,
                    'status': status.status,
                    'holes_up': _holes_up(status),
                }
            )
        result: dict[str, Any] = {}
        for segment in (Segment.FRONT_NINE, Segment.BACK_NINE, Segment.OVERALL):
            status = self.segment_status(segment)
            result[segment.value] = {
                'status': status.status,
                'holes_up': _holes_up(status),
                'holes_remaining': status.holes_remaining,
            }
        result['presses'] = presses
        result['points'] = self.points()
        return result
