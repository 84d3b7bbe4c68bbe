"""Scoring session: the query surface over one round."""

import logging
from dataclasses import asdict, replace
from typing import Any, Iterable, Optional

from .config import get_stableford_table
from .handicap import (
    effective_handicap,
    net_score_for_hole,
    net_scores_for_hole,
    player_gets_stroke_on_hole,
    stroke_allocation,
    strokes_on_hole,
)
from .match_play import hole_winner, match_status
from .models import (
    GameFormat,
    MatchSide,
    MatchStatus,
    Press,
    PressOption,
    Round,
    Segment,
    SkinsHoleResult,
)
from .nassau import PressLedger
from .schemas import StablefordTable
from .scramble import (
    average_handicap_for_team,
    scramble_net_score_for_team,
    scramble_score_for_team,
    scramble_standings,
    team_score_holder,
)
from .skins import skins_by_hole, skins_payouts, skins_per_player, total_pot, value_per_skin
from .stableford import (
    stableford_points,
    stableford_points_for_hole,
    stableford_standings,
    team_stableford_points,
    team_stableford_points_for_hole,
    team_stableford_standings,
)
from .team import (
    best_ball_flags,
    best_ball_standings,
    best_gross_for_team,
    best_net_for_team,
    team_match_side,
)

logger = logging.getLogger('golfscore.session')

# Settlement method for each game format
_SETTLERS = {
    GameFormat.STROKE_PLAY: '_settle_stroke_play',
    GameFormat.BEST_BALL_STROKE: '_settle_best_ball_stroke',
    GameFormat.BEST_BALL_MATCH: '_settle_best_ball_match',
    GameFormat.NASSAU: '_settle_nassau',
    GameFormat.SKINS: '_settle_skins',
    GameFormat.STABLEFORD: '_settle_stableford',
    GameFormat.TEAM_STABLEFORD: '_settle_team_stableford',
    GameFormat.SCRAMBLE: '_settle_scramble',
}


class ScoringSession:
    """
    Query surface for one round.

    The session keeps no derived state: every query recomputes from the
    current snapshot, so partial and out-of-order rounds always answer
    consistently. Score edits and new presses replace the snapshot.
    """

    def __init__(self, round_: Round, stableford_table: Optional[StablefordTable] = None):
        """
        Initialize session.

        Args:
            round_: Round snapshot to settle
            stableford_table: Point table to use (default: the saved table)
        """
        self._round = round_
        self.stableford_table = stableford_table or get_stableford_table()
        self._settler = getattr(self, _SETTLERS[GameFormat(round_.game_format)])

    @property
    def round(self) -> Round:
        return self._round

    @property
    def presses(self) -> tuple[Press, ...]:
        return self._round.presses

    # -- score entry -------------------------------------------------------

    def _check_player_and_hole(self, player_id: str, hole_number: int) -> None:
        if self._round.player(player_id) is None:
            raise ValueError(f'Unknown player: {player_id}')
        if self._round.course.hole(hole_number) is None:
            raise ValueError(f'Hole {hole_number} is not on {self._round.course.name}')

    def record_score(self, player_id: str, hole_number: int, gross: int) -> None:
        """
        Record or correct a player's gross score on a hole.

        Raises:
            ValueError: If the player or hole is unknown, or gross is not positive
        """
        self._check_player_and_hole(player_id, hole_number)
        if gross < 1:
            raise ValueError(f'Gross score must be positive, got {gross}')

        scores = {hole: dict(entries) for hole, entries in self._round.scores.items()}
        scores.setdefault(hole_number, {})[player_id] = gross
        self._round = replace(self._round, scores=scores)
        logger.debug(f'Hole {hole_number}: {player_id} scored {gross}')

    def clear_score(self, player_id: str, hole_number: int) -> None:
        """Remove a player's score from a hole (user correction)."""
        self._check_player_and_hole(player_id, hole_number)
        scores = {hole: dict(entries) for hole, entries in self._round.scores.items()}
        scores.get(hole_number, {}).pop(player_id, None)
        self._round = replace(self._round, scores=scores)
        logger.debug(f'Hole {hole_number}: cleared score for {player_id}')

    # -- handicap and net --------------------------------------------------

    def strokes_on_hole(self, player_id: str, hole_number: int) -> int:
        player = self._round.player(player_id)
        hole = self._round.course.hole(hole_number)
        if player is None or hole is None:
            return 0
        return strokes_on_hole(effective_handicap(self._round, player), hole.stroke_index)

    def player_gets_stroke_on_hole(self, player_id: str, hole_number: int) -> bool:
        player = self._round.player(player_id)
        hole = self._round.course.hole(hole_number)
        if player is None or hole is None:
            return False
        return player_gets_stroke_on_hole(
            effective_handicap(self._round, player), hole.stroke_index
        )

    def stroke_allocation(self, player_id: str) -> dict[int, int]:
        player = self._round.player(player_id)
        if player is None:
            return {}
        return stroke_allocation(effective_handicap(self._round, player), self._round.course.holes)

    def net_score_for_hole(self, player_id: str, hole_number: int) -> Optional[int]:
        return net_score_for_hole(self._round, player_id, hole_number)

    def totals(self) -> list[dict[str, Any]]:
        """
        Gross and net totals per player for each nine and the round.

        Only scored holes are summed.
        """
        course_holes = self._round.course.hole_numbers
        spans = {
            'front9': [h for h in course_holes if h <= 9],
            'back9': [h for h in course_holes if h > 9],
            'total': course_holes,
        }
        rows = []
        for player in self._round.players:
            row: dict[str, Any] = {'player': player.id, 'name': player.name}
            for span, holes in spans.items():
                gross = 0
                net = 0
                played = 0
                for hole_number in holes:
                    score = self._round.gross(player.id, hole_number)
                    if score is None:
                        continue
                    gross += score
                    net += self.net_score_for_hole(player.id, hole_number)
                    played += 1
                row[span] = {'gross': gross, 'net': net, 'holes_played': played}
            rows.append(row)
        return rows

    def leaderboard(self) -> list[dict[str, Any]]:
        """Stroke play order: lowest net total, then lowest gross."""
        board = [
            {
                'player': row['player'],
                'name': row['name'],
                'gross': row['total']['gross'],
                'net': row['total']['net'],
                'holes_played': row['total']['holes_played'],
            }
            for row in self.totals()
        ]
        board.sort(key=lambda r: (r['net'], r['gross']))
        for rank, row in enumerate(board, 1):
            row['rank'] = rank
        return board

    @property
    def is_complete(self) -> bool:
        """
        Every player has a gross score on every hole.

        In a scramble only the team scores are needed.
        """
        if GameFormat(self._round.game_format) == GameFormat.SCRAMBLE:
            scorers = [team_score_holder(self._round, team) for team in self._round.team_names]
        else:
            scorers = [player.id for player in self._round.players]
        if not scorers or None in scorers:
            return False
        return all(
            self._round.gross(player_id, hole_number) is not None
            for hole_number in self._round.course.hole_numbers
            for player_id in scorers
        )

    # -- best ball ---------------------------------------------------------

    def best_ball_score_for_team(self, team: str, hole_number: int) -> Optional[int]:
        return best_gross_for_team(self._round, team, hole_number)

    def best_ball_net_score_for_team(self, team: str, hole_number: int) -> Optional[int]:
        return best_net_for_team(self._round, team, hole_number)

    def best_ball_flags(self, team: str, hole_number: int, net: bool = True) -> set[str]:
        return best_ball_flags(self._round, team, hole_number, net=net)

    def best_ball_standings(self) -> list[dict[str, Any]]:
        return best_ball_standings(self._round)

    # -- match play and Nassau --------------------------------------------

    def _sides(self) -> tuple[MatchSide, MatchSide]:
        teams = self._round.team_names
        if len(teams) != 2:
            raise ValueError(f'Match play needs exactly two teams, round has {len(teams)}')
        return team_match_side(self._round, teams[0]), team_match_side(self._round, teams[1])

    def _ledger(self) -> PressLedger:
        side_a, side_b = self._sides()
        return PressLedger(side_a, side_b, self._round.presses)

    def match_play_hole_winner(self, hole_number: int) -> Optional[str]:
        """Team winning the hole on best-ball net, or None if halved or unplayed."""
        side_a, side_b = self._sides()
        return hole_winner(side_a, side_b, hole_number)

    def match_status(self, holes: Segment | Iterable[int] = Segment.OVERALL) -> MatchStatus:
        """Status of the two-team match over a segment or any range of holes."""
        side_a, side_b = self._sides()
        if isinstance(holes, str):
            holes = Segment(holes).holes
        return match_status(side_a, side_b, holes)

    def losing_team_for_match(self, segment: Segment) -> Optional[str]:
        return self._ledger().losing_team_for_match(Segment(segment))

    def next_hole_for_match(self, segment: Segment) -> Optional[int]:
        return self._ledger().next_hole_for_match(Segment(segment))

    def available_presses(self) -> list[PressOption]:
        return self._ledger().available_presses()

    def add_press(self, segment: Segment, starting_hole: int, initiating_team: str) -> Press:
        """
        Create a press and append it to the round.

        Raises:
            PressNotAllowedError: If the press is not currently allowed
        """
        ledger = self._ledger()
        press = ledger.add_press(Segment(segment), starting_hole, initiating_team)
        self._round = replace(self._round, presses=ledger.presses)
        return press

    def press_match_status(self, press: Press) -> MatchStatus:
        return self._ledger().press_status(press)

    def nassau_points_for_team(self, team: str) -> float:
        return self._ledger().points_for_team(team)

    # -- skins -------------------------------------------------------------

    def skins_by_hole(self) -> list[SkinsHoleResult]:
        holes = self._round.course.hole_numbers
        nets = {hole_number: net_scores_for_hole(self._round, hole_number) for hole_number in holes}
        return skins_by_hole(nets, holes, carryover=self._round.skins.carryover)

    def skins_winner_for_hole(self, hole_number: int) -> Optional[str]:
        for result in self.skins_by_hole():
            if result.hole == hole_number:
                return result.winner
        return None

    def skins_per_player(self) -> dict[str, int]:
        return skins_per_player(self.skins_by_hole(), [p.id for p in self._round.players])

    def skins_payouts(self) -> dict[str, float]:
        return skins_payouts(self.skins_per_player(), self._round.skins)

    # -- Stableford --------------------------------------------------------

    def stableford_points_for_hole(self, player_id: str, hole_number: int) -> Optional[int]:
        return stableford_points_for_hole(
            self._round, player_id, hole_number, self.stableford_table
        )

    def stableford_points(self, player_id: str) -> int:
        return stableford_points(self._round, player_id, self.stableford_table)

    def stableford_standings(self) -> list[dict[str, Any]]:
        return stableford_standings(self._round, self.stableford_table)

    def team_stableford_points_for_hole(self, team: str, hole_number: int) -> Optional[int]:
        return team_stableford_points_for_hole(
            self._round, team, hole_number, self.stableford_table
        )

    def team_stableford_points(self, team: str) -> int:
        return team_stableford_points(self._round, team, self.stableford_table)

    # -- scramble ----------------------------------------------------------

    def record_team_score(self, team: str, hole_number: int, gross: int) -> None:
        """
        Record a scramble team's score on a hole.

        Raises:
            ValueError: If the team has no players, or the hole or score is invalid
        """
        holder = team_score_holder(self._round, team)
        if holder is None:
            raise ValueError(f'Team {team} has no players')
        self.record_score(holder, hole_number, gross)

    def scramble_score_for_team(self, team: str, hole_number: int) -> Optional[int]:
        return scramble_score_for_team(self._round, team, hole_number)

    def scramble_net_score_for_team(self, team: str, hole_number: int) -> Optional[int]:
        return scramble_net_score_for_team(self._round, team, hole_number)

    def average_handicap_for_team(self, team: str) -> float:
        return average_handicap_for_team(self._round, team)

    def scramble_standings(self) -> list[dict[str, Any]]:
        return scramble_standings(self._round)

    # -- settlement --------------------------------------------------------

    def settle(self) -> dict[str, Any]:
        """
        Settle the round under its game format.

        Returns:
            JSON-ready summary; keys depend on the format
        """
        result = {
            'format': GameFormat(self._round.game_format).value,
            'course': self._round.course.name,
            'complete': self.is_complete,
        }
        result.update(self._settler())
        return result

    def _settle_stroke_play(self) -> dict[str, Any]:
        return {'leaderboard': self.leaderboard()}

    def _settle_best_ball_stroke(self) -> dict[str, Any]:
        return {'standings': self.best_ball_standings()}

    def _settle_best_ball_match(self) -> dict[str, Any]:
        holes = {
            hole_number: self.match_play_hole_winner(hole_number)
            for hole_number in self._round.course.hole_numbers
        }
        return {'match': asdict(self.match_status(Segment.OVERALL)), 'hole_winners': holes}

    def _settle_nassau(self) -> dict[str, Any]:
        ledger = self._ledger()
        summary = ledger.summary()
        summary['available_presses'] = [
            {
                'segment': option.segment.value,
                'losing_team': option.losing_team,
                'holes_down': option.holes_down,
                'next_hole': option.next_hole,
            }
            for option in ledger.available_presses()
        ]
        return summary

    def _settle_skins(self) -> dict[str, Any]:
        won = self.skins_per_player()
        config = self._round.skins
        return {
            'carryover': config.carryover,
            'holes': [asdict(result) for result in self.skins_by_hole()],
            'skins': won,
            'total_pot': total_pot(config, len(self._round.players)),
            'value_per_skin': value_per_skin(config, won),
            'payouts': skins_payouts(won, config),
        }

    def _settle_stableford(self) -> dict[str, Any]:
        return {
            'points_table': self.stableford_table.points_by_band(),
            'standings': self.stableford_standings(),
        }

    def _settle_team_stableford(self) -> dict[str, Any]:
        return {
            'points_table': self.stableford_table.points_by_band(),
            'standings': team_stableford_standings(self._round, self.stableford_table),
            'players': self.stableford_standings(),
        }

    def _settle_scramble(self) -> dict[str, Any]:
        return {'standings': self.scramble_standings()}
