"""Unit tests for Stableford scoring and point tables."""

import pytest
from pydantic import ValidationError

from golfscore.models import Player
from golfscore.schemas import StablefordBand, StablefordTable
from golfscore.stableford import (
    points_for_relative_score,
    stableford_points,
    stableford_points_for_hole,
    stableford_standings,
    team_stableford_points,
    team_stableford_points_for_hole,
    team_stableford_standings,
)


@pytest.fixture
def table():
    return StablefordTable.default()


class TestPointTable:
    """Tests for mapping relative-to-par onto points."""

    @pytest.mark.parametrize(
        'relative,points',
        [(-4, 5), (-3, 5), (-2, 4), (-1, 3), (0, 2), (1, 1), (2, 0), (6, 0)],
    )
    def test_default_table(self, table, relative, points):
        """Test the default 5-4-3-2-1-0 table including open ends."""
        assert points_for_relative_score(relative, table) == points

    def test_custom_points(self, table):
        """Test changing one band's points."""
        custom = table.with_points(birdie=4, double_bogey_or_worse=0)
        assert points_for_relative_score(-1, custom) == 4
        assert points_for_relative_score(0, custom) == 2

    def test_unknown_band(self, table):
        """Test changing a band that does not exist."""
        with pytest.raises(ValueError, match='albatross'):
            table.with_points(albatross=8)

    def test_points_out_of_range(self, table):
        """Test points above 20 are rejected."""
        with pytest.raises(ValidationError):
            table.with_points(par=21)

    def test_gap_between_bands(self):
        """Test bands must leave no gaps."""
        with pytest.raises(ValidationError):
            StablefordTable(
                bands=[
                    StablefordBand(name='good', high=-1, points=3),
                    StablefordBand(name='bad', low=1, points=0),
                ]
            )

    def test_closed_extremes_rejected(self):
        """Test the best and worst bands must be open-ended."""
        with pytest.raises(ValidationError):
            StablefordTable(bands=[StablefordBand(name='par', low=0, high=0, points=2)])

    def test_inverted_band(self):
        """Test a band's low cannot exceed its high."""
        with pytest.raises(ValidationError):
            StablefordBand(name='bad', low=2, high=1, points=0)

    def test_points_by_band(self, table):
        """Test the default table by band name."""
        assert list(table.points_by_band().values()) == [5, 4, 3, 2, 1, 0]


class TestPlayerPoints:
    """Tests for points earned in a round."""

    def test_stroke_on_bogey_is_par(self, make_round, table):
        """Test handicap 9 on stroke index 7: gross 5, net 4, 2 points."""
        round_ = make_round([Player('a', 'Alice', 9)], scores={7: {'a': 5}})
        assert stableford_points_for_hole(round_, 'a', 7, table) == 2

    def test_unscored_holes_absent(self, make_round, table):
        """Test a partial round totals only the scored holes."""
        round_ = make_round(
            [Player('a', 'Alice', 0)], scores={1: {'a': 3}, 2: {'a': 4}, 3: {'a': 7}}
        )
        assert stableford_points_for_hole(round_, 'a', 4, table) is None
        assert stableford_points(round_, 'a', table) == 5

    def test_plus_player(self, make_round, table):
        """Test a plus player's net par on a hard hole drops a point."""
        round_ = make_round([Player('a', 'Alice', -1)], scores={1: {'a': 4}})
        assert stableford_points_for_hole(round_, 'a', 1, table) == 1

    def test_standings_keep_roster_order_on_ties(self, make_round, table):
        """Test tied players stay in roster order."""
        players = [Player('a', 'Alice', 0), Player('b', 'Bob', 0), Player('c', 'Cy', 0)]
        scores = {1: {'a': 5, 'b': 4, 'c': 4}}
        standings = stableford_standings(make_round(players, scores=scores), table)
        assert [s['player'] for s in standings] == ['b', 'c', 'a']
        assert [s['points'] for s in standings] == [2, 2, 1]
        assert [s['rank'] for s in standings] == [1, 2, 3]


class TestTeamPoints:
    """Tests for team Stableford."""

    def test_team_points_sum_members(self, make_round, table):
        """Test a team's points add its players' points."""
        players = [Player('a', 'Alice', 0), Player('b', 'Bob', 0), Player('c', 'Cy', 0)]
        round_ = make_round(
            players,
            scores={1: {'a': 3, 'b': 4, 'c': 4}, 2: {'a': 4}},
            teams={'Pines': ('a', 'b'), 'Oaks': ('c',)},
        )
        assert team_stableford_points_for_hole(round_, 'Pines', 1, table) == 5
        assert team_stableford_points_for_hole(round_, 'Oaks', 2, table) is None
        assert team_stableford_points(round_, 'Pines', table) == 7
        standings = team_stableford_standings(round_, table)
        assert [(s['team'], s['points']) for s in standings] == [('Pines', 7), ('Oaks', 2)]
