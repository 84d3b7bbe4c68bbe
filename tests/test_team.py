"""Unit tests for best-ball team aggregation."""

import pytest

from golfscore.models import Player
from golfscore.team import (
    best_ball_flags,
    best_ball_standings,
    best_gross_for_team,
    best_net_for_team,
    team_match_side,
    team_totals,
)


@pytest.fixture
def players():
    return [
        Player('ann', 'Ann', 0),
        Player('ben', 'Ben', 36),
        Player('cat', 'Cat', 0),
        Player('dev', 'Dev', 0),
    ]


@pytest.fixture
def teams():
    return {'Red': ('ann', 'ben'), 'Blue': ('cat', 'dev')}


class TestBestBall:
    """Tests for a team's best score on a hole."""

    def test_best_net_independent_of_best_gross(self, make_round, players, teams):
        """Test best net can come from a different player than best gross."""
        round_ = make_round(players, scores={1: {'ann': 4, 'ben': 5}}, teams=teams)
        assert best_gross_for_team(round_, 'Red', 1) == 4
        assert best_net_for_team(round_, 'Red', 1) == 3
        assert best_ball_flags(round_, 'Red', 1, net=False) == {'ann'}
        assert best_ball_flags(round_, 'Red', 1) == {'ben'}

    def test_no_scores_is_none(self, make_round, players, teams):
        """Test a team with no scores on a hole has no best ball."""
        round_ = make_round(players, scores={1: {'ann': 4}}, teams=teams)
        assert best_gross_for_team(round_, 'Blue', 1) is None
        assert best_net_for_team(round_, 'Blue', 1) is None
        assert best_ball_flags(round_, 'Blue', 1) == set()

    def test_single_scorer_counts(self, make_round, players, teams):
        """Test one member's score is the team's best until the partner scores."""
        round_ = make_round(players, scores={2: {'cat': 5}}, teams=teams)
        assert best_net_for_team(round_, 'Blue', 2) == 5

    def test_ties_flag_every_player(self, make_round, players, teams):
        """Test tied members are both flagged."""
        round_ = make_round(players, scores={3: {'cat': 4, 'dev': 4}}, teams=teams)
        assert best_ball_flags(round_, 'Blue', 3) == {'cat', 'dev'}

    def test_best_net_is_a_member_net(self, make_round, players, teams):
        """Test best net never exceeds any member's net and equals one of them."""
        round_ = make_round(players, scores={1: {'ann': 6, 'ben': 7}}, teams=teams)
        member_nets = [6, 5]  # Ann scratch, Ben two strokes
        best = best_net_for_team(round_, 'Red', 1)
        assert all(best <= net for net in member_nets)
        assert best in member_nets


class TestTeamTotals:
    """Tests for team totals and standings."""

    def test_match_side_has_decided_holes_only(self, make_round, players, teams):
        """Test a team's match side only lists holes it has scored."""
        round_ = make_round(players, scores={1: {'cat': 4}, 2: {'ann': 4}}, teams=teams)
        side = team_match_side(round_, 'Blue')
        assert side.name == 'Blue'
        assert dict(side.scores) == {1: 4}

    def test_team_totals(self, make_round, players, teams):
        """Test totals sum the best gross and best net over scored holes."""
        scores = {1: {'ann': 4, 'ben': 5}, 2: {'ann': 5, 'ben': 6}}
        round_ = make_round(players, scores=scores, teams=teams)
        assert team_totals(round_, 'Red') == (9, 7)

    def test_standings_lowest_net_first(self, make_round, players, teams):
        """Test standings order by total best net."""
        scores = {
            1: {'ann': 4, 'ben': 5, 'cat': 4, 'dev': 5},
            2: {'ann': 4, 'ben': 6, 'cat': 4, 'dev': 5},
        }
        round_ = make_round(players, scores=scores, teams=teams)
        standings = best_ball_standings(round_)
        assert [s['team'] for s in standings] == ['Red', 'Blue']
        assert [s['net'] for s in standings] == [7, 8]
        assert [s['rank'] for s in standings] == [1, 2]

    def test_standings_tie_broken_by_gross(self, make_round, players, teams):
        """Test equal net totals fall back to the lower gross total."""
        scores = {
            1: {'ann': 4, 'ben': 5, 'cat': 4, 'dev': 5},
            2: {'ann': 4, 'ben': 6, 'cat': 3, 'dev': 5},
        }
        round_ = make_round(players, scores=scores, teams=teams)
        standings = best_ball_standings(round_)
        assert [(s['team'], s['net'], s['gross']) for s in standings] == [
            ('Blue', 7, 7),
            ('Red', 7, 8),
        ]
