"""Unit tests for hole-by-hole match play."""

from golfscore.match_play import hole_winner, losing_side, match_points, match_status, next_hole
from golfscore.models import MatchSide

FRONT = range(1, 10)


def sides(results):
    """
    Build two sides from hole results.

    results maps hole -> 'A', 'B' or 'halve'. Side A always scores 4.
    """
    a_scores = {}
    b_scores = {}
    for hole, result in results.items():
        a_scores[hole] = 4
        b_scores[hole] = {'A': 5, 'B': 3, 'halve': 4}[result]
    return MatchSide('A', a_scores), MatchSide('B', b_scores)


class TestHoleWinner:
    """Tests for single hole resolution."""

    def test_lower_net_wins(self):
        """Test the side with the lower net wins the hole."""
        side_a, side_b = sides({1: 'A', 2: 'B'})
        assert hole_winner(side_a, side_b, 1) == 'A'
        assert hole_winner(side_a, side_b, 2) == 'B'

    def test_halved_hole(self):
        """Test equal nets halve the hole."""
        side_a, side_b = sides({1: 'halve'})
        assert hole_winner(side_a, side_b, 1) is None

    def test_hole_needs_both_sides(self):
        """Test a hole with one side missing is undecided."""
        side_a = MatchSide('A', {1: 3})
        side_b = MatchSide('B', {})
        assert hole_winner(side_a, side_b, 1) is None
        assert match_status(side_a, side_b, FRONT).holes_played == 0


class TestMatchStatus:
    """Tests for running match status."""

    def test_all_square_before_play(self):
        """Test an unplayed match is all square."""
        side_a, side_b = sides({})
        status = match_status(side_a, side_b, FRONT)
        assert status.status == 'All Square'
        assert status.holes_remaining == 9
        assert not status.is_closed

    def test_leader_holes_up(self):
        """Test a side 3 up with 6 to play is not yet closed."""
        side_a, side_b = sides({1: 'A', 2: 'A', 3: 'A'})
        status = match_status(side_a, side_b, FRONT)
        assert status.status == 'A 3 UP'
        assert status.side_a_holes_up == 3
        assert status.side_b_holes_up == 0
        assert status.holes_remaining == 6
        assert not status.is_closed

    def test_trailing_side_b_leads(self):
        """Test the status names side B when it leads."""
        side_a, side_b = sides({1: 'B', 2: 'halve'})
        status = match_status(side_a, side_b, FRONT)
        assert status.status == 'B 1 UP'
        assert status.side_b_holes_up == 1
        assert status.leader == 'B'

    def test_dormie_three_and_three(self):
        """Test 3 up with 3 to play reads 3 & 3 but is not yet final."""
        results = {1: 'A', 2: 'A', 3: 'A', 4: 'halve', 5: 'halve', 6: 'halve'}
        side_a, side_b = sides(results)
        status = match_status(side_a, side_b, FRONT)
        assert status.is_closed
        assert not status.is_finished
        assert status.status == 'A wins 3 & 3'
        assert status.holes_remaining == 3
        assert match_points(status) == {'A': 0.0, 'B': 0.0}

    def test_dormie_match_can_be_halved(self):
        """Test the trailing side halves a dormie match by winning every hole left."""
        results = {1: 'A', 2: 'A', 3: 'A', 4: 'halve', 5: 'halve', 6: 'halve'}
        results.update({7: 'B', 8: 'B', 9: 'B'})
        side_a, side_b = sides(results)
        status = match_status(side_a, side_b, FRONT)
        assert status.status == 'All Square'
        assert status.is_finished
        assert match_points(status) == {'A': 0.5, 'B': 0.5}

    def test_dormie_on_last_hole_halved(self):
        """Test 1 up with 1 to play, then the last hole lost, halves an 18-hole match."""
        results = {hole: 'halve' for hole in range(1, 18)}
        results[5] = 'A'
        results[18] = 'B'
        side_a, side_b = sides(results)
        status = match_status(side_a, side_b, range(1, 19))
        assert status.status == 'All Square'
        assert match_points(status) == {'A': 0.5, 'B': 0.5}

    def test_closed_match_is_frozen(self):
        """Test holes played after the match is won do not change the result."""
        results = {hole: 'A' for hole in range(1, 6)}
        results.update({6: 'B', 7: 'B', 8: 'B', 9: 'B'})
        side_a, side_b = sides(results)
        status = match_status(side_a, side_b, FRONT)
        assert status.status == 'A wins 5 & 4'
        assert status.side_a_holes_up == 5
        assert status.holes_played == 5
        assert match_points(status) == {'A': 1.0, 'B': 0.0}

    def test_empty_hole_range(self):
        """Test a match over no holes is never finished."""
        side_a, side_b = sides({hole: 'halve' for hole in FRONT})
        status = match_status(side_a, side_b, range(15, 10))
        assert status.status == 'All Square'
        assert not status.is_finished
        assert match_points(status) == {'A': 0.0, 'B': 0.0}

    def test_won_on_last_hole(self):
        """Test a match decided on the last hole reads N UP."""
        results = {hole: 'halve' for hole in range(1, 9)}
        results[9] = 'A'
        side_a, side_b = sides(results)
        status = match_status(side_a, side_b, FRONT)
        assert status.status == 'A wins 1 UP'
        assert status.is_finished

    def test_halved_match(self):
        """Test a fully halved match finishes all square."""
        side_a, side_b = sides({hole: 'halve' for hole in FRONT})
        status = match_status(side_a, side_b, FRONT)
        assert status.status == 'All Square'
        assert status.is_finished
        assert not status.is_closed

    def test_out_of_order_scores(self):
        """Test holes entered out of order still count."""
        side_a, side_b = sides({1: 'A', 5: 'A'})
        status = match_status(side_a, side_b, FRONT)
        assert status.status == 'A 2 UP'
        assert status.holes_played == 2
        assert status.holes_remaining == 7
        assert next_hole(side_a, side_b, FRONT) == 2

    def test_eighteen_hole_range(self):
        """Test an 18-hole match counts remaining holes over the whole round."""
        side_a, side_b = sides({hole: 'B' for hole in range(1, 11)})
        status = match_status(side_a, side_b, range(1, 19))
        assert status.status == 'B wins 10 & 8'
        assert status.is_closed
        assert status.is_finished


class TestLosingSideAndNextHole:
    """Tests for press-related helpers."""

    def test_losing_side(self):
        """Test the trailing side is reported."""
        side_a, side_b = sides({1: 'A'})
        assert losing_side(match_status(side_a, side_b, FRONT)) == 'B'

    def test_no_losing_side_when_square(self):
        """Test all square has no losing side."""
        side_a, side_b = sides({1: 'A', 2: 'B'})
        assert losing_side(match_status(side_a, side_b, FRONT)) is None

    def test_no_losing_side_when_closed(self):
        """Test a closed match has no losing side even with holes left."""
        side_a, side_b = sides({1: 'A', 2: 'A', 3: 'A', 4: 'A', 5: 'A'})
        status = match_status(side_a, side_b, FRONT)
        assert status.is_closed
        assert losing_side(status) is None
        assert next_hole(side_a, side_b, FRONT) is None

    def test_next_hole(self):
        """Test next hole is the lowest one not yet decided."""
        side_a, side_b = sides({1: 'A', 2: 'halve'})
        assert next_hole(side_a, side_b, FRONT) == 3

    def test_next_hole_when_fully_scored(self):
        """Test a fully scored range has no next hole."""
        side_a, side_b = sides({hole: 'halve' for hole in FRONT})
        assert next_hole(side_a, side_b, FRONT) is None


class TestMatchPoints:
    """Tests for points a match is worth."""

    def test_unfinished_match_scores_nothing(self):
        """Test points are only awarded once a match is over."""
        side_a, side_b = sides({1: 'A'})
        assert match_points(match_status(side_a, side_b, FRONT)) == {'A': 0.0, 'B': 0.0}

    def test_winner_takes_point(self):
        """Test a closed match gives its point to the winner."""
        side_a, side_b = sides({hole: 'B' for hole in range(1, 6)})
        assert match_points(match_status(side_a, side_b, FRONT)) == {'A': 0.0, 'B': 1.0}

    def test_halved_match_splits_point(self):
        """Test a halved match splits the point."""
        side_a, side_b = sides({hole: 'halve' for hole in FRONT})
        assert match_points(match_status(side_a, side_b, FRONT)) == {'A': 0.5, 'B': 0.5}
