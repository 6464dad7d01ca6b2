"""Tests for Elo rating calculations."""

import pytest

from eloquent.models.idea import IdGenerator, create_idea
from eloquent.ranking.elo import K_FACTOR, expectation, leaderboard, rate, update_ratings
from eloquent.ranking.preference import Preference


def make_idea(elo=1000.0, ids=None):
    return create_idea("idea", ids=ids or IdGenerator(), elo=elo)


class TestExpectation:
    """Tests for expected score calculation."""

    def test_equal_ratings(self):
        """Test equal ratings produce 0.5 expected."""
        assert expectation(1000, 1000) == 0.5

    def test_higher_rating_higher_expected(self):
        """Test higher rated idea has higher expected score."""
        expected = expectation(1200, 1000)
        assert 0.5 < expected < 1.0

    def test_lower_rating_lower_expected(self):
        """Test lower rated idea has lower expected score."""
        expected = expectation(1000, 1200)
        assert 0.0 < expected < 0.5

    def test_400_point_difference(self):
        """Test 400 point difference produces ~91% expected."""
        # 10^(400/400) = 10, so expected = 1/(1+0.1) ≈ 0.909
        assert expectation(1400, 1000) == pytest.approx(0.909, abs=0.001)

    def test_expectations_sum_to_one(self):
        """Test both sides' expectations add up to 1."""
        assert expectation(1234, 987) + expectation(987, 1234) == pytest.approx(1.0)


class TestRate:
    """Tests for the value-returning rating update."""

    def test_equal_ratings_first_wins(self):
        """Test 1000 vs 1000 with first preferred gives 1016 / 984."""
        new_first, new_second = rate(1000, 1000, Preference.FIRST)
        assert new_first == 1016.0
        assert new_second == 984.0

    def test_upset(self):
        """Test 1200 vs 1000 with second preferred."""
        new_first, new_second = rate(1200, 1000, Preference.SECOND)
        assert new_first == pytest.approx(1175.69, abs=0.01)
        assert new_second == pytest.approx(1024.31, abs=0.01)

    def test_tie_between_equals_is_noop(self):
        """Test a tie between equal ratings changes nothing."""
        assert rate(1000, 1000, Preference.NO_PREFERENCE) == (1000.0, 1000.0)

    def test_tie_pulls_ratings_together(self):
        """Test a tie moves the favourite down and the underdog up."""
        new_first, new_second = rate(1200, 1000, Preference.NO_PREFERENCE)
        assert new_first < 1200
        assert new_second > 1000

    def test_zero_sum(self):
        """Test rating changes are zero-sum."""
        new_first, new_second = rate(1100, 950, Preference.FIRST)
        assert (new_first - 1100) == pytest.approx(-(new_second - 950))

    def test_custom_k_factor(self):
        """Test the K-factor scales the swing."""
        new_first, _ = rate(1000, 1000, Preference.FIRST, k_factor=10)
        assert new_first == 1005.0

    @pytest.mark.parametrize(
        ("r_a", "r_b"),
        [(1000, 1000), (1200, 1000), (1000, 1200), (0, 5000), (-300, 40.5)],
    )
    def test_swapping_arguments_is_symmetric(self, r_a, r_b):
        """Test (A, B, first) gives the same result as (B, A, second)."""
        a_after, b_after = rate(r_a, r_b, Preference.FIRST)
        b_swapped, a_swapped = rate(r_b, r_a, Preference.SECOND)

        assert a_after == pytest.approx(a_swapped)
        assert b_after == pytest.approx(b_swapped)


class TestUpdateRatings:
    """Tests for in-place rating updates."""

    def test_concrete_first_preferred(self):
        """Test the equal-rating scenario updates both records."""
        a = make_idea(1000)
        b = make_idea(1000)

        result = update_ratings(a, b, Preference.FIRST)

        assert result is None
        assert a.elo == 1016.0
        assert b.elo == 984.0
        assert a.comparisons == 1
        assert b.comparisons == 1

    def test_concrete_second_preferred(self):
        """Test the 1200 vs 1000 upset scenario."""
        a = make_idea(1200)
        b = make_idea(1000)

        update_ratings(a, b, Preference.SECOND)

        assert a.elo == pytest.approx(1175.69, abs=0.01)
        assert b.elo == pytest.approx(1024.31, abs=0.01)

    def test_no_preference_between_equals(self):
        """Test a tie between equals only bumps the comparison counts."""
        a = make_idea(1000)
        b = make_idea(1000)

        update_ratings(a, b, Preference.NO_PREFERENCE)

        assert a.elo == 1000.0
        assert b.elo == 1000.0
        assert a.comparisons == 1
        assert b.comparisons == 1

    def test_uses_pre_update_snapshot(self):
        """Test the second idea's update ignores the first idea's new rating."""
        a = make_idea(1200)
        b = make_idea(1000)

        update_ratings(a, b, Preference.FIRST)

        # Zero-sum only holds if both updates used the same snapshot
        assert (a.elo - 1200) == pytest.approx(1000 - b.elo)

    @pytest.mark.parametrize(
        ("r_a", "r_b"),
        [(1000, 1000), (900, 1000), (1000, 1400), (0, 5000), (-50, -40)],
    )
    def test_preferred_underdog_gains_within_k(self, r_a, r_b):
        """Test the preferred lower-or-equal rated idea gains, bounded by K."""
        a = make_idea(r_a)
        b = make_idea(r_b)

        update_ratings(a, b, Preference.FIRST)

        assert a.elo > r_a
        assert b.elo < r_b
        assert abs(a.elo - r_a) <= K_FACTOR
        assert abs(b.elo - r_b) <= K_FACTOR

    def test_comparisons_accumulate(self):
        """Test each call adds exactly one comparison to each idea."""
        a = make_idea()
        b = make_idea()

        for preference in (Preference.FIRST, Preference.SECOND, Preference.NO_PREFERENCE):
            update_ratings(a, b, preference)

        assert a.comparisons == 3
        assert b.comparisons == 3

    def test_id_name_and_cost_untouched(self):
        """Test only elo and comparisons change."""
        ids = IdGenerator()
        a = create_idea("a", 5.0, ids=ids)
        b = create_idea("b", ids=ids)

        update_ratings(a, b, Preference.SECOND)

        assert (a.id, a.name, a.cost) == (0, "a", 5.0)
        assert (b.id, b.name, b.cost) == (1, "b", None)


class TestLeaderboard:
    """Tests for leaderboard ordering."""

    def test_sorted_by_elo_descending(self):
        """Test ideas are ordered highest rating first."""
        ids = IdGenerator()
        low = create_idea("low", ids=ids, elo=900)
        high = create_idea("high", ids=ids, elo=1100)
        mid = create_idea("mid", ids=ids, elo=1000)

        assert leaderboard([low, high, mid]) == [high, mid, low]

    def test_ties_keep_creation_order(self):
        """Test equal ratings are ordered by id."""
        ids = IdGenerator()
        first = create_idea("first", ids=ids)
        second = create_idea("second", ids=ids)

        assert leaderboard([second, first]) == [first, second]

    def test_does_not_mutate_input(self):
        """Test the input list keeps its order."""
        ids = IdGenerator()
        ideas = [create_idea("a", ids=ids, elo=900), create_idea("b", ids=ids, elo=1100)]

        leaderboard(ideas)

        assert [i.name for i in ideas] == ["a", "b"]
