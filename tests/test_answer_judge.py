"""
Tests for answer checking.
"""

import pytest


class TestNumericAnswers:
    """Both sides evaluate to numbers."""

    @pytest.mark.parametrize(
        "user, correct",
        [
            ("4", "4.0"),
            ("-3.4", "-3.4000"),
            ("1/2", "0.5"),
            ("π", "3.14159"),
            ("2^3", "8"),
            ("√(16)", "4"),
            ("pi/2", "1.5708"),
            ("e", "2.71828"),
        ],
    )
    def test_equivalent(self, user, correct):
        from mathpad.grading import is_equivalent

        assert is_equivalent(user, correct)

    def test_outside_tolerance(self):
        from mathpad.grading import is_equivalent

        assert not is_equivalent("3.14", "3.14159")

    def test_custom_tolerance(self):
        from mathpad.grading import AnswerJudge

        judge = AnswerJudge(tolerance=0.01)
        assert judge.is_equivalent("3.14", "3.14159")

    def test_symmetric(self):
        from mathpad.grading import is_equivalent

        assert is_equivalent("0.5", "1/2") == is_equivalent("1/2", "0.5")


class TestToNumber:
    def test_plain_decimal(self):
        from mathpad.grading import AnswerJudge

        assert AnswerJudge().to_number(".5") == 0.5

    def test_quotient(self):
        from mathpad.grading import AnswerJudge

        assert AnswerJudge().to_number("3 / 4") == 0.75

    def test_zero_denominator_is_not_a_number(self):
        import math

        from mathpad.grading import AnswerJudge

        assert math.isnan(AnswerJudge().to_number("1/0"))

    def test_words_are_not_numbers(self):
        import math

        from mathpad.grading import AnswerJudge

        assert math.isnan(AnswerJudge().to_number("diverges"))

    def test_power_tower_is_fast(self):
        """Test 9^9^9 is evaluated in floating point and compared at once."""
        from mathpad.grading import is_equivalent

        assert is_equivalent("2^2^3", "256")
        assert not is_equivalent("9^9^9", "1")

    def test_rejects_code(self):
        """Test only arithmetic reaches the evaluator."""
        import math

        from mathpad.grading import AnswerJudge

        assert math.isnan(AnswerJudge().to_number("__import__('os')"))


class TestTextAnswers:
    """Fallback string comparison."""

    def test_case_insensitive(self):
        from mathpad.grading import is_equivalent

        assert is_equivalent("Converge", "converge")

    def test_ignores_spaces_and_brackets(self):
        from mathpad.grading import is_equivalent

        assert is_equivalent("(-∞, 3)", "(-∞,3)")
        assert is_equivalent("x > 3", "x>3")

    def test_different_words(self):
        from mathpad.grading import is_equivalent

        assert not is_equivalent("converges", "diverges")

    def test_expressions_compared_as_text_by_default(self):
        from mathpad.grading import is_equivalent

        assert not is_equivalent("x+1", "1+x")

    def test_judge_pair(self):
        from mathpad.grading import AnswerJudge
        from mathpad.models import AnswerPair

        assert AnswerJudge().judge(AnswerPair(user_answer="4", correct_answer="4.0"))


class TestAlgebraicMode:
    """Opt-in symbolic comparison."""

    def test_reordered_sum(self):
        from mathpad.grading import AnswerJudge

        assert AnswerJudge(algebraic=True).is_equivalent("x+1", "1+x")

    def test_distributed(self):
        from mathpad.grading import AnswerJudge

        assert AnswerJudge(algebraic=True).is_equivalent("2(x+1)", "2x+2")

    def test_identity(self):
        from mathpad.grading import AnswerJudge

        judge = AnswerJudge(algebraic=True)
        assert judge.is_equivalent("sin(x)^2+cos(x)^2", "1")

    def test_different_expressions(self):
        from mathpad.grading import AnswerJudge

        judge = AnswerJudge(algebraic=True)
        assert not judge.is_equivalent("x+y", "2x")
        assert not judge.is_equivalent("x^2", "2x")

    def test_unparseable_falls_back_to_text(self):
        from mathpad.grading import AnswerJudge

        judge = AnswerJudge(algebraic=True)
        assert not judge.is_equivalent("x+", "x")
