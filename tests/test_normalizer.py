"""
Tests for LaTeX normalization.
"""

import pytest


class TestMacroRewriting:
    """Tests for the LaTeX macro table."""

    def test_sqrt(self):
        """Test \\sqrt{E} becomes a function call."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\sqrt{16}") == "sqrt(16)"

    def test_sqrt_keeps_inner_groups(self):
        """Test exponent braces inside sqrt survive the rewrite."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\sqrt{x^{2}+1}") == "sqrt(x^2+1)"

    def test_nested_sqrt(self):
        """Test nested square roots."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\sqrt{\sqrt{16}}") == "sqrt(sqrt(16))"

    def test_nth_root(self):
        """Test \\sqrt[n]{E}."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\sqrt[3]{8}") == "root(8, 3)"

    def test_operatorname(self):
        """Test \\operatorname{name} loses its wrapper."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\operatorname{abs}(x)") == "abs(x)"

    def test_constants(self):
        """Test \\pi and \\hbar."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"2\pi") == "2*pi"
        assert normalize(r"\hbar") == "hbar"

    def test_operators(self):
        """Test \\cdot, \\times and \\div."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"2\cdot3") == "2*3"
        assert normalize(r"2\times3") == "2*3"
        assert normalize(r"6\div3") == "6/3"

    def test_left_right_parentheses(self):
        """Test \\left( and \\right)."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\left(x+1\right)^{2}") == "(x+1)^2"

    def test_absolute_value(self):
        """Test \\left|...\\right| becomes abs()."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\left|x-3\right|") == "abs(x-3)"

    def test_integral(self):
        """Test \\int becomes integrate."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\int(x^2, x)") == "integrate(x^2, x)"

    def test_fraction(self):
        """Test \\frac{A}{B} keeps numerator and denominator grouped."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\frac{1}{2}") == "((1)/(2))"
        assert normalize(r"\frac{x+1}{x-1}") == "((x+1)/(x-1))"

    def test_leibniz_derivative(self):
        """Test \\frac{d}{dx} becomes d/dx."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\frac{d}{dx}\left(x^{2}\right)") == "d/dx(x^2)"

    def test_limit_arrow_and_infinity(self):
        """Test \\to and \\infty."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"limit(1/x, x \to \infty)") == "limit(1/x, x -> infinity)"

    def test_function_macros(self):
        """Test \\sin and friends lose the backslash."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\sin\left(x\right)") == "sin(x)"
        assert normalize(r"\ln(x)") == "ln(x)"

    def test_adjacent_names_stay_separate(self):
        """Test \\sin\\theta does not fuse into one name."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\sin\theta") == "sin theta"

    def test_lambda_spelling(self):
        """Test \\lambda becomes SymPy's lamda."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"2\lambda") == "2*lamda"

    def test_unknown_macro_passes_through(self):
        """Test unrecognized macros are left alone."""
        from mathpad.input.normalizer import normalize

        assert normalize(r"\foo+1") == r"\foo+1"

    def test_display_delimiters(self):
        """Test $...$ is removed."""
        from mathpad.input.normalizer import normalize

        assert normalize("$x^2$") == "x^2"


class TestBracesAndExponents:
    """Tests for brace stripping."""

    def test_simple_exponent(self):
        from mathpad.input.normalizer import normalize

        assert normalize("x^{10}") == "x^10"
        assert normalize("x^{-1}") == "x^-1"

    def test_compound_exponent_keeps_grouping(self):
        """Test e^{2x} stays e^(2x) rather than e^2*x."""
        from mathpad.input.normalizer import normalize

        assert normalize("e^{2x}") == "e^(2*x)"

    def test_subscript(self):
        from mathpad.input.normalizer import normalize

        assert normalize("k_{B}") == "k_B"


class TestImplicitMultiplication:
    """Tests for implicit multiplication insertion."""

    def test_digit_letter(self):
        from mathpad.input.normalizer import normalize

        assert normalize("2x+3") == "2*x+3"

    def test_adjacent_groups(self):
        from mathpad.input.normalizer import normalize

        assert normalize("(x+1)(x-1)") == "(x+1)*(x-1)"

    def test_group_then_variable(self):
        from mathpad.input.normalizer import normalize

        assert normalize("(x+1)y") == "(x+1)*y"

    def test_group_then_function_call(self):
        """Test a following function name is not split by backtracking."""
        from mathpad.input.normalizer import normalize

        assert normalize("(x+1)sin(x)") == "(x+1)sin(x)"
        assert normalize("sin(x)cos(x)") == "sin(x)cos(x)"

    def test_solve_call(self):
        from mathpad.input.normalizer import normalize

        assert normalize("solve(x^2-5x+6, x)") == "solve(x^2-5*x+6, x)"


class TestIdempotence:
    """normalize(normalize(x)) == normalize(x) for macro-free input."""

    @pytest.mark.parametrize(
        "text",
        [
            "2x+3",
            "(x+1)(x-2)",
            "solve(x^2-5x+6, x)",
            "sin(x)cos(x)",
            "3(x+1)y",
            "limit(1/x, x -> inf)",
            "  x ^ 2  ",
        ],
    )
    def test_idempotent(self, text):
        from mathpad.input.normalizer import normalize

        once = normalize(text)
        assert normalize(once) == once


class TestTotality:
    """The normalizer never raises."""

    @pytest.mark.parametrize(
        "text", [r"\frac{1}{", r"\sqrt", r"\sqrt[3", "}{", "", r"\left|x"]
    )
    def test_malformed_input(self, text):
        from mathpad.input.normalizer import normalize

        assert isinstance(normalize(text), str)
