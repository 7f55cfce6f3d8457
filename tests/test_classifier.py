"""
Tests for operation classification and the solver registry.
"""

import pytest


class TestClassifier:
    """Keyword routing over canonical expressions."""

    def test_fallback_is_evaluate(self):
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        request = classify("2+2")
        assert request.kind == OperationKind.EVALUATE
        assert request.expression == "2+2"

    def test_leibniz_derivative(self):
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        request = classify("d/dt(t^2+1)")
        assert request.kind == OperationKind.DERIVATIVE
        assert request.expression == "t^2+1"
        assert request.variable == "t"

    def test_derivative_default_variable(self):
        """Test derivative(expr) differentiates in x."""
        from mathpad.classification import classify

        assert classify("derivative(x^3)").variable == "x"
        assert classify("derivative(y^3, y)").variable == "y"

    def test_rewrites(self):
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        assert classify("simplify(x+x)").kind == OperationKind.SIMPLIFY
        assert classify("expand((x+1)^2)").kind == OperationKind.EXPAND
        assert classify("factor(x^2-1)").kind == OperationKind.FACTOR

    def test_solve(self):
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        request = classify("solve(x^2-5*x+6, x)")
        assert request.kind == OperationKind.SOLVE
        assert request.expression == "x^2-5*x+6"
        assert request.variable == "x"

    def test_limit(self):
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        request = classify("limit(1/x, x -> inf)")
        assert request.kind == OperationKind.LIMIT
        assert request.expression == "1/x"
        assert request.variable == "x"
        assert request.target == "inf"

    def test_integrals(self):
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        indefinite = classify("integrate(x^2, x)")
        assert indefinite.kind == OperationKind.INTEGRATE
        assert indefinite.bounds is None

        definite = classify("integrate(x^2, x, 0, 1)")
        assert definite.bounds == ("0", "1")

    def test_sum_and_product(self):
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        assert classify("sum(k, k, 1, 10)").kind == OperationKind.SUM
        assert classify("product(k, k, 1, 5)").kind == OperationKind.PRODUCT

    def test_nested_arguments(self):
        """Test commas inside brackets do not split arguments."""
        from mathpad.classification import classify

        request = classify("solve(root(x, 2)-1, x)")
        assert request.expression == "root(x, 2)-1"

    def test_keyword_must_span_whole_expression(self):
        """Test simplify(x)+1 is a plain evaluation."""
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        assert classify("simplify(x)+1").kind == OperationKind.EVALUATE

    def test_keyword_prefix_is_not_keyword(self):
        from mathpad.classification import classify
        from mathpad.models import OperationKind

        assert classify("solver").kind == OperationKind.EVALUATE

    @pytest.mark.parametrize(
        "text",
        [
            "solve(x^2)",
            "solve(x^2, x, y)",
            "limit(1/x, x)",
            "limit(1/x, x -> )",
            "sum(k, k, 1)",
            "integrate(x, x, 0)",
            "solve(x, 2)",
            "simplify(x, y)",
            "solve(, x)",
        ],
    )
    def test_malformed_calls_raise(self, text):
        from mathpad.classification import classify
        from mathpad.utils.errors import ParseError

        with pytest.raises(ParseError):
            classify(text)


class TestSplitArguments:
    def test_top_level_commas(self):
        from mathpad.classification import split_arguments

        assert split_arguments("a, b ,c") == ["a", "b", "c"]

    def test_nested(self):
        from mathpad.classification import split_arguments

        assert split_arguments("f(a, b), [c, d]") == ["f(a, b)", "[c, d]"]


class TestRegistry:
    """Every operation kind has exactly one solver."""

    def test_default_registry_is_complete(self):
        from mathpad.models import OperationKind
        from mathpad.solvers import get_default_registry

        registry = get_default_registry()
        assert registry.missing_kinds() == []

        covered = [kind for solver in registry.solvers for kind in solver.kinds]
        assert sorted(k.name for k in covered) == sorted(k.name for k in OperationKind)

    def test_incomplete_registry_rejected(self):
        from mathpad.algebra import SympyBackend
        from mathpad.solvers import GeneralSolver, SolverRegistry

        registry = SolverRegistry()
        registry.register(GeneralSolver(SympyBackend()))

        with pytest.raises(ValueError):
            registry.check_complete()

    def test_duplicate_kind_rejected(self):
        from mathpad.algebra import SympyBackend
        from mathpad.solvers import GeneralSolver, SolverRegistry

        backend = SympyBackend()
        registry = SolverRegistry()
        registry.register(GeneralSolver(backend))

        with pytest.raises(ValueError):
            registry.register(GeneralSolver(backend))

    def test_engine_refuses_incomplete_registry(self):
        from mathpad.engine import MathEngine
        from mathpad.solvers import SolverRegistry

        with pytest.raises(ValueError):
            MathEngine(registry=SolverRegistry())
