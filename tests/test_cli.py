"""
Tests for the command-line entry point.
"""


class TestEvaluateCommand:
    def test_prints_result(self, capsys):
        from main import main

        assert main(["2+2"]) == 0
        assert capsys.readouterr().out.strip() == "4"

    def test_joins_words(self, capsys):
        """Test unquoted arguments are joined with spaces."""
        from main import main

        assert main(["2", "+", "3"]) == 0
        assert capsys.readouterr().out.strip() == "5"

    def test_error_exit_status(self, capsys):
        from main import main

        assert main(["1/0"]) == 1
        assert capsys.readouterr().out.startswith("Error: ")

    def test_verbose_traces_to_stderr(self, capsys):
        from main import main

        main(["--verbose", "2+2"])
        captured = capsys.readouterr()

        assert "[normalized]" in captured.err
        assert "[result]" in captured.err

    def test_verbose_error_hint(self, capsys):
        from main import main

        main(["--verbose", "solve(x^3, x)"])

        assert "Try: " in capsys.readouterr().err

    def test_normalize(self, capsys):
        from main import main

        assert main(["--normalize", r"\frac{1}{2}"]) == 0
        assert capsys.readouterr().out.strip() == "((1)/(2))"

    def test_no_expression(self, capsys):
        from main import main

        assert main([]) == 2
        assert "usage" in capsys.readouterr().out.lower()


class TestCheckCommand:
    def test_correct(self, capsys):
        from main import main

        assert main(["--check", "4", "4.0"]) == 0
        assert capsys.readouterr().out.strip() == "correct"

    def test_incorrect(self, capsys):
        from main import main

        assert main(["--check", "3", "4"]) == 1
        assert capsys.readouterr().out.strip() == "incorrect"

    def test_algebraic(self, capsys):
        from main import main

        assert main(["--check", "--algebraic", "2(x+1)", "2x+2"]) == 0

    def test_needs_two_answers(self, capsys):
        from main import main

        assert main(["--check", "4"]) == 2
        assert "two answers" in capsys.readouterr().err
