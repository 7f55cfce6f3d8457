#!/usr/bin/env python3
"""
MathPad - evaluate notepad expressions and check answers from the terminal.

Entry point for the application with CLI support.

Usage:
    mathpad "2+2"                          # Evaluate an expression
    mathpad "solve(x^2-5x+6, x)"           # Solve a quadratic
    mathpad --normalize "\\frac{1}{2}x"     # Show the canonical form
    mathpad --check "π" "3.14159"          # Check an answer
"""

import argparse
import sys


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mathpad",
        description="Evaluate LaTeX notepad expressions and check answers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mathpad "\\sqrt{16}"                      Evaluate and print 4
  mathpad "d/dx(x^3 + 2x)"                 Differentiate
  mathpad "limit(1/x, x -> inf)"           Evaluate a limit
  mathpad --check "1/2" "0.5"              Check an answer (exit 0 if correct)
  mathpad --check --algebraic "2(x+1)" "2x+2"
        """,
    )

    # Positional: expression, or the two answers with --check
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate (LaTeX or plain text)",
    )

    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Print the canonical form instead of evaluating",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Compare two answers: USER CORRECT",
    )

    parser.add_argument(
        "--algebraic",
        action="store_true",
        help="With --check, also accept algebraically equal expressions",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.5.0",
    )

    # Verbose
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Trace each evaluation stage on stderr",
    )

    return parser


def evaluate_cli(expression: str, verbose: bool) -> int:
    """Evaluate an expression and print the result."""
    from mathpad.engine import MathEngine
    from mathpad.utils.errors import format_error_for_user
    from mathpad.utils.trace import TraceRecorder, stderr_trace

    engine = MathEngine()
    recorder = TraceRecorder()

    def trace(event, payload):
        recorder(event, payload)
        if verbose:
            stderr_trace(event, payload)

    result = engine.evaluate(expression, trace=trace)
    print(result)

    errors = recorder.events_named("error")
    if errors:
        if verbose:
            print(format_error_for_user(errors[0]["exception"]), file=sys.stderr)
        return 1
    return 0


def check_cli(user_answer: str, correct_answer: str, algebraic: bool) -> int:
    """Compare two answers; exit status 0 when they match."""
    from mathpad.grading import AnswerJudge

    judge = AnswerJudge(algebraic=algebraic)
    if judge.is_equivalent(user_answer, correct_answer):
        print("correct")
        return 0
    print("incorrect")
    return 1


def main(argv=None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.check:
        if len(args.expression) != 2:
            print("Error: --check needs exactly two answers: USER CORRECT", file=sys.stderr)
            return 2
        user_answer, correct_answer = args.expression
        return check_cli(user_answer, correct_answer, args.algebraic)

    if not args.expression:
        parser.print_help()
        return 2

    expression = " ".join(args.expression)

    if args.normalize:
        from mathpad.input import normalize

        print(normalize(expression))
        return 0

    return evaluate_cli(expression, args.verbose)


if __name__ == "__main__":
    sys.exit(main() or 0)
