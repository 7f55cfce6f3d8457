"""
LaTeX to calculator-notation normalizer.

Converts the LaTeX produced by a math-input widget into the plain infix
notation the algebra backend parses: explicit ``*``, function-call syntax,
no braces.
"""

import re
from typing import Callable, Optional, Tuple


class LatexNormalizer:
    """
    Rewrite LaTeX-like strings into canonical calculator notation.

    The rewrite never fails. Unknown macros are passed through unchanged
    and left for the parser to reject.

    Usage:
        normalizer = LatexNormalizer()
        normalizer.normalize(r"2\\sqrt{x}\\cdot\\pi")  # '2*sqrt(x)*pi'
    """

    # Applied in order after sqrt/frac have been rewritten.
    MACRO_TABLE = [
        (r"\\left\|(.*?)\\right\|", r"abs(\1)"),
        (r"\\left\(", "("),
        (r"\\right\)", ")"),
        (r"\\left\[", "("),
        (r"\\right\]", ")"),
        (r"\\cdot(?![a-zA-Z])", "*"),
        (r"\\times(?![a-zA-Z])", "*"),
        (r"\\div(?![a-zA-Z])", "/"),
        (r"\\(?:to|rightarrow)(?![a-zA-Z])", "->"),
        # Thin spaces from the input widget
        (r"\\[,;:!]", ""),
        (r"\\ ", " "),
    ]

    # Macros that become a plain name. A space is kept after the name when
    # another name follows, so \sin\theta reads "sin theta", not "sintheta".
    WORD_MACROS = {
        "pi": "pi",
        "hbar": "hbar",
        "int": "integrate",
        "infty": "infinity",
        # "lambda" is a Python keyword; SymPy spells the symbol "lamda"
        "lambda": "lamda",
    }

    FUNCTION_MACROS = (
        "arcsin",
        "arccos",
        "arctan",
        "sinh",
        "cosh",
        "tanh",
        "sin",
        "cos",
        "tan",
        "sec",
        "csc",
        "cot",
        "ln",
        "log",
        "exp",
    )

    GREEK_MACROS = (
        "alpha",
        "beta",
        "gamma",
        "delta",
        "epsilon",
        "varepsilon",
        "zeta",
        "eta",
        "theta",
        "iota",
        "kappa",
        "mu",
        "nu",
        "xi",
        "rho",
        "sigma",
        "tau",
        "phi",
        "varphi",
        "chi",
        "psi",
        "omega",
        "Gamma",
        "Delta",
        "Theta",
        "Lambda",
        "Sigma",
        "Phi",
        "Psi",
        "Omega",
    )

    DISPLAY_DELIMITERS = ("$", r"\[", r"\]")

    def normalize(self, raw: str) -> str:
        """
        Normalize a raw LaTeX-like string.

        Args:
            raw: String from the input widget (e.g., r"\\frac{1}{2}x^{2}")

        Returns:
            Canonical expression string (e.g., "((1)/(2))*x^2")
        """
        result = self._preprocess(raw)

        result = re.sub(r"\\operatorname\{([^{}]*)\}", r"\1", result)

        result = re.sub(r"\\frac\{d\}\{d([a-zA-Z])\}", r"d/d\1", result)
        result = self._rewrite_macro(result, r"\frac", self._build_frac, arity=2)
        result = self._rewrite_macro(result, r"\dfrac", self._build_frac, arity=2)

        # sqrt must be rewritten before braces are stripped
        result = self._rewrite_macro(result, r"\sqrt", self._build_sqrt, arity=1)

        result = self._apply_macro_table(result)

        result = self._rewrite_exponent_groups(result)
        result = result.replace("{", "").replace("}", "")

        return self._insert_implicit_multiplication(result)

    def _preprocess(self, raw: str) -> str:
        """Strip display delimiters and collapse whitespace."""
        result = raw.strip()
        for delim in self.DISPLAY_DELIMITERS:
            result = result.replace(delim, "")
        return " ".join(result.split())

    def _apply_macro_table(self, text: str) -> str:
        result = text
        for pattern, replacement in self.MACRO_TABLE:
            result = re.sub(pattern, replacement, result)

        words = dict(self.WORD_MACROS)
        for name in self.FUNCTION_MACROS + self.GREEK_MACROS:
            words.setdefault(name, name)

        def replace(match: "re.Match") -> str:
            name, following = match.group(1), match.group(2)
            if name not in words:
                return match.group(0)
            separator = " " if following and (following.isalnum() or following == "\\") else ""
            return words[name] + separator

        return re.sub(r"\\([a-zA-Z]+)(?=(.?))", replace, result)

    # --- brace-aware rewriting ---

    def _rewrite_macro(
        self,
        text: str,
        macro: str,
        build: Callable[[Tuple[str, ...], Optional[str]], str],
        arity: int,
    ) -> str:
        """
        Replace ``macro[opt]{a}{b}`` occurrences using ``build``.

        Works from the last occurrence backwards so that nested uses inside
        an argument are rewritten before the enclosing one.
        """
        result = text
        search_end = len(result)
        while True:
            start = self._find_macro(result, macro, search_end)
            if start < 0:
                return result

            pos = start + len(macro)
            option = None
            if pos < len(result) and result[pos] == "[":
                close = result.find("]", pos)
                if close < 0:
                    return result
                option = result[pos + 1 : close]
                pos = close + 1

            args = []
            for _ in range(arity):
                group = self._read_group(result, pos)
                if group is None:
                    break
                content, pos = group
                args.append(content)

            if len(args) < arity:
                # Malformed: leave it for the parser, keep looking further left
                search_end = start
                continue

            replacement = build(tuple(args), option)
            result = result[:start] + replacement + result[pos:]
            search_end = start

    def _find_macro(self, text: str, macro: str, end: int) -> int:
        """Last index of ``macro`` before ``end`` not followed by a letter."""
        index = text.rfind(macro, 0, end)
        while index >= 0:
            after = index + len(macro)
            if after >= len(text) or not text[after].isalpha():
                return index
            index = text.rfind(macro, 0, index)
        return -1

    def _read_group(self, text: str, pos: int) -> Optional[Tuple[str, int]]:
        """
        Read one macro argument at ``pos``.

        Either a balanced ``{...}`` group or a single character
        (``\\frac12``). Returns (content, position after the argument).
        """
        while pos < len(text) and text[pos] == " ":
            pos += 1
        if pos >= len(text):
            return None

        if text[pos] != "{":
            if text[pos] in "}^_":
                return None
            macro = re.match(r"\\[a-zA-Z]+", text[pos:])
            if macro:
                return macro.group(0), pos + macro.end()
            return text[pos], pos + 1

        depth = 0
        for i in range(pos, len(text)):
            if text[i] == "{":
                depth += 1
            elif text[i] == "}":
                depth -= 1
                if depth == 0:
                    return text[pos + 1 : i], i + 1
        return None

    @staticmethod
    def _build_frac(args: Tuple[str, ...], option: Optional[str]) -> str:
        numerator, denominator = args
        return f"(({numerator})/({denominator}))"

    @staticmethod
    def _build_sqrt(args: Tuple[str, ...], option: Optional[str]) -> str:
        (radicand,) = args
        if option:
            return f"root({radicand}, {option})"
        return f"sqrt({radicand})"

    def _rewrite_exponent_groups(self, text: str) -> str:
        """
        ``^{2x+1}`` -> ``^(2x+1)``; single tokens like ``^{10}`` or ``^{-1}``
        just lose their braces later.
        """
        result = text
        search_end = len(result)
        while True:
            start = result.rfind("^{", 0, search_end)
            if start < 0:
                return result
            group = self._read_group(result, start + 1)
            if group is None:
                search_end = start
                continue
            content, end = group
            if re.fullmatch(r"-?(?:\d+(?:\.\d+)?|[a-zA-Z])", content):
                replacement = "^" + content
            else:
                replacement = "^(" + content + ")"
            result = result[:start] + replacement + result[end:]
            search_end = start

    def _insert_implicit_multiplication(self, text: str) -> str:
        """
        Make multiplication explicit.

        - ``2x``  -> ``2*x``
        - ``)(``  -> ``)*(``
        - ``)x``  -> ``)*x``, but ``)sin(`` stays a function call
        """
        result = re.sub(r"(\d)([a-zA-Z])", r"\1*\2", text)
        result = result.replace(")(", ")*(")
        # The whole identifier must be free of a following "(" so that
        # backtracking to a shorter prefix cannot sneak past the lookahead
        result = re.sub(r"\)(?=[a-zA-Z_]\w*(?![\w(]))", ")*", result)
        return result


_default_normalizer = LatexNormalizer()


def normalize(raw: str) -> str:
    """
    Convenience function: normalize with the default normalizer.
    """
    return _default_normalizer.normalize(raw)
