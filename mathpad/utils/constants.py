"""
Numeric tolerances and the physical constants known to evaluate().

Standard SI values, substituted into plain evaluations by name.
"""

# Coefficient classification in solve(): below this a coefficient is zero
SOLVE_TOLERANCE = 1e-10

# Number formatting: magnitudes below this print as "0", values this close
# to an integer print as that integer
ZERO_TOLERANCE = 1e-10

# Answer checking
ANSWER_TOLERANCE = 1e-3

DECIMAL_PLACES = 6

# Physical-constant results outside [SCIENTIFIC_LOWER, SCIENTIFIC_UPPER) print
# in scientific notation with this many significant figures
SIGNIFICANT_FIGURES = 7
SCIENTIFIC_LOWER = 1e-4
SCIENTIFIC_UPPER = 1e15

DEFAULT_VARIABLE = "x"

# Sample points for the algebraic answer comparison
EQUIVALENCE_TEST_POINTS = (0, 1, -1, 2, -2, 0.5, 3, -3, 10)

PHYSICAL_CONSTANTS = {
    "c": {
        "value": 299792458,
        "unit": "m/s",
        "name": "Speed of light in vacuum",
    },
    "h": {
        "value": 6.62607015e-34,
        "unit": "J·s",
        "name": "Planck constant",
    },
    "hbar": {
        "value": 1.054571817e-34,
        "unit": "J·s",
        "name": "Reduced Planck constant",
    },
    "G": {
        "value": 6.67430e-11,
        "unit": "m³/(kg·s²)",
        "name": "Gravitational constant",
    },
    # "e" is Euler's number in expressions, so the charge gets its own name
    "e_charge": {
        "value": 1.602176634e-19,
        "unit": "C",
        "name": "Elementary charge",
    },
    "k_B": {
        "value": 1.380649e-23,
        "unit": "J/K",
        "name": "Boltzmann constant",
    },
    "N_A": {
        "value": 6.02214076e23,
        "unit": "1/mol",
        "name": "Avogadro constant",
    },
}


def constant_values() -> dict:
    """Name -> value mapping for substitution."""
    return {name: info["value"] for name, info in PHYSICAL_CONSTANTS.items()}
