"""
Package-wide constants.

DEFAULT_DC is the don't-care character used in column strings and in the
bit patterns of covers. DEFAULT_VARS supplies variable names, most
significant input first, for minimizers that are not given their own.
"""

import string

DEFAULT_DC = "-"

# Stripped from a minimizer's dotted class path to form its algorithm name
ALGORITHM_NAMESPACE = "logic_minimizer.algorithm."

DEFAULT_VARS = list(string.ascii_uppercase)
