"""Range-query structures, combinatorics, number theory, string and geometry algorithms."""

__version__ = "0.1.0"