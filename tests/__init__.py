"""strcalc test suite."""
