"""HTTP wrapper around the calculator."""
