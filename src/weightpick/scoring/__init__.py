"""Empirical frequency scoring."""
