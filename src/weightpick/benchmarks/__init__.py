"""Runnable benchmarks."""
