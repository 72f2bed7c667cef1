"""Sampling engine: alias tables and the weighted index sampler."""
