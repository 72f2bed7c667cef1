"""Defaults, validation and sample run configs."""
