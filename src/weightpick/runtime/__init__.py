"""Random sources, run logging and timing."""
