"""Runtime models and the draw runner facade."""
