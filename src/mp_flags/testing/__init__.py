"""Testing helpers – hypothesis strategies and pytest fixtures."""
