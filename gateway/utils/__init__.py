"""Gateway utilities."""
