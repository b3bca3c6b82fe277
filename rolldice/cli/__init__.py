"""Command-line interface for rolldice."""
