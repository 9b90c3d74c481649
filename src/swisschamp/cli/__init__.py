"""Command-line tooling for Swiss Champ."""
