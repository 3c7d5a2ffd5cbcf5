"""Small helpers shared by the parsers, linter and CLI."""
