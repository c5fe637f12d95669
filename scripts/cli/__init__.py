"""Command-line tools for URL shortener."""
