"""Command-line front end for diriter."""
