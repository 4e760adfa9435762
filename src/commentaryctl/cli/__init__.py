"""Command-line surface: argument parsing, dispatch and output rendering."""
