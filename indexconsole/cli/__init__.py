"""Command-line interface: typer commands rendering through rich."""
