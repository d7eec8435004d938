"""Command line interface for the Bling connector."""
