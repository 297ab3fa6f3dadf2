"""Command line interface for the verification bot."""
