"""CLI commands for lincol."""
