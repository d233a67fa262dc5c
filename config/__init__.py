"""Jurisdiction tables and runtime settings."""
