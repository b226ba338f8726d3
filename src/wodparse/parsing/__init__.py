"""Parsing pipeline stages."""
