"""Boardcheck: validate chess piece placements against the starting layout."""

__version__ = "0.1.0"
