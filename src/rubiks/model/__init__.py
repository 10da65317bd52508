"""Cube state, layer rotation engine, move sampling and move utilities."""
