"""Presentation layer: the command surface exposed to front ends."""
