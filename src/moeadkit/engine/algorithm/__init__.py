"""Algorithms and their shared components."""
