"""Repo Manager - list GitHub repositories and change their visibility."""

__version__ = "0.1.0"
