"""Reference election data sets."""

from formation.data import dutch_2023

__all__ = ["dutch_2023"]
