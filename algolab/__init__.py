"""Cycle detection, heaps, selection, stable matching, Wordle tools and Advent of Code 2021."""

__version__ = "0.1.0"