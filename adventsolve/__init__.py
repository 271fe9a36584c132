"""Solvers for Advent of Code puzzles from 2015 and 2024, one module per day."""

__version__ = "0.1.0"