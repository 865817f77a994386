"""Rank list optimizer: match residents to tracks by local search over pairwise swaps."""

__version__ = "0.1.0"
