"""Cached NFL projections API backed by interchangeable fetch strategies."""

__version__ = "0.1.0"
