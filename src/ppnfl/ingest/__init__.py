"""Input adapters that normalize the upstream projections document."""

from .projections import parse_projections

__all__ = ["parse_projections"]
