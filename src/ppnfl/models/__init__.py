from .projection import ProjectionRecord

__all__ = ["ProjectionRecord"]
