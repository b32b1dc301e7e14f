from .content_mapper import ContentMapper

__all__ = ["ContentMapper"]
