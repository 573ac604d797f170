from .client import BIM360Client

__all__ = ["BIM360Client"]
