from .validator import validate

__all__ = ['validate']
