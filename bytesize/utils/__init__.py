from .console import cnsl, level_number, set_logger

__all__ = ['cnsl', 'level_number', 'set_logger']
