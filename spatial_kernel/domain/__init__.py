"""
Domain layer - numeric types and configuration entities
"""
from .entities import *
from .math import *

__all__ = ['entities', 'math']
