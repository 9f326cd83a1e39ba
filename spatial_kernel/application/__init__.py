"""
Application layer - services built on the domain math
"""
from .services import RotationService

__all__ = ['RotationService']
