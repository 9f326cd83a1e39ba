"""
Application services
"""
from .rotation_service import RotationService

__all__ = ['RotationService']
