"""
Domain entities - configuration of the rotation demo
"""
from .demo_config import DemoConfig

__all__ = ['DemoConfig']
