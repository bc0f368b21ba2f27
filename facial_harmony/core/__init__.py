"""
Core package: landmark registry.
"""
from .landmark_registry import DEFAULT_REGISTRY, LandmarkRegistry

__all__ = ['LandmarkRegistry', 'DEFAULT_REGISTRY']
