"""Configuration: landmark constants and analysis settings"""

from .settings import DEFAULT_WEIGHTS, MetricSettings, WeightConfiguration

__all__ = ['MetricSettings', 'WeightConfiguration', 'DEFAULT_WEIGHTS']
