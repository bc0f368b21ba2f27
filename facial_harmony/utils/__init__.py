"""
Utilities package.
"""
from .config_loader import Config, get_config
from .exceptions import (
    ConfigurationError,
    DetectionError,
    FacialHarmonyException,
    InvalidInputError,
)
from .json_exporter import export_results, to_json_dict
from .logging_config import get_logger, setup_logging

__all__ = [
    'Config', 'get_config',
    'FacialHarmonyException', 'InvalidInputError', 'ConfigurationError', 'DetectionError',
    'to_json_dict', 'export_results',
    'get_logger', 'setup_logging',
]
