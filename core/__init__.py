# core/__init__.py
"""
PASSFORGE Core Module
=====================

Public API:
    - Models: Policy, CharacterClass, StrengthTier, StrengthReport
    - Configuration: Config
    - Logging: LoggingConfig
    - Utilities: SingletonMeta
"""

from .models import Policy, CharacterClass, StrengthTier, StrengthReport
from .config import Config
from .logging_config import LoggingConfig
from .singleton import SingletonMeta

__all__ = [
    # Models
    "Policy",
    "CharacterClass",
    "StrengthTier",
    "StrengthReport",

    # Configuration
    "Config",

    # Logging
    "LoggingConfig",

    # Utilities
    "SingletonMeta",
]
