"""lpsnapi configuration package.

This package provides centralized configuration management with:
- YAML parsing with a per-deployment config file
- Validation through pydantic models
- Defaults for every setting
"""

from .manager import ConfigManager
from .models import LPSNConfig

__all__ = [
    "ConfigManager",
    "LPSNConfig",
]
