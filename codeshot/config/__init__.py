from .loader import configure_logging, load_config
from .models import (
    CodeshotConfig,
    PresetsConfig,
    RegistryConfig,
)

__all__ = [
    "CodeshotConfig",
    "PresetsConfig",
    "RegistryConfig",
    "configure_logging",
    "load_config",
]
