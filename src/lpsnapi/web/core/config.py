"""Configuration loading for the web application."""

from lpsnapi.config import ConfigManager, LPSNConfig
from lpsnapi.system.path_resolver import PathResolver


def get_config(path_resolver: PathResolver | None = None) -> LPSNConfig:
    """Load lpsnapi configuration.

    Args:
        path_resolver: Optional PathResolver instance to use. If not provided,
                      creates a new PathResolver instance.

    Returns:
        LPSNConfig: The loaded and validated configuration.
    """
    if path_resolver is None:
        path_resolver = PathResolver()
    parser = ConfigManager(path_resolver)
    return parser.load()
