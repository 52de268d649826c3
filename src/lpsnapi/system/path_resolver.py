import os
from pathlib import Path


class PathResolver:
    """Central authority for file path resolution in lpsnapi.

    Uses environment variables for configuration with sensible defaults.
    """

    def __init__(self) -> None:
        """Initialize PathResolver with environment-based configuration."""
        self.data_dir = Path(os.getenv("LPSNAPI_DATA", "/var/lib/lpsnapi"))

    def get_lpsnapi_config_path(self) -> Path:
        """Get the path to the main configuration file.

        Checks LPSNAPI_CONFIG environment variable first, then falls back to default.
        """
        config_path = os.getenv("LPSNAPI_CONFIG")
        if config_path:
            return Path(config_path)

        # Default: runtime config in data directory
        return self.data_dir / "config" / "lpsnapi.yaml"

