"""Application settings

Settings are loaded in order of precedence (highest to lowest):
1. Environment variables (BTADMIN_*)
2. Config file (~/.btadmin/config.toml)
3. Default values
"""

import sys
from pathlib import Path
from typing import Any, Type

from pydantic import ConfigDict
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

# Import tomllib (Python 3.11+) or tomli (Python 3.9-3.10)
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".btadmin" / "config.toml"


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config file."""

    def get_field_value(
        self, field: Any, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        config_data = self._load_config()
        if field_name in config_data:
            return config_data[field_name], field_name, False
        return None, field_name, False

    def _load_config(self) -> dict:
        """Load config from TOML file."""
        if not hasattr(self, '_config_cache'):
            self._config_cache = {}
            config_path = get_config_path()
            if config_path.exists():
                try:
                    with open(config_path, "rb") as f:
                        self._config_cache = tomllib.load(f)
                except (OSError, tomllib.TOMLDecodeError):
                    pass  # An unreadable config file falls back to defaults
        return self._config_cache

    def __call__(self) -> dict[str, Any]:
        """Return all settings from config file."""
        return self._load_config()


class Settings(BaseSettings):
    """Application settings

    Settings can be configured via:
    - Environment variables: BTADMIN_<SETTING_NAME>
    - Config file: ~/.btadmin/config.toml

    Example config.toml:
        project_id = "my-project"
        instance_location = "europe-west1-b"
        request_timeout = 120
    """

    model_config = ConfigDict(
        env_prefix="BTADMIN_",
        case_sensitive=False
    )

    # Google Cloud configuration
    project_id: str | None = None  # Falls back to the Application Default Credentials project
    credentials_file: str | None = None  # Service account key; ADC when unset
    api_endpoint: str | None = None  # Override the admin API endpoint

    # Cluster placement
    instance_location: str = "us-central1-f"  # Zone of the cluster created with a new instance
    cluster_location: str = "us-central1-c"  # Zone of clusters added with add-cluster
    cluster_nodes: int = 3  # Nodes for PRODUCTION clusters

    # Timeout configuration (in seconds)
    request_timeout: float = 60.0  # Per-RPC timeout for admin API calls

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources order.

        Order (highest to lowest priority):
        1. Init settings (passed to constructor)
        2. Environment variables
        3. TOML config file
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )


def create_default_config() -> str:
    """Generate default config file content."""
    return '''# btadmin Configuration
# Place this file at ~/.btadmin/config.toml

# Google Cloud Configuration
# project_id = "my-project"
# credentials_file = "/path/to/service-account.json"
# api_endpoint = "bigtableadmin.googleapis.com"

# Cluster Placement
# instance_location = "us-central1-f"  # Zone for the cluster created with an instance
# cluster_location = "us-central1-c"   # Zone for clusters added with add-cluster
# cluster_nodes = 3                    # Nodes for PRODUCTION clusters

# Timeout Configuration (in seconds)
# request_timeout = 60
'''
