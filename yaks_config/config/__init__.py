from .config_loader import (
    DEFAULT_CONFIG_FILE,
    Config,
    ConfigLoader,
    NamespaceConfig,
    RunConfig,
    config_file_for,
    load_config,
    load_defaults,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "Config",
    "ConfigLoader",
    "NamespaceConfig",
    "RunConfig",
    "config_file_for",
    "load_config",
    "load_defaults",
]
