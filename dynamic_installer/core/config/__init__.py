from dynamic_installer.core.config.loader import (
    CONFIG_FILE,
    ConfigError,
    find_config_file,
    load_install_config,
)

__all__ = ["CONFIG_FILE", "ConfigError", "find_config_file", "load_install_config"]
