from .loader import ConfigError, DocthreadConfig, load_config_from_path

__all__ = ["ConfigError", "DocthreadConfig", "load_config_from_path"]
