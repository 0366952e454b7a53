from .registry import ConfigRegistry, get_global_config_registry

__all__ = ["ConfigRegistry", "get_global_config_registry"]
