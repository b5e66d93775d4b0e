from .loader import load_config_file

__all__ = ["load_config_file"]
