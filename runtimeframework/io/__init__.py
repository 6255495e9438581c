from .json_io import load_frameworks, save_frameworks, save_json
from .config_loader import load_config, build_frameworks, build_from_config

__all__ = ["load_frameworks", "save_frameworks", "save_json", "load_config", "build_frameworks", "build_from_config"]
