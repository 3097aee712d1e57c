import json
from pathlib import Path
from typing import Dict

DEFAULT_CONFIG = {
    "index_file": "index.m3u",
    "unsorted_file": "channels/unsorted.m3u",
    "country": "",
    "exclude": "",
    "epg": False,
    "resolution": False,
    "delay": 0,
    "timeout": 5,
    "epg_timeout": 60,
    "max_content_length": 20000,
    "verify_ssl": False,
    "user_agent": None,
    "short_output": True,
    "log_level": "INFO",
    "log_to_file": True,
    "log_file": "LOG/curator.log",
    "show_progress_bar": True,
    "encodings_to_try": ["utf-8", "cp1251", "latin-1"],
}


def load_config(config_path: str = "config.json") -> Dict:
    config_file = Path(config_path)
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
            config = DEFAULT_CONFIG.copy()
            config.update(user_config)
            return config
        except (OSError, ValueError) as e:
            print(f"WARNING: Error loading config file {config_path}: {e}")
            print("Using default configuration")
    else:
        print(f"Config file {config_path} not found, using defaults")
    return DEFAULT_CONFIG.copy()
