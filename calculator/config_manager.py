# config_manager.py
import os
from pathlib import Path
import json

config_json = Path(__file__).resolve().parent / "config.json"

DEFAULT_SETTINGS = {
    "allow_trailing_input": False,
    "modulo_operand_precedence": "term",
    "debug": False,
    "copy_result_to_clipboard": False
}


def config_path():
    """Settings file in use; CALCULATOR_CONFIG points somewhere else."""
    override = os.environ.get("CALCULATOR_CONFIG")
    if override:
        return Path(override)
    return config_json


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(config_path(), 'r', encoding= 'utf-8') as f:
            settings_dict.update(json.load(f))

    except (FileNotFoundError, json.JSONDecodeError):
        pass


    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def save_setting(settings_dict):
    try:
        with open (config_path(), 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (FileNotFoundError, PermissionError):
        return{}



if __name__ == "__main__":
    print(load_setting_value("all"))
