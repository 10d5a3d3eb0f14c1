import json

import pytest

from calculator import config_manager


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point config_manager at a throwaway settings file and return a writer for it."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("CALCULATOR_CONFIG", str(path))

    def write(**settings):
        data = dict(config_manager.DEFAULT_SETTINGS)
        data.update(settings)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    write()
    return write
