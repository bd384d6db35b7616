from collections.abc import Callable
from pathlib import Path

import pytest

from kustcheck.settings import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's KUSTCHECK_CONFIG out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def make_dir(tmp_path: Path) -> Callable[..., Path]:
    """
    Creates a directory under tmp_path populated with empty files.
    """

    def _make(name: str, *files: str) -> Path:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        for f in files:
            target = directory / f
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("")
        return directory

    return _make
