import os

import pytest


@pytest.fixture(autouse=True)
def clean_vgit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove VGIT_* variables so the host environment cannot leak in."""
    for key in list(os.environ):
        if key.startswith("VGIT_"):
            monkeypatch.delenv(key)
