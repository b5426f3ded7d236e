from __future__ import annotations

import sys
from pathlib import Path

import pytest

from relay.state import RuntimeDeps
from relay.state.settings import AppSettings
from relay.runtime.dependencies import build_runtime_deps
from tests.utils.settings import make_settings


def pytest_configure() -> None:
    # Keep `import relay...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return make_settings(tmp_path)


@pytest.fixture
def runtime_deps(settings: AppSettings) -> RuntimeDeps:
    return build_runtime_deps(settings)
