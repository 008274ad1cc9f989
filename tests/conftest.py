# Shared fixtures: throwaway theme stores and host checkouts under tmp_path.

from pathlib import Path

import pytest

from hover_audit.config.settings import HostLayout
from tests.factories import make_host


@pytest.fixture
def theme_dir(tmp_path) -> Path:
    d = tmp_path / "themes"
    d.mkdir()
    return d


@pytest.fixture
def host_root(tmp_path) -> Path:
    return make_host(tmp_path / "host")


@pytest.fixture
def host_layout(host_root) -> HostLayout:
    return HostLayout.from_root(host_root)
