"""
[CP-T000] tests.conftest
공통 테스트 픽스처

version: 1.0.0
created: 2026-03-02
"""

import pytest

from copkg.core.config import Configuration
from copkg.core.coordinate import PackageCoordinate


@pytest.fixture
def config() -> Configuration:
    """테스트용 설정."""
    return Configuration(
        package_dir="/srv/pkgs",
        package_base_url="https://packages.example.com/repo",
        username="deploy",
        password="s3cret",
    )


@pytest.fixture
def coordinate() -> PackageCoordinate:
    """테스트용 좌표."""
    return PackageCoordinate(group="com.acme", artifact="widget", version="1.2.0")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """COPKG_* 환경변수와 .env 영향을 제거."""
    for name in ("CONFIG_FILE", "PACKAGE_DIR", "PACKAGE_BASE_URL", "USERNAME", "PASSWORD"):
        monkeypatch.delenv(f"COPKG_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
