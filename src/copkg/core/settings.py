"""
[CP-A004] copkg.core.settings
pydantic-settings 기반 환경변수 설정 관리

version: 1.0.0
created: 2026-03-04
modified: 2026-03-09
dependencies: pydantic-settings>=2.13
"""

from __future__ import annotations

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from copkg.core.config import Configuration

logger = structlog.get_logger()


class CopkgSettings(BaseSettings):  # [CP-A004.1]
    """copkg 환경 설정.

    COPKG_PACKAGE_DIR와 COPKG_PACKAGE_BASE_URL이 모두 있으면 설정 파일 없이 동작.
    """

    model_config = SettingsConfigDict(
        env_prefix="COPKG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_file: str = Field(default="copkg.json", description="JSON 설정 파일 경로")
    package_dir: str | None = Field(default=None)
    package_base_url: str | None = Field(default=None)
    username: str | None = Field(default=None)
    password: str | None = Field(default=None, repr=False)


def load_configuration(settings: CopkgSettings | None = None) -> Configuration:  # [CP-A004.2]
    """환경변수 또는 설정 파일에서 Configuration을 만듭니다.

    설정 파일을 쓰는 경우에도 환경변수의 username/password가 우선합니다.
    """
    settings = settings or CopkgSettings()

    if settings.package_dir is not None and settings.package_base_url is not None:
        logger.debug("config_from_env", package_dir=settings.package_dir)
        return Configuration(
            package_dir=settings.package_dir,
            package_base_url=settings.package_base_url,
            username=settings.username,
            password=settings.password,
        )

    config = Configuration.from_file(settings.config_file)

    overrides = {
        name: value
        for name, value in (("username", settings.username), ("password", settings.password))
        if value is not None
    }
    if overrides:
        config = config.model_copy(update=overrides)

    return config
