"""
[CP-A001] copkg.core.config
패키지 매니저 설정 - 설치/다운로드 경로 도출 + JSON 직렬화

version: 1.1.0
created: 2026-03-02
modified: 2026-03-09
dependencies: pydantic>=2.12, structlog>=25.1
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from copkg.core.exceptions import (
    ConfigError,
    ConfigFieldMissingError,
    ConfigParseError,
    ConfigReadError,
    ConfigSerializationError,
)

if TYPE_CHECKING:
    from copkg.core.coordinate import Coordinate

logger = structlog.get_logger()

# packageDir 기준 다운로드 디렉토리 이름  [CP-A001.1]
DOWNLOAD_DIR = ".download"

_SEPARATORS = ("/", os.sep)


class Configuration(BaseModel):  # [CP-A001.2]
    """패키지 매니저 설정.

    package_dir 아래에 패키지를 설치하고, package_dir/.download 에서
    다운로드를 스테이징합니다. download_dir은 저장하지 않고 매번 계산합니다.
    JSON 필드명은 camelCase (packageDir, packageBaseUrl, username, password).
    """

    model_config = ConfigDict(frozen=True, validate_by_name=True, extra="ignore")

    package_dir: str = Field(alias="packageDir", description="패키지 설치 루트")
    package_base_url: str = Field(alias="packageBaseUrl", description="패키지 배포 서버 URL")
    username: str | None = Field(default=None, description="packageBaseUrl 사용자명")
    password: str | None = Field(default=None, repr=False, description="packageBaseUrl 비밀번호")

    @property
    def download_dir(self) -> str:  # [CP-A001.3]
        """패키지 배포 서버에서 받을 때 쓰는 디렉토리."""
        if self.package_dir.endswith(_SEPARATORS):
            return self.package_dir + DOWNLOAD_DIR
        return self.package_dir + os.sep + DOWNLOAD_DIR

    def download_filename_for_coordinate(self, coordinate: Coordinate) -> str:  # [CP-A001.4]
        """다운로드 디렉토리 안에서 좌표의 목적지 파일 경로."""
        return (
            self.download_dir
            + os.sep
            + coordinate.path_fragment()
            + os.sep
            + coordinate.filename()
        )

    def package_directory_for_coordinate(self, coordinate: Coordinate) -> str:  # [CP-A001.5]
        """좌표의 설치 디렉토리."""
        return self.package_dir + os.sep + coordinate.path_fragment()

    def package_url_for_coordinate(self, coordinate: Coordinate) -> str:  # [CP-A001.6]
        """배포 서버에서 좌표 아티팩트의 URL."""
        fragment = coordinate.path_fragment().replace(os.sep, "/")
        return f"{self.package_base_url.rstrip('/')}/{fragment}/{coordinate.filename()}"

    def to_json(self) -> str | None:  # [CP-A001.7]
        """JSON 표현. 인코딩에 실패하면 None.

        없는 자격증명(None)은 생략하고, download_dir은 절대 포함하지 않습니다.
        """
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)
        except PydanticSerializationError as e:
            logger.warning("config_serialize_failed", error=str(e))
            return None

    def to_file(self, path: str | Path) -> None:  # [CP-A001.8]
        """JSON을 파일로 저장합니다. 상위 디렉토리는 필요하면 생성."""
        text = self.to_json()
        if text is None:
            msg = "설정을 JSON으로 변환할 수 없습니다"
            raise ConfigSerializationError(msg)

        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            msg = f"설정 파일을 쓸 수 없습니다: {path}"
            raise ConfigError(msg) from e

        logger.debug("config_saved", path=str(path))

    @classmethod
    def from_json(cls, text: str | bytes) -> Configuration:  # [CP-A001.9]
        """JSON 문자열로부터 설정을 만듭니다. 알 수 없는 필드는 무시."""
        try:
            return cls.model_validate_json(text, by_alias=True, by_name=False)
        except ValidationError as e:
            missing = [str(err["loc"][0]) for err in e.errors() if err["type"] == "missing"]
            if missing:
                raise ConfigFieldMissingError(missing) from e
            msg = f"설정 JSON 파싱 오류: {e.errors()[0]['msg']} ({e.error_count()}개 오류)"
            raise ConfigParseError(msg) from e

    @classmethod
    def from_file(cls, path: str | Path) -> Configuration:  # [CP-A001.10]
        """JSON 파일로부터 설정을 만듭니다."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            msg = f"설정 파일을 읽을 수 없습니다: {path}"
            raise ConfigReadError(msg) from e

        config = cls.from_json(text)
        logger.debug("config_loaded", path=str(path), package_dir=config.package_dir)
        return config

    def _key(self) -> tuple[str, str, str | None, str | None]:
        # download_dir은 package_dir에서 도출되므로 제외
        return (self.package_dir, self.package_base_url, self.username, self.password)

    def __eq__(self, other: object) -> bool:  # [CP-A001.11]
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())
