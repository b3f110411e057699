"""
[CP-A003] copkg.core.exceptions
커스텀 예외 계층 구조

version: 1.0.0
created: 2026-03-02
modified: 2026-03-06
"""

from __future__ import annotations


class CopkgError(Exception):  # [CP-A003.1]
    """copkg 기본 예외. 모든 커스텀 예외의 부모."""


class ConfigError(CopkgError):  # [CP-A003.2]
    """설정 관련 에러."""


class ConfigReadError(ConfigError):  # [CP-A003.3]
    """설정 파일을 읽을 수 없음 (I/O 에러)."""


class ConfigParseError(ConfigError):  # [CP-A003.4]
    """설정 텍스트가 올바른 JSON이 아니거나 형태가 맞지 않음."""


class ConfigFieldMissingError(ConfigParseError):  # [CP-A003.5]
    """필수 필드(packageDir, packageBaseUrl) 누락."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"필수 필드 누락: {fields}")


class ConfigSerializationError(ConfigError):  # [CP-A003.6]
    """설정의 JSON 표현을 만들 수 없음."""


class CoordinateError(CopkgError):  # [CP-A003.7]
    """패키지 좌표 파싱 에러."""
