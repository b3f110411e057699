"""
[CP-A002] copkg.core.coordinate
패키지 좌표 - group:artifact:version 식별자와 경로 조각

version: 1.0.0
created: 2026-03-02
modified: 2026-03-06
dependencies: pydantic>=2.12
"""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from copkg.core.exceptions import CoordinateError

# 아티팩트 파일 확장자  [CP-A002.1]
ARTIFACT_EXTENSION = ".tar.gz"

_SEPARATORS = {"/", os.sep}


@runtime_checkable
class Coordinate(Protocol):  # [CP-A002.2]
    """Configuration이 경로 계산에 사용하는 좌표 계약."""

    def path_fragment(self) -> str: ...

    def filename(self) -> str: ...


class PackageCoordinate(BaseModel):  # [CP-A002.3]
    """패키지 하나의 특정 버전을 가리키는 좌표.

    group의 점(.)은 디렉토리 구분자가 됩니다.
    com.acme:widget:1.2.0 → com/acme/widget/1.2.0/widget-1.2.0.tar.gz
    """

    model_config = ConfigDict(frozen=True)

    group: str
    artifact: str
    version: str

    @classmethod
    def parse(cls, text: str) -> PackageCoordinate:  # [CP-A002.4]
        """'group:artifact:version' 문자열을 파싱합니다."""
        parts = text.split(":")
        if len(parts) != 3:
            msg = f"좌표 형식은 group:artifact:version 입니다: {text!r}"
            raise CoordinateError(msg)

        for part in parts:
            if not part or part != part.strip() or any(c.isspace() for c in part):
                msg = f"빈 값이나 공백이 포함된 좌표: {text!r}"
                raise CoordinateError(msg)
            if any(sep in part for sep in _SEPARATORS):
                msg = f"좌표에 경로 구분자를 쓸 수 없습니다: {text!r}"
                raise CoordinateError(msg)

        group, artifact, version = parts
        if any(not segment for segment in group.split(".")):
            msg = f"잘못된 group: {group!r}"
            raise CoordinateError(msg)

        return cls(group=group, artifact=artifact, version=version)

    def path_fragment(self) -> str:  # [CP-A002.5]
        """설치/다운로드 루트 아래의 상대 경로."""
        return os.sep.join([*self.group.split("."), self.artifact, self.version])

    def filename(self) -> str:  # [CP-A002.6]
        return f"{self.artifact}-{self.version}{ARTIFACT_EXTENSION}"

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact}:{self.version}"
