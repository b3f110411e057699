"""
[CP-A000] copkg
패키지 매니저 클라이언트 설정 - 설치 경로 도출 + JSON 직렬화

version: 0.3.0
created: 2026-03-02
modified: 2026-03-09
"""

__version__ = "0.3.0"
