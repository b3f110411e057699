"""
[CP-T003] tests.unit.test_settings
환경변수 설정 + load_configuration 테스트

version: 1.0.0
created: 2026-03-04
"""

import pytest

from copkg.core.config import Configuration
from copkg.core.exceptions import ConfigFieldMissingError, ConfigReadError
from copkg.core.settings import CopkgSettings, load_configuration


class TestCopkgSettings:  # [CP-T003.1]
    """CopkgSettings 테스트."""

    def test_defaults(self, clean_env):
        settings = CopkgSettings()
        assert settings.config_file == "copkg.json"
        assert settings.package_dir is None
        assert settings.password is None

    def test_env_prefix(self, clean_env):
        clean_env.setenv("COPKG_PACKAGE_DIR", "/srv/pkgs")
        clean_env.setenv("COPKG_CONFIG_FILE", "/etc/copkg.json")
        settings = CopkgSettings()
        assert settings.package_dir == "/srv/pkgs"
        assert settings.config_file == "/etc/copkg.json"

    def test_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("COPKG_USERNAME=deploy\n")
        assert CopkgSettings().username == "deploy"


class TestLoadConfiguration:  # [CP-T003.2]
    """load_configuration 테스트."""

    def test_from_env(self, clean_env):
        clean_env.setenv("COPKG_PACKAGE_DIR", "/srv/pkgs")
        clean_env.setenv("COPKG_PACKAGE_BASE_URL", "http://x")
        cfg = load_configuration()
        assert cfg == Configuration(package_dir="/srv/pkgs", package_base_url="http://x")
        assert cfg.download_dir == "/srv/pkgs/.download"

    def test_from_file(self, clean_env, tmp_path, config):
        path = tmp_path / "copkg.json"
        config.to_file(path)
        assert load_configuration() == config

    def test_explicit_settings(self, clean_env, tmp_path, config):
        path = tmp_path / "etc" / "copkg.json"
        config.to_file(path)
        assert load_configuration(CopkgSettings(config_file=str(path))) == config

    def test_env_credentials_override_file(self, clean_env, tmp_path):
        (tmp_path / "copkg.json").write_text(
            '{"packageDir":"/a","packageBaseUrl":"http://x","username":"u","password":"p"}'
        )
        clean_env.setenv("COPKG_PASSWORD", "rotated")
        cfg = load_configuration()
        assert cfg.username == "u"
        assert cfg.password == "rotated"

    def test_partial_env_falls_back_to_file(self, clean_env, tmp_path):
        (tmp_path / "copkg.json").write_text('{"packageDir":"/a","packageBaseUrl":"http://x"}')
        clean_env.setenv("COPKG_PACKAGE_DIR", "/ignored")
        assert load_configuration().package_dir == "/a"

    def test_missing_file(self, clean_env):
        with pytest.raises(ConfigReadError):
            load_configuration()

    def test_incomplete_file(self, clean_env, tmp_path):
        (tmp_path / "copkg.json").write_text('{"packageDir":"/a"}')
        with pytest.raises(ConfigFieldMissingError):
            load_configuration()
