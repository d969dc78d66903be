"""Unit tests for release.yml loading."""

from pathlib import Path

import pytest

from semver_tagger.config import ReleaseConfig, load_release_config


class TestLoadReleaseConfig:
    def test_missing_file_defaults(self, tmp_path: Path) -> None:
        """ファイルが無ければ既定値になること."""
        config = load_release_config(tmp_path / "release.yml")
        assert config == ReleaseConfig()
        assert config.remote == "origin"
        assert config.message_template == "Release {version}"

    def test_load_values(self, tmp_path: Path) -> None:
        config_file = tmp_path / "release.yml"
        config_file.write_text(
            "release:\n"
            "  remote: upstream\n"
            "  git_user_name: CI\n"
            "  git_user_email: ci@example.com\n"
            "  fetch_tags: false\n",
            encoding="utf-8",
        )
        config = load_release_config(config_file)
        assert config.remote == "upstream"
        assert config.git_user_name == "CI"
        assert config.git_user_email == "ci@example.com"
        assert config.fetch_tags is False

    def test_empty_file_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "release.yml"
        config_file.write_text("", encoding="utf-8")
        assert load_release_config(config_file) == ReleaseConfig()

    def test_unknown_key(self, tmp_path: Path) -> None:
        """未知のキーは ValueError になること."""
        config_file = tmp_path / "release.yml"
        config_file.write_text("release:\n  prefix: x\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown release config keys: prefix"):
            load_release_config(config_file)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "release.yml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_release_config(config_file)

    def test_identity_requires_both(self, tmp_path: Path) -> None:
        """name と email は両方そろって指定されること."""
        config_file = tmp_path / "release.yml"
        config_file.write_text("release:\n  git_user_name: CI\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must be set together"):
            load_release_config(config_file)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """YAML として壊れているファイルは ValueError になること."""
        config_file = tmp_path / "release.yml"
        config_file.write_text("release: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML in release config"):
            load_release_config(config_file)

    @pytest.mark.parametrize(
        ("body", "key"),
        [
            ('  fetch_tags: "false"\n', "fetch_tags"),
            ("  remote: 123\n", "remote"),
            ("  message_template: [a, b]\n", "message_template"),
            ("  git_user_name: 1\n  git_user_email: ci@example.com\n", "git_user_name"),
        ],
    )
    def test_wrong_value_type(self, tmp_path: Path, body: str, key: str) -> None:
        """型の合わない値は ValueError になること（文字列の "false" を bool として扱わない）."""
        config_file = tmp_path / "release.yml"
        config_file.write_text("release:\n" + body, encoding="utf-8")
        with pytest.raises(ValueError, match=f"Invalid value for '{key}'"):
            load_release_config(config_file)
