"""release.yml の読み込み."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml
from loguru import logger

from semver_tagger.tagging import DEFAULT_MESSAGE_TEMPLATE


@dataclass(frozen=True)
class ReleaseConfig:
    remote: str = "origin"
    git_user_name: str | None = None
    git_user_email: str | None = None
    message_template: str = DEFAULT_MESSAGE_TEMPLATE
    fetch_tags: bool = True


# YAML 上の値の型（"false" のような文字列は bool として受け付けない）
_FIELD_TYPES: dict[str, type] = {
    "remote": str,
    "git_user_name": str,
    "git_user_email": str,
    "message_template": str,
    "fetch_tags": bool,
}
_OPTIONAL_KEYS = {"git_user_name", "git_user_email"}


def load_release_config(config_path: Path) -> ReleaseConfig:
    """release.yml を読み込んで ReleaseConfig を返す.

    Args:
        config_path: release.yml のパス（存在しなければ既定値）

    Returns:
        ReleaseConfig

    Raises:
        ValueError: YAML が不正、`release` がマッピングでない、未知のキーや型の合わない値を含む場合
    """
    if not config_path.exists():
        logger.warning(f"Release config not found, using defaults: {config_path}")
        return ReleaseConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in release config: {config_path}: {e}"
        raise ValueError(msg) from e

    if not isinstance(config, dict):
        raise ValueError(f"Release config must contain a mapping: {config_path}")

    section = config.get("release", {}) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'release' must be a mapping: {config_path}")

    known = {f.name for f in fields(ReleaseConfig)}
    unknown = sorted(str(k) for k in set(section) - known)
    if unknown:
        raise ValueError(f"Unknown release config keys: {', '.join(unknown)}")

    for key, value in section.items():
        if value is None and key in _OPTIONAL_KEYS:
            continue
        if not isinstance(value, _FIELD_TYPES[key]):
            expected = _FIELD_TYPES[key].__name__
            msg = f"Invalid value for '{key}': expected {expected}, got {type(value).__name__} ({value!r})"
            raise ValueError(msg)

    if (section.get("git_user_name") is None) != (section.get("git_user_email") is None):
        raise ValueError("git_user_name and git_user_email must be set together")

    logger.info(f"Loaded release config from {config_path}")
    return ReleaseConfig(**section)
