"""セマンティックバージョン（major.minor.patch）の解析と演算.

設計方針:
    - pre-release / build metadata はモデル化しない（`1.2.3-rc1` は `1.2.3` として読む）
    - 外部表現は常に `v<major>.<minor>.<patch>`
    - タグが存在しない場合の `0.0.0` 補完は呼び出し側の責務（parse_version は補完しない）
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from semver_tagger.core.bump import BumpType
from semver_tagger.core.exceptions import InvalidVersionFormatError

_VERSION_PREFIX = re.compile(r"^([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, order=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer: {value!r}")

    def __str__(self) -> str:
        return format_version(self)

    @property
    def tag(self) -> str:
        return format_version(self)

    def bump(self, bump_type: BumpType) -> SemanticVersion:
        """バンプ種別に応じた次のバージョンを返す（下位の桁は 0 に戻す）."""
        if bump_type is BumpType.MAJOR:
            return SemanticVersion(self.major + 1, 0, 0)
        if bump_type is BumpType.MINOR:
            return SemanticVersion(self.major, self.minor + 1, 0)
        if bump_type is BumpType.PATCH:
            return SemanticVersion(self.major, self.minor, self.patch + 1)
        raise ValueError(f"Cannot apply bump arithmetic for {bump_type!r}")


ZERO_VERSION = SemanticVersion(0, 0, 0)


def parse_version(tag_text: str) -> SemanticVersion:
    """タグ文字列を SemanticVersion に変換する.

    Args:
        tag_text: `v1.2.3` / `1.2.3-rc1` のようなタグ文字列

    Returns:
        先頭の `major.minor.patch` を読み取った SemanticVersion

    Raises:
        InvalidVersionFormatError: 先頭が ASCII 数字の `major.minor.patch` でない場合（空文字を含む）

    Examples:
        >>> parse_version("v1.2.3")
        SemanticVersion(major=1, minor=2, patch=3)
        >>> parse_version("1.2.3-rc1")
        SemanticVersion(major=1, minor=2, patch=3)
    """
    text = tag_text[1:] if tag_text.startswith("v") else tag_text
    m = _VERSION_PREFIX.match(text)
    if m is None:
        raise InvalidVersionFormatError(tag_text)
    return SemanticVersion(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def format_version(version: SemanticVersion) -> str:
    return f"v{version.major}.{version.minor}.{version.patch}"
