"""次バージョンの解決（VersionResolver）.

最新タグ・直近コミットの subject・force bump の3入力から次のバージョンを決める純粋関数群。
I/O は行わない（タグ取得や push は semver_tagger.git / semver_tagger.tagging の責務）。
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from semver_tagger.core.bump import BumpType, classify_commit_message, parse_bump_type
from semver_tagger.core.version import ZERO_VERSION, SemanticVersion, format_version, parse_version


@dataclass(frozen=True)
class ResolutionResult:
    """解決結果.

    Attributes:
        bump_type: 適用したバンプ種別
        current: 解決の起点となったバージョン
        version: 次のバージョン（bump_type が SKIP の場合のみ None）
    """

    bump_type: BumpType
    current: SemanticVersion
    version: SemanticVersion | None

    def __post_init__(self) -> None:
        if (self.version is None) != (self.bump_type is BumpType.SKIP):
            raise ValueError("version must be None exactly when the bump is skipped")

    @property
    def skipped(self) -> bool:
        return self.version is None

    @property
    def tag(self) -> str | None:
        return None if self.version is None else format_version(self.version)


def resolve(
    latest_tag: str | None,
    commit_message: str | None,
    forced_bump: BumpType | str | None = None,
) -> ResolutionResult:
    """次のバージョンを解決する.

    Args:
        latest_tag: 最新タグ（空/None は「リリースなし」として 0.0.0 扱い）
        commit_message: 直近コミットの subject
        forced_bump: バンプ種別の強制指定（空/None ならコミットメッセージから判定）

    Returns:
        ResolutionResult（skip の場合は version=None）

    Raises:
        InvalidVersionFormatError: latest_tag が空でなく解析できない場合
        InvalidBumpTypeError: forced_bump が未知の値の場合
    """
    tag_text = (latest_tag or "").strip()
    current = parse_version(tag_text) if tag_text else ZERO_VERSION

    bump_type = parse_bump_type(forced_bump)
    if bump_type is None:
        bump_type = classify_commit_message(commit_message)
        source = "commit message"
    else:
        source = "forced"

    if bump_type is BumpType.SKIP:
        logger.debug(f"Version bump skipped ({source}); current {format_version(current)}")
        return ResolutionResult(bump_type=bump_type, current=current, version=None)

    next_version = current.bump(bump_type)
    logger.debug(
        f"Resolved {format_version(current)} -> {format_version(next_version)} "
        f"({bump_type.value}, {source})"
    )
    return ResolutionResult(bump_type=bump_type, current=current, version=next_version)
