"""バンプ種別の判定.

コミットメッセージ（直近コミットの subject）に含まれるマーカーからバンプ種別を決める。

優先順位（位置ではなく固定の順序で判定）:
    [skip] > [major] > [minor] > [patch] > 既定値（minor）
"""

from __future__ import annotations

from enum import Enum

from semver_tagger.core.exceptions import InvalidBumpTypeError


class BumpType(str, Enum):
    SKIP = "skip"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


DEFAULT_BUMP = BumpType.MINOR

# 判定順 = 優先順位
_MARKER_PRIORITY: tuple[BumpType, ...] = (
    BumpType.SKIP,
    BumpType.MAJOR,
    BumpType.MINOR,
    BumpType.PATCH,
)


def marker_for(bump_type: BumpType) -> str:
    """バンプ種別に対応するマーカー文字列を返す（例: `[major]`）."""
    return f"[{bump_type.value}]"


def classify_commit_message(commit_message: str | None) -> BumpType:
    """コミットメッセージからバンプ種別を判定する.

    Args:
        commit_message: 直近コミットの subject（None は空文字として扱う）

    Returns:
        判定されたバンプ種別。マーカーが無ければ DEFAULT_BUMP

    Examples:
        >>> classify_commit_message("Fix bug [patch]")
        <BumpType.PATCH: 'patch'>
        >>> classify_commit_message("[skip][major]")
        <BumpType.SKIP: 'skip'>
    """
    lowered = (commit_message or "").lower()
    for bump_type in _MARKER_PRIORITY:
        if marker_for(bump_type) in lowered:
            return bump_type
    return DEFAULT_BUMP


def parse_bump_type(value: BumpType | str | None) -> BumpType | None:
    """force bump の指定値を検証して BumpType に変換する.

    空文字/None は「コミットメッセージから判定する」を意味するので None を返す。
    未知の値は黙って無視せず InvalidBumpTypeError を送出する。
    """
    if value is None or isinstance(value, BumpType):
        return value
    text = value.strip().lower()
    if not text:
        return None
    try:
        return BumpType(text)
    except ValueError:
        raise InvalidBumpTypeError(value) from None
