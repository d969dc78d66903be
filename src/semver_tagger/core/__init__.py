"""バージョン解決のコア処理群.

- バージョン解析（タグ文字列 → SemanticVersion）
- バンプ種別判定（コミットメッセージのマーカー）
- 例外定義
"""

from .bump import DEFAULT_BUMP, BumpType, classify_commit_message, parse_bump_type
from .exceptions import (
    GitCommandError,
    InvalidBumpTypeError,
    InvalidVersionFormatError,
    PublishError,
    SemverTaggerError,
)
from .version import ZERO_VERSION, SemanticVersion, format_version, parse_version

__all__ = [
    "BumpType",
    "DEFAULT_BUMP",
    "classify_commit_message",
    "parse_bump_type",
    "SemanticVersion",
    "ZERO_VERSION",
    "parse_version",
    "format_version",
    "SemverTaggerError",
    "InvalidVersionFormatError",
    "InvalidBumpTypeError",
    "GitCommandError",
    "PublishError",
]
