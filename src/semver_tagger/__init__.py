"""semver-tagger: コミットメッセージのマーカーからセマンティックバージョンを解決してタグ付けする."""

from semver_tagger.core import (
    BumpType,
    GitCommandError,
    InvalidBumpTypeError,
    InvalidVersionFormatError,
    PublishError,
    SemanticVersion,
    SemverTaggerError,
    classify_commit_message,
    parse_version,
)
from semver_tagger.resolver import ResolutionResult, resolve

__version__ = "0.1.0"

__all__ = [
    "BumpType",
    "SemanticVersion",
    "ResolutionResult",
    "parse_version",
    "classify_commit_message",
    "resolve",
    "SemverTaggerError",
    "InvalidVersionFormatError",
    "InvalidBumpTypeError",
    "GitCommandError",
    "PublishError",
]
