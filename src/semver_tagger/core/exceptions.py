"""semver-tagger exceptions.

カスタム例外クラスを定義します。
バンプのスキップは例外ではなく通常の結果（ResolutionResult.skipped）として扱います。
"""

from __future__ import annotations

from collections.abc import Sequence


class SemverTaggerError(Exception):
    """semver-tagger が送出する例外の基底クラス."""


class InvalidVersionFormatError(SemverTaggerError):
    """タグ文字列が `major.minor.patch` として解釈できない場合の例外.

    Attributes:
        tag_text: 解析に失敗したタグ文字列（プレフィックス除去前）
    """

    def __init__(self, tag_text: str) -> None:
        self.tag_text = tag_text
        super().__init__(f"Invalid version format: {tag_text!r} (expected [v]<major>.<minor>.<patch>)")


class InvalidBumpTypeError(SemverTaggerError, ValueError):
    """force bump に未知の値が指定された場合の例外.

    Attributes:
        value: 指定された値
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid bump type: {value!r} (expected one of skip, patch, minor, major)")


class GitCommandError(SemverTaggerError):
    """git コマンドが非ゼロ終了した場合の例外.

    Attributes:
        command: 実行したコマンド
        returncode: 終了コード
        stderr: 標準エラー出力
    """

    def __init__(self, command: Sequence[str], returncode: int, stderr: str) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"git command failed ({returncode}): {' '.join(self.command)}: {stderr.strip()}")


class PublishError(SemverTaggerError):
    """タグ作成または push に失敗した場合の例外.

    Attributes:
        tag: 公開しようとしたタグ名
        cause: 元の例外
    """

    def __init__(self, tag: str, cause: Exception) -> None:
        self.tag = tag
        self.cause = cause
        super().__init__(f"Failed to create and push tag {tag}: {cause}")
