"""git リポジトリ操作（タグ取得・コミット subject 取得・タグ作成/push）."""

from __future__ import annotations

import subprocess
from pathlib import Path

from loguru import logger

from semver_tagger.core.exceptions import GitCommandError


class GitRepository:
    """`git` コマンドを subprocess 経由で呼び出す薄いラッパ.

    Args:
        path: 作業ツリーのパス
        remote: タグの fetch/push 先リモート名
    """

    def __init__(self, path: Path | str = ".", remote: str = "origin") -> None:
        self.path = Path(path)
        self.remote = remote

    def _run(self, *args: str) -> str:
        command = ["git", *args]
        logger.debug(f"Running: {' '.join(command)} (cwd={self.path})")
        result = subprocess.run(
            command,
            cwd=self.path,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise GitCommandError(command, result.returncode, result.stderr)
        return result.stdout

    def fetch_tags(self) -> None:
        """リモートのタグを fetch する."""
        self._run("fetch", "--tags", self.remote)

    def list_tags(self) -> list[str]:
        """タグ一覧をバージョン降順で返す.

        Returns:
            `git tag -l --sort=-version:refname` の結果（空行は除外）
        """
        stdout = self._run("tag", "-l", "--sort=-version:refname")
        return [line.strip() for line in stdout.splitlines() if line.strip()]

    def latest_tag(self) -> str:
        """最新タグを返す（タグが無ければ空文字）.

        並び順は git の version:refname ソートに任せ、ここでは先頭を採用するだけ。
        """
        tags = self.list_tags()
        return tags[0] if tags else ""

    def has_commits(self) -> bool:
        """HEAD が解決できる（コミットが1つ以上ある）か."""
        try:
            self._run("rev-parse", "--verify", "--quiet", "HEAD")
        except GitCommandError:
            return False
        return True

    def head_commit_subject(self) -> str:
        """HEAD コミットの subject を返す（コミットが無ければ空文字）."""
        if not self.has_commits():
            return ""
        return self._run("log", "HEAD", "--pretty=format:%s", "-1").strip()

    def create_annotated_tag(
        self,
        tag: str,
        message: str,
        identity: tuple[str, str] | None = None,
    ) -> None:
        """アノテーション付きタグを作成する.

        Args:
            tag: タグ名
            message: タグメッセージ
            identity: tagger の (name, email)。指定時は `git -c` でこのコマンドにだけ適用し、
                リポジトリの設定ファイルには書き込まない
        """
        overrides: list[str] = []
        if identity is not None:
            name, email = identity
            overrides = ["-c", f"user.name={name}", "-c", f"user.email={email}"]
            logger.info(f"Tagging as {name} <{email}>")
        self._run(*overrides, "tag", "-a", tag, "-m", message)

    def delete_tag(self, tag: str) -> None:
        self._run("tag", "-d", tag)

    def push_tag(self, tag: str) -> None:
        """タグを remote に push する."""
        self._run("push", self.remote, tag)
