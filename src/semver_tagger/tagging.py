"""リリースタグのワークフロー.

fetch → resolve → （skip でなければ）タグ作成 + push の順に実行する。
"""

from __future__ import annotations

from loguru import logger

from semver_tagger.core.bump import BumpType, parse_bump_type
from semver_tagger.core.exceptions import GitCommandError, PublishError
from semver_tagger.core.version import format_version, parse_version
from semver_tagger.git import GitRepository
from semver_tagger.resolver import ResolutionResult, resolve

DEFAULT_MESSAGE_TEMPLATE = "Release {version}"


def get_next_version(
    repo: GitRepository,
    force_bump: BumpType | str | None = None,
    fetch: bool = True,
) -> ResolutionResult:
    """リポジトリの状態から次のバージョンを解決する.

    Args:
        repo: 対象リポジトリ
        force_bump: バンプ種別の強制指定（指定時はコミットメッセージを読まない）
        fetch: 解決前にリモートのタグを fetch するか

    Returns:
        ResolutionResult

    Raises:
        InvalidBumpTypeError: force_bump が未知の値の場合（fetch より前に検証する）
    """
    forced = parse_bump_type(force_bump)

    if fetch:
        try:
            repo.fetch_tags()
        except GitCommandError as e:
            logger.warning(f"Failed to fetch tags from {repo.remote}, using local tags: {e}")

    latest_tag = repo.latest_tag()
    if latest_tag:
        logger.info(f"Latest tag: {latest_tag}")
    else:
        logger.info("No tags found, starting from v0.0.0")

    commit_message = "" if forced is not None else repo.head_commit_subject()
    result = resolve(latest_tag, commit_message, forced)

    if result.skipped:
        logger.info(f"Version bump skipped (current {format_version(result.current)})")
    else:
        logger.info(f"Next version: {result.tag} ({result.bump_type.value})")
    return result


def publish_tag(
    repo: GitRepository,
    tag: str,
    message: str | None = None,
    message_template: str = DEFAULT_MESSAGE_TEMPLATE,
    identity: tuple[str, str] | None = None,
) -> str:
    """アノテーション付きタグを作成して push する.

    push に失敗した場合はローカルのタグを削除してから PublishError を送出する。
    identity（tagger の name, email）はタグ作成コマンドにだけ適用し、git の設定は変更しない。
    """
    if not message:
        message = message_template.format(version=tag)

    try:
        repo.create_annotated_tag(tag, message, identity=identity)
    except GitCommandError as e:
        raise PublishError(tag, e) from e

    try:
        repo.push_tag(tag)
    except GitCommandError as e:
        logger.error(f"Push failed, removing local tag {tag}")
        try:
            repo.delete_tag(tag)
        except GitCommandError as cleanup_error:
            logger.warning(f"Failed to remove local tag {tag}: {cleanup_error}")
        raise PublishError(tag, e) from e

    logger.info(f"Pushed tag {tag} to {repo.remote}")
    return tag


def tag_and_push(
    repo: GitRepository,
    version: str | None = None,
    force_bump: BumpType | str | None = None,
    message: str | None = None,
    fetch: bool = True,
    message_template: str = DEFAULT_MESSAGE_TEMPLATE,
    identity: tuple[str, str] | None = None,
) -> str | None:
    """次のバージョンでタグを作成して push する.

    Args:
        repo: 対象リポジトリ
        version: 明示的なバージョン（指定時は解決を行わない）
        force_bump: バンプ種別の強制指定
        message: タグメッセージ（既定値: "Release <tag>"）
        fetch: 解決前にリモートのタグを fetch するか
        message_template: message 未指定時のテンプレート（`{version}` をタグ名で置換）
        identity: tagger の (name, email)。None なら git の既定の identity

    Returns:
        push したタグ名。skip の場合は None（タグは作成しない）
    """
    if version:
        tag = format_version(parse_version(version.strip()))
        logger.info(f"Using explicit version: {tag}")
    else:
        result = get_next_version(repo, force_bump=force_bump, fetch=fetch)
        if result.skipped:
            return None
        tag = result.tag

    return publish_tag(repo, tag, message, message_template, identity=identity)
