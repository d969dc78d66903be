"""CI release orchestrator: resolve the next semantic version and tag/push it."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from loguru import logger

from semver_tagger.config import ReleaseConfig, load_release_config
from semver_tagger.core.exceptions import SemverTaggerError
from semver_tagger.git import GitRepository
from semver_tagger.tagging import get_next_version, tag_and_push


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def _open_repo(repo_path: Path, config: ReleaseConfig, remote: str | None) -> GitRepository:
    return GitRepository(repo_path, remote=remote or os.environ.get("SEMVER_TAGGER_REMOTE") or config.remote)


def _tagger_identity(config: ReleaseConfig) -> tuple[str, str] | None:
    if config.git_user_name and config.git_user_email:
        return config.git_user_name, config.git_user_email
    return None


def next_version(repo: GitRepository, config: ReleaseConfig, force_bump: str | None, fetch: bool) -> str | None:
    result = get_next_version(repo, force_bump=force_bump, fetch=fetch and config.fetch_tags)
    return result.tag


def release(
    repo: GitRepository,
    config: ReleaseConfig,
    version: str | None,
    force_bump: str | None,
    message: str | None,
    fetch: bool,
) -> str | None:
    tag = tag_and_push(
        repo,
        version=version,
        force_bump=force_bump,
        message=message,
        fetch=fetch and config.fetch_tags,
        message_template=config.message_template,
        identity=_tagger_identity(config),
    )
    if tag is None:
        logger.info("Version bump skipped, no tag created")
    return tag


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Semantic version tagging for CI")
    p.add_argument("--repo", type=Path, default=Path.cwd(), help="git working tree (default: cwd)")
    p.add_argument(
        "--config",
        type=Path,
        default=Path("release.yml"),
        help="release config path (default: release.yml)",
    )
    p.add_argument("--remote", default=None, help="remote to fetch/push tags (default: config or origin)")
    p.add_argument("--verbose", action="store_true", help="debug logging")

    sub = p.add_subparsers(dest="command", required=True)

    force_help = "force bump type: skip, patch, minor, major (default: from commit message)"

    p_next = sub.add_parser("next-version", help="print the next version tag")
    p_next.add_argument("--force-bump", default=None, help=force_help)
    p_next.add_argument("--no-fetch", action="store_true", help="do not fetch tags from the remote")

    p_tag = sub.add_parser("tag", help="create and push the next version tag")
    p_tag.add_argument("--version", default=None, help="explicit version, bypasses resolution")
    p_tag.add_argument("--force-bump", default=None, help=force_help)
    p_tag.add_argument("--message", default=None, help='tag message (default: "Release <version>")')
    p_tag.add_argument("--no-fetch", action="store_true", help="do not fetch tags from the remote")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    repo_path = args.repo
    config_path = args.config if args.config.is_absolute() else repo_path / args.config
    force_bump = args.force_bump or os.environ.get("SEMVER_TAGGER_FORCE_BUMP") or None

    try:
        config = load_release_config(config_path)
        repo = _open_repo(repo_path, config, args.remote)
        if args.command == "next-version":
            tag = next_version(repo, config, force_bump, fetch=not args.no_fetch)
        else:
            tag = release(
                repo,
                config,
                version=args.version,
                force_bump=force_bump,
                message=args.message,
                fetch=not args.no_fetch,
            )
    except (SemverTaggerError, ValueError) as e:
        logger.error(str(e))
        return 1

    if tag:
        print(tag)
    return 0


if __name__ == "__main__":
    sys.exit(main())
