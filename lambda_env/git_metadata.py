"""
Source code integration: commit hash and remote URL of the build checkout.
"""
import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from lambda_env.command_runner import CommandError, CommandRunner

logger = logging.getLogger(__name__)

GIT_HASH_COMMAND = ["git", "rev-parse", "HEAD"]
GIT_REMOTE_COMMAND = ["git", "config", "--get", "remote.origin.url"]

GITHUB_PREFIX_PATTERN = re.compile(r"git@github\.com:|https://github\.com/")
GITHUB_NORMALIZED_PREFIX = "github.com/"

# schemes whose empty path serializes as "/"
SPECIAL_SCHEMES = ("http", "https", "ws", "wss", "ftp")


@dataclass(frozen=True)
class GitMetadata:
    hash: str
    repo_url: str

    @classmethod
    def empty(cls) -> "GitMetadata":
        return cls(hash="", repo_url="")

    @property
    def is_empty(self) -> bool:
        return not self.hash or not self.repo_url


def sanitize_repository_url(repository_url: str) -> str:
    """
    Strip credentials, query string and fragment from a remote URL.
    SCP style remotes (git@host:path) carry no userinfo secrets and pass through.

    :param repository_url: Raw remote URL.
    :returns: scheme://host/path, or the input unchanged when it cannot be parsed.
    """
    if not repository_url:
        return repository_url
    if repository_url.startswith("git@"):
        return repository_url

    try:
        parts = urlsplit(repository_url)
        hostname = parts.hostname
    except ValueError:
        return repository_url

    if not parts.scheme or not hostname:
        return repository_url

    path = parts.path
    if not path and parts.scheme.lower() in SPECIAL_SCHEMES:
        path = "/"
    return f"{parts.scheme}://{hostname}{path}"


def normalize_github_remote(url: str) -> str:
    """
    Rewrite the GitHub SSH or HTTPS prefix to github.com/.

    :param url: Remote URL.
    :returns: Normalized URL.
    """
    return GITHUB_PREFIX_PATTERN.sub(GITHUB_NORMALIZED_PREFIX, url, count=1)


def filter_and_format_github_remote(raw_remote: str) -> str:
    """
    Remove sensitive info from a remote URL and normalize the GitHub prefix.

    :param raw_remote: Raw remote URL.
    :returns: Sanitized remote URL.
    """
    raw_remote = sanitize_repository_url(raw_remote)
    if not raw_remote:
        return raw_remote
    return normalize_github_remote(raw_remote)


def get_git_data(runner: Optional[CommandRunner] = None) -> GitMetadata:
    """
    Read the current commit hash and origin URL.
    Both commands must succeed, otherwise empty metadata is returned.

    :param runner: Command runner, a default CommandRunner when None.
    :returns: GitMetadata with a sanitized repo URL.
    """
    runner = runner or CommandRunner()
    try:
        git_hash = runner.run(GIT_HASH_COMMAND)
        repo_url = runner.run(GIT_REMOTE_COMMAND)
    except CommandError as e:
        logger.debug(f"Failed to add source code integration. Error: {e}")
        return GitMetadata.empty()

    return GitMetadata(hash=git_hash, repo_url=filter_and_format_github_remote(repo_url))
