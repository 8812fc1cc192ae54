"""GitHub client for reading workflow definition files.

This wraps PyGithub to keep GitHub calls out of CLI and server code, and maps
its failures onto three categories callers surface differently: not found,
authentication/authorization, and everything else.
"""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import requests
from github import Auth, Github, GithubException, RateLimitExceededException
from github.ContentFile import ContentFile
from github.Repository import Repository

from workflow_visualizer.visualizer.config import DEFAULT_WORKFLOWS_PATH

logger = logging.getLogger(__name__)

WORKFLOW_FILE_SUFFIXES = (".yml", ".yaml")


class WorkflowFetchError(Exception):
    """Base error for remote workflow retrieval."""

    user_message = "Failed to fetch workflow files from GitHub."

    def __init__(self, message: str | None = None, *, repository: str = "") -> None:
        super().__init__(message or self.user_message)
        self.repository = repository


class WorkflowNotFoundError(WorkflowFetchError):
    user_message = "Repository or workflow file not found."


class WorkflowAuthError(WorkflowFetchError):
    user_message = "GitHub authentication failed. Check the token and its repository access."


class WorkflowTransportError(WorkflowFetchError):
    user_message = "Could not reach GitHub. Try again later."


class WorkflowContentError(WorkflowTransportError):
    user_message = "Workflow file is not UTF-8 text."


def normalize_repository(value: str) -> str:
    """Normalize a repository reference to "owner/repo".

    Accepts "owner/repo" (with stray slashes or whitespace) and GitHub web URLs
    such as "https://github.com/owner/repo.git".

    Raises:
        ValueError: If no owner/repo pair can be found.
    """

    raw = value.strip()
    if "://" in raw:
        raw = urlparse(raw).path
    raw = raw.strip("/")
    if raw.endswith(".git"):
        raw = raw[: -len(".git")]

    parts = [p for p in raw.split("/") if p]
    if len(parts) != 2:
        raise ValueError(f"Repository must be in the form 'owner/repo': {value!r}")
    return "/".join(parts)


def is_workflow_file_name(name: str) -> bool:
    return name.lower().endswith(WORKFLOW_FILE_SUFFIXES)


def _translate(e: GithubException, *, repository: str, what: str) -> WorkflowFetchError:
    if isinstance(e, RateLimitExceededException):
        return WorkflowTransportError(
            "GitHub API rate limit exceeded. Provide a token or try again later.",
            repository=repository,
        )
    if e.status == 404:
        return WorkflowNotFoundError(f"Not found: {what}", repository=repository)
    if e.status in {401, 403}:
        return WorkflowAuthError(repository=repository)
    return WorkflowTransportError(
        f"GitHub API error (HTTP {e.status}) while fetching {what}", repository=repository
    )


class WorkflowRepositoryClient:
    """Read-only access to a repository's workflow directory."""

    def __init__(
        self,
        *,
        token: str | None = None,
        base_url: str = "https://api.github.com",
        workflows_path: str = DEFAULT_WORKFLOWS_PATH,
        timeout: float = 30.0,
        github_api: Github | None = None,
    ) -> None:
        self._workflows_path = workflows_path.strip("/")

        if github_api is not None:
            self._github = github_api
            logger.debug("Using injected Github instance")
            return

        auth = Auth.Token(token) if token else None
        # No retries: failures are reported to the caller immediately.
        self._github = Github(
            auth=auth,
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            retry=None,
        )
        logger.debug(
            "GitHub client created",
            extra={"base_url": base_url, "authenticated": auth is not None},
        )

    @property
    def workflows_path(self) -> str:
        return self._workflows_path

    def _get_repo(self, repository: str) -> Repository:
        repo_name = normalize_repository(repository)
        try:
            return self._github.get_repo(repo_name)
        except GithubException as e:
            raise _translate(e, repository=repo_name, what=f"repository {repo_name}") from e
        except requests.RequestException as e:
            raise WorkflowTransportError(repository=repo_name) from e

    def list_workflow_files(self, repository: str) -> list[str]:
        """Return workflow file names (not paths) in the workflows directory.

        Raises:
            WorkflowFetchError: On any failure, categorized by subclass.
        """

        repo = self._get_repo(repository)
        repo_name = repo.full_name
        try:
            contents = repo.get_contents(self._workflows_path)
        except GithubException as e:
            raise _translate(e, repository=repo_name, what=self._workflows_path) from e
        except requests.RequestException as e:
            raise WorkflowTransportError(repository=repo_name) from e

        if not isinstance(contents, list):
            raise WorkflowNotFoundError(
                f"Not a directory: {self._workflows_path}", repository=repo_name
            )

        names = sorted(
            c.name for c in contents if c.type == "file" and is_workflow_file_name(c.name)
        )
        logger.info(
            "Listed workflow files", extra={"repo": repo_name, "count": len(names)}
        )
        return names

    def get_workflow_text(self, repository: str, name: str) -> str:
        """Return the text of one workflow file.

        Args:
            repository: "owner/repo" or a GitHub URL.
            name: File name inside the workflows directory.

        Raises:
            WorkflowFetchError: On any failure, categorized by subclass.
        """

        file_name = name.strip().strip("/")
        if not file_name or "/" in file_name:
            raise WorkflowNotFoundError(f"Invalid workflow file name: {name!r}")

        repo = self._get_repo(repository)
        repo_name = repo.full_name
        path = f"{self._workflows_path}/{file_name}"
        try:
            contents = repo.get_contents(path)
        except GithubException as e:
            raise _translate(e, repository=repo_name, what=path) from e
        except requests.RequestException as e:
            raise WorkflowTransportError(repository=repo_name) from e

        if isinstance(contents, list) or contents.type != "file":
            raise WorkflowNotFoundError(f"Not a file: {path}", repository=repo_name)

        text = _decode(contents, repository=repo_name)
        logger.info(
            "Fetched workflow file", extra={"repo": repo_name, "path": path, "bytes": len(text)}
        )
        return text

    def close(self) -> None:
        self._github.close()


def _decode(content: ContentFile, *, repository: str) -> str:
    # decoded_content asserts on non-base64 payloads (files above the API size limit).
    try:
        raw = content.decoded_content
    except AssertionError as e:
        raise WorkflowContentError(
            f"GitHub returned no inline content for {content.path}", repository=repository
        ) from e
    if raw is None:
        raise WorkflowTransportError(
            f"Unexpected contents response for {content.path}", repository=repository
        )
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise WorkflowContentError(repository=repository) from e
