"""Pull request metadata retrieval through the GitHub CLI."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from ..logging import get_logger
from ..models import ChangeMetadata

logger = get_logger("git.github")

PR_FIELDS: Sequence[str] = (
    "title",
    "body",
    "additions",
    "deletions",
    "changedFiles",
    "labels",
    "headRefName",
)


class FetchError(RuntimeError):
    """Raised when pull request metadata cannot be retrieved."""


class PullRequestNotFoundError(FetchError):
    """Raised when ``gh`` reports that the pull request does not exist."""


class RateLimitError(FetchError):
    """Raised when the GitHub API rate limit blocks the request."""


class PullRequestFetcher:
    """Collects title, stats, labels, diff and file list for a pull request."""

    def __init__(
        self,
        runner: Callable[..., str] | None = None,
        *,
        timeout: float = 30.0,
        repo: str | None = None,
    ) -> None:
        self._runner = runner or self._default_runner
        self.timeout = timeout
        self.repo = repo

    def fetch(self, number: int | str, cwd: Path | str = ".") -> ChangeMetadata:
        """Return the metadata for pull request ``number``.

        Failure to read the core metadata raises :class:`FetchError`; a failed
        diff or file listing degrades to an empty value instead.
        """
        info = self._fetch_info(number, Path(cwd))
        diff = self._fetch_diff(number, Path(cwd))
        files = self.fetch_files(number, cwd)

        labels = [
            label.get("name", "")
            for label in info.get("labels") or []
            if isinstance(label, dict)
        ]
        return ChangeMetadata(
            title=info.get("title") or None,
            body=info.get("body") or None,
            branch_name=info.get("headRefName") or None,
            labels=frozenset(label for label in labels if label),
            files=tuple(files),
            diff=diff,
            additions=_as_int(info.get("additions")),
            deletions=_as_int(info.get("deletions")),
            file_count=_as_int(info.get("changedFiles")) or None,
        )

    def fetch_files(self, number: int | str, cwd: Path | str = ".") -> List[str]:
        """Return the changed file paths, or an empty list when ``gh`` fails."""
        args = self._gh("pr", "view", str(number), "--json", "files", "--jq", ".files[].path")
        try:
            output = self._run(args, cwd=Path(cwd))
        except (subprocess.SubprocessError, OSError) as exc:
            logger.warning("Could not list changed files for PR #%s: %s", number, _describe(exc))
            return []
        return [line.strip() for line in output.splitlines() if line.strip()]

    # ------------------------------------------------------------------
    # Internals

    def _fetch_info(self, number: int | str, cwd: Path) -> Dict[str, Any]:
        args = self._gh("pr", "view", str(number), "--json", ",".join(PR_FIELDS))
        try:
            output = self._run(args, cwd=cwd)
        except (subprocess.SubprocessError, OSError) as exc:
            raise _classify_failure(number, _describe(exc)) from exc
        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise FetchError(f"Unexpected response for PR #{number}: {exc}") from exc
        if not isinstance(data, dict):
            raise FetchError(f"Unexpected response for PR #{number}")
        return data

    def _fetch_diff(self, number: int | str, cwd: Path) -> str:
        try:
            return self._run(self._gh("pr", "diff", str(number)), cwd=cwd)
        except (subprocess.SubprocessError, OSError) as exc:
            logger.warning(
                "Could not fetch the diff for PR #%s; continuing without it: %s",
                number,
                _describe(exc),
            )
            return ""

    def _gh(self, *args: str) -> List[str]:
        command = ["gh", *args]
        if self.repo:
            command.extend(["--repo", self.repo])
        return command

    def _run(self, args: Iterable[str], *, cwd: Path) -> str:
        return self._runner(args, cwd=cwd, capture_output=True, timeout=self.timeout)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
        timeout: Optional[float] = None,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            encoding="utf-8",
            capture_output=capture_output,
            timeout=timeout,
        )
        return completed.stdout if capture_output else ""


def _classify_failure(number: int | str, detail: str) -> FetchError:
    lowered = detail.lower()
    if "could not find pull request" in lowered or "no pull requests found" in lowered:
        return PullRequestNotFoundError(f"PR #{number} not found: {detail}")
    if "rate limit" in lowered:
        return RateLimitError(f"GitHub API rate limit reached: {detail}")
    return FetchError(f"Failed to fetch PR #{number}: {detail}")


def _describe(exc: BaseException) -> str:
    stderr = getattr(exc, "stderr", None)
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    if isinstance(stderr, str) and stderr.strip():
        return stderr.strip()
    return str(exc)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, str):
        try:
            return max(int(value), 0)
        except ValueError:
            return 0
    return 0


__all__ = [
    "FetchError",
    "PullRequestFetcher",
    "PullRequestNotFoundError",
    "RateLimitError",
]
