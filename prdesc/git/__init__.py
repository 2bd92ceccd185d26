"""GitHub collaborators that feed pull request metadata into the pipeline."""

from .github import FetchError, PullRequestFetcher, PullRequestNotFoundError, RateLimitError

__all__ = ["FetchError", "PullRequestFetcher", "PullRequestNotFoundError", "RateLimitError"]
