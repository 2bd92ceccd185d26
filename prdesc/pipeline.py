"""Pipeline orchestration for the describe and review flows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .classifier import ChangeClassifier
from .composer import DescriptionComposer
from .config import PrDescConfig
from .git.github import PullRequestFetcher
from .logging import get_logger
from .models import ChangeMetadata, ClassificationRecord, Scale
from .templating import TemplateLoader

logger = get_logger("pipeline")


@dataclass(frozen=True)
class DescriptionOutcome:
    """Result of generating a pull request description."""

    record: ClassificationRecord
    metadata: ChangeMetadata
    text: str


class Pipeline:
    """Wires the fetcher, classifier and composer together."""

    def __init__(
        self,
        fetcher: PullRequestFetcher | None = None,
        classifier: ChangeClassifier | None = None,
        composer: DescriptionComposer | None = None,
    ) -> None:
        self.fetcher = fetcher or PullRequestFetcher()
        self.classifier = classifier or ChangeClassifier()
        self.composer = composer or DescriptionComposer()

    @classmethod
    def from_config(cls, config: PrDescConfig) -> "Pipeline":
        loader = TemplateLoader(config.templates_dir, locale=config.locale)
        return cls(
            fetcher=PullRequestFetcher(
                timeout=config.github.timeout, repo=config.github.repo
            ),
            classifier=ChangeClassifier(ticket_prefix=config.ticket_prefix),
            composer=DescriptionComposer(loader, locale=config.locale),
        )

    def describe(
        self,
        number: int | str,
        override_scale: Scale | str | None = None,
        *,
        cwd: Path | str = ".",
    ) -> DescriptionOutcome:
        logger.info("Fetching PR #%s", number)
        metadata = self.fetcher.fetch(number, cwd)
        return self.describe_metadata(metadata, override_scale)

    def describe_metadata(
        self,
        metadata: ChangeMetadata,
        override_scale: Scale | str | None = None,
    ) -> DescriptionOutcome:
        record = self.classifier.classify(metadata, override_scale)
        logger.debug(
            "Classified as %s/%s via rules %s",
            record.scale.value,
            record.change_type.value,
            ", ".join(record.fired_rules),
        )
        text = self.composer.compose(record, metadata)
        return DescriptionOutcome(record=record, metadata=metadata, text=text)

    def review(self, number: int | str, *, cwd: Path | str = ".") -> str:
        logger.info("Fetching changed files for PR #%s", number)
        files = self.fetcher.fetch_files(number, cwd)
        return self.composer.compose_review(files)


__all__ = ["DescriptionOutcome", "Pipeline"]
