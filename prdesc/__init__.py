"""Pull request description generator."""

from .categorizer import categorize
from .classifier import ChangeClassifier, classify
from .composer import DescriptionComposer, compose
from .models import (
    ChangeMetadata,
    ChangeType,
    ClassificationRecord,
    FileCategoryBuckets,
    Scale,
)
from .templating import render

__all__ = [
    "ChangeClassifier",
    "ChangeMetadata",
    "ChangeType",
    "ClassificationRecord",
    "DescriptionComposer",
    "FileCategoryBuckets",
    "Scale",
    "categorize",
    "classify",
    "compose",
    "render",
]
