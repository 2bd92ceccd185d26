from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.metadata_builder import TemplateDirBuilder


@pytest.fixture
def template_dir(tmp_path: Path) -> TemplateDirBuilder:
    """Provide a writable template override directory rooted at tmp_path."""
    return TemplateDirBuilder(tmp_path)
