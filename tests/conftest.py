"""Shared pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to python path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from conjugator.classify import classify_verb  # noqa: E402


@pytest.fixture
def forms_by_id():
    """Return a helper that conjugates with a generator and indexes by form ID."""

    def _forms(generator, verb: str) -> dict:
        return {form.id: form for form in generator(classify_verb(verb))}

    return _forms
