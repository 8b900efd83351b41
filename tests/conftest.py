"""
Global pytest configuration for the legislation parser tests.

Puts src/ and the repository root on sys.path so that `from src.parsing ...`
imports work without installing the package, and provides the identity
records shared by the parser tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to the path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Also add the repository root
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from src.registry.models import ActIdentity, ActStatus  # noqa: E402

ACT_INDEX_FILE = root_path / "data" / "act_index.yaml"


def make_identity(act_id: str, **overrides) -> ActIdentity:
    fields = dict(
        id=act_id,
        law_name="Test Law",
        year=1995,
        title="חוק בדיקה",
        title_en="Test Law, 5755-1995",
        abbreviation="TL",
        status=ActStatus.IN_FORCE,
        issued_date="1995-07-25",
        in_force_date="1995-10-25",
        url="https://example.org/test-law",
    )
    fields.update(overrides)
    return ActIdentity(**fields)


@pytest.fixture
def act_index_file():
    return ACT_INDEX_FILE


@pytest.fixture
def privacy_identity():
    return make_identity("privacy-protection-law-1981", year=1981, abbreviation="PPL")


@pytest.fixture
def computers_identity():
    return make_identity("computer-law-1995", abbreviation="CL")


@pytest.fixture
def basic_law_identity():
    return make_identity("basic-law-human-dignity-1992", year=1992, abbreviation="BL-HDL")


@pytest.fixture
def unknown_identity():
    return make_identity("some-other-law-2001", year=2001)


@pytest.fixture
def identity_factory():
    return make_identity
