"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from termkit import config as cfg
from termkit.term import Term
from termkit.termmap import TermMap


@pytest.fixture(autouse=True)
def reset_config():
    """Drop cached configuration between tests."""
    cfg._config = None
    yield
    cfg._config = None


@pytest.fixture
def sample_term_map():
    """TermMap holding {a@en: 1, a@fr: 2, b: 3}."""
    terms = TermMap()
    terms.put(Term("a", "en"), 1)
    terms.put(Term("a", "fr"), 2)
    terms.put(Term("b"), 3)
    return terms


@pytest.fixture
def sample_term_list_content():
    """Sample plain text term list."""
    return """# Earth in a few languages
earth@en
terre@fr
Erde@de   # inline comment

identifier
earth@en
"""
