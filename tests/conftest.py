"""
Test configuration and fixtures.
"""

import pytest
from pathlib import Path
import tempfile
import shutil


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir)


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample YAML config file."""
    config_path = temp_dir / "oligoprop.yaml"
    config_path.write_text(
        "oligoprop:\n"
        "  salt: 0.1\n"
        "  primer_conc: 2.5e-7\n"
        "  temp: 37\n"
        "  hp_base: 3\n"
    )
    return config_path


@pytest.fixture
def sample_sequences():
    """Sample oligos for testing."""
    return {
        "primer": "ATCGATCGATCGATCGATCG",
        "ambiguous": "ACGTAGAGGACGTN",
        "palindrome": "ACGTACGT",
        "hairpin": "GGGGAAACCCC",
        "at_rich": "AATTAATTAATT",
        "gc_rich": "GCGCGCGCGCGCGCGCGCGC",
    }
