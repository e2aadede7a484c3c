"""
Shared test fixtures and configuration for pytest.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Pytest hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "slow: Tests that take a long time to run")


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def abc_vectors():
    """Two-dimensional A/B/C vectors used in ranking examples."""
    return {
        "A": [1.0, 0.0],
        "B": [0.0, 1.0],
        "C": [1.0, 1.0],
    }
