"""Pytest configuration and shared fixtures for step and repeat tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from stepnrepeat.application import ComputeLayoutCommand, LayoutInput

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def compute_command() -> ComputeLayoutCommand:
    """ComputeLayoutCommand with the default preview scale."""
    return ComputeLayoutCommand()


@pytest.fixture
def sra3_cards_input() -> LayoutInput:
    """90 x 50 mm business cards on an SRA3 sheet with the default margin."""
    return LayoutInput(
        document_width=330,
        document_height=488,
        document_margin=None,
        item_width=90,
        item_height=50,
    )
