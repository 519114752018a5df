"""Shared pytest fixtures for the chronospan test suite.

Fixtures defined here are available to all test modules (unit and
integration) without any import.

No AWS credentials are required: the ``agent_runner`` fixture patches
``BedrockModel`` before any SDK initialisation can attempt a network call.
"""

import datetime
import os

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# The module-level ``settings = Settings()`` call in config.py runs at
# collection time.  A sentinel MODEL_ARN keeps the assistant enabled so the
# agent factory can be exercised.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1:123456789012:application-inference-profile/test")
os.environ.pop("DEFAULT_BIRTH_DATE", None)


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel``; no AWS credentials needed."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out.

    The tool registry, system prompt and message list are live, but the
    underlying model never makes a Bedrock API call.
    """
    with patch("chronospan.agent.BedrockModel", return_value=mock_bedrock_model):
        from chronospan.agent import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def known_birth_date() -> datetime.date:
    """Birth date used across the engine, report and tool tests."""
    return datetime.date(1995, 4, 15)


@pytest.fixture
def known_reference_date() -> datetime.date:
    """Exactly 29 years after ``known_birth_date`` (10593 days)."""
    return datetime.date(2024, 4, 15)


@pytest.fixture
def leap_day_birth_date() -> datetime.date:
    """A valid leap-day birth date (2000 is divisible by 400)."""
    return datetime.date(2000, 2, 29)
