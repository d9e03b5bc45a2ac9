"""Configuration for pytest."""
import sys
import os

# Add the project root to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Common test fixtures can be defined here
import pytest
from unittest.mock import AsyncMock, Mock


@pytest.fixture
def call_next():
    """Mock call_next that returns a 200 response."""
    mock_response = Mock(status_code=200)
    return AsyncMock(return_value=mock_response)
