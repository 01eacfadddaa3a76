"""
Unit tests for application lifecycle.
"""

from unittest.mock import MagicMock, patch

import pytest

from btpxpress.lifespan import lifespan


@pytest.mark.asyncio
async def test_lifespan_logs_startup_and_shutdown():
    """Test lifespan logs on startup and shutdown."""
    mock_app = MagicMock()
    mock_app.version = "1.0.0"

    with patch("btpxpress.lifespan.logger") as mock_logger:
        async with lifespan(mock_app):
            started_calls = mock_logger.info.call_count
            assert started_calls >= 1

        assert mock_logger.info.call_count > started_calls

    messages = [call.args[0] for call in mock_logger.info.call_args_list]
    assert "Application version: 1.0.0" in messages
