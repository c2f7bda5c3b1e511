"""Unit tests for ReadPolicy validation."""

from datetime import timedelta

import pytest

from docstore.bulkread.runtime import DEFAULT_PAGE_SIZE_HINT, ReadPolicy


class TestReadPolicy:
    """Test ReadPolicy defaults and validation."""

    def test_defaults(self):
        policy = ReadPolicy()
        assert policy.page_size_hint == DEFAULT_PAGE_SIZE_HINT == 5000
        assert policy.max_empty_responses == 10
        assert policy.max_elapsed is None
        assert policy.script_logging_enabled

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"page_size_hint": 0},
            {"max_throttle_retries": -1},
            {"max_timeout_retries": -1},
            {"max_empty_responses": -1},
            {"max_elapsed": timedelta(0)},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            ReadPolicy(**kwargs)

    def test_unbounded_retries_allowed(self):
        """Test None disables throttle and timeout bounds."""
        policy = ReadPolicy(max_throttle_retries=None, max_timeout_retries=None)
        assert policy.max_throttle_retries is None
