"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def account_settings() -> dict[str, str]:
    """Connection settings for the live account under test."""
    missing = [
        name
        for name in ("DOCSTORE_ENDPOINT", "DOCSTORE_MASTER_KEY", "DOCSTORE_SPROC_LINK")
        if not os.environ.get(name)
    ]
    if missing:
        pytest.skip(f"Missing environment variables: {', '.join(missing)}")
    return {
        "endpoint": os.environ["DOCSTORE_ENDPOINT"],
        "master_key": os.environ["DOCSTORE_MASTER_KEY"],
        "sproc_link": os.environ["DOCSTORE_SPROC_LINK"],
        "partition_key_property": os.environ.get("DOCSTORE_PARTITION_KEY", "/pk"),
        "partition_ids": os.environ.get("DOCSTORE_PARTITION_IDS", "0"),
    }
