"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_data() -> bytes:
    """Zero-terminated ASCII text, 20 bytes long."""
    return b"tsukuyomichankawaii\x00"


@pytest.fixture
def sample_file(tmp_path, sample_data: bytes):
    """Sample data written to a temporary file."""
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_data)
    return path
