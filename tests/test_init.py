"""Tests for the valaddr package interface."""

import valaddr


def test_public_api():
    """Test the validators are exported from the package."""
    assert valaddr.is_domain is valaddr.core.is_domain
    assert valaddr.is_ip is valaddr.core.is_ip
    assert set(valaddr.__all__) == {
        "is_domain",
        "is_ip",
        "MAX_HOST_LENGTH",
        "PLACEHOLDER_PORT",
    }


def test_version():
    """Test the package exposes a version string."""
    assert isinstance(valaddr.__version__, str)
