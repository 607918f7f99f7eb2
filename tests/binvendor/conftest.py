"""
Shared fixtures for binvendor tests.
"""

import pytest

from binvendor.platform_names import HostPlatform


@pytest.fixture
def linux_host() -> HostPlatform:
    return HostPlatform(cpu="x86_64", os="linux")


@pytest.fixture
def darwin_host() -> HostPlatform:
    return HostPlatform(cpu="arm64", os="darwin")
