"""Configures pytest further."""
import pytest

from rsa32.entropy import RandomSource


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture
def fixed_source():
    """Factory for a RandomSource replaying a fixed byte sequence, then reading short."""

    def make(data: bytes) -> RandomSource:
        buffer = bytearray(data)

        def generator(count: int) -> bytes:
            chunk = bytes(buffer[:count])
            del buffer[:count]
            return chunk

        return RandomSource(generator)

    return make
