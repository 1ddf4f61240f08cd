"""Test fixtures."""
import os

import pytest

BASE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "mocked_data")


def read_mocked_data(command_dir, filename="response.json"):
    """Read a saved device response as bytes."""
    with open(os.path.join(BASE_DIR, command_dir, filename), "rb") as f:
        return f.read()


@pytest.fixture
def mocked_data():
    return read_mocked_data


@pytest.fixture
def mocked_path():
    def _path(command_dir, filename="response.json"):
        return os.path.join(BASE_DIR, command_dir, filename)

    return _path
