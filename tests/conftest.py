import pytest

from thumbor_url.api.server import Server

TEST_BASE = "http://my.server.com"
SECURITY_KEY = "my-security-key"
IMAGE_PATH = "my.server.com/some/path/to/image.jpg"


@pytest.fixture
def image_path():
    return IMAGE_PATH


@pytest.fixture
def secured_server():
    return Server.secured(TEST_BASE, SECURITY_KEY)


@pytest.fixture
def unsafe_server():
    return Server.unsafe("http://localhost:8888")
