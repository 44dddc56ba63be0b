import socket

import pytest
from fastapi.testclient import TestClient

from time_service.server import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
