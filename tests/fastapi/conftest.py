from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from auth_relay._config import RedirectConfig
from auth_relay.app import create_app


@pytest.fixture
def test_app(config: RedirectConfig) -> FastAPI:
    return create_app(config)


@pytest.fixture
def client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app, follow_redirects=False) as c:
        yield c
