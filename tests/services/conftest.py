# tests/services/conftest.py
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.services.app import create_app


@pytest.fixture
def app() -> FastAPI:
    """Новое приложение на каждый тест: состояние в памяти не переживает тест."""
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    # Контекстный менеджер запускает lifespan (загрузку каталога)
    with TestClient(app) as test_client:
        yield test_client
