import pytest
from unittest import mock
from fastapi.testclient import TestClient
from code_reviewer.api import app
from code_reviewer.dependencies import get_review_service
from code_reviewer.service import ReviewService

@pytest.fixture
def generator():
    # Stands in for GeminiReviewer
    gen = mock.Mock()
    gen.generate_content = mock.AsyncMock(return_value="Looks fine.")
    return gen

@pytest.fixture
def client(generator):
    app.dependency_overrides[get_review_service] = lambda: ReviewService(generator)
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def base_payload():
    return {"code": "function add(a,b){return a+b}"}
