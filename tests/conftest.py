import pytest
from fastapi.testclient import TestClient

from textfill.services.ternary_tree import TernaryTreeTextFiller


@pytest.fixture
def filler():
    return TernaryTreeTextFiller()


@pytest.fixture
def sample_filler():
    filler = TernaryTreeTextFiller()
    for term in ["banana", "Apple", "cherry", "app", "apple pie"]:
        filler.add(term)
    return filler


@pytest.fixture
def client():
    from textfill.main import app

    with TestClient(app) as c:
        yield c
