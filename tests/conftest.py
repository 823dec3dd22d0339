"""
Pytest fixtures for the goals tools tests.

The default dataset mirrors the worked example: user U1 owns G1, another
user (U2) owns G2, plus a few extra records for feedback and reflections.
"""
import copy
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.dataset import parse_document
from core.dispatcher import QueryDispatcher

U1 = {"id": "U1", "name": "Una One", "email": "u1@example.com", "avatar": None}
U2 = {"id": "U2", "name": "Dos Two", "email": "u2@example.com", "avatar": "u2.png"}

BASE_DOCUMENT = {
    "user": U1,
    "goals": [
        {
            "id": "G1",
            "title": "Run a half marathon",
            "body": "Train three times a week.",
            "created": "2024-01-10",
            "due": "2024-06-01T00:00:00Z",
            "status": {"tag": "open", "date": None},
            "owner": U1,
            "sharedWith": [U2],
            "actionPoints": [{"text": "Buy shoes", "done": True}],
            "items": [{"anything": ["goes", 1, None]}],
        },
        {
            "id": "G2",
            "title": "Someone else's goal",
            "created": "2024-01-15",
            "owner": "U2",
        },
        {
            "id": "G4",
            "title": "Undated goal",
            "owner": {"id": "U1"},
            "status": {"tag": "draft"},
        },
    ],
    "reviews": [
        {
            "id": "R1",
            "subject": "Sprint demo",
            "date": "2024-03-05",
            "inputs": [{"q": "Strengths", "a": "Clear"}],
            "professional": U1,
            "reviewer": U2,
        },
        {
            "id": "R2",
            "subject": "Client call",
            "date": "2024-05-20T15:45:00+02:00",
            "inputs": [],
            "professional": U1,
            "externalReviewer": "client@example.org",
        },
        {
            "id": "R3",
            "subject": "Review of U2",
            "date": "2024-03-05",
            "professional": U2,
            "reviewer": U1,
        },
    ],
    "reflections": [
        {
            "id": "F1",
            "title": "Q1 reflection",
            "created": "2024-04-01T08:00:00Z",
            "range": {"from": "2024-01-01", "to": "2024-03-31"},
            "inputs": ["Went well", 4, "Could improve", 2.5],
            "user": U1,
            "assessors": [{"assessed": True, "reviewer": U2}, {"assessed": False, "reviewer": None}],
        },
        {
            "id": "F2",
            "title": "U2 reflection",
            "created": "2024-04-01T08:00:00Z",
            "range": {"from": "2024-01-01", "to": "2024-03-31"},
            "user": U2,
            "assessors": [],
        },
    ],
}


@pytest.fixture
def document():
    """A fresh, mutable copy of the base goals document."""
    return copy.deepcopy(BASE_DOCUMENT)


@pytest.fixture
def dataset(document):
    return parse_document(document)


@pytest.fixture
def dispatcher(dataset):
    return QueryDispatcher(dataset)


@pytest.fixture
def sample_path():
    return project_root / "data" / "sample_goals.json"
