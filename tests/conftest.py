"""Pytest configuration and fixtures for StemEdge tests."""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from stemedge.services import auth, lesson_views
from stemedge.services.lesson_views import LessonViewRegistry
from stemedge.services.progress_store import ProgressStore


@pytest.fixture
def store(tmp_path):
    """Progress store writing into a per-test directory."""
    return ProgressStore(tmp_path / "progress")


@pytest.fixture
def registry(store, monkeypatch):
    registry = LessonViewRegistry(store=store)
    monkeypatch.setattr(lesson_views, "_registry", registry)
    yield registry
    registry.close_all()


@pytest.fixture
def client(registry):
    from stemedge.main import app

    with TestClient(app) as test_client:
        yield test_client


class FakeQuery:
    def __init__(self, rows):
        self.rows = rows
        self.filters = {}

    def select(self, columns):
        return self

    def eq(self, column, value):
        self.filters[column] = value
        return self

    def single(self):
        return self

    def execute(self):
        matches = [
            row for row in self.rows
            if all(row.get(k) == v for k, v in self.filters.items())
        ]
        if len(matches) != 1:
            raise Exception("JSON object requested, multiple (or no) rows returned")
        return SimpleNamespace(data=matches[0])


class FakeSupabaseAuth:
    def __init__(self, accounts):
        self.accounts = accounts
        self.signed_out = False

    def sign_in_with_password(self, credentials):
        account = self.accounts.get(credentials["email"])
        if account is None or account["password"] != credentials["password"]:
            raise Exception("Invalid login credentials")
        return SimpleNamespace(
            user=SimpleNamespace(id=account["id"]),
            session=SimpleNamespace(access_token=f"token-{account['id']}"),
        )

    def get_user(self, jwt):
        for account in self.accounts.values():
            if jwt == f"token-{account['id']}":
                return SimpleNamespace(user=SimpleNamespace(id=account["id"]))
        raise Exception("invalid JWT")

    def sign_out(self):
        self.signed_out = True


class FakeSupabase:
    """Just enough of the supabase client for the auth service."""

    def __init__(self, accounts, profiles):
        self.auth = FakeSupabaseAuth(accounts)
        self.profiles = profiles

    def table(self, name):
        assert name == "users"
        return FakeQuery(self.profiles)


@pytest.fixture
def fake_supabase():
    return FakeSupabase(
        accounts={
            "ada@school.org": {"id": "u-1", "password": "s3cret"},
            "ghost@school.org": {"id": "u-2", "password": "boo"},
        },
        profiles=[
            {"id": "u-1", "username": "ada@school.org", "role": "student", "isApproved": True,
             "securityAnswer": "hashed"},
        ],
    )


@pytest.fixture
def auth_service(fake_supabase, monkeypatch):
    service = auth.AuthService(client=fake_supabase)
    monkeypatch.setattr(auth, "_auth_service", service)
    return service
