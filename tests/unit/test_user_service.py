"""Tests for UserService."""

from __future__ import annotations

import pytest

from flatpay.models.user import User
from flatpay.services.user_service import UserService
from tests.fakes import MemoryIdAllocator, MemoryRecordStore


@pytest.fixture
def service():
    svc = UserService(store=MemoryRecordStore(), ids=MemoryIdAllocator())
    svc.add(User(first_name="Ana", username="ana", password="pw1"))
    svc.add(User(first_name="Beto", username="beto", password="pw2"))
    return svc


class TestAuthenticate:
    def test_matching_credentials_return_user(self, service):
        user = service.authenticate("beto", "pw2")
        assert user is not None
        assert user.id == 2
        assert user.first_name == "Beto"

    def test_wrong_password_returns_none(self, service):
        assert service.authenticate("beto", "pw1") is None

    def test_unknown_user_returns_none(self, service):
        assert service.authenticate("carla", "pw") is None

    def test_deleted_user_cannot_authenticate(self, service):
        service.delete(1)
        assert service.authenticate("ana", "pw1") is None


def test_update_changes_password(service):
    ana = service.get(1)
    service.update(ana.model_copy(update={"password": "new"}))
    assert service.authenticate("ana", "pw1") is None
    assert service.authenticate("ana", "new").id == 1
