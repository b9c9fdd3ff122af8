"""
Service-level tests that do not go through HTTP.
"""

import pytest

from careerion.core.auth import can_assign_role, can_manage_user, verify_password
from careerion.core.config import Settings
from careerion.core.errors import UpstreamServiceError
from careerion.services.chat_service import ChatService, to_gateway_history
from careerion.services.seed import SAMPLE_PASSWORD, create_sample_data
from tests.conftest import FakeGateway


class TestChatService:

    def test_custom_classifier_is_used(self):
        gateway = FakeGateway()
        service = ChatService(gateway, classifier=lambda message: True)

        result = service.reply("What is the weather?")

        assert result["response"] == "Here is some career advice."
        assert len(gateway.generate_calls) == 1

    def test_failure_raises_upstream_error(self):
        service = ChatService(FakeGateway(generate_error=RuntimeError("quota")))

        with pytest.raises(UpstreamServiceError) as exc_info:
            service.reply("career advice please")

        assert exc_info.value.status_code == 500

    def test_history_with_only_junk_is_single_shot(self):
        gateway = FakeGateway()

        ChatService(gateway).reply("career advice please", history=[None, {"sender": "user", "text": ""}])

        assert gateway.chat_calls == []
        assert len(gateway.generate_calls) == 1


def test_history_roles():
    turns = to_gateway_history([
        {"sender": "user", "text": "hi"},
        {"sender": "assistant", "text": "hello"},
    ])

    assert [t["role"] for t in turns] == ["user", "model"]


@pytest.mark.parametrize("actor, target, allowed", [
    ("superadmin", "admin", True),
    ("superadmin", "superadmin", True),
    ("admin", "user", True),
    ("admin", "admin", False),
    ("user", "user", False),
])
def test_role_assignment(actor, target, allowed):
    assert can_assign_role(actor, target) is allowed


@pytest.mark.parametrize("actor, target, allowed", [
    ("superadmin", "superadmin", True),
    ("superadmin", "admin", True),
    ("admin", "user", True),
    ("admin", "admin", False),
    ("admin", "superadmin", False),
])
def test_managing_accounts(actor, target, allowed):
    assert can_manage_user(actor, target) is allowed


@pytest.mark.parametrize("configured, expected", [
    ("models/gemini-2.0-flash", "gemini-2.0-flash"),
    ("gemini-pro", "gemini-pro"),
    ("", "gemini-1.5-flash"),
])
def test_model_name_normalization(configured, expected):
    assert Settings(gemini_model=configured).model_name == expected


class TestSampleData:

    def test_seeds_empty_database(self, db):
        counts = create_sample_data(db)

        assert counts == {"users": 3, "companies": 3, "jobs": 3}
        john = db.users.find_one({"email": "john@example.com"})
        assert verify_password(SAMPLE_PASSWORD, john["password"])

    def test_does_not_duplicate(self, db):
        create_sample_data(db)

        counts = create_sample_data(db)

        assert counts == {"users": 0, "companies": 0, "jobs": 0}
        assert db.users.count_documents({}) == 3
