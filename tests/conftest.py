"""
Shared fixtures: autospec mocks of the collaborator contracts and small
in-memory fakes for sweep scenarios.
"""
import datetime
from unittest.mock import create_autospec

import pytest

from subscription_service.services.interfaces import MemberRepository, Notifier, PaymentVerifier
from subscription_service.services.member_service import MemberService
from subscription_service.services.subscription_service import SubscriptionService

TODAY = datetime.date(2026, 3, 15)


class InMemoryMemberRepository:
    """Dict-backed repository that stores copies, like a real database would."""

    def __init__(self, members=()):
        self.rows = {m.id: m for m in members}
        self.updates = []

    def get_by_id(self, member_id):
        return self.rows.get(member_id)

    def get_all(self):
        return list(self.rows.values())

    def update(self, member):
        self.updates.append(member)
        self.rows[member.id] = member


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    def send_notification(self, message, member_id):
        self.sent.append((member_id, message))


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def repo():
    return create_autospec(MemberRepository, instance=True)


@pytest.fixture
def payment():
    return create_autospec(PaymentVerifier, instance=True)


@pytest.fixture
def notify():
    return create_autospec(Notifier, instance=True)


@pytest.fixture
def member_service(repo, today):
    return MemberService(repo, today=lambda: today)


@pytest.fixture
def subscription_service(repo, payment, notify, today):
    return SubscriptionService(repo, payment, notify, today=lambda: today)


@pytest.fixture
def make_fake_service(payment, today):
    """Builds a SubscriptionService over an in-memory repository and recording notifier."""

    def _make(members):
        store = InMemoryMemberRepository(members)
        notifier = RecordingNotifier()
        service = SubscriptionService(store, payment, notifier, today=lambda: today)
        return service, store, notifier

    return _make
