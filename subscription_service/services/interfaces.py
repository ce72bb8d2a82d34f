"""
Contracts for the external collaborators the services depend on.

Any object with matching methods satisfies a contract; no base class is
required. The host system provides storage and payment implementations.
"""
from typing import Optional, Protocol, Sequence, runtime_checkable

from subscription_service.models.member import Member


@runtime_checkable
class MemberRepository(Protocol):
    """Storage for Member records."""

    def get_by_id(self, member_id: int) -> Optional[Member]:
        ...

    def get_all(self) -> Sequence[Member]:
        ...

    def update(self, member: Member) -> None:
        ...


@runtime_checkable
class PaymentVerifier(Protocol):
    """Confirms that a member has paid a given amount."""

    def verify_payment(self, member_id: int, amount: float) -> bool:
        ...


@runtime_checkable
class Notifier(Protocol):
    """Delivers a message addressed to a member."""

    def send_notification(self, message: str, member_id: int) -> None:
        ...
