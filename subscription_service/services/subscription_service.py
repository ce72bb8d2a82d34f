import dataclasses
import datetime
import logging
from typing import Callable, List

import subscription_service.config as config
from subscription_service.core.exceptions import MemberNotFoundError
from subscription_service.core.utils import add_days, as_date, today as current_date
from subscription_service.models.member import Member
from subscription_service.services.interfaces import MemberRepository, Notifier, PaymentVerifier

logger = logging.getLogger(__name__)


class SubscriptionService:
    """
    Renews subscriptions and deactivates expired members.
    This is the only service that writes member state back to the repository.
    """

    def __init__(
        self,
        repository: MemberRepository,
        payment_verifier: PaymentVerifier,
        notifier: Notifier,
        today: Callable[[], datetime.date] = current_date,
    ):
        self.repository = repository
        self.payment_verifier = payment_verifier
        self.notifier = notifier
        self.today = today

    # --- RENEWAL ---

    def renew_subscription(self, member_id: int, amount: float, days: int) -> bool:
        """
        Renews a membership once the payment is confirmed.

        The new end date is counted from today, replacing any previous end date.

        Args:
            member_id (int): The member to renew.
            amount (float): Payment amount to verify.
            days (int): Length of the new subscription in days.

        Returns:
            bool: True if renewed, False if the payment was declined.

        Raises:
            MemberNotFoundError: If the member does not exist.
        """
        member = self.repository.get_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)

        if not self.payment_verifier.verify_payment(member_id, amount):
            logger.info("Payment of %s declined for member %s; renewal skipped", amount, member_id)
            return False

        renewed = dataclasses.replace(
            member,
            is_active=True,
            subscription_end=add_days(self.today(), days),
        )
        self.repository.update(renewed)
        logger.info("Member %s renewed until %s", member_id, renewed.subscription_end)
        return True

    # --- EXPIRATION SWEEP ---

    def deactivate_expired_members(self) -> List[int]:
        """
        Deactivates every active member whose subscription ended before today
        and notifies each of them.

        Returns:
            List[int]: Ids of the members deactivated by this sweep.
        """
        today = as_date(self.today())
        deactivated = []

        for member in self.repository.get_all():
            if not member.is_expired(today):
                continue

            expired = dataclasses.replace(member, is_active=False)
            # Persist first so a notice is never sent for an unrecorded change
            self.repository.update(expired)
            self.notifier.send_notification(self._expiry_message(expired), expired.id)
            deactivated.append(expired.id)

        if deactivated:
            logger.info("Deactivated %d expired member(s): %s", len(deactivated), deactivated)
        return deactivated

    @staticmethod
    def _expiry_message(member: Member) -> str:
        return config.EXPIRY_NOTICE.format(
            name=member.name,
            end_date=member.subscription_end.strftime(config.DATE_FORMAT),
        )
