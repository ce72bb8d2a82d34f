import datetime
import logging
from typing import Callable, List, Optional

from subscription_service.core.exceptions import MemberNotFoundError
from subscription_service.core.utils import days_until, today as current_date
from subscription_service.models.member import Member
from subscription_service.services.interfaces import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    """
    Read-only access to members. Never modifies repository state.
    """

    def __init__(self, repository: MemberRepository, today: Callable[[], datetime.date] = current_date):
        self.repository = repository
        self.today = today

    # --- LOOKUPS ---

    def get_member(self, member_id: int) -> Optional[Member]:
        """
        Returns the member with this id, or None if the repository has no such member.
        """
        return self.repository.get_by_id(member_id)

    def _require_member(self, member_id: int) -> Member:
        member = self.repository.get_by_id(member_id)
        if member is None:
            logger.warning("Lookup for unknown member %s", member_id)
            raise MemberNotFoundError(member_id)
        return member

    def is_active(self, member_id: int) -> bool:
        """
        Returns the member's active flag as stored.

        Raises:
            MemberNotFoundError: If no member exists for member_id.
        """
        return self._require_member(member_id).is_active

    # --- REPORTING ---

    def list_members(self, active: Optional[bool] = None) -> List[Member]:
        """
        Lists all members, or only those whose active flag equals `active`.
        """
        members = list(self.repository.get_all())
        if active is None:
            return members
        return [m for m in members if m.is_active == active]

    def days_remaining(self, member_id: int) -> Optional[int]:
        """
        Days left until the member's subscription ends (negative once it has passed).
        Returns None for members that have never subscribed.

        Raises:
            MemberNotFoundError: If no member exists for member_id.
        """
        member = self._require_member(member_id)
        if member.subscription_end is None:
            return None
        return days_until(member.subscription_end, self.today())
