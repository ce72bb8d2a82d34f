"""
Subscription membership lifecycle: member lookups, payment-conditioned
renewal and the expiration sweep.
"""
from subscription_service.core.exceptions import MemberNotFoundError
from subscription_service.models.member import Member
from subscription_service.services.member_service import MemberService
from subscription_service.services.subscription_service import SubscriptionService

__all__ = ["Member", "MemberNotFoundError", "MemberService", "SubscriptionService"]
