import datetime
from dataclasses import dataclass
from typing import Optional

from subscription_service.core.utils import as_date


@dataclass(frozen=True)
class Member:
    """
    Represents a single subscriber and their subscription details.
    Records are immutable; changes are made with dataclasses.replace().
    """
    id: int
    name: str
    is_active: bool = False
    subscription_end: Optional[datetime.date] = None  # None = never subscribed

    def __post_init__(self) -> None:
        # Comparisons are done on calendar dates only
        object.__setattr__(self, "subscription_end", as_date(self.subscription_end))

    def is_expired(self, today: datetime.date) -> bool:
        """
        True when the member is still flagged active but the subscription
        ended before `today`. Inactive members are never reported as expired.
        """
        if not self.is_active or self.subscription_end is None:
            return False
        return self.subscription_end < as_date(today)
