from typing import Any


class MemberNotFoundError(ValueError):
    """
    Raised when an operation targets a member id the repository does not hold.
    """
    def __init__(self, member_id: Any):
        super().__init__(f"Member {member_id} not found.")
        self.member_id = member_id
