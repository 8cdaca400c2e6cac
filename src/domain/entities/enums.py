"""
Adaboards Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class BoardRole(str, Enum):
    """
    User role within a board.

    Privilege order is OWNER > MAINTAINER > MEMBER. OWNER and MAINTAINER
    together form the "manager" tier required for board and member
    management; only OWNER may delete a board.
    """

    owner = "OWNER"
    maintainer = "MAINTAINER"
    member = "MEMBER"

    @property
    def rank(self) -> int:
        return _ROLE_RANKS[self]

    def at_least(self, other: "BoardRole") -> bool:
        return self.rank >= other.rank

    @property
    def is_manager(self) -> bool:
        return self.at_least(BoardRole.maintainer)


_ROLE_RANKS = {
    BoardRole.member: 0,
    BoardRole.maintainer: 1,
    BoardRole.owner: 2,
}


class TaskStatus(str, Enum):
    """Task workflow column"""

    todo = "TODO"
    in_progress = "IN_PROGRESS"
    done = "DONE"
