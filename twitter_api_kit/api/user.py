"""
User identifiers shared by endpoint requests.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TwitterUserIdentifier:
    """
    A user addressed by numeric ID or by screen name.

    Examples:
        >>> params = {}
        >>> TwitterUserIdentifier.screen_name("jack").bind(params)
        >>> params
        {'screen_name': 'jack'}
    """

    user_id_value: Optional[str] = None
    screen_name_value: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.user_id_value is None) == (self.screen_name_value is None):
            raise ValueError("Exactly one of user_id or screen_name is required")

    @classmethod
    def user_id(cls, user_id: str) -> "TwitterUserIdentifier":
        return cls(user_id_value=str(user_id))

    @classmethod
    def screen_name(cls, screen_name: str) -> "TwitterUserIdentifier":
        return cls(screen_name_value=screen_name)

    def bind(self, parameters: Dict[str, Any]) -> None:
        if self.user_id_value is not None:
            parameters["user_id"] = self.user_id_value
        else:
            parameters["screen_name"] = self.screen_name_value
