"""
Domain entities for user records.

A User is stored as a Redis hash of string fields. The conversion
between the entity and that flat mapping lives here so that every
layer agrees on field names.
"""

from dataclasses import dataclass
from typing import Dict

from .exceptions import DecodingError

USER_FIELDS = ("id", "name", "age", "city")


@dataclass
class User:
    """
    User record.

    An id of zero or less marks a record that has not been persisted yet;
    persisted users always carry an id of at least 1.
    """

    id: int = 0
    name: str = ""
    age: int = 0
    city: str = ""

    @property
    def is_persisted(self) -> bool:
        """Whether the store has assigned an id to this user."""
        return self.id > 0

    def to_hash(self) -> Dict[str, str]:
        """Flatten the user into the string mapping written with HSET."""
        return {
            "id": str(self.id),
            "name": self.name,
            "age": str(self.age),
            "city": self.city,
        }

    @classmethod
    def from_hash(cls, key: str, values: Dict[str, str]) -> "User":
        """
        Build a user from the mapping returned by HGETALL.

        Args:
            key: Store key the mapping was read from (used in errors)
            values: Field mapping, all values as strings

        Returns:
            Decoded User

        Raises:
            DecodingError: If a field is missing or not of the expected type
        """
        missing = [field for field in USER_FIELDS if field not in values]
        if missing:
            raise DecodingError(key, f"missing fields: {', '.join(missing)}")

        try:
            user_id = int(values["id"])
            age = int(values["age"])
        except ValueError as e:
            raise DecodingError(key, str(e)) from e

        return cls(id=user_id, name=values["name"], age=age, city=values["city"])
