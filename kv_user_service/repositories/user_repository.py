"""
User repository.

Stores each user as a hash under ``user:<id>`` and allocates ids from
a single counter key. Errors from the gateway propagate unchanged.
"""

from typing import List

import structlog

from ..domain.entities import User
from ..domain.exceptions import ParseError, UserNotFoundError
from ..metrics import track_user_operation
from ..store.gateway import KeyValueGateway

logger = structlog.get_logger(__name__)

USER_KEY_PREFIX = "user:"
USER_KEY_PATTERN = USER_KEY_PREFIX + "[0-9]*"
USER_ID_COUNTER_KEY = "userIncrID"


def user_key(user_id: int) -> str:
    """Build the store key for a user id."""
    return f"{USER_KEY_PREFIX}{user_id}"


def parse_user_key(key: str) -> int:
    """
    Extract the integer id from a user key.

    The suffix must be the canonical ASCII decimal form of the id, so
    that the key rebuilt from the id is the key that was enumerated.

    Raises:
        ParseError: If the key does not end in a canonical decimal id
    """
    suffix = key[len(USER_KEY_PREFIX):] if key.startswith(USER_KEY_PREFIX) else key
    if not (suffix.isascii() and suffix.isdigit()):
        raise ParseError(key)
    user_id = int(suffix)
    if str(user_id) != suffix:
        raise ParseError(key)
    return user_id


class UserRepository:
    """
    Repository for user records.

    Attributes:
        gateway: Key-value gateway the records live in
    """

    def __init__(self, gateway: KeyValueGateway):
        self.gateway = gateway

    async def list_all_users(self) -> List[User]:
        """
        Fetch every stored user.

        Returns:
            Users ordered by id; empty list when none are stored

        Raises:
            ParseError: If a matched key does not end in an integer id
            StoreError: If enumeration or any fetch fails
            DecodingError: If a stored hash cannot be decoded
        """
        keys = await self.gateway.list_keys_matching(USER_KEY_PATTERN)
        user_ids = sorted(parse_user_key(key) for key in keys)

        users = []
        for user_id in user_ids:
            users.append(await self.find_user_by_id(user_id))

        logger.debug("Listed users", count=len(users))
        return users

    async def find_user_by_id(self, user_id: int) -> User:
        """
        Fetch one user.

        Raises:
            UserNotFoundError: If no hash is stored for the id
            StoreError: If the key holds a non-hash value or the store fails
            DecodingError: If required fields are missing or malformed
        """
        key = user_key(user_id)
        values = await self.gateway.get_hash(key)
        if not values:
            raise UserNotFoundError(user_id)
        return User.from_hash(key, values)

    async def create_or_update_user(self, user: User) -> User:
        """
        Persist a user, creating it when it has no id yet.

        A positive id updates the existing record and fails if it is
        unknown; there is no implicit creation on update. Any other id
        allocates a fresh one, which is written back onto ``user``.

        Args:
            user: Record to write; its id is replaced on creation

        Returns:
            The same user instance

        Raises:
            UserNotFoundError: If updating an id that is not stored
            StoreError: If id allocation or the write fails
        """
        if user.is_persisted:
            operation = "update"
            key = user_key(user.id)
            if not await self.gateway.exists(key):
                track_user_operation(operation, False)
                raise UserNotFoundError(user.id)
        else:
            operation = "create"
            user.id = await self.allocate_user_id()
            key = user_key(user.id)

        await self.gateway.set_hash(key, user.to_hash())
        track_user_operation(operation, True)

        logger.info("User saved", operation=operation, user_id=user.id)
        return user

    async def allocate_user_id(self) -> int:
        """
        Allocate the next user id.

        A single INCR on the counter key; the store starts an absent
        counter at zero, so the very first id is 1.
        """
        return await self.gateway.increment_counter(USER_ID_COUNTER_KEY)
