"""
Demo data loaded at startup.
"""

from typing import List

import structlog

from .domain.entities import User
from .domain.exceptions import StoreError
from .repositories.user_repository import USER_ID_COUNTER_KEY, UserRepository, user_key

logger = structlog.get_logger(__name__)

DEMO_USERS: List[User] = [
    User(id=1, name="John", age=31, city="New York"),
    User(id=2, name="Doe", age=22, city="Vancouver"),
]


async def seed_demo_users(repository: UserRepository) -> None:
    """
    Write the demo users and move the id counter past them.

    Records are written directly under their fixed ids. The counter is
    raised to the highest seeded id so that later creations never reuse
    one of them; a counter already ahead is left alone.

    Raises:
        StoreError: If a write fails or the counter holds a non-integer
    """
    gateway = repository.gateway
    for user in DEMO_USERS:
        await gateway.set_hash(user_key(user.id), user.to_hash())

    highest_id = max(user.id for user in DEMO_USERS)
    current = await gateway.get(USER_ID_COUNTER_KEY)
    if current is not None and not current.lstrip("-").isdigit():
        raise StoreError("seed", USER_ID_COUNTER_KEY, "counter is not an integer")
    if current is None or int(current) < highest_id:
        await gateway.set(USER_ID_COUNTER_KEY, str(highest_id))

    logger.info("Demo users loaded", count=len(DEMO_USERS))
