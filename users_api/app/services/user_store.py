"""
In‑memory user store.

``UserStore`` keeps user records in a plain list, in insertion order,
and looks them up by linear scan.  An instance is created by
``create_app`` and attached to ``app.state.store``; endpoints receive it
through the ``get_store`` dependency, so every application (and every
test) owns an independent store.

The store does not guard against concurrent writers.  Nothing survives
a process restart.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..core.config import ID_STRATEGIES

logger = logging.getLogger(__name__)

SEED_USERS: Tuple[Tuple[str, str], ...] = (
    ("Alice", "alice@example.com"),
    ("Bob", "bob@example.com"),
)


@dataclass
class User:
    """A single user record."""

    id: int
    name: str
    email: str


class UserStore:
    """Ordered collection of :class:`User` records held in memory.

    Parameters
    ----------
    seed : Iterable[Tuple[str, str]]
        ``(name, email)`` pairs loaded on construction and on
        :meth:`reset`.  They receive ids ``1..n`` in order.
    id_strategy : str
        ``"length"`` assigns ``len(store) + 1`` to a new record, which
        may reuse an id that is still present after a deletion.
        ``"sequence"`` assigns one more than the highest id ever
        handed out.
    """

    def __init__(self, seed: Iterable[Tuple[str, str]] = SEED_USERS, id_strategy: str = "length") -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(f"Unknown id strategy: {id_strategy!r}")
        self.id_strategy = id_strategy
        self._seed = tuple(seed)
        self._users: List[User] = []
        self._last_id = 0
        self.reset()

    def reset(self) -> None:
        """Drop every record and reload the seed users."""
        self._users = [
            User(id=position, name=name, email=email)
            for position, (name, email) in enumerate(self._seed, start=1)
        ]
        self._last_id = len(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> List[User]:
        """Return all users in insertion order."""
        return list(self._users)

    def index_by_id(self, user_id: int) -> int:
        """Return the position of the first user with ``user_id`` or ``-1``."""
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return -1

    def find_by_id(self, user_id: int) -> Optional[User]:
        index = self.index_by_id(user_id)
        if index == -1:
            return None
        return self._users[index]

    def _next_id(self) -> int:
        if self.id_strategy == "sequence":
            self._last_id += 1
            return self._last_id
        return len(self._users) + 1

    def create(self, name: str, email: str) -> User:
        """Append a new user and return it."""
        user = User(id=self._next_id(), name=name, email=email)
        self._users.append(user)
        logger.info("Created user %s", user.id)
        return user

    def update(self, user_id: int, name: Optional[str] = None, email: Optional[str] = None) -> Optional[User]:
        """Overwrite the supplied fields of a user in place.

        Empty values leave the corresponding field untouched.  Returns
        the updated user, or ``None`` if no user has ``user_id``.
        """
        user = self.find_by_id(user_id)
        if user is None:
            return None
        if name:
            user.name = name
        if email:
            user.email = email
        logger.info("Updated user %s", user_id)
        return user

    def delete(self, user_id: int) -> Optional[User]:
        """Remove a user and return it, or ``None`` if it does not exist."""
        index = self.index_by_id(user_id)
        if index == -1:
            return None
        user = self._users.pop(index)
        logger.info("Deleted user %s", user_id)
        return user
