"""
Per-user conversation sessions.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from orderbot.core.conversation.states import ConversationState, Idle, Stage

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """In-progress conversation of a single user."""
    user_id: int
    state: ConversationState = field(default_factory=Idle)
    updated_at: float = 0.0

    @property
    def stage(self) -> Stage:
        return self.state.stage

    @property
    def product(self) -> Optional[str]:
        return getattr(self.state, "product", None)

    @property
    def quantity(self) -> Optional[int]:
        return getattr(self.state, "quantity", None)

    @property
    def address(self) -> Optional[str]:
        return getattr(self.state, "address", None)


class SessionStore:
    """
    Holds one session per user.

    Callers serialize work on a user's session with lock(user_id); locks
    are per user, so unrelated conversations never wait on each other.
    Sessions live in memory only. With idle_timeout set, users silent for
    longer than the timeout are forgotten, together with their locks.
    """

    def __init__(
        self,
        idle_timeout: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._sessions: dict[int, Session] = {}
        self._locks: dict[int, asyncio.Lock] = {}
        self._last_sweep = clock()

    def lock(self, user_id: int) -> asyncio.Lock:
        """Get the lock guarding a user's session."""
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        return lock

    def get(self, user_id: int) -> Optional[Session]:
        return self._sessions.get(user_id)

    def get_or_create(self, user_id: int) -> Session:
        """Get the user's session, starting a new one on first contact."""
        self._sweep_if_due()
        session = self._sessions.get(user_id)
        if session is None:
            session = self._sessions[user_id] = Session(user_id=user_id, updated_at=self._clock())
            logger.debug(f"New session for user {user_id}")
        elif self._is_expired(session):
            logger.info(
                f"Session of user {user_id} stalled in {session.stage.value}, restarting"
            )
            session.state = Idle()
            session.updated_at = self._clock()
        return session

    def update(self, user_id: int, state: ConversationState) -> Session:
        """Move the user's session to a new state."""
        session = self.get_or_create(user_id)
        session.state = state
        session.updated_at = self._clock()
        return session

    def reset(self, user_id: int) -> Session:
        """Return the user's session to the main menu, dropping collected answers."""
        return self.update(user_id, Idle())

    def evict_idle(self) -> int:
        """Forget sessions untouched for longer than idle_timeout. Returns how many."""
        if self.idle_timeout is None:
            return 0

        now = self._clock()
        self._last_sweep = now
        stale = [
            user_id
            for user_id, session in self._sessions.items()
            if now - session.updated_at > self.idle_timeout
            and not (user_id in self._locks and self._locks[user_id].locked())
        ]
        for user_id in stale:
            del self._sessions[user_id]
            self._locks.pop(user_id, None)

        if stale:
            logger.debug(f"Evicted {len(stale)} idle sessions")
        return len(stale)

    def _sweep_if_due(self) -> None:
        if self.idle_timeout is not None and self._clock() - self._last_sweep > self.idle_timeout:
            self.evict_idle()

    def _is_expired(self, session: Session) -> bool:
        if self.idle_timeout is None or session.stage is Stage.IDLE:
            return False
        return self._clock() - session.updated_at > self.idle_timeout

    def __contains__(self, user_id: int) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
