"""
In-memory session store for uploaded gene lists.

Uploads are kept under a random token until they expire; queries look
them up by that token.
"""

import logging
import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from geneannot.core.errors import SessionNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class _Session:
    genes: List[str]
    created_at: float
    expires_at: Optional[float] = None


@dataclass
class SessionStore:
    """
    Thread-safe, in-memory map from session token to uploaded gene list.

    Sessions expire ``ttl_seconds`` after creation; a ttl of 0 keeps them for
    the life of the process. Expired sessions are dropped lazily whenever the
    store is touched.
    """

    ttl_seconds: int = 3600
    clock: Callable[[], float] = time.monotonic
    _sessions: Dict[str, _Session] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def _purge_expired(self, now: float) -> None:
        expired = [
            token
            for token, session in self._sessions.items()
            if session.expires_at is not None and session.expires_at <= now
        ]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.info(f"Expired {len(expired)} session(s)")

    def create(self, genes: List[str]) -> str:
        """Store a gene list and return the token that retrieves it."""
        token = uuid.uuid4().hex
        now = self.clock()
        expires_at = now + self.ttl_seconds if self.ttl_seconds else None
        with self._lock:
            self._purge_expired(now)
            self._sessions[token] = _Session(genes=list(genes), created_at=now, expires_at=expires_at)
        logger.info(f"Created session {token[:8]} with {len(genes)} gene(s)")
        return token

    def get(self, token: Optional[str]) -> List[str]:
        """
        Return a copy of the gene list stored under ``token``.

        Raises:
            SessionNotFoundError: If no token is given, or it is unknown or expired.
        """
        if not token:
            raise SessionNotFoundError("No session token supplied")
        with self._lock:
            self._purge_expired(self.clock())
            session = self._sessions.get(token)
            if session is None:
                raise SessionNotFoundError("Unknown or expired session")
            return list(session.genes)

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired(self.clock())
            return len(self._sessions)
