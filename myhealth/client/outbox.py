"""
Ordered outbound queue for chat history writes.

Every message gets a per-session sequence number when it is queued. A flush
delivers each session's queue strictly in sequence order, one request at a
time, so the backend sees messages in the order they were created.

Failure policy:
- transport errors and 5xx responses are retried (tenacity); when retries
  run out the entry stays at the head of its queue and that session's flush
  stops, keeping later entries behind it
- 401/403 responses stop the flush without retrying; entries stay queued
  until the user signs in again
- any other 4xx is permanent: the entry moves to ``rejected`` and the flush
  carries on with the next one
"""

import logging
from collections import defaultdict, deque
from typing import Deque, Dict, List, Optional

import httpx
from pydantic import BaseModel
from tenacity import (
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from myhealth.client.api import ApiError, HealthChatAPI

logger = logging.getLogger(__name__)


class OutboxEntry(BaseModel):
    session_id: Optional[int] = None
    sequence: int
    role: str
    content: str
    attempts: int = 0
    last_error: Optional[str] = None


class FlushResult(BaseModel):
    delivered: int = 0
    pending: int = 0
    rejected: int = 0

    @property
    def ok(self) -> bool:
        return self.pending == 0 and self.rejected == 0


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, ApiError) and exc.is_transient


class HistoryOutbox:
    """Per-session FIFO of history writes waiting to reach the backend."""

    def __init__(self, api: HealthChatAPI, max_attempts: int = 3, wait=None):
        self.api = api
        self.max_attempts = max_attempts
        self.wait = wait or wait_exponential(multiplier=0.5, max=4)
        self._queues: Dict[Optional[int], Deque[OutboxEntry]] = defaultdict(deque)
        # outlives drained queues so sequence numbers never restart
        self._next_sequence: Dict[Optional[int], int] = defaultdict(int)
        self.rejected: List[OutboxEntry] = []

    def enqueue(self, session_id: Optional[int], role: str, content: str) -> OutboxEntry:
        """Queue a message; ``session_id`` None queues an orphaned entry."""
        self._next_sequence[session_id] += 1
        entry = OutboxEntry(
            session_id=session_id,
            sequence=self._next_sequence[session_id],
            role=role,
            content=content,
        )
        self._queues[session_id].append(entry)
        return entry

    def pending(self, session_id: Optional[int] = None) -> List[OutboxEntry]:
        """Entries not yet delivered for one session."""
        return list(self._queues.get(session_id, ()))

    def all_pending(self) -> List[OutboxEntry]:
        return [entry for queue in self._queues.values() for entry in queue]

    @property
    def queued_sessions(self) -> List[Optional[int]]:
        """Sessions with at least one undelivered entry."""
        return list(self._queues)

    @property
    def pending_count(self) -> int:
        return sum(len(queue) for queue in self._queues.values())

    def flush(self) -> FlushResult:
        """Try to deliver everything queued. Never raises for delivery failures."""
        result = FlushResult()
        for session_id in list(self._queues):
            queue = self._queues[session_id]
            self._flush_queue(queue, result)
            if not queue:
                del self._queues[session_id]
        return result

    def _flush_queue(self, queue: Deque[OutboxEntry], result: FlushResult) -> None:
        while queue:
            entry = queue[0]
            try:
                self._deliver(entry)
            except ApiError as e:
                entry.last_error = str(e)
                if e.is_transient or e.is_auth_error:
                    logger.warning(
                        f"History entry {entry.session_id}#{entry.sequence} held back: {e}"
                    )
                    break
                queue.popleft()
                self.rejected.append(entry)
                result.rejected += 1
                logger.error(
                    f"History entry {entry.session_id}#{entry.sequence} rejected: {e}"
                )
                continue
            except httpx.TransportError as e:
                entry.last_error = str(e)
                logger.warning(
                    f"History entry {entry.session_id}#{entry.sequence} held back: {e}"
                )
                break
            queue.popleft()
            result.delivered += 1
        result.pending += len(queue)

    def _deliver(self, entry: OutboxEntry) -> None:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self.wait,
            retry=retry_if_exception(_is_transient),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                entry.attempts += 1
                self.api.append_history(entry.role, entry.content, entry.session_id)

    def clear(self) -> int:
        """Drop every queued entry (sign-out). Returns how many were dropped."""
        dropped = self.pending_count
        self._queues.clear()
        return dropped
