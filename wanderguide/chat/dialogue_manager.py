# wanderguide/chat/dialogue_manager.py
import logging
import random
import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from wanderguide.graph.graph import build_graph, run_turn
from wanderguide.graph.responses import WELCOME_TEXT
from wanderguide.models import EMPTY_CONTEXT, Message, Role, TravelContext
from wanderguide.providers.base import TransitProvider

logger = logging.getLogger(__name__)

APOLOGY_TEXT = (
    "Sorry, something went wrong while planning that. "
    "Please tell me where you are and where you'd like to go."
)

# (delay_seconds, callback) -> handle with .cancel()
Scheduler = Callable[[float, Callable[[], None]], Any]


class EmptyMessageError(ValueError):
    pass


class ResponsePendingError(RuntimeError):
    pass


class DialogueState(str, Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


def timer_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


def welcome_message() -> Message:
    return Message(role=Role.BOT, text=WELCOME_TEXT)


class DialogueManager:
    """
    Single chat session: the message log, the travel context and the
    Idle/AwaitingResponse cycle around each turn.

    A submission is answered after a simulated typing delay. clear() cancels
    the pending answer; a generation counter drops a response that was
    already being computed when the clear happened.
    """

    def __init__(
        self,
        provider: Optional[TransitProvider] = None,
        min_delay_ms: int = 800,
        max_delay_ms: int = 1500,
        rng: Optional[random.Random] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        if min_delay_ms < 0 or min_delay_ms > max_delay_ms:
            raise ValueError(f"invalid delay bounds: {min_delay_ms}..{max_delay_ms} ms")

        self.graph = build_graph(provider)
        self.min_delay_ms = min_delay_ms
        self.max_delay_ms = max_delay_ms
        self.rng = rng or random.Random()
        self.schedule = scheduler or timer_scheduler

        self._lock = threading.Lock()
        self._messages: List[Message] = [welcome_message()]
        self._context: TravelContext = EMPTY_CONTEXT
        self._state = DialogueState.IDLE
        self._generation = 0
        self._pending_text: Optional[str] = None
        self._handle = None
        self._last_trace: List[dict] = []

    # ---------------------------
    # Accessors
    # ---------------------------
    @property
    def messages(self) -> List[Message]:
        with self._lock:
            return list(self._messages)

    @property
    def context(self) -> TravelContext:
        return self._context

    @property
    def state(self) -> DialogueState:
        return self._state

    @property
    def last_trace(self) -> List[dict]:
        """Pipeline trace of the most recently answered turn."""
        with self._lock:
            return list(self._last_trace)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "state": self._state.value,
                "context": self._context.to_dict(),
                "messages": [m.to_dict() for m in self._messages],
            }

    # ---------------------------
    # Transitions
    # ---------------------------
    def submit(self, text: str) -> Message:
        """
        Idle -> AwaitingResponse. Appends the user message and schedules the reply.
        """
        text = (text or "").strip()
        if not text:
            logger.warning("Rejected empty submission")
            raise EmptyMessageError("message is required")

        with self._lock:
            if self._state is DialogueState.AWAITING_RESPONSE:
                logger.warning("Rejected submission while a response is pending")
                raise ResponsePendingError("a response is already pending")

            msg = Message(role=Role.USER, text=text)
            self._messages.append(msg)
            self._state = DialogueState.AWAITING_RESPONSE
            self._pending_text = text

            generation = self._generation
            delay = self.rng.uniform(self.min_delay_ms, self.max_delay_ms) / 1000.0
            self._handle = self.schedule(delay, lambda: self._deliver(generation))

        logger.info("Accepted submission, replying in %.2fs", delay)
        return msg

    def respond_now(self) -> Optional[Message]:
        """Answer the pending submission immediately instead of waiting for the timer."""
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
            generation = self._generation
        return self._deliver(generation)

    def clear(self) -> None:
        with self._lock:
            self._generation += 1
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
            self._pending_text = None
            self._messages = [welcome_message()]
            self._context = EMPTY_CONTEXT
            self._state = DialogueState.IDLE
            self._last_trace = []
        logger.info("Conversation cleared")

    def _deliver(self, generation: int) -> Optional[Message]:
        """AwaitingResponse -> Idle."""
        with self._lock:
            if generation != self._generation or self._pending_text is None:
                logger.debug("Dropping stale response (generation %d)", generation)
                return None

            text = self._pending_text
            ctx = self._context
            try:
                out = run_turn(self.graph, text, ctx)
                reply = out["reply"]
                new_ctx = out.get("updated_context") or ctx
            except Exception:
                logger.exception("Turn pipeline failed for %r", text)
                out = {}
                reply = APOLOGY_TEXT
                new_ctx = ctx

            bot_msg = Message(role=Role.BOT, text=reply)
            self._messages.append(bot_msg)
            self._context = new_ctx
            self._state = DialogueState.IDLE
            self._pending_text = None
            self._handle = None
            self._last_trace = list(out.get("trace", []))

        return bot_msg
