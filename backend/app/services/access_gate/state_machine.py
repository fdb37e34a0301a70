"""
Access Gate State Machine

Email-capture flow in front of the fixes catalog.

States:
- LANDING: initial, nothing entered yet
- EMAIL_CHECK: visitor is entering an email; a live access watch runs on it
- UNLOCKED: visitor may use the catalog for the rest of the session

Entry into UNLOCKED happens either through a successful subscribe or through
the live watch reporting access for the entered email (returning visitor).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Any, Optional, Tuple
import logging

from ..access_store import AccessStatus
from .clients import AccessStoreClient, AccessWatch

logger = logging.getLogger(__name__)


WELCOME_MESSAGE = "Welcome! You now have access to all 101 fixes."
FAILURE_MESSAGE = "Something went wrong. Please try again."


class GateState(str, Enum):
    LANDING = "landing"
    EMAIL_CHECK = "email-check"
    UNLOCKED = "fixes"


class InvalidGateTransition(ValueError):
    """Raised when an action is not allowed from the current gate state."""


@dataclass(frozen=True)
class GateNotice:
    """Transient message for the visitor (toast)."""
    level: str  # "success" | "error"
    message: str


# =============================================================================
# STATE CONFIGURATION
# =============================================================================

GATE_CONFIG: Dict[GateState, Dict[str, Any]] = {
    GateState.LANDING: {
        "description": "Landing page, no email entered",
        "allowed_transitions": [GateState.EMAIL_CHECK],
        "watches_email": False,
    },
    GateState.EMAIL_CHECK: {
        "description": "Collecting email, live access check active",
        "allowed_transitions": [GateState.UNLOCKED, GateState.LANDING],
        "watches_email": True,
    },
    GateState.UNLOCKED: {
        "description": "Catalog unlocked for this session",
        "allowed_transitions": [GateState.LANDING],
        "watches_email": False,
    },
}


def _log_notice(notice: GateNotice) -> None:
    if notice.level == "error":
        logger.warning(f"Gate notice: {notice.message}")
    else:
        logger.info(f"Gate notice: {notice.message}")


# =============================================================================
# ACCESS GATE
# =============================================================================

class AccessGate:
    """
    Drives the subscribe / check protocol for one visitor session.

    Core Principles:
    - Store calls are the only suspension points
    - Only one subscribe may be outstanding at a time (busy)
    - Failures leave the gate where it was; retrying is re-submitting
    - Exactly one email is watched at a time, and only in EMAIL_CHECK
    """

    def __init__(
        self,
        client: AccessStoreClient,
        notify: Optional[Callable[[GateNotice], None]] = None,
    ):
        self.client = client
        self.notify = notify or _log_notice
        self.state = GateState.LANDING
        self.email = ""
        self.busy = False
        self._watch: Optional[AccessWatch] = None

    @property
    def is_unlocked(self) -> bool:
        return self.state == GateState.UNLOCKED

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def can_transition(self, to_state: GateState) -> Tuple[bool, str]:
        """
        Check if a transition from the current state is allowed.

        Returns (allowed, reason)
        """
        allowed = GATE_CONFIG[self.state]["allowed_transitions"]
        if to_state in allowed:
            return True, "Transition allowed"
        return False, f"Cannot transition from {self.state.value} to {to_state.value}"

    def _transition(self, to_state: GateState) -> None:
        allowed, reason = self.can_transition(to_state)
        if not allowed:
            raise InvalidGateTransition(reason)

        from_state = self.state
        if GATE_CONFIG[from_state]["watches_email"] and not GATE_CONFIG[to_state]["watches_email"]:
            self._stop_watch()

        self.state = to_state
        logger.info(f"Access gate: {from_state.value} -> {to_state.value}")

    def _stop_watch(self) -> None:
        if self._watch is not None:
            self._watch.cancel()
            self._watch = None

    # =========================================================================
    # VISITOR ACTIONS
    # =========================================================================

    def open_email_check(self) -> None:
        """Visitor clicked through to the email form."""
        self._transition(GateState.EMAIL_CHECK)

    async def set_email(self, email: str) -> None:
        """
        Update the entered email and re-point the live access check at it.

        A returning visitor whose email already has access is unlocked as
        soon as the watch reports it.
        """
        if self.state != GateState.EMAIL_CHECK:
            raise InvalidGateTransition(
                f"Email can only be entered in {GateState.EMAIL_CHECK.value}, not {self.state.value}"
            )

        self.email = email
        self._stop_watch()
        if not email:
            return

        watch = await self.client.watch(email, self._on_access_update)
        if self.state == GateState.EMAIL_CHECK and self.email == email:
            self._watch = watch
        else:
            # Unlocked by the snapshot, or the email changed while we waited
            watch.cancel()

    def _on_access_update(self, status: AccessStatus) -> None:
        if self.state != GateState.EMAIL_CHECK:
            return
        if status.email != self.email or not status.has_access:
            return
        logger.info(f"Access confirmed for returning visitor {status.email}")
        self._transition(GateState.UNLOCKED)

    async def submit(self) -> bool:
        """
        Subscribe the entered email.

        Returns True if the gate ended up UNLOCKED. Empty email, a submission
        already in flight, or a store failure return False.
        """
        if self.state != GateState.EMAIL_CHECK:
            raise InvalidGateTransition(
                f"Cannot submit from {self.state.value}"
            )
        if not self.email:
            return False
        if self.busy:
            logger.debug(f"Ignoring duplicate submit for {self.email}")
            return False

        email = self.email
        self.busy = True
        try:
            result = await self.client.subscribe(email)
        except Exception as e:
            logger.error(f"Email submission error for {email}: {e}")
            self.notify(GateNotice("error", FAILURE_MESSAGE))
            return False
        finally:
            self.busy = False

        if not result.has_access:
            return False

        # The watch may already have unlocked us while the call was in flight
        if self.state == GateState.EMAIL_CHECK:
            self._transition(GateState.UNLOCKED)
        if result.is_new:
            self.notify(GateNotice("success", WELCOME_MESSAGE))
        return self.state == GateState.UNLOCKED

    def navigate_home(self) -> None:
        """Back to the landing page. The entered email is discarded."""
        self._transition(GateState.LANDING)
        self._stop_watch()
        self.email = ""
