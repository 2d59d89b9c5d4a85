import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from utils.errors import ValidationError

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


@dataclass
class PendingConfirmation:
    title: str
    message: str
    id: int = field(default_factory=lambda: next(_ids))


class ConfirmationGate:
    """Two-phase gate in front of destructive actions.

    request() parks an action and hands back a token; nothing runs until
    confirm(token). Like a modal dialog, only one request is open at a time:
    a new request supersedes the previous token.
    """

    def __init__(self):
        self._pending: PendingConfirmation | None = None
        self._action: Callable[[], Any] | None = None

    @property
    def pending(self) -> PendingConfirmation | None:
        return self._pending

    def request(self, title: str, message: str, action: Callable[[], Any]) -> PendingConfirmation:
        if self._pending is not None:
            logger.debug("Confirmation %s superseded", self._pending.id)
        token = PendingConfirmation(title=title, message=message)
        self._pending = token
        self._action = action
        logger.debug("Confirmation %s requested: %s", token.id, title)
        return token

    def confirm(self, token: PendingConfirmation):
        """Run the parked action. The token is spent even if the action fails."""
        action = self._take(token)
        return action()

    def cancel(self, token: PendingConfirmation) -> bool:
        if not self._is_current(token):
            return False
        self._pending = None
        self._action = None
        logger.debug("Confirmation %s cancelled", token.id)
        return True

    def _is_current(self, token: PendingConfirmation) -> bool:
        return self._pending is not None and token is not None and token.id == self._pending.id

    def _take(self, token: PendingConfirmation) -> Callable[[], Any]:
        if not self._is_current(token):
            raise ValidationError("This action is no longer awaiting confirmation.")
        action = self._action
        self._pending = None
        self._action = None
        return action
