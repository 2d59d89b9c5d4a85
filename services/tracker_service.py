import logging
from dataclasses import dataclass
from pathlib import Path

from api.user_api import UserAPI
from models.category import Category
from models.transaction import Transaction
from models.user import User
from models.view_state import ViewState
from services.category_service import CategoryRegistry
from services.confirmation import ConfirmationGate, PendingConfirmation
from services.edit_session import CREATE, EDIT, EditSession, FormValues
from services.export_service import ExportService
from services.report_service import ReportService, select_period
from services.transaction_service import TransactionStore
from utils.constants import OUT_OF_PERIOD_NOTICE
from utils.date_helpers import current_month_str, month_of, next_month, parse_month, prev_month
from utils.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class SubmitResult:
    transaction: Transaction
    mode: str               # 'create' | 'edit'
    visible: bool           # falls inside the selected period
    notice: str = ""


class TrackerService:
    """Owns the selected period, the edit session and the confirmation gate.

    The window talks only to this object; every user action maps to one
    method here, and render() derives a fresh ViewState afterwards.
    """

    def __init__(
        self,
        user_api: UserAPI,
        category_registry: CategoryRegistry,
        transaction_store: TransactionStore,
        report_service: ReportService,
        export_service: ExportService,
    ):
        self._user_api = user_api
        self.categories = category_registry
        self.store = transaction_store
        self._reports = report_service
        self._export = export_service
        self.edit_session = EditSession()
        self.confirmations = ConfirmationGate()
        self.user: User | None = None
        self.period = current_month_str()
        self.chart_visible = True

    # ── Startup ──────────────────────────────────────────────────────────────

    def start(self) -> User | None:
        """Load categories, then transactions. Returns None when signed out."""
        self.user = self._user_api.get_current()
        if self.user is None:
            logger.info("Not signed in; nothing loaded")
            return None
        logger.info("Signed in as %s", self.user.label)
        self.categories.load()
        self.store.load_all()
        return self.user

    def login_url(self) -> str:
        return self._user_api.login_url()

    def sign_out(self):
        self._user_api.logout()
        self.user = None

    # ── Period ───────────────────────────────────────────────────────────────

    def select_period(self, period: str) -> str:
        if parse_month(period) is None:
            raise ValidationError(f"Invalid month: {period}")
        if period > current_month_str():
            raise ValidationError("Cannot select a future month.")
        self.period = period
        return self.period

    def prev_period(self) -> str:
        return self.select_period(prev_month(self.period))

    def next_period(self) -> str:
        """Steps forward one month, stopping at the current month."""
        candidate = next_month(self.period)
        if candidate > current_month_str():
            return self.period
        return self.select_period(candidate)

    def toggle_chart(self) -> bool:
        self.chart_visible = not self.chart_visible
        return self.chart_visible

    def visible_transactions(self) -> list[Transaction]:
        return select_period(self.store.transactions, self.period)

    def render(self) -> ViewState:
        visible = self.visible_transactions()
        summary = self._reports.get_summary(visible)
        return ViewState(
            period=self.period,
            transactions=visible,
            balance=summary["balance"],
            income=summary["income"],
            expense=summary["expense"],
            breakdown=self._reports.get_category_breakdown(visible),
        )

    # ── Form ─────────────────────────────────────────────────────────────────

    def begin_edit(self, tx_id: int) -> FormValues | None:
        tx = self.store.get(tx_id)
        if tx is None:
            return None
        return self.edit_session.begin(tx)

    def cancel_edit(self) -> FormValues:
        return self.edit_session.reset()

    def submit(self, text: str, magnitude, category_name: str, date: str) -> SubmitResult:
        """Create or update depending on the edit session; resets it on success."""
        if self.edit_session.is_editing:
            tx = self.store.update(
                self.edit_session.target_id, text, magnitude, category_name, date
            )
            self.edit_session.reset()
            return SubmitResult(tx, EDIT, month_of(tx.date) == self.period)

        tx = self.store.create(text, magnitude, category_name, date)
        visible = month_of(tx.date) == self.period
        return SubmitResult(tx, CREATE, visible, "" if visible else OUT_OF_PERIOD_NOTICE)

    # ── Categories ───────────────────────────────────────────────────────────

    def add_category(self, name: str, type_: str) -> Category:
        return self.categories.add(name, type_)

    def request_remove_category(self, category_id: int) -> PendingConfirmation:
        category = next((c for c in self.categories.categories if c.id == category_id), None)
        name = category.name if category else str(category_id)
        return self.confirmations.request(
            "Delete Category?",
            f'Are you sure you want to delete "{name}"? Transactions using this '
            "category will remain, but the category label will be unstyled.",
            lambda: self.categories.remove(category_id),
        )

    # ── Destructive transaction actions ──────────────────────────────────────

    def request_delete(self, tx_id: int) -> PendingConfirmation:
        return self.confirmations.request(
            "Delete Transaction?",
            "This will permanently remove this transaction.",
            lambda: self._delete(tx_id),
        )

    def request_clear_all(self) -> PendingConfirmation:
        return self.confirmations.request(
            "Clear All History?",
            "Are you sure? This will delete ALL transactions.",
            self._clear_all,
        )

    def confirm(self, token: PendingConfirmation):
        return self.confirmations.confirm(token)

    def cancel(self, token: PendingConfirmation) -> bool:
        return self.confirmations.cancel(token)

    def _delete(self, tx_id: int):
        self.store.delete(tx_id)
        if self.edit_session.targets(tx_id):
            self.edit_session.reset()

    def _clear_all(self):
        self.store.clear_all()
        self.edit_session.reset()

    # ── Export ───────────────────────────────────────────────────────────────

    def default_export_name(self) -> str:
        return self._export.default_filename(self.period)

    def export(self, path: str | Path) -> Path:
        return self._export.export(path, self.visible_transactions())
