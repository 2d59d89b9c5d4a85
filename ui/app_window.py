import logging
import threading
import webbrowser
from tkinter import filedialog

import customtkinter as ctk

from api.api_client import ApiClient
from models.category import Category
from models.user import User
from services.edit_session import FormValues
from services.tracker_service import SubmitResult, TrackerService
from ui.components.alert_banner import AlertBanner
from ui.components.category_form import CategoryForm
from ui.components.confirm_dialog import ConfirmDialog
from ui.components.expense_chart import ExpenseChart
from ui.components.transaction_form import TransactionForm
from ui.components.transaction_list import TransactionList
from utils import app_config
from utils.constants import APP_HEIGHT, APP_NAME, APP_WIDTH, EXPENSE_COLOR, INCOME_COLOR
from utils.currency import format_currency
from utils.date_helpers import friendly_month
from utils.errors import TrackerError, ValidationError

logger = logging.getLogger(__name__)


class AppWindow(ctk.CTk):
    """Main window. Every remote call runs on a worker thread and its result is
    handed back to the Tk loop with after(0, ...); state is only rendered there.
    """

    def __init__(
        self,
        tracker: TrackerService,
        api_client: ApiClient,
        date_format: str = "DD/MM/YYYY",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._tracker = tracker
        self._client = api_client
        self._date_format = date_format
        self._category_dialog: CategoryForm | None = None

        self.title(APP_NAME)
        self.minsize(900, 600)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_top_bar()
        self._build_banner_area()
        self._build_body()
        self._build_login_panel()

        self.after(100, self._start)

    # ── Layout ───────────────────────────────────────────────────────────────

    def _build_top_bar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0, height=44)
        bar.grid(row=0, column=0, sticky="ew")

        ctk.CTkLabel(
            bar, text=APP_NAME, font=ctk.CTkFont(size=16, weight="bold"),
        ).pack(side="left", padx=(12, 16), pady=8)

        self._month_controls = ctk.CTkFrame(bar, fg_color="transparent")
        self._month_controls.pack(side="left")
        ctk.CTkButton(self._month_controls, text="◀", width=28, command=self._prev_month).pack(side="left")
        self._month_label = ctk.CTkLabel(self._month_controls, text="", width=120, anchor="center")
        self._month_label.pack(side="left", padx=4)
        ctk.CTkButton(self._month_controls, text="▶", width=28, command=self._next_month).pack(side="left")

        self._user_label = ctk.CTkLabel(bar, text="", anchor="e")
        ctk.CTkButton(
            bar, text="Sign out", width=80,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._sign_out,
        ).pack(side="right", padx=(4, 12))
        self._user_label.pack(side="right", padx=8)
        ctk.CTkButton(
            bar, text="Clear All", width=80,
            fg_color="#F44336", hover_color="#D32F2F",
            command=self._clear_all,
        ).pack(side="right", padx=4)
        ctk.CTkButton(bar, text="Export", width=80, command=self._export).pack(side="right", padx=4)
        self._chart_btn = ctk.CTkButton(
            bar, text="Hide Chart", width=90, command=self._toggle_chart,
        )
        self._chart_btn.pack(side="right", padx=4)

    def _build_banner_area(self):
        self._banner_area = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_area.grid(row=1, column=0, sticky="ew", padx=8)
        self._banner_area.grid_columnconfigure(0, weight=1)

    def _build_body(self):
        body = ctk.CTkFrame(self, fg_color="transparent")
        body.grid(row=2, column=0, sticky="nsew", padx=8, pady=8)
        body.grid_columnconfigure(0, weight=3)
        body.grid_columnconfigure(1, weight=2)
        body.grid_rowconfigure(1, weight=1)
        self._body = body

        summary = ctk.CTkFrame(body, fg_color="transparent")
        summary.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        summary.grid_columnconfigure((0, 1, 2), weight=1)
        self._summary_labels = {}
        for i, (key, label, color) in enumerate([
            ("balance", "Your Balance", None),
            ("income", "Income", INCOME_COLOR),
            ("expense", "Expense", EXPENSE_COLOR),
        ]):
            card = ctk.CTkFrame(summary, fg_color=("gray90", "gray20"), corner_radius=10)
            card.grid(row=0, column=i, padx=4, sticky="ew")
            ctk.CTkLabel(card, text=label, text_color="gray60").pack(pady=(10, 0), padx=16)
            value = ctk.CTkLabel(card, text="", font=ctk.CTkFont(size=18, weight="bold"))
            if color:
                value.configure(text_color=color)
            value.pack(pady=(4, 10), padx=16)
            self._summary_labels[key] = value

        self._list = TransactionList(
            body, on_edit=self._begin_edit, on_delete=self._delete,
            date_format=self._date_format,
        )
        self._list.grid(row=1, column=0, sticky="nsew", padx=(0, 8), pady=(8, 0))

        side = ctk.CTkFrame(body, fg_color="transparent")
        side.grid(row=0, column=1, rowspan=2, sticky="nsew")
        side.grid_columnconfigure(0, weight=1)
        side.grid_rowconfigure(1, weight=1)

        self._form = TransactionForm(
            side,
            on_submit=self._submit,
            on_manage_categories=self._open_categories,
            on_cancel_edit=self._cancel_edit,
        )
        self._form.grid(row=0, column=0, sticky="ew")
        self._form.fill(FormValues.blank())

        self._chart = ExpenseChart(side)
        self._chart.grid(row=1, column=0, sticky="nsew", pady=(8, 0))

    def _build_login_panel(self):
        panel = ctk.CTkFrame(self, fg_color=("gray90", "gray20"), corner_radius=10)
        self._login_panel = panel
        ctk.CTkLabel(
            panel, text="Sign in to continue",
            font=ctk.CTkFont(size=18, weight="bold"),
        ).pack(padx=32, pady=(24, 8))
        ctk.CTkLabel(
            panel,
            text="Sign in with Google in your browser, then paste the value of the\n"
                 "'connect.sid' cookie below.",
            justify="center",
        ).pack(padx=32, pady=4)
        ctk.CTkButton(panel, text="Sign in with Google", command=self._open_login).pack(pady=8)
        self._cookie_var = ctk.StringVar()
        ctk.CTkEntry(panel, textvariable=self._cookie_var, width=360, show="•").pack(padx=32, pady=4)
        ctk.CTkButton(panel, text="Continue", command=self._save_cookie).pack(pady=(8, 24))

    # ── Worker plumbing ──────────────────────────────────────────────────────

    def _run(self, work, on_done=None, on_error=None):
        """Run work() off the Tk thread; deliver the result or error back on it."""
        def task():
            try:
                result = work()
            except TrackerError as e:
                self.after(0, lambda err=e: (on_error or self._show_error)(err))
                return
            except Exception as e:
                logger.exception("Unexpected error in background task")
                self.after(0, lambda err=e: (on_error or self._show_error)(err))
                return
            if on_done:
                self.after(0, lambda: on_done(result))

        threading.Thread(target=task, daemon=True).start()

    def _show_banner(self, message: str, severity: str = "info"):
        for w in self._banner_area.winfo_children():
            w.destroy()
        AlertBanner(self._banner_area, message, severity=severity).grid(
            row=0, column=0, sticky="ew", pady=(6, 0)
        )

    def _show_error(self, error: Exception):
        if isinstance(error, ValidationError):
            self._show_banner(str(error), "warning")
        else:
            self._show_banner(str(error) or "Something went wrong.", "error")

    # ── Startup / auth ───────────────────────────────────────────────────────

    def _start(self):
        self._run(self._tracker.start, on_done=self._on_started)

    def _on_started(self, user: User | None):
        if user is None:
            self._body.grid_remove()
            self._login_panel.grid(row=2, column=0)
            self._user_label.configure(text="")
            return
        self._login_panel.grid_remove()
        self._body.grid()
        self._user_label.configure(text=user.label)
        if self._tracker.categories.using_defaults:
            self._show_banner("Could not load categories; using the built-in set.", "warning")
        self._refresh_categories()
        self._render()

    def _open_login(self):
        webbrowser.open(self._tracker.login_url())

    def _save_cookie(self):
        value = self._cookie_var.get().strip()
        if not value:
            return
        app_config.set_session_cookie(value)
        self._client.set_session_cookie(value)
        self._cookie_var.set("")
        self._start()

    def _sign_out(self):
        def forget(_result=None):
            app_config.set_session_cookie(None)
            self._client.set_session_cookie(None)
            self._on_started(None)

        def failed(err):
            self._show_error(err)
            forget()

        self._run(self._tracker.sign_out, on_done=forget, on_error=failed)

    # ── Rendering ────────────────────────────────────────────────────────────

    def _render(self):
        view = self._tracker.render()
        self._month_label.configure(text=friendly_month(view.period))
        self._summary_labels["balance"].configure(text=format_currency(view.balance))
        self._summary_labels["income"].configure(text=f"+{format_currency(view.income)}")
        self._summary_labels["expense"].configure(text=f"-{format_currency(view.expense)}")
        session = self._tracker.edit_session
        self._list.show(view.transactions, session.target_id if session.is_editing else None)
        self._chart.draw(view.breakdown)
        self._form.set_mode(session.submit_label, session.is_editing)

    def _refresh_categories(self, select: str | None = None):
        registry = self._tracker.categories
        selected = select or registry.resolve_selection(self._form.selected_category())
        self._form.set_categories(registry.names(), selected)

    def _toggle_chart(self):
        if self._tracker.toggle_chart():
            self._chart.grid()
            self._chart_btn.configure(text="Hide Chart")
        else:
            self._chart.grid_remove()
            self._chart_btn.configure(text="Show Chart")

    def _prev_month(self):
        self._tracker.prev_period()
        self._render()

    def _next_month(self):
        self._tracker.next_period()
        self._render()

    # ── Form ─────────────────────────────────────────────────────────────────

    def _submit(self, text: str, magnitude: str, category: str, date: str):
        self._form.set_busy(True)

        def done(result: SubmitResult):
            self._form.set_busy(False)
            self._form.fill(FormValues.blank())
            self._render()
            if result.notice:
                self._show_banner(result.notice)

        def failed(err):
            self._form.set_busy(False)
            if isinstance(err, ValidationError):
                self._form.show_error(str(err))
            else:
                self._show_error(err)

        self._run(
            lambda: self._tracker.submit(text, magnitude, category, date),
            on_done=done, on_error=failed,
        )

    def _begin_edit(self, tx_id: int):
        values = self._tracker.begin_edit(tx_id)
        if values is None:
            return
        self._form.fill(values)
        self._render()

    def _cancel_edit(self):
        self._form.fill(self._tracker.cancel_edit())
        self._render()

    # ── Destructive actions ──────────────────────────────────────────────────

    def _confirm_then_run(self, token, on_done, parent=None):
        dlg = ConfirmDialog(parent or self, token)
        if not dlg.result:
            self._tracker.cancel(token)
            return
        self._run(lambda: self._tracker.confirm(token), on_done=on_done)

    def _after_mutation(self, _result=None):
        if not self._tracker.edit_session.is_editing:
            self._form.fill(FormValues.blank())
        self._render()

    def _delete(self, tx_id: int):
        self._confirm_then_run(self._tracker.request_delete(tx_id), self._after_mutation)

    def _clear_all(self):
        if not len(self._tracker.store):
            self._show_banner("There are no transactions to clear.", "warning")
            return
        self._confirm_then_run(self._tracker.request_clear_all(), self._after_mutation)

    # ── Categories ───────────────────────────────────────────────────────────

    def _open_categories(self):
        if self._category_dialog is not None and self._category_dialog.winfo_exists():
            self._category_dialog.focus()
            return
        self._category_dialog = CategoryForm(
            self,
            self._tracker.categories.user_categories(),
            on_add=self._add_category,
            on_delete=self._remove_category,
        )

    def _add_category(self, name: str, type_: str):
        dialog = self._category_dialog

        def done(category: Category):
            self._refresh_categories(select=category.name)
            if dialog is not None and dialog.winfo_exists():
                dialog.destroy()

        def failed(err):
            if dialog is not None and dialog.winfo_exists():
                dialog.show_error(str(err))
            else:
                self._show_error(err)

        self._run(lambda: self._tracker.add_category(name, type_), on_done=done, on_error=failed)

    def _remove_category(self, category: Category):
        dialog = self._category_dialog

        def done(_removed):
            self._refresh_categories()
            if dialog is not None and dialog.winfo_exists():
                dialog.show_user_categories(self._tracker.categories.user_categories())
            self._render()

        self._confirm_then_run(
            self._tracker.request_remove_category(category.id), done, parent=dialog
        )

    # ── Export ───────────────────────────────────────────────────────────────

    def _export(self):
        if self._tracker.render().is_empty:
            self._show_banner("No transactions to export for this month.", "warning")
            return
        path = filedialog.asksaveasfilename(
            defaultextension=".xlsx",
            filetypes=[("Excel workbook", "*.xlsx"), ("CSV files", "*.csv")],
            initialfile=self._tracker.default_export_name(),
        )
        if not path:
            return
        try:
            written = self._tracker.export(path)
        except (TrackerError, OSError) as e:
            self._show_error(e)
            return
        self._show_banner(f"Exported to {written}")
