import customtkinter as ctk

from models.transaction import Transaction
from utils.constants import EXPENSE_COLOR, INCOME_COLOR, OTHER_CATEGORY
from utils.currency import format_signed
from utils.date_helpers import format_display_date

_MAX_RENDERED_ROWS = 100


class TransactionList(ctk.CTkScrollableFrame):
    def __init__(self, master, on_edit, on_delete, date_format: str = "DD/MM/YYYY", **kwargs):
        super().__init__(master, **kwargs)
        self._on_edit = on_edit
        self._on_delete = on_delete
        self._date_format = date_format
        self.grid_columnconfigure(0, weight=1)

    def show(self, transactions: list[Transaction], editing_id: int | None = None):
        for w in self.winfo_children():
            w.destroy()

        if not transactions:
            ctk.CTkLabel(
                self, text="No transactions for this period.",
                text_color="gray60",
            ).grid(row=0, column=0, pady=20)
            return

        for idx, tx in enumerate(transactions[:_MAX_RENDERED_ROWS]):
            self._add_row(idx, tx, tx.id == editing_id)

        if len(transactions) > _MAX_RENDERED_ROWS:
            ctk.CTkLabel(
                self,
                text=f"Showing {_MAX_RENDERED_ROWS} of {len(transactions)} transactions.",
                text_color="gray60",
                font=ctk.CTkFont(size=11),
            ).grid(row=_MAX_RENDERED_ROWS, column=0, pady=8)

    def _add_row(self, idx: int, tx: Transaction, editing: bool):
        if editing:
            bg = ("#fde3c8", "#5a3a1a")
        else:
            bg = ("gray92", "gray17") if idx % 2 == 0 else ("gray88", "gray21")
        row = ctk.CTkFrame(self, fg_color=bg, corner_radius=4)
        row.grid(row=idx, column=0, sticky="ew", pady=1, padx=2)
        row.grid_columnconfigure(1, weight=1)

        # Sign stripe
        ctk.CTkFrame(
            row, width=4, corner_radius=0,
            fg_color=EXPENSE_COLOR if tx.is_expense else INCOME_COLOR,
        ).grid(row=0, column=0, rowspan=2, sticky="ns")

        ctk.CTkLabel(
            row, text=f"{tx.text}  ({tx.category or OTHER_CATEGORY})", anchor="w",
        ).grid(row=0, column=1, padx=8, pady=(4, 0), sticky="w")
        ctk.CTkLabel(
            row, text=format_display_date(tx.date, self._date_format),
            anchor="w", text_color="gray60", font=ctk.CTkFont(size=11),
        ).grid(row=1, column=1, padx=8, pady=(0, 4), sticky="w")

        ctk.CTkLabel(
            row, text=format_signed(tx.amount), width=100, anchor="e",
            text_color=EXPENSE_COLOR if tx.is_expense else INCOME_COLOR,
        ).grid(row=0, column=2, rowspan=2, padx=4)

        acts = ctk.CTkFrame(row, fg_color="transparent")
        acts.grid(row=0, column=3, rowspan=2, padx=(4, 6))
        ctk.CTkButton(
            acts, text="✎", width=32, height=24,
            command=lambda t=tx: self._on_edit(t.id),
        ).pack(side="left", padx=2)
        ctk.CTkButton(
            acts, text="x", width=32, height=24,
            fg_color="#F44336", hover_color="#D32F2F",
            command=lambda t=tx: self._on_delete(t.id),
        ).pack(side="left")
