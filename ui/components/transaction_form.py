import customtkinter as ctk

from services.edit_session import FormValues
from utils.constants import SUBMIT_LABEL_CREATE

_CREATE_COLOR = ("#3B8ED0", "#1F6AA5")
_EDIT_COLOR = "#e67e22"


class TransactionForm(ctk.CTkFrame):
    """Add / edit form embedded in the main window.

    Holds no state of its own beyond the widget values; the caller decides
    whether a submit creates or updates and relabels the button accordingly.
    """

    def __init__(self, master, on_submit, on_manage_categories, on_cancel_edit, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=8, **kwargs)
        self._on_submit = on_submit
        self._on_cancel_edit = on_cancel_edit
        self.grid_columnconfigure(1, weight=1)

        self._title = ctk.CTkLabel(
            self, text="Add new transaction",
            font=ctk.CTkFont(size=14, weight="bold"), anchor="w",
        )
        self._title.grid(row=0, column=0, columnspan=2, padx=16, pady=(12, 6), sticky="ew")

        r = 1
        self._label("Text:", r)
        self._text_var = ctk.StringVar()
        ctk.CTkEntry(self, textvariable=self._text_var, placeholder_text="Enter text...").grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._label("Amount:", r)
        self._amount_var = ctk.StringVar()
        ctk.CTkEntry(self, textvariable=self._amount_var, placeholder_text="Enter amount...").grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._label("Category:", r)
        cat_row = ctk.CTkFrame(self, fg_color="transparent")
        cat_row.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        cat_row.grid_columnconfigure(0, weight=1)
        self._cat_var = ctk.StringVar()
        self._cat_combo = ctk.CTkComboBox(
            cat_row, values=[], variable=self._cat_var, state="readonly"
        )
        self._cat_combo.grid(row=0, column=0, sticky="ew")
        ctk.CTkButton(
            cat_row, text="+", width=32,
            command=on_manage_categories,
        ).grid(row=0, column=1, padx=(6, 0))
        r += 1

        self._label("Date:", r)
        self._date_var = ctk.StringVar()
        ctk.CTkEntry(self, textvariable=self._date_var, placeholder_text="YYYY-MM-DD").grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=280, anchor="w",
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        btn_frame.grid_columnconfigure(0, weight=1)
        self._submit_btn = ctk.CTkButton(
            btn_frame, text=SUBMIT_LABEL_CREATE, command=self._submit
        )
        self._submit_btn.grid(row=0, column=0, sticky="ew")
        self._cancel_btn = ctk.CTkButton(
            btn_frame, text="Cancel", width=80,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._on_cancel_edit,
        )

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=4, sticky="e"
        )

    # ── Public API ───────────────────────────────────────────────────────────

    def set_categories(self, names: list[str], selected: str | None):
        self._cat_combo.configure(values=names)
        self._cat_var.set(selected or "")

    def selected_category(self) -> str:
        return self._cat_var.get()

    def fill(self, values: FormValues):
        self._text_var.set(values.text)
        self._amount_var.set(values.magnitude)
        self._date_var.set(values.date)
        if values.category is not None:
            self._cat_var.set(values.category)
        self.clear_error()

    def set_mode(self, label: str, editing: bool):
        self._submit_btn.configure(
            text=label, fg_color=_EDIT_COLOR if editing else _CREATE_COLOR
        )
        self._title.configure(text="Edit transaction" if editing else "Add new transaction")
        if editing:
            self._cancel_btn.grid(row=0, column=1, padx=(8, 0))
        else:
            self._cancel_btn.grid_forget()

    def set_busy(self, busy: bool):
        self._submit_btn.configure(state="disabled" if busy else "normal")

    def show_error(self, message: str):
        self._error_var.set(message)

    def clear_error(self):
        self._error_var.set("")

    def _submit(self):
        self.clear_error()
        self._on_submit(
            self._text_var.get(),
            self._amount_var.get(),
            self._cat_var.get(),
            self._date_var.get(),
        )
