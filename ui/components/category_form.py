import customtkinter as ctk

from models.category import Category


class CategoryForm(ctk.CTkToplevel):
    """Add a category and list the user's own categories for deletion.

    Remote calls are made by the owner through on_add / on_delete; this
    dialog only collects input and shows the result.
    """

    TYPES = ["expense", "income"]

    def __init__(self, master, user_categories: list[Category], on_add, on_delete, **kwargs):
        super().__init__(master, **kwargs)
        self._on_add = on_add
        self._on_delete = on_delete

        self.title("New Category")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        r = 0

        # Name
        ctk.CTkLabel(self, text="Name:").grid(
            row=r, column=0, padx=(16, 8), pady=(16, 4), sticky="e"
        )
        self._name_var = ctk.StringVar()
        self._name_entry = ctk.CTkEntry(self, textvariable=self._name_var, width=220)
        self._name_entry.grid(row=r, column=1, padx=(0, 16), pady=(16, 4), sticky="ew")
        r += 1

        # Type
        ctk.CTkLabel(self, text="Type:").grid(
            row=r, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        self._type_var = ctk.StringVar(value="expense")
        type_frame = ctk.CTkFrame(self, fg_color="transparent")
        type_frame.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="w")
        for t in self.TYPES:
            ctk.CTkRadioButton(
                type_frame, text=t.title(), variable=self._type_var, value=t,
            ).pack(side="left", padx=4)
        r += 1

        # Error
        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=300, anchor="w",
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        # Buttons
        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 8), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        self._save_btn = ctk.CTkButton(btn_frame, text="Add", width=90, command=self._on_save)
        self._save_btn.pack(side="right")
        r += 1

        # User-defined categories
        self._user_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._user_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 16), sticky="ew")
        self.show_user_categories(user_categories)

        self.bind("<Return>", lambda _e: self._on_save())
        self.transient(master)
        self.grab_set()
        self._center()
        self._name_entry.focus()

    def show_user_categories(self, categories: list[Category]):
        for w in self._user_frame.winfo_children():
            w.destroy()
        if not categories:
            return
        ctk.CTkLabel(
            self._user_frame, text="Your categories",
            font=ctk.CTkFont(weight="bold"), anchor="w",
        ).pack(fill="x", pady=(4, 2))
        for cat in categories:
            row = ctk.CTkFrame(self._user_frame, fg_color="transparent")
            row.pack(fill="x", pady=1)
            ctk.CTkLabel(row, text="●", text_color=cat.color_hex, width=16).pack(side="left")
            ctk.CTkLabel(row, text=f"{cat.name} ({cat.type})", anchor="w").pack(side="left", padx=4)
            ctk.CTkButton(
                row, text="x", width=28, height=22,
                fg_color="#F44336", hover_color="#D32F2F",
                command=lambda c=cat: self._on_delete(c),
            ).pack(side="right")

    def show_error(self, message: str):
        self._error_var.set(message)
        self._save_btn.configure(state="normal")

    def _on_save(self):
        name = self._name_var.get().strip()
        if not name:
            self._error_var.set("Category name cannot be empty.")
            return
        self._error_var.set("")
        self._save_btn.configure(state="disabled")
        self._on_add(name, self._type_var.get())

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
