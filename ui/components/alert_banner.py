import customtkinter as ctk

from utils.constants import SEVERITY_COLORS


class AlertBanner(ctk.CTkFrame):
    """A dismissible colored banner for errors and notices; info banners fade out."""

    AUTO_DISMISS_MS = 5000

    def __init__(self, master, message: str, severity: str = "info", **kwargs):
        color = SEVERITY_COLORS.get(severity, SEVERITY_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=message, text_color="white",
            anchor="w", padx=10, pady=6, wraplength=700, justify="left",
        ).grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="✕", width=28, height=24,
            fg_color="transparent",
            hover_color=color,
            text_color="white",
            command=self.destroy,
        ).grid(row=0, column=1, padx=(0, 4))

        if severity == "info":
            self.after(self.AUTO_DISMISS_MS, self._expire)

    def _expire(self):
        if self.winfo_exists():
            self.destroy()
