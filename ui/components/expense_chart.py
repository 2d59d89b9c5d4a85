import tkinter as tk

import customtkinter as ctk
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from utils.currency import format_currency

_MAX_LEGEND_ROWS = 8


class ExpenseChart(ctk.CTkFrame):
    """Doughnut of per-category totals, segments in first-appearance order."""

    def __init__(self, master, **kwargs):
        super().__init__(master, fg_color=("gray90", "gray20"), corner_radius=8, **kwargs)
        ctk.CTkLabel(
            self, text="Amount by Category",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))
        self._fig = Figure(figsize=(3, 3), dpi=80, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._canvas = FigureCanvasTkAgg(self._fig, master=self)
        self._canvas.get_tk_widget().pack(fill="both", expand=True, padx=8, pady=(4, 4))
        self._legend_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._legend_frame.pack(fill="x", padx=8, pady=(0, 8))

    def _style(self):
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#e4e4e4"
        self._fig.patch.set_facecolor(bg)
        self._ax.set_facecolor(bg)

    def draw(self, breakdown: list[dict]):
        ax = self._ax
        ax.clear()
        self._style()

        for w in self._legend_frame.winfo_children():
            w.destroy()

        total = sum(d["total"] for d in breakdown) if breakdown else 0
        if not breakdown or total == 0:
            ax.text(0.5, 0.5, "No data", ha="center", va="center",
                    transform=ax.transAxes, color="gray")
            ax.set_axis_off()
            self._canvas.draw_idle()
            return

        ax.pie(
            [float(d["total"]) for d in breakdown],
            colors=[d["color_hex"] for d in breakdown],
            startangle=90,
            counterclock=False,
            wedgeprops={"width": 0.4, "linewidth": 0},
        )
        ax.set_aspect("equal")
        self._canvas.draw_idle()

        for item in breakdown[:_MAX_LEGEND_ROWS]:
            row = ctk.CTkFrame(self._legend_frame, fg_color="transparent")
            row.pack(fill="x", pady=1)
            tk.Label(row, bg=item["color_hex"], width=2).pack(side="left", padx=(0, 4))
            ctk.CTkLabel(
                row, text=f"{item['category']}: {format_currency(item['total'])}",
                anchor="w", font=ctk.CTkFont(size=11),
            ).pack(side="left")
