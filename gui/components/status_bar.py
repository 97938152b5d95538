import tkinter as tk
from tkinter import ttk

from gui.state import AppState


class StatusBar(ttk.Frame):
    """
    Status bar showing the last action and how many notes are stored.
    """

    def __init__(self, parent, state: AppState):
        super().__init__(parent, style="Panel.TFrame", padding=(6, 3))
        self.app_state = state

        # Status message (left side)
        self.message_var = tk.StringVar(value=state.status_message)
        ttk.Label(self, textvariable=self.message_var, style="Muted.TLabel").pack(side=tk.LEFT)

        # Note count (right side)
        self.count_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.count_var, style="Muted.TLabel").pack(side=tk.RIGHT)

    def update_status(self):
        """Refresh status bar from state."""
        self.message_var.set(self.app_state.status_message)
        count = self.app_state.item_count
        self.count_var.set(f"{count} note" if count == 1 else f"{count} notes")
