"""Detail pane for the selected note."""

import tkinter as tk
from tkinter import ttk

from gui.utils.formatting import detail_text
from gui.views.base import BaseView


class ItemDetailView(BaseView):
    name = "detail"

    def _build(self):
        toolbar = ttk.Frame(self, style="Main.TFrame")
        toolbar.pack(fill=tk.X, pady=(0, 12))
        ttk.Label(toolbar, text="Note", style="Header.TLabel").pack(side=tk.LEFT)
        self.delete_btn = ttk.Button(toolbar, text="🗑 Delete",
                                     command=lambda: self.call("delete_selected"))
        self.delete_btn.pack(side=tk.RIGHT)

        self.text_var = tk.StringVar(value="Select an item")
        ttk.Label(self, textvariable=self.text_var, style="Detail.TLabel").pack(anchor="nw")

    def render(self):
        controller = self.presenter.controller
        item = controller.selected_item
        if item is None:
            self.text_var.set("Select an item")
        else:
            self.text_var.set(detail_text(item.timestamp))
        self.delete_btn.state(["!disabled"] if controller.can_delete_selected else ["disabled"])
