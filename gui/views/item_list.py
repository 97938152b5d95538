"""Sidebar listing every note by creation time."""

import tkinter as tk
from tkinter import ttk

from gui.utils.formatting import format_timestamp
from gui.views.base import BaseView


class ItemListView(BaseView):
    name = "items"

    def _build(self):
        header = ttk.Frame(self, style="Main.TFrame")
        header.pack(fill=tk.X, pady=(0, 6))
        ttk.Label(header, text="Notes", style="Header.TLabel").pack(side=tk.LEFT)
        ttk.Button(header, text="＋ Add Item", style="Accent.TButton",
                   command=lambda: self.call("add_item")).pack(side=tk.RIGHT)

        tree_frame = ttk.Frame(self, style="Main.TFrame")
        tree_frame.pack(fill=tk.BOTH, expand=True)
        self.tree = ttk.Treeview(tree_frame, columns=("timestamp",), show="headings",
                                 selectmode="extended")
        self.tree.heading("timestamp", text="Created")
        self.tree.column("timestamp", width=180, anchor="w")
        scroll = ttk.Scrollbar(tree_frame, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=scroll.set)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scroll.pack(side=tk.RIGHT, fill=tk.Y)

        self.tree.bind("<<TreeviewSelect>>", self._on_select)
        self.tree.bind("<Delete>", self._on_delete_key)
        self.tree.bind("<BackSpace>", self._on_delete_key)

        ttk.Label(self, text="Select rows and press Delete to remove them",
                  style="Muted.TLabel").pack(anchor="w", pady=(4, 0))

    def render(self):
        controller = self.presenter.controller
        self.tree.delete(*self.tree.get_children())
        for item in controller.items:
            self.tree.insert("", tk.END, iid=str(item.id), values=(format_timestamp(item.timestamp),))
        if controller.selection is not None and self.tree.exists(str(controller.selection)):
            iid = str(controller.selection)
            self.tree.selection_set(iid)
            self.tree.see(iid)

    def _on_select(self, _event=None):
        # Multi-row highlights are only a delete target, not a selection.
        chosen = self.tree.selection()
        if len(chosen) != 1:
            return
        item = self._item_for(chosen[0])
        if item is not None:
            self.call("select", item.id)

    def _on_delete_key(self, _event=None):
        offsets = [self.tree.index(iid) for iid in self.tree.selection()]
        if offsets:
            self.call("delete_at_offsets", offsets)
        return "break"

    def _item_for(self, iid):
        for item in self.presenter.controller.items:
            if str(item.id) == iid:
                return item
        return None
