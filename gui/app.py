"""Main GUI application object.

`NotesApp` builds a two-pane window: the note list on the left and the
detail pane for the selected note on the right.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from gui.state import AppState
from gui.theme import ModernTheme, Theme
from gui.utils.formatting import confirmation_message
from gui.utils.logging import log
from notetaker.config import Settings, get_settings
from notetaker.selection import ConfirmationRequest
from notetaker.utils.logger import setup_logging


@dataclass
class NotesApp:
    """Window shell; Tkinter is only imported once `run` is called."""

    settings: Settings = field(default_factory=get_settings)
    state: AppState = field(default_factory=AppState)
    theme: Theme = field(default_factory=ModernTheme)
    database_url: Optional[str] = None

    def run(self) -> None:
        """Build the window and enter the Tk event loop."""
        import tkinter as tk
        from tkinter import messagebox, ttk

        from gui.components.status_bar import StatusBar
        from gui.presenter import NotesPresenter
        from gui.services.items_service import open_store
        from gui.views.item_detail import ItemDetailView
        from gui.views.item_list import ItemListView

        root = tk.Tk()
        root.title(self.settings.window_title)
        root.geometry("720x480")
        root.minsize(480, 320)
        self.theme.apply(ttk.Style(root))
        root.configure(background=self.theme.background_color)

        def confirm(request: ConfirmationRequest) -> bool:
            return messagebox.askyesno(
                request.title,
                confirmation_message(request),
                icon=messagebox.WARNING,
                default=messagebox.NO,
                parent=root,
            )

        def show_error(title: str, message: str) -> None:
            messagebox.showerror(title, message, parent=root)

        store = open_store(self.database_url or self.settings.database_url)
        presenter = NotesPresenter(store, confirm=confirm, on_error=show_error, state=self.state)

        panes = ttk.PanedWindow(root, orient=tk.HORIZONTAL)
        panes.pack(fill=tk.BOTH, expand=True)
        panes.add(ItemListView(panes, presenter), weight=1)
        panes.add(ItemDetailView(panes, presenter), weight=2)

        status = StatusBar(root, self.state)
        status.pack(fill=tk.X, side=tk.BOTTOM)
        presenter.on_render(status.update_status)

        presenter.start()
        log("Notes window ready")
        try:
            root.mainloop()
        finally:
            presenter.close()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    NotesApp(settings=settings).run()
