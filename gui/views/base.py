"""Base class for GUI views.

Views are ttk frames that read from the presenter and forward gestures to
it through `call`. Subclasses build widgets in `_build` and refresh them in
`render`.
"""

from __future__ import annotations

from tkinter import ttk


class BaseView(ttk.Frame):
    name = "base"

    def __init__(self, parent, presenter, **kwargs):
        kwargs.setdefault("style", "Main.TFrame")
        kwargs.setdefault("padding", 8)
        super().__init__(parent, **kwargs)
        self.presenter = presenter
        self._build()
        presenter.on_render(self.render)

    def _build(self):
        raise NotImplementedError

    def render(self):
        pass

    def call(self, action: str, *args):
        """Invoke a presenter gesture by name."""
        return getattr(self.presenter, action)(*args)
