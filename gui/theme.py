"""Theme primitives for the notes window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Theme:
    """Base theme definition."""

    name: str = "Default"
    primary_color: str = "#1f2937"  # slate-800
    accent_color: str = "#3b82f6"  # blue-500
    background_color: str = "#ffffff"
    muted_color: str = "#6b7280"  # gray-500
    surface_color: str = "#f3f4f6"  # gray-100
    font_family: str = "Helvetica"

    def apply(self, style: Any) -> None:
        """Register the named ttk styles used by the views on `style`."""
        style.configure("Main.TFrame", background=self.background_color)
        style.configure("Panel.TFrame", background=self.background_color)
        style.configure(
            "Header.TLabel",
            background=self.background_color,
            foreground=self.primary_color,
            font=(self.font_family, 14, "bold"),
        )
        style.configure(
            "Detail.TLabel",
            background=self.background_color,
            foreground=self.primary_color,
            font=(self.font_family, 12),
        )
        style.configure(
            "Muted.TLabel",
            background=self.background_color,
            foreground=self.muted_color,
        )
        style.configure("TButton", background=self.surface_color, foreground=self.primary_color)
        style.configure("Accent.TButton", foreground=self.accent_color)
        style.configure(
            "Treeview",
            background=self.surface_color,
            fieldbackground=self.surface_color,
            foreground=self.primary_color,
        )
        style.configure("Treeview.Heading", background=self.surface_color, foreground=self.muted_color)
        style.map(
            "Treeview",
            background=[("selected", self.accent_color)],
            foreground=[("selected", self.background_color)],
        )


@dataclass(frozen=True)
class ModernTheme(Theme):
    """A slightly more opinionated default theme."""

    name: str = "Modern"
    background_color: str = "#0b1220"  # dark
    primary_color: str = "#e5e7eb"  # gray-200
    accent_color: str = "#22c55e"  # green-500
    muted_color: str = "#9ca3af"  # gray-400
    surface_color: str = "#111827"  # gray-900
