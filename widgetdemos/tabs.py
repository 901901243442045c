"""Browser-style tab set: closable, movable tabs and a "+" corner button."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import ttk
from typing import NamedTuple

CORNER_GAP = 4
CORNER_TOP = 3
ADD_BUTTON_SIZE = 25


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


def corner_button_rect(tab_bar_left, tab_bar_width, button_width, button_height):
    """Place the corner button just right of the tab bar, near the top edge."""
    return Rect(
        tab_bar_left + tab_bar_width + CORNER_GAP,
        CORNER_TOP,
        button_width,
        button_height,
    )


class TabSet:
    """The tab titles of a browser-like window and the selected tab."""

    def __init__(self):
        self.titles: list[str] = ["Tab1"]
        self.current = 0

    def __len__(self):
        return len(self.titles)

    def add_tab(self):
        """Append a new tab, select it and return its title."""
        count = len(self.titles)
        title = f"Tab{count + 1}"
        self.titles.append(title)
        self.current = count
        return title

    def close_tab(self, index):
        """Remove the tab at ``index``.

        Returns False, leaving the tabs untouched, when it is the last tab:
        the window is to close instead.
        """
        if not 0 <= index < len(self.titles):
            raise IndexError(f"no tab at index {index}")
        if len(self.titles) <= 1:
            return False
        del self.titles[index]
        if self.current >= len(self.titles) or index < self.current:
            self.current = max(self.current - 1, 0)
        return True

    def move_tab(self, source, target):
        """Move the tab at ``source`` to ``target``; the selection follows it."""
        count = len(self.titles)
        if not (0 <= source < count and 0 <= target < count):
            raise IndexError(f"cannot move tab {source} to {target}")
        if source == target:
            return
        title = self.titles.pop(source)
        self.titles.insert(target, title)
        if self.current == source:
            self.current = target
        elif source < self.current <= target:
            self.current -= 1
        elif target <= self.current < source:
            self.current += 1


class BrowserTabWindow(tk.Frame):
    """A notebook whose tabs can be added, closed (middle click) and dragged."""

    def __init__(self, master):
        super().__init__(master)
        self.tabs = TabSet()
        self._drag_index: int | None = None

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)
        self._notebook = ttk.Notebook(self, width=500, height=300)
        self._notebook.grid(row=0, column=0, sticky="nsew")
        for title in self.tabs.titles:
            self._notebook.add(self._make_page(title), text=title)

        self._add_button = tk.Button(self, text="+", command=self._on_add)

        self._notebook.bind("<ButtonPress-1>", self._on_press)
        self._notebook.bind("<B1-Motion>", self._on_drag)
        self._notebook.bind("<ButtonRelease-1>", self._on_release)
        self._notebook.bind("<Button-2>", self._on_middle_click)
        self._notebook.bind("<Configure>", lambda _event: self._place_add_button())
        self.after_idle(self._place_add_button)

    def _make_page(self, title):
        return ttk.Label(self._notebook, text=title)

    def _tab_at(self, x, y):
        if not self._notebook.identify(x, y):
            return None
        try:
            return self._notebook.index(f"@{x},{y}")
        except (tk.TclError, ValueError):
            return None

    def _tab_bar_width(self):
        y = ADD_BUTTON_SIZE // 2
        width = self._notebook.winfo_width()
        return next(
            (x + 1 for x in range(width - 1, -1, -1) if self._tab_at(x, y) is not None),
            0,
        )

    def _place_add_button(self):
        self.update_idletasks()
        rect = corner_button_rect(
            self._notebook.winfo_x(),
            self._tab_bar_width(),
            ADD_BUTTON_SIZE,
            ADD_BUTTON_SIZE,
        )
        self._add_button.place(x=rect.x, y=rect.y, width=rect.width, height=rect.height)
        self._add_button.lift()

    def _on_add(self):
        title = self.tabs.add_tab()
        self._notebook.add(self._make_page(title), text=title)
        self._notebook.select(self.tabs.current)
        self._place_add_button()

    def _close(self, index):
        if not self.tabs.close_tab(index):
            self.winfo_toplevel().destroy()
            return
        page = self.nametowidget(self._notebook.tabs()[index])
        self._notebook.forget(index)
        page.destroy()
        self._place_add_button()

    def _on_middle_click(self, event):
        index = self._tab_at(event.x, event.y)
        if index is not None:
            self._close(index)

    def _on_press(self, event):
        self._drag_index = self._tab_at(event.x, event.y)

    def _on_drag(self, event):
        if self._drag_index is None:
            return
        target = self._tab_at(event.x, event.y)
        if target is None or target == self._drag_index:
            return
        page = self._notebook.tabs()[self._drag_index]
        self._notebook.insert(target, page)
        self.tabs.move_tab(self._drag_index, target)
        self._drag_index = target
        self._place_add_button()

    def _on_release(self, _event):
        self._drag_index = None


def main(argv=None):
    """Open the browser-style tab window."""
    parser = argparse.ArgumentParser(description="Browser-style tab widget demo.")
    parser.parse_args(argv)
    root = tk.Tk()
    root.title("BrowserTabWidget")
    BrowserTabWindow(root).pack(fill="both", expand=True)
    root.mainloop()
    return 0