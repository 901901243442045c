"""Two-level option box: top entries are options or submenus of options."""

from __future__ import annotations

import argparse
import tkinter as tk
from dataclasses import dataclass
from tkinter import ttk


@dataclass(eq=False)
class Option:
    """A selectable entry: the text shown and the data it stands for."""

    text: str
    data: str


@dataclass(eq=False)
class Submenu:
    """A top-level entry with children; it cannot be chosen itself."""

    title: str
    options: list[Option]


class SecondaryComboBox:
    """Current choice among options laid out in a menu of at most two levels."""

    def __init__(self):
        self.options: list[Option] = []
        self.entries: list[Option | Submenu] = []
        self.current: Option | None = None
        self._listeners = []

    @property
    def current_text(self):
        return self.current.text if self.current else ""

    @property
    def current_data(self):
        return self.current.data if self.current else ""

    def connect(self, callback):
        """Call ``callback()`` whenever the current option changes."""
        self._listeners.append(callback)

    def _change(self, option):
        self.current = option
        for callback in list(self._listeners):
            callback()

    def add_lists(self, first_list, second_list):
        """Add top entries as (text, data) pairs with their sub-entries.

        A top entry with an empty sub-list is an option; otherwise it becomes
        a submenu of the sub-entries and its own data is unused. Nothing is
        added, and False returned, when the two lists differ in length.
        """
        if len(first_list) != len(second_list):
            return False
        for (text, data), children in zip(first_list, second_list):
            if not children:
                option = Option(text, data)
                self.options.append(option)
                self.entries.append(option)
            else:
                submenu = Submenu(text, [Option(t, d) for t, d in children])
                self.options.extend(submenu.options)
                self.entries.append(submenu)
        return True

    def set_current_data(self, data):
        """Choose the first option holding ``data``, or the first option at all."""
        if not self.options:
            return
        new = next((o for o in self.options if o.data == data), self.options[0])
        if self.current is None or self.current.data != new.data:
            self._change(new)

    def select(self, option):
        """Choose ``option`` as if picked from the menu."""
        if not any(o is option for o in self.options):
            raise ValueError(f"option {option.text!r} is not in this box")
        if self.current is not option:
            self._change(option)


def sample_area_codes():
    """Top entries and their sub-entries for a small telephone area-code box."""
    first_list = [("北京", "010"), ("广东", ""), ("上海", "021")]
    second_list = [[], [("广州", "020"), ("深圳", "0755")], []]
    return first_list, second_list


class SecondaryComboWindow(tk.Frame):
    """An area-code chooser and a label showing the current choice."""

    def __init__(self, master):
        super().__init__(master)
        self.box = SecondaryComboBox()
        self.box.add_lists(*sample_area_codes())

        row = ttk.Frame(self)
        row.pack(fill="x", padx=6, pady=6)
        ttk.Label(row, text="区号").pack(side="left")
        self._button = ttk.Menubutton(row, width=12)
        self._button.pack(side="left", padx=(6, 0))
        self._button["menu"] = self._build_menu()

        self._info = ttk.Label(self, anchor="center")
        self._info.pack(fill="x", padx=6, pady=(0, 6))

        self.box.connect(self._on_change)
        self.box.set_current_data("010")

    def _build_menu(self):
        menu = tk.Menu(self._button, tearoff=False)
        for entry in self.box.entries:
            if isinstance(entry, Option):
                menu.add_command(label=entry.text, command=self._chooser(entry))
            else:
                submenu = tk.Menu(menu, tearoff=False)
                for option in entry.options:
                    submenu.add_command(label=option.text, command=self._chooser(option))
                menu.add_cascade(label=entry.title, menu=submenu)
        return menu

    def _chooser(self, option):
        return lambda: self.box.select(option)

    def _on_change(self):
        self._button.configure(text=self.box.current_text)
        self._info.configure(text=f"{self.box.current_text} {self.box.current_data}")


def main(argv=None):
    """Open the two-level option box window."""
    parser = argparse.ArgumentParser(description="Two-level option box demo.")
    parser.parse_args(argv)
    root = tk.Tk()
    root.title("SecondaryComboBox")
    SecondaryComboWindow(root).pack(fill="both", expand=True)
    root.mainloop()
    return 0