"""Tree whose rows are hidden or shown according to a search string."""

from __future__ import annotations

import argparse
import tkinter as tk
from dataclasses import dataclass, field
from tkinter import ttk

COLUMN_COUNT = 2


@dataclass(eq=False)
class TreeItem:
    """A row of the tree: its column texts, children and display state."""

    texts: list[str]
    children: list[TreeItem] = field(default_factory=list)
    hidden: bool = False
    expanded: bool = False

    def add_child(self, item):
        self.children.append(item)
        return item


def _matches(item, search_lower, column_count):
    texts = item.texts[:column_count]
    texts += [""] * (column_count - len(texts))
    return any(search_lower in text.lower() for text in texts)


def _show(item, found_below, search_lower):
    item.expanded = found_below and bool(search_lower)
    item.hidden = False


def _filter_children(parent, search_lower, ancestor_found, column_count):
    found_any = False
    for item in parent.children:
        found = _matches(item, search_lower, column_count)
        found_below = _filter_children(
            item, search_lower, ancestor_found or found, column_count
        )
        if ancestor_found or found or found_below:
            _show(item, found_below, search_lower)
            found_any = found_any or found or found_below
        else:
            item.hidden = True
    return found_any


def filter_tree(roots, text, column_count):
    """Hide rows that neither match ``text`` nor lead to or descend from a match.

    Matching is case-insensitive over the first ``column_count`` columns.
    Rows shown because a descendant matched are expanded; the rest collapse.
    """
    search_lower = text.lower()
    for item in roots:
        found = _matches(item, search_lower, column_count)
        found_below = _filter_children(item, search_lower, found, column_count)
        if found or found_below:
            _show(item, found_below, search_lower)
        else:
            item.hidden = True


def sample_regions():
    """Continents, countries and cities (with a district column) to search."""
    asia = TreeItem(["亚洲"])
    china = asia.add_child(TreeItem(["中国"]))
    china.add_child(TreeItem(["北京", "海淀"]))
    china.add_child(TreeItem(["广州", "天河"]))
    china.add_child(TreeItem(["深圳", "福田"]))
    japan = asia.add_child(TreeItem(["日本"]))
    japan.add_child(TreeItem(["东京"]))

    north_america = TreeItem(["北美洲"])
    usa = north_america.add_child(TreeItem(["美国"]))
    usa.add_child(TreeItem(["纽约"]))

    south_america = TreeItem(["南美洲"])
    south_america.add_child(TreeItem(["阿根廷"]))

    europe = TreeItem(["欧洲"])
    europe.add_child(TreeItem(["法国"]))
    europe.add_child(TreeItem(["德国"]))

    africa = TreeItem(["非洲"])
    africa.add_child(TreeItem(["南非"]))

    oceania = TreeItem(["大洋洲"])
    oceania.add_child(TreeItem(["新西兰"]))

    antarctica = TreeItem(["南极洲"])

    return [asia, north_america, south_america, europe, africa, oceania, antarctica]


class SearchDisplayWindow(tk.Frame):
    """A search box above a tree that shows only the rows matching it."""

    def __init__(self, master):
        super().__init__(master)
        self.roots = sample_regions()
        self._search = tk.StringVar(self)
        entry = ttk.Entry(self, textvariable=self._search)
        entry.pack(fill="x", padx=4, pady=4)
        self._tree = ttk.Treeview(self, columns=("second",), show="tree")
        self._tree.pack(fill="both", expand=True, padx=4, pady=(0, 4))
        self._search.trace_add("write", self._on_search_changed)
        self._refresh()

    def _on_search_changed(self, *_args):
        filter_tree(self.roots, self._search.get(), COLUMN_COUNT)
        self._refresh()

    def _refresh(self):
        self._tree.delete(*self._tree.get_children())
        self._insert("", self.roots)

    def _insert(self, parent, items):
        for item in items:
            if item.hidden:
                continue
            first = item.texts[0] if item.texts else ""
            second = item.texts[1] if len(item.texts) > 1 else ""
            iid = self._tree.insert(
                parent, "end", text=first, values=(second,), open=item.expanded
            )
            self._insert(iid, item.children)


def main(argv=None):
    """Open the searchable tree window."""
    parser = argparse.ArgumentParser(description="Searchable tree demo.")
    parser.parse_args(argv)
    root = tk.Tk()
    root.title("SearchDisplayTreeWidget")
    root.geometry("300x350")
    SearchDisplayWindow(root).pack(fill="both", expand=True)
    root.mainloop()
    return 0