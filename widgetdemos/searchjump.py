"""Search a tree, list every match with its highlighted text, and jump to it."""

from __future__ import annotations

import argparse
import re
import tkinter as tk
from dataclasses import dataclass, field
from tkinter import ttk
from typing import NamedTuple

HIGHLIGHT_COLOR = "red"
PLACEHOLDER = "请输入搜索内容"
RESULTS_HEADER = "内容"


@dataclass(frozen=True)
class SearchData:
    """A search hit: the row's text and the child indices leading to it."""

    context_text: str
    jump_path: tuple[int, ...]


@dataclass(eq=False)
class Node:
    """A row of the searched tree."""

    text: str
    children: list[Node] = field(default_factory=list)

    def add_child(self, node):
        self.children.append(node)
        return node


class Segment(NamedTuple):
    text: str
    highlighted: bool


def _walk(nodes, prefix):
    for index, node in enumerate(nodes):
        path = (*prefix, index)
        yield node, path
        yield from _walk(node.children, path)


def search_tree(roots, text):
    """Return every node whose text contains ``text``, ignoring case, in pre-order."""
    needle = text.lower()
    return [
        SearchData(node.text, path)
        for node, path in _walk(roots, ())
        if needle in node.text.lower()
    ]


def resolve_path(roots, path):
    """Follow ``path`` from the roots; return the node, or None if it leads nowhere."""
    if not path:
        return None
    nodes = roots
    node = None
    for row in path:
        if not 0 <= row < len(nodes):
            return None
        node = nodes[row]
        nodes = node.children
    return node


def highlight_segments(text, search):
    """Split ``text`` into plain and highlighted parts.

    ``search`` is a case-insensitive regular expression; at each match a
    stretch as long as ``search`` itself is highlighted. An empty or invalid
    pattern highlights nothing.
    """
    plain = [Segment(text, False)] if text else []
    if not search:
        return plain
    try:
        pattern = re.compile(search, re.IGNORECASE)
    except re.error:
        return plain

    length = len(search)
    segments = []
    rest = text
    while rest and (match := pattern.search(rest)):
        pos = match.start()
        before, current = rest[:pos], rest[pos:pos + length]
        if before:
            segments.append(Segment(before, False))
        if current:
            segments.append(Segment(current, True))
        rest = rest[pos + length:]
    if rest:
        segments.append(Segment(rest, False))
    return segments


def sample_levels():
    """A small tree of top, senior, intermediate and junior levels."""
    top1 = Node("顶级1")
    senior = top1.add_child(Node("高级1_1"))
    intermediate = senior.add_child(Node("中级1_1_1"))
    intermediate.add_child(Node("初级1_1_1_1"))
    intermediate.add_child(Node("初级1_1_1_2"))
    senior.add_child(Node("中级1_1_2"))
    top1.add_child(Node("高级1_2"))

    top2 = Node("顶级2")
    top2.add_child(Node("高级2_1"))
    return [top1, top2]


class SearchJumpWindow(tk.Frame):
    """A tree above a search panel whose results jump to rows of the tree."""

    def __init__(self, master):
        super().__init__(master)
        self.roots = sample_levels()
        self.results: list[SearchData] = []
        self._iids: dict[tuple[int, ...], str] = {}

        self._tree = ttk.Treeview(self, show="tree")
        self._tree.pack(fill="both", expand=True, padx=4, pady=4)
        self._fill_tree("", self.roots, ())

        panel = ttk.Frame(self)
        panel.pack(fill="both", expand=True, padx=4, pady=(0, 4))
        self._entry = ttk.Entry(panel)
        self._entry.pack(fill="x")
        self._show_placeholder()
        self._entry.bind("<FocusIn>", self._clear_placeholder)
        self._entry.bind("<FocusOut>", lambda _e: self._show_placeholder())
        self._entry.bind("<Return>", self._on_return)

        self._header = ttk.Label(panel, text=RESULTS_HEADER)
        self._results = tk.Text(panel, height=8, wrap="none", cursor="arrow")
        self._results.tag_configure("match", foreground=HIGHLIGHT_COLOR)
        self._results.pack(fill="both", expand=True, side="bottom")
        self._results.configure(state="disabled")
        self._results.bind("<Double-Button-1>", self._on_double_click)

    def _fill_tree(self, parent, nodes, prefix):
        for index, node in enumerate(nodes):
            path = (*prefix, index)
            iid = self._tree.insert(parent, "end", text=node.text)
            self._iids[path] = iid
            self._fill_tree(iid, node.children, path)

    def _show_placeholder(self):
        if not self._entry.get():
            self._entry.insert(0, PLACEHOLDER)
            self._entry.configure(foreground="grey")
            self._placeholder = True

    def _clear_placeholder(self, _event=None):
        if getattr(self, "_placeholder", False):
            self._entry.delete(0, "end")
            self._entry.configure(foreground="")
            self._placeholder = False

    def _search_text(self):
        return "" if getattr(self, "_placeholder", False) else self._entry.get()

    def _on_return(self, _event):
        text = self._search_text()
        if not text:
            self._set_results([], "")
        else:
            self._set_results(search_tree(self.roots, text), text)

    def _set_results(self, results, search):
        self.results = list(results)
        self._results.configure(state="normal")
        self._results.delete("1.0", "end")
        for data in self.results:
            for segment in highlight_segments(data.context_text, search):
                tags = ("match",) if segment.highlighted else ()
                self._results.insert("end", segment.text, tags)
            self._results.insert("end", "\n")
        self._results.configure(state="disabled")
        if self.results:
            self._header.pack(fill="x", before=self._results)
        else:
            self._header.pack_forget()

    def _on_double_click(self, event):
        line = int(self._results.index(f"@{event.x},{event.y}").split(".")[0]) - 1
        if 0 <= line < len(self.results):
            self._jump(self.results[line])
        return "break"

    def _jump(self, data):
        if resolve_path(self.roots, data.jump_path) is None:
            return
        iid = self._iids[data.jump_path]
        self._tree.see(iid)
        self._tree.selection_set(iid)
        self._tree.focus(iid)


def main(argv=None):
    """Open the search-and-jump tree window."""
    parser = argparse.ArgumentParser(description="Search-and-jump tree demo.")
    parser.parse_args(argv)
    root = tk.Tk()
    root.title("SearchJumpTreeWidget")
    SearchJumpWindow(root).pack(fill="both", expand=True)
    root.mainloop()
    return 0