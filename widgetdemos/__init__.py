"""Tkinter widget demos: browser-style tabs, a filtered tree, a search-and-jump tree and a two-level combo box."""

__version__ = "0.1.0"
__all__ = ["tabs", "treefilter", "searchjump", "combo"]