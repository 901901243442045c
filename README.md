# widgetdemos

This package holds four small desktop widget demos built on Tkinter. Each
demo keeps its logic in plain Python objects. You can use and test those
objects without a display. A thin window class (a `tk.Frame`) shows that
logic on screen.

## Installation

```
pip install .
```

Tkinter ships with most Python installations. Some Linux distributions
package it separately.

## The demos

Each demo is a command. Each command opens one window and accepts no
options other than `--help`.

### Browser-style tabs: `widgetdemos-tabs`

The window shows a notebook that starts with a single tab, `Tab1`. A "+"
button sits just to the right of the last tab. Each click on it adds a tab
named `Tab<n>` and selects that tab. You close a tab with a middle click.
Closing the last remaining tab closes the window. You reorder tabs by
dragging them with the left mouse button.

The logic lives in `widgetdemos.tabs`:

- `TabSet` holds the tab `titles` and the `current` index. It has these
  methods:
  - `add_tab()` returns the new title.
  - `close_tab(index)` returns `False` and leaves the tabs unchanged when
    only one tab is left.
  - `move_tab(source, target)` moves a tab, and the selection moves with
    it.

  Both `close_tab` and `move_tab` raise `IndexError` when an index is out
  of range.
- `corner_button_rect(tab_bar_left, tab_bar_width, button_width,
  button_height)` returns the position of the "+" button as a `Rect`. The
  button is placed 4 pixels to the right of the tab bar and 3 pixels from
  the top.
- `BrowserTabWindow(master)` is the window.

### Filtered tree: `widgetdemos-treefilter`

The window has a search box above a tree of continents, countries and
cities. Some cities also show a district column. The tree is filtered each
time you type, and case is ignored. An item stays visible in any of these
cases:

- its own text matches;
- a descendant matches;
- an ancestor matches.

An item is expanded when a match was found below it. When the search text
is empty, every item is shown and all items are collapsed.

The logic lives in `widgetdemos.treefilter`:

- `TreeItem(texts)` has `children`, `hidden` and `expanded` attributes and
  an `add_child(item)` method.
- `filter_tree(roots, text, column_count)` sets `hidden` and `expanded` on
  every item. It compares the text against the first `column_count`
  columns.
- `sample_regions()` builds the demo tree.
- `SearchDisplayWindow(master)` is the window.

### Search and jump: `widgetdemos-searchjump`

The window shows a content tree above a search panel. Type some text and
press Enter. Every matching item is then listed, one per line, with the
matched parts shown in red. Double-click a result line to select and reveal
that item in the tree. If you press Enter while the search box is empty,
the result list is cleared.

The logic lives in `widgetdemos.searchjump`:

- `search_tree(roots, text)` returns `SearchData(context_text, jump_path)`
  records. It checks every `Node` whose text contains `text`, ignoring
  case, and returns the records in pre-order. The `jump_path` is a tuple
  of child indices.
- `resolve_path(roots, path)` returns the `Node` at that path. It returns
  `None` when the path is empty or leads nowhere.
- `highlight_segments(text, search)` splits `text` into `(text,
  highlighted)` segments. The `search` argument is treated as a regular
  expression and matched without regard to case. At each match, a stretch
  as long as `search` is highlighted. An empty or invalid pattern
  highlights nothing.
- `sample_levels()` builds the demo tree.
- `SearchJumpWindow(master)` is the window.

### Two-level combo box: `widgetdemos-combo`

This demo is a drop-down for choosing a telephone area code. A first-level
entry with no children can be chosen directly. A first-level entry that has
children opens a submenu instead, and its own data is not used. A label
below the drop-down shows the current text and data.

```python
from widgetdemos.combo import SecondaryComboBox, sample_area_codes

box = SecondaryComboBox()
box.add_lists(*sample_area_codes())
box.connect(lambda: print(box.current_text, box.current_data))
box.set_current_data("0755")   # prints: 深圳 0755
```

How the combo box works:

- `add_lists(first_list, second_list)` takes two lists of equal length. If
  the lengths differ, it adds nothing and returns `False`.
- `set_current_data(data)` falls back to the first option when no option
  holds `data`. It does nothing while the box has no options.
- `select(option)` chooses an `Option` from `box.options`. It raises
  `ValueError` when the option does not belong to the box.
- Callbacks registered with `connect` run only when the current option
  actually changes.
- `SecondaryComboWindow(master)` is the window.

## Running the tests

```
pip install ".[test]"
pytest
```