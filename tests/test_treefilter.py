from widgetdemos.treefilter import TreeItem, filter_tree, sample_regions


def _walk(items):
    for item in items:
        yield item
        yield from _walk(item.children)


def _find(roots, text):
    return next(item for item in _walk(roots) if item.texts[0] == text)


def test_sample_regions_shape():
    roots = sample_regions()
    assert [root.texts[0] for root in roots] == [
        "亚洲", "北美洲", "南美洲", "欧洲", "非洲", "大洋洲", "南极洲",
    ]
    assert roots[-1].children == []
    assert _find(roots, "北京").texts == ["北京", "海淀"]


def test_add_child_returns_child():
    parent = TreeItem(["a"])
    child = parent.add_child(TreeItem(["b"]))
    assert parent.children == [child]
    assert child.texts == ["b"]


def test_match_in_leaf_shows_path_and_expands_ancestors():
    roots = sample_regions()
    filter_tree(roots, "北京", 2)
    asia, china, beijing = (_find(roots, t) for t in ("亚洲", "中国", "北京"))
    assert not asia.hidden and asia.expanded
    assert not china.hidden and china.expanded
    assert not beijing.hidden and not beijing.expanded
    assert _find(roots, "广州").hidden
    assert _find(roots, "日本").hidden
    assert _find(roots, "北美洲").hidden


def test_match_on_parent_shows_whole_subtree_collapsed():
    roots = sample_regions()
    filter_tree(roots, "亚洲", 2)
    asia = _find(roots, "亚洲")
    assert not asia.hidden and not asia.expanded
    subtree = list(_walk(asia.children))
    assert subtree
    assert all(not item.hidden for item in subtree)
    assert all(not item.expanded for item in subtree)
    assert _find(roots, "欧洲").hidden


def test_second_column_is_searched():
    roots = sample_regions()
    filter_tree(roots, "海淀", 2)
    assert not _find(roots, "北京").hidden
    assert _find(roots, "中国").expanded


def test_column_count_limits_search():
    roots = sample_regions()
    filter_tree(roots, "海淀", 1)
    assert all(root.hidden for root in roots)


def test_empty_search_shows_everything_collapsed():
    roots = sample_regions()
    filter_tree(roots, "北京", 2)
    filter_tree(roots, "", 2)
    items = list(_walk(roots))
    assert all(not item.hidden for item in items)
    assert all(not item.expanded for item in items)


def test_no_match_hides_all_top_level():
    roots = sample_regions()
    filter_tree(roots, "zzz", 2)
    assert all(root.hidden for root in roots)


def test_search_is_case_insensitive():
    root = TreeItem(["Fruit"])
    apple = root.add_child(TreeItem(["Apple"]))
    pear = root.add_child(TreeItem(["Pear"]))
    filter_tree([root], "APP", 1)
    assert not root.hidden and root.expanded
    assert not apple.hidden
    assert pear.hidden


def test_match_in_both_levels_expands_parent():
    root = TreeItem(["Apple tree"])
    apple = root.add_child(TreeItem(["Apple"]))
    other = root.add_child(TreeItem(["Leaf"]))
    filter_tree([root], "apple", 1)
    assert not root.hidden and root.expanded
    assert not apple.hidden
    assert not other.hidden