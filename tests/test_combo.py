import pytest

from widgetdemos.combo import Option, SecondaryComboBox, sample_area_codes


@pytest.fixture
def box():
    combo = SecondaryComboBox()
    combo.add_lists(*sample_area_codes())
    return combo


@pytest.fixture
def events(box):
    calls = []
    box.connect(lambda: calls.append(box.current_data))
    return calls


def test_options_in_menu_order(box):
    assert [o.data for o in box.options] == ["010", "020", "0755", "021"]
    assert [o.text for o in box.options] == ["北京", "广州", "深圳", "上海"]


def test_entry_with_children_becomes_submenu(box):
    submenu = box.entries[1]
    assert submenu.title == "广东"
    assert [o.text for o in submenu.options] == ["广州", "深圳"]
    assert submenu.options[0] is box.options[1]


def test_mismatched_lists_add_nothing():
    combo = SecondaryComboBox()
    assert combo.add_lists([("a", "1")], []) is False
    assert combo.options == []
    assert combo.entries == []


def test_nothing_current_initially(box):
    assert box.current is None
    assert box.current_text == ""
    assert box.current_data == ""


def test_set_current_data_chooses_matching_option(box, events):
    box.set_current_data("0755")
    assert box.current_text == "深圳"
    assert box.current_data == "0755"
    assert events == ["0755"]


def test_setting_same_data_again_does_not_notify(box, events):
    box.set_current_data("010")
    box.set_current_data("010")
    assert events == ["010"]


def test_unknown_data_falls_back_to_first_option(box, events):
    box.set_current_data("nope")
    assert box.current is box.options[0]
    assert events == ["010"]


def test_empty_box_ignores_set_current_data():
    combo = SecondaryComboBox()
    calls = []
    combo.connect(lambda: calls.append(True))
    combo.set_current_data("010")
    assert combo.current is None
    assert calls == []


def test_select_notifies_once_per_change(box, events):
    option = box.options[3]
    box.select(option)
    box.select(option)
    assert box.current is option
    assert events == ["021"]


def test_select_different_option_with_same_data_notifies():
    combo = SecondaryComboBox()
    combo.add_lists([("a", "x"), ("b", "x")], [[], []])
    calls = []
    combo.connect(lambda: calls.append(combo.current_text))
    combo.select(combo.options[0])
    combo.select(combo.options[1])
    assert calls == ["a", "b"]


def test_set_current_data_equal_to_current_keeps_selection():
    combo = SecondaryComboBox()
    combo.add_lists([("a", "x"), ("b", "x")], [[], []])
    combo.select(combo.options[1])
    combo.set_current_data("x")
    assert combo.current is combo.options[1]


def test_select_foreign_option_raises(box):
    with pytest.raises(ValueError):
        box.select(Option("北京", "010"))


def test_top_entry_data_unused_when_it_has_children(box):
    assert all(o.data != "" for o in box.options)
    assert "广东" not in [o.text for o in box.options]