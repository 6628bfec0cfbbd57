"""
History manager tests.
"""

import pytest

from banner_studio.editor.history import HistoryManager
from banner_studio.models.banner_models import BannerConfig, TextElement


def _element(text="hello", **kwargs):
    return TextElement(id="el-1", text=text, **kwargs)


def _config(width):
    return BannerConfig(width=width, height=250)


def test_empty_history():
    history = HistoryManager()
    assert len(history) == 0
    assert history.index == -1
    assert history.current is None
    assert history.undo() is None
    assert history.redo() is None


def test_undo_then_redo_returns_to_latest_state():
    history = HistoryManager()
    history.reset([], _config(100))
    for i in range(10):
        history.capture([_element(text=f"v{i}", x=i)], _config(200 + i))

    latest = history.current
    for _ in range(10):
        history.undo()
    assert history.index == 0
    assert history.current.config.width == 100

    for _ in range(10):
        history.redo()
    assert history.current == latest
    assert history.current.elements[0].text == "v9"


def test_undo_at_oldest_and_redo_at_newest_are_noops():
    history = HistoryManager()
    history.reset([], _config(100))
    history.capture([], _config(101))

    assert history.redo().config.width == 101
    assert history.index == 1
    history.undo()
    assert history.undo().config.width == 100
    assert history.index == 0


def test_capture_after_undo_discards_redo_branch():
    history = HistoryManager()
    history.reset([], _config(100))
    history.capture([], _config(101))
    history.capture([], _config(102))

    history.undo()
    index_before = history.index
    history.capture([], _config(999))

    assert len(history) == index_before + 2
    assert not history.can_redo
    assert history.redo().config.width == 999


def test_history_is_capped_and_keeps_most_recent():
    history = HistoryManager(limit=20)
    for i in range(25):
        history.capture([], _config(100 + i))

    assert len(history) == 20
    assert history.index == 19
    assert history.current.config.width == 124

    widths = [history.current.config.width]
    while history.can_undo:
        widths.append(history.undo().config.width)
    assert widths == list(range(124, 104, -1))


def test_eviction_keeps_current_view():
    history = HistoryManager(limit=3)
    for i in range(3):
        history.capture([], _config(100 + i))
    history.capture([], _config(200))

    assert len(history) == 3
    assert history.current.config.width == 200
    assert [s.config.width for s in history.states()] == [101, 102, 200]


def test_snapshots_are_isolated_from_later_mutation():
    history = HistoryManager()
    element = _element(text="before")
    config = _config(300)
    history.capture([element], config)

    element.text = "after"
    config.width = 999
    assert history.current.elements[0].text == "before"
    assert history.current.config.width == 300

    elements, restored_config = history.current.restore()
    elements[0].text = "changed"
    restored_config.width = 1
    assert history.current.elements[0].text == "before"
    assert history.current.config.width == 300


def test_returned_states_do_not_alias_history():
    history = HistoryManager()
    history.capture([_element(text="first")], _config(300))
    history.capture([_element(text="second")], _config(400))

    state = history.undo()
    state.elements[0].text = "tampered"
    state.config.width = 1
    history.redo()

    restored = history.undo()
    assert restored.elements[0].text == "first"
    assert restored.config.width == 300

    history.current.elements[0].text = "tampered"
    history.states()[0].config.width = 1
    assert history.current.elements[0].text == "first"
    assert history.states()[0].config.width == 300


def test_invalid_limit():
    with pytest.raises(ValueError):
        HistoryManager(limit=0)
