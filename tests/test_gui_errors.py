"""
Error paths of the GUI handlers, run against lightweight stand-ins for the widgets.
"""

import tkinter as tk
from types import SimpleNamespace

import pytest

pytest.importorskip("customtkinter")

from gui import generator as generator_module  # noqa: E402
from gui import main_window as main_window_module  # noqa: E402
from gui.generator import GeneratorPanel, GeneratorState  # noqa: E402
from gui.main_window import MainWindow  # noqa: E402


class FakeVar:
    def __init__(self, value):
        self.value = value

    def get(self):
        return self.value


class FakeCheckBox(FakeVar):
    def select(self):
        self.value = 1

    def deselect(self):
        self.value = 0


class FakeEntry(FakeVar):
    def delete(self, start, end):
        self.value = ""

    def insert(self, index, text):
        self.value = text


class FakeSlider(FakeVar):
    def set(self, value):
        self.value = value


@pytest.fixture
def notices(monkeypatch):
    shown = []

    def record(parent, title, message, level="error"):
        shown.append((title, message, level))

    monkeypatch.setattr(generator_module, "NoticeDialog", record)
    monkeypatch.setattr(main_window_module, "NoticeDialog", record)
    return shown


def make_panel(store, upper=1, lower=1, digits=1, symbols=1, label="example.org"):
    return SimpleNamespace(
        length_slider=FakeSlider(12.0),
        use_upper=FakeCheckBox(upper),
        use_lower=FakeCheckBox(lower),
        use_digits=FakeCheckBox(digits),
        use_symbols=FakeCheckBox(symbols),
        label_entry=FakeEntry(label),
        length_value_label=SimpleNamespace(configure=lambda **kw: None),
        generated_password="",
        on_generated=store.append,
        _show_strength=lambda password: None,
        _flash_generate_button=lambda: None,
    )


class TestGenerateHandler:
    def test_no_character_type_appends_nothing(self, store, notices):
        panel = make_panel(store, upper=0, lower=0, digits=0, symbols=0)

        GeneratorPanel.generate(panel)

        assert store.list() == ()
        assert len(notices) == 1
        assert "at least one character type" in notices[0][1]

    def test_valid_options_append_once(self, store, notices):
        panel = make_panel(store, symbols=0)

        GeneratorPanel.generate(panel)

        entries = store.list()
        assert len(entries) == 1
        assert entries[0].label == "example.org"
        assert len(entries[0].value) == 12
        assert entries[0].value == panel.generated_password
        assert notices == []


class TestCopyHandler:
    def make_view(self, store, clipboard):
        after_calls = []
        return SimpleNamespace(
            store=store,
            clipboard=clipboard,
            copy_feedback_job=None,
            _copied_btn=None,
            after=lambda ms, func: after_calls.append(ms) or "after#1",
            after_cancel=lambda job: None,
            _reset_copy_button=lambda btn: None,
        )

    def test_clipboard_failure_leaves_store_unchanged(self, store, notices):
        entry = store.append("a", "Ab3!Ab3!Ab3!")
        store.append("b", "aaaaaaaa")
        before = (store.list(), store.stats())

        def fail(text):
            raise tk.TclError("clipboard unavailable")

        button = SimpleNamespace(configure=lambda **kw: pytest.fail("button changed"))
        view = self.make_view(store, SimpleNamespace(copy=fail))

        MainWindow._copy_password(view, entry, button)

        assert (store.list(), store.stats()) == before
        assert len(notices) == 1
        assert notices[0][2] == "warning"
        assert view.copy_feedback_job is None

    def test_successful_copy_flashes_button(self, store, notices):
        entry = store.append("a", "Ab3!Ab3!Ab3!")
        copied = []
        configured = []
        button = SimpleNamespace(configure=lambda **kw: configured.append(kw))
        view = self.make_view(store, SimpleNamespace(copy=copied.append))

        MainWindow._copy_password(view, entry, button)

        assert copied == ["Ab3!Ab3!Ab3!"]
        assert configured[0]["text"] == "Copied!"
        assert view.copy_feedback_job == "after#1"
        assert notices == []


class TestGeneratorState:
    def test_restore_carries_form_over(self):
        shown = []
        panel = SimpleNamespace(
            label_entry=FakeEntry("old"),
            length_slider=FakeSlider(12),
            length_value_label=SimpleNamespace(configure=lambda **kw: None),
            use_upper=FakeCheckBox(1),
            use_lower=FakeCheckBox(1),
            use_digits=FakeCheckBox(1),
            use_symbols=FakeCheckBox(1),
            generated_password="",
            _show_strength=shown.append,
        )
        panel.clear_label = lambda: GeneratorPanel.clear_label(panel)
        panel._on_length_change = lambda value: GeneratorPanel._on_length_change(panel, value)

        state = GeneratorState(
            label="mail.example",
            length=20,
            use_uppercase=False,
            use_symbols=False,
            last_password="abc123",
        )
        GeneratorPanel.restore(panel, state)

        assert GeneratorPanel.snapshot(panel) == state
        assert shown == ["abc123"]
