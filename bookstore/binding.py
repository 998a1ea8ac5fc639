"""Widgets that display or edit a ``BookProperty``.

``BoundLabel`` is a read-only viewer that re-renders whenever its property
changes. ``BoundLineEdit`` holds an editable copy of the value and pushes it
into the property on ``commit()``; the property then notifies every other
widget bound to it within the same call.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from PySide6.QtWidgets import QLabel, QLineEdit, QWidget

from bookstore.app.state.book_item import BookProperty
from bookstore.errors import SourceNotBoundError
from bookstore.logger import get_logger

_logger = get_logger("binding")


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _always_succeeds() -> bool:
    # Books live in memory only, so an update can never be refused downstream
    return True


class BoundLabel(QLabel):
    """Read-only label showing the current value of one property."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._source: BookProperty | None = None

    def property_data_source(self) -> BookProperty | None:
        return self._source

    def set_property_data_source(self, source: BookProperty | None) -> None:
        if self._source is not None:
            self._source.valueChanged.disconnect(self._on_value_changed)
        self._source = source
        if source is None:
            self.clear()
            return
        source.valueChanged.connect(self._on_value_changed)
        self.setText(_as_text(source.value()))

    def _on_value_changed(self, value: Any) -> None:
        self.setText(_as_text(value))


class BoundLineEdit(QLineEdit):
    """Editable text field bound to one property.

    Edits stay local to the widget until ``commit()``. With ``commit_on_enter``
    the Enter/Return key is the commit gesture; with ``immediate`` a commit
    also happens whenever editing finishes. Both gestures are gated by
    ``commit_guard``; an explicit ``commit()`` call is not.
    """

    def __init__(
        self,
        caption: str = "",
        parent: QWidget | None = None,
        *,
        commit_on_enter: bool = False,
        immediate: bool = False,
        commit_guard: Callable[[], bool] | None = None,
    ) -> None:
        super().__init__(parent)
        self._caption = caption
        self._source: BookProperty | None = None
        self._commit_guard = commit_guard or _always_succeeds
        self._commit_on_enter = False
        self._immediate = False
        self.set_commit_on_enter(commit_on_enter)
        self.set_immediate(immediate)

    # ---- configuration ----
    def caption(self) -> str:
        return self._caption

    def set_caption(self, caption: str) -> None:
        self._caption = caption

    def set_commit_guard(self, guard: Callable[[], bool] | None) -> None:
        self._commit_guard = guard or _always_succeeds

    def set_commit_on_enter(self, enabled: bool) -> None:
        if enabled == self._commit_on_enter:
            return
        self._commit_on_enter = enabled
        if enabled:
            self.returnPressed.connect(self._on_confirm)
        else:
            self.returnPressed.disconnect(self._on_confirm)

    def set_immediate(self, enabled: bool) -> None:
        if enabled == self._immediate:
            return
        self._immediate = enabled
        if enabled:
            self.editingFinished.connect(self._on_editing_finished)
        else:
            self.editingFinished.disconnect(self._on_editing_finished)

    def is_immediate(self) -> bool:
        return self._immediate

    # ---- data source ----
    def property_data_source(self) -> BookProperty | None:
        return self._source

    def set_property_data_source(self, source: BookProperty | None) -> None:
        if self._source is not None:
            self._source.valueChanged.disconnect(self._on_value_changed)
        self._source = source
        if source is None:
            self.clear()
            return
        source.valueChanged.connect(self._on_value_changed)
        self.setReadOnly(source.is_read_only())
        self.setText(_as_text(source.value()))

    def is_modified(self) -> bool:
        if self._source is None:
            return False
        return self.text() != _as_text(self._source.value())

    def commit(self) -> None:
        """Write the edited text into the bound property."""
        if self._source is None:
            raise SourceNotBoundError(f"field {self._caption!r} has no property data source")
        if not self.is_modified():
            return
        value = self._convert(self.text())
        _logger.debug("commit %s: %r", self._source.property_id, value)
        self._source.set_value(value)

    def discard(self) -> None:
        """Drop local edits and show the property's current value again."""
        if self._source is None:
            raise SourceNotBoundError(f"field {self._caption!r} has no property data source")
        self.setText(_as_text(self._source.value()))

    def _convert(self, text: str) -> Any:
        target = self._source.property_type if self._source is not None else str
        if target is str:
            return text
        return target(text)

    # ---- slots ----
    def _guarded_commit(self) -> None:
        # Every commit gesture (Enter, editing finished) goes through the guard
        if self._source is None or self.isReadOnly() or not self.is_modified():
            return
        if not self._commit_guard():
            _logger.warning("update refused, keeping %s=%r", self._source.property_id, self._source.value())
            return
        self.commit()

    def _on_confirm(self) -> None:
        self._guarded_commit()

    def _on_editing_finished(self) -> None:
        self._guarded_commit()

    def _on_value_changed(self, value: Any) -> None:
        text = _as_text(value)
        if text != self.text():
            self.setText(text)
