from __future__ import annotations

from typing import Any

from PySide6.QtCore import Property, QObject, Signal

from bookstore.book import Book, bindable_fields, field_type
from bookstore.errors import ReadOnlyPropertyError, UnknownPropertyError
from bookstore.logger import get_logger

_logger = get_logger("book_item")


class BookProperty(QObject):
    """Observable handle onto one field of a Book.

    Reads and writes go straight through to the wrapped record; a write that
    changes the value emits ``valueChanged`` before returning, so every widget
    connected to the handle has re-rendered by the time the writer continues.
    """

    valueChanged = Signal(object)

    def __init__(
        self,
        bean: Any,
        property_id: str,
        property_type: type = str,
        read_only: bool = False,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._bean = bean
        self._property_id = property_id
        self._property_type = property_type
        self._read_only = bool(read_only)

    @property
    def property_id(self) -> str:
        return self._property_id

    @property
    def property_type(self) -> type:
        return self._property_type

    def is_read_only(self) -> bool:
        return self._read_only

    def set_read_only(self, read_only: bool) -> None:
        self._read_only = bool(read_only)

    def value(self) -> Any:
        return getattr(self._bean, self._property_id)

    def set_value(self, value: Any) -> None:
        if self._read_only:
            raise ReadOnlyPropertyError(f"property {self._property_id!r} is read-only")
        if value == self.value():
            return
        setattr(self._bean, self._property_id, value)
        _logger.debug("property %s set: %r", self._property_id, value)
        self.valueChanged.emit(value)

    def __repr__(self) -> str:
        return f"BookProperty({self._property_id!r}, value={self.value()!r})"


class BookItem(QObject):
    """Item wrapper exposing a Book's fields as independent observable properties.

    Each field gets exactly one ``BookProperty`` for the lifetime of the item,
    so widgets bound through ``item_property()`` share one value source
    without holding references to each other. The same cells drive the Qt
    ``title``/``author`` properties for QML or ``setProperty()`` consumers.
    """

    titleChanged = Signal(str)
    authorChanged = Signal(str)

    def __init__(self, bean: Book, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._bean = bean
        self._properties: dict[str, BookProperty] = {}
        for name in bindable_fields(bean):
            self._properties[name] = BookProperty(bean, name, field_type(bean, name), parent=self)

        self._properties["title"].valueChanged.connect(lambda v: self.titleChanged.emit(_as_text(v)))
        self._properties["author"].valueChanged.connect(lambda v: self.authorChanged.emit(_as_text(v)))

    def bean(self) -> Book:
        return self._bean

    def item_property_ids(self) -> tuple[str, ...]:
        return tuple(self._properties)

    def item_property(self, property_id: str) -> BookProperty:
        try:
            return self._properties[property_id]
        except KeyError:
            raise UnknownPropertyError(property_id, type(self._bean)) from None

    # ---- Qt properties ----
    def _get_title(self) -> str:
        return _as_text(self._bean.title)

    def _set_title(self, value: str) -> None:
        self.item_property("title").set_value(value)

    title = Property(str, _get_title, _set_title, notify=titleChanged)  # type: ignore[arg-type]

    def _get_author(self) -> str:
        return _as_text(self._bean.author)

    def _set_author(self, value: str) -> None:
        self.item_property("author").set_value(value)

    author = Property(str, _get_author, _set_author, notify=authorChanged)  # type: ignore[arg-type]


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)
