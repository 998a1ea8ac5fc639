from __future__ import annotations

import html

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from bookstore.app.state.book_item import BookItem
from bookstore.binding import BoundLabel, BoundLineEdit
from bookstore.book import Book
from bookstore.field_group import FieldGroup
from bookstore.logger import get_logger

_logger = get_logger("views")

LIVE_DEMO_FRAGMENT = "livedemo"
PROPERTIES_FRAGMENT = "properties"
DEFAULT_BASE_URL = "http://example.org/book/"

TITLE_PROPERTY = "title"


class LiveDemoView(QWidget):
    """A read-only title label and a title editor sharing one Book property.

    Pressing Enter in the editor commits its text into the shared property;
    the label re-renders from the property, never from the editor.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setSpacing(8)

        row = QHBoxLayout()
        row.setSpacing(8)
        self.for_sale = QLabel("For Sale ")
        self.viewer = BoundLabel()
        self.viewer.setObjectName("viewer")
        row.addWidget(self.for_sale)
        row.addWidget(self.viewer)
        row.addStretch(1)
        layout.addLayout(row)

        self.editor = BoundLineEdit("Book Title", commit_on_enter=True)
        self.editor.setObjectName("big")
        editor_row = QHBoxLayout()
        editor_row.addWidget(QLabel(self.editor.caption()))
        editor_row.addWidget(self.editor, 1)
        # editor takes a quarter of the row
        editor_row.addStretch(3)
        layout.addLayout(editor_row)
        layout.addStretch(1)

        self.book = Book(title="Effective Java")
        self.item = BookItem(self.book, parent=self)

        title = self.item.item_property(TITLE_PROPERTY)
        self.editor.set_property_data_source(title)
        self.viewer.set_property_data_source(title)
        _logger.debug("live demo bound to %s", self.book)


class PropertiesDemoView(QWidget):
    """A form generated from the Book's fields, one editable row per property."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.form = QFormLayout(self)

        self.book = Book(title="Effective Java", author="Joshua Bloch")
        self.item = BookItem(self.book, parent=self)

        self.field_group = FieldGroup(Book)
        self.field_group.set_item_data_source(self.item)
        for property_id in self.field_group.unbound_property_ids():
            field = self.field_group.build_and_bind(property_id)
            self.form.addRow(field.caption(), field)
        _logger.debug("properties demo fields: %s", self.field_group.bound_property_ids())


def help_message(fragment: str, base_url: str = DEFAULT_BASE_URL) -> str:
    return (
        f"<h1>Please try {base_url}#{LIVE_DEMO_FRAGMENT} or {base_url}#{PROPERTIES_FRAGMENT}, "
        f"instead of {base_url}#{html.escape(fragment)}</h1>"
    )


class FragmentHelpView(QWidget):
    """Static message shown for an unrecognized navigation fragment."""

    def __init__(self, fragment: str, base_url: str = DEFAULT_BASE_URL, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.fragment = fragment
        layout = QVBoxLayout(self)
        self.message = QLabel(help_message(fragment, base_url))
        self.message.setTextFormat(Qt.TextFormat.RichText)
        self.message.setWordWrap(True)
        layout.addWidget(self.message)
        layout.addStretch(1)
