from __future__ import annotations

from PySide6.QtCore import Qt

from bookstore.book import Book
from bookstore.views import FragmentHelpView, LiveDemoView, PropertiesDemoView, help_message


def test_live_demo_label_follows_committed_title(qtbot):
    view = LiveDemoView()
    qtbot.addWidget(view)
    view.show()
    assert view.viewer.text() == "Effective Java"
    assert view.editor.text() == "Effective Java"

    view.editor.setText("Effective Java, 3rd Edition")
    assert view.viewer.text() == "Effective Java"

    qtbot.keyClick(view.editor, Qt.Key.Key_Return)

    assert view.viewer.text() == "Effective Java, 3rd Edition"
    assert view.book.title == "Effective Java, 3rd Edition"
    assert view.book.author is None


def test_live_demo_widgets_share_one_property(qtbot):
    view = LiveDemoView()
    qtbot.addWidget(view)

    title = view.item.item_property("title")
    assert view.viewer.property_data_source() is title
    assert view.editor.property_data_source() is title
    assert view.editor.caption() == "Book Title"
    assert view.editor.objectName() == "big"
    assert view.for_sale.text() == "For Sale "


def test_each_live_demo_owns_its_book(qtbot):
    first = LiveDemoView()
    second = LiveDemoView()
    qtbot.addWidget(first)
    qtbot.addWidget(second)

    first.editor.setText("Clean Code")
    first.editor.commit()

    assert first.viewer.text() == "Clean Code"
    assert second.viewer.text() == "Effective Java"
    assert first.book is not second.book


def test_properties_demo_exposes_exactly_book_fields(qtbot):
    view = PropertiesDemoView()
    qtbot.addWidget(view)

    assert view.field_group.bound_property_ids() == ["title", "author"]
    assert view.form.rowCount() == 2
    assert view.field_group.field("title").text() == "Effective Java"
    assert view.field_group.field("author").text() == "Joshua Bloch"


def test_properties_demo_writes_back_to_book(qtbot):
    view = PropertiesDemoView()
    qtbot.addWidget(view)
    view.show()
    author = view.field_group.field("author")

    author.setText("Brian Goetz")
    qtbot.keyClick(author, Qt.Key.Key_Return)

    assert view.book == Book("Effective Java", "Brian Goetz")


def test_help_view_names_fallback_and_fragment(qtbot):
    view = FragmentHelpView("nosuchpage")
    qtbot.addWidget(view)

    text = view.message.text()
    assert "#livedemo" in text
    assert "#properties" in text
    assert "nosuchpage" in text
    assert view.message.textFormat() == Qt.TextFormat.RichText


def test_help_message_escapes_fragment():
    message = help_message("<b>x</b>", "http://localhost/book/")
    assert "&lt;b&gt;x&lt;/b&gt;" in message
    assert "http://localhost/book/#livedemo" in message
