from __future__ import annotations

import re

from bookstore.app.state.book_item import BookItem
from bookstore.binding import BoundLineEdit
from bookstore.book import bindable_fields
from bookstore.errors import AlreadyBoundError, SourceNotBoundError, UnknownPropertyError
from bookstore.logger import get_logger

_logger = get_logger("field_group")


def caption_for(property_id: str) -> str:
    """Turn a property id into a form caption: ``first_name``/``firstName`` -> ``First Name``."""
    words = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", property_id).replace("_", " ").split()
    return " ".join(w[:1].upper() + w[1:] for w in words)


class FieldGroup:
    """Generates and binds one editable field per bindable property of a record type.

    The bindable properties are discovered from the record's dataclass fields,
    so adding a field to the record adds a row to every generated form.
    """

    def __init__(self, bean_type: type) -> None:
        self._bean_type = bean_type
        self._property_ids = bindable_fields(bean_type)
        self._item: BookItem | None = None
        self._fields: dict[str, BoundLineEdit] = {}

    def item_data_source(self) -> BookItem | None:
        return self._item

    def set_item_data_source(self, item: BookItem | None) -> None:
        self._item = item
        for property_id, field in self._fields.items():
            field.set_property_data_source(item.item_property(property_id) if item is not None else None)
        _logger.debug("field group item set: %s", item.bean() if item is not None else None)

    def unbound_property_ids(self) -> list[str]:
        if self._item is None:
            raise SourceNotBoundError("field group has no item data source")
        return [pid for pid in self._property_ids if pid not in self._fields]

    def bound_property_ids(self) -> list[str]:
        return list(self._fields)

    def field(self, property_id: str) -> BoundLineEdit:
        try:
            return self._fields[property_id]
        except KeyError:
            raise UnknownPropertyError(property_id, self._bean_type) from None

    def fields(self) -> list[BoundLineEdit]:
        return list(self._fields.values())

    def build_and_bind(self, property_id: str) -> BoundLineEdit:
        if property_id not in self._property_ids:
            raise UnknownPropertyError(property_id, self._bean_type)
        if property_id in self._fields:
            raise AlreadyBoundError(f"property {property_id!r} is already bound")

        field = BoundLineEdit(caption_for(property_id), immediate=True)
        field.setObjectName(f"field_{property_id}")
        self._fields[property_id] = field
        if self._item is not None:
            field.set_property_data_source(self._item.item_property(property_id))
        _logger.debug("built field for %s", property_id)
        return field

    def is_modified(self) -> bool:
        return any(f.is_modified() for f in self._fields.values())

    def commit(self) -> None:
        for field in self._fields.values():
            field.commit()

    def discard(self) -> None:
        for field in self._fields.values():
            field.discard()
