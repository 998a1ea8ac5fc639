from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass


@dataclass(unsafe_hash=True)
class Book:
    """The demo domain model: a mutable record with two string fields.

    Equality and hash are structural over (title, author). The hash follows
    the current field values, so a Book that is mutated while sitting in a
    set or dict key will no longer be found there.
    """

    title: str | None = None
    # Plain string; an Author record would be the richer model
    author: str | None = None

    def get_title(self) -> str | None:
        return self.title

    def set_title(self, value: str | None) -> None:
        self.title = value

    def get_author(self) -> str | None:
        return self.author

    def set_author(self, value: str | None) -> None:
        self.author = value

    def __str__(self) -> str:
        parts = ["Book ["]
        if self.title is not None:
            parts.append(f"title={self.title}, ")
        if self.author is not None:
            parts.append(f"author={self.author}")
        parts.append("]")
        return "".join(parts)


def bindable_fields(bean: type | object) -> tuple[str, ...]:
    """Return the names of a record's bindable properties in declaration order.

    Accepts either the dataclass itself or an instance of it.
    """
    if not dataclasses.is_dataclass(bean):
        raise TypeError(f"{bean!r} is not a dataclass record")
    return tuple(f.name for f in dataclasses.fields(bean) if f.init and not f.name.startswith("_"))


def field_type(bean: type | object, name: str) -> type:
    """Return the value type declared for a bindable field.

    Optional annotations resolve to their non-None member; string-valued
    fields are the common case and the fallback.
    """
    for f in dataclasses.fields(bean):
        if f.name == name:
            annotation = f.type
            if isinstance(annotation, str):
                # `from __future__ import annotations` leaves the text form
                members = [m.strip() for m in annotation.split("|")]
                head = next((m for m in members if m not in ("None", "")), "str")
                return {"str": str, "int": int, "float": float, "bool": bool}.get(head, str)
            if isinstance(annotation, type):
                return annotation
            members = [a for a in typing.get_args(annotation) if a is not type(None)]
            return members[0] if members and isinstance(members[0], type) else str
    raise KeyError(name)
