"""Exceptions raised at the widget/property binding seam.

Reading or writing a Book field never fails; these only signal misuse of the
binding layer (unknown property ids, double binding, committing an unbound
field, writing a read-only handle).
"""

from __future__ import annotations


class BindingError(Exception):
    """Base class for binding errors."""


class UnknownPropertyError(BindingError, KeyError):
    """The property id is not a bindable field of the wrapped bean."""

    def __init__(self, property_id: object, bean_type: type | None = None) -> None:
        self.property_id = property_id
        self.bean_type = bean_type
        owner = bean_type.__name__ if bean_type is not None else "item"
        super().__init__(f"{owner} has no bindable property {property_id!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ReadOnlyPropertyError(BindingError):
    """A write was attempted through a read-only property handle."""


class SourceNotBoundError(BindingError):
    """A field was committed or discarded before a property was bound to it."""


class AlreadyBoundError(BindingError):
    """A field group was asked to bind the same property id twice."""
