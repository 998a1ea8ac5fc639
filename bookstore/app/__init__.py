"""Application state objects.

Widgets never touch a Book directly: they bind to the observable properties
of a ``BookItem`` (see ``bookstore.app.state``), and every write through one
of those properties is pushed to all other widgets bound to it.
"""
