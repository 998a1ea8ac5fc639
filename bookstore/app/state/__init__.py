from bookstore.app.state.book_item import BookItem, BookProperty

__all__ = ["BookItem", "BookProperty"]
