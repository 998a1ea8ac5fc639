"""Two-way UI data binding demo over an in-memory Book."""
