"""
Exception types shared by the models and controllers.
"""


class BlogError(Exception):
    """Base class for article storage errors."""
    pass


class ArticleNotFoundError(BlogError):
    """Raised when a route references an article that does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Article {name} not found")
        self.name = name


class DatabaseError(BlogError):
    """Raised when connecting to or operating on MongoDB fails."""
    pass
