"""
Article Controller - Handles article upvote/comment routes
"""
from typing import Callable

from flask import jsonify

from . import json_body
from ..errors import ArticleNotFoundError, DatabaseError


def not_found(error: ArticleNotFoundError):
    return jsonify({
        "message": str(error),
        "error": "not_found"
    }), 404


class ArticleController:
    """Controller for article operations, returning JSON article records"""

    def __init__(self, articles):
        # Either an ArticleModel or a MemoryArticleStore
        self.articles = articles

    def _respond(self, action: Callable[[], dict]):
        try:
            return jsonify(action()), 200
        except ArticleNotFoundError as e:
            return not_found(e)
        except DatabaseError as e:
            return jsonify({
                "message": "Error connecting to db!",
                "error": str(e)
            }), 500

    def get_article(self, name: str):
        """API endpoint for a single article"""
        return self._respond(lambda: self.articles.get_article(name))

    def upvote(self, name: str):
        """API endpoint adding one upvote to the article"""
        return self._respond(lambda: self.articles.upvote(name))

    def add_comment(self, name: str):
        """API endpoint appending {username, text} to the article's comments"""
        data = json_body()
        username = data.get('username')
        text = data.get('text')
        return self._respond(lambda: self.articles.add_comment(name, username, text))

    def clear(self, name: str):
        """API endpoint resetting upvotes and comments"""
        return self._respond(lambda: self.articles.clear(name))


class MemoryArticleController(ArticleController):
    """Article controller for the in-memory backend, which reports upvotes as text"""

    def upvote(self, name: str):
        try:
            article = self.articles.upvote(name)
        except ArticleNotFoundError as e:
            return not_found(e)
        return f"{name} now has {article['upvotes']} upvotes!", 200
