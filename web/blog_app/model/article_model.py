"""
Article Model - Upvote and comment operations backed by MongoDB
"""
import logging
from typing import Any, Dict, Optional

from ..errors import ArticleNotFoundError
from .database import Database

logger = logging.getLogger(__name__)


class ArticleModel:
    """Article data model with business logic"""

    def __init__(self, database: Database, collection_name: str = "articles"):
        self.db = database
        self.collection_name = collection_name

    def _find(self, db, name: str) -> Optional[Dict[str, Any]]:
        article = db[self.collection_name].find_one({"name": name})
        if article and '_id' in article:
            # Convert ObjectId to string for JSON serialization
            article['_id'] = str(article['_id'])
        return article

    def _require(self, db, name: str) -> Dict[str, Any]:
        article = self._find(db, name)
        if article is None:
            logger.warning(f"Article not found: {name}")
            raise ArticleNotFoundError(name)
        return article

    def _update(self, name: str, update: Dict[str, Any]) -> Dict[str, Any]:
        """Check the article exists, apply one update, then read it back"""
        def operation(db):
            self._require(db, name)
            db[self.collection_name].update_one({"name": name}, update)
            return self._require(db, name)

        return self.db.with_db(operation)

    def get_article(self, name: str) -> Dict[str, Any]:
        """Retrieve a single article by name"""
        return self.db.with_db(lambda db: self._require(db, name))

    def upvote(self, name: str) -> Dict[str, Any]:
        """Increment the article's upvote counter by one"""
        def operation(db):
            article = self._require(db, name)
            logger.info(f"{name} has this many upvotes {article.get('upvotes', 0)}")
            db[self.collection_name].update_one({"name": name}, {"$inc": {"upvotes": 1}})
            updated = self._require(db, name)
            logger.info(f"{name} has this many upvotes {updated.get('upvotes', 0)}")
            return updated

        return self.db.with_db(operation)

    def add_comment(self, name: str, username: Optional[str], text: Optional[str]) -> Dict[str, Any]:
        """Append one comment to the article's comment list"""
        article = self._update(name, {"$push": {"comments": {"username": username, "text": text}}})
        logger.info(f"Added comment by {username} to {name}")
        return article

    def clear(self, name: str) -> Dict[str, Any]:
        """Reset comments to empty and upvotes to zero"""
        article = self._update(name, {"$set": {"comments": [], "upvotes": 0}})
        logger.info(f"Cleared upvotes and comments for {name}")
        return article
