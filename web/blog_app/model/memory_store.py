"""
In-memory article store for running without a database
"""
import copy
import logging
from typing import Any, Dict, Optional

from ..errors import ArticleNotFoundError

logger = logging.getLogger(__name__)

SEED_ARTICLES = {
    'learn-react': {
        'upvotes': 0,
        'comments': [],
    },
    'learn-node': {
        'upvotes': 0,
        'comments': [],
    },
    'my-thoughts-on-resumes': {
        'upvotes': 0,
        'comments': [],
    },
}


class MemoryArticleStore:
    """Process-local article records, lost on restart"""

    def __init__(self, seed: Optional[Dict[str, Dict[str, Any]]] = None):
        self._articles = copy.deepcopy(SEED_ARTICLES if seed is None else seed)

    def _require(self, name: str) -> Dict[str, Any]:
        try:
            return self._articles[name]
        except KeyError:
            logger.warning(f"Article not found: {name}")
            raise ArticleNotFoundError(name) from None

    def get_article(self, name: str) -> Dict[str, Any]:
        return self._require(name)

    def upvote(self, name: str) -> Dict[str, Any]:
        article = self._require(name)
        article['upvotes'] += 1
        logger.info(f"{name} now has {article['upvotes']} upvotes")
        return article

    def add_comment(self, name: str, username: Optional[str], text: Optional[str]) -> Dict[str, Any]:
        article = self._require(name)
        article['comments'].append({'username': username, 'text': text})
        logger.info(f"Added comment by {username} to {name}")
        return article

