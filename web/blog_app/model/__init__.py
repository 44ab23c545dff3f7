"""Model package - Article storage backends"""
from .database import Database
from .article_model import ArticleModel
from .memory_store import MemoryArticleStore, SEED_ARTICLES

__all__ = ['Database', 'ArticleModel', 'MemoryArticleStore', 'SEED_ARTICLES']
