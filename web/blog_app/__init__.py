"""
Flask Application Factory
"""
from flask import Flask
from typing import Optional

from .config import BACKENDS, Config, ConfigurationError
from .model.database import Database
from .model.article_model import ArticleModel
from .model.memory_store import MemoryArticleStore


class FlaskApp:
    """Flask application factory for the memory and mongo backends"""

    def __init__(self, store: Optional[MemoryArticleStore] = None):
        self._app: Optional[Flask] = None
        self._store = store

    def create_app(self, config: Optional[dict] = None) -> Flask:
        """Create and configure the Flask application"""
        self._app = Flask(__name__, static_folder=None)

        # Default configuration from environment variables
        self._app.config.update(Config.as_flask_config())
        self._app.json.sort_keys = False

        # Update with custom config if provided
        if config:
            self._app.config.update(config)

        backend = self._app.config['BACKEND']
        if backend not in BACKENDS:
            raise ConfigurationError(
                f"Unknown BACKEND '{backend}'. Expected one of: {', '.join(BACKENDS)}."
            )

        self._register_greeting_routes()

        if backend == 'memory':
            self._register_memory_routes()
        else:
            self._register_mongo_routes()

        return self._app

    def _register_greeting_routes(self):
        from .controller.greeting_controller import GreetingController

        greeting = GreetingController()

        self._app.add_url_rule('/hello', 'hello', greeting.hello)
        self._app.add_url_rule('/hello', 'hello_post', greeting.hello_from_body, methods=['POST'])
        self._app.add_url_rule('/hello/<name>', 'hello_name', greeting.hello_name)

    def _register_memory_routes(self):
        """Register article routes backed by the in-memory store"""
        from .controller.article_controller import MemoryArticleController

        if self._store is None:
            self._store = MemoryArticleStore()
        articles = MemoryArticleController(self._store)

        self._app.add_url_rule('/api/articles/<name>/upvote', 'api_article_upvote',
                               articles.upvote, methods=['POST'])
        self._app.add_url_rule('/api/articles/<name>/add-comment', 'api_article_add_comment',
                               articles.add_comment, methods=['POST'])

    def _register_mongo_routes(self):
        """Register article routes backed by MongoDB plus the frontend bundle"""
        from .controller.article_controller import ArticleController
        from .controller.static_controller import StaticController

        database = Database(
            connection_string=self._app.config['MONGODB_URI'],
            database_name=self._app.config['DATABASE_NAME']
        )
        model = ArticleModel(database, collection_name=self._app.config['COLLECTION_NAME'])
        articles = ArticleController(model)

        # API routes
        self._app.add_url_rule('/api/articles/<name>', 'api_article', articles.get_article)
        self._app.add_url_rule('/api/articles/<name>/upvote', 'api_article_upvote',
                               articles.upvote, methods=['POST'])
        self._app.add_url_rule('/api/articles/<name>/add-comment', 'api_article_add_comment',
                               articles.add_comment, methods=['POST'])
        self._app.add_url_rule('/api/articles/<name>/clear', 'api_article_clear', articles.clear)

        # Every other GET goes to the frontend bundle
        frontend = StaticController(self._app.config['STATIC_FOLDER'])
        self._app.add_url_rule('/', 'frontend_index', frontend.serve)
        self._app.add_url_rule('/<path:path>', 'frontend', frontend.serve)


def create_app(config: Optional[dict] = None, store: Optional[MemoryArticleStore] = None) -> Flask:
    """Factory function to create Flask app"""
    app_factory = FlaskApp(store)
    return app_factory.create_app(config)
