"""
Shared fixtures: an in-process stand-in for the MongoDB server.
"""
import copy
from unittest.mock import patch

import pytest
from bson import ObjectId

from blog_app import create_app
from blog_app.model.memory_store import MemoryArticleStore


class FakeCollection:
    """Implements the subset of pymongo's Collection used by ArticleModel."""

    def __init__(self, server, documents):
        self.server = server
        self.documents = documents

    def _match(self, query):
        for doc in self.documents:
            if all(doc.get(key) == value for key, value in query.items()):
                return doc
        return None

    def find_one(self, query):
        self.server.check_failure()
        doc = self._match(query)
        return copy.deepcopy(doc) if doc is not None else None

    def update_one(self, query, update):
        self.server.check_failure()
        self.server.updates.append((query, update))
        doc = self._match(query)
        if doc is None:
            return
        for field, value in update.get('$set', {}).items():
            doc[field] = copy.deepcopy(value)
        for field, value in update.get('$inc', {}).items():
            doc[field] = doc.get(field, 0) + value
        for field, value in update.get('$push', {}).items():
            doc.setdefault(field, []).append(copy.deepcopy(value))


class FakeMongoClient:
    def __init__(self, server, uri, **kwargs):
        self.server = server
        self.uri = uri
        self.kwargs = kwargs
        self.closed = False

    def __getitem__(self, database_name):
        self.server.database_names.append(database_name)
        return {'articles': FakeCollection(self.server, self.server.documents)}

    def close(self):
        self.closed = True


class FakeMongoServer:
    """Holds documents and every client opened against it."""

    def __init__(self, documents):
        self.documents = documents
        self.clients = []
        self.database_names = []
        self.updates = []
        self.fail_with = None

    def client(self, uri, **kwargs):
        client = FakeMongoClient(self, uri, **kwargs)
        self.clients.append(client)
        return client

    def check_failure(self):
        if self.fail_with is not None:
            raise self.fail_with

    def article(self, name):
        return next(doc for doc in self.documents if doc['name'] == name)


@pytest.fixture
def mongo_documents():
    return [
        {'_id': ObjectId(), 'name': 'learn-react', 'upvotes': 0, 'comments': []},
        {'_id': ObjectId(), 'name': 'learn-node', 'upvotes': 3, 'comments': [
            {'username': 'Ann', 'text': 'First!'},
        ]},
        {'_id': ObjectId(), 'name': 'my-thoughts-on-resumes', 'upvotes': 0, 'comments': []},
    ]


@pytest.fixture
def mongo_server(mongo_documents):
    """Patch MongoClient so every connection talks to an in-process server."""
    server = FakeMongoServer(mongo_documents)
    with patch('blog_app.model.database.MongoClient', side_effect=server.client):
        yield server


@pytest.fixture
def static_folder(tmp_path):
    (tmp_path / 'index.html').write_text('<div id="root"></div>')
    (tmp_path / 'app.js').write_text('console.log("bundle");')
    return tmp_path


@pytest.fixture
def mongo_app(mongo_server, static_folder):
    return create_app({
        'TESTING': True,
        'BACKEND': 'mongo',
        'MONGODB_URI': 'mongodb://localhost:27017',
        'DATABASE_NAME': 'my-blog',
        'COLLECTION_NAME': 'articles',
        'STATIC_FOLDER': str(static_folder),
    })


@pytest.fixture
def mongo_client(mongo_app):
    return mongo_app.test_client()


@pytest.fixture
def memory_store():
    return MemoryArticleStore()


@pytest.fixture
def memory_client(memory_store):
    app = create_app({'TESTING': True, 'BACKEND': 'memory'}, store=memory_store)
    return app.test_client()
