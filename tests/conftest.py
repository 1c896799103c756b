import pytest

from shark_server.api import create_app
from shark_server.api.store import RecordStore


@pytest.fixture
def store():
    """A fresh store built from the packaged seed."""
    return RecordStore.default()


@pytest.fixture
def app(store):
    app = create_app(store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def gql(client):
    """POST a GraphQL document and return (status_code, json body)."""
    def _post(query, variables=None, operation_name=None):
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        if operation_name is not None:
            payload["operationName"] = operation_name
        resp = client.post("/graphql", json=payload)
        return resp.status_code, resp.get_json()
    return _post
