import pymssql
import pytest

from helix_hub.database import SqlClient
from helix_hub.exceptions import DatabaseError


class StaticPasswordProvider:
    async def get_password(self):
        return "p=w"


class FakeCursor:
    def __init__(self, connection):
        self.connection = connection
        self.rowcount = 0

    def execute(self, sql, params=None):
        self.connection.executed.append((sql, params))
        if self.connection.error:
            raise self.connection.error
        self.rowcount = len(self.connection.rows) or 1

    def fetchall(self):
        return self.connection.rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.executed = []
        self.committed = False
        self.closed = False
        self.cursor_kwargs = None

    def cursor(self, **kwargs):
        self.cursor_kwargs = kwargs
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def close(self):
        self.closed = True


@pytest.fixture
def connect(monkeypatch):
    calls = []
    state = {"connection": FakeConnection()}

    def fake_connect(**kwargs):
        calls.append(kwargs)
        return state["connection"]

    monkeypatch.setattr(pymssql, "connect", fake_connect)
    return calls, state


async def test_query_returns_dict_rows(connect):
    calls, state = connect
    state["connection"] = FakeConnection(rows=[{"Initials": "AA"}])
    client = SqlClient("helix-core-data", password_provider=StaticPasswordProvider())

    rows = await client.query("SELECT 1 WHERE x = %(x)s", {"x": 1})

    assert rows == [{"Initials": "AA"}]
    assert calls[0]["database"] == "helix-core-data"
    assert calls[0]["password"] == "p=w"
    assert calls[0]["encryption"] == "require"
    assert calls[0]["login_timeout"] == 30
    assert state["connection"].cursor_kwargs == {"as_dict": True}
    assert state["connection"].executed == [("SELECT 1 WHERE x = %(x)s", {"x": 1})]
    assert state["connection"].closed


async def test_execute_commits(connect):
    _, state = connect
    client = SqlClient("helix-core-data", password_provider=StaticPasswordProvider())

    assert await client.execute("UPDATE t SET a = 1") == 1
    assert state["connection"].committed
    assert state["connection"].executed == [("UPDATE t SET a = 1", None)]


async def test_query_error_raises_database_error(connect):
    _, state = connect
    state["connection"] = FakeConnection(error=pymssql.ProgrammingError("bad column"))
    client = SqlClient("helix-project-data", password_provider=StaticPasswordProvider())

    with pytest.raises(DatabaseError, match="SQL query failed."):
        await client.query("SELECT nope")
    assert state["connection"].closed
