"""Tests for the row routes: select, insert, update, delete."""

import pytest
from fastapi.testclient import TestClient

from roominspector.core.config import settings


def _rows_url(table: str = "notes") -> str:
    return f"{settings.API_PREFIX}/databases/notes/tables/{table}/rows"


def _rows(client: TestClient) -> list[list[str | None]]:
    return client.get(_rows_url()).json()["rows"]


# --- select ---


def test_select_row(client: TestClient) -> None:
    response = client.get(f"{_rows_url()}/1")
    assert response.status_code == 200
    assert response.json() == {
        "index": 1,
        "values": [
            {"column": "id", "value": "2"},
            {"column": "title", "value": "second"},
            {"column": "body", "value": None},
        ],
    }


def test_select_row_out_of_range(client: TestClient) -> None:
    response = client.get(f"{_rows_url()}/3")
    assert response.status_code == 404


# --- insert ---


def test_insert_row(client: TestClient) -> None:
    response = client.post(_rows_url(), json={"values": ["4", "fourth", "text"]})
    assert response.status_code == 201
    data = response.json()
    assert data["statement"] == "INSERT INTO notes VALUES('4','fourth','text')"
    assert data["rowcount"] == 1
    assert _rows(client)[-1] == ["4", "fourth", "text"]


def test_insert_row_with_quote_and_null(client: TestClient) -> None:
    response = client.post(_rows_url(), json={"values": ["5", "it's", None]})
    assert response.status_code == 201
    assert _rows(client)[-1] == ["5", "it's", None]


def test_insert_row_unescaped_quote_fails(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(settings, "ESCAPE_LITERALS", False)
    response = client.post(_rows_url(), json={"values": ["5", "it's", "x"]})
    assert response.status_code == 400
    assert len(_rows(client)) == 3


def test_insert_row_wrong_arity(client: TestClient) -> None:
    response = client.post(_rows_url(), json={"values": ["only-one"]})
    assert response.status_code == 400


# --- update ---


def test_update_row_by_snapshot(client: TestClient) -> None:
    body = {
        "values": [{"column": "title", "value": "edited"}],
        "match": [
            {"column": "id", "value": "1"},
            {"column": "title", "value": "first"},
            {"column": "body", "value": "hello"},
        ],
    }
    response = client.put(_rows_url(), json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["rowcount"] == 1
    assert data["statement"] == (
        "UPDATE notes SET title = 'edited' "
        "WHERE id = '1' AND title = 'first' AND body = 'hello'"
    )
    assert _rows(client)[0] == ["1", "edited", "hello"]


def test_update_row_matching_null(client: TestClient) -> None:
    body = {
        "values": [{"column": "body", "value": "filled"}],
        "match": [{"column": "id", "value": "2"}, {"column": "body", "value": None}],
    }
    response = client.put(_rows_url(), json=body)
    assert response.status_code == 200
    assert response.json()["rowcount"] == 1
    assert _rows(client)[1] == ["2", "second", "filled"]


def test_update_row_stale_snapshot_changes_nothing(client: TestClient) -> None:
    body = {
        "values": [{"column": "title", "value": "x"}],
        "match": [{"column": "title", "value": "not-there"}],
    }
    response = client.put(_rows_url(), json=body)
    assert response.status_code == 200
    assert response.json()["rowcount"] == 0


def test_update_row_empty_match(client: TestClient) -> None:
    body = {"values": [{"column": "title", "value": "x"}], "match": []}
    response = client.put(_rows_url(), json=body)
    assert response.status_code == 422


# --- delete ---


def test_delete_row_by_snapshot(client: TestClient) -> None:
    body = {"match": [{"column": "id", "value": "3"}]}
    response = client.post(f"{_rows_url()}/delete", json=body)
    assert response.status_code == 200
    assert response.json() == {"statement": "DELETE FROM notes WHERE id = '3'", "rowcount": 1}
    assert [r[0] for r in _rows(client)] == ["1", "2"]


def test_delete_row_unknown_column(client: TestClient) -> None:
    body = {"match": [{"column": "nope", "value": "3"}]}
    response = client.post(f"{_rows_url()}/delete", json=body)
    assert response.status_code == 400
    assert "no such column" in response.json()["detail"]


def test_delete_row_at_index(client: TestClient) -> None:
    response = client.delete(f"{_rows_url()}/1")
    assert response.status_code == 200
    data = response.json()
    assert data["statement"] == (
        "DELETE FROM notes WHERE id = '2' AND title = 'second' AND body IS NULL"
    )
    assert data["rowcount"] == 1
    assert [r[0] for r in _rows(client)] == ["1", "3"]


def test_delete_row_at_index_out_of_range(client: TestClient) -> None:
    response = client.delete(f"{_rows_url()}/10")
    assert response.status_code == 404


# --- duplicate rows and unmatched snapshots ---


def _run(client: TestClient, sql: str) -> None:
    response = client.post(
        f"{settings.API_PREFIX}/databases/notes/query", json={"sql": sql}
    )
    assert response.status_code == 200


def test_delete_row_at_index_removes_identical_rows(client: TestClient) -> None:
    _run(client, "CREATE TABLE d (a TEXT); INSERT INTO d VALUES('x'); INSERT INTO d VALUES('x')")
    response = client.delete(f"{_rows_url('d')}/0")
    assert response.status_code == 200
    assert response.json() == {"statement": "DELETE FROM d WHERE a = 'x'", "rowcount": 2}
    assert client.get(_rows_url("d")).json()["rows"] == []


def test_update_row_changes_identical_rows(client: TestClient) -> None:
    _run(
        client,
        "CREATE TABLE d (a TEXT, b TEXT);"
        "INSERT INTO d VALUES('x', '1'); INSERT INTO d VALUES('x', '1');"
        "INSERT INTO d VALUES('y', '1')",
    )
    body = {
        "values": [{"column": "a", "value": "z"}],
        "match": [{"column": "a", "value": "x"}, {"column": "b", "value": "1"}],
    }
    response = client.put(_rows_url("d"), json=body)
    assert response.status_code == 200
    assert response.json()["rowcount"] == 2
    assert client.get(_rows_url("d")).json()["rows"] == [
        ["z", "1"],
        ["z", "1"],
        ["y", "1"],
    ]


def test_delete_row_at_index_blob_not_matched(client: TestClient) -> None:
    _run(client, "CREATE TABLE b (a BLOB); INSERT INTO b VALUES(X'01FF')")
    assert client.get(f"{_rows_url('b')}/0").json()["values"] == [
        {"column": "a", "value": "01ff"}
    ]
    response = client.delete(f"{_rows_url('b')}/0")
    assert response.status_code == 409
    assert len(client.get(_rows_url("b")).json()["rows"]) == 1


def test_delete_row_at_index_untyped_integer_not_matched(client: TestClient) -> None:
    _run(client, "CREATE TABLE u (a); INSERT INTO u VALUES(5)")
    response = client.delete(f"{_rows_url('u')}/0")
    assert response.status_code == 409
    assert client.get(_rows_url("u")).json()["rows"] == [["5"]]
