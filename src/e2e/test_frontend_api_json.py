# src/e2e/test_frontend_api_json.py

from pathlib import Path

import pytest

from wordgraph.engine import Engine
import wordgraph_web.web as webmod


def _seed(tmp: Path) -> str:
    book = tmp / "book.txt"
    book.write_text("a b d\na c d\na c\n", encoding="utf-8")
    return str(book)


@pytest.fixture
def client(tmp_path: Path):
    eng = Engine()
    eng.build(_seed(tmp_path))
    webmod._engine = eng
    try:
        yield webmod.app.test_client()
    finally:
        webmod._engine = None
        eng.shutdown()


@pytest.mark.e2e
def test_health(client):
    rv = client.get("/api/health")
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["ok"] is True and data["ready"] is True
    assert data["nodes"] == 4


@pytest.mark.e2e
def test_path_found_and_missing(client):
    data = client.get("/api/path?src=A&dst=d").get_json()
    assert data["found"] is True
    assert data["path"] == ["a", "c", "d"]
    assert data["cost"] == pytest.approx(150.0)
    assert data["hops"] == 2

    missing = client.get("/api/path?src=d&dst=a").get_json()
    assert missing == {"src": "d", "dst": "a", "found": False}

    assert client.get("/api/path?src=a").status_code == 400


@pytest.mark.e2e
def test_hops_and_invalid_hops(client):
    data = client.get("/api/hops?src=a&hops=1").get_json()
    assert data["words"] == ["b", "c"] and data["count"] == 2
    assert client.get("/api/hops?src=a&hops=-1").status_code == 400
    assert client.get("/api/hops?src=a&hops=two").status_code == 400


@pytest.mark.e2e
def test_neighbors_and_generate(client):
    edges = client.get("/api/neighbors?word=a").get_json()["edges"]
    assert [(e["to"], e["count"]) for e in edges] == [("b", 1), ("c", 2)]
    assert edges[1]["weight"] == pytest.approx(50.0)

    gen = client.get("/api/generate?start=a&len=4").get_json()
    assert gen["words"] == ["a", "c", "d"] and gen["complete"] is False


@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "word graph" in r.data.decode("utf-8").lower()


def test_not_ready_engine_returns_503():
    webmod._engine = None
    r = webmod.app.test_client().get("/api/path?src=a&dst=b")
    assert r.status_code == 503
