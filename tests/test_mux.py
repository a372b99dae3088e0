from concurrent.futures import ThreadPoolExecutor
import socket
import threading
from typing import Iterator

import httpx
import pytest

from app.mux import RecipesHTTPServer
from domain.models import Recipe
from domain.repository import MemoryRecipeStore


@pytest.fixture
def server(store: MemoryRecipeStore) -> Iterator[RecipesHTTPServer]:
    server = RecipesHTTPServer(("127.0.0.1", 0), store)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


@pytest.fixture
def client(server: RecipesHTTPServer) -> Iterator[httpx.Client]:
    host, port = server.server_address[:2]
    with httpx.Client(base_url=f"http://{host}:{port}") as client:
        yield client


def send_raw(server: RecipesHTTPServer, request: bytes) -> bytes:
    host, port = server.server_address[:2]
    chunks: list[bytes] = []
    with socket.create_connection((host, port), timeout=3) as sock:
        sock.sendall(request)
        while chunk := sock.recv(4096):
            chunks.append(chunk)
    return b"".join(chunks)


def test_homepage(client: httpx.Client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "This is my home page"


def test_tomato_soup_lifecycle(client: httpx.Client) -> None:
    resp = client.post("/recipes", json={"name": "Tomato Soup"})
    assert resp.status_code == 201
    assert resp.json() == {"status": "success", "id": "tomato-soup"}

    resp = client.get("/recipes/tomato-soup")
    assert resp.status_code == 200
    assert resp.json() == {"name": "Tomato Soup"}

    resp = client.put("/recipes/tomato-soup", json={"name": "Tomato Soup", "servings": 4})
    assert resp.status_code == 200

    resp = client.get("/recipes/tomato-soup")
    assert resp.json() == {"name": "Tomato Soup", "servings": 4}

    resp = client.delete("/recipes/tomato-soup")
    assert resp.status_code == 200

    resp = client.get("/recipes/tomato-soup")
    assert resp.status_code == 404


@pytest.mark.parametrize("path", ("/recipes", "/recipes/"))
def test_list_recipes(
    client: httpx.Client, store: MemoryRecipeStore, path: str
) -> None:
    store.add("soup", Recipe(name="Soup"))
    resp = client.get(path)
    assert resp.status_code == 200
    assert resp.json() == {"soup": {"name": "Soup"}}


def test_single_word_id(client: httpx.Client) -> None:
    client.post("/recipes", json={"name": "Soup"})
    assert client.get("/recipes/soup").status_code == 200


@pytest.mark.parametrize("method", ("GET", "PUT", "DELETE"))
def test_unknown_recipe(client: httpx.Client, method: str) -> None:
    resp = client.request(method, "/recipes/carrot-cake", json={"name": "Carrot Cake"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Recipe not found: carrot-cake"}


def test_create_duplicate(client: httpx.Client) -> None:
    client.post("/recipes", json={"name": "Tomato Soup"})
    assert client.post("/recipes", json={"name": "Tomato Soup"}).status_code == 409


@pytest.mark.parametrize("content", (b"{not json", b"", b'{"name": null}'))
def test_create_bad_payload(client: httpx.Client, content: bytes) -> None:
    assert client.post("/recipes", content=content).status_code == 400


@pytest.mark.parametrize("path", ("/cookbooks", "/recipes/Tomato-Soup", "/recipes/a/b"))
def test_unknown_route(client: httpx.Client, path: str) -> None:
    assert client.get(path).status_code == 404


def test_method_not_allowed(client: httpx.Client) -> None:
    assert client.put("/recipes", json={"name": "Soup"}).status_code == 405


def test_concurrent_creates(client: httpx.Client, store: MemoryRecipeStore) -> None:
    def create(i: int) -> int:
        return client.post("/recipes", json={"name": f"Soup {i}"}).status_code

    with ThreadPoolExecutor(max_workers=10) as pool:
        codes = list(pool.map(create, range(100)))

    assert codes == [201] * 100
    assert len(store.list()) == 100


@pytest.mark.parametrize("length", (b"abc", b"-1"))
def test_create_bad_content_length(
    server: RecipesHTTPServer, store: MemoryRecipeStore, length: bytes
) -> None:
    resp = send_raw(
        server,
        b"POST /recipes HTTP/1.0\r\n"
        b"Content-Type: application/json\r\n"
        b"Content-Length: " + length + b"\r\n"
        b"\r\n",
    )
    status_line, _, body = resp.partition(b"\r\n")
    assert status_line.startswith(b"HTTP/1.0 400")
    assert b"Invalid Content-Length" in body
    assert store.list() == {}
