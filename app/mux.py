import json
import logging
import re
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import urlsplit

from app.errors import (
    DOMAIN_ERRORS,
    HOME_PAGE,
    InvalidContentLength,
    error_body,
    error_status,
)
from domain import services
from domain.repository import RecipeStore
from domain.slug import SLUG_PATTERN


logger = logging.getLogger(__name__)


HOME_RE = re.compile(r"^/$")
RECIPES_RE = re.compile(r"^/recipes/*$")
RECIPE_RE = re.compile(f"^/recipes/({SLUG_PATTERN})$")


# (method, path regex, handler method name)
ROUTES = (
    ("GET", HOME_RE, "home"),
    ("GET", RECIPES_RE, "list_recipes"),
    ("POST", RECIPES_RE, "create_recipe"),
    ("GET", RECIPE_RE, "get_recipe"),
    ("PUT", RECIPE_RE, "update_recipe"),
    ("DELETE", RECIPE_RE, "delete_recipe"),
)


class RecipesHTTPServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, server_address: tuple[str, int], store: RecipeStore) -> None:
        super().__init__(server_address, RecipesRequestHandler)
        self.store = store


class RecipesRequestHandler(BaseHTTPRequestHandler):
    server: RecipesHTTPServer

    def do_GET(self) -> None:
        self.route("GET")

    def do_POST(self) -> None:
        self.route("POST")

    def do_PUT(self) -> None:
        self.route("PUT")

    def do_DELETE(self) -> None:
        self.route("DELETE")

    @property
    def store(self) -> RecipeStore:
        return self.server.store

    def route(self, method: str) -> None:
        path = urlsplit(self.path).path
        path_matched = False
        for route_method, pattern, name in ROUTES:
            match = pattern.match(path)
            if match is None:
                continue
            path_matched = True
            if route_method == method:
                self.handle_route(name, *match.groups())
                return

        if path_matched:
            self.send_json(
                {"error": HTTPStatus.METHOD_NOT_ALLOWED.phrase},
                HTTPStatus.METHOD_NOT_ALLOWED,
            )
        else:
            self.send_json({"error": HTTPStatus.NOT_FOUND.phrase}, HTTPStatus.NOT_FOUND)

    def handle_route(self, name: str, *args: str) -> None:
        try:
            getattr(self, name)(*args)
        except DOMAIN_ERRORS as e:
            self.send_json(error_body(e), error_status(e))
        except Exception as e:
            logger.exception("%s %s failed", self.command, self.path)
            self.send_json(error_body(e), error_status(e))

    def read_body(self) -> bytes:
        value = self.headers.get("Content-Length") or "0"
        try:
            length = int(value)
        except ValueError:
            raise InvalidContentLength(value) from None
        if length < 0:
            raise InvalidContentLength(value)
        return self.rfile.read(length)

    def send_json(self, body: Any, status: int = HTTPStatus.OK) -> None:
        data = json.dumps(body).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def home(self) -> None:
        data = HOME_PAGE.encode("utf-8")
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)

    def list_recipes(self) -> None:
        recipes = services.list_recipes(store=self.store)
        self.send_json({id: recipe.to_dict() for id, recipe in recipes.items()})

    def create_recipe(self) -> None:
        id, _ = services.create_recipe(self.read_body(), store=self.store)
        logger.info("Created recipe %s", id)
        self.send_json({"status": "success", "id": id}, HTTPStatus.CREATED)

    def get_recipe(self, id: str) -> None:
        self.send_json(services.get_recipe(id, store=self.store).to_dict())

    def update_recipe(self, id: str) -> None:
        services.update_recipe(id, self.read_body(), store=self.store)
        logger.info("Updated recipe %s", id)
        self.send_json({"status": "success"})

    def delete_recipe(self, id: str) -> None:
        services.delete_recipe(id, store=self.store)
        logger.info("Removed recipe %s", id)
        self.send_json({"status": "success"})

    def log_message(self, format: str, *args: Any) -> None:
        logger.info("%s - %s", self.address_string(), format % args)
