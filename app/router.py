import json
import logging
from typing import Any, Iterable

from werkzeug.exceptions import HTTPException
from werkzeug.routing import Map, Rule
from werkzeug.wrappers import Request, Response

from app.errors import DOMAIN_ERRORS, HOME_PAGE, error_body, error_status
from domain import services
from domain.repository import RecipeStore


logger = logging.getLogger(__name__)


def json_response(body: Any, status: int = 200) -> Response:
    return Response(json.dumps(body), status=status, mimetype="application/json")


class RecipesRouter:
    """WSGI app dispatching through a Werkzeug url map.

    Endpoint names map onto `on_<endpoint>` methods.
    """

    def __init__(self, store: RecipeStore) -> None:
        self.store = store
        self.url_map = Map(
            [
                Rule("/", endpoint="home", methods=["GET"]),
                Rule("/recipes", endpoint="list_recipes", methods=["GET"]),
                Rule("/recipes", endpoint="create_recipe", methods=["POST"]),
                Rule("/recipes/<id>", endpoint="get_recipe", methods=["GET"]),
                Rule("/recipes/<id>", endpoint="update_recipe", methods=["PUT"]),
                Rule("/recipes/<id>", endpoint="delete_recipe", methods=["DELETE"]),
            ]
        )

    def on_home(self, request: Request) -> Response:
        return Response(HOME_PAGE, mimetype="text/plain")

    def on_list_recipes(self, request: Request) -> Response:
        recipes = services.list_recipes(store=self.store)
        return json_response({id: recipe.to_dict() for id, recipe in recipes.items()})

    def on_create_recipe(self, request: Request) -> Response:
        id, _ = services.create_recipe(request.get_data(), store=self.store)
        logger.info("Created recipe %s", id)
        return json_response({"status": "success", "id": id}, status=201)

    def on_get_recipe(self, request: Request, id: str) -> Response:
        return json_response(services.get_recipe(id, store=self.store).to_dict())

    def on_update_recipe(self, request: Request, id: str) -> Response:
        services.update_recipe(id, request.get_data(), store=self.store)
        logger.info("Updated recipe %s", id)
        return json_response({"status": "success"})

    def on_delete_recipe(self, request: Request, id: str) -> Response:
        services.delete_recipe(id, store=self.store)
        logger.info("Removed recipe %s", id)
        return json_response({"status": "success"})

    def dispatch_request(self, request: Request) -> Response | HTTPException:
        adapter = self.url_map.bind_to_environ(request.environ)
        try:
            endpoint, values = adapter.match()
            return getattr(self, f"on_{endpoint}")(request, **values)
        except HTTPException as e:
            return e
        except DOMAIN_ERRORS as e:
            return json_response(error_body(e), status=error_status(e))
        except Exception as e:
            logger.exception("%s %s failed", request.method, request.path)
            return json_response(error_body(e), status=error_status(e))

    def wsgi_app(self, environ: dict[str, Any], start_response: Any) -> Iterable[bytes]:
        request = Request(environ)
        response = self.dispatch_request(request)
        return response(environ, start_response)

    def __call__(self, environ: dict[str, Any], start_response: Any) -> Iterable[bytes]:
        return self.wsgi_app(environ, start_response)
