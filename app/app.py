import functools
import logging
from typing import Any, Awaitable, Callable

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from app.errors import DOMAIN_ERRORS, HOME_PAGE, error_body, error_status
from domain import services
from domain.repository import RecipeStore


logger = logging.getLogger(__name__)


def aJSONResponse(route: Callable[..., Awaitable[Any | tuple[Any, int]]]):
    @functools.wraps(route)
    async def wrapper(request: Request) -> JSONResponse:
        try:
            resp = await route(request)
        except DOMAIN_ERRORS as e:
            return JSONResponse(error_body(e), status_code=error_status(e))
        except Exception as e:
            logger.exception("%s %s failed", request.method, request.url.path)
            return JSONResponse(error_body(e), status_code=error_status(e))
        if not isinstance(resp, tuple):
            body, code = resp, 200
        else:
            body, code = resp
        return JSONResponse(body, status_code=code)

    return wrapper


def _store(request: Request) -> RecipeStore:
    return request.app.state.store


async def homepage(request: Request) -> PlainTextResponse:
    return PlainTextResponse(HOME_PAGE)


@aJSONResponse
async def list_recipes(request: Request) -> dict[str, Any]:
    recipes = services.list_recipes(store=_store(request))
    return {id: recipe.to_dict() for id, recipe in recipes.items()}


@aJSONResponse
async def create_recipe(request: Request) -> tuple[dict[str, str], int]:
    body = await request.body()
    id, _ = services.create_recipe(body, store=_store(request))
    logger.info("Created recipe %s", id)
    return {"status": "success", "id": id}, 201


@aJSONResponse
async def get_recipe(request: Request) -> dict[str, Any]:
    id = request.path_params["id"]
    return services.get_recipe(id, store=_store(request)).to_dict()


@aJSONResponse
async def update_recipe(request: Request) -> dict[str, str]:
    id = request.path_params["id"]
    body = await request.body()
    services.update_recipe(id, body, store=_store(request))
    logger.info("Updated recipe %s", id)
    return {"status": "success"}


@aJSONResponse
async def delete_recipe(request: Request) -> dict[str, str]:
    id = request.path_params["id"]
    services.delete_recipe(id, store=_store(request))
    logger.info("Removed recipe %s", id)
    return {"status": "success"}


def create_app(store: RecipeStore, *, debug: bool = False) -> Starlette:
    app = Starlette(
        debug=debug,
        routes=[
            Route("/", homepage),
            Route("/recipes", list_recipes, methods=["GET"]),
            Route("/recipes", create_recipe, methods=["POST"]),
            Route("/recipes/{id}", get_recipe, methods=["GET"]),
            Route("/recipes/{id}", update_recipe, methods=["PUT"]),
            Route("/recipes/{id}", delete_recipe, methods=["DELETE"]),
        ],
    )
    app.state.store = store
    return app
