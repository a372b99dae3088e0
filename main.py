import logging

from rich.logging import RichHandler
import uvicorn
from werkzeug.serving import run_simple

from app.app import create_app
from app.mux import RecipesHTTPServer
from app.router import RecipesRouter
import config
from domain.repository import MemoryRecipeStore, RecipeStore


logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


def serve(store: RecipeStore, cfg: config.Config) -> None:
    logger.info("Serving recipes with %s on %s:%s", cfg.router.value, cfg.host, cfg.port)
    match cfg.router:
        case config.Router.starlette:
            uvicorn.run(
                create_app(store, debug=cfg.env == config.Env.local),
                host=cfg.host,
                port=cfg.port,
                log_level=cfg.log_level.lower(),
            )
        case config.Router.werkzeug:
            run_simple(cfg.host, cfg.port, RecipesRouter(store), threaded=True)
        case config.Router.stdlib:
            with RecipesHTTPServer((cfg.host, cfg.port), store) as server:
                try:
                    server.serve_forever()
                except KeyboardInterrupt:
                    logger.info("Shutting down")


def main() -> None:
    cfg = config.Config()
    setup_logging(cfg.log_level)
    store = MemoryRecipeStore(allow_overwrite=cfg.allow_overwrite)
    serve(store, cfg)


if __name__ == "__main__":
    main()
