import functools
import logging
from typing import Any, Awaitable, Callable

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from app import config
from domain.catalog import RecipeCatalog
from domain.errors import GenerationError, InvalidInput, RecipeNotFound
from domain.services import generate_recipe, match_recipes
from domain.synthesizer import TemplateSynthesizer


CONFIG = config.Config()


logging.basicConfig(
    level=CONFIG.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


SERVER_ERROR = "Something went wrong. Please try again."


def aJSONResponse(
    route: Callable[..., Awaitable[Any | tuple[Any, int]]] | None = None,
    *,
    error_message: str = SERVER_ERROR,
):
    if route is None:
        return functools.partial(aJSONResponse, error_message=error_message)

    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> JSONResponse:
        try:
            resp = await route(*args, **kwargs)
        except RecipeNotFound as e:
            return JSONResponse({"error": f"Recipe not found: {e}"}, status_code=404)
        except GenerationError as e:
            return JSONResponse({"error": e.message}, status_code=e.status_code)
        except Exception:
            logger.exception("Unhandled error in %s", route.__name__)
            return JSONResponse({"error": error_message}, status_code=500)
        if not isinstance(resp, tuple):
            content, code = resp, 200
        else:
            content, code = resp
        return JSONResponse(content, status_code=code)

    return wrapper


async def ingredients_from_body(request: Request) -> Any:
    # Unparseable bodies surface as the route's 500 message.
    body = await request.json()
    if not isinstance(body, dict):
        return None
    return body.get("ingredients")


@aJSONResponse
async def list_recipes(request: Request) -> list[dict[str, Any]]:
    catalog: RecipeCatalog = request.app.state.catalog
    return [r.to_dict() for r in catalog.list_all()]


@aJSONResponse
async def recipe_detail(request: Request) -> dict[str, Any]:
    id = request.path_params["id"]
    catalog: RecipeCatalog = request.app.state.catalog
    recipe = catalog.find_by_id(id)
    if recipe is None:
        raise RecipeNotFound(id)
    return recipe.to_dict()


@aJSONResponse
async def ingredients(request: Request) -> list[str]:
    catalog: RecipeCatalog = request.app.state.catalog
    return list(catalog.search_ingredients(request.query_params.get("q", "")))


@aJSONResponse
async def match(request: Request) -> dict[str, Any]:
    selected = await ingredients_from_body(request)
    if selected is None:
        selected = []
    if not isinstance(selected, list):
        raise InvalidInput("ingredients must be a list")
    catalog: RecipeCatalog = request.app.state.catalog
    return match_recipes(selected, catalog=catalog).to_dict()


@aJSONResponse(error_message=GenerationError.default_message)
async def ai_recipe(request: Request) -> dict[str, Any]:
    raw = await ingredients_from_body(request)
    recipe = await generate_recipe(
        raw,
        synthesize=request.app.state.synthesizer,
        timeout=CONFIG.generation_timeout,
        max_ingredients=CONFIG.max_ingredients,
    )
    return recipe.to_dict()


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/api/recipes", list_recipes, methods=["GET"]),
        Route("/api/recipes/match", match, methods=["POST"]),
        Route("/api/recipes/{id}", recipe_detail, methods=["GET"]),
        Route("/api/ingredients", ingredients, methods=["GET"]),
        Route("/api/ai-recipe", ai_recipe, methods=["POST"]),
    ],
)

app.state.catalog = RecipeCatalog()
app.state.synthesizer = TemplateSynthesizer(delay=CONFIG.generation_delay)
