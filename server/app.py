from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from tictactoe.core import GameNotFoundError, GameState, InvalidMoveError, PersistenceError
from tictactoe.data import GameRepository, close_db, create_tables, get_session, get_settings, init_db
from tictactoe.services import GameService
from tictactoe.settings import get_server_settings
from .schemas import ErrorResponse, GameResponse, MoveRequest

settings = get_server_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

BAD_REQUEST_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
NOT_FOUND_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.5"
UNAVAILABLE_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.6.4"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    logger.info("Starting Tic-Tac-Toe server")
    await init_db()
    if get_settings().db_create_tables:
        await create_tables()

    yield

    logger.info("Shutting down server")
    await close_db()


app = FastAPI(
    title=settings.title,
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.enable_docs else None,
)


# ---- Dependencies ----
async def get_repo(session: AsyncSession = Depends(get_session)) -> GameRepository:
    return GameRepository(session)


async def get_game_service(repo: GameRepository = Depends(get_repo)) -> GameService:
    return GameService(repo)


# ---- Error mapping ----
def _error(status: int, type_: str, title: str, detail: str) -> JSONResponse:
    body = ErrorResponse(type=type_, title=title, status=status, detail=detail)
    return JSONResponse(status_code=status, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    reasons = [err.get("msg", "Invalid value") for err in exc.errors()]
    detail = "Invalid move: " + "; ".join(reasons) + "."
    return _error(400, BAD_REQUEST_TYPE, "Invalid move", detail)


@app.exception_handler(InvalidMoveError)
async def invalid_move_handler(request: Request, exc: InvalidMoveError):
    return _error(400, BAD_REQUEST_TYPE, "Invalid move", f"Invalid move: {exc.message}.")


@app.exception_handler(GameNotFoundError)
async def game_not_found_handler(request: Request, exc: GameNotFoundError):
    return _error(404, NOT_FOUND_TYPE, "Game not found", str(exc))


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return _error(503, UNAVAILABLE_TYPE, "Storage unavailable", str(exc))


def _game_response(response: Response, game: GameState) -> GameResponse:
    response.headers["ETag"] = f'"{game.etag}"'
    return GameResponse.from_state(game)


# ---- Game Endpoints ----

@app.post("/api/Game", response_model=GameResponse)
async def create_game(response: Response, service: GameService = Depends(get_game_service)):
    """Create a new game. Any request body is ignored."""
    game = await service.create_game()
    return _game_response(response, game)


@app.get(
    "/api/Game/{game_id}",
    response_model=GameResponse,
    responses={404: {"description": "Game not found (empty body)"}},
)
async def get_game(game_id: str, response: Response, service: GameService = Depends(get_game_service)):
    try:
        game = await service.get_game(game_id)
    except GameNotFoundError:
        return Response(status_code=404)
    return _game_response(response, game)


@app.post(
    "/api/Game/{game_id}/moves",
    response_model=GameResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def make_move(
    game_id: str,
    move: MoveRequest,
    response: Response,
    service: GameService = Depends(get_game_service),
):
    """Apply one move for `move.player` at `move.position`."""
    game = await service.make_move(game_id, move.position, move.player)
    return _game_response(response, game)


@app.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host=settings.host, port=settings.port)
