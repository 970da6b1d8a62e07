import json
import logging

from fastapi import FastAPI, Request, HTTPException, BackgroundTasks
from fastapi.responses import JSONResponse

from wordsearch.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordsearch")

# Populated at startup
_trie = None


def _load_trie():
    global _trie
    from wordsearch.dictionary import load_trie
    logger.info("Loading dictionary from %s (min_length=%d)",
                settings.DICTIONARY_PATH or "<built-in>", settings.MIN_WORD_LENGTH)
    _trie = load_trie(settings.DICTIONARY_PATH, settings.MIN_WORD_LENGTH)
    logger.info("Trie loaded")


async def _read_board_text(request: Request) -> str:
    data = await request.body()
    if not data:
        raise HTTPException(400, "Empty request body, no board received")

    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = json.loads(data)
        except ValueError:
            raise HTTPException(400, "Request body is not valid JSON")
        if not isinstance(body, dict) or not isinstance(body.get("board"), str):
            raise HTTPException(400, "JSON body must contain a 'board' string")
        return body["board"]

    # Fallback: plain-text board
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(400, "Board text is not valid UTF-8")


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        _load_trie()
        yield

    application = FastAPI(title="Word Search Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "trie_loaded": _trie is not None}

    @application.post("/solve")
    async def solve(request: Request, background_tasks: BackgroundTasks):
        from wordsearch.board import Board, BoardError
        from wordsearch.metrics import StageTimer
        from wordsearch.notifier import send_notification
        from wordsearch.solver import solve as solve_board

        if _trie is None:
            raise HTTPException(503, "Dictionary not loaded")

        text = await _read_board_text(request)
        timer = StageTimer()

        with timer.stage("parse"):
            try:
                board = Board.parse(text)
            except BoardError as e:
                logger.info("Rejected board %r: %s", text, e)
                raise HTTPException(400, f"Board error: {e}")
            if len(board.chars) > settings.MAX_BOARD_CELLS:
                raise HTTPException(413, f"Board too large (max {settings.MAX_BOARD_CELLS} cells)")

        logger.info("Board %dx%d: %s", board.width, board.height, " / ".join(board.rows()))

        with timer.stage("search"):
            matches = solve_board(board, _trie, unique=settings.UNIQUE_WORDS)
        timer.count("paths", len(matches))

        results = matches[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else matches
        logger.info("Found %d paths (returning %d)", len(matches), len(results))

        if settings.NOTIFY:
            background_tasks.add_task(
                send_notification, [m.word for m in matches], board.rows(),
                timer.summary(), settings.NTFY_TOPIC, settings.NTFY_URL,
            )

        payload = {
            "width": board.width,
            "height": board.height,
            "board": board.rows(),
            "words": [m.word for m in results],
            "paths": [list(m.path) for m in results],
            "word_count": len(results),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        }
        if settings.DEBUG:
            payload["cells"] = {str(k): v for k, v in board.chars.items()}
        return JSONResponse(payload)

    @application.get("/api/settings")
    async def api_get_settings():
        from wordsearch.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordsearch.settings import update_settings, get_editable_settings
        body = await request.json()
        if not isinstance(body, dict):
            raise HTTPException(400, "Settings body must be a JSON object")
        previous_min_length = settings.MIN_WORD_LENGTH
        errors = update_settings(settings, **body)
        if settings.MIN_WORD_LENGTH != previous_min_length:
            _load_trie()
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
