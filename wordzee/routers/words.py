from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse

from wordzee.core.config import get_settings
from wordzee.core.responses import error_response, ok_response, words_response
from wordzee.core.security import require_api_key
from wordzee.domain.rack import parse_letters
from wordzee.domain.words import WordError
from wordzee.services.word_service import WordService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wordzee", tags=["wordzee"])

DOCS_URL = "/docs"


def _get_word_service(request: Request) -> WordService:
    svc = getattr(getattr(request.app, "state", None), "word_service", None)
    if not svc:
        raise RuntimeError("WordService not configured")
    return svc


def _run(operation: Callable[[], Any], on_success: Callable[[Any], JSONResponse], log_message: str) -> JSONResponse:
    try:
        result = operation()
    except WordError as exc:
        return error_response(exc.message, exc.status_code)
    except Exception:
        logger.exception(log_message)
        return error_response("Internal server error", 500)
    return on_success(result)


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _admin_payload(request: Request) -> dict | None:
    """Admin body as JSON or as a classic HTML form post."""
    content_type = (request.headers.get("content-type") or "").split(";", 1)[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    body = await request.body()
    if not body:
        return None
    try:
        return await request.json()
    except ValueError:
        return None


def _body_field(payload: Any, name: str) -> str | None:
    if not isinstance(payload, dict):
        return None
    value = payload.get(name)
    return value if isinstance(value, str) else None


@router.get("")
@router.get("/", include_in_schema=False)
def find_words(request: Request, letters: str | None = None):
    """Words formable with the seven comma separated ``letters``."""
    if not request.query_params:
        return RedirectResponse(DOCS_URL, status_code=302)
    if letters is None:
        return error_response('Missing "letters" parameter', 400)
    svc = _get_word_service(request)
    max_age = get_settings().cache_max_age_seconds
    headers = {"Cache-Control": f"public, max-age={max_age}"}
    return _run(
        lambda: svc.search(parse_letters(letters)),
        lambda words: words_response(words, headers=headers),
        "Error while searching words",
    )


@router.get("/modified")
def last_modified(request: Request):
    svc = _get_word_service(request)
    return _run(
        svc.last_modified,
        lambda ts: ok_response({"timestamp": ts}),
        "Error while reading the modification timestamp",
    )


@router.post("/words", dependencies=[Depends(require_api_key)])
def create_word(request: Request, payload: Any = Depends(_admin_payload)):
    word = _body_field(payload, "word")
    if word is None:
        return error_response('Missing "word" parameter', 400)
    svc = _get_word_service(request)
    return _run(
        lambda: svc.create(word),
        lambda created: ok_response({"message": "Word created", "word": created}, status_code=201),
        "Error while creating word",
    )


@router.put("/words/{word}", dependencies=[Depends(require_api_key)])
def update_word(word: str, request: Request, payload: Any = Depends(_admin_payload)):
    new_word = _body_field(payload, "new_word")
    if new_word is None:
        return error_response('Missing "new_word" parameter', 400)
    svc = _get_word_service(request)
    return _run(
        lambda: svc.update(word, new_word),
        lambda renamed: ok_response(
            {"message": "Word updated", "old_word": renamed.old_word, "new_word": renamed.new_word}
        ),
        "Error while updating word",
    )


@router.delete("/words/{word}", dependencies=[Depends(require_api_key)])
def delete_word(word: str, request: Request):
    svc = _get_word_service(request)
    return _run(
        lambda: svc.delete(word),
        lambda deleted: ok_response({"message": "Word deleted", "word": deleted}),
        "Error while deleting word",
    )
