"""Conjugator FastAPI application - Japanese verb conjugation API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from models import (
    ConjugateFormRequest,
    ConjugateRequest,
    ConjugationError,
    ConjugationForm,
    ConjugationResult,
    ErrorCode,
    FormDefinitionResponse,
    HistoryEntry,
    KanaResponse,
    RomajiResponse,
    TextRequest,
    VerbInfo,
)
from conjugator import settings
from conjugator.classify import classify_verb
from conjugator.engine import conjugate, find_form
from conjugator.errors import ConjugatorError
from conjugator.forms import CONJUGATION_FORMS, get_form_definition
from conjugator.history import ConjugationHistory
from conjugator.romaji import romaji_to_hiragana, romaji_to_katakana, to_romaji

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

history = ConjugationHistory(settings.HISTORY_LIMIT)


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the loaded catalogue on startup."""
    logger.info(
        "Conjugator %s ready: %d forms, history limit %d",
        settings.VERSION, len(CONJUGATION_FORMS), history.max_entries,
    )
    yield


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Conjugator API",
    description="""Japanese verb conjugation API for language learning.

## Features
- **Classification**: Godan, ichidan and irregular verbs, including する/来る compounds
- **Conjugation**: 34 forms across 14 categories
- **Readings**: Kanji, hiragana and romaji for every form
- **Romaji**: Conversion between kana and romaji

## Endpoints
- `/conjugate` - All forms of a verb (GET `?verb=` restores a shared link)
- `/conjugate/form` - A single form by ID
- `/classify` - Verb class, stem and ending
- `/romaji`, `/kana` - Script conversion
- `/forms` - The form catalogue
- `/history` - Recently conjugated verbs
""",
    version=settings.VERSION,
    lifespan=lifespan,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _raise_for_error(error: ConjugationError) -> None:
    """Map an engine error value to an HTTP error."""
    status_code = 500 if error.code == ErrorCode.CONJUGATION_FAILED else 400
    raise HTTPException(status_code=status_code, detail=error.model_dump(mode="json"))


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "conjugator", "version": settings.VERSION}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": settings.VERSION}


# ============================================================================
# Conjugation Endpoints
# ============================================================================


def _conjugate_and_record(verb: str) -> ConjugationResult:
    result = conjugate(verb)
    if isinstance(result, ConjugationError):
        _raise_for_error(result)

    history.add(result)
    return result


@app.post("/conjugate", response_model=ConjugationResult, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugationResult:
    """
    Conjugate a verb in dictionary form to all 34 forms.

    Each form carries kanji, hiragana and romaji, plus its category and
    formality. Successful requests are recorded in the history.
    """
    return _conjugate_and_record(request.verb)


@app.get("/conjugate", response_model=ConjugationResult, tags=["Conjugation"])
async def conjugate_query_endpoint(
    verb: str = Query(..., max_length=50, description="Verb in dictionary form"),
) -> ConjugationResult:
    """Conjugate a verb given as a URL parameter (`/conjugate?verb=食べる`)."""
    return _conjugate_and_record(verb)


@app.post("/conjugate/form", response_model=ConjugationForm, tags=["Conjugation"])
async def conjugate_form_endpoint(request: ConjugateFormRequest) -> ConjugationForm:
    """
    Conjugate a verb to a single form.

    Accepts any catalogue ID, plus `potential-colloquial` for ichidan verbs.
    """
    if get_form_definition(request.form_id) is None:
        raise HTTPException(status_code=404, detail=f"Unknown form ID: {request.form_id}")

    result = conjugate(request.verb)
    if isinstance(result, ConjugationError):
        _raise_for_error(result)

    form = find_form(result, request.form_id)
    if form is None:
        raise HTTPException(
            status_code=404,
            detail=f"Form {request.form_id} is not available for {result.verb.dictionary_form}",
        )
    return form


@app.post("/classify", response_model=VerbInfo, tags=["Conjugation"])
async def classify_endpoint(request: ConjugateRequest) -> VerbInfo:
    """Classify a verb without conjugating it."""
    try:
        return classify_verb(request.verb)
    except ConjugatorError as e:
        _raise_for_error(e.to_error())


@app.get("/forms", response_model=list[FormDefinitionResponse], tags=["Conjugation"])
async def forms_endpoint() -> list[FormDefinitionResponse]:
    """List the 34 standard forms in display order."""
    return [
        FormDefinitionResponse(
            id=f.id,
            category=f.category,
            name=f.name,
            name_japanese=f.name_ja,
            formality=f.formality,
        )
        for f in CONJUGATION_FORMS
    ]


# ============================================================================
# Script Conversion Endpoints
# ============================================================================


@app.post("/romaji", response_model=RomajiResponse, tags=["Romaji"])
async def romaji_endpoint(request: TextRequest) -> RomajiResponse:
    """Convert kana to romaji; kanji and other characters pass through."""
    return RomajiResponse(text=request.text, romaji=to_romaji(request.text))


@app.post("/kana", response_model=KanaResponse, tags=["Romaji"])
async def kana_endpoint(request: TextRequest) -> KanaResponse:
    """Convert romaji to hiragana and katakana."""
    return KanaResponse(
        text=request.text,
        hiragana=romaji_to_hiragana(request.text),
        katakana=romaji_to_katakana(request.text),
    )


# ============================================================================
# History Endpoints
# ============================================================================


@app.get("/history", response_model=list[HistoryEntry], tags=["History"])
async def history_endpoint() -> list[HistoryEntry]:
    """Recently conjugated verbs, most recent first."""
    return history.entries()


@app.delete("/history", status_code=204, tags=["History"])
async def clear_history_endpoint() -> None:
    """Remove all history entries."""
    history.clear()


@app.delete("/history/{entry_id}", status_code=204, tags=["History"])
async def delete_history_endpoint(entry_id: str) -> None:
    """Remove one history entry."""
    if not history.delete(entry_id):
        raise HTTPException(status_code=404, detail=f"Unknown history entry: {entry_id}")


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
    )
