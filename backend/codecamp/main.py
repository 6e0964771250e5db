"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the Code Camp API.
Controllers are intentionally thin: they accept requests, delegate to
services, and convert the service result into a response.

Endpoints implemented:
- GET /api/camps
- GET /api/camps/search
- GET /api/camps/{moniker}
- POST /api/camps
- PUT /api/camps/{moniker}
- DELETE /api/camps/{moniker}
- GET /api/camps/{moniker}/talks
- GET /api/camps/{moniker}/talks/{talk_id}
- POST /api/camps/{moniker}/talks
- PUT /api/camps/{moniker}/talks/{talk_id}
- DELETE /api/camps/{moniker}/talks/{talk_id}
- GET /health
"""

from fastapi import FastAPI, Depends, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from sqlmodel import Session
from datetime import date
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import services
from .links import LinkGenerator, get_link_generator
from .results import Failure, Result
from .schemas import CampModel, TalkModel
from .config import settings

app = FastAPI(title="Code Camp API")
logger = logging.getLogger("codecamp.api")
if not logging.getLogger().handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Request-ID"],
    )

create_db_and_tables()


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if request.url.path.startswith("/api"):
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies and query strings as 400 Bad Request."""
    logger.info("validation_failed %s %s: %d error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def _respond(result: Result):
    """Convert a service result into an HTTP response.

    Failures are raised as `HTTPException` with the failure message as
    `detail`; successes are serialized with their camelCase aliases.
    """
    if isinstance(result, Failure):
        raise HTTPException(status_code=result.status_code, detail=result.message)
    if result.value is None:
        return Response(status_code=result.status_code)
    headers = {"Location": result.location} if result.location else None
    return JSONResponse(status_code=result.status_code, content=jsonable_encoder(result.value), headers=headers)


def _camps(db: Session = Depends(get_session), links: LinkGenerator = Depends(get_link_generator)) -> services.CampService:
    return services.CampService(db, links)


def _talks(db: Session = Depends(get_session), links: LinkGenerator = Depends(get_link_generator)) -> services.TalkService:
    return services.TalkService(db, links)


@app.get('/api/camps', response_model=list[CampModel])
def list_camps(include_talks: bool = Query(False, alias='includeTalks'), svc: services.CampService = Depends(_camps)):
    """List every camp, optionally with its talks and their speakers."""
    return _respond(svc.list_camps(include_talks))


@app.get('/api/camps/search', response_model=list[CampModel])
def search_camps(
    the_date: date = Query(..., alias='theDate'),
    include_talks: bool = Query(False, alias='includeTalks'),
    svc: services.CampService = Depends(_camps),
):
    """Return the camps held on `theDate`; 404 when there are none."""
    return _respond(svc.search_by_date(the_date, include_talks))


@app.get('/api/camps/{moniker}', response_model=CampModel)
def get_camp(moniker: str, svc: services.CampService = Depends(_camps)):
    return _respond(svc.get_camp(moniker))


@app.post('/api/camps', status_code=201, response_model=CampModel)
def create_camp(model: CampModel, svc: services.CampService = Depends(_camps)):
    """Create a camp; the `Location` header points at the new resource."""
    return _respond(svc.create_camp(model))


@app.put('/api/camps/{moniker}', response_model=CampModel)
def update_camp(moniker: str, model: CampModel, svc: services.CampService = Depends(_camps)):
    return _respond(svc.update_camp(moniker, model))


@app.delete('/api/camps/{moniker}')
def delete_camp(moniker: str, svc: services.CampService = Depends(_camps)):
    return _respond(svc.delete_camp(moniker))


@app.get('/api/camps/{moniker}/talks', response_model=list[TalkModel])
def list_talks(moniker: str, svc: services.TalkService = Depends(_talks)):
    """List the talks of a camp with their speakers."""
    return _respond(svc.list_talks(moniker))


@app.get('/api/camps/{moniker}/talks/{talk_id:int}', response_model=TalkModel)
def get_talk(moniker: str, talk_id: int, svc: services.TalkService = Depends(_talks)):
    return _respond(svc.get_talk(moniker, talk_id))


@app.post('/api/camps/{moniker}/talks', status_code=201, response_model=TalkModel)
def create_talk(moniker: str, model: TalkModel, svc: services.TalkService = Depends(_talks)):
    """Create a talk under a camp.

    The body must reference an existing speaker through
    `speaker.speakerId`.
    """
    return _respond(svc.create_talk(moniker, model))


@app.put('/api/camps/{moniker}/talks/{talk_id:int}', response_model=TalkModel)
def update_talk(moniker: str, talk_id: int, model: TalkModel, svc: services.TalkService = Depends(_talks)):
    """Update a talk; a supplied speaker reference replaces the current one."""
    return _respond(svc.update_talk(moniker, talk_id, model))


@app.delete('/api/camps/{moniker}/talks/{talk_id:int}')
def delete_talk(moniker: str, talk_id: int, svc: services.TalkService = Depends(_talks)):
    return _respond(svc.delete_talk(moniker, talk_id))


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
