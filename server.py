# server.py
from typing import List, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

import settings
from errors import SchedulingError
from logging_config import generate_request_id, get_logger, setup_structured_logging
from models import ErrorOut, MeetingIn, MeetingOut, Person, PersonIn, SuggestIn, SuggestOut
from scheduler import Scheduler
from timeslots import format_instant

logger = get_logger(__name__)

ERRORS = {400: {"model": ErrorOut}, 404: {"model": ErrorOut}, 409: {"model": ErrorOut}}


def get_scheduler(request: Request) -> Scheduler:
    return request.app.state.scheduler


def create_app(scheduler: Optional[Scheduler] = None) -> FastAPI:
    setup_structured_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    app = FastAPI(
        title="Scheduler API",
        version="1.0.0",
        description="API for managing persons and meetings",
    )
    app.state.scheduler = scheduler or Scheduler()

    @app.middleware("http")
    async def request_id(request: Request, call_next):
        rid = generate_request_id()
        structlog.contextvars.bind_contextvars(request_id=rid)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
        response.headers["X-Request-ID"] = rid
        return response

    @app.exception_handler(SchedulingError)
    async def scheduling_error(request: Request, exc: SchedulingError):
        logger.info("request_failed", path=request.url.path, status=exc.status_code, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        logger.warning("invalid_body", path=request.url.path, errors=str(exc.errors()))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    @app.post("/persons", response_model=Person, status_code=201, responses=ERRORS)
    async def create_person(args: PersonIn, sch: Scheduler = Depends(get_scheduler)):
        """Create a person with a name and unique email."""
        return await sch.register(args.name, args.email)

    @app.get("/persons/{person_id}/schedule", response_model=List[MeetingOut], responses=ERRORS)
    async def person_schedule(person_id: str, sch: Scheduler = Depends(get_scheduler)):
        """Upcoming meetings for a person."""
        return [MeetingOut.from_meeting(m) for m in sch.upcoming_for(person_id)]

    @app.post("/meetings", response_model=MeetingOut, status_code=201, responses=ERRORS)
    async def create_meeting(args: MeetingIn, sch: Scheduler = Depends(get_scheduler)):
        """Book a one-hour meeting starting on the hour for one or more persons."""
        meeting = await sch.create_meeting(args.time, args.participants)
        return MeetingOut.from_meeting(meeting)

    @app.post("/meetings/suggest", response_model=SuggestOut, responses=ERRORS)
    async def suggest(args: SuggestIn, sch: Scheduler = Depends(get_scheduler)):
        """Free hourly slots for a group, starting at the hour of `from`."""
        slots = sch.suggest_slots(args.participants or [], args.from_)
        return SuggestOut(slots=[format_instant(s) for s in slots])

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
