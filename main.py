import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from bson import ObjectId
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, load_settings
from database import FORMS_COLLECTION, PROJECTS_COLLECTION, DatabaseProvider, get_provider
from errors import ApiError, ErrorKind, methods_not_implemented, no_route_found
from schemas import CONTACT_FIELDS, ContactForm, project_view
from weather import fetch_weather

logger = logging.getLogger(__name__)

ALL_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")

# Connectivity check target; specific to the production store.
DIAGNOSTIC_DOCUMENT_ID = "67041a43daae89a8bdbd41ed"

router = APIRouter()


async def method_not_implemented():
    raise methods_not_implemented()


def not_implemented_except(path: str, *implemented: str):
    """Answer every verb other than ``implemented`` on ``path`` with 405."""
    router.add_api_route(
        path,
        method_not_implemented,
        methods=[m for m in ALL_METHODS if m not in implemented],
        include_in_schema=False,
    )


# Projects
@router.get("/projects")
def list_projects(provider: DatabaseProvider = Depends(get_provider)):
    try:
        db = provider.get_database()
        docs = db[PROJECTS_COLLECTION].find({}, {"_id": 0})
        return [project_view(d) for d in docs]
    except Exception as e:
        logger.exception("Error retrieving projects")
        raise ApiError.storage("Error retrieving data", e) from e


not_implemented_except("/projects", "GET")


@router.get("/projects/{projectId}")
def get_project(projectId: str, provider: DatabaseProvider = Depends(get_provider)):
    try:
        db = provider.get_database()
        doc = db[PROJECTS_COLLECTION].find_one({"id": projectId}, {"_id": 0})
    except Exception as e:
        logger.exception("Error retrieving project %r", projectId)
        raise ApiError.storage("Error retrieving project data", e) from e
    if not doc:
        raise ApiError(ErrorKind.PROJECT_NOT_FOUND, "Project not found", key="error")
    return doc


not_implemented_except("/projects/{projectId}", "GET")


# Contact form
@router.post("/sendForm", status_code=201)
async def send_form(request: Request, provider: DatabaseProvider = Depends(get_provider)):
    if request.headers.get("content-type") != "application/json":
        raise ApiError(ErrorKind.INVALID_CONTENT_TYPE, "Invalid Content-Type. Expected application/json.")

    try:
        data = await request.json()
    except ValueError:
        raise ApiError(ErrorKind.INVALID_JSON, "Invalid JSON format.")

    if not isinstance(data, dict) or not all(isinstance(data.get(f), str) and data.get(f) for f in CONTACT_FIELDS):
        raise ApiError(ErrorKind.MISSING_FIELDS, "Missing required fields: name, email, message.")

    # submittedDateTime is always stamped here, never taken from the client
    form = ContactForm(**{f: data[f] for f in CONTACT_FIELDS})
    try:
        db = await run_in_threadpool(provider.get_database)
        result = await run_in_threadpool(db[FORMS_COLLECTION].insert_one, form.model_dump())
    except Exception as e:
        logger.exception("Error adding contact form")
        raise ApiError.storage("Error adding data", e) from e

    logger.debug("Stored contact form %s", result.inserted_id)
    return {"message": "Form submitted successfully"}


not_implemented_except("/sendForm", "POST")


# Diagnostics
@router.get("/test")
def diagnostic_lookup(provider: DatabaseProvider = Depends(get_provider)):
    logger.info("Diagnostic lookup requested")
    try:
        db = provider.get_database()
        result = db[PROJECTS_COLLECTION].find_one({"_id": ObjectId(DIAGNOSTIC_DOCUMENT_ID)})
    except Exception as e:
        logger.exception("Database error during diagnostic lookup")
        raise ApiError.storage("Error retrieving data", e) from e
    if result is not None:
        result["_id"] = str(result["_id"])
    return {"message": "Data retrieved successfully", "result": result}


not_implemented_except("/test", "GET")


# Weather proxy
@router.get("/weather")
def weather(request: Request, lat: Optional[float] = None, lon: Optional[float] = None):
    settings: Settings = request.app.state.settings
    try:
        return fetch_weather(settings.openweather_api_key, lat, lon)
    except ApiError as e:
        if e.kind is ErrorKind.UPSTREAM:
            logger.warning("Weather lookup failed: %s", e.cause)
        raise


not_implemented_except("/weather", "GET")


# Error rendering
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def routing_error_handler(request: Request, exc: StarletteHTTPException):
    # Router misses: unknown path, or a verb no route on the path accepts.
    if exc.status_code == 404:
        return await api_error_handler(request, no_route_found())
    if exc.status_code == 405:
        return await api_error_handler(request, methods_not_implemented())
    return await http_exception_handler(request, exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected request parameters on %s: %s", request.url.path, exc.errors())
    return await api_error_handler(request, ApiError(ErrorKind.INVALID_PARAMETERS, "Invalid request parameters"))


def create_app(settings: Optional[Settings] = None, provider: Optional[DatabaseProvider] = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)
    provider = provider or DatabaseProvider(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        provider.close()

    app = FastAPI(title="Portfolio API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db_provider = provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, routing_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)
    return app


def run():
    # Same as: uvicorn main:create_app --factory --host 0.0.0.0 --port $PORT
    settings = load_settings()
    uvicorn.run("main:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
