"""FastAPI application for Repo Manager."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..core.config import Config, get_config
from ..core.errors import InvalidRequestError, RepoManagerError
from ..core.logging_ import get_logger
from ..github import RepositoryMutator, RepositoryQueryEngine, SessionManager

logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: datetime
    version: str


class AuthStatusResponse(BaseModel):
    """Authentication status response."""
    authenticated: bool
    user: Optional[str] = None
    message: str


class VisibilityRequest(BaseModel):
    """Visibility change request."""
    private: Optional[bool] = None


def _error_body(request: Request, status_code: int, error: str, message: str) -> Dict[str, Any]:
    return {
        "timestamp": datetime.now().isoformat(),
        "status": status_code,
        "error": error,
        "message": message,
        "path": request.url.path,
    }


def _get_session(request: Request) -> SessionManager:
    return request.app.state.session


router = APIRouter()


@router.get("/auth/status", response_model=AuthStatusResponse, response_model_exclude_none=True)
def auth_status(request: Request):
    """Report whether the service holds an authenticated GitHub session."""
    session = _get_session(request)

    if session.is_authenticated():
        return AuthStatusResponse(
            authenticated=True,
            user=session.get_authenticated_identity(),
            message="Successfully authenticated with GitHub",
        )

    return AuthStatusResponse(
        authenticated=False,
        message=f"Not authenticated. Please set the {session.token_env} environment variable.",
    )


@router.get("/repositories", response_model=List[Dict[str, Any]])
def list_repositories(
    request: Request,
    visibility: Optional[str] = None,
    search: Optional[str] = None,
):
    """List repositories, optionally filtered by visibility and search text."""
    logger.debug(f"Fetching repositories with visibility: {visibility} and search: {search}")
    queries = RepositoryQueryEngine(_get_session(request))
    return [repo.to_dict() for repo in queries.list_filtered(visibility, search)]


@router.patch("/repositories/{repo_id}/visibility", response_model=Dict[str, Any])
def update_visibility(
    request: Request,
    repo_id: int,
    body: Optional[VisibilityRequest] = None,
):
    """Make a repository private or public."""
    if body is None or body.private is None:
        raise InvalidRequestError("Request body must contain a boolean 'private' field")

    logger.info(
        f"Toggling repository {repo_id} visibility to {'private' if body.private else 'public'}"
    )
    mutator = RepositoryMutator(_get_session(request))
    return mutator.set_visibility(repo_id, body.private).to_dict()


def create_app(
    config: Optional[Config] = None,
    session: Optional[SessionManager] = None,
) -> FastAPI:
    """Build the application around a GitHub session.

    The session is initialized during startup unless it already is; a
    missing or rejected token aborts startup.
    """
    config = config or get_config()
    session = session or SessionManager(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        if not session.is_authenticated():
            session.initialize()
        yield

    app = FastAPI(
        title="Repo Manager",
        description="Manage GitHub repository visibility",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.session = session
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RepoManagerError)
    async def handle_repo_manager_error(request: Request, exc: RepoManagerError):
        logger.error(f"{exc.error}: {exc}")
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(request, exc.status_code, exc.error, str(exc)),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unexpected error occurred: {exc}")
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request, 500, "Internal Server Error", "An unexpected error occurred"
            ),
        )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            version=__version__,
        )

    app.include_router(router, prefix=config.app.api_prefix)
    return app
