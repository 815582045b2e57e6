"""FastAPI application for the notomattic local JSON API."""

import logging
import secrets
from typing import Any, Literal

from fastapi import Body, Depends, FastAPI, HTTPException, Query, Request, Security
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .. import __version__
from ..core.errors import DefaultTemplateError, NoteError, NoteExistsError, NoteNotFoundError
from ..core.model import DAILY

log = logging.getLogger(__name__)

ERROR_STATUS: dict[type[NoteError], int] = {
    NoteNotFoundError: 404,
    NoteExistsError: 409,
    DefaultTemplateError: 403,
}


def create_app(runtime: Any, token: str | None = None, enable_cors: bool = False) -> FastAPI:
    """
    Create FastAPI application with runtime injected.

    Args:
        runtime: Runtime instance with store and notebook
        token: Bearer token for authentication (None to disable auth)
        enable_cors: Enable CORS middleware

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Notomattic API",
        description="Local JSON API for daily and standalone notes",
        version=__version__,
        docs_url="/docs" if token is None else None,
        redoc_url="/redoc" if token is None else None,
    )

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(NoteError)
    async def note_error_handler(request: Request, exc: NoteError) -> JSONResponse:
        status = next((ERROR_STATUS[t] for t in type(exc).__mro__ if t in ERROR_STATUS), 500)
        if status == 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status, content={"detail": str(exc)})

    if token:
        security_scheme = HTTPBearer(auto_error=False)

        async def verify_token(
            credentials: HTTPAuthorizationCredentials | None = Security(security_scheme),  # noqa: B008
        ) -> None:
            """Verify bearer token."""
            if credentials is None or credentials.credentials != token:
                raise HTTPException(status_code=401, detail="Invalid or missing token")
    else:

        async def verify_token() -> None:
            """No-op when auth is disabled."""
            return None

    notebook = runtime.notebook
    store = runtime.store
    templates = runtime.templates

    @app.get("/health")
    def health(auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    @app.get("/notes")
    def list_notes(auth: None = Depends(verify_token)) -> list[dict[str, Any]]:
        """List daily notes, then standalone notes."""
        return [n.as_dict() for n in store.list_notes()]

    @app.get("/notes/{kind}/{filename}")
    def read_note(
        kind: Literal["daily", "standalone"],
        filename: str,
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        """Read a note; unwritten notes come back empty."""
        content = store.read_note(filename, is_daily=kind == DAILY)
        return {"name": filename, "content": content}

    @app.put("/notes/{kind}/{filename}")
    def write_note(
        kind: Literal["daily", "standalone"],
        filename: str,
        content: str = Body(..., embed=True),
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        """Overwrite a note with new content."""
        store.write_note(filename, content, is_daily=kind == DAILY)
        return {"name": filename}

    @app.delete("/notes/{kind}/{filename}")
    def delete_note(
        kind: Literal["daily", "standalone"],
        filename: str,
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        store.delete_note(filename, is_daily=kind == DAILY)
        return {"name": filename, "deleted": True}

    @app.post("/links/scan")
    def scan_links(
        content: str = Body(..., embed=True, description="Note text"),
        auth: None = Depends(verify_token),
    ) -> list[dict[str, Any]]:
        """Resolve every [[link]] in the given text."""
        return [link.as_dict() for link in notebook.scan_links(content)]

    @app.post("/links/create")
    def create_note_from_link(
        name: str = Body(..., embed=True, description="Link text"),
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        """Create a standalone note for a link that does not resolve yet."""
        return {"filename": notebook.create_note_from_link(name)}

    @app.get("/backlinks/{filename}")
    def backlinks(filename: str, auth: None = Depends(verify_token)) -> list[dict[str, Any]]:
        """Notes linking to `filename`, in directory scan order."""
        return [b.as_dict() for b in notebook.get_backlinks(filename)]

    @app.get("/resolve")
    def resolve(
        ref: str = Query(..., description="Link reference"),
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        exists, target = notebook.resolve(ref)
        return {"text": ref, "target": target, "exists": exists}

    @app.get("/templates")
    def list_templates(auth: None = Depends(verify_token)) -> list[dict[str, Any]]:
        """Built-in templates, then custom ones."""
        return [t.as_dict() for t in templates.list_templates()]

    @app.get("/templates/{template_id}")
    def get_template(template_id: str, auth: None = Depends(verify_token)) -> dict[str, Any]:
        return templates.get_template(template_id).as_dict()

    @app.post("/templates")
    def save_template(
        name: str = Body(...),
        description: str = Body(""),
        icon: str = Body(""),
        content: str = Body(...),
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        """Create a custom template; the id is derived from the name."""
        return templates.save_template(name, description, icon, content).as_dict()

    @app.put("/templates/{template_id}")
    def update_template(
        template_id: str,
        name: str = Body(...),
        description: str = Body(""),
        icon: str = Body(""),
        content: str = Body(...),
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        return templates.update_template(template_id, name, description, icon, content).as_dict()

    @app.delete("/templates/{template_id}")
    def delete_template(template_id: str, auth: None = Depends(verify_token)) -> dict[str, Any]:
        templates.delete_template(template_id)
        return {"id": template_id, "deleted": True}

    @app.get("/templates/{template_id}/apply")
    def apply_template(template_id: str, auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Template body, unchanged."""
        return {"content": templates.apply_template(template_id)}

    @app.post("/templates/{template_id}/notes")
    def create_note_from_template(
        template_id: str,
        filename: str = Body(...),
        is_daily: bool = Body(False, alias="isDaily"),
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        """Create a note pre-filled from a template."""
        templates.create_note_from_template(store, filename, template_id, is_daily=is_daily)
        return {"filename": filename}

    return app


def generate_token() -> str:
    """Generate a random bearer token."""
    return secrets.token_urlsafe(32)
