from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from contentbridge.application.services.file_handler_channel import (
    FileHandlerChannel,
    build_file_handler_channel,
)
from contentbridge.application.services.project_service import ProjectService
from contentbridge.core.config import BridgePaths, BridgeSettings, load_settings
from contentbridge.core.errors import DocumentPublishError, ProjectNotInitializedError
from contentbridge.domain.models.document import Document
from contentbridge.domain.models.method_call import MethodCall
from contentbridge.infrastructure.db.repos.document_repo import DocumentRepo
from contentbridge.infrastructure.host.document_provider import LocalDocumentProvider


class PublishDocumentRequest(BaseModel):
    path: str
    display_name: str | None = None
    use_filename: bool = True


class RevokeDocumentRequest(BaseModel):
    uri: str


class InvokeRequest(BaseModel):
    method: str
    arguments: dict[str, Any] = Field(default_factory=dict)
    request_id: str | None = None


def _document_payload(document: Document) -> dict[str, Any]:
    payload = asdict(document)
    payload["content_uri"] = document.content_uri
    return payload


def create_app(paths: BridgePaths, settings: BridgeSettings | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="Content Bridge", version="0.1.0")
    project_service = ProjectService(paths)

    def _provider() -> LocalDocumentProvider:
        try:
            project_service.require_initialized()
        except ProjectNotInitializedError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return LocalDocumentProvider(DocumentRepo(paths.db_path), settings.provider_authority)

    def _channel(name: str) -> FileHandlerChannel:
        if name != settings.channel_name:
            raise HTTPException(status_code=404, detail=f"Channel not found: {name}")
        return build_file_handler_channel(_provider(), settings)

    @app.get("/api/health")
    def health() -> dict[str, Any]:
        initialized = project_service.is_initialized()
        return {
            "ok": True,
            "channel": settings.channel_name,
            "authority": settings.provider_authority,
            "initialized": initialized,
            "documents": DocumentRepo(paths.db_path).count() if initialized else 0,
        }

    @app.post("/api/init")
    def init_project() -> dict[str, Any]:
        result = project_service.init_project()
        return {
            "ok": True,
            "paths_created": [str(p) for p in result.paths_created],
            "db_path": str(result.db_path),
        }

    @app.get("/api/documents")
    def list_documents(limit: int = 100, include_revoked: bool = False) -> dict[str, Any]:
        documents = _provider().list_documents(limit=limit, include_revoked=include_revoked)
        return {"count": len(documents), "documents": [_document_payload(d) for d in documents]}

    @app.post("/api/documents")
    def publish_document(req: PublishDocumentRequest) -> dict[str, Any]:
        provider = _provider()
        try:
            document = provider.publish(
                Path(req.path),
                display_name=req.display_name,
                use_filename=req.use_filename,
            )
        except DocumentPublishError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {"ok": True, "document": _document_payload(document)}

    @app.post("/api/documents/revoke")
    def revoke_document(req: RevokeDocumentRequest) -> dict[str, Any]:
        if not _provider().revoke(req.uri):
            raise HTTPException(status_code=404, detail=f"No active grant for {req.uri}")
        return {"ok": True, "uri": req.uri}

    @app.post("/api/channels/{channel:path}/invoke")
    def invoke(channel: str, req: InvokeRequest) -> dict[str, Any]:
        handler = _channel(channel)
        call = MethodCall(method=req.method, arguments=dict(req.arguments), request_id=req.request_id)
        result = handler.handle(call)
        payload = result.to_payload()
        payload["request_id"] = call.request_id
        return payload

    return app
