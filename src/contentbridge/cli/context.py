from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from contentbridge.application.services.file_handler_channel import (
    FileHandlerChannel,
    build_file_handler_channel,
)
from contentbridge.application.services.project_service import ProjectService
from contentbridge.core.config import BridgePaths, BridgeSettings
from contentbridge.infrastructure.db.repos.document_repo import DocumentRepo
from contentbridge.infrastructure.host.document_provider import LocalDocumentProvider


@dataclass(slots=True)
class CLIContext:
    paths: BridgePaths
    settings: BridgeSettings
    console: Console

    def provider(self) -> LocalDocumentProvider:
        ProjectService(self.paths).require_initialized()
        return LocalDocumentProvider(DocumentRepo(self.paths.db_path), self.settings.provider_authority)

    def channel(self) -> FileHandlerChannel:
        return build_file_handler_channel(self.provider(), self.settings)
