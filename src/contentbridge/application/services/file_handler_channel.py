from __future__ import annotations

import logging
from typing import Callable

from contentbridge.application.services.content_copy_service import ContentCopyService
from contentbridge.application.services.name_resolution_service import NameResolutionService
from contentbridge.core.config import BridgeSettings
from contentbridge.core.ids import new_request_id
from contentbridge.domain.models.method_call import (
    COPY_ERROR,
    GET_FILE_NAME_ERROR,
    INVALID_ARGUMENTS,
    MethodCall,
    MethodResult,
)
from contentbridge.infrastructure.host.ports import HostContentResolver

logger = logging.getLogger(__name__)

COPY_CONTENT_URI = "copyContentUri"
GET_FILE_NAME_FROM_CONTENT_URI = "getFileNameFromContentUri"


class FileHandlerChannel:
    """Routes named method calls to the copier and the name resolver.

    Every call returns a :class:`MethodResult`; nothing raised by a handler
    escapes :meth:`handle`.
    """

    def __init__(
        self,
        copier: ContentCopyService,
        name_resolver: NameResolutionService,
        channel_name: str,
    ) -> None:
        self.copier = copier
        self.name_resolver = name_resolver
        self.channel_name = channel_name
        self._methods: dict[str, Callable[[MethodCall], MethodResult]] = {
            COPY_CONTENT_URI: self._copy_content_uri,
            GET_FILE_NAME_FROM_CONTENT_URI: self._get_file_name,
        }

    @property
    def methods(self) -> list[str]:
        return sorted(self._methods)

    def handle(self, call: MethodCall) -> MethodResult:
        if call.request_id is None:
            call.request_id = new_request_id()

        handler = self._methods.get(call.method)
        if handler is None:
            logger.warning("[%s] Method not implemented on %s: %s", call.request_id, self.channel_name, call.method)
            return MethodResult.not_implemented()

        result = handler(call)
        logger.info("[%s] %s -> %s", call.request_id, call.method, result.status)
        return result

    def _copy_content_uri(self, call: MethodCall) -> MethodResult:
        content_uri = call.string_argument("contentUri")
        destination_path = call.string_argument("destinationPath")
        if content_uri is None or destination_path is None:
            return MethodResult.error(INVALID_ARGUMENTS, "Missing contentUri or destinationPath")

        try:
            copied = self.copier.copy(content_uri, destination_path)
        except Exception as exc:
            logger.error("[%s] Copy failed for %s", call.request_id, content_uri, exc_info=True)
            return MethodResult.error(COPY_ERROR, f"Failed to copy file: {exc}")
        return MethodResult.success(copied)

    def _get_file_name(self, call: MethodCall) -> MethodResult:
        content_uri = call.string_argument("contentUri")
        if content_uri is None:
            return MethodResult.error(INVALID_ARGUMENTS, "Missing contentUri")

        try:
            name = self.name_resolver.resolve_name(content_uri)
        except Exception as exc:
            logger.error("[%s] Name lookup failed for %s", call.request_id, content_uri, exc_info=True)
            return MethodResult.error(GET_FILE_NAME_ERROR, f"Failed to get file name: {exc}")
        return MethodResult.success(name)


def build_file_handler_channel(resolver: HostContentResolver, settings: BridgeSettings) -> FileHandlerChannel:
    copier = ContentCopyService(
        resolver,
        chunk_size=settings.copy_chunk_bytes,
        atomic=settings.atomic_copy,
    )
    return FileHandlerChannel(
        copier=copier,
        name_resolver=NameResolutionService(resolver),
        channel_name=settings.channel_name,
    )
