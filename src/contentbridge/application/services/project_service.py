from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from contentbridge.core.config import BridgePaths
from contentbridge.core.errors import ProjectNotInitializedError
from contentbridge.core.files import ensure_directory
from contentbridge.infrastructure.db.sqlite import initialize_schema


@dataclass(slots=True)
class InitResult:
    paths_created: list[Path]
    db_path: Path


class ProjectService:
    def __init__(self, paths: BridgePaths) -> None:
        self.paths = paths

    def init_project(self) -> InitResult:
        paths_created: list[Path] = []

        if not self.paths.home_dir.exists():
            paths_created.append(self.paths.home_dir)
        ensure_directory(self.paths.home_dir)

        initialize_schema(self.paths.db_path)

        return InitResult(paths_created=paths_created, db_path=self.paths.db_path)

    def is_initialized(self) -> bool:
        return self.paths.db_path.exists()

    def require_initialized(self) -> None:
        if not self.is_initialized():
            raise ProjectNotInitializedError(
                f"Bridge is not initialized. Run 'contentbridge init' first in {self.paths.project_root}"
            )
