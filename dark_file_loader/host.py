"""Host pipeline context and a directory-backed output store."""
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

from .errors import EmitError

log = logging.getLogger(__name__)


class HostContext(Protocol):
    """What the loader needs from the pipeline running it."""
    root_context: str
    resource_path: str
    resource_query: str

    def get_options(self) -> Mapping[str, Any]:
        ...

    def emit_file(self, name: str, content: bytes, source_map: Optional[Any] = None,
                  info: Optional[dict[str, Any]] = None) -> None:
        ...


class DirectoryHost:
    """Host context for one source file that writes emitted assets into a directory."""

    def __init__(self, root_context: Path, resource_path: Path, output_dir: Path,
                 options: Optional[Mapping[str, Any]] = None, resource_query: str = ""):
        self.root_context = str(Path(root_context).resolve())
        self.resource_path = str(Path(resource_path).resolve())
        self.resource_query = resource_query
        self.output_dir = Path(output_dir)
        self._options = dict(options or {})
        self.emitted: list[tuple[str, dict[str, Any]]] = []

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.resource_path}>"

    def get_options(self) -> Mapping[str, Any]:
        return self._options

    def emit_file(self, name: str, content: bytes, source_map: Optional[Any] = None,
                  info: Optional[dict[str, Any]] = None) -> None:
        root = self.output_dir.resolve()
        target = (root / name).resolve()
        if target != root and root not in target.parents:
            raise EmitError(name, f"path escapes output directory {root}")
        if target == root:
            raise EmitError(name, "empty asset name")

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        self.emitted.append((name, dict(info or {})))
        log.debug(f"WROTE {target} ({len(content)} bytes)")
