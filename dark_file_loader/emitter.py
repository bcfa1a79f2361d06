"""Asset descriptors and emission to the host store."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .constants import IMMUTABLE_RE
from .host import HostContext

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetDescriptor:
    """One file to emit and how generated code refers to it."""
    output_path: str
    public_expression: str
    source_filename: str  # Relative to the root context, forward slashes
    immutable: bool
    source: Path

    def info(self) -> dict[str, Any]:
        """Metadata handed to the store along with the bytes."""
        info: dict[str, Any] = {"sourceFilename": self.source_filename}
        if self.immutable:
            info["immutable"] = True
        return info


@dataclass(frozen=True)
class VariantPair:
    """The primary asset and its accepted dark variant, if any."""
    primary: AssetDescriptor
    dark: Optional[AssetDescriptor] = None

    @property
    def descriptors(self) -> tuple[AssetDescriptor, ...]:
        return (self.primary,) if self.dark is None else (self.primary, self.dark)


def is_immutable(name: Any) -> bool:
    """Whether a name template yields content-unique paths (ignores any query string)."""
    if not isinstance(name, str):
        return False
    return IMMUTABLE_RE.search(name.split("?", 1)[0]) is not None


def emit_assets(host: HostContext, content: bytes, pair: VariantPair) -> int:
    """Emit the primary (from content) and the dark variant (from disk). Returns the count."""
    # Read before the first write so a failing read leaves nothing half emitted
    dark_content = pair.dark.source.read_bytes() if pair.dark is not None else None

    host.emit_file(pair.primary.output_path, content, None, pair.primary.info())
    log.debug(f"EMIT {pair.primary.output_path} <- {pair.primary.source_filename}")

    if pair.dark is None:
        return 1

    host.emit_file(pair.dark.output_path, dark_content, None, pair.dark.info())
    log.debug(f"EMIT {pair.dark.output_path} <- {pair.dark.source_filename}")
    return 2
