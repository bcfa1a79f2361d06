"""Batch processing of many source files."""
import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from tqdm import tqdm

from .config import Options, get_config
from .host import DirectoryHost
from .loader import load

log = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of a batch run."""
    succeeded: list[Path] = field(default_factory=list)
    failed: dict[Path, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def module_path_for(source: Path, root_dir: Path, module_dir: Path) -> Path:
    """Where the generated module for a source file is written: <module_dir>/<relative source>.js."""
    try:
        relative = source.resolve().relative_to(root_dir.resolve())
    except ValueError:
        relative = Path(source.name)
    return module_dir / relative.with_name(relative.name + ".js")


def process_file(source: Path, options: Options) -> Path:
    """Run the loader on one file, writing assets and its module source. Returns the module path."""
    config = get_config()
    host = DirectoryHost(config.root_dir, source, config.output_dir)

    module_source = load(source.read_bytes(), host, options)

    module_path = module_path_for(source, config.root_dir, config.modules_output)
    module_path.parent.mkdir(parents=True, exist_ok=True)
    module_path.write_text(module_source + "\n", encoding="utf-8")
    log.debug(f"MODULE {module_path}: {len(host.emitted)} assets")
    return module_path


def process_files_concurrent(files: Iterable[Path], options: Optional[Mapping[str, Any]] = None,
                             max_workers: Optional[int] = None) -> BatchResult:
    """Process files in parallel. Per-file errors are logged and collected, not raised."""
    # Validate once up front; a bad option fails the whole batch
    options = Options.from_mapping(options)
    files = list(files)
    result = BatchResult()

    if not files:
        return result

    def _process(source: Path):
        """Worker. Returns (source, error_or_none)."""
        try:
            process_file(source, options)
            return (source, None)
        except Exception as e:
            return (source, e)

    with ThreadPoolExecutor(max_workers=max_workers or os.cpu_count() or 4) as executor:
        futures = [executor.submit(_process, f) for f in files]

        for future in tqdm(as_completed(futures), total=len(futures), desc="Resolving assets"):
            source, err = future.result()
            if err:
                log.error(f"{source}: {err}")
                result.failed[source] = err
            else:
                log.debug(f"Completed: {source}")
                result.succeeded.append(source)

    return result
