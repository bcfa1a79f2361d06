"""Asset resolution for one source file."""
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .codegen import generate_module_source
from .config import Options
from .constants import normalize_path
from .emitter import AssetDescriptor, emit_assets, is_immutable
from .host import HostContext
from .interpolate import interpolate_name
from .paths import build_public_expression, resolve_output_path
from .variant import pair_dark_variant

log = logging.getLogger(__name__)

# The loader consumes raw bytes, not decoded text
RAW = True


def load(content: bytes, host: HostContext,
         options: Optional[Union[Options, Mapping[str, Any]]] = None) -> str:
    """Resolve, pair, emit and return the module source for one file.

    Args:
        content: Raw bytes of the source file.
        host: Pipeline context for the file (root context, resource path, store).
        options: Options or a mapping of them. If None, the host's options are used.

    Returns:
        Module source exporting the public reference, or a ``{ light, dark }``
        object when a dark variant was paired.

    Raises:
        OptionsValidationError: Before any path computation or I/O.
        DimensionMismatchError, ProbeError: Before anything is emitted.
    """
    options = Options.from_mapping(host.get_options() if options is None else options)

    context = options.context or host.root_context
    resource_path = host.resource_path

    url = interpolate_name(
        options.name,
        resource_path,
        content=content,
        context=context,
        reg_exp=options.reg_exp,
        resource_query=getattr(host, "resource_query", ""),
    )
    output_path = resolve_output_path(url, options, resource_path, context)

    primary = AssetDescriptor(
        output_path=output_path,
        public_expression=build_public_expression(url, output_path, options, resource_path, context),
        source_filename=normalize_path(os.path.relpath(resource_path, host.root_context)),
        immutable=is_immutable(options.name),
        source=Path(resource_path),
    )
    log.debug(f"RESOLVE {primary.source_filename} -> {output_path}")

    # Pairing also runs without emission so the generated source stays the same
    pair = pair_dark_variant(primary, url, options, host.root_context, context)

    if options.emit_file:
        emit_assets(host, content, pair)
    else:
        log.debug(f"SKIP EMIT {primary.source_filename}")

    return generate_module_source(pair, options.es_module)
