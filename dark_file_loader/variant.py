"""Dark variant discovery and validation."""
import logging
from pathlib import Path

from .config import Options
from .constants import dark_variant_path
from .emitter import AssetDescriptor, VariantPair
from .errors import DimensionMismatchError
from .image_size import size_of_images
from .paths import build_public_expression

log = logging.getLogger(__name__)


def find_dark_variant(root_context: str, source_filename: str) -> Path:
    """Candidate location of the dark file for a project-relative source filename."""
    return Path(root_context) / dark_variant_path(source_filename)


def validate_dimensions(primary: AssetDescriptor, dark_source: Path, dark_filename: str):
    """Raise DimensionMismatchError unless both images have the same width and height."""
    primary_size, dark_size = size_of_images(primary.source, dark_source)
    if primary_size != dark_size:
        raise DimensionMismatchError(primary.source_filename, primary_size, dark_filename, dark_size)
    log.debug(f"SIZE OK {primary.source_filename} / {dark_filename}: {primary_size}")


def pair_dark_variant(primary: AssetDescriptor, url: str, options: Options,
                      root_context: str, context: str) -> VariantPair:
    """Pair the primary asset with ``<stem>_dark<ext>`` next to it, if that file exists."""
    dark_filename = dark_variant_path(primary.source_filename)
    dark_source = find_dark_variant(root_context, primary.source_filename)

    if not dark_source.is_file():
        log.debug(f"DARK {primary.source_filename}: no {dark_filename}")
        return VariantPair(primary)

    if options.validate_dark_size:
        validate_dimensions(primary, dark_source, dark_filename)
    else:
        log.debug(f"DARK {dark_filename}: size check disabled")

    dark_url = dark_variant_path(url)
    dark_output_path = dark_variant_path(primary.output_path)
    dark = AssetDescriptor(
        output_path=dark_output_path,
        public_expression=build_public_expression(dark_url, dark_output_path, options, str(dark_source), context),
        source_filename=dark_filename,
        immutable=primary.immutable,  # Same name template as the primary
        source=dark_source,
    )
    log.debug(f"DARK {primary.source_filename} -> {dark_filename}")
    return VariantPair(primary, dark)
