"""
Dark File Loader Package

Resolves build assets to content-addressed output paths with support for:
- Name templates ([name], [path], [contenthash:8], ...)
- Dark mode variants (<stem>_dark<ext>) with size validation
- JavaScript module source referencing the emitted assets
"""
from .config import Config, Options, Literal, Computed, setup_logging, get_config, load_options_file
from .constants import (
    DARK_SUFFIX,
    DEFAULT_NAME,
    PUBLIC_PATH_GLOBAL,
    dark_variant_path,
    strip_dark_suffix,
)
from .errors import LoaderError, OptionsValidationError, DimensionMismatchError, ProbeError, EmitError
from .image_size import ImageSize, size_of_image
from .interpolate import interpolate_name, get_hash_digest
from .paths import resolve_output_path, build_public_expression
from .emitter import AssetDescriptor, VariantPair, is_immutable, emit_assets
from .variant import pair_dark_variant
from .codegen import generate_module_source
from .host import HostContext, DirectoryHost
from .loader import load, RAW
from .runner import BatchResult, process_files_concurrent

__version__ = "1.0.0"
__all__ = [
    "Config",
    "Options",
    "Literal",
    "Computed",
    "setup_logging",
    "get_config",
    "load_options_file",
    "DARK_SUFFIX",
    "DEFAULT_NAME",
    "PUBLIC_PATH_GLOBAL",
    "dark_variant_path",
    "strip_dark_suffix",
    "LoaderError",
    "OptionsValidationError",
    "DimensionMismatchError",
    "ProbeError",
    "EmitError",
    "ImageSize",
    "size_of_image",
    "interpolate_name",
    "get_hash_digest",
    "resolve_output_path",
    "build_public_expression",
    "AssetDescriptor",
    "VariantPair",
    "is_immutable",
    "emit_assets",
    "pair_dark_variant",
    "generate_module_source",
    "HostContext",
    "DirectoryHost",
    "load",
    "RAW",
    "BatchResult",
    "process_files_concurrent",
]
