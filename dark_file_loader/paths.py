"""Output path and public reference expression building."""
import json
import posixpath

from .config import Computed, Options
from .constants import PUBLIC_PATH_GLOBAL


def quote(value: str) -> str:
    """Serialize a string as a JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def resolve_output_path(url: str, options: Options, source_path: str, context: str) -> str:
    """Where the asset is written in the output store, relative to its root."""
    setting = options.output_path
    if setting is None:
        return url
    if isinstance(setting, Computed):
        return setting(url, source_path, context)
    # Forward slashes keep generated sources identical on every OS
    return posixpath.join(setting.value, url)


def build_public_expression(url: str, output_path: str, options: Options,
                            source_path: str, context: str) -> str:
    """Code expression resolving to the asset's runtime URL.

    Computed public paths are trusted code and kept verbatim; literal ones
    are joined with the url and quoted.
    """
    expression = f"{PUBLIC_PATH_GLOBAL} + {quote(output_path)}"

    setting = options.public_path
    if setting is not None:
        if isinstance(setting, Computed):
            expression = setting(url, source_path, context)
        else:
            prefix = setting.value if setting.value.endswith("/") else f"{setting.value}/"
            expression = quote(f"{prefix}{url}")

    if options.post_transform_public_path is not None:
        expression = options.post_transform_public_path(expression)

    return expression
