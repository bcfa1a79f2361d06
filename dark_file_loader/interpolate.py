"""Name template interpolation.

Turns a template such as ``[path][name].[contenthash:8].[ext]`` into a
concrete relative url for one source file. Supported tokens:

- ``[ext]``, ``[name]``, ``[path]``, ``[folder]``, ``[query]``
- ``[hash]`` / ``[contenthash]`` with optional hash type, digest type and
  length: ``[<hashType>:contenthash:<digestType>:<length>]``
- ``[0]``, ``[1]``, ... capture groups of ``reg_exp`` matched against the
  resource path

The result only depends on its arguments, so identical inputs always give
the identical url.
"""
import base64
import hashlib
import logging
import os
import re
from typing import Callable, Optional, Union

from .constants import (
    BASE_ENCODE_TABLES,
    DEFAULT_DIGEST_TYPE,
    DEFAULT_HASH_TYPE,
    EXT_TOKEN_RE,
    FOLDER_TOKEN_RE,
    HASH_TOKEN_RE,
    NAME_TOKEN_RE,
    PARENT_DIR_RE,
    PATH_TOKEN_RE,
    QUERY_TOKEN_RE,
    normalize_path,
)
from .errors import OptionsValidationError

log = logging.getLogger(__name__)


def encode_to_base(digest: bytes, base: int) -> str:
    """Encode digest bytes, read as a little-endian integer, with a base alphabet."""
    table = BASE_ENCODE_TABLES[base]
    number = int.from_bytes(digest, "little")
    output = []
    while number > 0:
        number, remainder = divmod(number, base)
        output.append(table[remainder])
    return "".join(reversed(output))


def get_hash_digest(content: bytes, hash_type: Optional[str] = None,
                    digest_type: Optional[str] = None, max_length: Optional[int] = None) -> str:
    """Hash content and render the digest, truncated to max_length when given."""
    hash_type = hash_type or DEFAULT_HASH_TYPE
    digest_type = (digest_type or DEFAULT_DIGEST_TYPE).lower()

    try:
        hasher = hashlib.new(hash_type.lower())
    except ValueError as e:
        raise OptionsValidationError(f"Unsupported hash type '{hash_type}' in name template.", "name") from e
    hasher.update(content)
    digest = hasher.digest()

    if digest_type == "hex":
        encoded = digest.hex()
    elif digest_type == "base64":
        encoded = base64.b64encode(digest).decode("ascii")
    elif digest_type == "latin1":
        encoded = digest.decode("latin-1")
    elif digest_type.startswith("base") and digest_type[4:].isdigit() and int(digest_type[4:]) in BASE_ENCODE_TABLES:
        encoded = encode_to_base(digest, int(digest_type[4:]))
    else:
        raise OptionsValidationError(f"Unsupported digest type '{digest_type}' in name template.", "name")

    return encoded[:max_length] if max_length else encoded


def _template_parts(resource_path: str, context: Optional[str]) -> tuple[str, str, str, str]:
    """Returns (ext, basename, directory, folder) for the resource."""
    ext = "bin"
    basename = "file"
    directory = ""
    folder = ""

    if not resource_path:
        return ext, basename, directory, folder

    parent, filename = os.path.split(resource_path)
    stem, suffix = os.path.splitext(filename)
    resource_dir = resource_path
    if suffix:
        ext = suffix[1:]
    if parent:
        basename = stem
        resource_dir = parent + os.sep

    if context is not None:
        # Trailing marker keeps the trailing separator through relpath
        directory = normalize_path(os.path.relpath(resource_dir + "_", context))
        directory = PARENT_DIR_RE.sub(lambda m: "_" + (m.group(1) or ""), directory)
        directory = directory[:-1]
    else:
        directory = PARENT_DIR_RE.sub(lambda m: "_" + (m.group(1) or ""), normalize_path(resource_dir))

    if len(directory) == 1:
        directory = ""
    elif len(directory) > 1:
        folder = os.path.basename(directory.rstrip("/"))

    return ext, basename, directory, folder


def interpolate_name(template: Union[str, Callable[[str, str], str]], resource_path: str,
                     content: Optional[bytes] = None, context: Optional[str] = None,
                     reg_exp: Optional[Union[str, re.Pattern]] = None,
                     resource_query: str = "") -> str:
    """Substitute template tokens for one resource. Returns the relative url."""
    if callable(template):
        template = template(resource_path, resource_query)
    url = template or "[hash].[ext]"

    ext, basename, directory, folder = _template_parts(resource_path, context)

    query = ""
    if resource_query and len(resource_query) > 1:
        query = resource_query.split("#", 1)[0]

    if content is not None:
        url = HASH_TOKEN_RE.sub(
            lambda m: get_hash_digest(content, m.group(1), m.group(2), int(m.group(3)) if m.group(3) else None),
            url,
        )

    url = EXT_TOKEN_RE.sub(lambda m: ext, url)
    url = NAME_TOKEN_RE.sub(lambda m: basename, url)
    url = PATH_TOKEN_RE.sub(lambda m: directory, url)
    url = FOLDER_TOKEN_RE.sub(lambda m: folder, url)
    url = QUERY_TOKEN_RE.sub(lambda m: query, url)

    if reg_exp is not None and resource_path:
        match = re.search(reg_exp, resource_path)
        if match:
            groups = [match.group(0)] + [g or "" for g in match.groups()]
            for i, matched in enumerate(groups):
                url = url.replace(f"[{i}]", matched)

    log.debug(f"NAME {template} -> {url}")
    return url
