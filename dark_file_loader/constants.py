"""Constant definitions and helper utilities."""
import posixpath
import re

# Alternate (dark mode) variant suffix, inserted before the extension
DARK_SUFFIX = "_dark"

DEFAULT_NAME = "[contenthash].[ext]"
DEFAULT_HASH_TYPE = "md5"
DEFAULT_DIGEST_TYPE = "hex"

# Runtime global holding the public path, resolved when the asset loads
PUBLIC_PATH_GLOBAL = "__webpack_public_path__"

ES_MODULE_EXPORT = "export default"
COMMONJS_EXPORT = "module.exports ="

# Template tokens (compiled once)
IMMUTABLE_RE = re.compile(r'\[([^:\]]+:)?(hash|contenthash)(:[^\]]+)?]', re.IGNORECASE)
HASH_TOKEN_RE = re.compile(
    r'\[(?:([^:\]]+):)?(?:hash|contenthash)(?::([a-z]+\d*))?(?::(\d+))?\]', re.IGNORECASE
)
EXT_TOKEN_RE = re.compile(r'\[ext\]', re.IGNORECASE)
NAME_TOKEN_RE = re.compile(r'\[name\]', re.IGNORECASE)
PATH_TOKEN_RE = re.compile(r'\[path\]', re.IGNORECASE)
FOLDER_TOKEN_RE = re.compile(r'\[folder\]', re.IGNORECASE)
QUERY_TOKEN_RE = re.compile(r'\[query\]', re.IGNORECASE)
PARENT_DIR_RE = re.compile(r'\.\.(/)?')

# Alphabets for big-integer digest encodings, keyed by base
BASE_ENCODE_TABLES = {
    26: "abcdefghijklmnopqrstuvwxyz",
    32: "123456789abcdefghjkmnpqrstuvwxyz",
    36: "0123456789abcdefghijklmnopqrstuvwxyz",
    49: "abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ",
    52: "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
    58: "123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ",
    62: "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ",
}


def normalize_path(path: str) -> str:
    """Use forward slashes regardless of host OS."""
    return path.replace("\\", "/")


def dark_variant_path(path: str) -> str:
    """Insert the dark suffix before the extension, keeping the directory.

    ``img/logo.png`` -> ``img/logo_dark.png``; ``logo`` -> ``logo_dark``.
    """
    path = normalize_path(path)
    directory, filename = posixpath.split(path)
    stem, ext = posixpath.splitext(filename)
    return posixpath.join(directory, f"{stem}{DARK_SUFFIX}{ext}")


def strip_dark_suffix(name: str) -> tuple[str, bool]:
    """Strip the dark suffix from a file stem. Returns (base_name, was_dark)."""
    if name.endswith(DARK_SUFFIX):
        return name[:-len(DARK_SUFFIX)], True
    return name, False
