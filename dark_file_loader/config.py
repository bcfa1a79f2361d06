"""Loader options, runtime configuration and logging setup."""
import logging
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

import yaml
from tqdm import tqdm

from .constants import DEFAULT_NAME
from .errors import OptionsValidationError

log = logging.getLogger(__name__)

PathFunction = Callable[[str, str, str], str]
NameFunction = Callable[[str, str], str]


class TqdmLoggingHandler(logging.StreamHandler):
    """Logging handler that uses tqdm.write() to avoid breaking progress bars."""

    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg)
        except Exception:
            self.handleError(record)


def setup_logging(debug: bool = False):
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='[%(levelname).1s] %(message)s' if debug else '%(message)s',
        handlers=[TqdmLoggingHandler()]
    )


@dataclass(frozen=True)
class Literal:
    """A path setting given as a plain string."""
    value: str


@dataclass(frozen=True)
class Computed:
    """A path setting computed from (url, source_path, context)."""
    fn: PathFunction

    def __call__(self, url: str, source_path: str, context: str) -> str:
        return self.fn(url, source_path, context)


PathSetting = Union[Literal, Computed]


def to_path_setting(value: Any, key: str) -> Optional[PathSetting]:
    """Wrap a string-or-callable option, validating its type."""
    if value is None or isinstance(value, (Literal, Computed)):
        return value
    if isinstance(value, str):
        # An empty string behaves as if the option was not given
        return Literal(value) if value else None
    if callable(value):
        return Computed(value)
    raise OptionsValidationError(f"options.{key} should be a string or a function.", key)


# camelCase spellings accepted from host-style option mappings
OPTION_ALIASES = {
    "outputPath": "output_path",
    "publicPath": "public_path",
    "postTransformPublicPath": "post_transform_public_path",
    "emitFile": "emit_file",
    "esModule": "es_module",
    "regExp": "reg_exp",
    "validateDarkSize": "validate_dark_size",
}


@dataclass(frozen=True)
class Options:
    """Loader options. Built per load and never mutated."""
    context: Optional[str] = None
    name: Union[str, NameFunction] = DEFAULT_NAME
    output_path: Optional[PathSetting] = None
    public_path: Optional[PathSetting] = None
    post_transform_public_path: Optional[Callable[[str], str]] = None
    emit_file: bool = True
    es_module: bool = True
    reg_exp: Optional[Union[str, re.Pattern]] = None
    validate_dark_size: bool = True  # False pairs a found dark file without probing sizes

    def __post_init__(self):
        if self.context is not None and not isinstance(self.context, str):
            raise OptionsValidationError("options.context should be a string.", "context")
        if not isinstance(self.name, str) and not callable(self.name):
            raise OptionsValidationError("options.name should be a string or a function.", "name")
        if not self.name:
            raise OptionsValidationError("options.name should be a non-empty string.", "name")
        # Plain strings and callables are accepted here too
        object.__setattr__(self, "output_path", to_path_setting(self.output_path, "outputPath"))
        object.__setattr__(self, "public_path", to_path_setting(self.public_path, "publicPath"))
        if self.post_transform_public_path is not None and not callable(self.post_transform_public_path):
            raise OptionsValidationError(
                "options.postTransformPublicPath should be a function.", "postTransformPublicPath"
            )
        for key in ("emit_file", "es_module", "validate_dark_size"):
            if not isinstance(getattr(self, key), bool):
                raise OptionsValidationError(f"options.{key} should be a boolean.", key)
        if self.reg_exp is not None and not isinstance(self.reg_exp, (str, re.Pattern)):
            raise OptionsValidationError("options.regExp should be a string or a compiled pattern.", "regExp")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Options":
        """Build options from a host-style mapping (camelCase or snake_case keys)."""
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise OptionsValidationError("options should be an object.")

        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            attr = OPTION_ALIASES.get(key, key)
            if attr not in known:
                raise OptionsValidationError(f"options has an unknown property '{key}'.", key)
            if attr in kwargs:
                raise OptionsValidationError(f"options.{attr} is given more than once.", key)
            if value is None:
                continue
            kwargs[attr] = value
        return cls(**kwargs)


def load_options_file(path: Optional[Path]) -> dict[str, Any]:
    """Read loader options from a YAML file. No path or an empty document gives {}."""
    if not path:
        return {}
    if not Path(path).is_file():
        raise OptionsValidationError(f"options file {path} does not exist.")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise OptionsValidationError(f"options file {path} must contain a mapping.")
    log.debug(f"Loaded options from {path}: {sorted(data)}")
    return data


@dataclass
class Config:
    """Global configuration for batch runs."""
    debug: bool = False
    root_dir: Path = field(default_factory=lambda: Path("."))
    output_dir: Path = field(default_factory=lambda: Path("dist"))
    module_dir: Optional[Path] = None  # Where generated module sources go; defaults to output_dir / "modules"

    @property
    def modules_output(self) -> Path:
        return self.module_dir if self.module_dir is not None else self.output_dir / "modules"


# Global config instance
_config = Config()


def get_config() -> Config:
    """Get global config instance."""
    return _config
