"""Shared fixtures: a recording host and PNG writers."""
from pathlib import Path

import pytest
from PIL import Image

from dark_file_loader import get_config


class RecordingHost:
    """In-memory host context that records every emitted asset."""

    def __init__(self, root_context, resource_path, options=None, resource_query=""):
        self.root_context = str(root_context)
        self.resource_path = str(resource_path)
        self.resource_query = resource_query
        self.options = options or {}
        self.emitted = []

    def get_options(self):
        return self.options

    def emit_file(self, name, content, source_map=None, info=None):
        self.emitted.append((name, content, info))

    @property
    def names(self):
        return [name for name, _, _ in self.emitted]


def write_png(path: Path, size: tuple[int, int], color=(255, 255, 255)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color).save(path, format="PNG")
    return path


@pytest.fixture
def make_png():
    return write_png


@pytest.fixture
def make_host():
    return RecordingHost


@pytest.fixture
def batch_config(tmp_path):
    """Point the global config at tmp_path and restore it afterwards."""
    config = get_config()
    saved = (config.debug, config.root_dir, config.output_dir, config.module_dir)
    config.root_dir = tmp_path / "src"
    config.output_dir = tmp_path / "dist"
    config.module_dir = None
    yield config
    config.debug, config.root_dir, config.output_dir, config.module_dir = saved
