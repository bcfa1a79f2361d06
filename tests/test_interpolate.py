"""Tests for name template interpolation."""
import base64
import hashlib
import os

import pytest

from dark_file_loader import OptionsValidationError, get_hash_digest, interpolate_name
from dark_file_loader.interpolate import encode_to_base

CONTENT = b"\x89PNG fake image bytes"
ROOT = os.path.join(os.sep, "proj")
LOGO = os.path.join(ROOT, "img", "logo.png")


class TestTokens:

    def test_name_and_ext(self):
        assert interpolate_name("[name].[ext]", LOGO, CONTENT, ROOT) == "logo.png"

    def test_tokens_are_case_insensitive(self):
        assert interpolate_name("[NAME].[Ext]", LOGO, CONTENT, ROOT) == "logo.png"

    def test_path_relative_to_context(self):
        assert interpolate_name("[path][name].[ext]", LOGO, CONTENT, ROOT) == "img/logo.png"

    def test_path_empty_at_context_root(self):
        resource = os.path.join(ROOT, "logo.png")
        assert interpolate_name("[path][name].[ext]", resource, CONTENT, ROOT) == "logo.png"

    def test_path_outside_context_replaces_parent_segments(self):
        context = os.path.join(ROOT, "src")
        assert interpolate_name("[path][name].[ext]", LOGO, CONTENT, context) == "_/img/logo.png"

    def test_folder(self):
        resource = os.path.join(ROOT, "img", "icons", "home.svg")
        assert interpolate_name("[folder]/[name].[ext]", resource, CONTENT, ROOT) == "icons/home.svg"

    def test_missing_extension_defaults_to_bin(self):
        resource = os.path.join(ROOT, "LICENSE")
        assert interpolate_name("[name].[ext]", resource, CONTENT, ROOT) == "LICENSE.bin"

    def test_query_without_fragment(self):
        url = interpolate_name("[name].[ext][query]", LOGO, CONTENT, ROOT, resource_query="?v=1#top")
        assert url == "logo.png?v=1"

    def test_reg_exp_groups(self):
        url = interpolate_name("[1]-[name].[ext]", LOGO, CONTENT, ROOT, reg_exp=r"[\\/]([^\\/]+)[\\/]logo\.png$")
        assert url == "img-logo.png"

    def test_callable_template(self):
        seen = []

        def name(resource_path, resource_query):
            seen.append((resource_path, resource_query))
            return "[name]-static.[ext]"

        assert interpolate_name(name, LOGO, CONTENT, ROOT, resource_query="?x") == "logo-static.png"
        assert seen == [(LOGO, "?x")]


class TestHashTokens:

    def test_contenthash_defaults_to_md5_hex(self):
        url = interpolate_name("[contenthash].[ext]", LOGO, CONTENT, ROOT)
        assert url == hashlib.md5(CONTENT).hexdigest() + ".png"

    def test_length(self):
        url = interpolate_name("[name].[contenthash:8].[ext]", LOGO, CONTENT, ROOT)
        assert url == f"logo.{hashlib.md5(CONTENT).hexdigest()[:8]}.png"

    def test_hash_type_and_digest(self):
        url = interpolate_name("[sha256:hash:hex:12]", LOGO, CONTENT, ROOT)
        assert url == hashlib.sha256(CONTENT).hexdigest()[:12]

    def test_base64_digest(self):
        url = interpolate_name("[hash:base64]", LOGO, CONTENT, ROOT)
        assert url == base64.b64encode(hashlib.md5(CONTENT).digest()).decode("ascii")

    def test_empty_content_is_hashed(self):
        assert interpolate_name("[contenthash].[ext]", LOGO, b"", ROOT) == "d41d8cd98f00b204e9800998ecf8427e.png"

    def test_hash_left_alone_without_content(self):
        assert interpolate_name("[contenthash].[ext]", LOGO, None, ROOT) == "[contenthash].png"

    def test_deterministic(self):
        template = "[path][name].[sha1:contenthash:base62:10].[ext]"
        assert interpolate_name(template, LOGO, CONTENT, ROOT) == interpolate_name(template, LOGO, CONTENT, ROOT)

    def test_unknown_hash_type(self):
        with pytest.raises(OptionsValidationError):
            interpolate_name("[nope:contenthash].[ext]", LOGO, CONTENT, ROOT)

    def test_unknown_digest_type(self):
        with pytest.raises(OptionsValidationError):
            get_hash_digest(CONTENT, "md5", "base99")


class TestBaseEncoding:

    def test_little_endian(self):
        assert encode_to_base(b"\x01\x00", 36) == "1"
        assert encode_to_base(b"\x00\x01", 36) == "74"

    def test_alphabet(self):
        encoded = get_hash_digest(CONTENT, "md5", "base26")
        assert encoded and set(encoded) <= set("abcdefghijklmnopqrstuvwxyz")
