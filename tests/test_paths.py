"""Tests for output path and public expression building."""
from dark_file_loader import Options, build_public_expression, dark_variant_path, resolve_output_path

SOURCE = "/proj/img/logo.png"
CONTEXT = "/proj"


class TestOutputPath:

    def test_defaults_to_url(self):
        assert resolve_output_path("abc.png", Options(), SOURCE, CONTEXT) == "abc.png"

    def test_literal_prefix_uses_forward_slashes(self):
        options = Options(output_path="static/img")
        assert resolve_output_path("abc.png", options, SOURCE, CONTEXT) == "static/img/abc.png"

    def test_literal_prefix_with_trailing_slash(self):
        options = Options(output_path="static/")
        assert resolve_output_path("abc.png", options, SOURCE, CONTEXT) == "static/abc.png"

    def test_computed_result_is_verbatim(self):
        options = Options(output_path=lambda url, source, context: f"{context}|{source}|{url}")
        assert resolve_output_path("abc.png", options, SOURCE, CONTEXT) == "/proj|/proj/img/logo.png|abc.png"


class TestPublicExpression:

    def test_default_uses_runtime_public_path_and_output_path(self):
        expr = build_public_expression("abc.png", "static/abc.png", Options(), SOURCE, CONTEXT)
        assert expr == '__webpack_public_path__ + "static/abc.png"'

    def test_literal_is_joined_with_url_and_quoted(self):
        options = Options(public_path="https://cdn.example.com/assets")
        expr = build_public_expression("abc.png", "static/abc.png", options, SOURCE, CONTEXT)
        assert expr == '"https://cdn.example.com/assets/abc.png"'

    def test_literal_with_trailing_slash(self):
        options = Options(public_path="/assets/")
        assert build_public_expression("abc.png", "abc.png", options, SOURCE, CONTEXT) == '"/assets/abc.png"'

    def test_computed_is_not_quoted(self):
        options = Options(public_path=lambda url, source, context: f"window.CDN + {url!r}")
        expr = build_public_expression("abc.png", "abc.png", options, SOURCE, CONTEXT)
        assert expr == "window.CDN + 'abc.png'"

    def test_post_transform_applies_last(self):
        options = Options(public_path="/assets", post_transform_public_path=lambda p: f"new URL({p}, import.meta.url)")
        expr = build_public_expression("abc.png", "abc.png", options, SOURCE, CONTEXT)
        assert expr == 'new URL("/assets/abc.png", import.meta.url)'

    def test_quotes_special_characters(self):
        expr = build_public_expression('we"ird.png', 'we"ird.png', Options(), SOURCE, CONTEXT)
        assert expr == '__webpack_public_path__ + "we\\"ird.png"'


class TestDarkVariantPath:

    def test_suffix_before_extension(self):
        assert dark_variant_path("img/logo.png") == "img/logo_dark.png"

    def test_keeps_only_last_extension(self):
        assert dark_variant_path("logo.min.svg") == "logo.min_dark.svg"

    def test_no_extension(self):
        assert dark_variant_path("logo") == "logo_dark"

    def test_backslashes_normalized(self):
        assert dark_variant_path("img\\logo.png") == "img/logo_dark.png"
