"""Tests for ContextVar-based format configuration."""

from threading import Thread

import pytest

from canonhtml import (
    ConfigError,
    FormatConfig,
    TagKind,
    format_config_context,
    format_html,
    get_format_config,
    reset_format_config,
    set_format_config,
)


class TestFormatConfigDataclass:
    """Test FormatConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = FormatConfig()
        assert config.indent_unit == "  "
        assert config.extra_inline_tags == frozenset()
        assert config.extra_void_tags == frozenset()

    def test_immutability(self) -> None:
        config = FormatConfig()
        with pytest.raises(AttributeError):
            config.indent_unit = "\t"  # type: ignore[misc]

    @pytest.mark.parametrize("unit", ["", "x", " -", "\n", " \r"])
    def test_bad_indent_unit(self, unit: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            FormatConfig(indent_unit=unit)
        assert exc_info.value.field == "indent_unit"

    def test_bad_tag_name(self) -> None:
        with pytest.raises(ConfigError, match="extra_inline_tags"):
            FormatConfig(extra_inline_tags=frozenset({"My-Tag"}))

    def test_tag_collections_coerced(self) -> None:
        config = FormatConfig(extra_void_tags=["embed2"])  # type: ignore[arg-type]
        assert config.extra_void_tags == frozenset({"embed2"})

    def test_classify_extras_first(self) -> None:
        config = FormatConfig(extra_inline_tags=frozenset({"p"}), extra_void_tags=frozenset({"b"}))
        assert config.classify("p") is TagKind.INLINE
        assert config.classify("b") is TagKind.VOID
        assert config.classify("div") is TagKind.BLOCK
        assert config.classify("br") is TagKind.VOID


class TestFromDict:
    def test_basic(self) -> None:
        config = FormatConfig.from_dict({"indent_unit": "\t", "extra_inline_tags": ["mention"]})
        assert config.indent_unit == "\t"
        assert config.extra_inline_tags == frozenset({"mention"})

    def test_ignores_unknown_keys(self) -> None:
        config = FormatConfig.from_dict({"indent_unit": "    ", "wrap_width": 80})
        assert config.indent_unit == "    "

    def test_empty(self) -> None:
        assert FormatConfig.from_dict({}) == FormatConfig()

    def test_space_separated_names(self) -> None:
        config = FormatConfig.from_dict({"extra_void_tags": "card   embed2"})
        assert config.extra_void_tags == frozenset({"card", "embed2"})

    def test_validates(self) -> None:
        with pytest.raises(ConfigError):
            FormatConfig.from_dict({"indent_unit": "--"})


class TestContextVarFunctions:
    def teardown_method(self) -> None:
        reset_format_config()

    def test_default(self) -> None:
        assert get_format_config() == FormatConfig()

    def test_set_and_reset(self) -> None:
        custom = FormatConfig(indent_unit="\t")
        set_format_config(custom)
        assert get_format_config() is custom
        reset_format_config()
        assert get_format_config() == FormatConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(ValueError):
            with format_config_context(FormatConfig(indent_unit="\t")):
                raise ValueError("boom")
        assert get_format_config().indent_unit == "  "

    def test_nested_contexts(self) -> None:
        with format_config_context(FormatConfig(indent_unit="\t")):
            with format_config_context(FormatConfig(indent_unit="    ")):
                assert get_format_config().indent_unit == "    "
            assert get_format_config().indent_unit == "\t"

    def test_thread_isolation(self) -> None:
        results: dict[str, str] = {}

        def worker(name: str, unit: str) -> None:
            with format_config_context(FormatConfig(indent_unit=unit)):
                results[name] = format_html("<div><p>x</p></div>")

        threads = [Thread(target=worker, args=("tab", "\t")), Thread(target=worker, args=("four", "    "))]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results["tab"] == "<div>\n\t<p>x</p>\n</div>"
        assert results["four"] == "<div>\n    <p>x</p>\n</div>"
        assert get_format_config() == FormatConfig()
