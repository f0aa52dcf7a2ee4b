"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior and from_dict filtering.
"""

from threading import Thread

import pytest

from pairparse import (
    PairParser,
    ParseConfig,
    TagCatalog,
    TagDefinition,
    TagKind,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)

STAR_CATALOG = TagCatalog.of(
    [
        TagDefinition(TagKind.ITALIC, "*", "*"),
        TagDefinition(TagKind.ESCAPE, "\\"),
        TagDefinition(TagKind.LINE_FEED, "\n"),
    ]
)


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.catalog is None
        assert config.strict_catalog is False

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.strict_catalog = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"strict_catalog": True, "unknown_key": "ignored"})
        assert config.strict_catalog is True
        assert config.catalog is None

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_parse_config()

    def test_default_config(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_get(self) -> None:
        set_parse_config(ParseConfig(catalog=STAR_CATALOG))
        assert get_parse_config().catalog is STAR_CATALOG

    def test_reset(self) -> None:
        set_parse_config(ParseConfig(strict_catalog=True))
        reset_parse_config()
        assert get_parse_config().strict_catalog is False


class TestParseConfigContext:
    """Test the context manager."""

    def test_restores_previous(self) -> None:
        with parse_config_context(ParseConfig(catalog=STAR_CATALOG)):
            assert get_parse_config().catalog is STAR_CATALOG
        assert get_parse_config().catalog is None

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(strict_catalog=True)):
                raise RuntimeError("boom")
        assert get_parse_config().strict_catalog is False

    def test_nested(self) -> None:
        outer = ParseConfig(catalog=STAR_CATALOG)
        inner = ParseConfig(strict_catalog=True)
        with parse_config_context(outer):
            with parse_config_context(inner):
                assert get_parse_config() is inner
            assert get_parse_config() is outer

    def test_parser_keeps_catalog_after_context(self) -> None:
        """The catalog is fixed when the parser is built."""
        with parse_config_context(ParseConfig(catalog=STAR_CATALOG)):
            parser = PairParser()
        assert len(parser.parse("*a*")) == 1


class TestThreadIsolation:
    """Config set in one thread is invisible in another."""

    def test_thread_sees_default(self) -> None:
        seen: list[ParseConfig] = []

        def worker() -> None:
            seen.append(get_parse_config())

        with parse_config_context(ParseConfig(strict_catalog=True)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()

        assert seen == [ParseConfig()]
