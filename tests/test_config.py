"""config.py tests"""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from hexconv.config import DEFAULT_CACHE_SIZE, ConverterConfig, parse_cache_size, parse_mode
from hexconv.exceptions import UsageError
from hexconv.models import Mode


class TestParseMode:
    """parse_mode function tests"""

    @pytest.mark.parametrize("mode", list(Mode))
    def test_known_modes(self, mode: Mode) -> None:
        """Every CLI mode name is accepted"""
        assert parse_mode(mode.value) is mode

    def test_unknown_mode_raises_usage_error(self) -> None:
        """An unknown mode lists the valid ones"""
        with pytest.raises(UsageError) as exc_info:
            parse_mode("compress")

        message = str(exc_info.value)
        assert "'compress'" in message
        assert "compress-cached" in message
        assert "decompress-noncached" in message


class TestParseCacheSize:
    """parse_cache_size function tests"""

    def test_none_gives_default(self) -> None:
        """No value falls back to the default size"""
        assert parse_cache_size(None) == DEFAULT_CACHE_SIZE == 5000

    def test_numeric_string(self) -> None:
        """A numeric string is converted"""
        assert parse_cache_size("128") == 128

    @pytest.mark.parametrize("value", ["abc", "12x", "1.5", ""])
    def test_non_numeric_raises_usage_error(self, value: str) -> None:
        """Non-numeric values are rejected instead of ignored"""
        with pytest.raises(UsageError, match="positive integer"):
            parse_cache_size(value)

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_non_positive_raises_usage_error(self, value: str) -> None:
        """Zero and negative sizes are rejected"""
        with pytest.raises(UsageError):
            parse_cache_size(value)


class TestConverterConfig:
    """ConverterConfig tests"""

    def test_default_values(self) -> None:
        """Defaults are applied"""
        c = ConverterConfig(mode=Mode.COMPRESS_CACHED, input_path=Path("a"), output_path=Path("b"))
        assert c.cache_size == 5000
        assert c.verbose is False

    def test_from_args(self) -> None:
        """A parsed namespace becomes a validated config"""
        args = argparse.Namespace(
            mode="decompress-cached",
            input_file="mat.in",
            output_file="mat.in.x",
            cache_size="10",
            verbose=True,
        )

        c = ConverterConfig.from_args(args)

        assert c.mode is Mode.DECOMPRESS_CACHED
        assert c.input_path == Path("mat.in")
        assert c.output_path == Path("mat.in.x")
        assert c.cache_size == 10
        assert c.verbose is True

    def test_from_args_rejects_bad_cache_size(self) -> None:
        """Validation errors surface as UsageError"""
        args = argparse.Namespace(
            mode="compress-cached",
            input_file="a",
            output_file="b",
            cache_size="lots",
            verbose=False,
        )

        with pytest.raises(UsageError):
            ConverterConfig.from_args(args)

    def test_is_frozen(self) -> None:
        """Config instances are immutable"""
        c = ConverterConfig(mode=Mode.COMPRESS_CACHED, input_path=Path("a"), output_path=Path("b"))
        with pytest.raises(AttributeError):
            c.cache_size = 1  # type: ignore[misc]
