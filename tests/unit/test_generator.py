"""
Tests for the catalog generation pipeline.

These tests run complete passes over sample .proto directories and check
the resulting catalog files, including skipped files and failed languages.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from proto_i18n.catalog import writer
from proto_i18n.catalog.reader import load_catalog
from proto_i18n.catalog.writer import CatalogStatus
from proto_i18n.config.schema import GeneratorConfig
from proto_i18n.extraction import proto_keys
from proto_i18n.extraction.types import ExtractionResult
from proto_i18n.generator import GenerationResult, catalog_path, generate_catalogs
from proto_i18n.utils.core.exceptions import (
    CatalogWriteError,
    DiscoveryError,
    NoFilesFoundError,
    NoKeysFoundError,
    OutputDirError,
    ProtoParseError,
)

ConfigFactory = Callable[..., GeneratorConfig]


class TestGenerationResult:
    """Test the GenerationResult class."""

    def test_empty_result(self) -> None:
        result = GenerationResult()

        assert result.written_languages == []
        assert result.stale_languages == []
        assert result.has_failures is False
        assert "0 keys from 0 files" in str(result)

    def test_result_with_data(self) -> None:
        result = GenerationResult()
        result.catalogs = {"en": CatalogStatus.WRITTEN, "zh": CatalogStatus.STALE}
        result.failed_languages = [("ja", Exception("error"))]

        assert result.written_languages == ["en"]
        assert result.stale_languages == ["zh"]
        assert result.has_failures is True


class TestGenerateCatalogs:
    """Test complete generation passes."""

    def test_writes_one_catalog_per_language(
        self, make_config: ConfigFactory, tmp_path: Path
    ) -> None:
        config = make_config()

        result = generate_catalogs(config)

        assert result.written_languages == ["en", "zh"]
        assert (tmp_path / "i18n" / "en.toml").exists()
        assert (tmp_path / "i18n" / "zh.toml").exists()

    def test_catalog_content(self, make_config: ConfigFactory) -> None:
        config = make_config(languages="en")

        _ = generate_catalogs(config)

        content = catalog_path(config.output_dir, "en").read_text(encoding="utf-8")
        assert content == (
            '[OK]\nother = ""\n\n'
            '[INVALID_ARGUMENT]\nother = ""\n\n'
            '[NOT_FOUND]\nother = ""\n\n'
            '[ACTIVE]\nother = ""\n\n'
            '[INACTIVE]\nother = ""\n\n'
            '[invalid_input]\nother = "must not be empty"\n\n'
            '[invalid_email]\nother = ""\n\n'
        )

    def test_suffix_filter(self, make_config: ConfigFactory) -> None:
        config = make_config(languages="en", enum_suffix="Error")

        result = generate_catalogs(config)

        assert result.key_count == 5
        entries = load_catalog(catalog_path(config.output_dir, "en"))
        assert "ACTIVE" not in entries
        assert "INVALID_ARGUMENT" in entries

    def test_preserves_translations(self, make_config: ConfigFactory) -> None:
        config = make_config(languages="zh")
        config.output_dir.mkdir(parents=True)
        zh = catalog_path(config.output_dir, "zh")
        _ = zh.write_text(
            '[NOT_FOUND]\nother = "未找到"\n\n[REMOVED]\nother = "已删除"\n\n',
            encoding="utf-8",
        )

        _ = generate_catalogs(config)

        entries = load_catalog(zh)
        assert entries["NOT_FOUND"] == "未找到"
        assert "REMOVED" not in entries

    def test_second_run_is_byte_identical(self, make_config: ConfigFactory) -> None:
        config = make_config()

        _ = generate_catalogs(config)
        first = catalog_path(config.output_dir, "en").read_bytes()
        _ = generate_catalogs(config)

        assert catalog_path(config.output_dir, "en").read_bytes() == first

    def test_new_enum_value_appended(
        self, make_config: ConfigFactory, proto_dir: Path
    ) -> None:
        config = make_config(languages="en", enum_suffix="Error")
        _ = generate_catalogs(config)
        en = catalog_path(config.output_dir, "en")
        _ = en.write_text(
            en.read_text(encoding="utf-8").replace(
                '[OK]\nother = ""', '[OK]\nother = "Success"'
            ),
            encoding="utf-8",
        )

        errors_proto = proto_dir / "errors.proto"
        _ = errors_proto.write_text(
            errors_proto.read_text(encoding="utf-8").replace(
                "  NOT_FOUND = 2;\n", "  NOT_FOUND = 2;\n  TIMEOUT = 3;\n"
            ),
            encoding="utf-8",
        )
        _ = generate_catalogs(config)

        entries = load_catalog(en)
        assert list(entries) == [
            "OK",
            "INVALID_ARGUMENT",
            "NOT_FOUND",
            "TIMEOUT",
            "invalid_input",
            "invalid_email",
        ]
        assert entries["OK"] == "Success"

    def test_parse_failure_skips_file(
        self, make_config: ConfigFactory, proto_dir: Path
    ) -> None:
        original = proto_keys.extract_keys_from_file

        def fail_for_user_proto(
            path: Path, prefix: str = "", suffix: str = ""
        ) -> ExtractionResult:
            if path.name == "user.proto":
                raise ProtoParseError(f"parse proto {path}: boom", path=path)
            return original(path, prefix, suffix)

        config = make_config(languages="en")
        with patch(
            "proto_i18n.generator.extract_keys_from_file",
            side_effect=fail_for_user_proto,
        ):
            result = generate_catalogs(config)

        assert [path for path, _ in result.skipped_files] == [proto_dir / "user" / "user.proto"]
        entries = load_catalog(catalog_path(config.output_dir, "en"))
        assert "invalid_input" not in entries
        assert "NOT_FOUND" in entries

    def test_malformed_proto_is_skipped(
        self, make_config: ConfigFactory, proto_dir: Path
    ) -> None:
        broken = proto_dir / "broken.proto"
        _ = broken.write_text(
            'syntax = "proto3";\n\nenum Broken { A = 0 B = ; ', encoding="utf-8"
        )
        config = make_config(languages="en")

        result = generate_catalogs(config)

        assert [path for path, _ in result.skipped_files] == [broken]
        assert isinstance(result.skipped_files[0][1], ProtoParseError)
        assert result.has_failures
        assert result.written_languages == ["en"]
        entries = load_catalog(catalog_path(config.output_dir, "en"))
        assert "A" not in entries
        assert "B" not in entries
        assert "NOT_FOUND" in entries
        assert "invalid_input" in entries

    def test_missing_source_directory(self, tmp_path: Path) -> None:
        config = GeneratorConfig(
            proto_pattern=tmp_path / "missing" / "errors.proto",
            output_dir=tmp_path / "i18n",
        )

        with pytest.raises(DiscoveryError):
            _ = generate_catalogs(config)

    def test_no_files_found(self, tmp_path: Path) -> None:
        (tmp_path / "empty").mkdir()
        config = GeneratorConfig(
            proto_pattern=tmp_path / "empty" / "errors.proto",
            output_dir=tmp_path / "i18n",
        )

        with pytest.raises(NoFilesFoundError) as exc_info:
            _ = generate_catalogs(config)

        assert "No proto files found in directory" in str(exc_info.value)

    def test_no_keys_found(self, tmp_path: Path) -> None:
        source = tmp_path / "src"
        source.mkdir()
        _ = (source / "empty.proto").write_text(
            'syntax = "proto3";\n\nmessage Empty {}\n', encoding="utf-8"
        )
        config = GeneratorConfig(
            proto_pattern=source / "empty.proto", output_dir=tmp_path / "i18n"
        )

        with pytest.raises(NoKeysFoundError):
            _ = generate_catalogs(config)

        assert not (tmp_path / "i18n").exists()

    def test_output_dir_failure(self, make_config: ConfigFactory, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        _ = blocker.write_text("a file, not a directory", encoding="utf-8")
        config = make_config(output_dir=blocker / "i18n")

        with pytest.raises(OutputDirError) as exc_info:
            _ = generate_catalogs(config)

        assert "Failed to create output directory" in str(exc_info.value)

    def test_write_failure_skips_language(self, make_config: ConfigFactory) -> None:
        original = writer.write_catalog

        def fail_for_zh(file_path: Path, content: str) -> None:
            if file_path.name == "zh.toml":
                raise CatalogWriteError(f"write TOML file {file_path}: denied", path=file_path)
            original(file_path, content)

        config = make_config(languages="zh,en")
        with patch("proto_i18n.catalog.writer.write_catalog", side_effect=fail_for_zh):
            result = generate_catalogs(config)

        assert [lang for lang, _ in result.failed_languages] == ["zh"]
        assert result.written_languages == ["en"]
        assert catalog_path(config.output_dir, "en").exists()

    def test_dry_run(self, make_config: ConfigFactory, tmp_path: Path) -> None:
        config = make_config(dry_run=True)

        result = generate_catalogs(config)

        assert result.catalogs == {"en": CatalogStatus.DRY_RUN, "zh": CatalogStatus.DRY_RUN}
        assert not (tmp_path / "i18n").exists()

    def test_check_mode(self, make_config: ConfigFactory) -> None:
        _ = generate_catalogs(make_config(languages="en"))

        result = generate_catalogs(make_config(languages="en,zh", check=True))

        assert result.catalogs == {"en": CatalogStatus.UNCHANGED, "zh": CatalogStatus.STALE}
        assert result.stale_languages == ["zh"]
