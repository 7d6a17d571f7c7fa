"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import (
    JSONTranslationLoader,
    MalformedTranslationData,
    ResourceUnavailable,
    parse_table,
)
from tests.factories.i18n import write_translation_file


class TestParseTable:
    """Tests for parse_table()."""

    def test_parses_flat_object(self):
        """parse_table() decodes a flat JSON object of strings."""
        table = parse_table("zh-CN", '{"Hello": "你好"}'.encode("utf-8"))
        assert table.locale == "zh-CN"
        assert table.messages == {"Hello": "你好"}

    def test_accepts_byte_order_mark(self):
        """parse_table() tolerates a UTF-8 BOM."""
        data = "\ufeff" + '{"Hello": "Hallo"}'
        table = parse_table("de-DE", data.encode("utf-8"))
        assert table.get_message("Hello") == "Hallo"

    @pytest.mark.parametrize(
        "data",
        [
            b"{}",
            b"not json",
            b'{"Hello": ',
            b'["Hello", "World"]',
            b'"Hello"',
            b'{"Hello": 1}',
            b'{"Hello": null}',
            b'{"Menu": {"File": "Fichier"}}',
            b"\xff\xfe\x00",
        ],
    )
    def test_rejects_malformed_data(self, data):
        """parse_table() raises MalformedTranslationData for unusable payloads."""
        with pytest.raises(MalformedTranslationData) as exc_info:
            parse_table("fr-FR", data)
        assert exc_info.value.locale == "fr-FR"

    def test_skips_null_values(self):
        """parse_table() drops null entries and keeps the rest of the table."""
        table = parse_table("fr-FR", b'{"Hello": null, "Start": "D\xc3\xa9marrer"}')
        assert table.messages == {"Start": "Démarrer"}
        assert not table.has_message("Hello")


class TestJSONTranslationLoader:
    """Tests for JSONTranslationLoader."""

    def test_loader_initialization(self, temp_translations_dir):
        """JSONTranslationLoader stores its configuration."""
        loader = JSONTranslationLoader(temp_translations_dir)
        assert loader.translations_dir == temp_translations_dir
        assert loader.bundled_locale == "zh-CN"
        assert loader.baseline_locale == "en-US"

    def test_loader_accepts_missing_directory(self, tmp_path):
        """A missing translations directory is not an error at construction."""
        loader = JSONTranslationLoader(tmp_path / "nonexistent")
        assert loader.list_locales() == ["zh-CN", "en-US"]

    def test_list_locales_includes_directory_entries(self, json_loader):
        """list_locales() lists built-ins first, then files sorted by name."""
        assert json_loader.list_locales() == ["zh-CN", "en-US", "fr-FR", "ja-JP"]

    def test_list_locales_accepts_any_file_name(self, temp_translations_dir, json_loader):
        """list_locales() does not validate file names."""
        write_translation_file(temp_translations_dir, "not a locale.txt", {"a": "b"})
        assert "not a locale.txt" in json_loader.list_locales()

    def test_list_locales_skips_subdirectories(self, temp_translations_dir, json_loader):
        """Only files are treated as locales."""
        (temp_translations_dir / "backup").mkdir()
        assert "backup" not in json_loader.list_locales()

    def test_list_locales_recomputed(self, temp_translations_dir, json_loader):
        """list_locales() picks up files added after construction."""
        write_translation_file(temp_translations_dir, "de-DE", {"Hello": "Hallo"})
        assert "de-DE" in json_loader.list_locales()

    def test_load_baseline_is_identity(self, json_loader):
        """load() returns an empty table for the baseline locale."""
        table = json_loader.load("en-US")
        assert table.locale == "en-US"
        assert table.is_identity

    def test_load_bundled_locale(self, json_loader):
        """load() reads the bundled zh-CN table from package data."""
        table = json_loader.load("zh-CN")
        assert table.locale == "zh-CN"
        assert table.get_message("Start") == "启动"
        assert table.get_message("{0} item(s)") == "{0} 个项目"

    def test_load_file_locale(self, json_loader):
        """load() reads a file named after the locale code."""
        table = json_loader.load("fr-FR")
        assert table.get_message("Settings") == "Paramètres"
        assert len(table) == 5

    def test_load_missing_file_raises(self, json_loader, temp_translations_dir):
        """load() raises ResourceUnavailable for a missing file."""
        with pytest.raises(ResourceUnavailable) as exc_info:
            json_loader.load("de-DE")
        assert exc_info.value.locale == "de-DE"
        assert exc_info.value.path == str(temp_translations_dir / "de-DE")

    def test_load_directory_entry_raises(self, json_loader, temp_translations_dir):
        """A directory where a file is expected is unreadable."""
        (temp_translations_dir / "de-DE").mkdir()
        with pytest.raises(ResourceUnavailable):
            json_loader.load("de-DE")

    def test_load_empty_table_raises(self, json_loader, temp_translations_dir):
        """load() raises MalformedTranslationData for an empty object."""
        write_translation_file(temp_translations_dir, "de-DE", {})
        with pytest.raises(MalformedTranslationData):
            json_loader.load("de-DE")

    def test_load_invalid_json_raises(self, json_loader, temp_translations_dir):
        """load() raises MalformedTranslationData for invalid JSON."""
        write_translation_file(temp_translations_dir, "de-DE", "{invalid")
        with pytest.raises(MalformedTranslationData):
            json_loader.load("de-DE")

    def test_missing_bundled_resource_raises(self, temp_translations_dir):
        """A bundled locale without a packaged resource is unavailable."""
        loader = JSONTranslationLoader(temp_translations_dir, bundled_locale="xx-XX")
        with pytest.raises(ResourceUnavailable):
            loader.load("xx-XX")

    def test_bundled_locale_not_read_from_directory(self, json_loader, temp_translations_dir):
        """The bundled locale always comes from package data."""
        write_translation_file(temp_translations_dir, "zh-CN", {"Start": "override"})
        assert json_loader.load("zh-CN").get_message("Start") == "启动"
