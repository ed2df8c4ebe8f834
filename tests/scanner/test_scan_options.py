"""Unit tests for ScanOptions."""

from metatron.scanner.scan_options import ScanOptions


def test_from_raw_parses_all_parameters():
    options = ScanOptions.from_raw(".MD, txt", True, ".log", ["dist", " ", "/opt/cache"])
    assert options.extension_rules.extensions == ["md", "txt"]
    assert options.extension_rules.ignored_extensions == ["log"]
    assert options.folder_rules.entries == ["dist", "/opt/cache"]
    assert options.folders_only


def test_defaults_apply_no_filtering():
    options = ScanOptions()
    assert not options.folders_only
    assert not options.extension_rules.has_rules()
    assert not options.folder_rules.has_rules()


def test_from_raw_accepts_any_iterable_of_folders():
    options = ScanOptions.from_raw(ignored_folders=(name for name in ["a", "b"]))
    assert options.folder_rules.entries == ["a", "b"]
