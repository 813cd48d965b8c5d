"""Tests for core entry logic."""

from datetime import date, datetime, timedelta, timezone

import pytest

from daybook.core.entry import (
    entry_filename,
    format_header,
    is_entry_date,
    is_within,
    resolve_entry_path,
)
from daybook.errors import (
    EntryPathError,
    InvalidDateNameError,
    InvalidExtensionError,
    OutsideJournalError,
)


@pytest.fixture
def today():
    return date(2024, 6, 1)


@pytest.fixture
def root(tmp_path):
    return tmp_path / "journal"


class TestEntryFilename:
    def test_iso_date_with_txt_suffix(self, today):
        assert entry_filename(today) == "2024-06-01.txt"

    def test_zero_pads(self):
        assert entry_filename(date(2025, 1, 5)) == "2025-01-05.txt"


class TestFormatHeader:
    def test_header_layout(self):
        now = datetime(2024, 6, 1, 9, 5, 3, tzinfo=timezone.utc)
        assert format_header(now) == "# Sat Jun 01 09:05:03 UTC 2024"

    def test_uses_timezone_name(self):
        tz = timezone(timedelta(hours=-5), "EST")
        now = datetime(2025, 1, 15, 23, 59, 59, tzinfo=tz)
        assert format_header(now) == "# Wed Jan 15 23:59:59 EST 2025"

    def test_naive_datetime_gets_local_timezone(self):
        header = format_header(datetime(2024, 6, 1, 9, 5, 3))
        assert "  " not in header
        assert header.startswith("# Sat Jun 01 ")
        assert header.endswith(" 2024")


class TestIsEntryDate:
    @pytest.mark.parametrize("stem", ["2024-06-01", "1999-12-31", "2024-02-29"])
    def test_valid_dates(self, stem):
        assert is_entry_date(stem)

    @pytest.mark.parametrize("stem", ["notes", "2024-13-01", "2023-02-29", "2024/06/01", "", "2024-06-01-extra"])
    def test_invalid_dates(self, stem):
        assert not is_entry_date(stem)


class TestIsWithin:
    def test_child_is_within(self, root):
        assert is_within(root / "2024-06-01.txt", root)

    def test_dotdot_escapes(self, root):
        assert not is_within(root / ".." / "2024-06-01.txt", root)

    def test_sibling_with_common_prefix_is_outside(self, tmp_path):
        assert not is_within(tmp_path / "journal-old" / "2024-06-01.txt", tmp_path / "journal")


class TestResolveWithoutFilename:
    def test_defaults_to_today(self, root, today):
        assert resolve_entry_path(root, None, today) == root / "2024-06-01.txt"

    def test_same_day_resolves_to_same_path(self, root, today):
        first = resolve_entry_path(root, None, today)
        second = resolve_entry_path(root, None, today)
        assert first == second

    def test_does_not_touch_filesystem(self, root, today):
        resolve_entry_path(root, None, today)
        assert not root.exists()


class TestResolveRelative:
    @pytest.mark.parametrize("filename", ["2024-06-01.txt", "2023-12-31.txt", "2000-01-01.txt"])
    def test_joins_onto_root(self, root, today, filename):
        assert resolve_entry_path(root, filename, today) == root / filename

    def test_subdirectory_is_allowed(self, root, today):
        assert resolve_entry_path(root, "old/2020-01-01.txt", today) == root / "old" / "2020-01-01.txt"

    def test_traversal_outside_root_rejected(self, root, today):
        with pytest.raises(OutsideJournalError, match="within the journal directory"):
            resolve_entry_path(root, "../2024-06-01.txt", today)

    def test_traversal_back_into_root_allowed(self, root, today):
        filename = "old/../2024-06-01.txt"
        assert resolve_entry_path(root, filename, today) == root / filename


class TestResolveAbsolute:
    def test_inside_root_returned_unchanged(self, root, today):
        path = root / "2024-05-31.txt"
        assert resolve_entry_path(root, str(path), today) == path

    def test_outside_root_rejected(self, root, tmp_path, today):
        path = tmp_path / "elsewhere" / "2024-05-31.txt"
        with pytest.raises(OutsideJournalError):
            resolve_entry_path(root, str(path), today)

    def test_dotdot_in_absolute_path_rejected(self, root, today):
        path = root / ".." / "2024-05-31.txt"
        with pytest.raises(OutsideJournalError):
            resolve_entry_path(root, str(path), today)


class TestResolveValidation:
    @pytest.mark.parametrize(
        "filename",
        ["notes.md", "2024-06-01.md", "2024-06-01.TXT", "2024-06-01", "2024-06-01.txt.bak"],
    )
    def test_wrong_extension(self, root, today, filename):
        with pytest.raises(InvalidExtensionError, match="plain text file"):
            resolve_entry_path(root, filename, today)

    @pytest.mark.parametrize("filename", ["notes.txt", "2024-13-01.txt", "01-06-2024.txt", "today.txt"])
    def test_stem_not_a_date(self, root, today, filename):
        with pytest.raises(InvalidDateNameError, match="YYYY-MM-DD"):
            resolve_entry_path(root, filename, today)

    def test_extension_checked_before_date(self, root, today):
        with pytest.raises(InvalidExtensionError):
            resolve_entry_path(root, "notes.md", today)

    def test_errors_share_base_class(self, root, today):
        with pytest.raises(EntryPathError):
            resolve_entry_path(root, "notes.txt", today)

