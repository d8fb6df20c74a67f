"""Unit tests for zone-aware rendering utilities."""

from __future__ import annotations

from datetime import datetime, timezone

from rrdescribe.utils.zones import (
    from_epoch,
    get_locale,
    iso_date,
    iso_instant,
    is_valid_locale,
    is_valid_zone,
    to_epoch,
    wall_clock,
)


class TestZones:
    def test_valid_zone(self):
        assert is_valid_zone("Asia/Singapore")
        assert not is_valid_zone("Nowhere/Special")

    def test_from_epoch_ms(self):
        dt = from_epoch(1_759_766_400_000, "Asia/Singapore", "ms")
        assert dt.isoformat() == "2025-10-07T00:00:00+08:00"

    def test_from_epoch_seconds(self):
        dt = from_epoch(0, "UTC", "s")
        assert dt == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_dst_offsets(self):
        summer = from_epoch(1_719_835_200_000, "America/Chicago")  # 2024-07-01T12:00Z
        winter = from_epoch(1_704_110_400_000, "America/Chicago")  # 2024-01-01T12:00Z
        assert summer.utcoffset().total_seconds() == -5 * 3600
        assert winter.utcoffset().total_seconds() == -6 * 3600

    def test_to_epoch(self):
        dt = from_epoch(1_704_862_800_123, "Europe/Berlin")
        assert to_epoch(dt, "ms") == 1_704_862_800_123
        assert to_epoch(dt, "s") == 1_704_862_800

    def test_wall_clock(self):
        dt = wall_clock("Asia/Tokyo", 9, 30)
        assert (dt.hour, dt.minute, dt.second) == (9, 30, 0)
        assert dt.tzinfo.key == "Asia/Tokyo"


class TestIsoRendering:
    def test_utc_uses_z(self):
        assert iso_instant(from_epoch(1_704_862_800_000, "UTC")) == "2024-01-10T05:00:00Z"

    def test_offset_zone(self):
        dt = from_epoch(1_759_766_400_000, "Asia/Singapore")
        assert iso_instant(dt) == "2025-10-07T00:00:00+08:00"

    def test_milliseconds_kept_when_present(self):
        dt = from_epoch(1_704_862_800_500, "UTC")
        assert iso_instant(dt) == "2024-01-10T05:00:00.500Z"

    def test_milliseconds_not_suppressed(self):
        dt = from_epoch(1_704_862_800_000, "UTC")
        assert iso_instant(dt, suppress_milliseconds=False) == "2024-01-10T05:00:00.000Z"

    def test_iso_date(self):
        assert iso_date(from_epoch(1_760_112_000_000, "Asia/Singapore")) == "2025-10-11"


class TestLocales:
    def test_bcp47_and_posix(self):
        assert str(get_locale("en-US")) == "en_US"
        assert str(get_locale("de_DE")) == "de_DE"

    def test_default(self):
        assert str(get_locale(None)) == "en"

    def test_invalid(self):
        assert not is_valid_locale("zz-NOPE")
