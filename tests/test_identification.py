# =============================================================================
# tests/test_identification.py - Latest Identification Tests
# =============================================================================

import random
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from core.models import PlanterIdentification
from core.services.identification import latest_identification


def ident(created_at, id=None):
    return SimpleNamespace(created_at=created_at, id=id)


BASE = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestLatestIdentification:
    """Tests for latest_identification()."""

    def test_empty_collection(self):
        assert latest_identification([]) is None
        assert latest_identification(set()) is None

    def test_none_collection(self):
        assert latest_identification(None) is None

    def test_single_identification(self):
        only = ident(BASE, id=1)
        assert latest_identification([only]) is only

    @pytest.mark.parametrize("seed", range(20))
    def test_returns_maximum_timestamp_regardless_of_order(self, seed):
        """Distinct timestamps: the newest wins whatever the iteration order."""
        rng = random.Random(seed)
        offsets = rng.sample(range(10_000), k=rng.randint(2, 30))
        identifications = [
            ident(BASE + timedelta(minutes=offset), id=index)
            for index, offset in enumerate(offsets)
        ]
        expected = identifications[offsets.index(max(offsets))]

        rng.shuffle(identifications)

        assert latest_identification(identifications) is expected

    def test_all_timestamps_missing(self):
        identifications = [ident(None, id=1), ident(None, id=2)]
        assert latest_identification(identifications) is None

    def test_missing_timestamp_never_wins(self):
        dated = ident(BASE, id=1)
        identifications = [ident(None, id=99), dated, ident(None, id=100)]

        assert latest_identification(identifications) is dated

    def test_non_datetime_timestamp_is_ignored(self):
        dated = ident(BASE, id=1)
        assert latest_identification([ident("yesterday", id=2), dated]) is dated

    def test_object_without_created_at_is_ignored(self):
        dated = ident(BASE, id=1)
        assert latest_identification([object(), dated]) is dated

    def test_tie_prefers_higher_id(self):
        first = ident(BASE, id=3)
        second = ident(BASE, id=7)

        assert latest_identification([second, first]) is second
        assert latest_identification([first, second]) is second

    def test_tie_prefers_stored_over_unsaved(self):
        unsaved = ident(BASE, id=None)
        stored = ident(BASE, id=1)

        assert latest_identification([unsaved, stored]) is stored
        assert latest_identification([stored, unsaved]) is stored

    def test_naive_and_aware_timestamps_compare(self):
        """Naive values are read as UTC instead of raising TypeError."""
        naive_later = ident(datetime(2026, 1, 2), id=1)
        aware_earlier = ident(datetime(2026, 1, 1, 23, 0, tzinfo=timezone.utc), id=2)

        assert latest_identification([aware_earlier, naive_later]) is naive_later

    def test_other_timezones_are_normalized(self):
        # 10:00 at UTC+5 is 05:00 UTC, earlier than 06:00 UTC
        plus_five = timezone(timedelta(hours=5))
        shifted = ident(datetime(2026, 1, 1, 10, 0, tzinfo=plus_five), id=1)
        utc = ident(datetime(2026, 1, 1, 6, 0, tzinfo=timezone.utc), id=2)

        assert latest_identification([shifted, utc]) is utc

    def test_extreme_dates_with_offsets(self):
        # Shifting these to UTC would fall outside the datetime range
        far_future = ident(datetime.max.replace(tzinfo=timezone(timedelta(hours=-5))), id=1)
        far_past = ident(datetime.min.replace(tzinfo=timezone(timedelta(hours=5))), id=2)
        normal = ident(BASE, id=3)

        assert latest_identification([far_past, normal, far_future]) is far_future
        assert latest_identification([far_past, normal]) is normal
        assert latest_identification([far_past]) is far_past

    def test_extreme_naive_dates(self):
        newest = ident(datetime.max, id=1)
        oldest = ident(datetime.min, id=2)

        assert latest_identification([oldest, ident(BASE, id=3), newest]) is newest

    def test_accepts_generators_and_records(self):
        older = PlanterIdentification(created_at=BASE)
        newer = PlanterIdentification(created_at=BASE + timedelta(days=2))

        result = latest_identification(i for i in {older, newer})

        assert result is newer
