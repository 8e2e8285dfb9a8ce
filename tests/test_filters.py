import pytest

from venue_calendar.data.filters import AnyOf, Between, Contains, Eq, In, matches_all

from tests.conftest import local

pytestmark = pytest.mark.unit

RECORD = {
    "id": "a" * 24,
    "owner": "u1",
    "guests": ["u2", "u3"],
    "location_id": "R1",
    "start_time": "2024-03-04T09:00:00+07:00",
}


def test_eq_and_in():
    assert Eq("owner", "u1").matches(RECORD)
    assert not Eq("owner", "u2").matches(RECORD)
    assert In("location_id", ("R1", "R2")).matches(RECORD)
    assert not In("location_id", ()).matches(RECORD)


def test_contains_checks_array_membership():
    assert Contains("guests", "u3").matches(RECORD)
    assert not Contains("guests", "u1").matches(RECORD)
    assert not Contains("missing", "u1").matches(RECORD)


def test_between_compares_instants_across_offsets():
    assert Between("start_time", local(2024, 3, 4, 9, 0), local(2024, 3, 4, 9, 0)).matches(RECORD)
    shifted = {**RECORD, "start_time": "2024-03-04T02:00:00Z"}
    assert Between("start_time", local(2024, 3, 4, 9, 0), local(2024, 3, 4, 10, 0)).matches(shifted)
    assert not Between("start_time", local(2024, 3, 4, 9, 1), local(2024, 3, 4, 10, 0)).matches(RECORD)


def test_between_skips_unparseable_values():
    assert not Between("start_time", local(2024, 1, 1, 0, 0), local(2025, 1, 1, 0, 0)).matches({"start_time": "soon"})


def test_any_of_and_matches_all():
    either = AnyOf((Eq("owner", "u9"), Contains("guests", "u2")))
    assert either.matches(RECORD)
    assert matches_all((Eq("location_id", "R1"), either), RECORD)
    assert not matches_all((Eq("location_id", "R2"), either), RECORD)
    assert matches_all((), RECORD)


def test_between_reads_trimmed_fractional_seconds():
    stored = {**RECORD, "start_time": "2024-03-04T02:00:00.12345+00:00"}
    assert Between("start_time", local(2024, 3, 4, 9, 0), local(2024, 3, 4, 9, 1)).matches(stored)
