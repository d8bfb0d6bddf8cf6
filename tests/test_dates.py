from datetime import date, datetime, timezone

from clinic_client import dates


def test_aware_datetimes_are_converted_to_clinic_timezone():
    early_utc = datetime(2025, 3, 5, 3, 0, tzinfo=timezone.utc)

    assert dates.to_iso_date(early_utc) == "2025-03-04"


def test_api_date_accepts_dates_and_strings():
    assert dates.api_date(date(2025, 1, 9)) == "2025-01-09"
    assert dates.api_date("2025-01-09") == "2025-01-09"
    early_utc = datetime(2025, 3, 5, 3, 0, tzinfo=timezone.utc)
    assert dates.api_date(early_utc) == "2025-03-04"
    assert dates.api_date(early_utc, "UTC") == "2025-03-05"


def test_parse_iso_date_uses_noon_by_default():
    assert dates.parse_iso_date("2025-06-01") == datetime(2025, 6, 1, 12, 0)
    assert dates.parse_iso_date("2025-06-01", noon=False).hour == 0
    assert dates.parse_iso_date("") is None


def test_format_date_es():
    assert dates.format_date_es("2025-03-05") == "5 de marzo de 2025"
    assert dates.format_date_es(None) == ""


def test_relative_days_are_consecutive():
    today = date.fromisoformat(dates.today_iso())

    assert (today - date.fromisoformat(dates.yesterday_iso())).days == 1
    assert (date.fromisoformat(dates.tomorrow_iso()) - today).days == 1
