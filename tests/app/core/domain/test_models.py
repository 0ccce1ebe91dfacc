from datetime import date

import pytest
from pydantic import ValidationError

from src.app.core.domain.models import (
    ClientRecord,
    LicenseType,
    age_from_birth_date,
    birth_date_from_age,
)


def make_record(**overrides) -> ClientRecord:
    fields = {
        "full_name": "Amina Benali",
        "national_id": "ab123456",
        "birth_date": "1990-05-17",
        "license_types": ["B", "A"],
    }
    fields.update(overrides)
    return ClientRecord(**fields)


def test_national_id_is_upper_cased():
    record = make_record()

    assert record.national_id == "AB123456"


def test_age_is_derived_from_birth_year():
    record = make_record(birth_date="1990-12-31")

    assert record.age == date.today().year - 1990


def test_explicit_age_is_kept():
    record = make_record(age=20)

    assert record.age == 20


def test_license_types_are_normalized_to_a_set():
    record = make_record(license_types=[" B", "A", "B", ""])

    assert record.license_types == frozenset({"A", "B"})


def test_license_types_accept_comma_separated_string():
    record = make_record(license_types="A,C")

    assert record.license_types == frozenset({"A", "C"})


@pytest.mark.parametrize("full_name", ["Jean-Luc Picard", "O'Neil", "Zoé Martin", "   "])
def test_full_name_rejects_non_alphanumeric(full_name):
    with pytest.raises(ValidationError):
        make_record(full_name=full_name)


@pytest.mark.parametrize("national_id", ["AB-123", "AB_123", "AB;;12"])
def test_national_id_rejects_non_alphanumeric(national_id):
    with pytest.raises(ValidationError):
        make_record(national_id=national_id)


@pytest.mark.parametrize("birth_date", ["17/05/1990", "1990-13-01", "1990-02-30", "90-05-17"])
def test_birth_date_must_be_iso_date(birth_date):
    with pytest.raises(ValidationError):
        make_record(birth_date=birth_date)


def test_national_id_longer_than_column_is_rejected():
    assert make_record(national_id="A" * 50).national_id == "A" * 50
    with pytest.raises(ValidationError):
        make_record(national_id="A" * 51)


@pytest.mark.parametrize("full_name", ["A" * 101 + " Benali", "Amina " + "B" * 101])
def test_name_parts_longer_than_column_are_rejected(full_name):
    with pytest.raises(ValidationError):
        make_record(full_name=full_name)


def test_name_parts_at_column_limit_are_accepted():
    record = make_record(full_name="A" * 100 + " " + "B" * 100)

    assert record.first_name == "A" * 100
    assert record.last_name == "B" * 100


def test_repeated_spaces_in_full_name_are_collapsed():
    record = make_record(full_name="  Amina   Ben   Ali ")

    assert record.full_name == "Amina Ben Ali"
    assert record.first_name == "Amina"
    assert record.last_name == "Ben Ali"


def test_padded_birth_date_still_derives_age():
    record = make_record(birth_date=" 1990-05-17 ")

    assert record.birth_date == "1990-05-17"
    assert record.age == age_from_birth_date("1990-05-17")


def test_future_birth_date_is_rejected():
    with pytest.raises(ValidationError):
        make_record(birth_date=f"{date.today().year + 1}-01-01")


def test_records_with_same_national_id_are_equal():
    first = make_record(national_id="ab123456", full_name="Amina Benali")
    second = make_record(national_id="AB123456", full_name="Someone Else", license_types=[])

    assert first == second
    assert len({first, second}) == 1


def test_records_with_different_national_id_are_not_equal():
    assert make_record(national_id="AB1") != make_record(national_id="AB2")


def test_record_is_immutable():
    record = make_record()

    with pytest.raises(ValidationError):
        record.full_name = "Other Name"


def test_name_split():
    record = make_record(full_name="Amina Ben Ali")

    assert record.first_name == "Amina"
    assert record.last_name == "Ben Ali"
    assert make_record(full_name="Madonna").last_name == ""


def test_with_id_keeps_other_fields():
    record = make_record()

    stored = record.with_id(7, frozenset({"B"}))

    assert stored.id == 7
    assert stored.license_types == frozenset({"B"})
    assert stored.full_name == record.full_name
    assert record.id is None


def test_str_lists_identity_fields():
    text = str(make_record(age=34))

    assert "Name: Amina Benali" in text
    assert "CIN: AB123456" in text
    assert "Birth date: 1990-05-17" in text
    assert "Age: 34" in text


def test_age_and_birth_date_helpers():
    today = date(2024, 6, 1)

    assert age_from_birth_date("1990-12-31", today) == 34
    assert birth_date_from_age(34, today) == "1990-01-01"


def test_license_label_must_be_alphanumeric():
    assert LicenseType(label=" B ").label == "B"
    with pytest.raises(ValidationError):
        LicenseType(label="B+E")
