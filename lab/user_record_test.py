"""
User record tests - attribute vocabulary, typing, defaults and the validity contract.
"""

import pytest

from socialnet.errors import (
    EmptyAttributeValue,
    InvalidAccess,
    InvalidIdentifier,
    MalformedRecord,
    UnrecognizedAttribute,
)
from socialnet.user_record import (
    DEFAULT_PIC_URL,
    RecordBuilder,
    UserRecord,
    build_record,
    by_id,
    parse_follows,
)


def test_build_record_types_every_attribute():
    chunk = (
        '\n\t\t"id_str": "4",\n\t\t"name": "Eli",\n\t\t"location": "Oslo",'
        '\n\t\t"pic_url": "https://example.org/eli.jpg",\n\t\t"follows": ["1","3","1"]\n\t'
    )
    record = build_record(chunk)
    assert record.is_valid()
    assert record.id == 4
    assert record.name == "Eli"
    assert record.location == "Oslo"
    assert record.pic_url == "https://example.org/eli.jpg"
    # duplicates are kept as given
    assert record.follows == [1, 3, 1]


def test_missing_optional_fields_get_defaults():
    record = build_record('\n\t\t"id_str": "1",\n\t\t"name": "Ann"\n\t')
    assert record.location == ""
    assert record.pic_url == DEFAULT_PIC_URL
    assert record.follows == []


def test_default_picture_applied_on_construction():
    assert UserRecord(1, "Ann", pic_url="").pic_url == DEFAULT_PIC_URL
    assert UserRecord(1, "Ann", pic_url="x.png").pic_url == "x.png"


def test_unrecognized_attribute_is_fatal():
    builder = RecordBuilder()
    with pytest.raises(UnrecognizedAttribute) as exc:
        builder.set_attribute("email", "ann@example.org")
    assert exc.value.title == "email"
    assert "email" in str(exc.value)


@pytest.mark.parametrize("title", ["id_str", "name", "location", "pic_url"])
def test_empty_scalar_value_is_rejected(title):
    with pytest.raises(EmptyAttributeValue):
        RecordBuilder().set_attribute(title, "")


def test_empty_follows_is_allowed():
    builder = RecordBuilder()
    builder.set_attribute("follows", "")
    builder.set_attribute("id_str", "2")
    builder.set_attribute("name", "Bo")
    assert builder.build().follows == []


@pytest.mark.parametrize("raw", ["abc", "-3", "1.5", " 2"])
def test_non_numeric_id_is_invalid_identifier(raw):
    with pytest.raises(InvalidIdentifier):
        RecordBuilder().set_attribute("id_str", raw)


def test_parse_follows_handles_spacing_between_entries():
    assert parse_follows('"2", "10" ,"3"') == [2, 10, 3]


@pytest.mark.parametrize("raw", ['"1","x"', "1,2", '"1" 2'])
def test_parse_follows_rejects_bad_entries(raw):
    with pytest.raises(InvalidIdentifier):
        parse_follows(raw)


def test_parse_follows_rejects_unterminated_entry():
    with pytest.raises(MalformedRecord):
        parse_follows('"1","2')


def test_record_without_name_is_invalid_and_guards_accessors():
    record = build_record('\n\t\t"id_str": "3"\n\t')
    assert not record.is_valid()
    for accessor in ("id", "name", "location", "pic_url", "follows"):
        with pytest.raises(InvalidAccess):
            getattr(record, accessor)


def test_zero_id_is_invalid():
    assert not UserRecord(0, "Ann").is_valid()


def test_follows_accessor_returns_copy():
    record = UserRecord(1, "Ann", follows=[2])
    record.follows.append(3)
    assert record.follows == [2]


def test_equality_compares_all_fields():
    assert UserRecord(1, "Ann", "Rome", follows=[2]) == UserRecord(1, "Ann", "Rome", follows=[2])
    assert UserRecord(1, "Ann", "Rome", follows=[2]) != UserRecord(1, "Ann", "Rome", follows=[3])
    assert UserRecord(1, "Ann") != UserRecord(1, "Ann", pic_url="other.png")


def test_sorting_by_id_is_stable():
    a, b, c = UserRecord(2, "first two"), UserRecord(1, "one"), UserRecord(2, "second two")
    assert [r.name for r in sorted([a, b, c], key=by_id)] == ["one", "first two", "second two"]


def test_str_lists_set_fields():
    text = str(UserRecord(3, "Cy", follows=[1, 2]))
    assert text.splitlines() == [
        "id: 3",
        "name: Cy",
        f"pic url: {DEFAULT_PIC_URL}",
        "Follows: [ 1 2 ]",
    ]
