from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from socialnet.errors import (
    EmptyAttributeValue,
    InvalidAccess,
    InvalidIdentifier,
    MalformedRecord,
    UnrecognizedAttribute,
)
from socialnet.record_tokenizer import QUOTE, RecordCursor, RecordTokenizer

DEFAULT_PIC_URL = "https://i.pinimg.com/236x/1c/8b/b2/1c8bb212c3fac9c3393b663c0ed9f6cb.jpg"

# input title -> UserRecord keyword
SCALAR_ATTRIBUTES = {
    "id_str": "user_id",
    "name": "name",
    "location": "location",
    "pic_url": "pic_url",
}
FOLLOWS_ATTRIBUTE = "follows"

ID_RE = re.compile(r"[0-9]+")


class UserRecord:
    """One user of the network.

    A record is valid when it has a positive id and a non-empty name. The
    field accessors raise InvalidAccess on an invalid record: ingestion
    rejects those before anything reads them.
    """

    def __init__(
        self,
        user_id: int = 0,
        name: str = "",
        location: str = "",
        pic_url: str = "",
        follows: Optional[Iterable[int]] = None,
    ):
        self._id = user_id
        self._name = name
        self._location = location
        self._pic_url = pic_url or DEFAULT_PIC_URL
        self._follows = list(follows) if follows is not None else []

    def is_valid(self) -> bool:
        return self._id > 0 and bool(self._name)

    def _require_valid(self) -> None:
        if not self.is_valid():
            raise InvalidAccess(f"invalid user record (id={self._id!r}, name={self._name!r})")

    @property
    def id(self) -> int:
        self._require_valid()
        return self._id

    @property
    def name(self) -> str:
        self._require_valid()
        return self._name

    @property
    def location(self) -> str:
        """Empty string when the user gave no location."""
        self._require_valid()
        return self._location

    @property
    def pic_url(self) -> str:
        self._require_valid()
        return self._pic_url

    @property
    def follows(self) -> List[int]:
        """Copy of the ids this user follows, in input order."""
        self._require_valid()
        return list(self._follows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserRecord):
            return NotImplemented
        return (
            self._id == other._id
            and self._name == other._name
            and self._location == other._location
            and self._pic_url == other._pic_url
            and self._follows == other._follows
        )

    def __repr__(self) -> str:
        return f"UserRecord(user_id={self._id!r}, name={self._name!r}, follows={self._follows!r})"

    def __str__(self) -> str:
        lines = [f"id: {self._id}", f"name: {self._name}"]
        if self._location:
            lines.append(f"location: {self._location}")
        if self._pic_url:
            lines.append(f"pic url: {self._pic_url}")
        lines.append("Follows: [ " + "".join(f"{f} " for f in self._follows) + "]")
        return "\n".join(lines) + "\n"


def by_id(record: UserRecord) -> int:
    """Sort key ordering records by ascending id."""
    return record.id


def parse_identifier(token: str, title: str) -> int:
    if not ID_RE.fullmatch(token):
        raise InvalidIdentifier(f"{title}: {token!r} is not an unsigned integer id")
    return int(token)


def parse_follows(raw: str) -> List[int]:
    """Convert the raw text between ``[`` and ``]`` (``"1","4"``) into ids."""
    cur = RecordCursor(raw)
    cur.skip_whitespace()
    ids: List[int] = []
    while cur.peek() in (",", QUOTE):
        cur.ignore_through(QUOTE)
        token = cur.read_until(QUOTE)
        if token is None:
            raise MalformedRecord(f"unterminated id in follows list [{raw}]")
        ids.append(parse_identifier(token, FOLLOWS_ATTRIBUTE))
        cur.skip_whitespace()
    if cur.rest().strip():
        raise InvalidIdentifier(f"follows: ids must be quoted, got [{raw}]")
    return ids


class RecordBuilder:
    """Collects attribute pairs for one record and produces the UserRecord."""

    def __init__(self):
        self.fields: Dict[str, object] = {}

    def set_attribute(self, title: str, raw: str) -> None:
        # follows is the one attribute allowed to be empty
        if title == FOLLOWS_ATTRIBUTE:
            self.fields["follows"] = parse_follows(raw)
            return
        key = SCALAR_ATTRIBUTES.get(title)
        if key is None:
            raise UnrecognizedAttribute(title)
        if not raw:
            raise EmptyAttributeValue(title)
        if key == "user_id":
            self.fields[key] = parse_identifier(raw, title)
        else:
            self.fields[key] = raw

    def build(self) -> UserRecord:
        return UserRecord(**self.fields)


def build_record(chunk: str) -> UserRecord:
    builder = RecordBuilder()
    for title, raw in RecordTokenizer(chunk):
        builder.set_attribute(title, raw)
    return builder.build()
