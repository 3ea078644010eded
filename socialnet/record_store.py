from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from socialnet.errors import EmptyCollection, InvalidIdentifier, MalformedRecord
from socialnet.record_tokenizer import ListScanner
from socialnet.user_record import UserRecord, build_record, by_id


def assemble_records(text: str) -> List[UserRecord]:
    """Parse every user record in ``text`` and return them ordered by id.

    Input that already lists ids 1, 2, 3, ... in order is returned as read;
    anything else is sorted once at the end. The result must cover ids 1..N
    exactly, since the relationship matrix indexes users by id.
    """
    log = logging.getLogger("socialnet.records")
    records: List[UserRecord] = []
    needs_sort = False
    expected_next_id = 1

    for position, chunk in enumerate(ListScanner(text), 1):
        record = build_record(chunk)
        if not record.is_valid():
            raise MalformedRecord(f"user record #{position} needs a positive id_str and a non-empty name")
        if not needs_sort and record.id != expected_next_id:
            needs_sort = True
        expected_next_id += 1
        records.append(record)

    if not records:
        raise EmptyCollection("the user list contains no records")

    if needs_sort:
        log.info("Users are not listed in id order; sorting %d records", len(records))
        records.sort(key=by_id)  # stable

    check_dense_ids(records)
    log.info("Assembled %d users", len(records))
    return records


def check_dense_ids(records: Sequence[UserRecord]) -> None:
    """Ids of id-sorted records must be exactly 1..N."""
    for expected, record in enumerate(records, 1):
        if record.id == expected:
            continue
        if record.id < expected:
            raise InvalidIdentifier(f"user id {record.id} appears more than once")
        raise InvalidIdentifier(f"user id {expected} is missing (ids must run 1..{len(records)} without gaps)")


def load_records(path: str | Path) -> List[UserRecord]:
    path = Path(path)
    logging.getLogger("socialnet.records").info("Reading users from %s", path)
    with path.open("r", encoding="utf-8") as f:
        return assemble_records(f.read())
