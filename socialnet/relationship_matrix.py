from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from socialnet.errors import InvalidAccess, InvalidIdentifier
from socialnet.user_record import UserRecord


class RelationshipMatrix:
    """Dense N x N follow matrix; cell (i, j) is set when user i+1 follows user j+1.

    Users are addressed by id, so the records it is built from must be sorted
    with ids 1..N. Memory is O(N^2) and each follower query O(N), which is
    the known scaling limit of this tool.
    """

    def __init__(self, follows: np.ndarray):
        if follows.ndim != 2 or follows.shape[0] != follows.shape[1]:
            raise ValueError(f"follow matrix must be square, got shape {follows.shape}")
        self._follows = np.array(follows, dtype=bool, copy=True)
        self._follows.setflags(write=False)

    @classmethod
    def from_records(cls, records: Sequence[UserRecord]) -> "RelationshipMatrix":
        n = len(records)
        follows = np.zeros((n, n), dtype=bool)
        for i, record in enumerate(records):
            for followed_id in record.follows:
                if not 1 <= followed_id <= n:
                    raise InvalidIdentifier(
                        f"user {record.id} follows unknown user id {followed_id} (ids run 1..{n})"
                    )
                follows[i, followed_id - 1] = True
        return cls(follows)

    @property
    def size(self) -> int:
        return int(self._follows.shape[0])

    def as_array(self) -> np.ndarray:
        """Read-only view of the underlying boolean matrix."""
        return self._follows

    def _check_id(self, user_id: int) -> None:
        if not 1 <= user_id <= self.size:
            raise InvalidAccess(f"user id {user_id} is outside 1..{self.size}")

    def is_following(self, follower_id: int, followed_id: int) -> bool:
        self._check_id(follower_id)
        self._check_id(followed_id)
        return bool(self._follows[follower_id - 1, followed_id - 1])

    def followers_and_mutuals_of(self, user_id: int) -> Tuple[List[int], List[int]]:
        """Ids of the users following ``user_id`` and, of those, the ones it follows back.

        Both lists are ascending; the user itself is never included.
        """
        self._check_id(user_id)
        idx = user_id - 1
        incoming = self._follows[:, idx].copy()
        incoming[idx] = False
        mutual = incoming & self._follows[idx, :]
        followers = (np.flatnonzero(incoming) + 1).tolist()
        mutuals = (np.flatnonzero(mutual) + 1).tolist()
        return followers, mutuals

    def follower_counts(self) -> np.ndarray:
        """Number of followers per user (index = id - 1), self-follows excluded."""
        counts = self._follows.sum(axis=0) - np.diagonal(self._follows)
        return counts.astype(int)
