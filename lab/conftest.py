from pathlib import Path
from typing import Dict, List, Sequence, Union

import pytest

Value = Union[str, Sequence[Union[int, str]]]


def format_users(users: List[Dict[str, Value]]) -> str:
    """Render users the way the exported user list files look (tab indented, one pair per line)."""
    blocks = []
    for user in users:
        pairs = []
        for title, value in user.items():
            if isinstance(value, str):
                raw = f'"{value}"'
            else:
                raw = "[" + ",".join(f'"{v}"' for v in value) + "]"
            pairs.append(f'\t\t"{title}": {raw}')
        blocks.append("\t{\n" + ",\n".join(pairs) + "\n\t}")
    return "[\n" + ",\n".join(blocks) + "\n]\n"


THREE_USERS = [
    {"id_str": "1", "name": "Ada", "location": "London", "follows": [2, 3]},
    {"id_str": "2", "name": "Brook", "pic_url": "https://example.org/brook.png", "follows": [1]},
    {"id_str": "3", "name": "Cyd", "follows": []},
]


@pytest.fixture
def three_users_text() -> str:
    return format_users(THREE_USERS)


@pytest.fixture
def users_file(tmp_path: Path):
    def write(users: List[Dict[str, Value]], name: str = "users.json") -> Path:
        path = tmp_path / name
        path.write_text(format_users(users), encoding="utf-8")
        return path
    return write
