"""
HTML pages for a built network: ``index.html`` listing every user and one
``user<id>.html`` profile per user with its follows, followers and mutuals.
"""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path
from typing import List, Sequence

from socialnet.user_record import UserRecord

INDEX_FILENAME = "index.html"


def profile_filename(user_id: int) -> str:
    return f"user{user_id}.html"


def _user_link(names: Sequence[str], user_id: int) -> str:
    return f'<li><a href="{profile_filename(user_id)}">{escape(names[user_id - 1])}</a></li>'


def _user_list(lines: List[str], names: Sequence[str], user_ids: Sequence[int], heading: str) -> None:
    lines.append(f"<h2>{heading}</h2>")
    if not user_ids:
        lines.append("<p>None</p>")
        return
    lines.append("<ul>")
    for user_id in user_ids:
        lines.append(_user_link(names, user_id))
    lines.append("</ul>")


def render_index_page(names: Sequence[str], title: str = "My Social Network") -> str:
    """``names[i]`` is the name of user ``i + 1``."""
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        f"<title>{escape(title)}</title>",
        "</head>",
        "<body>",
        f"<h1>{escape(title)}: User List</h1>",
        "<ol>",
    ]
    for user_id in range(1, len(names) + 1):
        lines.append(_user_link(names, user_id))
    lines += ["</ol>", "</body>", "</html>"]
    return "\n".join(lines) + "\n"


def render_profile_page(
    record: UserRecord,
    names: Sequence[str],
    followers: Sequence[int],
    mutuals: Sequence[int],
) -> str:
    name = escape(record.name)
    heading = name
    if record.location:
        heading += f" in {escape(record.location)}"
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        f"<title>{name} Profile</title>",
        "</head>",
        "<body>",
        f'<h2><a href="{INDEX_FILENAME}">Social Network</a></h2>',
        f"<h1>{heading}</h1>",
        f'<img alt="Profile pic" src="{escape(record.pic_url)}" />',
    ]
    _user_list(lines, names, record.follows, "Follows")
    _user_list(lines, names, followers, "Followers")
    _user_list(lines, names, mutuals, "Mutuals")
    lines += ["</body>", "</html>"]
    return "\n".join(lines) + "\n"


def write_index_page(out_dir: Path, names: Sequence[str], title: str = "My Social Network") -> Path:
    out_path = Path(out_dir) / INDEX_FILENAME
    out_path.write_text(render_index_page(names, title), encoding="utf-8")
    return out_path


def write_profile_page(
    out_dir: Path,
    record: UserRecord,
    names: Sequence[str],
    followers: Sequence[int],
    mutuals: Sequence[int],
) -> Path:
    out_path = Path(out_dir) / profile_filename(record.id)
    out_path.write_text(render_profile_page(record, names, followers, mutuals), encoding="utf-8")
    logging.getLogger("socialnet.pages").debug(
        "Wrote %s (%d followers, %d mutuals)", out_path, len(followers), len(mutuals)
    )
    return out_path
