#!/usr/bin/env python3
"""
Social Network page builder.

Reads a user list file (a loosely JSON-shaped array of flat user records),
derives for every user who follows them and which of those they follow back,
and writes a small static site:
- index.html linking every user
- user<id>.html per user with Follows / Followers / Mutuals lists
- optionally network.html, an interactive follow-matrix heatmap

CLI:
- build <users.json> [--out site] [--config config.json] [--plot]
- inspect <users.json> <id> [--out report.txt]

Any input problem aborts the run before a single page is written.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Iterator, List, Sequence, Tuple

from socialnet.errors import EmptyCollection, InvalidIdentifier, SocialNetworkError
from socialnet.network_plot import write_adjacency_plot
from socialnet.profile_pages import write_index_page, write_profile_page
from socialnet.record_store import check_dense_ids, load_records
from socialnet.relationship_matrix import RelationshipMatrix
from socialnet.user_record import UserRecord, by_id


# -----------------------
# Config
# -----------------------
@dataclasses.dataclass(frozen=True)
class NetworkConfig:
    out_dir: str = "site"
    index_title: str = "My Social Network"
    plot: bool = False
    plot_filename: str = "network.html"

    def to_json(self) -> str:
        return json.dumps(dataclasses.asdict(self), sort_keys=True, separators=(",", ":"))


# -----------------------
# Network
# -----------------------
class SocialNetwork:
    """Users ordered by id together with their follow matrix."""

    def __init__(self, records: Sequence[UserRecord]):
        self.records: List[UserRecord] = sorted(records, key=by_id)
        if not self.records:
            raise EmptyCollection()
        check_dense_ids(self.records)
        self.matrix = RelationshipMatrix.from_records(self.records)
        self.names: List[str] = [r.name for r in self.records]

    @classmethod
    def from_file(cls, path: str | Path) -> "SocialNetwork":
        return cls(load_records(path))

    def __len__(self) -> int:
        return len(self.records)

    def user(self, user_id: int) -> UserRecord:
        if not 1 <= user_id <= len(self.records):
            raise InvalidIdentifier(f"no user with id {user_id} (ids run 1..{len(self.records)})")
        return self.records[user_id - 1]

    def followers_and_mutuals_of(self, user_id: int) -> Tuple[List[int], List[int]]:
        return self.matrix.followers_and_mutuals_of(user_id)

    def profiles(self) -> Iterator[Tuple[UserRecord, List[int], List[int]]]:
        for record in self.records:
            followers, mutuals = self.matrix.followers_and_mutuals_of(record.id)
            yield record, followers, mutuals


# -----------------------
# Build
# -----------------------
class SocialNetworkPipeline:
    def __init__(self, cfg: NetworkConfig):
        self.cfg = cfg
        self.log = logging.getLogger("social_network")
        if not self.log.handlers:
            logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    def run(self, input_path: str | Path) -> Path:
        cfg = self.cfg
        self.log.info("Building social network pages (config=%s)", cfg.to_json())
        network = SocialNetwork.from_file(input_path)
        self.log.info("Follow matrix built for %d users", len(network))
        return self.write_site(network)

    def write_site(self, network: SocialNetwork) -> Path:
        cfg = self.cfg
        out_dir = Path(cfg.out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        write_index_page(out_dir, network.names, cfg.index_title)
        pages = 0
        for record, followers, mutuals in network.profiles():
            write_profile_page(out_dir, record, network.names, followers, mutuals)
            pages += 1
        self.log.info("Wrote index.html and %d profile pages to %s", pages, out_dir)

        if cfg.plot:
            plot_path = write_adjacency_plot(out_dir / cfg.plot_filename, network.matrix, network.names)
            self.log.info("Wrote follow matrix plot to %s", plot_path)
        return out_dir


# -----------------------
# Inspect
# -----------------------
def inspect_user(input_path: str | Path, user_id: int) -> Dict:
    network = SocialNetwork.from_file(input_path)
    record = network.user(user_id)
    followers, mutuals = network.followers_and_mutuals_of(user_id)
    return {
        "id": record.id,
        "name": record.name,
        "location": record.location,
        "pic_url": record.pic_url,
        "follows": record.follows,
        "followers": followers,
        "mutuals": mutuals,
        "follower_count": int(network.matrix.follower_counts()[user_id - 1]),
        "names": {str(i): network.names[i - 1] for i in sorted(set(record.follows + followers))},
    }


def _format_inspect_text(info: Dict) -> str:
    """Create a clean, human-readable text report for an inspected user."""
    names = info.get("names", {})
    lines: List[str] = []
    lines.append(f"User {info['id']}: {info['name']}")
    if info.get("location"):
        lines.append(f"Location: {info['location']}")
    lines.append(f"Picture: {info['pic_url']}")
    for title in ("follows", "followers", "mutuals"):
        ids = info.get(title) or []
        lines.append("")
        lines.append(f"{title.capitalize()} ({len(ids)}):")
        if not ids:
            lines.append("  None")
        for other_id in ids:
            lines.append(f"  {other_id:>4}. {names.get(str(other_id), '?')}")
    return "\n".join(lines) + "\n"


# -----------------------
# CLI
# -----------------------
def _parse_args(argv: List[str]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Social Network page builder")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_b = sub.add_parser("build", help="Write index and profile pages for a user list")
    ap_b.add_argument("input", help="Path to the user list file")
    ap_b.add_argument("--out", default=None, help="Output directory (default from config: site)")
    ap_b.add_argument("--config", default=None, help="Optional JSON config file")
    ap_b.add_argument("--plot", action="store_true", help="Also write an interactive follow-matrix heatmap")

    ap_i = sub.add_parser("inspect", help="Show followers and mutuals of one user")
    ap_i.add_argument("input", help="Path to the user list file")
    ap_i.add_argument("id", type=int, help="User id to inspect")
    ap_i.add_argument("--out", help="Write a clean text report to this file instead of JSON to stdout")

    return ap.parse_args(argv)


def _load_config(path: str | None) -> NetworkConfig:
    if not path:
        return NetworkConfig()
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    # allow partial configs
    base = dataclasses.asdict(NetworkConfig())
    base.update({k: data[k] for k in data.keys() if k in base})
    return NetworkConfig(**base)


def main(argv: List[str] | None = None) -> None:
    ns = _parse_args(sys.argv[1:] if argv is None else argv)
    log = logging.getLogger("social_network")
    try:
        if ns.cmd == "build":
            cfg = _load_config(ns.config)
            if ns.out is not None:
                cfg = dataclasses.replace(cfg, out_dir=ns.out)
            if ns.plot:
                cfg = dataclasses.replace(cfg, plot=True)
            out_dir = SocialNetworkPipeline(cfg).run(ns.input)
            print(f"Built {out_dir}")
        elif ns.cmd == "inspect":
            info = inspect_user(ns.input, ns.id)
            if getattr(ns, "out", None):
                out_path = Path(ns.out)
                out_path.write_text(_format_inspect_text(info), encoding="utf-8")
                print(f"Wrote {out_path}")
            else:
                print(json.dumps(info, indent=2, ensure_ascii=False))
        else:
            raise SystemExit(2)
    except SocialNetworkError as e:
        log.error("%s: %s", type(e).__name__, e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
