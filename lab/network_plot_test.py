"""
Network plot tests - heatmap cells and their colours.
"""

from socialnet.network_plot import FOLLOW_COLOR, MUTUAL_COLOR, build_adjacency_plot
from socialnet.relationship_matrix import RelationshipMatrix
from socialnet.user_record import UserRecord

NAMES = ["Ada", "Brook", "Cyd"]


def _heatmap_data(*follows):
    records = [UserRecord(i, NAMES[i - 1], follows=f) for i, f in enumerate(follows, 1)]
    plot = build_adjacency_plot(RelationshipMatrix.from_records(records), NAMES[:len(records)])
    return plot.renderers[0].data_source.data


def test_one_cell_per_follow_with_mutuals_highlighted():
    data = _heatmap_data([2, 3], [1], [])
    assert len(data["follower"]) == 3
    cells = list(zip(data["follower"], data["followed"], data["fill"]))
    assert cells == [
        ("1", "2", MUTUAL_COLOR),
        ("1", "3", FOLLOW_COLOR),
        ("2", "1", MUTUAL_COLOR),
    ]
    assert list(data["follower_name"]) == ["Ada", "Ada", "Brook"]
    assert list(data["followed_name"]) == ["Brook", "Cyd", "Ada"]


def test_self_follow_is_not_drawn_as_mutual():
    data = _heatmap_data([1, 2], [])
    cells = list(zip(data["follower"], data["followed"], data["fill"]))
    assert cells == [("1", "1", FOLLOW_COLOR), ("1", "2", FOLLOW_COLOR)]


def test_no_follows_gives_empty_heatmap():
    data = _heatmap_data([], [])
    assert len(data["follower"]) == 0
