from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
from bokeh.io import save
from bokeh.models import ColumnDataSource, HoverTool
from bokeh.plotting import figure
from bokeh.resources import CDN

from socialnet.relationship_matrix import RelationshipMatrix

FOLLOW_COLOR = "#4a6fa5"
MUTUAL_COLOR = "purple"


def build_adjacency_plot(matrix: RelationshipMatrix, names: Sequence[str], title: str = "Who follows whom"):
    """Heatmap with a row per follower and a column per followed user; mutual follows in purple."""
    follows = matrix.as_array()
    ids = [str(i) for i in range(1, matrix.size + 1)]
    rows, cols = np.nonzero(follows)
    mutual = follows[cols, rows] & (rows != cols)

    source = ColumnDataSource(data=dict(
        follower=[ids[r] for r in rows],
        followed=[ids[c] for c in cols],
        follower_name=[names[r] for r in rows],
        followed_name=[names[c] for c in cols],
        fill=[MUTUAL_COLOR if m else FOLLOW_COLOR for m in mutual],
    ))

    side = max(300, min(900, 24 * matrix.size))
    p = figure(
        title=title,
        x_range=ids,
        y_range=list(reversed(ids)),
        tools="pan,wheel_zoom,reset,save",
        active_scroll="wheel_zoom",
        width=side,
        height=side,
        x_axis_location="above",
    )
    r_rect = p.rect(
        x="followed", y="follower",
        width=1, height=1,
        fill_color="fill",
        line_color=None,
        source=source,
    )
    p.add_tools(HoverTool(tooltips=[
        ("follower", "@follower_name (@follower)"),
        ("follows", "@followed_name (@followed)"),
    ], renderers=[r_rect]))
    p.xaxis.axis_label = "followed id"
    p.yaxis.axis_label = "follower id"
    p.grid.grid_line_alpha = 0.3
    p.min_border = 0
    return p


def write_adjacency_plot(out_path: Path, matrix: RelationshipMatrix, names: Sequence[str]) -> Path:
    out_path = Path(out_path)
    plot = build_adjacency_plot(matrix, names)
    save(plot, filename=str(out_path), resources=CDN, title="Social Network: follow matrix")
    return out_path
