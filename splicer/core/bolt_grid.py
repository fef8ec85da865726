"""Bolt grid generation shared by both views.

A grid is laid out on the positive-x side of the splice: columns march
away from the web gap along the member, rows are centered on a given
height. The other side of the splice is its mirror image about x = 0.
"""

from __future__ import annotations

from splicer.models import Point2D


def bolt_grid(
    x_start: float,
    column_spacing: float,
    row_pitch: float,
    rows: int,
    columns: int,
    center_y: float,
    stagger: float = 0.0,
) -> list[Point2D]:
    """
    Return `rows * columns` bolt centers, column by column.

    x_start is the x of the first column (web gap half-width plus edge
    distance). Rows span c = row_pitch * (rows - 1), centered on
    center_y. Odd (0-based) columns are shifted by `stagger` in y.
    """
    if rows <= 0 or columns <= 0:
        return []

    c = row_pitch * (rows - 1)
    y_first = center_y - c / 2

    points: list[Point2D] = []
    for j in range(columns):
        x = x_start + j * column_spacing
        offset = stagger if j % 2 == 1 else 0.0
        for i in range(rows):
            points.append(Point2D(x=x, y=y_first + i * row_pitch + offset))
    return points


def column_positions(x_start: float, spacing: float, columns: int) -> list[float]:
    """x of each bolt column on the positive side."""
    return [p.x for p in bolt_grid(x_start, spacing, 0.0, 1, columns, 0.0)]


def mirror_x(points: list[Point2D]) -> list[Point2D]:
    """Points reflected onto the negative-x side."""
    return [p.mirrored_x() for p in points]


def both_sides(points: list[Point2D]) -> list[Point2D]:
    """Positive-side points followed by their mirror images."""
    return points + mirror_x(points)
