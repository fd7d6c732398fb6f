# plotting.py
import numpy as np
import matplotlib.pyplot as plt


def _axes(ax, title):
    if ax is None:
        _, ax = plt.subplots(figsize=(7, 7))
    if title:
        ax.set_title(title)
    ax.set_aspect("equal")
    ax.grid(False)
    return ax


# ============================================================
# Point paths
# ============================================================
def plot_point_path(path, starting_point=None, ax=None, title: str = "", show=True):
    """Draw an ordered point path, with the start marked if there is one."""
    ax = _axes(ax, title)
    pts = np.asarray([tuple(p) for p in path], dtype=float).reshape(-1, 2)
    if starting_point is not None:
        ax.scatter([starting_point[0]], [starting_point[1]], s=90, color="red", zorder=6, label="start")
        pts = np.vstack([np.asarray(starting_point, dtype=float).reshape(1, 2), pts])
    if len(pts):
        ax.plot(pts[:, 0], pts[:, 1], "-o", color="blue", lw=1.5, ms=4, label="path")
    if ax.get_legend_handles_labels()[0]:
        ax.legend()
    if show:
        plt.show()
    return ax


# ============================================================
# Line paths
# ============================================================
def plot_line_path(lines, starting_point=None, ax=None, title: str = "", show=True):
    """Solid for the oriented lines, dashed for the travel moves between them."""
    ax = _axes(ax, title)
    position = starting_point
    if starting_point is not None:
        ax.scatter([starting_point[0]], [starting_point[1]], s=90, color="red", zorder=6, label="start")

    travel_label = "travel"
    for i, (entry, exit_point) in enumerate(lines):
        if position is not None:
            ax.plot([position[0], entry[0]], [position[1], entry[1]], "--", color="gray", lw=1,
                    label=travel_label)
            travel_label = None
        ax.plot([entry[0], exit_point[0]], [entry[1], exit_point[1]], "-", color="blue", lw=2,
                label="line" if i == 0 else None)
        ax.annotate("", xy=(exit_point[0], exit_point[1]), xytext=(entry[0], entry[1]),
                    arrowprops=dict(arrowstyle="->", color="blue"))
        position = exit_point

    if ax.get_legend_handles_labels()[0]:
        ax.legend()
    if show:
        plt.show()
    return ax


# ============================================================
# Several orderings of one point set
# ============================================================
def plot_orders(points: np.ndarray, path_orders=None, labels=None, title: str = "", show=True):
    """Overlay several orderings of the same point set."""
    points = np.asarray(points, dtype=float)
    ax = _axes(None, title)

    ax.scatter(points[:, 0], points[:, 1], color="red", zorder=5, label="Points")

    colors = plt.cm.tab10.colors
    if path_orders:
        for idx, order in enumerate(path_orders):
            ordered = points[np.asarray(order, dtype=int)]
            color = colors[idx % len(colors)]
            lbl = labels[idx] if labels else f"path {idx}"
            ax.plot(ordered[:, 0], ordered[:, 1], "-o", color=color, lw=1.5, ms=4, label=lbl)

    ax.legend()
    if show:
        plt.show()
    return ax
