# aima_search/plots/plotting.py
# Bar plots comparing search runs: nodes expanded, path cost, time and peak frontier size.
from __future__ import annotations
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def bar_compare(rows, title="Search Comparison"):
    names = [r["algo"] for r in rows]
    nodes = [r.get("nodes_expanded") or 0 for r in rows]
    costs = [r.get("cost") or 0 for r in rows]
    times = [r.get("time_s") or 0 for r in rows]
    front = [r.get("max_frontier_size") or 0 for r in rows]

    fig, axs = plt.subplots(2, 2, figsize=(13,9))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded"); axs[0].tick_params(axis='x', rotation=70)
    axs[1].bar(names, costs); axs[1].set_title("Path Cost"); axs[1].tick_params(axis='x', rotation=70)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=70)
    axs[3].bar(names, front); axs[3].set_title("Max Frontier Size"); axs[3].tick_params(axis='x', rotation=70)
    for ax in axs:
        for label in ax.get_xticklabels():
            label.set_fontsize(7)
            label.set_ha("right")
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig
