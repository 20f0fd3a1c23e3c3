"""
Ordered Tree Demo -- Level-order shape, deletion cases, and how insertion
order decides tree height.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import io
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from ordered_tree import OrderedTree
from depth_profile import (
    ORDERS,
    insertion_order,
    build_tree,
    level_widths,
    average_depth,
    height_profile,
)

SEED = 42
SIZES = [16, 32, 64, 128, 256, 512, 1024]
TRIALS = 8

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "sorted": "#e74c3c",
    "reversed": "#f39c12",
    "random": "#27ae60",
    "zigzag": "#9b59b6",
    "dark": "#2c3e50",
    "blue": "#3498db",
}


def _level_text(tree):
    out = io.StringIO()
    tree.level_by_level(out)
    return out.getvalue()


# ---------------------------------------------------------------------------
# Example 1: Level-order Diagnostic and Deletion Cases
# ---------------------------------------------------------------------------
def example_1_level_order():
    """Build the 5,3,8,1,4,7,9 tree and walk through each erase case."""
    print("=" * 60)
    print("Example 1: Level-order Diagnostic and Deletion Cases")
    print("=" * 60)

    tree = OrderedTree()
    for key in [5, 3, 8, 1, 4, 7, 9]:
        tree.insert(key, key)

    print("\n  Initial tree (one line per depth):")
    print("    " + _level_text(tree).replace("\n", "\n    ").rstrip())

    tree.insert(5, 500)
    print(f"\n  insert(5, 500) on an existing key -> find(5) = {tree.find(5)}, size = {tree.size()}")

    snapshots = [("initial", tree.copy())]
    for key, label in [(5, "erase 5 (two children)"), (1, "erase 1 (leaf)"),
                       (3, "erase 3 (one child)"), (3, "erase 3 again (absent)")]:
        tree.erase(key)
        snapshots.append((label, tree.copy()))
        print(f"\n  {label}: size = {tree.size()}, root = {tree.root()[0]}")
        print("    " + _level_text(tree).replace("\n", "\n    ").rstrip())

    fig, axes = plt.subplots(1, len(snapshots), figsize=(4 * len(snapshots), 4.5))
    for ax, (label, snap) in zip(axes, snapshots):
        _draw_tree(ax, snap)
        ax.set_title(f"{label}\nsize={snap.size()}", fontsize=10, fontweight="bold")

    fig.suptitle("OrderedTree: Level-order Shape Through Each Erase Case",
                 fontsize=14, fontweight="bold", y=1.02)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_level_order.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_level_order.png")


def _draw_tree(ax, tree):
    """Place nodes by in-order rank (x) and depth (y)."""
    ax.axis("off")
    if tree.is_empty():
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes)
        return

    rank = {key: i for i, (key, _) in enumerate(tree.in_order())}
    depth = {}
    for d, level in tree.levels():
        for key, _ in level:
            depth[key] = d

    edges = []
    stack = [tree._root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.key, child.key))
                stack.append(child)

    for parent, child in edges:
        ax.plot([rank[parent], rank[child]], [-depth[parent], -depth[child]],
                color=COLORS["dark"], linewidth=1.2, zorder=1)
    for key in rank:
        ax.scatter(rank[key], -depth[key], s=500, color=COLORS["blue"],
                   edgecolor="white", zorder=2)
        ax.text(rank[key], -depth[key], str(key), ha="center", va="center",
                color="white", fontsize=10, fontweight="bold", zorder=3)
    ax.set_xlim(-0.8, len(rank) - 0.2)
    ax.set_ylim(-max(depth.values()) - 0.6, 0.6)


# ---------------------------------------------------------------------------
# Example 2: Height vs Insertion Order
# ---------------------------------------------------------------------------
def example_2_height_vs_order():
    """Sorted, reversed and zigzag orders build chains; random orders do not."""
    print("\n" + "=" * 60)
    print("Example 2: Height vs Insertion Order")
    print("=" * 60)

    profiles = {}
    for kind in ORDERS:
        trials = TRIALS if kind == "random" else 1
        profiles[kind] = height_profile(SIZES, kind, trials=trials, seed=SEED)

    print(f"\n  {'n':>6}" + "".join(f"{kind:>10}" for kind in ORDERS) + f"{'log2(n+1)':>12}")
    for i, n in enumerate(SIZES):
        row = "".join(f"{profiles[kind][i]:>10.1f}" for kind in ORDERS)
        print(f"  {n:>6}{row}{np.log2(n + 1):>12.2f}")

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))
    for kind in ORDERS:
        axes[0].plot(sizes, profiles[kind], "o-", label=kind, color=COLORS[kind], linewidth=2)
    axes[0].plot(sizes, np.ceil(np.log2(sizes + 1)), "k--", label="optimal", linewidth=1)
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("Number of keys n")
    axes[0].set_ylabel("Tree height")
    axes[0].set_title("Height by Insertion Order\nNo rebalancing: order decides depth",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    ratio = profiles["random"] / np.log(sizes)
    axes[1].plot(sizes, ratio, "o-", color=COLORS["random"], linewidth=2)
    axes[1].axhline(4.311, color=COLORS["dark"], linestyle="--", linewidth=1,
                    label="asymptotic 4.311")
    axes[1].set_xscale("log", base=2)
    axes[1].set_xlabel("Number of keys n")
    axes[1].set_ylabel("height / ln(n)")
    axes[1].set_title(f"Random Orders: Height Grows Like c * ln(n)\nmean of {TRIALS} trials",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_vs_order.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_height_vs_order.png")


# ---------------------------------------------------------------------------
# Example 3: Depth Distribution
# ---------------------------------------------------------------------------
def example_3_depth_distribution():
    """Per-level node counts for one random tree against a chain."""
    print("\n" + "=" * 60)
    print("Example 3: Depth Distribution")
    print("=" * 60)

    n = 1024
    rng = np.random.default_rng(SEED)
    random_tree = build_tree(insertion_order(n, "random", rng))
    chain = build_tree(insertion_order(n, "sorted"))

    widths = level_widths(random_tree)
    print(f"\n  Random tree: height = {random_tree.height()}, "
          f"average depth = {average_depth(random_tree):.2f}")
    print(f"  Chain:       height = {chain.height()}, "
          f"average depth = {average_depth(chain):.2f}")
    print(f"  Widest level of random tree: depth {int(np.argmax(widths))} "
          f"with {int(widths.max())} nodes")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(np.arange(widths.size), widths, color=COLORS["random"], edgecolor="white",
           label=f"random order (height {widths.size})")
    full = 2 ** np.arange(widths.size)
    ax.step(np.arange(widths.size), np.minimum(full, n), where="mid",
            color=COLORS["dark"], linestyle="--", label="complete-level capacity 2^d")
    ax.set_yscale("log", base=2)
    ax.set_xlabel("Depth")
    ax.set_ylabel("Nodes at depth")
    ax.set_title(f"Nodes per Level, n={n}\nA sorted insert would put 1 node on each of {n} levels",
                 fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_depth_distribution.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_depth_distribution.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Ordered Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "An Unbalanced Binary Search Tree and the Cost of Insertion Order",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Every key in a node's left subtree is smaller than the node's key and\n"
            "every key in its right subtree is larger. Nothing rebalances the tree,\n"
            "so its height is set by the order keys arrive in: random orders give\n"
            "O(log n) height, sorted orders give a chain of height n.\n\n"
            "This demo covers:\n"
            "  1. Level-order diagnostic and the three erase cases\n"
            "  2. Height vs insertion order\n"
            "  3. Depth distribution of a random tree\n\n"
            f"Sizes: {SIZES}\n"
            f"Random seed: {SEED}, trials: {TRIALS}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_level_order.png": "Example 1: Level-order Diagnostic and Deletion Cases",
            "02_height_vs_order.png": "Example 2: Height vs Insertion Order",
            "03_depth_distribution.png": "Example 3: Depth Distribution",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Ordered Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Sizes: {SIZES}")
    print()

    example_1_level_order()
    example_2_height_vs_order()
    example_3_depth_distribution()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
