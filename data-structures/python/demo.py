"""
Binary Search Tree Demo -- Structural operations walkthrough, height growth under
sorted vs random insertion, and the three removal cases.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Summary PDF report
"""

import logging
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_search_tree import BinarySearchTree, UnderflowError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

WALKTHROUGH_VALUES = [105, 155, 130, 50, 65, 40, 35, 45, 205]
REMOVAL_VALUES = [50, 30, 70, 20, 40, 60, 80, 35]
HEIGHT_SIZES = [7, 15, 31, 63, 127, 255]
HEIGHT_TRIALS = 25


def build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(int(value))
    return tree


def balanced_order(lo, hi):
    """Insertion order that yields a perfect tree when hi - lo + 2 is a power of two."""
    if lo > hi:
        return []
    mid = (lo + hi) // 2
    return [mid] + balanced_order(lo, mid - 1) + balanced_order(mid + 1, hi)


def draw_tree(ax, tree, title, highlight=()):
    """Plot nodes at (in-order rank, -depth) with edges to their children."""
    coords = {}
    edges = []
    rank = [0]

    def walk(node, depth):
        if node is None:
            return None
        left = walk(node.left, depth + 1)
        key = id(node)
        coords[key] = (rank[0], -depth, node.value)
        rank[0] += 1
        right = walk(node.right, depth + 1)
        for child in (left, right):
            if child is not None:
                edges.append((key, child))
        return key

    walk(tree._root, 0)

    for parent, child in edges:
        x0, y0, _ = coords[parent]
        x1, y1, _ = coords[child]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], linewidth=1.2, zorder=1)

    for x, y, value in coords.values():
        color = COLORS["orange"] if value in highlight else COLORS["blue"]
        ax.scatter([x], [y], s=650, color=color, edgecolor="white", linewidth=1.5, zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", fontsize=8,
                color="white", fontweight="bold", zorder=3)

    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.set_xlim(-1, max(rank[0], 1))
    ax.set_ylim(-(tree.height() + 1), 1)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Structural Operations Walkthrough
# ---------------------------------------------------------------------------
def example_1_walkthrough():
    """count, is_full, compare, equal, copy, mirror, rotations and level order."""
    print("=" * 60)
    print("Example 1: Structural Operations Walkthrough")
    print("=" * 60)

    tree = build(WALKTHROUGH_VALUES)
    print(f"\n  Inserted: {WALKTHROUGH_VALUES}")
    print("\n  Original tree (in order):")
    tree.print_tree()

    print(f"\n  a) Number of nodes: {tree.count()}")
    print(f"  b) Height: {tree.height()}, full: {tree.is_full()}")
    print(f"  c) Same structure as itself: {tree.compare_structure(tree)}")
    print(f"  d) mirror().mirror() equals original: {tree.equal(tree.mirror().mirror())}")

    clone = tree.copy()
    print(f"  e) Copy equals original: {clone.equal(tree)}")

    mirrored = tree.mirror()
    print(f"  f) Mirrored in order: {mirrored.in_order()}")
    print(f"  g) Original is mirror of mirrored: {tree.is_mirror(mirrored)}")

    rotated = tree.copy()
    rotated.rotate_right(50)
    print(f"  h) Rotated right at 50, pre order: {rotated.pre_order()}")
    restored = rotated.copy()
    restored.rotate_left(40)
    print(f"  i) Rotated left at 40, equals original: {restored.equal(tree)}")

    print("  j) Level order:")
    tree.level_order_traversal()

    print("\n  Rotation that cannot apply (65 has no left child):")
    applied = tree.copy().rotate_right(65)
    print(f"  rotate_right(65) applied: {applied}")

    try:
        BinarySearchTree().find_min()
    except UnderflowError as exc:
        print(f"\n  find_min on empty tree -> UnderflowError: {exc}")

    fig, axes = plt.subplots(2, 2, figsize=(16, 10))
    draw_tree(axes[0, 0], tree, "Original\nInsertion order " + ", ".join(map(str, WALKTHROUGH_VALUES)))
    draw_tree(axes[0, 1], mirrored, "Mirror\nLeft/right flipped at every node, in-order reversed")
    draw_tree(axes[1, 0], rotated, "rotate_right(50)\n40 promoted, 50 becomes its right child",
              highlight=(40, 50))
    draw_tree(axes[1, 1], restored, "rotate_left(40)\nInverse rotation restores the original",
              highlight=(40, 50))

    fig.suptitle("Unbalanced BST: Structural Operations", fontsize=14, fontweight="bold", y=1.0)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_walkthrough.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_walkthrough.png")


# ---------------------------------------------------------------------------
# Example 2: Height Growth and the is_full Count Check
# ---------------------------------------------------------------------------
def example_2_height_growth():
    """Sorted insertion degenerates; random insertion stays near log2(n)."""
    print("\n" + "=" * 60)
    print("Example 2: Height Growth and the is_full Count Check")
    print("=" * 60)

    sorted_heights = []
    random_means = []
    random_stds = []
    perfect_heights = []
    counts = []
    full_bounds = []

    print(f"\n  {'n':>6} {'sorted':>8} {'random':>14} {'perfect':>8} {'perfect full':>13}")
    print(f"  {'-' * 53}")

    for n in HEIGHT_SIZES:
        sorted_heights.append(build(range(n)).height())

        heights = []
        for _ in range(HEIGHT_TRIALS):
            tree = build(np.random.permutation(n))
            heights.append(tree.height())
            counts.append(tree.count())
            full_bounds.append(2 * tree.height() + 1)
        random_means.append(np.mean(heights))
        random_stds.append(np.std(heights))

        perfect = build(balanced_order(0, n - 1))
        perfect_heights.append(perfect.height())

        print(f"  {n:>6} {sorted_heights[-1]:>8} "
              f"{random_means[-1]:>8.2f} +/- {random_stds[-1]:<4.2f}"
              f"{perfect_heights[-1]:>6} {str(perfect.is_full()):>13}")

    fig, axes = plt.subplots(1, 2, figsize=(16, 6))

    axes[0].plot(HEIGHT_SIZES, sorted_heights, "o-", color=COLORS["red"], linewidth=2,
                 label="Sorted insertion (degenerate)")
    axes[0].errorbar(HEIGHT_SIZES, random_means, yerr=random_stds, fmt="o-",
                     color=COLORS["blue"], linewidth=2, capsize=4,
                     label=f"Random insertion (mean of {HEIGHT_TRIALS})")
    axes[0].plot(HEIGHT_SIZES, perfect_heights, "s--", color=COLORS["green"], linewidth=2,
                 label="Median-first insertion (perfect)")
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log")
    axes[0].set_xlabel("Number of nodes n")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Height vs Tree Size\nNo rebalancing: worst case is linear in n",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    counts = np.array(counts)
    full_bounds = np.array(full_bounds)
    axes[1].scatter(full_bounds, counts, s=14, alpha=0.5, color=COLORS["purple"],
                    label="Random trees")
    limit = max(full_bounds.max(), counts.max())
    axes[1].plot([0, limit], [0, limit], "--", color=COLORS["dark"],
                 label="count == 2 * height + 1 (is_full)")
    axes[1].set_xlabel("2 * height + 1")
    axes[1].set_ylabel("count")
    axes[1].set_title("The is_full Check on Random Trees\nOnly totals are compared, not per-node shape",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    fig.suptitle("Unbalanced BST: Height Growth", fontsize=14, fontweight="bold", y=1.0)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_height_growth.png")


# ---------------------------------------------------------------------------
# Example 3: Removal Cases
# ---------------------------------------------------------------------------
def example_3_removal_cases():
    """Leaf, single child, and two children (successor copy)."""
    print("\n" + "=" * 60)
    print("Example 3: Removal Cases")
    print("=" * 60)

    tree = build(REMOVAL_VALUES)
    snapshots = [("Start", tree.copy(), ())]
    steps = [
        (20, "Leaf: link cleared"),
        (40, "One child: 35 takes its place"),
        (50, "Two children: successor 60 copied up"),
    ]

    print(f"\n  Inserted: {REMOVAL_VALUES}")
    print(f"  Level order: {tree.level_order()}")
    for value, label in steps:
        tree.remove(value)
        print(f"  remove({value}) -> {tree.level_order()}  [{label}]")
        snapshots.append((f"remove({value})\n{label}", tree.copy(), (35, 60)))

    fig, axes = plt.subplots(1, len(snapshots), figsize=(20, 5))
    for ax, (title, snapshot, highlight) in zip(axes, snapshots):
        draw_tree(ax, snapshot, title, highlight=highlight)

    fig.suptitle("Unbalanced BST: Removal Cases", fontsize=14, fontweight="bold", y=1.02)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_removal_cases.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_removal_cases.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(report_path) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.94, "Unbalanced Binary Search Tree", fontsize=20, fontweight="bold",
                ha="center", va="top", transform=ax.transAxes)

        summary_items = [
            "1. Ordering: every left subtree holds smaller values, every right subtree",
            "   larger ones. Duplicates are ignored, so in-order output is strictly ascending.",
            "",
            "2. Structure: insert/remove rewire links through return values; nodes never",
            "   point to their parents. copy and mirror build disjoint node graphs.",
            "",
            "3. Mirror: flipping every node reverses in-order output and breaks the",
            "   ordering invariant, so a mirrored tree is for comparison, not search.",
            "",
            "4. Rotations: a single right or left rotation promotes one child and keeps",
            "   in-order output unchanged. Rotating where the child is missing is a",
            "   logged no-op, not an error.",
            "",
            "5. Height: without rebalancing, sorted input yields height n - 1 while random",
            "   input stays close to a small multiple of log2(n).",
            "",
            "6. is_full: compares count with 2 * height + 1 only. It holds for perfect",
            "   trees but does not inspect the shape of each node.",
        ]
        ax.text(0.06, 0.84, "\n".join(summary_items), fontsize=10, ha="left", va="top",
                transform=ax.transAxes, family="monospace", linespacing=1.3)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_walkthrough.png": "Example 1: Structural Operations",
            "02_height_growth.png": "Example 2: Height Growth",
            "03_removal_cases.png": "Example 3: Removal Cases",
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
    logging.basicConfig(level=logging.INFO, format="  %(levelname)s %(name)s: %(message)s")

    print("Binary Search Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_walkthrough()
    example_2_height_growth()
    example_3_removal_cases()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
