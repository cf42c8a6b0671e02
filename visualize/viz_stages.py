"""
Visualize Pipeline Stages

Standalone script to run the ASCII pipeline on still images and inspect
every stage.

For each image it saves:
    - <name>_combined.jpg   2x2 debug canvas (original, smoothed, gray, gradient)
    - <name>_stages.jpg     labelled panels including the edge grid overlay
    - <name>_ascii.txt      colored ASCII art (view with `cat`)
    - <name>_edges.txt      edge glyphs only
and a summary_grid.png of all canvases.

Usage:
    python viz_stages.py <image_directory>
"""

import cv2
import sys
from pathlib import Path
import matplotlib.pyplot as plt

sys.path.append(str(Path(__file__).parent.parent))

from config import BLOCK_SIZE
from modules import GridMismatchError
from modules.visualization import create_grid_visualization, draw_edge_grid
from pipeline import AsciiArtPipeline


def save_summary(canvas_files, output_dir: Path):
    """Tile the saved debug canvases in one matplotlib figure."""
    n_images = len(canvas_files)
    cols = 3
    rows = (n_images + cols - 1) // cols

    fig, axes = plt.subplots(rows, cols, figsize=(18, 5 * rows), squeeze=False)

    for idx, img_file in enumerate(canvas_files):
        ax = axes[idx // cols, idx % cols]
        img = cv2.cvtColor(cv2.imread(str(img_file)), cv2.COLOR_BGR2RGB)
        ax.imshow(img)
        ax.set_title(img_file.name.replace("_combined.jpg", ""), fontsize=10)
        ax.axis('off')

    for idx in range(n_images, rows * cols):
        axes[idx // cols, idx % cols].axis('off')

    plt.tight_layout()
    summary_file = output_dir / "summary_grid.png"
    plt.savefig(summary_file, dpi=120, bbox_inches='tight')
    plt.close(fig)
    print(f"Summary grid saved: {summary_file.name}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python viz_stages.py <image_directory>")
        sys.exit(1)

    input_dir = Path(sys.argv[1])
    if not input_dir.exists():
        print(f"Error: Path does not exist: {input_dir}")
        sys.exit(1)

    output_dir = input_dir / "viz_stages"
    output_dir.mkdir(exist_ok=True)

    pipeline = AsciiArtPipeline()

    image_files = []
    for ext in ['*.jpg', '*.jpeg', '*.png', '*.JPG', '*.JPEG', '*.PNG']:
        image_files.extend(input_dir.glob(ext))
    image_files = sorted(list(set(image_files)))

    print(f"Found {len(image_files)} images\n")

    canvas_files = []
    for idx, img_path in enumerate(image_files, 1):
        print(f"[{idx}/{len(image_files)}] {img_path.name}")

        image = cv2.imread(str(img_path))
        if image is None:
            print("  Warning: Could not read image")
            continue

        try:
            results = pipeline.process_frame(image)
        except GridMismatchError as e:
            print(f"  Warning: {e}")
            continue

        edge_grid = results['edge_grid']
        n_edges = int((edge_grid >= 0).sum())
        print(f"  Blocks: {edge_grid.shape[1]}x{edge_grid.shape[0]} | Edge blocks: {n_edges}")

        canvas_path = output_dir / f"{img_path.stem}_combined.jpg"
        cv2.imwrite(str(canvas_path), pipeline.visualize_results(image, results))
        canvas_files.append(canvas_path)

        block_colors = cv2.resize(results['block_colors'], (image.shape[1], image.shape[0]),
                                  interpolation=cv2.INTER_NEAREST)
        stages = create_grid_visualization(
            [image,
             results['magnitude'],
             draw_edge_grid(results['gray'], edge_grid, BLOCK_SIZE),
             block_colors],
            labels=["1. Original", "2. Gradient", "3. Edge Grid", "4. Block Colors"]
        )
        cv2.imwrite(str(output_dir / f"{img_path.stem}_stages.jpg"), stages)

        (output_dir / f"{img_path.stem}_ascii.txt").write_text(results['ascii_art'], encoding='utf-8')
        (output_dir / f"{img_path.stem}_edges.txt").write_text(
            pipeline.gradient_analyzer.edge_text(edge_grid), encoding='utf-8')
        print(f"  Saved: {canvas_path.name}")

    if canvas_files:
        save_summary(canvas_files, output_dir)

    print(f"\nResults saved to: {output_dir.absolute()}")


if __name__ == "__main__":
    main()
