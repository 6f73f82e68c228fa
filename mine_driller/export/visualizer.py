"""Visualization and export for the mine driller."""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from pathlib import Path
from typing import List, TYPE_CHECKING
from PIL import Image
import io

if TYPE_CHECKING:
    from ..model.grid import GridMap
    from ..model.state import MinePath


class Visualizer:
    """
    Renders the grid and a descent path using matplotlib.

    Supports:
    - Single PNG snapshots of the full path
    - Animated GIF of the driller descending row by row
    """

    # Color scheme
    COLORS = {
        'path': '#E74C3C',      # Red
        'start': '#27AE60',     # Green
        'end': '#F39C12',       # Orange
        'text': '#2C3E50',      # Dark blue-gray
    }
    CMAP = 'YlGnBu'

    def __init__(self, grid: "GridMap"):
        self.grid = grid
        self.frames: List[Image.Image] = []

    def _create_figure(self, path: "MinePath", depth: int) -> plt.Figure:
        """Create figure showing the first `depth` steps of the path."""
        n = self.grid.size
        fig_size = max(4, 0.8 * n)
        fig, ax = plt.subplots(figsize=(fig_size, fig_size))

        values = np.asarray(self.grid.values, dtype=np.float64)
        ax.imshow(values, cmap=self.CMAP, origin='upper', aspect='equal',
                  extent=[-0.5, n - 0.5, n - 0.5, -0.5])

        # Annotate every cell with its value
        for r in range(n):
            for c in range(n):
                ax.text(c, r, str(self.grid.value_at(r, c)),
                        ha='center', va='center', fontsize=9,
                        color=self.COLORS['text'])

        steps = path.steps[:depth]
        if steps:
            cols = [s.col for s in steps]
            rows = [s.row for s in steps]
            ax.plot(cols, rows, '-', color=self.COLORS['path'],
                    linewidth=2.5, alpha=0.8)
            ax.plot(cols[0], rows[0], 'o', color=self.COLORS['start'],
                    markersize=14, markerfacecolor='none', markeredgewidth=2)
            ax.plot(cols[-1], rows[-1], 's', color=self.COLORS['end'],
                    markersize=14, markerfacecolor='none', markeredgewidth=2)

        claimed = sum(s.value for s in steps)
        ax.set_title(f'Depth {len(steps)}/{n} | Resources: {claimed}')
        ax.set_xlabel('Column')
        ax.set_ylabel('Row')
        ax.set_xticks(range(n))
        ax.set_yticks(range(n))

        plt.tight_layout()
        return fig

    def buffer_frame(self, path: "MinePath", depth: int) -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(path, depth)

        # Convert to PIL Image
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def buffer_descent(self, path: "MinePath") -> None:
        """Buffer one frame per row of the path."""
        for depth in range(1, len(path) + 1):
            self.buffer_frame(path, depth)

    def save_snapshot(self, path: "MinePath", output_path: Path) -> None:
        """Save single PNG image of the full path."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(path, len(path))
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 2) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )
