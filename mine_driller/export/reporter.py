"""Text output for the mine driller: narrative, maps and summary report."""

from typing import Dict, List, Optional
from pathlib import Path

from ..model.grid import GridMap
from ..model.state import MinePath


class Reporter:
    """Formats the input map, the winning descent and a summary report."""

    def __init__(self, grid: GridMap, map_path: Optional[str] = None,
                 placeholder: str = ""):
        self.grid = grid
        self.map_path = map_path
        self.placeholder = placeholder

    def format_map(self) -> str:
        """Input map, every value tab-separated."""
        return "\n".join("\t".join(str(v) for v in row)
                         for row in self.grid.rows())

    def narrate(self, path: MinePath) -> str:
        """Step-by-step account of the descent."""
        first = path.start
        lines = [f"The driller starts at ({first.row}, {first.col}) "
                 f"and claims {first.value}."]
        for step in path.steps[1:]:
            lines.append(f"Driller goes {step.move.value} "
                         f"and claims {step.value}.")
        lines.append("Driller retracts.")
        lines.append("")

        addends = " + ".join(str(s.value) for s in path.steps)
        lines.append(f"Total resources: {addends} = {path.total}.")
        return "\n".join(lines)

    def format_solution_map(self, path: MinePath) -> str:
        """
        Grid with only the cells on the path filled in.
        Trailing placeholder columns are dropped from each line.
        """
        lines = []
        for r in range(self.grid.size):
            cells = []
            last = -1
            for c in range(self.grid.size):
                if path.contains(r, c):
                    cells.append(str(self.grid.value_at(r, c)))
                    last = c
                else:
                    cells.append(self.placeholder)
            if not self.placeholder:
                cells = cells[:last + 1]
            lines.append("\t".join(cells))
        return "\n".join(lines)

    def generate_summary(self, path: MinePath,
                         search_summary: Dict,
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        end = path.steps[-1]

        # Build report
        lines: List[str] = [
            "",
            "=" * 80,
            "                        MINE DRILLER SEARCH REPORT",
            "=" * 80,
            f"Map: {self.map_path if self.map_path else '(in memory)'}",
            f"Grid Size: {self.grid.size}x{self.grid.size}",
            "",
            "BEST DESCENT",
            "-" * 40,
            f"Start Cell:            ({path.start.row}, {path.start.col})",
            f"End Cell:              ({end.row}, {end.col})",
            f"Moves:                 {len(path.moves)}",
            f"Total Resources:       {path.total}",
            "",
            "SEARCH METRICS",
            "-" * 40,
            f"Columns Searched:      {search_summary.get('columns_searched', 0)}",
            f"Nodes Created:         {search_summary.get('nodes_created', 0)}",
            f"Goal Paths Found:      {search_summary.get('goal_paths', 0)}",
            "",
            "OUTPUT FILES",
            "-" * 40,
        ]

        # Output file paths
        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'path_steps.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'solution.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'descent.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 80)

        return "\n".join(lines)
