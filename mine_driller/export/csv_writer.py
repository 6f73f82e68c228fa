"""CSV export of the winning descent."""

import csv
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import MinePath

# step,row,col,move,value,total
#   0,  0,  0,start,    3,    3
#   1,  1,  1,down-right,5,   8
FIELDS = ['step', 'row', 'col', 'move', 'value', 'total']


def write_path_csv(path: "MinePath", output_path: Path) -> Path:
    """Write one row per step of the path with its running total."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        writer.writerows(path.to_csv_rows())
    return output_path
