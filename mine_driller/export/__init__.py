"""Output package for the mine driller."""

from .csv_writer import write_path_csv
from .visualizer import Visualizer
from .reporter import Reporter

__all__ = ['write_path_csv', 'Visualizer', 'Reporter']
