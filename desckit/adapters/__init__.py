from .csv_adapter import CsvAdapter

__all__ = ["CsvAdapter"]
