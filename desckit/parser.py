from .ingest.description_import import import_descriptions, ImportSummary
from .ingest.store import DescriptionStore
from .listing import list_bundle_descriptions, list_field_descriptions
from .schema import BUNDLE_LIST_HEADERS, FIELD_LIST_HEADERS
from typing import List, Dict, Any, Iterable, Optional
from pathlib import Path
import csv
import json
import logging
import openpyxl

logger = logging.getLogger(__name__)


class DescriptionParser:
    """Reads description import files and writes description listings."""

    def __init__(self):
        """Initialize the parser with no adapters registered."""
        self.adapters = []

    def register_adapter(self, adapter):
        """Register a file adapter for parsing.

        Args:
            adapter: Adapter instance with can_handle() and read() methods
        """
        self.adapters.append(adapter)

    def _find_adapter(self, file_path: str):
        for a in self.adapters:
            if a.can_handle(file_path):
                return a
        raise ValueError(f"No adapter found for {file_path}")

    def parse(self, file_path: str) -> List[Dict[str, str]]:
        """Parse an import file into records.

        Args:
            file_path: Path to the import file

        Returns:
            List of dictionaries keyed by the file's header columns

        Raises:
            ValueError: If no adapter accepts the file (e.g. wrong extension)
            FileNotFoundError: If the file doesn't exist
        """
        adapter = self._find_adapter(file_path)
        return adapter.read(file_path)

    def import_file(
        self,
        file_path: str,
        store: DescriptionStore,
        debug: bool = False
    ) -> Optional[ImportSummary]:
        """Parse an import file and apply its descriptions to the store.

        Convenience method that combines parse() and import_descriptions().
        The file is read completely before any description is written.

        Args:
            file_path: Path to the CSV import file
            store: Description store to update
            debug: Log every import decision

        Returns:
            ImportSummary, or None if the file lacks a required column
        """
        records = self.parse(file_path)
        if debug:
            logger.info(f"Parsed {len(records)} records from {file_path}")
        return import_descriptions(records, store, debug=debug)

    def export(
        self,
        data: List[Dict[str, Any]],
        output_path: str,
        format: Optional[str] = None,
        headers: Optional[List[str]] = None
    ) -> str:
        """Export description records to a file.

        Args:
            data: List of dictionaries, one per row
            output_path: Path where the file should be saved
            format: Output format ('csv', 'excel', 'json', or None for auto-detect from extension)
            headers: Column order (defaults to the keys of the first row)

        Returns:
            Path to the exported file

        Raises:
            ValueError: If format is not supported, or data is empty and no
                headers are given
        """
        if not data and headers is None:
            raise ValueError("Cannot export empty data")

        output_path = Path(output_path)

        # Auto-detect format from extension if not provided
        if format is None:
            suffix = output_path.suffix.lower()
            if suffix in ['.csv', '.tsv']:
                format = 'csv'
            elif suffix in ['.xlsx', '.xls']:
                format = 'excel'
            elif suffix == '.json':
                format = 'json'
            else:
                # Default to CSV if extension is not recognized
                format = 'csv'
                output_path = output_path.with_suffix('.csv')

        format = format.lower()

        if headers is None:
            headers = list(data[0].keys())

        if format == 'csv':
            self._export_csv(data, output_path, headers)
        elif format == 'excel':
            self._export_excel(data, output_path, headers)
        elif format == 'json':
            self._export_json(data, output_path)
        else:
            raise ValueError(f"Unsupported export format: {format}. Supported formats: csv, excel, json")

        return str(output_path)

    def _export_csv(self, data: List[Dict[str, Any]], output_path: Path, headers: List[str]) -> None:
        """Export data to CSV file."""
        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=headers, extrasaction='ignore', quotechar='"')
            writer.writeheader()
            for row in data:
                complete_row = {header: row.get(header, '') for header in headers}
                writer.writerow(complete_row)

    def _export_excel(self, data: List[Dict[str, Any]], output_path: Path, headers: List[str]) -> None:
        """Export data to Excel file."""
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Descriptions"

        for col_idx, header in enumerate(headers, start=1):
            ws.cell(row=1, column=col_idx, value=header)

        for row_idx, row_data in enumerate(data, start=2):
            for col_idx, header in enumerate(headers, start=1):
                ws.cell(row=row_idx, column=col_idx, value=row_data.get(header, ''))

        wb.save(output_path)

    def _export_json(self, data: List[Dict[str, Any]], output_path: Path) -> None:
        """Export data to JSON file."""
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def export_field_descriptions(
        self,
        store: DescriptionStore,
        output_path: str,
        entity_types: Optional[Iterable[str]] = None,
        format: Optional[str] = None
    ) -> str:
        """List field descriptions from the store and export them.

        The CSV output can be edited and fed back to import_file().

        Args:
            store: Description store
            output_path: Path where the file should be saved
            entity_types: Entity type IDs to list (default: every fieldable type)
            format: Output format (None for auto-detect)

        Returns:
            Path to the exported file
        """
        records = list_field_descriptions(store, entity_types)
        return self.export(records, output_path, format=format, headers=list(FIELD_LIST_HEADERS))

    def export_bundle_descriptions(
        self,
        store: DescriptionStore,
        output_path: str,
        bundle_entity_types: Optional[Iterable[str]] = None,
        format: Optional[str] = None
    ) -> str:
        """List bundle descriptions from the store and export them.

        Args:
            store: Description store
            output_path: Path where the file should be saved
            bundle_entity_types: Bundle entity type IDs (default: all present)
            format: Output format (None for auto-detect)

        Returns:
            Path to the exported file
        """
        records = list_bundle_descriptions(store, bundle_entity_types)
        return self.export(records, output_path, format=format, headers=list(BUNDLE_LIST_HEADERS))
