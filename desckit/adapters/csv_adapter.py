import csv
import logging
import chardet
from pathlib import Path
from typing import List, Dict, Optional

logger = logging.getLogger(__name__)


class CsvAdapter:
    """CSV adapter for reading description import files.

    The first row is the header and supplies the keys for every later row.
    Each data row is zipped positionally with the header, so:
    - Rows shorter than the header produce records without the trailing keys
    - Values past the header width are dropped
    - Every value stays a string (no type coercion)

    Handles:
    - UTF-8 with or without BOM, plus legacy encodings detected by chardet
    - Comma delimiter with double-quote quoting (tab for .tsv files)
    """

    def __init__(self, delimiter: Optional[str] = None, quotechar: str = '"'):
        """Initialize the adapter.

        Args:
            delimiter: Field delimiter. Defaults to ',' (or tab for .tsv files)
            quotechar: Quote character used for fields containing delimiters
        """
        self.delimiter = delimiter
        self.quotechar = quotechar

    def can_handle(self, file_path: str) -> bool:
        """Check if this adapter can handle the given file."""
        return Path(file_path).suffix.lower() in [".csv", ".tsv"]

    def _detect_encoding(self, file_path: str) -> str:
        """Detect file encoding using chardet, defaulting to UTF-8."""
        with open(file_path, 'rb') as f:
            raw_data = f.read(10000)  # Read first 10KB for detection

        # Check for BOM first so the header keys come out clean
        if raw_data.startswith(b'\xef\xbb\xbf'):
            return 'utf-8-sig'

        result = chardet.detect(raw_data)
        encoding = result.get('encoding') or 'utf-8'

        # chardet reports pure ASCII as 'ascii', which UTF-8 covers
        encoding_lower = encoding.lower()
        if 'utf-8' in encoding_lower or 'utf8' in encoding_lower or encoding_lower == 'ascii':
            return 'utf-8'

        return encoding

    def _delimiter_for(self, file_path: str) -> str:
        if self.delimiter:
            return self.delimiter
        if Path(file_path).suffix.lower() == '.tsv':
            return '\t'
        return ','

    def _read_records(self, file_path: str, encoding: str, delimiter: str) -> List[Dict[str, str]]:
        records = []
        with open(file_path, 'r', encoding=encoding, newline='') as f:
            reader = csv.reader(f, delimiter=delimiter, quotechar=self.quotechar)
            header = None

            for row in reader:
                # Blank lines carry no record
                if not row:
                    continue

                if header is None:
                    header = row
                    continue

                if len(row) != len(header):
                    logger.warning(
                        f"{file_path}: line {reader.line_num} has {len(row)} fields, "
                        f"header has {len(header)}"
                    )

                records.append(dict(zip(header, row)))

        return records

    def read(self, file_path: str) -> List[Dict[str, str]]:
        """Read a CSV file and return its records in file order.

        Args:
            file_path: Path to the CSV/TSV file

        Returns:
            List of dictionaries, one per data row, keyed by header column name

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file cannot be decoded or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if path.stat().st_size == 0:
            return []

        encoding = self._detect_encoding(file_path)
        delimiter = self._delimiter_for(file_path)

        try:
            return self._read_records(file_path, encoding, delimiter)

        except UnicodeDecodeError as e:
            # Detection can guess wrong on short samples; retry with single-byte encodings
            for fallback_encoding in ['cp1252', 'latin-1']:
                try:
                    logger.warning(
                        f"Could not decode {file_path} as {encoding}, retrying as {fallback_encoding}"
                    )
                    return self._read_records(file_path, fallback_encoding, delimiter)
                except UnicodeDecodeError:
                    continue
            raise ValueError(f"Could not decode file {file_path}: {e}")

        except csv.Error as e:
            raise ValueError(f"Error parsing CSV file {file_path}: {e}")
