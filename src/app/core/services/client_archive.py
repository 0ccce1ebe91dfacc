"""Flat-file export and import of clients."""
import logging
from pathlib import Path
from typing import Iterable

from src.app.core.domain.exceptions import ClientValidationError, DuplicateIdError
from src.app.core.domain.models import ClientRecord
from src.app.core.services.client_service import ClientService

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";;"
LICENSE_SEPARATOR = ","


class MalformedArchiveLine(ValueError):
    """A line that does not have the four archive fields."""


def format_line(record: ClientRecord) -> str:
    """`full name;;NATIONAL ID;;YYYY-MM-DD;;A,B`"""
    return FIELD_SEPARATOR.join([
        record.full_name,
        record.national_id,
        record.birth_date,
        LICENSE_SEPARATOR.join(sorted(record.license_types)),
    ])


def parse_line(line: str) -> tuple[str, str, str, list[str]]:
    """Split an archive line into full name, national ID, birth date and license labels."""
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != 4:
        raise MalformedArchiveLine(f"expected 4 fields, got {len(fields)}")
    full_name, national_id, birth_date, licenses = (field.strip() for field in fields)
    labels = [label.strip() for label in licenses.split(LICENSE_SEPARATOR) if label.strip()] if licenses else []
    return full_name, national_id, birth_date, labels


class ClientFileArchive:
    """
    Saves clients to a delimited text file and re-registers them from one.

    Restore is a best-effort bulk import: lines that are malformed, invalid or
    already registered are logged and skipped.
    """

    def __init__(self, client_service: ClientService, encoding: str = "utf-8"):
        self.client_service = client_service
        self.encoding = encoding

    def save(self, records: Iterable[ClientRecord], path: str | Path) -> int:
        """Overwrite `path` with one line per record. Returns the number of lines written."""
        path = Path(path)
        lines = [format_line(record) for record in records]
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=self.encoding) as archive:
            for line in lines:
                archive.write(line + "\n")
        logger.info("Saved %d clients to %s", len(lines), path)
        return len(lines)

    async def export_all(self, path: str | Path) -> int:
        """Save every stored client to `path`."""
        clients = await self.client_service.list_clients()
        return self.save(clients, path)

    async def restore(self, path: str | Path) -> list[ClientRecord]:
        """
        Register every client listed in `path`.

        A missing file restores nothing.

        Returns:
            The clients that were created by this call
        """
        path = Path(path)
        if not path.exists():
            logger.info("No client archive at %s, nothing to restore", path)
            return []

        restored: list[ClientRecord] = []
        # Decoded line by line so one undecodable line does not block the rest
        with path.open("rb") as archive:
            raw_lines = archive.read().splitlines()

        for line_number, raw_line in enumerate(raw_lines, start=1):
            if not raw_line.strip():
                continue
            try:
                line = raw_line.decode(self.encoding)
                full_name, national_id, birth_date, labels = parse_line(line)
                restored.append(
                    await self.client_service.create_client(full_name, national_id, birth_date, labels)
                )
            except DuplicateIdError as e:
                logger.warning("Skipping %s:%d, duplicate: %s", path, line_number, e)
            except (MalformedArchiveLine, ClientValidationError, UnicodeDecodeError) as e:
                logger.warning("Skipping %s:%d, malformed: %s", path, line_number, e)

        logger.info("Restored %d clients from %s", len(restored), path)
        return restored
