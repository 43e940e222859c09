"""
Submission archive writer.

Produces a single-entry ZIP in memory. Entry metadata is fixed so identical
documents always produce identical archive bytes.
"""

import io
import re
import zipfile
from datetime import date

import structlog

from ixaccounts.exceptions import EmptyArchiveError, FilenameDerivationError

logger = structlog.get_logger(__name__)

DEFAULT_EXTENSION = "html"
# Earliest timestamp the ZIP format can store
FIXED_TIMESTAMP = (1980, 1, 1, 0, 0, 0)
ENTRY_PERMISSIONS = 0o644 << 16

# Companies House registration number: eight characters, digits or a prefix such as SC
COMPANY_NUMBER = r"[A-Z0-9]{8}"
COMPANY_NUMBER_PATTERN = re.compile(rf"^{COMPANY_NUMBER}$")
FILENAME_PATTERN = re.compile(rf"^{COMPANY_NUMBER}-\d{{8}}-accounts\.[a-z]+$")


def build_filename(company_number: str, period_end: date, extension: str = DEFAULT_EXTENSION) -> str:
    """
    Document name inside the archive.

    Example:
        >>> build_filename("12345678", date(2024, 12, 31))
        '12345678-20241231-accounts.html'
    """
    filename = f"{company_number}-{period_end:%Y%m%d}-accounts.{extension}"
    if not FILENAME_PATTERN.match(filename):
        raise FilenameDerivationError(filename)
    return filename


def write_archive(document: str, filename: str) -> bytes:
    """
    Write the document as the only entry of a deflated ZIP archive.

    Raises:
        FilenameDerivationError: Entry name does not follow the naming rule.
        EmptyArchiveError: Nothing to write, or the archive came out empty.
    """
    if not FILENAME_PATTERN.match(filename):
        raise FilenameDerivationError(filename)
    if not document:
        raise EmptyArchiveError()

    info = zipfile.ZipInfo(filename, date_time=FIXED_TIMESTAMP)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = ENTRY_PERMISSIONS

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(info, document.encode("utf-8"))

    archive = buffer.getvalue()
    with zipfile.ZipFile(io.BytesIO(archive)) as zf:
        if not zf.namelist():
            raise EmptyArchiveError()

    logger.debug("Archive written", filename=filename, size_bytes=len(archive))
    return archive
