"""Bright Star Catalog (BSC5) acquisition and fixed-width parsing.

Column layout: http://tdc-www.harvard.edu/catalogs/bsc5.readme
"""

import gzip
import logging
import math
import shutil
from pathlib import Path

import httpx

from starfield.models import StarRecord

logger = logging.getLogger(__name__)

CATALOG_FILENAME = "bsc5.dat"
CATALOG_URL = f"http://tdc-www.harvard.edu/catalogs/{CATALOG_FILENAME}.gz"


class CatalogAcquisitionError(Exception):
    """Catalog could not be downloaded, decompressed, or read."""


def _number(field: str) -> float:
    """Parse a fixed-width numeric field. Returns NaN if blank or malformed."""
    try:
        return float(field)
    except ValueError:
        return math.nan


def _parse_line(line: str) -> StarRecord | None:
    """Parse one catalog line. Returns None for non-stellar or malformed entries."""
    bsn = _number(line[0:4])

    name1 = line[4:13].strip()
    name2 = line[14:25].strip()
    name = f"{name1} {name2}".strip()

    ra_h = _number(line[75:77])
    ra_m = _number(line[77:79])
    ra_s = _number(line[79:83])
    ra = (ra_h + ra_m / 60 + ra_s / 3600) / 24 * 360

    de_sign = -1 if line[83:84] == "-" else 1
    de_d = _number(line[84:86])
    de_m = _number(line[86:88])
    de_s = _number(line[88:90])
    de = de_sign * (de_d + de_m / 60 + de_s / 3600)

    mag = _number(line[102:107])
    spectral_type = line[127:147].strip()

    if not all(math.isfinite(v) for v in (bsn, ra, de, mag)):
        return None

    return StarRecord(
        id=int(bsn),
        right_ascension=ra,
        declination=de,
        magnitude=mag,
        spectral_class=spectral_type[:1],
        name=name,
    )


def parse(raw_text: str) -> list[StarRecord]:
    """Parse the whole catalog text into star records, in catalog order.

    Lines without a usable id, position or magnitude (the catalog has ~14
    non-stellar entries, plus any blank trailing line) are skipped.

    Args:
        raw_text: Uncompressed catalog contents.

    Returns:
        List of StarRecord objects.
    """
    records: list[StarRecord] = []
    skipped = 0
    for line in raw_text.splitlines():
        record = _parse_line(line)
        if record is None:
            skipped += 1
            continue
        records.append(record)
    logger.debug("Parsed %d catalog entries, skipped %d", len(records), skipped)
    return records


def download_catalog(
    url: str, destination: Path, client: httpx.Client | None = None
) -> Path:
    """Stream the compressed catalog from `url` to `destination`.

    Args:
        url: Location of the gzip-compressed catalog.
        destination: File to write.
        client: HTTP client to use. A short-lived one is created if None.

    Returns:
        `destination`.

    Raises:
        CatalogAcquisitionError: On HTTP error status or transport failure.
    """
    logger.info("Downloading BSC5 database from %s", url)
    destination.parent.mkdir(parents=True, exist_ok=True)
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=60, follow_redirects=True)
    try:
        with client.stream("GET", url) as resp:
            resp.raise_for_status()
            with destination.open("wb") as f:
                for chunk in resp.iter_bytes():
                    f.write(chunk)
    except httpx.HTTPError as e:
        destination.unlink(missing_ok=True)
        raise CatalogAcquisitionError(f"Download failed: {url}: {e}") from e
    finally:
        if owns_client:
            client.close()
    return destination


def decompress_catalog(compressed: Path, destination: Path) -> Path:
    """Gunzip `compressed` into `destination` and remove the archive.

    Raises:
        CatalogAcquisitionError: If the archive is missing or corrupt.
    """
    logger.info("Uncompressing BSC5 database %s", compressed)
    try:
        with gzip.open(compressed, "rb") as src, destination.open("wb") as dst:
            shutil.copyfileobj(src, dst)
    except (OSError, EOFError) as e:
        destination.unlink(missing_ok=True)
        raise CatalogAcquisitionError(f"Cannot decompress {compressed}: {e}") from e
    compressed.unlink()
    return destination


def ensure_catalog(
    data_dir: Path, url: str = CATALOG_URL, client: httpx.Client | None = None
) -> Path:
    """Return the path of the uncompressed catalog, fetching it if needed.

    Reuses an existing text file, then an existing archive, and only
    downloads when neither is present.
    """
    path = data_dir / CATALOG_FILENAME
    if path.exists():
        return path
    compressed = data_dir / f"{CATALOG_FILENAME}.gz"
    if not compressed.exists():
        download_catalog(url, compressed, client=client)
    return decompress_catalog(compressed, path)


def read_catalog(path: Path) -> str:
    """Read the catalog text.

    Raises:
        CatalogAcquisitionError: If the file does not exist.
    """
    try:
        return path.read_text(encoding="latin-1")
    except FileNotFoundError as e:
        raise CatalogAcquisitionError(f"Catalog not found: {path}") from e
