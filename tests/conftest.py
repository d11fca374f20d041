import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402


def _put(buf: list[str], start: int, text: str) -> None:
    buf[start : start + len(text)] = list(text)


def _catalog_line(
    bsn: str = "1",
    name1: str = "",
    name2: str = "",
    ra: tuple[str, str, str] = ("00", "00", "00.0"),
    dec: tuple[str, str, str, str] = ("+", "00", "00", "00"),
    mag: str = "6.00",
    spectral_type: str = "G5V",
) -> str:
    """Build one BSC5-layout line with the given fields in their byte columns."""
    buf = [" "] * 197
    _put(buf, 0, bsn.rjust(4))
    _put(buf, 4, name1.ljust(9)[:9])
    _put(buf, 14, name2.ljust(11)[:11])
    _put(buf, 75, ra[0])
    _put(buf, 77, ra[1])
    _put(buf, 79, ra[2])
    _put(buf, 83, dec[0])
    _put(buf, 84, dec[1])
    _put(buf, 86, dec[2])
    _put(buf, 88, dec[3])
    _put(buf, 102, mag.rjust(5))
    _put(buf, 127, spectral_type.ljust(20)[:20])
    return "".join(buf).rstrip()


@pytest.fixture
def catalog_line():
    return _catalog_line


@pytest.fixture
def sirius_line() -> str:
    return _catalog_line(
        bsn="2491",
        name2="Alp CMa",
        ra=("06", "45", "08.9"),
        dec=("-", "16", "42", "58"),
        mag="-1.46",
        spectral_type="A0mA1 Va",
    )


@pytest.fixture
def catalog_text(catalog_line, sirius_line) -> str:
    """A small catalog: two stars, one non-stellar entry, one unknown class."""
    return "\n".join(
        [
            catalog_line(bsn="1", name2="BD+44 4550", ra=("00", "05", "09.9"),
                         dec=("+", "45", "13", "45"), mag="6.70", spectral_type="A1Vn"),
            catalog_line(bsn="92", name1="NOVA", mag="", spectral_type=""),
            sirius_line,
            catalog_line(bsn="3", name1="33    Psc", ra=("00", "05", "20.1"),
                         dec=("-", "05", "42", "27"), mag="4.61", spectral_type="pec"),
        ]
    ) + "\n"
