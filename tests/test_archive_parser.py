import logging
from collections import defaultdict
from datetime import date

import pytest

from ams_pipeline.parsing.archive_parser import parse_archive, read_noaa_archive, split_blocks
from ams_pipeline.parsing.errors import EmptyArchiveError, HeaderArityError, NumericFieldError
from ams_pipeline.parsing.validator import validate_tables

GAPPY_ARCHIVE = """1-d, Annual Maximum, WaterYear=1 (January - December), Units in Inches
11-0001, FIRST GAUGE, HOUSTON, TX, 29.70, -95.40, 12
06/11/1987    1.50
05/01/1990    2.25


11-0002, SECOND GAUGE, TX, 29.80, -95.30, 14
07/07/2000    4.00

11-0003, THIRD GAUGE, TX, 29.90, -95.20, 16

"""


def test_end_to_end_sample(sample_archive):
    stations, rainfall = parse_archive(sample_archive)

    assert [s.station_id for s in stations] == [1, 2]
    assert [s.source_id for s in stations] == ["60-0011", "60-0019"]
    assert [s.years_of_data for s in stations] == [2, 2]

    by_station = defaultdict(list)
    for r in rainfall:
        by_station[r.station_id].append(r)
    assert [r.year for r in by_station[1]] == [1987, 1988]
    assert [r.rainfall.value for r in by_station[1]] == pytest.approx([6.31, 5.46])
    assert [r.rainfall.value for r in by_station[2]] == pytest.approx([3.99, 3.71])


def test_blocks_split_on_blank_and_whitespace_lines():
    blocks = split_blocks(GAPPY_ARCHIVE)
    assert [b[0].split(",")[0] for b in blocks] == ["11-0001", "11-0002", "11-0003"]


def test_gap_filling_and_years_of_data():
    stations, rainfall = parse_archive(GAPPY_ARCHIVE)

    assert [s.years_of_data for s in stations] == [4, 1, 0]
    assert stations[0].name == "FIRST GAUGE, HOUSTON"

    first = [r for r in rainfall if r.station_id == 1]
    assert [r.year for r in first] == [1987, 1988, 1989, 1990]
    assert [r.rainfall is None for r in first] == [False, True, True, False]
    assert first[1].date == date(1988, 1, 1)

    # station 3 has a header but no observations
    assert not [r for r in rainfall if r.station_id == 3]


def test_rainfall_rows_are_ordered_by_station_then_year():
    _, rainfall = parse_archive(GAPPY_ARCHIVE)
    keys = [(r.station_id, r.year) for r in rainfall]
    assert keys == sorted(keys)


def test_output_passes_table_validation(sample_archive):
    ok, err = validate_tables(*parse_archive(GAPPY_ARCHIVE))
    assert ok, err
    ok, err = validate_tables(*parse_archive(sample_archive))
    assert ok, err


def test_crlf_line_endings(sample_archive):
    stations, rainfall = parse_archive(sample_archive.replace("\n", "\r\n"))
    assert len(stations) == 2
    assert len(rainfall) == 4


def test_first_line_is_never_a_station():
    text = "60-0011, A, TX, 29.0, -95.0, 2\n60-0012, B, TX, 29.1, -95.1, 3\n01/01/2000 1.0\n"
    stations, _ = parse_archive(text)
    assert [s.source_id for s in stations] == ["60-0012"]


@pytest.mark.parametrize("text", ["", "header only\n", "header\n\n\n   \n"])
def test_empty_archive_raises(text):
    with pytest.raises(EmptyArchiveError):
        parse_archive(text)


def test_bad_header_aborts_whole_parse(sample_archive):
    broken = sample_archive.replace("60-0019, TURKEY CK AT FM 1959                    , TX,", "60-0019, TX,")
    with pytest.raises(HeaderArityError) as exc:
        parse_archive(broken)
    assert exc.value.block_index == 2


def test_bad_value_reports_block_and_line(sample_archive):
    broken = sample_archive.replace("09/02/1988    3.71", "09/02/1988    T")
    with pytest.raises(NumericFieldError) as exc:
        parse_archive(broken)
    assert exc.value.block_index == 2
    assert exc.value.line == "09/02/1988    T"


def test_read_noaa_archive_from_file(tmp_path, sample_archive, caplog):
    path = tmp_path / "ams_1d.txt"
    path.write_text(sample_archive, encoding="utf-8")

    with caplog.at_level(logging.INFO):
        stations, rainfall = read_noaa_archive(str(path))
    assert len(stations) == 2
    assert len(rainfall) == 4
    assert "Units in Inches" in caplog.text
