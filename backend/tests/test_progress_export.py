"""Progress arithmetic and CSV export."""

import csv
import io
from datetime import date

from ojt_tracker.schemas.time_log import TimeLogRecord
from ojt_tracker.services.export_service import BOM, CSV_HEADER, CsvIdentity, export_filename, to_csv
from ojt_tracker.services.log_keys import derive_key
from ojt_tracker.services.progress_service import recompute


def _log(date_text, clock_in="08:00 AM", clock_out="05:00 PM", hours=8):
    return TimeLogRecord(
        log_key=derive_key(date_text, clock_in),
        date=date_text,
        clock_in=clock_in,
        clock_out=clock_out,
        hours=hours,
    )


def test_recompute_partial_progress():
    progress = recompute([{"hours": 3}, {"hours": 5}], goal=10)
    assert (progress.total, progress.percent, progress.remaining) == (8, 0.8, 2)


def test_recompute_empty_and_exceeded_goal():
    empty = recompute([], goal=10)
    assert (empty.total, empty.percent, empty.remaining) == (0, 0, 10)

    over = recompute([_log("2024/05/01", hours=12)], goal=10)
    assert (over.total, over.percent, over.remaining) == (12, 1.0, 0)


def test_csv_round_trip_preserves_fields_and_orders_oldest_first():
    logs = [_log("2024/05/03", hours=9), _log("2024/05/01"), _log("2024/05/02", clock_in="01:00 PM", clock_out="05:00 PM", hours=4)]
    identity = CsvIdentity(
        student_name='Juan "JD" Dela Cruz',
        student_email="juan@example.edu",
        company_name="Acme, Inc.",
    )

    payload = to_csv(logs, identity)

    assert payload.startswith(BOM)
    assert "\r\n" in payload
    rows = list(csv.reader(io.StringIO(payload[len(BOM):], newline="")))
    assert len(rows) == len(logs) + 1
    assert rows[0] == CSV_HEADER
    assert [row[3] for row in rows[1:]] == ["2024/05/01", "2024/05/02", "2024/05/03"]
    assert rows[1] == ['Juan "JD" Dela Cruz', "juan@example.edu", "Acme, Inc.", "2024/05/01", "08:00 AM", "05:00 PM", "8"]


def test_csv_escapes_quotes_commas_and_line_breaks():
    identity = CsvIdentity(student_name='A "B"', student_email="a@b.c", company_name="X,\nY")
    payload = to_csv([_log("2024/05/01")], identity)
    data_line = payload[len(BOM):].split("\r\n", 1)[1]
    assert data_line.startswith('"A ""B""",a@b.c,"X,\nY",2024/05/01')


def test_csv_for_no_logs_is_header_only():
    payload = to_csv([], CsvIdentity())
    assert payload == BOM + ",".join(CSV_HEADER) + "\r\n"


def test_export_filename_uses_iso_date():
    assert export_filename(date(2024, 5, 31)) == "OJT_Logs_2024-05-31.csv"
