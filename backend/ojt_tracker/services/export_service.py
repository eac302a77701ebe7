"""CSV export of an intern's attendance logs."""

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ojt_tracker.services.log_store import sort_logs

BOM = "\ufeff"
CSV_HEADER = ["Student Name", "Student Email", "Company Name", "Date", "Clock In", "Clock Out", "Hours"]


@dataclass(frozen=True)
class CsvIdentity:
    student_name: str = ""
    student_email: str = ""
    company_name: str = ""


def identity_for(intern) -> CsvIdentity:
    return CsvIdentity(
        student_name=intern.name or "",
        student_email=intern.email or "",
        company_name=intern.company_name or "",
    )


def to_csv(logs: Iterable, identity: CsvIdentity) -> str:
    """Render the logs oldest first, one row each, with a UTF-8 byte-order mark."""
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow(CSV_HEADER)
    for log in sort_logs(list(logs), descending=False):
        writer.writerow([
            identity.student_name,
            identity.student_email,
            identity.company_name,
            log.date,
            log.clock_in,
            log.clock_out,
            log.hours,
        ])
    return BOM + output.getvalue()


def export_filename(day: Optional[date] = None) -> str:
    return f"OJT_Logs_{(day or date.today()).isoformat()}.csv"
