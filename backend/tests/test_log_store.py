"""LogStore behavior against fake gateways: reload, dedup, rollback, progress push."""

import pytest

from ojt_tracker.schemas.time_log import TimeLogCreate, TimeLogRecord
from ojt_tracker.services.errors import DuplicateLogError, NotFoundError, SyncError
from ojt_tracker.services.log_store import LogStore
from ojt_tracker.services.progress_service import ProgressTracker


class _MemoryGateway:
    def __init__(self):
        self.rows = {}
        self.writes = []
        self.deletes = []

    def list_logs(self, user_id):
        return list(self.rows.values())

    def set_log(self, user_id, record, expected_revision=None, replaces=None):
        self.writes.append(record.log_key)
        if replaces:
            self.rows.pop(replaces, None)
        previous = self.rows.get(record.log_key)
        saved = record.model_copy(update={"revision": previous.revision + 1 if previous else 1})
        self.rows[record.log_key] = saved
        return saved

    def delete_log(self, user_id, log_key):
        self.deletes.append(log_key)
        return self.rows.pop(log_key, None) is not None


class _FailingGateway(_MemoryGateway):
    def __init__(self):
        super().__init__()
        self.fail = False

    def set_log(self, user_id, record, expected_revision=None, replaces=None):
        if self.fail:
            raise SyncError("Failed to save time log: permission denied")
        return super().set_log(user_id, record, expected_revision, replaces)

    def delete_log(self, user_id, log_key):
        if self.fail:
            raise SyncError("Failed to delete time log: network unavailable")
        return super().delete_log(user_id, log_key)


class _Profiles:
    def __init__(self, fail=False, error=None):
        self.fail = fail
        self.error = error
        self.merged = []
        self.errors = []

    def merge_profile(self, user_id, **fields):
        if self.error is not None:
            raise self.error
        if self.fail:
            raise SyncError("Failed to update profile: offline")
        self.merged.append(fields)

    def record_sync_error(self, user_id, message):
        self.errors.append(message)


def _candidate(date="2024/05/01", clock_in="08:00", clock_out="05:00", **extra) -> TimeLogCreate:
    return TimeLogCreate(date=date, clock_in=clock_in, clock_out=clock_out, **extra)


def _store(gateway, profiles=None, goal=300) -> LogStore:
    profiles = profiles or _Profiles()
    store = LogStore(1, gateway, profiles=profiles, tracker=ProgressTracker(profiles, goal))
    store.load()
    return store


def test_upsert_writes_then_reloads_sorted_descending():
    gateway = _MemoryGateway()
    store = _store(gateway)

    store.upsert(_candidate(date="2024/05/01"))
    store.upsert(_candidate(date="2024/05/03"))
    store.upsert(_candidate(date="2024/05/02"))
    store.upsert(_candidate(date="2024/05/02", clock_in="06:00", clock_out="07:00", clock_out_meridiem="PM", clock_in_meridiem="PM"))

    assert [(log.date, log.clock_in) for log in store.logs] == [
        ("2024/05/03", "08:00 AM"),
        ("2024/05/02", "06:00 PM"),
        ("2024/05/02", "08:00 AM"),
        ("2024/05/01", "08:00 AM"),
    ]


def test_duplicate_new_log_is_rejected_before_any_write():
    gateway = _MemoryGateway()
    store = _store(gateway)
    store.upsert(_candidate())

    with pytest.raises(DuplicateLogError):
        store.upsert(_candidate(clock_out="06:00"))

    assert gateway.writes == ["202405010800AM"]


def test_failed_create_restores_previous_list():
    gateway = _FailingGateway()
    profiles = _Profiles()
    store = _store(gateway, profiles)
    store.upsert(_candidate())
    before = list(store.logs)
    before_dump = [log.model_dump_json() for log in before]

    gateway.fail = True
    with pytest.raises(SyncError):
        store.upsert(_candidate(date="2024/05/02"))

    assert store.logs == before
    assert [log.model_dump_json() for log in store.logs] == before_dump
    assert profiles.errors == ["Failed to save time log: permission denied"]


def test_failed_edit_restores_previous_list():
    gateway = _FailingGateway()
    store = _store(gateway)
    store.upsert(_candidate())
    before_dump = [log.model_dump_json() for log in store.logs]

    gateway.fail = True
    with pytest.raises(SyncError):
        store.upsert(_candidate(clock_out="07:00"), edit_key="202405010800AM")

    assert [log.model_dump_json() for log in store.logs] == before_dump
    assert store.logs[0].hours == 8


def test_retry_after_failure_is_idempotent():
    gateway = _FailingGateway()
    store = _store(gateway)
    gateway.fail = True
    with pytest.raises(SyncError):
        store.upsert(_candidate())
    assert store.logs == []

    gateway.fail = False
    store.upsert(_candidate())
    assert len(store.logs) == 1
    assert list(gateway.rows) == ["202405010800AM"]


def test_edit_that_changes_clock_in_moves_the_key():
    gateway = _MemoryGateway()
    store = _store(gateway)
    store.upsert(_candidate())

    store.upsert(_candidate(clock_in="09:00"), edit_key="202405010800AM")

    assert [log.log_key for log in store.logs] == ["202405010900AM"]
    assert store.logs[0].hours == 7


def test_edit_of_unknown_key_is_not_found():
    store = _store(_MemoryGateway())
    with pytest.raises(NotFoundError):
        store.upsert(_candidate(), edit_key="missing")


def test_failed_delete_keeps_entry():
    gateway = _FailingGateway()
    profiles = _Profiles()
    store = _store(gateway, profiles)
    store.upsert(_candidate())

    gateway.fail = True
    with pytest.raises(SyncError):
        store.delete("202405010800AM")

    assert [log.log_key for log in store.logs] == ["202405010800AM"]
    assert profiles.errors == ["Failed to delete time log: network unavailable"]


def test_delete_reloads_and_republishes_total():
    gateway = _MemoryGateway()
    profiles = _Profiles()
    store = _store(gateway, profiles)
    store.upsert(_candidate())
    store.upsert(_candidate(date="2024/05/02"))

    store.delete("202405010800AM")

    assert [log.log_key for log in store.logs] == ["202405020800AM"]
    assert profiles.merged[-1] == {"total_hours": 8}
    assert store.progress.remaining == 292


def test_progress_push_failure_does_not_fail_the_mutation():
    gateway = _MemoryGateway()
    profiles = _Profiles(fail=True)
    store = _store(gateway, profiles)

    saved = store.upsert(_candidate())

    assert saved.log_key == "202405010800AM"
    assert profiles.errors == ["Failed to update profile: offline"]
    assert store.progress.total == 8


def test_missing_profile_does_not_fail_the_mutation():
    gateway = _MemoryGateway()
    profiles = _Profiles(error=NotFoundError("Intern not found."))
    store = _store(gateway, profiles)

    saved = store.upsert(_candidate())
    assert saved.log_key in gateway.rows
    assert profiles.errors == ["Intern not found."]

    store.delete(saved.log_key)
    assert saved.log_key not in gateway.rows
    assert profiles.errors == ["Intern not found.", "Intern not found."]
    assert store.progress.total == 0


def test_list_paginates_loaded_logs():
    gateway = _MemoryGateway()
    for day in range(1, 13):
        date = f"2024/05/{day:02d}"
        record = TimeLogRecord(log_key=f"2024050{day:02d}", date=date, clock_in="08:00 AM", clock_out="05:00 PM", hours=8)
        gateway.rows[record.log_key] = record
    store = LogStore(1, gateway)
    store.load()

    page = store.list(page=2, page_size=5)
    assert [item.date for item in page.items] == [f"2024/05/{d:02d}" for d in (7, 6, 5, 4, 3)]
    assert page.total_items == 12
    assert page.total_pages == 3

    assert store.list(page=4, page_size=5).items == []
