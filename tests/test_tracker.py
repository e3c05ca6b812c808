"""
Tests for the save-entry workflow.
"""
import threading
from datetime import date

from cycle_tracker.models.entry import LogEntry
from cycle_tracker.models.phase import HormonalPhaseType

def test_save_plain_entry(tracker, store):
    """Test saving an entry without a cycle-start flag."""
    result = tracker.save_entry("u1", LogEntry(date=date(2024, 1, 3), notes="Slept well"))

    assert not result.new_cycle_started
    assert result.entry.cycle_day == 1  # no cycle established yet
    assert result.cycle_model.last_cycle_start is None
    assert store.get_entry("u1", date(2024, 1, 3)).notes == "Slept well"

def test_multi_day_onset_is_one_cycle_start(tracker, onset_entries):
    """Test five consecutive flagged days record a single start."""
    results = [tracker.save_entry("u1", entry) for entry in onset_entries]

    assert [r.new_cycle_started for r in results] == [True, False, False, False, False]
    model = tracker.get_cycle_model("u1")
    assert model.history == {date(2024, 3, 1)}
    assert model.last_cycle_start == date(2024, 3, 1)
    assert [r.entry.cycle_day for r in results] == [1, 2, 3, 4, 5]

def test_consecutive_cycles_refine_length(tracker):
    """Test logging three cycle starts learns the cycle length."""
    for start in (date(2024, 1, 1), date(2024, 1, 31), date(2024, 3, 1)):
        tracker.save_entry("u1", LogEntry(date=start, is_cycle_start=True))

    model = tracker.get_cycle_model("u1")
    assert model.history == {date(2024, 1, 1), date(2024, 1, 31), date(2024, 3, 1)}
    assert model.last_cycle_start == date(2024, 3, 1)
    assert model.average_cycle_length == 30

def test_entries_are_unique_per_date(tracker):
    """Test saving the same date twice replaces the entry."""
    tracker.save_entry("u1", LogEntry(date=date(2024, 1, 5), notes="first"))
    tracker.save_entry("u1", LogEntry(date=date(2024, 1, 5), notes="second"))
    tracker.save_entry("u1", LogEntry(date=date(2024, 1, 2)))

    entries = tracker.get_entries("u1")
    assert [e.date for e in entries] == [date(2024, 1, 2), date(2024, 1, 5)]
    assert entries[1].notes == "second"

def test_resaving_start_day_does_not_duplicate_history(tracker):
    """Test re-saving the flagged start day keeps one history entry."""
    tracker.save_entry("u1", LogEntry(date=date(2024, 1, 1), is_cycle_start=True))
    tracker.save_entry("u1", LogEntry(date=date(2024, 1, 1), is_cycle_start=True, notes="edited"))

    assert tracker.get_cycle_model("u1").history == {date(2024, 1, 1)}

def test_entry_is_stamped_with_cycle_day(tracker):
    """Test entries record their position in the current cycle."""
    tracker.save_entry("u1", LogEntry(date=date(2024, 1, 1), is_cycle_start=True))

    result = tracker.save_entry("u1", LogEntry(date=date(2024, 1, 10)))

    assert result.entry.cycle_day == 10

def test_users_are_isolated(tracker):
    """Test cycle models are kept per user."""
    tracker.save_entry("u1", LogEntry(date=date(2024, 1, 1), is_cycle_start=True))

    assert tracker.get_cycle_model("u2").last_cycle_start is None

def test_status(tracker):
    """Test status reports cycle day and phase."""
    tracker.save_entry("u1", LogEntry(date=date(2024, 1, 1), is_cycle_start=True))

    status = tracker.get_status("u1", date(2024, 1, 15))

    assert status.cycle_day == 15
    assert status.phase.name == HormonalPhaseType.OVULATION

def test_update_settings_persists(tracker):
    """Test manual settings are stored."""
    tracker.update_settings("u1", last_cycle_start=date(2024, 2, 1), average_cycle_length=31)

    model = tracker.get_cycle_model("u1")
    assert model.average_cycle_length == 31
    assert model.last_cycle_start == date(2024, 2, 1)

def test_export_then_import_into_other_user(tracker, onset_entries):
    """Test a user's data can be moved through an export document."""
    for entry in onset_entries:
        tracker.save_entry("u1", entry)

    payload = tracker.export_data("u1")
    model = tracker.import_data("u2", payload)

    assert model == tracker.get_cycle_model("u1")
    assert tracker.get_entries("u2") == tracker.get_entries("u1")

def test_concurrent_saves_record_every_start(tracker):
    """Test parallel saves for distinct cycles all land in history."""
    starts = [date(2024, 1, 1), date(2024, 2, 1), date(2024, 3, 1), date(2024, 4, 1)]
    threads = [
        threading.Thread(
            target=tracker.save_entry,
            args=("u1", LogEntry(date=start, is_cycle_start=True))
        )
        for start in starts
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    model = tracker.get_cycle_model("u1")
    assert model.history == set(starts)
    assert model.last_cycle_start == date(2024, 4, 1)
