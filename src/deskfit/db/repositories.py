"""Data access layer for deskfit.

Each repository owns one JSON file. Reads and writes are serialized through
a re-entrant lock, and storage failures are logged and degrade to an empty
state instead of propagating.
"""

import threading
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Callable

import structlog

from ..models.insight import DailyInsight
from ..models.profile import ProfileSnapshot
from ..models.progress import DailyScoreEntry, ProgressSummary
from ..models.report import AnalysisReport
from ..services import scoring
from ..services.analysis import AnalysisEngine
from ..services.analytics import SESSION_COMPLETED, AnalyticsSink, safe_track
from ..services.progress import (
    active_run_ending,
    build_summary,
    calculate_streak,
    entries_in_window,
)
from .engine import STORAGE_VERSION, atomic_write_json, read_json, remove_file

logger = structlog.get_logger()

# json.JSONDecodeError is a ValueError; AttributeError covers non-object records
STORAGE_ERRORS = (OSError, ValueError, KeyError, TypeError, AttributeError)


class ProfileRepository:
    """Repository for the onboarding profile."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.RLock()

    def get(self) -> ProfileSnapshot | None:
        """Load the saved profile, or None if there is none."""
        with self._lock:
            try:
                data = read_json(self.path)
                if data is None:
                    return None
                profile = data.get("profile", data) if isinstance(data, dict) else data
                if not isinstance(profile, dict):
                    raise TypeError(f"Expected a profile object, got {type(profile).__name__}")
                return ProfileSnapshot.from_dict(profile)
            except STORAGE_ERRORS as e:
                logger.warning("Failed to load profile", path=str(self.path), error=str(e))
                return None

    def save(self, profile: ProfileSnapshot) -> None:
        with self._lock:
            try:
                atomic_write_json(
                    self.path, {"version": STORAGE_VERSION, "profile": profile.to_dict()}
                )
            except OSError as e:
                logger.warning("Failed to save profile", path=str(self.path), error=str(e))


class ProgressRepository:
    """One DailyScoreEntry per calendar day, kept newest first.

    Every mutation persists the full entry list and rebuilds the summary.
    """

    def __init__(
        self,
        path: Path,
        clock: Callable[[], datetime] = datetime.now,
        analytics: AnalyticsSink | None = None,
    ):
        self.path = Path(path)
        self.clock = clock
        self.analytics = analytics
        self._lock = threading.RLock()
        self._entries: list[DailyScoreEntry] = []
        self._summary = ProgressSummary.empty(self._today())
        self.reload()

    def _today(self) -> date:
        return self.clock().date()

    @property
    def entries(self) -> list[DailyScoreEntry]:
        with self._lock:
            return list(self._entries)

    @property
    def summary(self) -> ProgressSummary:
        """Summary as of the last change. Call refresh_summary() after midnight."""
        with self._lock:
            return self._summary

    def refresh_summary(self) -> ProgressSummary:
        with self._lock:
            self._summary = build_summary(self._entries, self._today())
            return self._summary

    # Queries

    def entry_for(self, day: date) -> DailyScoreEntry | None:
        with self._lock:
            for entry in self._entries:
                if entry.day == day:
                    return entry
            return None

    def todays_entry(self) -> DailyScoreEntry | None:
        return self.entry_for(self._today())

    def entries_for_last_days(self, days: int) -> list[DailyScoreEntry]:
        """Entries from the last `days` days including today, newest first."""
        with self._lock:
            return entries_in_window(self._entries, self._today(), days)

    def entries_between(self, start: date, end: date) -> list[DailyScoreEntry]:
        """Entries with start <= day <= end, newest first."""
        with self._lock:
            return [entry for entry in self._entries if start <= entry.day <= end]

    @property
    def has_progress_data(self) -> bool:
        return bool(self.entries)

    @property
    def latest_score(self) -> int | None:
        entries = self.entries
        return entries[0].score if entries else None

    @property
    def days_since_last_activity(self) -> int | None:
        for entry in self.entries:
            if entry.has_activity:
                return (self._today() - entry.day).days
        return None

    @property
    def streak_days(self) -> int:
        with self._lock:
            return calculate_streak(self._entries, self._today())

    # Mutations

    def save(self, entry: DailyScoreEntry) -> None:
        """Insert or replace the entry for entry.day."""
        with self._lock:
            self._entries = [e for e in self._entries if e.day != entry.day]
            self._entries.append(entry)
            self._entries.sort(key=lambda e: e.day, reverse=True)
            self._persist()
            self.refresh_summary()
        logger.debug("Saved progress entry", day=entry.day.isoformat(), score=entry.score)

    def delete(self, day: date) -> bool:
        """Delete the entry for a day. Returns whether one existed."""
        with self._lock:
            remaining = [e for e in self._entries if e.day != day]
            removed = len(remaining) != len(self._entries)
            self._entries = remaining
            self._persist()
            self.refresh_summary()
            return removed

    def clear_all(self) -> None:
        with self._lock:
            self._entries = []
            self._persist()
            self.refresh_summary()

    def reload(self) -> None:
        """Re-read entries from disk and rebuild the summary."""
        with self._lock:
            self._entries = self._load()
            self.refresh_summary()

    def record_session_completion(
        self,
        duration_seconds: int,
        focus_areas,
        profile: ProfileSnapshot | None = None,
        current_streak: int | None = None,
    ) -> DailyScoreEntry:
        """Add one completed session to today's entry and rescore it.

        Args:
            duration_seconds: Length of the session; whole minutes are credited
            focus_areas: Focus area values the session covered
            profile: Onboarding profile for timing matches and sedentary bucket
            current_streak: Streak to score with; derived from the stored
                entries when omitted

        Returns:
            The saved entry for today
        """
        with self._lock:
            now = self.clock()
            today = now.date()
            current = self.entry_for(today)

            sessions = (current.sessions_completed if current else 0) + 1
            minutes = (current.minutes_completed if current else 0) + max(duration_seconds, 0) // 60

            all_focus = set(current.focus_areas) if current else set()
            all_focus.update(getattr(a, "value", a) for a in focus_areas)

            triggered = set(current.stiffness_times_triggered) if current else set()
            triggered.add(scoring.session_time_category(now).value)

            if current_streak is None:
                current_streak = active_run_ending(self._entries, today - timedelta(days=1)) + 1

            entry = scoring.calculate_daily_score(
                day=today,
                sessions_completed=sessions,
                minutes_completed=minutes,
                focus_areas=all_focus,
                stiffness_times_triggered=triggered,
                profile=profile,
                current_streak=current_streak,
            )
            entry.notes = current.notes if current else None
            entry.updated_at = now
            self.save(entry)

        safe_track(
            self.analytics,
            SESSION_COMPLETED,
            duration_seconds=duration_seconds,
            focus_areas=sorted(all_focus),
        )
        return entry

    # Storage

    def _load(self) -> list[DailyScoreEntry]:
        try:
            data = read_json(self.path)
            if data is None:
                return []
            records = data["entries"] if isinstance(data, dict) else data
            if not isinstance(records, list):
                raise TypeError(f"Expected a list of entries, got {type(records).__name__}")
            entries = [DailyScoreEntry.from_dict(record) for record in records]
        except STORAGE_ERRORS as e:
            logger.warning(
                "Failed to load progress entries", path=str(self.path), error=str(e)
            )
            return []

        by_day = {}
        for entry in entries:
            current = by_day.get(entry.day)
            if current is None or (entry.updated_at or datetime.min) >= (
                current.updated_at or datetime.min
            ):
                by_day[entry.day] = entry
        return sorted(by_day.values(), key=lambda e: e.day, reverse=True)

    def _persist(self) -> None:
        document = {
            "version": STORAGE_VERSION,
            "entries": [entry.to_dict() for entry in self._entries],
        }
        try:
            atomic_write_json(self.path, document)
        except OSError as e:
            logger.warning("Failed to save progress entries", path=str(self.path), error=str(e))


class InsightCacheRepository:
    """Stores the insights generated for one calendar day."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.RLock()

    def load(self) -> tuple[date, list[DailyInsight]] | None:
        with self._lock:
            try:
                data = read_json(self.path)
                if data is None:
                    return None
                generated_on = date.fromisoformat(data["generated_on"])
                insights = [DailyInsight.from_dict(i) for i in data.get("insights", [])]
            except STORAGE_ERRORS as e:
                logger.warning("Failed to load insight cache", path=str(self.path), error=str(e))
                return None
            return generated_on, insights

    def save(self, generated_on: date, insights: list[DailyInsight]) -> None:
        document = {
            "version": STORAGE_VERSION,
            "generated_on": generated_on.isoformat(),
            "insights": [insight.to_dict() for insight in insights],
        }
        with self._lock:
            try:
                atomic_write_json(self.path, document)
            except OSError as e:
                logger.warning("Failed to save insight cache", path=str(self.path), error=str(e))

    def clear(self) -> None:
        with self._lock:
            remove_file(self.path)


class AnalysisReportStore:
    """Caches the last analysis report with the fingerprint of its profile."""

    def __init__(
        self,
        path: Path,
        engine: AnalysisEngine | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.path = Path(path)
        self.engine = engine or AnalysisEngine()
        self.clock = clock
        self._lock = threading.RLock()

    def load(self) -> tuple[int, datetime, AnalysisReport] | None:
        """Return (profile fingerprint, generated_at, report) or None."""
        with self._lock:
            try:
                data = read_json(self.path)
                if data is None:
                    return None
                return (
                    int(data["profile_fingerprint"]),
                    datetime.fromisoformat(data["generated_at"]),
                    AnalysisReport.from_dict(data["report"]),
                )
            except STORAGE_ERRORS as e:
                logger.warning("Failed to load analysis report", path=str(self.path), error=str(e))
                return None

    def get_or_generate(self, profile: ProfileSnapshot, force: bool = False) -> AnalysisReport:
        """Cached report for this profile, regenerated when the profile changed."""
        fingerprint = profile.fingerprint()
        with self._lock:
            if not force:
                cached = self.load()
                if cached is not None and cached[0] == fingerprint:
                    return cached[2]

            report = self.engine.generate(profile)
            document = {
                "version": STORAGE_VERSION,
                "profile_fingerprint": fingerprint,
                "generated_at": self.clock().isoformat(),
                "report": report.to_dict(),
            }
            try:
                atomic_write_json(self.path, document)
            except OSError as e:
                logger.warning("Failed to save analysis report", path=str(self.path), error=str(e))
            return report
