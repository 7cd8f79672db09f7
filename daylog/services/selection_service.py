from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from daylog.core.cache import CacheService, CacheTier, get_cache
from daylog.core.config import Settings, get_settings
from daylog.core.errors import ConfigurationError, SelectionError
from daylog.core.logging import get_logger
from daylog.log import AssembledLog, assemble_log
from daylog.merge.logs import combine_logs
from daylog.schemas.log import DayLog, MergedDayLog, RawLog
from daylog.schemas.project import LogOptions, ProjectContext

Assembler = Callable[[RawLog, LogOptions], AssembledLog]
Combiner = Callable[..., MergedDayLog]


@dataclass(slots=True)
class CorpusEntry:
    """Tier A value: every log of a corpus assembled once."""

    all: List[AssembledLog]
    by_id: Dict[str, AssembledLog]
    latest: DayLog


@dataclass(slots=True)
class SelectionResult:
    """Tier C value: the resolved view for one selection."""

    current: AssembledLog
    selected: List[AssembledLog]


@dataclass(slots=True)
class Selection:
    current: AssembledLog
    selected: List[AssembledLog]
    all: List[AssembledLog]


def latest_log(logs: Sequence[DayLog], project: ProjectContext) -> DayLog:
    """Return the log with the highest day number.

    When several logs share that day, the one whose unit matches the project
    unit wins if it is the only match; otherwise the first candidate does.

    Raises:
        ConfigurationError: If ``logs`` is empty.
    """
    if not logs:
        raise ConfigurationError("No logs found")
    max_day = max(log.day for log in logs)
    candidates = [log for log in logs if log.day == max_day]
    if len(candidates) > 1 and project.unit:
        matching = [log for log in candidates if log.unit == project.unit]
        if len(matching) == 1:
            return matching[0]
    return candidates[0]


def selection_key(cache_key: str, selection_ids: Sequence[str]) -> str:
    """Tier B/C key: the corpus key plus the sorted selection ids."""
    return f"{cache_key}|{','.join(sorted(selection_ids))}"


class SelectionService:
    """Resolve the current, selected and all logs for a corpus.

    Three cache tiers back the work, all keyed by the caller:

    * ``corpus`` (keyed by ``cache_key``) holds every assembled log, an id
      lookup and the latest raw log.
    * ``selection`` holds the raw logs chosen for a selection key.
    * ``result`` holds the final current/selected pair for that key.

    A hit is trusted even if the raw logs changed; callers pass a new
    ``cache_key`` when the corpus changes. Without a ``cache_key`` nothing is
    cached.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[CacheService] = None,
        *,
        assembler: Assembler = assemble_log,
        combiner: Combiner = combine_logs,
    ):
        self.settings = settings or get_settings()
        self.cache = cache if cache is not None else get_cache()
        self.assembler = assembler
        self.combiner = combiner
        self.logger = get_logger(component="selection_service")

    def select(
        self,
        corpus: Sequence[DayLog],
        project: Optional[ProjectContext],
        selection_ids: Optional[Sequence[str]] = None,
        cache_key: Optional[str] = None,
    ) -> Selection:
        if project is None:
            raise ConfigurationError("A project context is required to select logs.")
        if not corpus:
            raise ConfigurationError("The corpus must contain at least one log.")

        options = project.log_options(default_fps=self.settings.default_fps)
        ids = list(dict.fromkeys(selection_ids or []))
        use_cache = bool(cache_key) and self.settings.cache_enabled

        entry = self._corpus_entry(corpus, project, options, cache_key if use_cache else None)

        if not use_cache:
            chosen = self._resolve(corpus, entry, ids)
            result = self._build_result(chosen, len(ids) > 1, entry, options)
            return Selection(current=result.current, selected=result.selected, all=entry.all)

        key = selection_key(cache_key, ids)
        # one lock covers both tiers so they are always written together
        with self.cache.lock(CacheTier.selection, key):
            result = self.cache.get(CacheTier.result, key)
            if result is not None:
                self.logger.debug("selection_cache_hit", key=key)
            else:
                chosen = self.cache.get(CacheTier.selection, key)
                if chosen is None:
                    chosen = self._resolve(corpus, entry, ids)
                result = self._build_result(chosen, len(ids) > 1, entry, options)
                self.cache.insert(CacheTier.selection, key, chosen)
                self.cache.insert(CacheTier.result, key, result)
                self.logger.debug("selection_cache_miss", key=key, logs=len(chosen))

        return Selection(current=result.current, selected=result.selected, all=entry.all)

    def _corpus_entry(
        self,
        corpus: Sequence[DayLog],
        project: ProjectContext,
        options: LogOptions,
        cache_key: Optional[str],
    ) -> CorpusEntry:
        if cache_key is None:
            return self._assemble_corpus(corpus, project, options)

        def build() -> CorpusEntry:
            self.logger.debug("corpus_cache_miss", cache_key=cache_key, logs=len(corpus))
            return self._assemble_corpus(corpus, project, options)

        return self.cache.get_or_create(CacheTier.corpus, cache_key, build)

    def _assemble_corpus(
        self,
        corpus: Sequence[DayLog],
        project: ProjectContext,
        options: LogOptions,
    ) -> CorpusEntry:
        duplicates = sorted(log_id for log_id, count in Counter(log.id for log in corpus).items() if count > 1)
        if duplicates:
            raise ConfigurationError(f"Duplicate log id(s) in corpus: {', '.join(duplicates)}")

        workers = self.settings.assembly_workers
        if workers > 1 and len(corpus) > 1:
            with ThreadPoolExecutor(max_workers=min(workers, len(corpus))) as pool:
                assembled = list(pool.map(lambda log: self.assembler(log, options), corpus))
        else:
            assembled = [self.assembler(log, options) for log in corpus]

        by_id = {log.id: log for log in assembled}
        return CorpusEntry(all=assembled, by_id=by_id, latest=latest_log(corpus, project))

    def _resolve(self, corpus: Sequence[DayLog], entry: CorpusEntry, ids: List[str]) -> Tuple[DayLog, ...]:
        if not ids:
            return (entry.latest,)

        wanted = set(ids)
        found: Dict[str, DayLog] = {}
        for log in corpus:
            if log.id in wanted:
                found.setdefault(log.id, log)
        missing = [log_id for log_id in ids if log_id not in found]
        if missing:
            raise SelectionError(missing)

        if len(ids) == 1:
            return (found[ids[0]],)
        # corpus order, not request order
        return tuple(log for log in corpus if found.get(log.id) is log)

    def _build_result(
        self,
        chosen: Tuple[DayLog, ...],
        combine: bool,
        entry: CorpusEntry,
        options: LogOptions,
    ) -> SelectionResult:
        selected = [entry.by_id[log.id] for log in chosen]
        if not combine:
            return SelectionResult(current=selected[0], selected=selected)

        merged = self.combiner(list(chosen), options, assembled=selected)
        self.logger.info("selection_combined", merged_id=merged.id, logs=len(chosen))
        return SelectionResult(current=self.assembler(merged, options), selected=selected)


__all__ = [
    "CorpusEntry",
    "SelectionResult",
    "Selection",
    "SelectionService",
    "latest_log",
    "selection_key",
]
