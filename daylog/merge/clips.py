from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from daylog.core.logging import get_logger
from daylog.format.timecode import ranges_overlap, timecode_to_seconds
from daylog.schemas.log import CustomClip, LogBase, OcfClip, ProxyClip, SoundClip
from daylog.schemas.project import CustomSchema, LogOptions

ClipRecord = Dict[str, Any]
ClipMap = Dict[str, ClipRecord]

TIMECODE_KEYS = ("tc_start", "tc_end")


def merge_clips(log: LogBase, options: LogOptions) -> ClipMap:
    """Reconcile a day's clip lists into one record per clip name.

    The passes run in a fixed order because later passes read what earlier
    ones wrote: OCF, proxy, custom schemas, then sound.

    Args:
        log: The day (or merged) log holding the raw clip lists.
        options: The merge policy derived from the project.

    Returns:
        Clip name mapped to its merged record, in first-seen order.
    """
    logger = get_logger(component="clip_merger", log_id=log.id)
    clip_map: ClipMap = {}

    ocf_clips = log.ocf.clips if log.ocf and log.ocf.clips else []
    proxy_clips = log.proxy.clips if log.proxy and log.proxy.clips else []
    sound_clips = log.sound.clips if log.sound and log.sound.clips else []

    merge_ocf_clips(clip_map, ocf_clips)
    merge_proxy_clips(clip_map, proxy_clips)
    custom_matches = merge_custom_entries(clip_map, log, options)
    sound_matches = merge_sound_clips(clip_map, sound_clips) if options.match_sound else 0

    logger.debug(
        "clips_merged",
        clips=len(clip_map),
        ocf=len(ocf_clips),
        proxy=len(proxy_clips),
        custom_matches=custom_matches,
        sound_matches=sound_matches,
    )
    return clip_map


def _get_or_create(clip_map: ClipMap, name: str) -> ClipRecord:
    record = clip_map.get(name)
    if record is None:
        record = {"clip": name}
        clip_map[name] = record
    return record


def merge_ocf_clips(clip_map: ClipMap, clips: Iterable[OcfClip]) -> None:
    for clip in clips:
        record = _get_or_create(clip_map, clip.clip)
        record.update(clip.model_dump(exclude_none=True))


def merge_proxy_clips(clip_map: ClipMap, clips: Iterable[ProxyClip]) -> None:
    for clip in clips:
        record = _get_or_create(clip_map, clip.clip)
        record["proxy"] = {
            "size": clip.size,
            "format": clip.format,
            "codec": clip.codec,
            "resolution": clip.resolution,
        }


def _custom_clips_for(log: LogBase, schema: CustomSchema) -> List[CustomClip]:
    for entry in log.custom or []:
        if entry.schema_id == schema.id:
            return entry.clips or []
    return []


def merge_custom_entries(clip_map: ClipMap, log: LogBase, options: LogOptions) -> int:
    """Layer custom schema fields onto existing records.

    Returns:
        The number of (record, custom row) pairs merged.
    """
    if not options.match_schemas:
        return 0
    schemas = options.ordered_schemas()
    if not schemas:
        return 0

    matches = 0
    for schema in schemas:
        clips = _custom_clips_for(log, schema)
        if not clips:
            continue
        if schema.sync == "clip":
            matches += _merge_by_name(clip_map, clips)
        elif schema.sync == "tc":
            matches += _merge_by_timecode(clip_map, clips)
    return matches


def _merge_by_name(clip_map: ClipMap, clips: Sequence[CustomClip]) -> int:
    matches = 0
    for custom in clips:
        if not isinstance(custom.clip, str):
            continue
        record = clip_map.get(custom.clip)
        if record is None:
            continue
        fields = custom.fields()
        fields.pop("clip", None)
        record.update(fields)
        matches += 1
    return matches


def _merge_by_timecode(clip_map: ClipMap, clips: Sequence[CustomClip]) -> int:
    records = sorted(
        (
            (timecode_to_seconds(record["tc_start"]), timecode_to_seconds(record["tc_end"]), record)
            for record in clip_map.values()
            if isinstance(record.get("tc_start"), str) and isinstance(record.get("tc_end"), str)
        ),
        key=lambda item: item[0],
    )
    customs = sorted(
        (
            (timecode_to_seconds(custom.tc_start), timecode_to_seconds(custom.tc_end), custom)
            for custom in clips
            if custom.tc_start and custom.tc_end
        ),
        key=lambda item: item[0],
    )

    matches = 0
    i = j = 0
    while i < len(records) and j < len(customs):
        r_start, r_end, record = records[i]
        c_start, c_end, custom = customs[j]
        if r_end < c_start:
            i += 1
        elif c_end < r_start:
            j += 1
        else:
            fields = custom.fields()
            for key in TIMECODE_KEYS:
                fields.pop(key, None)
            record.update(fields)
            matches += 1
            # advance whichever interval finishes first
            if r_end < c_end:
                i += 1
            else:
                j += 1
    return matches


def merge_sound_clips(clip_map: ClipMap, clips: Sequence[SoundClip]) -> int:
    """Attach overlapping sound clip names to each timed record.

    Safe to apply more than once: names already present are not repeated.

    Returns:
        The number of sound names newly attached.
    """
    timed_sound = [
        (timecode_to_seconds(clip.tc_start), timecode_to_seconds(clip.tc_end), clip.clip)
        for clip in clips
        if clip.tc_start and clip.tc_end
    ]
    if not timed_sound:
        return 0

    attached = 0
    for record in clip_map.values():
        start: Optional[str] = record.get("tc_start")
        end: Optional[str] = record.get("tc_end")
        if not start or not end:
            continue
        r_start = timecode_to_seconds(start)
        r_end = timecode_to_seconds(end)
        for s_start, s_end, name in timed_sound:
            if not ranges_overlap(r_start, r_end, s_start, s_end):
                continue
            names = record.setdefault("sound", [])
            if name not in names:
                names.append(name)
                attached += 1
    return attached


__all__ = [
    "ClipRecord",
    "ClipMap",
    "merge_clips",
    "merge_ocf_clips",
    "merge_proxy_clips",
    "merge_custom_entries",
    "merge_sound_clips",
]
