from typing import Dict, Iterable, List

from podium_league.schemas.openf1 import MeetingRecord, SessionRecord
from podium_league.schemas.races import CalendarEntry
from podium_league.services.records import parse_records


def build_race_calendar(
    meetings: Iterable, race_sessions: Iterable, qualifying_sessions: Iterable
) -> List[CalendarEntry]:
    """
    Join meetings with their race and qualifying sessions into a numbered calendar.

    Only race sessions whose meeting is known produce an entry. Rounds are
    1..N by race start (stable on ties). Always a full replacement.
    """
    meeting_map: Dict[int, MeetingRecord] = {}
    for m in parse_records(MeetingRecord, meetings):
        meeting_map[m.meeting_key] = m

    quali_map: Dict[int, SessionRecord] = {}
    for q in parse_records(SessionRecord, qualifying_sessions):
        quali_map[q.meeting_key] = q

    races = []
    for s in parse_records(SessionRecord, race_sessions):
        meeting = meeting_map.get(s.meeting_key)
        if meeting is None:
            continue
        quali = quali_map.get(s.meeting_key)
        races.append({
            "name": meeting.meeting_name,
            "circuit": meeting.circuit,
            "country": meeting.country_name,
            "race_start": s.date_start,
            "qualifying_start": quali.date_start if quali else None,
            "meeting_key": s.meeting_key,
        })
    races.sort(key=lambda r: r["race_start"])

    return [
        CalendarEntry(round=str(i), round_number=i, **race)
        for i, race in enumerate(races, start=1)
    ]
