from __future__ import annotations

import logging

from ..models.roster import Roster


def assign_tracks(roster: Roster) -> Roster:
    # Bind each resident to the track of its current position
    logger = logging.getLogger(__name__)
    for track, r in roster.placements():
        r.assigned_track = track
    logger.info(f"Assigned {len(roster)} tracks")
    return roster
