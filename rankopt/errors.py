from __future__ import annotations


class RankOptError(Exception):
    """Base class for every error raised by rankopt."""


class MalformedInputError(RankOptError, ValueError):
    def __init__(self, message: str, line_no: int | None = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class ShapeMismatchError(MalformedInputError):
    pass


class InvalidPreferenceList(RankOptError, ValueError):
    def __init__(self, resident_id: int, track: int | None, message: str | None = None):
        self.resident_id = resident_id
        self.track = track
        if message is None:
            message = f"track {track} missing from preference list"
        super().__init__(f"resident {resident_id}: {message}")
