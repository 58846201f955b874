"""
Exception hierarchy for SlideMarkup.

Structural failures (unreadable package, malformed part, dangling
relationship id) abort the whole build. Unknown elements and unsupported
bullet types are recovered where they occur and never raised.
"""

from typing import Optional


class SlideMarkupError(Exception):
    """Base exception for all conversion errors"""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause

    def __str__(self):
        text = str(self.args[0]) if self.args else ""
        if self.cause:
            text += f" (caused by: {type(self.cause).__name__}: {self.cause})"
        return text


class MalformedPackage(SlideMarkupError):
    """The package, or a part required by the build, cannot be read"""
    pass


class MalformedPart(MalformedPackage):
    """A single part is missing, not well-formed, or structurally invalid"""

    def __init__(self, part_path: str, reason: str = "", cause: Optional[Exception] = None):
        message = f"Malformed part: {part_path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, cause=cause)
        self.part_path = part_path


class UnresolvedRelationship(SlideMarkupError, KeyError):
    """A relationship id has no entry in its relationship table"""

    def __init__(self, rel_id: str, source_part: Optional[str] = None):
        message = f"Unresolved relationship: {rel_id}"
        if source_part:
            message += f" (in {source_part})"
        super().__init__(message)
        self.rel_id = rel_id
        self.source_part = source_part
