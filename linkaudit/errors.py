"""Exception types raised by the audit collaborators.

Probe failures never surface as exceptions (they become a
:class:`~linkaudit.checker.models.CheckResult`), and pause failures are
absorbed by the remediator.  What remains here are the faults a caller may
actually see.
"""

from __future__ import annotations


class LinkAuditError(Exception):
    """Base class for all link-audit errors."""


class AdSourceError(LinkAuditError):
    """The ad enumerator could not produce ads (unreadable or malformed export)."""


class AdMutationError(LinkAuditError):
    """The ad platform rejected a status change."""


class AdNotFoundError(AdMutationError):
    """The ad to mutate no longer exists on the platform."""
