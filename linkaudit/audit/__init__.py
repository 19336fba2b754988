"""Audit package — orchestration of a broken-link run and its report."""

from linkaudit.audit.orchestrator import LinkAuditor
from linkaudit.audit.report import AuditReport, BrokenLinkRecord

__all__ = ["AuditReport", "BrokenLinkRecord", "LinkAuditor"]
