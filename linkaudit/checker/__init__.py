"""Checker package — URL probing & per-run deduplication."""

from linkaudit.checker.cache import UrlCheckCache
from linkaudit.checker.models import ERROR_STATUS, CheckResult
from linkaudit.checker.prober import UrlProber, probe_url

__all__ = ["CheckResult", "ERROR_STATUS", "UrlCheckCache", "UrlProber", "probe_url"]
