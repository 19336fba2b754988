"""Per-run memo of URL check results."""

from __future__ import annotations

from typing import Callable

from linkaudit.checker.models import CheckResult

ProbeFn = Callable[[str], CheckResult]


class UrlCheckCache:
    """Remembers the :class:`CheckResult` for every URL checked in one run.

    Keys are the literal URL strings: no normalisation is applied, so
    ``https://a.test/x`` and ``https://a.test/x/`` are checked separately.
    """

    def __init__(self) -> None:
        self._results: dict[str, CheckResult] = {}
        self.hits = 0
        self.misses = 0

    def lookup_or_compute(self, url: str, probe: ProbeFn) -> CheckResult:
        """Return the cached result for *url*, calling *probe* only on first sight."""
        cached = self._results.get(url)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        result = probe(url)
        self._results[url] = result
        return result

    def __contains__(self, url: object) -> bool:
        return url in self._results

    def __len__(self) -> int:
        return len(self._results)
