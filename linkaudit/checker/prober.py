"""HTTP prober: one network check of one destination URL.

Landing pages are frequently served with self-signed or misconfigured TLS, so
certificate validation is disabled; redirects are followed and only the final
status counts.  Every network fault is turned into a broken
:class:`CheckResult` instead of being raised, so one bad URL can never abort
an audit.
"""

from __future__ import annotations

from typing import Optional

import httpx

from linkaudit.checker.models import CheckResult

DEFAULT_TIMEOUT = 10.0

_DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; LinkAudit/1.0; +https://github.com/linkaudit)"


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class UrlProber:
    """Reusable prober holding a single ``httpx.Client`` for the whole run.

    Use as a context manager, or call :meth:`close` when done.  A caller-owned
    client may be injected; it is then left open on :meth:`close`.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = _DEFAULT_USER_AGENT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=True,
            verify=False,
        )

    def probe(self, url: str) -> CheckResult:
        """Check *url* once and classify the outcome.  Never raises."""
        try:
            # Only the status matters; streaming skips downloading the body.
            with self._client.stream("GET", url) as response:
                status_code = response.status_code
        except Exception as exc:
            message = _describe(exc)
            print(f"[PROBE] Error checking URL: {url} - {message}")
            return CheckResult.from_error(message)
        return CheckResult.from_status(status_code)

    __call__ = probe

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> UrlProber:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def probe_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> CheckResult:
    """One-shot convenience: open a client, probe *url*, close the client."""
    with UrlProber(timeout=timeout) as prober:
        return prober.probe(url)
