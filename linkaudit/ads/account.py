"""Ad enumeration and pause mutations over an account export file.

The advertising platform itself is reached through two narrow capabilities:

* an *ad source* — anything iterable yielding :class:`AdDescriptor`;
* an :class:`AdPlatform` — something that can pause one ad.

:class:`JsonAdAccount` provides both on top of a JSON export of the account,
which keeps the audit runnable (and testable) without platform credentials.
Export layout::

    {
      "account_id": "123-456-7890",
      "campaigns": [
        {"id": "1", "name": "Brand", "status": "ENABLED",
         "ads": [{"id": "11", "type": "RESPONSIVE_SEARCH_AD",
                  "status": "ENABLED", "final_url": "https://example.com/"}]}
      ]
    }
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterator

from linkaudit.ads.models import ENABLED, PAUSED, REMOVED, AdDescriptor
from linkaudit.errors import AdMutationError, AdNotFoundError, AdSourceError


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class AdPlatform(ABC):
    """Mutation side of the advertising platform."""

    @abstractmethod
    def pause_ad(self, ad: AdDescriptor) -> None:
        """Transition *ad* to the paused state.  Raise on rejection."""


# ---------------------------------------------------------------------------
# JSON account export
# ---------------------------------------------------------------------------

class JsonAdAccount(AdPlatform):
    """An account export file acting as both ad source and ad platform.

    Iterating yields the ads of every selected campaign in file order.  Only
    ``ENABLED`` campaigns and ads are selected unless *include_paused* is set,
    in which case ``PAUSED`` ones are selected as well; ``REMOVED`` entities
    are never yielded.
    """

    def __init__(self, path: Path | str, include_paused: bool = False) -> None:
        self.path = Path(path)
        self.include_paused = include_paused
        self._data = self._load()

    # ------------------------------------------------------------------
    # Loading / saving
    # ------------------------------------------------------------------
    def _load(self) -> dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise AdSourceError(f"Cannot read account export {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise AdSourceError(f"Account export {self.path} is not valid JSON: {exc}") from exc

        if not isinstance(data, dict) or not isinstance(data.get("campaigns"), list):
            raise AdSourceError(f"Account export {self.path} has no 'campaigns' list")
        for index, campaign in enumerate(data["campaigns"]):
            self._check_campaign(index, campaign)
        return data

    def _check_campaign(self, index: int, campaign: Any) -> None:
        where = f"Account export {self.path}, campaign #{index}"
        if not isinstance(campaign, dict):
            raise AdSourceError(f"{where} is not an object")
        _check_optional_str(campaign, "status", where)
        ads = campaign.get("ads", [])
        if not isinstance(ads, list):
            raise AdSourceError(f"{where} has an 'ads' value that is not a list")
        for ad_index, ad in enumerate(ads):
            ad_where = f"{where}, ad #{ad_index}"
            if not isinstance(ad, dict):
                raise AdSourceError(f"{ad_where} is not an object")
            _check_optional_str(ad, "status", ad_where)
            _check_optional_str(ad, "final_url", ad_where)

    def _save(self) -> None:
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")

    @property
    def account_id(self) -> str | None:
        return self._data.get("account_id")

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------
    def _selected(self, status: str | None) -> bool:
        status = (status or ENABLED).upper()
        if status == ENABLED:
            return True
        return self.include_paused and status == PAUSED

    def __iter__(self) -> Iterator[AdDescriptor]:
        for campaign in self._data["campaigns"]:
            if not self._selected(campaign.get("status")):
                continue
            for ad in campaign.get("ads", []):
                if not self._selected(ad.get("status")):
                    continue
                yield _to_descriptor(campaign, ad)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def _find_ad(self, ad: AdDescriptor) -> dict[str, Any]:
        for campaign in self._data["campaigns"]:
            if str(campaign.get("id")) != ad.campaign_id:
                continue
            for raw in campaign.get("ads", []):
                if str(raw.get("id")) == ad.ad_id:
                    return raw
        raise AdNotFoundError(f"Ad {ad.ad_id} not found in campaign {ad.campaign_id}")

    def pause_ad(self, ad: AdDescriptor) -> None:
        raw = self._find_ad(ad)
        status = (raw.get("status") or ENABLED).upper()
        if status == REMOVED:
            raise AdMutationError(f"Ad {ad.ad_id} has been removed and cannot be paused")
        if status == PAUSED:
            return
        raw["status"] = PAUSED
        self._save()


def _check_optional_str(entry: dict[str, Any], key: str, where: str) -> None:
    value = entry.get(key)
    if value is not None and not isinstance(value, str):
        raise AdSourceError(f"{where} has a non-string {key!r}: {value!r}")


def _to_descriptor(campaign: dict[str, Any], ad: dict[str, Any]) -> AdDescriptor:
    return AdDescriptor(
        campaign_name=str(campaign.get("name") or ""),
        campaign_id=str(campaign.get("id", "")),
        ad_id=str(ad.get("id", "")),
        ad_type=str(ad.get("type") or ""),
        destination_url=ad.get("final_url"),
        status=(ad.get("status") or ENABLED).upper(),
    )
