"""Ads package — ad descriptors, enumeration and pause mutations."""

from linkaudit.ads.account import AdPlatform, JsonAdAccount
from linkaudit.ads.models import AdDescriptor

__all__ = ["AdDescriptor", "AdPlatform", "JsonAdAccount"]
