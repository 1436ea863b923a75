"""Service configuration and its JSON decoding."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import IO, Any, Callable

log = logging.getLogger(__name__)


def _normalise(key: str) -> str:
    return key.replace("_", "").lower()


class _Fields:
    """Case-insensitive view of a JSON object, matching keys the way field names are matched."""

    def __init__(self, data: Any, where: str):
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object for {where}")
        self._exact = data
        self._folded: dict[str, Any] = {}
        for key, value in data.items():
            self._folded.setdefault(_normalise(key), value)
        self._where = where

    def get(self, python_name: str, convert: Callable[[Any, str], Any], default: Any) -> Any:
        folded = _normalise(python_name)
        value = self._folded.get(folded)
        if value is None:
            return default() if callable(default) else default
        return convert(value, f"{self._where}.{python_name}")


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string for {where}")
    return value


def _string_list(value: Any, where: str) -> list[str]:
    if not isinstance(value, list):
        raise ValueError(f"expected a list for {where}")
    return ["" if item is None else _string(item, where) for item in value]


def _string_map(value: Any, where: str) -> dict[str, str]:
    if not isinstance(value, dict):
        raise ValueError(f"expected an object for {where}")
    return {key: "" if item is None else _string(item, where) for key, item in value.items()}


@dataclass
class AccessLog:
    """Where a bucket's access log is written."""

    bucket: str = ""
    prefix: str = ""

    def get_bucket(self, account_id: str) -> str:
        """Return the bucket name with the first {account_id} placeholder filled in."""
        return self.bucket.replace("{account_id}", account_id, 1)

    @classmethod
    def _from_json(cls, value: Any, where: str) -> AccessLog:
        data = _Fields(value, where)
        return cls(
            bucket=data.get("bucket", _string, ""),
            prefix=data.get("prefix", _string, ""),
        )


@dataclass
class Domain:
    """Certificate and hosted zone for a website domain."""

    cert_arn: str = ""
    hosted_zone_id: str = ""

    @classmethod
    def _from_json(cls, value: Any, where: str) -> Domain:
        data = _Fields(value, where)
        return cls(
            cert_arn=data.get("cert_arn", _string, ""),
            hosted_zone_id=data.get("hosted_zone_id", _string, ""),
        )


def _domains(value: Any, where: str) -> dict[str, Domain]:
    if not isinstance(value, dict):
        raise ValueError(f"expected an object for {where}")
    return {name: Domain._from_json(item, f"{where}.{name}") for name, item in value.items()}


@dataclass
class Cleaner:
    """Schedule of the periodic cleaner task."""

    interval: str = ""
    max_splay: str = ""

    @classmethod
    def _from_json(cls, value: Any, where: str) -> Cleaner:
        data = _Fields(value, where)
        return cls(
            interval=data.get("interval", _string, ""),
            max_splay=data.get("max_splay", _string, ""),
        )


@dataclass
class Account:
    """Configuration of a single cloud account."""

    endpoint: str = ""
    region: str = ""
    akid: str = ""
    secret: str = ""
    external_id: str = ""
    role: str = ""
    default_s3_bucket_actions: list[str] = field(default_factory=list)
    default_s3_object_actions: list[str] = field(default_factory=list)
    default_cloudfront_distribution_actions: list[str] = field(default_factory=list)
    access_log: AccessLog = field(default_factory=AccessLog)
    domains: dict[str, Domain] = field(default_factory=dict)
    cleaner: Cleaner | None = None

    @classmethod
    def _from_json(cls, value: Any, where: str) -> Account:
        data = _Fields(value, where)
        return cls(
            endpoint=data.get("endpoint", _string, ""),
            region=data.get("region", _string, ""),
            akid=data.get("akid", _string, ""),
            secret=data.get("secret", _string, ""),
            external_id=data.get("external_id", _string, ""),
            role=data.get("role", _string, ""),
            default_s3_bucket_actions=data.get("default_s3_bucket_actions", _string_list, list),
            default_s3_object_actions=data.get("default_s3_object_actions", _string_list, list),
            default_cloudfront_distribution_actions=data.get(
                "default_cloudfront_distribution_actions", _string_list, list
            ),
            access_log=data.get("access_log", AccessLog._from_json, AccessLog),
            domains=data.get("domains", _domains, dict),
            cleaner=data.get("cleaner", Cleaner._from_json, None),
        )


@dataclass
class Version:
    """Version and build information of the API."""

    version: str = ""
    version_prerelease: str = ""
    build_stamp: str = ""
    git_hash: str = ""

    @classmethod
    def _from_json(cls, value: Any, where: str) -> Version:
        data = _Fields(value, where)
        return cls(
            version=data.get("version", _string, ""),
            version_prerelease=data.get("version_prerelease", _string, ""),
            build_stamp=data.get("build_stamp", _string, ""),
            git_hash=data.get("git_hash", _string, ""),
        )


@dataclass
class Config:
    """Top-level service configuration."""

    listen_address: str = ""
    account: Account = field(default_factory=Account)
    accounts_map: dict[str, str] = field(default_factory=dict)
    token: str = ""
    log_level: str = ""
    version: Version = field(default_factory=Version)
    org: str = ""

    @classmethod
    def _from_json(cls, value: Any) -> Config:
        data = _Fields(value, "config")
        return cls(
            listen_address=data.get("listen_address", _string, ""),
            account=data.get("account", Account._from_json, Account),
            accounts_map=data.get("accounts_map", _string_map, dict),
            token=data.get("token", _string, ""),
            log_level=data.get("log_level", _string, ""),
            version=data.get("version", Version._from_json, Version),
            org=data.get("org", _string, ""),
        )


def read_config(stream: IO[str] | IO[bytes]) -> Config:
    """Decode the configuration from the first JSON document in a text or binary stream."""
    log.info("Reading configuration")
    content = stream.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    try:
        document, _ = json.JSONDecoder().raw_decode(content.lstrip())
        return Config._from_json(document)
    except (ValueError, UnicodeDecodeError) as err:
        raise ValueError(f"unable to decode JSON message: {err}") from err