"""Cyberduck bookmark files for buckets."""

from __future__ import annotations

import logging
import plistlib
import re
from dataclasses import dataclass

log = logging.getLogger(__name__)

_LEADING_TABS = re.compile(rb"^(\t+)(?=<)", re.MULTILINE)


def _strip_capping_slashes(path: str) -> str:
    if path.startswith("/"):
        path = path[1:]
    if path.endswith("/"):
        path = path[:-1]
    return path


@dataclass
class DotDuck:
    """Contents of a Cyberduck bookmark."""

    protocol: str = ""
    provider: str = ""
    nickname: str = ""
    hostname: str = ""
    port: str = ""
    path: str = ""
    web_url: str = ""

    def generate(self) -> bytes:
        """Render the bookmark as an XML property list indented with two spaces."""
        log.debug("generating cyberduck bookmark file")
        document = {
            "Protocol": self.protocol,
            "Provider": self.provider,
            "Nickname": self.nickname,
            "Hostname": self.hostname,
            "Port": self.port,
            "Path": self.path,
            "Web URL": self.web_url,
        }
        raw = plistlib.dumps(document, fmt=plistlib.FMT_XML, sort_keys=False)
        return _LEADING_TABS.sub(lambda m: b"  " * len(m.group(1)), raw)


def default_duck(name: str, path: str) -> DotDuck:
    """Build the default bookmark for bucket ``name``, optionally rooted at ``path``."""
    full_path = f"/{name}"
    nickname = f"Spinup - {name}"
    if path != "/":
        path = _strip_capping_slashes(path)
        full_path = f"/{name}/{path}"
        nickname = f"Spinup - {name}/{path}"
    return DotDuck(
        protocol="s3",
        provider="iterate GmbH",
        nickname=nickname,
        hostname="s3.amazonaws.com",
        port="443",
        path=full_path,
        web_url=f"s3://{name}/",
    )