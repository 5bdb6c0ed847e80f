"""Cookie jar codecs.

Two on-disk formats are understood: the JSON array Playwright produces from
``context.cookies()``, and the tab-separated Netscape jar written by curl and
most browser export tools.
"""

import json
from typing import Iterable, List

from pydantic import ValidationError

from netero.errors import CookieFormatError
from netero.models.cookie import Cookie

HTTP_ONLY_PREFIX = "#HttpOnly_"


def parse_json(text: str) -> List[Cookie]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CookieFormatError(f"Invalid cookie JSON: {e}") from e
    if not isinstance(data, list):
        raise CookieFormatError("Cookie JSON must be an array of cookie objects.")
    try:
        return [Cookie.from_playwright(item) for item in data]
    except ValidationError as e:
        raise CookieFormatError(f"Invalid cookie entry: {e}") from e


def dump_json(cookies: Iterable[Cookie]) -> str:
    return json.dumps([c.to_playwright() for c in cookies], indent=2)


def parse_netscape(text: str) -> List[Cookie]:
    cookies = []
    for line in text.split("\n"):
        line = line.rstrip("\r")
        is_comment = line.startswith("#") and not line.startswith(HTTP_ONLY_PREFIX)
        if is_comment or line.strip() == "":
            continue

        fields = line.split("\t")
        if len(fields) < 7:
            raise CookieFormatError(f"Invalid cookie line: {line}")
        first, _subdomains, path, secure, expires, name, value = fields[:7]

        http_only = first.startswith(HTTP_ONLY_PREFIX)
        domain = first[len(HTTP_ONLY_PREFIX):] if http_only else first
        try:
            expiry = int(expires) if expires else 0
        except ValueError:
            raise CookieFormatError(f"Invalid cookie expiry in line: {line}") from None

        cookies.append(
            Cookie(
                name=name,
                value=value,
                domain=domain,
                path=path or "/",
                # 0 marks a session cookie in Netscape jars
                expires=expiry or None,
                http_only=http_only,
                secure=secure == "TRUE",
            )
        )
    return cookies


def dump_netscape(cookies: Iterable[Cookie]) -> str:
    lines = ["# Netscape HTTP Cookie File"]
    for c in cookies:
        domain = f"{HTTP_ONLY_PREFIX}{c.domain}" if c.http_only else c.domain
        subdomains = "TRUE" if c.domain.startswith(".") else "FALSE"
        lines.append(
            "\t".join(
                [
                    domain,
                    subdomains,
                    c.path,
                    "TRUE" if c.secure else "FALSE",
                    str(int(c.expires)) if c.expires is not None else "0",
                    c.name,
                    c.value,
                ]
            )
        )
    return "\n".join(lines) + "\n"
