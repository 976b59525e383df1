"""HTTP response header parsing: status, content, connection and auth headers."""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import Iterator

from siegekit.text import trim
from siegekit.util import stristr, strmatch

__all__ = [
    "HttpConnection",
    "TransferEncoding",
    "ContentEncoding",
    "AuthType",
    "Response",
]


class HttpConnection(IntEnum):
    """Connection header directive."""

    CLOSE = 1
    KEEPALIVE = 2
    METER = 4


class TransferEncoding(IntEnum):
    """Transfer-Encoding header value."""

    NONE = 1
    CHUNKED = 2
    TRAILER = 4


class ContentEncoding(IntEnum):
    """Content-Encoding header value."""

    COMPRESS = 1
    DEFLATE = 2
    GZIP = 4
    BZIP2 = 8


class AuthType(Enum):
    """Authentication scheme requested by a server or proxy."""

    BASIC = "basic"
    DIGEST = "digest"
    NTLM = "ntlm"


_CHARSET = "charset"
_CONNECTION = "connection"
_CONTENT_ENCODING = "content-encoding"
_CONTENT_LENGTH = "content-length"
_CONTENT_TYPE = "content-type"
_CONTENT_LOCATION = "content-location"
_ETAG = "etag"
_KEEPALIVE_MAX = "keepalive-max"
_KEEPALIVE_TIMEOUT = "keepalive-timeout"
_LAST_MODIFIED = "last-modified"
_LOCATION = "location"
_PROTOCOL = "protocol"
_PROXY_AUTHENTICATE = "proxy-authenticate"
_REDIRECT = "redirect"
_RESPONSE_CODE = "response-code"
_TRANSFER_ENCODING = "transfer-encoding"
_WWW_AUTHENTICATE = "www-authenticate"

_SPACE = " \t\n\v\f\r"
_SEPARATORS = "=:"
_QUOTES = "\"'"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str | None) -> int:
    """Leading integer of text, 0 when there is none."""
    if text is None:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _has_prefix(line: str, prefix: str) -> bool:
    return line[:len(prefix)].lower() == prefix.lower()


def _dequote(text: str) -> str:
    return text.strip(_QUOTES)


def _pairs(text: str) -> Iterator[str]:
    """Yield ``option=value`` pairs of a header, stopping at the first without '='.

    Before each pair everything up to and including the next space is
    skipped; pairs end at ';' or ','.
    """
    rest = text
    while True:
        space = rest.find(" ")
        if space < 0:
            return
        rest = rest[space + 1:]
        if not rest:
            return
        end = next((i for i, ch in enumerate(rest) if ch in ";,"), len(rest))
        pair = rest[:end]
        at_end = end >= len(rest)
        rest = rest[end + 1:]
        if "=" not in pair:
            return
        yield pair
        if at_end:
            return


def _split_pair(pair: str) -> tuple[str, str]:
    stop = next(
        (i for i, ch in enumerate(pair) if ch in _SPACE or ch in _SEPARATORS),
        len(pair),
    )
    option = pair[:stop]
    value = pair[stop + 1:].lstrip(_SPACE + _SEPARATORS)
    return option, value


class Response:
    """Headers of one HTTP response, parsed line by line."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.cached = False
        self.www_auth_type: AuthType | None = None
        self.www_auth_challenge: str | None = None
        self.www_auth_realm: str | None = None
        self.proxy_auth_type: AuthType | None = None
        self.proxy_auth_challenge: str | None = None
        self.proxy_auth_realm: str | None = None

    # ------------------------------------------------------------- helpers

    def _int_value(self, key: str, default: int) -> int:
        value = self.headers.get(key)
        number = _atoi(value) if value is not None else -1
        return number if number > 0 else default

    def _bool_value(self, key: str, default: bool) -> bool:
        value = self.headers.get(key)
        if value is None:
            return default
        if strmatch(value, "true"):
            return True
        if strmatch(value, "false"):
            return False
        return default

    # ---------------------------------------------------------- status line

    def set_code(self, line: str) -> bool:
        """Parse a status line such as ``HTTP/1.1 200 OK``."""
        if _has_prefix(line, "http") and _atoi(line[9:]) > 1:
            self.headers[_PROTOCOL] = line[:8]
            self.headers[_RESPONSE_CODE] = line[9:]
            return True
        return False

    def code(self) -> int:
        """Return the status code, 418 when none was parsed."""
        value = self.headers.get(_RESPONSE_CODE)
        if value is None:
            return 418
        return _atoi(value)

    def protocol(self) -> str:
        """Return the protocol of the status line, HTTP/1.1 by default."""
        return self.headers.get(_PROTOCOL, "HTTP/1.1")

    def success(self) -> bool:
        """True for codes below 400 and for 401 and 407."""
        value = self.headers.get(_RESPONSE_CODE)
        if value is None:
            return False
        code = _atoi(value)
        return code < 400 or code in (401, 407)

    def failure(self) -> bool:
        """True for codes of 400 and above other than 401 and 407, or no code."""
        value = self.headers.get(_RESPONSE_CODE)
        if value is None:
            return True
        code = _atoi(value)
        return code >= 400 and code not in (401, 407)

    # -------------------------------------------------------------- content

    def set_content_type(self, line: str) -> bool:
        """Parse a Content-Type line, with an optional charset."""
        value = line[len(_CONTENT_TYPE) + 2:]
        if ";" not in line:
            self.headers[_CONTENT_TYPE] = value
            return True
        stripped = value.lstrip(";")
        if not stripped:
            return False
        end = stripped.find(";")
        content_type = stripped if end < 0 else stripped[:end]
        remainder = "" if end < 0 else stripped[end + 1:]
        self.headers[_CONTENT_TYPE] = content_type
        charset = stristr(remainder, "charset=")
        if charset is not None and len(charset) > 8:
            self.headers[_CHARSET] = charset[8:]
        return True

    def content_type(self) -> str:
        """Return the content type, ``unknown`` by default."""
        return self.headers.get(_CONTENT_TYPE, "unknown")

    def charset(self) -> str:
        """Return the charset, recording iso-8859-1 when none was given."""
        return self.headers.setdefault(_CHARSET, "iso-8859-1")

    def set_content_length(self, line: str) -> bool:
        """Parse a Content-Length line; lengths below 2 are not recorded."""
        if _has_prefix(line, _CONTENT_LENGTH):
            value = line[len(_CONTENT_LENGTH) + 2:]
            if _atoi(value) > 1:
                self.headers[_CONTENT_LENGTH] = value
                return True
        return False

    def content_length(self) -> int:
        """Return the content length, 0 by default."""
        return self._int_value(_CONTENT_LENGTH, 0)

    def set_content_encoding(self, line: str) -> bool:
        """Parse a Content-Encoding line; only gzip and deflate are accepted."""
        if not _has_prefix(line, _CONTENT_ENCODING):
            return False
        value = line[len(_CONTENT_ENCODING) + 2:]
        for name, encoding in (("gzip", ContentEncoding.GZIP),
                               ("deflate", ContentEncoding.DEFLATE)):
            if strmatch(value, name):
                self.headers[_CONTENT_ENCODING] = str(int(encoding))
                return True
        return False

    def content_encoding(self) -> ContentEncoding | None:
        """Return the content encoding, None when not set."""
        value = self._int_value(_CONTENT_ENCODING, 0)
        try:
            return ContentEncoding(value)
        except ValueError:
            return None

    def set_transfer_encoding(self, line: str) -> bool:
        """Parse a Transfer-Encoding line."""
        if not _has_prefix(line, _TRANSFER_ENCODING):
            return False
        value = trim(line[len(_TRANSFER_ENCODING) + 2:])
        if strmatch(value, "chunked"):
            encoding = TransferEncoding.CHUNKED
        elif strmatch(value, "trailer"):
            encoding = TransferEncoding.TRAILER
        else:
            encoding = TransferEncoding.NONE
        self.headers[_TRANSFER_ENCODING] = str(int(encoding))
        return True

    def transfer_encoding(self) -> TransferEncoding:
        """Return the transfer encoding, NONE by default."""
        return TransferEncoding(
            self._int_value(_TRANSFER_ENCODING, TransferEncoding.NONE)
        )

    # ------------------------------------------------------------ redirects

    def set_location(self, line: str) -> bool:
        """Parse a Location or Content-Location line; returns the redirect flag."""
        if _has_prefix(line, _LOCATION):
            self.headers[_LOCATION] = line[len(_LOCATION) + 2:]
            self.headers[_REDIRECT] = "true"
        if _has_prefix(line, _CONTENT_LOCATION):
            self.headers[_LOCATION] = line[len(_CONTENT_LOCATION) + 2:]
            self.headers[_REDIRECT] = "true"
        return self._bool_value(_REDIRECT, False)

    def location(self) -> str | None:
        """Return the redirect target, if any."""
        return self.headers.get(_LOCATION)

    def redirect(self) -> bool:
        """Return True once a location header was seen."""
        return self._bool_value(_REDIRECT, False)

    # ----------------------------------------------------------- connection

    def set_connection(self, line: str) -> bool:
        """Parse a Connection line."""
        if not _has_prefix(line, _CONNECTION):
            return False
        if line[12:22].lower() == "keep-alive":
            directive = HttpConnection.KEEPALIVE
        else:
            directive = HttpConnection.CLOSE
        self.headers[_CONNECTION] = str(int(directive))
        return True

    def connection(self) -> HttpConnection:
        """Return the connection directive, CLOSE by default."""
        return HttpConnection(self._int_value(_CONNECTION, HttpConnection.CLOSE))

    def set_keepalive(self, line: str) -> bool:
        """Parse the timeout and max options of a Keep-Alive line."""
        found = False
        for pair in _pairs(line):
            option, value = _split_pair(pair)
            if _has_prefix(option, "timeout"):
                if _atoi(value) > 0:
                    self.headers[_KEEPALIVE_TIMEOUT] = value
                found = True
            if _has_prefix(option, "max"):
                if _atoi(value) > 0:
                    self.headers[_KEEPALIVE_MAX] = value
                found = True
        return found

    def keepalive_timeout(self) -> int:
        """Return the keep-alive timeout, 15 by default."""
        return self._int_value(_KEEPALIVE_TIMEOUT, 15)

    def keepalive_max(self) -> int:
        """Return the keep-alive request limit, 5 by default."""
        return self._int_value(_KEEPALIVE_MAX, 5)

    # -------------------------------------------------------------- caching

    def set_last_modified(self, line: str) -> bool:
        """Parse a Last-Modified line."""
        if not _has_prefix(line, _LAST_MODIFIED):
            return False
        self.headers[_LAST_MODIFIED] = line[len(_LAST_MODIFIED) + 2:]
        return True

    def last_modified(self) -> str | None:
        """Return the Last-Modified value, if any."""
        return self.headers.get(_LAST_MODIFIED)

    def set_etag(self, line: str) -> bool:
        """Parse an ETag line, removing surrounding quotes."""
        if not _has_prefix(line, _ETAG):
            return False
        self.headers[_ETAG] = _dequote(line[len(_ETAG) + 2:])
        return True

    def etag(self) -> str | None:
        """Return the entity tag, if any."""
        return self.headers.get(_ETAG)

    # ------------------------------------------------------- authentication

    @staticmethod
    def _realm(text: str) -> str | None:
        realm = None
        for pair in _pairs(text):
            option, value = _split_pair(pair)
            if _has_prefix(option, "realm"):
                realm = _dequote(value)
        return realm

    def set_www_authenticate(self, line: str) -> bool:
        """Parse a WWW-Authenticate line for its scheme, challenge and realm."""
        if not _has_prefix(line, _WWW_AUTHENTICATE):
            return True
        start = len(_WWW_AUTHENTICATE) + 2
        scheme = line[start:]
        rest = line
        if _has_prefix(scheme, "digest"):
            rest = line[start + 6:]
            self.www_auth_type = AuthType.DIGEST
            self.www_auth_challenge = scheme
        elif _has_prefix(scheme, "ntlm"):
            rest = line[start + 4:]
            self.www_auth_type = AuthType.NTLM
            self.www_auth_challenge = scheme
        elif self.www_auth_type not in (AuthType.DIGEST, AuthType.NTLM):
            rest = line[start + 5:]
            self.www_auth_type = AuthType.BASIC
        realm = self._realm(rest)
        if realm is not None:
            self.www_auth_realm = realm
        return True

    def set_proxy_authenticate(self, line: str) -> bool:
        """Parse a Proxy-Authenticate line for its scheme, challenge and realm."""
        if not _has_prefix(line, _PROXY_AUTHENTICATE):
            return True
        start = len(_PROXY_AUTHENTICATE) + 2
        scheme = line[start:]
        if _has_prefix(scheme, "digest"):
            rest = line[start + 6:]
            self.proxy_auth_type = AuthType.DIGEST
            self.proxy_auth_challenge = scheme
        else:
            rest = line[start + 5:]
            self.proxy_auth_type = AuthType.BASIC
        realm = self._realm(rest)
        if realm is not None:
            self.proxy_auth_realm = realm
        return True