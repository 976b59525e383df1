import pytest

from siegekit.response import (
    AuthType,
    ContentEncoding,
    HttpConnection,
    Response,
    TransferEncoding,
)


def test_code_defaults_to_teapot():
    response = Response()
    assert response.code() == 418
    assert response.protocol() == "HTTP/1.1"


def test_set_code_parses_status_line():
    response = Response()
    assert response.set_code("HTTP/1.0 200 OK") is True
    assert response.code() == 200
    assert response.protocol() == "HTTP/1.0"


@pytest.mark.parametrize("line", ["FTP/1.0 200 OK", "HTTP/1.1 000 Nothing"])
def test_set_code_rejects_bad_lines(line):
    response = Response()
    assert response.set_code(line) is False
    assert response.code() == 418


@pytest.mark.parametrize(
    "line, success",
    [
        ("HTTP/1.1 200 OK", True),
        ("HTTP/1.1 301 Moved", True),
        ("HTTP/1.1 401 Unauthorized", True),
        ("HTTP/1.1 407 Proxy", True),
        ("HTTP/1.1 404 Not Found", False),
        ("HTTP/1.1 500 Error", False),
    ],
)
def test_success_and_failure_are_opposites(line, success):
    response = Response()
    response.set_code(line)
    assert response.success() is success
    assert response.failure() is (not success)


def test_without_code_is_failure():
    response = Response()
    assert response.success() is False
    assert response.failure() is True


def test_content_type_with_charset():
    response = Response()
    assert response.set_content_type("Content-Type: text/html; charset=UTF-8") is True
    assert response.content_type() == "text/html"
    assert response.charset() == "UTF-8"


def test_content_type_without_parameters():
    response = Response()
    assert response.set_content_type("Content-Type: text/plain") is True
    assert response.content_type() == "text/plain"


def test_content_type_and_charset_defaults():
    response = Response()
    assert response.content_type() == "unknown"
    assert response.charset() == "iso-8859-1"
    assert response.headers["charset"] == "iso-8859-1"


def test_content_length():
    response = Response()
    assert response.content_length() == 0
    assert response.set_content_length("Content-Length: 1024") is True
    assert response.content_length() == 1024


@pytest.mark.parametrize("line", ["Content-Length: 1", "Content-Type: 1024"])
def test_content_length_rejected(line):
    response = Response()
    assert response.set_content_length(line) is False
    assert response.content_length() == 0


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Content-Encoding: gzip", ContentEncoding.GZIP),
        ("Content-Encoding: DEFLATE", ContentEncoding.DEFLATE),
    ],
)
def test_content_encoding(line, expected):
    response = Response()
    assert response.set_content_encoding(line) is True
    assert response.content_encoding() is expected


def test_unsupported_content_encoding():
    response = Response()
    assert response.set_content_encoding("Content-Encoding: br") is False
    assert response.content_encoding() is None


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Transfer-Encoding: chunked", TransferEncoding.CHUNKED),
        ("Transfer-Encoding:   trailer  ", TransferEncoding.TRAILER),
        ("Transfer-Encoding: identity", TransferEncoding.NONE),
    ],
)
def test_transfer_encoding(line, expected):
    response = Response()
    assert response.set_transfer_encoding(line) is True
    assert response.transfer_encoding() is expected


def test_transfer_encoding_default_and_rejection():
    response = Response()
    assert response.set_transfer_encoding("Connection: close") is False
    assert response.transfer_encoding() is TransferEncoding.NONE


def test_location_sets_redirect():
    response = Response()
    assert response.redirect() is False
    assert response.set_location("Location: http://example.com/next") is True
    assert response.location() == "http://example.com/next"
    assert response.redirect() is True


def test_content_location_sets_redirect():
    response = Response()
    assert response.set_location("Content-Location: /moved/here") is True
    assert response.location() == "/moved/here"


def test_unrelated_line_is_no_redirect():
    response = Response()
    assert response.set_location("Server: test") is False
    assert response.location() is None


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Connection: keep-alive", HttpConnection.KEEPALIVE),
        ("Connection: Keep-Alive", HttpConnection.KEEPALIVE),
        ("Connection: close", HttpConnection.CLOSE),
    ],
)
def test_connection(line, expected):
    response = Response()
    assert response.set_connection(line) is True
    assert response.connection() is expected


def test_connection_default():
    response = Response()
    assert response.set_connection("Server: test") is False
    assert response.connection() is HttpConnection.CLOSE


def test_keepalive_defaults():
    response = Response()
    assert response.keepalive_timeout() == 15
    assert response.keepalive_max() == 5


def test_keepalive_options():
    response = Response()
    assert response.set_keepalive("Keep-Alive: timeout=30, max=100") is True
    assert response.keepalive_timeout() == 30
    assert response.keepalive_max() == 100


def test_keepalive_zero_timeout_keeps_default():
    response = Response()
    assert response.set_keepalive("Keep-Alive: timeout=0") is True
    assert response.keepalive_timeout() == 15


def test_keepalive_without_options():
    response = Response()
    assert response.set_keepalive("Keep-Alive: on") is False
    assert response.keepalive_max() == 5


def test_last_modified():
    response = Response()
    stamp = "Wed, 21 Oct 2015 07:28:00 GMT"
    assert response.set_last_modified(f"Last-Modified: {stamp}") is True
    assert response.last_modified() == stamp
    assert Response().set_last_modified("ETag: x") is False


def test_etag_is_dequoted():
    response = Response()
    assert response.set_etag('ETag: "abc123"') is True
    assert response.etag() == "abc123"


def test_www_authenticate_basic():
    response = Response()
    assert response.set_www_authenticate('WWW-Authenticate: Basic realm="Restricted"') is True
    assert response.www_auth_type is AuthType.BASIC
    assert response.www_auth_realm == "Restricted"
    assert response.www_auth_challenge is None


def test_www_authenticate_digest():
    response = Response()
    challenge = 'Digest realm="users@example.com", qop="auth", nonce="abc"'
    response.set_www_authenticate(f"WWW-Authenticate: {challenge}")
    assert response.www_auth_type is AuthType.DIGEST
    assert response.www_auth_challenge == challenge
    assert response.www_auth_realm == "users@example.com"


def test_www_authenticate_ntlm():
    response = Response()
    response.set_www_authenticate("WWW-Authenticate: NTLM")
    assert response.www_auth_type is AuthType.NTLM
    assert response.www_auth_challenge == "NTLM"


def test_basic_after_digest_keeps_digest():
    response = Response()
    response.set_www_authenticate('WWW-Authenticate: Digest realm="first"')
    response.set_www_authenticate('WWW-Authenticate: Basic realm="second"')
    assert response.www_auth_type is AuthType.DIGEST
    assert response.www_auth_realm == "first"


def test_proxy_authenticate_basic_and_digest():
    basic = Response()
    basic.set_proxy_authenticate('Proxy-Authenticate: Basic realm="proxy"')
    assert basic.proxy_auth_type is AuthType.BASIC
    assert basic.proxy_auth_realm == "proxy"

    digest = Response()
    digest.set_proxy_authenticate('Proxy-Authenticate: Digest realm="gate"')
    assert digest.proxy_auth_type is AuthType.DIGEST
    assert digest.proxy_auth_challenge == 'Digest realm="gate"'
    assert digest.proxy_auth_realm == "gate"


def test_unrelated_auth_line_changes_nothing():
    response = Response()
    assert response.set_www_authenticate("Server: test") is True
    assert response.www_auth_type is None
    assert response.www_auth_realm is None