# siegekit

siegekit is a set of pure-Python building blocks for HTTP load-testing
tools. It uses only the standard library.

## What is inside

| Module | Purpose |
| --- | --- |
| `siegekit.response` | `Response` parses HTTP response header lines one at a time. It handles the status line, content type and charset, content length, content and transfer encodings, location, connection, keep-alive, ETag, Last-Modified, and WWW- and proxy authentication challenges. The module also defines the enums `HttpConnection`, `TransferEncoding`, `ContentEncoding` and `AuthType` |
| `siegekit.urlescape` | The `Scheme` and `Method` enums. `url_escape` percent-encodes the path of a URL, `url_replace` replaces text, and `has_method` finds a method marker such as `" POST"` in a URL line |
| `siegekit.md5` | `MD5` is an incremental digest with `update`, `digest`, `hexdigest` and `copy`. `md5_buffer` and `md5_stream` hash in a single call |
| `siegekit.page` | `Page` is a growable text buffer with `concat`, `clear`, `value`, `size` and `len()` |
| `siegekit.text` | `chomp`, `trim`, `ltrim`, `rtrim`, `empty`, `word_count`, `split` |
| `siegekit.util` | `parse_time`, `substring`, `okay`, `strmatch`, `startswith`, `endswith`, `stristr`, `strncasestr`, `elapsed_time`, `posix_rand_r`, `urandom`, `version_banner` |
| `siegekit.timer` | `siege_timer(seconds, handler, cancel)` waits `seconds + 1` seconds and then calls `handler`. If the `cancel` event is set before then, it returns without calling the handler |

## Examples

Reading response headers:

```python
from siegekit.response import Response

r = Response()
r.set_code("HTTP/1.1 200 OK")
r.set_content_type("content-type: text/html; charset=utf-8")
print(r.code(), r.content_type(), r.charset(), r.success())
# 200 text/html utf-8 True
```

Escaping a URL path:

```python
from siegekit.urlescape import url_escape, url_replace

print(url_escape("http://example.com/a b"))       # http://example.com/a%20b
print(url_replace("a&amp;b", "&amp;", "&"))       # a&b
```

Hashing:

```python
from siegekit.md5 import MD5, md5_buffer

h = MD5(b"hello ")
h.update(b"world")
print(h.hexdigest())
print(md5_buffer(b"hello world").hex())
```

Parsing a time option:

```python
from siegekit.util import parse_time

print(parse_time("10S"))  # (1, 10)
print(parse_time("5"))    # (5, 300): a bare number means minutes
```

Stopping a run on a timer:

```python
import threading
from siegekit.timer import siege_timer

stop = threading.Event()
siege_timer(2, lambda: print("time is up"), stop)
```

## What it does not do

siegekit has no command-line program. It opens no network connections and
sends no requests. It has no URL object that splits a URL into host, port
and path. It does not extract links from HTML pages or resolve relative
links, and it does not print notices or write to syslog. These parts are
left to the tool that builds on the package.

## Tests

The test suite uses pytest. It is declared in the `test` extra.