"""Building blocks for HTTP load testing: response headers, URL escaping, text helpers, a timer and MD5."""

__version__ = "0.1.0"