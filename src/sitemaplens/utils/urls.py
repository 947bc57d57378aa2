# SitemapLens — URL utilities: validation and resolution
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from urllib.parse import urlparse, urljoin

from ..errors import InvalidUrlError


def is_http_url(url: str) -> bool:
	try:
		p = urlparse(url)
	except ValueError:
		return False
	return p.scheme in ("http", "https") and bool(p.netloc)


def validate_url(url: str) -> str:
	"""Return the stripped URL, or raise InvalidUrlError if it is not an absolute http(s) URL.

	No normalization is applied; dedup downstream compares exact strings.
	"""
	if not url or not url.strip():
		raise InvalidUrlError("Missing required parameter: url")
	url = url.strip()
	if not is_http_url(url):
		raise InvalidUrlError(f"Not an absolute http(s) URL: {url}", details={"url": url})
	return url


def resolve_url(base: str, ref: str) -> str:
	return urljoin(base, ref)


def ends_with_xml(url: str) -> bool:
	return url.lower().endswith(".xml")


__all__ = [
	"is_http_url",
	"validate_url",
	"resolve_url",
	"ends_with_xml",
]
