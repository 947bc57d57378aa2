# SitemapLens — Networking utilities (requests session, GET/HEAD helpers)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


def build_session(user_agent: str, retries: int = 0, backoff: float = 0.5) -> requests.Session:
	"""Build a requests Session with identifying headers.

	A Retry adapter is mounted only when retries > 0; by default every fetch is attempted once.
	"""
	s = requests.Session()
	s.headers.update(
		{
			"User-Agent": user_agent,
			"Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
		}
	)
	if retries > 0:
		retry = Retry(
			total=retries,
			backoff_factor=backoff,
			status_forcelist=(429, 500, 502, 503, 504),
			allowed_methods=frozenset({"GET", "HEAD"}),
		)
		adapter = HTTPAdapter(max_retries=retry)
		s.mount("http://", adapter)
		s.mount("https://", adapter)
	return s


def fetch_text(session, url: str, timeout: float) -> str:
	"""GET url and return the decoded body. Raises requests exceptions on failure or non-2xx."""
	r = session.get(url, timeout=timeout)
	r.raise_for_status()
	return r.text


def probe_exists(session, url: str, timeout: float) -> None:
	"""Header-only existence check. Raises requests exceptions on failure or non-2xx."""
	r = session.head(url, allow_redirects=True, timeout=timeout)
	r.raise_for_status()


def fetch_content(session, url: str, timeout: float) -> bytes:
	"""GET url and return the raw body, leaving charset detection to the parser."""
	r = session.get(url, timeout=timeout)
	r.raise_for_status()
	return r.content
