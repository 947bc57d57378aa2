# SitemapLens — HTML parsing and page link scraping
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import List, Union

import requests
from bs4 import BeautifulSoup

from .models import LinkEntry
from ..utils.net import fetch_content
from ..utils.urls import resolve_url


logger = logging.getLogger(__name__)

PARSER_CANDIDATES = ["lxml", "html.parser"]
SKIPPED_PREFIXES = ("#", "javascript:")


def parse_html(content: Union[str, bytes]) -> BeautifulSoup:
	"""Parse HTML using lxml if available, else builtin parser."""
	for parser in PARSER_CANDIDATES:
		try:
			return BeautifulSoup(content, parser)
		except Exception:
			continue
	return BeautifulSoup(content, "html.parser")


def links_from_soup(soup: BeautifulSoup, page_url: str) -> List[LinkEntry]:
	"""Every anchor with a usable href, in document order, resolved against page_url.

	Pure fragments and javascript: pseudo-URLs are skipped; no scheme or host filtering.
	Hrefs that cannot be resolved (e.g. a broken IPv6 host) are skipped.
	"""
	links: List[LinkEntry] = []
	for a in soup.find_all("a", href=True):
		href = a.get("href", "")
		if not href or href.startswith(SKIPPED_PREFIXES):
			continue
		try:
			url = resolve_url(page_url, href)
		except ValueError as e:
			logger.debug("Skipping unresolvable href %r on %s: %s", href, page_url, e)
			continue
		text = a.get_text().strip()
		links.append(LinkEntry(url=url, text=text or None, source=page_url))
	return links


def scrape_page_links(session, page_url: str, timeout: float) -> List[LinkEntry]:
	logger.info("Extracting links from page: %s", page_url)
	try:
		content = fetch_content(session, page_url, timeout)
	except requests.RequestException as e:
		logger.error("Error extracting links from page %s: %s", page_url, e)
		return []
	links = links_from_soup(parse_html(content), page_url)
	logger.info("Extracted %d links from page", len(links))
	return links
