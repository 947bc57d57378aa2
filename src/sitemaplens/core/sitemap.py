# SitemapLens — Sitemap parsing and recursive link extraction
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import re
import xml.etree.ElementTree as ET
from typing import List, NamedTuple, Optional, Set, Union

import requests

from .models import LinkEntry
from ..utils.net import fetch_content


logger = logging.getLogger(__name__)

LOC_PATTERN = re.compile(r"<loc>(.*?)</loc>")
NEWS_NAMESPACE = "http://www.google.com/schemas/sitemap-news/0.9"
URL_METADATA = ("lastmod", "priority", "changefreq")


class ParsedSitemap(NamedTuple):
	"""Outcome of parsing one sitemap body.

	kind is one of "index", "urlset", "news", "unknown" or "text" (regex fallback).
	An index carries nested sitemap URLs; every other kind carries links.
	"""

	kind: str
	nested: List[str]
	links: List[LinkEntry]


def local_name(tag: str) -> str:
	return tag.rsplit("}", 1)[-1]


def child_text(el: ET.Element, name: str) -> Optional[str]:
	found = el.find(f"{{*}}{name}")
	if found is None:
		return None
	text = (found.text or "").strip()
	return text or None


def links_from_text(body: str, sitemap_url: str) -> List[LinkEntry]:
	"""Format-agnostic scan for <loc>...</loc> anywhere in the body."""
	links = []
	for match in LOC_PATTERN.finditer(body):
		url = match.group(1).strip()
		if url:
			links.append(LinkEntry(url=url, source=sitemap_url))
	return links


def parse_sitemap(body: Union[str, bytes], sitemap_url: str) -> ParsedSitemap:
	"""Raw bytes let expat honour the XML encoding declaration; sitemaps default to UTF-8."""
	if isinstance(body, bytes):
		source = body.strip()
	else:
		source = body.lstrip("\ufeff").strip()
	try:
		root = ET.fromstring(source)
	except ET.ParseError as e:
		logger.warning("XML parsing failed for %s, trying text processing: %s", sitemap_url, e)
		text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
		links = links_from_text(text, sitemap_url)
		if links:
			logger.info("Extracted %d URLs using regex fallback", len(links))
		return ParsedSitemap("text", [], links)

	name = local_name(root.tag)
	if name == "sitemapindex":
		entries = root.findall("{*}sitemap")
		if entries:
			logger.info("Found sitemap index with %d nested sitemaps", len(entries))
			nested = [loc for loc in (child_text(e, "loc") for e in entries) if loc]
			return ParsedSitemap("index", nested, [])
	elif name == "urlset":
		entries = root.findall("{*}url")
		if entries:
			logger.info("Processing standard sitemap with %d URLs", len(entries))
			links = []
			for entry in entries:
				loc = child_text(entry, "loc")
				if not loc:
					continue
				metadata = {key: child_text(entry, key) for key in URL_METADATA}
				links.append(LinkEntry(url=loc, source=sitemap_url, **metadata))
			return ParsedSitemap("urlset", [], links)
	elif name == "news" or root.tag.startswith(f"{{{NEWS_NAMESPACE}}}"):
		# Recognized but not decoded
		logger.info("Found news sitemap format at %s", sitemap_url)
		return ParsedSitemap("news", [], [])
	return ParsedSitemap("unknown", [], [])


class SitemapExtractor:
	"""Fetches a sitemap and flattens nested sitemap indexes into one list of links.

	Nesting is bounded by max_depth (the requested sitemap is depth 0) and by a
	visited set, so cycles and runaway indexes end in a logged truncation.
	"""

	def __init__(self, session, timeout: float, max_depth: int = 5) -> None:
		self.session = session
		self.timeout = timeout
		self.max_depth = max_depth

	def extract(self, sitemap_url: str) -> List[LinkEntry]:
		return self._extract(sitemap_url, 0, set())

	def _extract(self, sitemap_url: str, depth: int, visited: Set[str]) -> List[LinkEntry]:
		if sitemap_url in visited:
			logger.warning("Skipping already visited sitemap: %s", sitemap_url)
			return []
		if depth > self.max_depth:
			logger.warning("Sitemap nesting deeper than %d, skipping: %s", self.max_depth, sitemap_url)
			return []
		visited.add(sitemap_url)

		logger.info("Extracting links from sitemap: %s", sitemap_url)
		try:
			body = fetch_content(self.session, sitemap_url, self.timeout)
		except requests.RequestException as e:
			logger.error("Error extracting links from sitemap %s: %s", sitemap_url, e)
			return []

		parsed = parse_sitemap(body, sitemap_url)
		if parsed.kind != "index":
			return parsed.links
		links: List[LinkEntry] = []
		for nested_url in parsed.nested:
			logger.debug("Processing nested sitemap: %s", nested_url)
			links.extend(self._extract(nested_url, depth + 1, visited))
		return links
