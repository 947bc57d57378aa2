# SitemapLens — Sitemap discovery (robots.txt, standard path, HTML header, common paths)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import List, Optional, Union

import requests

from .models import SitemapReference
from .page import parse_html
from .robots import fetch_robots_report
from ..utils.net import fetch_content, probe_exists
from ..utils.urls import ends_with_xml, resolve_url


logger = logging.getLogger(__name__)

STANDARD_SITEMAP = "sitemap.xml"

COMMON_SITEMAP_PATHS = (
	"/sitemap.xml",
	"/sitemap_index.xml",
	"/sitemap-index.xml",
	"/sitemapindex.xml",
	"/sitemap/",
	"/sitemaps/",
	"/sitemap/sitemap.xml",
	"/wp-sitemap.xml",  # WordPress
	"/news-sitemap.xml",
	"/image-sitemap.xml",
	"/video-sitemap.xml",
	"/post-sitemap.xml",  # blogs
)


def find_standard_sitemap(session, website_url: str, timeout: float) -> Optional[SitemapReference]:
	sitemap_url = f"{website_url.rstrip('/')}/{STANDARD_SITEMAP}"
	try:
		probe_exists(session, sitemap_url, timeout)
	except requests.RequestException:
		logger.warning("Sitemap not found at standard path: %s", sitemap_url)
		return None
	logger.info("Found standard sitemap at %s", sitemap_url)
	return SitemapReference(url=sitemap_url)


def sitemap_href_from_html(body: Union[str, bytes]) -> str:
	soup = parse_html(body)
	for link in soup.find_all("link", href=True):
		rel = link.get("rel") or []
		if isinstance(rel, str):
			rel = rel.split()
		if "sitemap" in [r.lower() for r in rel]:
			return link["href"].strip()
	return ""


def find_sitemap_in_html_header(session, website_url: str, timeout: float) -> Optional[SitemapReference]:
	"""Look for <link rel="sitemap" href="..."> on the website root page."""
	logger.debug("Checking HTML header for sitemap link: %s", website_url)
	try:
		body = fetch_content(session, website_url, timeout)
	except requests.RequestException as e:
		logger.warning("Error checking HTML header for sitemap at %s: %s", website_url, e)
		return None
	href = sitemap_href_from_html(body)
	if not href:
		logger.debug("No sitemap found in HTML header")
		return None
	try:
		absolute = resolve_url(website_url, href)
	except ValueError as e:
		logger.warning("Unresolvable sitemap link %r in HTML header of %s: %s", href, website_url, e)
		return None
	logger.info("Found sitemap in HTML header: %s", absolute)
	return SitemapReference(url=absolute)


def probe_common_paths(session, website_url: str, timeout: float) -> List[SitemapReference]:
	found: List[SitemapReference] = []
	logger.info("Checking %d common sitemap paths", len(COMMON_SITEMAP_PATHS))
	for path in COMMON_SITEMAP_PATHS:
		sitemap_url = resolve_url(website_url, path)
		try:
			probe_exists(session, sitemap_url, timeout)
		except requests.RequestException:
			continue
		logger.debug("Found sitemap at common path: %s", sitemap_url)
		found.append(SitemapReference(url=sitemap_url))
	logger.info("Found %d sitemaps at common paths", len(found))
	return found


def locate_sitemaps(session, website_url: str, timeout: float) -> List[SitemapReference]:
	"""Collect candidate sitemap URLs for a website.

	Order of contributions: robots.txt directives, standard /sitemap.xml, HTML
	<link rel="sitemap">, then common paths. Common paths are probed only when
	robots.txt carries no usable Sitemap: directive. The result keeps the first
	occurrence of each URL and only URLs ending in .xml, so directory-style
	candidates such as /sitemap/ are dropped.
	"""
	logger.info("Searching for all sitemaps at: %s", website_url)
	robots = fetch_robots_report(session, website_url, timeout)
	candidates = [SitemapReference(url=u) for u in robots.sitemaps]

	standard = find_standard_sitemap(session, website_url, timeout)
	if standard:
		candidates.append(standard)
	in_header = find_sitemap_in_html_header(session, website_url, timeout)
	if in_header:
		candidates.append(in_header)

	if not robots.has_directive or not robots.sitemaps:
		logger.debug("No sitemaps found in robots.txt, checking common paths")
		candidates.extend(probe_common_paths(session, website_url, timeout))

	seen = set()
	result: List[SitemapReference] = []
	for ref in candidates:
		if ref.url in seen or not ends_with_xml(ref.url):
			continue
		seen.add(ref.url)
		result.append(ref)
	logger.info("Found %d unique sitemap URLs", len(result))
	return result
