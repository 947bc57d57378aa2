# SitemapLens — robots.txt sitemap hints
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
import re
from typing import List, NamedTuple

import requests

from ..utils.net import fetch_text
from ..utils.urls import resolve_url


logger = logging.getLogger(__name__)

ROBOTS_TXT = "/robots.txt"
SITEMAP_MENTION = re.compile(r"sitemap", re.I)
SITEMAP_DIRECTIVE = re.compile(r"Sitemap: (.*)", re.I)


class RobotsReport(NamedTuple):
	"""What robots.txt says about sitemaps. Disallow rules are not interpreted."""

	mentions_sitemap: bool
	has_directive: bool
	sitemaps: List[str]


EMPTY_REPORT = RobotsReport(False, False, [])


def parse_robots_sitemaps(body: str) -> RobotsReport:
	sitemaps: List[str] = []
	for line in body.split("\n"):
		match = SITEMAP_DIRECTIVE.search(line)
		if match:
			value = match.group(1).strip()
			if value:
				logger.debug("Found sitemap in robots.txt: %s", value)
				sitemaps.append(value)
	return RobotsReport(
		mentions_sitemap=bool(SITEMAP_MENTION.search(body)),
		has_directive=bool(SITEMAP_DIRECTIVE.search(body)),
		sitemaps=sitemaps,
	)


def fetch_robots_report(session, website_url: str, timeout: float) -> RobotsReport:
	"""Fetch robots.txt once and report its sitemap signals.

	Any network failure yields an empty report.
	"""
	robots_url = resolve_url(website_url, ROBOTS_TXT)
	logger.debug("Checking robots.txt at %s", robots_url)
	try:
		body = fetch_text(session, robots_url, timeout)
	except requests.RequestException as e:
		logger.warning("Error reading robots.txt for %s: %s", website_url, e)
		return EMPTY_REPORT
	report = parse_robots_sitemaps(body)
	logger.info("Found %d sitemaps in robots.txt", len(report.sitemaps))
	return report
