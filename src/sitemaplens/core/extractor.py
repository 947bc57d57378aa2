# SitemapLens — Link extraction service (locate, extract, scrape, dedupe)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import functools
import logging
from typing import List, Optional

from .locator import locate_sitemaps
from .models import LinkEntry, SitemapReference, dedupe_links
from .page import scrape_page_links
from .sitemap import SitemapExtractor
from ..config import Settings
from ..errors import SitemapLensError
from ..utils.net import build_session
from ..utils.urls import validate_url


logger = logging.getLogger(__name__)


def reports_failures(message: str):
	"""Re-raise unexpected errors of a public operation as SitemapLensError(500)."""

	def decorator(fn):
		@functools.wraps(fn)
		def wrapper(self, url: str):
			try:
				return fn(self, url)
			except SitemapLensError:
				raise
			except Exception as e:
				logger.exception("%s for %s", message, url)
				raise SitemapLensError(f"{message}: {e}", details={"url": url}) from e

		return wrapper

	return decorator


class LinkExtractor:
	"""Entry point for the caller layer.

	Each public operation validates its URL (raising InvalidUrlError) and
	otherwise absorbs network and parse failures into empty results. Anything
	else that escapes is re-raised as SitemapLensError.
	"""

	def __init__(self, cfg: Optional[Settings] = None, session=None) -> None:
		self.cfg = cfg or Settings()
		self.session = session or build_session(
			user_agent=self.cfg.user_agent, retries=self.cfg.retries, backoff=self.cfg.backoff
		)
		self.sitemaps = SitemapExtractor(self.session, self.cfg.timeout, max_depth=self.cfg.max_sitemap_depth)

	@reports_failures("Failed to find sitemaps")
	def find_all_sitemaps(self, website_url: str) -> List[SitemapReference]:
		website_url = validate_url(website_url)
		return locate_sitemaps(self.session, website_url, self.cfg.timeout)

	@reports_failures("Failed to extract links")
	def extract_links_from_sitemap(self, sitemap_url: str) -> List[LinkEntry]:
		sitemap_url = validate_url(sitemap_url)
		return self.sitemaps.extract(sitemap_url)

	@reports_failures("Failed to extract links")
	def extract_links_from_page(self, page_url: str) -> List[LinkEntry]:
		page_url = validate_url(page_url)
		return scrape_page_links(self.session, page_url, self.cfg.timeout)

	@reports_failures("Failed to extract links")
	def extract_all_links(self, website_url: str) -> List[LinkEntry]:
		"""Links from every located sitemap, or from the homepage when there is none.

		The two sources are never mixed. Duplicates are removed by exact url, first one wins.
		"""
		website_url = validate_url(website_url)
		logger.info("Extracting all links from website: %s", website_url)
		sitemap_refs = locate_sitemaps(self.session, website_url, self.cfg.timeout)
		all_links: List[LinkEntry] = []
		if sitemap_refs:
			logger.info("Found %d sitemaps, extracting links from each", len(sitemap_refs))
			for ref in sitemap_refs:
				logger.debug("Processing sitemap: %s", ref.url)
				all_links.extend(self.sitemaps.extract(ref.url))
		else:
			logger.warning("No sitemaps found for %s, falling back to homepage extraction", website_url)
			all_links.extend(scrape_page_links(self.session, website_url, self.cfg.timeout))

		result = dedupe_links(all_links)
		logger.info("Extracted %d unique links in total", len(result))
		return result

	def close(self) -> None:
		self.session.close()

	def __enter__(self) -> "LinkExtractor":
		return self

	def __exit__(self, *exc) -> None:
		self.close()
