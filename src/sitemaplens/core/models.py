# SitemapLens — Data model: sitemap references, link entries, report envelope
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class SitemapReference(BaseModel):
	"""A located sitemap that has not been fetched yet."""

	model_config = ConfigDict(frozen=True)

	url: str


class LinkEntry(BaseModel):
	"""One discovered destination URL. `url` is the identity key; `source` is provenance only."""

	model_config = ConfigDict(frozen=True)

	url: str
	text: Optional[str] = None
	source: Optional[str] = None
	lastmod: Optional[str] = None
	priority: Optional[str] = None
	changefreq: Optional[str] = None


class LinkReport(BaseModel):
	"""Caller-facing envelope: {requestedUrl, totalCount, items}."""

	model_config = ConfigDict(frozen=True, populate_by_name=True)

	requested_url: str = Field(alias="requestedUrl")
	total_count: int = Field(alias="totalCount")
	items: List[Union[LinkEntry, SitemapReference]] = Field(default_factory=list)

	@classmethod
	def build(cls, requested_url: str, items: Sequence[Union[LinkEntry, SitemapReference]]) -> "LinkReport":
		return cls(requested_url=requested_url, total_count=len(items), items=list(items))

	def to_dict(self) -> Dict[str, Any]:
		return self.model_dump(by_alias=True, exclude_none=True)


def dedupe_links(links: Iterable[LinkEntry]) -> List[LinkEntry]:
	"""Keep the first entry for each exact url string, preserving order."""
	unique: Dict[str, LinkEntry] = {}
	for link in links:
		if link.url not in unique:
			unique[link.url] = link
	return list(unique.values())
