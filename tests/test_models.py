from sitemaplens.core.models import LinkEntry, LinkReport, SitemapReference, dedupe_links


def _links():
	return [
		LinkEntry(url="https://a.com/1", text="first", source="s1"),
		LinkEntry(url="https://a.com/2"),
		LinkEntry(url="https://a.com/1", text="second", lastmod="2024-01-01", source="s2"),
		LinkEntry(url="https://A.com/1"),
	]


def test_dedupe_first_occurrence_wins():
	result = dedupe_links(_links())
	assert [l.url for l in result] == ["https://a.com/1", "https://a.com/2", "https://A.com/1"]
	assert result[0].text == "first"
	assert result[0].lastmod is None
	assert result[0].source == "s1"


def test_dedupe_idempotent():
	once = dedupe_links(_links())
	assert dedupe_links(once) == once
	assert dedupe_links(_links() + _links()) == once


def test_report_envelope_uses_camel_case_and_omits_missing_fields():
	items = [LinkEntry(url="https://a.com/1", source="https://a.com/sitemap.xml")]
	report = LinkReport.build("https://a.com", items).to_dict()
	assert report == {
		"requestedUrl": "https://a.com",
		"totalCount": 1,
		"items": [{"url": "https://a.com/1", "source": "https://a.com/sitemap.xml"}],
	}


def test_report_envelope_for_sitemaps():
	report = LinkReport.build("https://a.com", [SitemapReference(url="https://a.com/sitemap.xml")]).to_dict()
	assert report["totalCount"] == 1
	assert report["items"] == [{"url": "https://a.com/sitemap.xml"}]
