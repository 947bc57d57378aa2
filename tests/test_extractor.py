import pytest

from sitemaplens.config import Settings
from sitemaplens.core.extractor import LinkExtractor
from sitemaplens.core.page import scrape_page_links
from sitemaplens.errors import InvalidUrlError, SitemapLensError


HOME = '<html><body><a href="/a">A</a><a href="/b">B</a><a href="/a">A again</a><a href="#top">Top</a></body></html>'


def _extractor(session):
	return LinkExtractor(Settings(timeout=5), session=session)


def test_fallback_to_homepage_when_no_sitemap(make_session):
	session = make_session({"https://a.com": HOME})
	links = _extractor(session).extract_all_links("https://a.com")
	expected = scrape_page_links(make_session({"https://a.com": HOME}), "https://a.com", timeout=5)
	assert links == [expected[0], expected[1]]
	assert [l.url for l in links] == ["https://a.com/a", "https://a.com/b"]
	assert links[0].text == "A"


def test_sitemap_results_are_not_mixed_with_homepage(make_session):
	session = make_session({
		"https://a.com/robots.txt": "Sitemap: https://a.com/s1.xml\nSitemap: https://a.com/s2.xml\n",
		"https://a.com": HOME,
		"https://a.com/s1.xml": "<urlset><url><loc>https://a.com/x</loc><lastmod>2024-01-01</lastmod></url></urlset>",
		"https://a.com/s2.xml": "<urlset><url><loc>https://a.com/x</loc><lastmod>2025-05-05</lastmod></url><url><loc>https://a.com/y</loc></url></urlset>",
	})
	links = _extractor(session).extract_all_links("https://a.com")
	assert [l.url for l in links] == ["https://a.com/x", "https://a.com/y"]
	assert links[0].lastmod == "2024-01-01"
	assert links[0].source == "https://a.com/s1.xml"


def test_public_operations(make_session):
	session = make_session(
		{"https://a.com/s.xml": "<urlset><url><loc>https://a.com/1</loc></url></urlset>", "https://a.com/p": HOME},
		heads={"https://a.com/sitemap.xml"},
	)
	extractor = _extractor(session)
	assert [r.url for r in extractor.find_all_sitemaps("https://a.com")] == ["https://a.com/sitemap.xml"]
	assert [l.url for l in extractor.extract_links_from_sitemap(" https://a.com/s.xml ")] == ["https://a.com/1"]
	assert len(extractor.extract_links_from_page("https://a.com/p")) == 3


@pytest.mark.parametrize("method", ["find_all_sitemaps", "extract_links_from_sitemap", "extract_all_links", "extract_links_from_page"])
def test_invalid_url_propagates(make_session, method):
	session = make_session()
	with pytest.raises(InvalidUrlError):
		getattr(_extractor(session), method)("a.com")
	assert session.calls == []


def test_broken_href_on_homepage_does_not_abort(make_session):
	session = make_session({"https://a.com": '<a href="/ok">ok</a><a href="http://[broken/">bad</a>'})
	links = _extractor(session).extract_all_links("https://a.com")
	assert [l.url for l in links] == ["https://a.com/ok"]


def test_transport_failure_is_reported_as_service_error(make_session):
	session = make_session({"https://a.com/robots.txt": RuntimeError("transport broken")})
	with pytest.raises(SitemapLensError) as exc:
		_extractor(session).extract_all_links("https://a.com")
	assert exc.value.status_code == 500
	assert exc.value.message == "Failed to extract links: transport broken"
	assert isinstance(exc.value.__cause__, RuntimeError)
