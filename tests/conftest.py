import pytest
import requests


class FakeResponse:
	def __init__(self, url, body="", status_code=200):
		self.url = url
		self.status_code = status_code
		if isinstance(body, bytes):
			self.content = body
			# requests decodes text/* without a charset as ISO-8859-1
			self.text = body.decode("iso-8859-1")
		else:
			self.content = body.encode("utf-8")
			self.text = body

	def raise_for_status(self):
		if self.status_code >= 400:
			raise requests.HTTPError(f"{self.status_code} for {self.url}", response=self)


class FakeSession:
	"""In-memory stand-in for requests.Session.

	pages maps url -> body (str, or bytes for raw encodings), (status, body) tuple,
	or an exception to raise.
	HEAD succeeds for any url in pages or in heads.
	"""

	def __init__(self, pages=None, heads=()):
		self.pages = dict(pages or {})
		self.heads = set(heads)
		self.calls = []
		self.headers = {"User-Agent": "test"}

	def _respond(self, url, body):
		if isinstance(body, Exception):
			raise body
		if isinstance(body, tuple):
			status, text = body
			return FakeResponse(url, text, status)
		return FakeResponse(url, body)

	def get(self, url, timeout=None):
		self.calls.append(("GET", url))
		if url not in self.pages:
			return FakeResponse(url, "not found", 404)
		return self._respond(url, self.pages[url])

	def head(self, url, allow_redirects=False, timeout=None):
		self.calls.append(("HEAD", url))
		if url in self.heads:
			return FakeResponse(url)
		if url in self.pages:
			resp = self._respond(url, self.pages[url])
			resp.text, resp.content = "", b""
			return resp
		return FakeResponse(url, "", 404)

	def close(self):
		pass

	def requested(self, method):
		return [u for (m, u) in self.calls if m == method]


@pytest.fixture
def make_session():
	return FakeSession
