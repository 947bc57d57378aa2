# SitemapLens — Caller-facing errors
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Any, Dict, Optional


class SitemapLensError(Exception):
	"""Base error surfaced to the caller layer, with an HTTP-style status code."""

	status_code = 500

	def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict[str, Any]] = None) -> None:
		super().__init__(message)
		self.message = message
		if status_code is not None:
			self.status_code = status_code
		self.details = details or {}

	def to_dict(self) -> Dict[str, Any]:
		return {
			"error": type(self).__name__,
			"message": self.message,
			"statusCode": self.status_code,
			"details": self.details,
		}


class InvalidUrlError(SitemapLensError):
	"""The requested URL is missing or not an absolute http(s) URL."""

	status_code = 400
