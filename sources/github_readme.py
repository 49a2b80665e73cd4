"""
Remote directory document: the README.adoc served raw from GitHub.
"""
from __future__ import annotations

import logging
from typing import Optional

import requests

from config.settings import Settings, get_settings
from sources.base import FetchError
from sources.registry import register


class GitHubReadmeSource:
    """Fetches the directory document over HTTP. No retries; callers decide."""

    source_name = "github_readme"

    def __init__(self, url: Optional[str] = None, timeout: Optional[int] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.url = url or self.settings.source_url
        self.timeout = timeout if timeout is not None else self.settings.request_timeout_seconds

    def fetch_document(self) -> str:
        logging.info(f"Fetching directory document from {self.url}")
        try:
            response = requests.get(
                self.url,
                headers={"User-Agent": self.settings.user_agent},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logging.error(f"Request error while fetching {self.url}: {e}")
            raise FetchError(f"Failed to fetch data: {e}", source=self.url) from e

        if not response.ok:
            logging.error(f"Fetch failed with status {response.status_code}: {response.reason}")
            raise FetchError(
                f"Failed to fetch data: {response.status_code} {response.reason}",
                source=self.url,
                status_code=response.status_code,
            )
        # Document is UTF-8 regardless of the served charset
        response.encoding = "utf-8"
        return response.text


def _register():
    register(GitHubReadmeSource.source_name, GitHubReadmeSource)


_register()
