import json
from unittest import mock
from urllib.parse import parse_qs, urlparse

import pytest

from atribot import github

REPO = {
    "full_name": "someone/project",
    "description": "A thing",
    "watchers": 12,
    "forks": 3,
    "open_issues": 1,
    "language": None,
    "license": {"key": "mit"},
    "pushed_at": "2022-07-03T10:24:34Z",
    "html_url": "https://example.com/someone/project",
}


def test_notnull():
    assert github.notnull("", "None") == "None"
    assert github.notnull("Go", "None") == "Go"


def test_search_url_round_trip():
    query = "zero bot&plugin"
    url = github.search_url(query)
    parsed = urlparse(url)
    assert parsed.netloc == "api.github.com"
    assert parse_qs(parsed.query)["q"] == [query]


def test_format_repo():
    lines = github.format_repo(REPO).split("\n")
    assert lines[0] == "someone/project"
    assert lines[1] == "Description: A thing"
    assert lines[2] == "Star/Fork/Issue: 12/3/1"
    assert lines[3] == "Language: None"
    assert lines[4] == "License: MIT"
    assert lines[6] == "Jump: https://example.com/someone/project"
    assert lines[-1] == ""


def test_format_repo_without_license():
    text = github.format_repo({"full_name": "a/b"})
    assert "License: None\n" in text


@mock.patch("atribot.github.requests.get")
def test_search_returns_first_item(get):
    body = {"total_count": 2, "items": [REPO, {"full_name": "other/x"}]}
    get.return_value = mock.Mock(status_code=200, content=json.dumps(body).encode())
    assert github.search("project")["full_name"] == "someone/project"


@mock.patch("atribot.github.requests.get")
def test_search_nothing_found(get):
    get.return_value = mock.Mock(status_code=200, content=b'{"total_count": 0, "items": []}')
    with pytest.raises(LookupError):
        github.search("nothing")


@mock.patch("atribot.github.requests.get")
def test_search_http_error(get):
    get.return_value = mock.Mock(status_code=403, content=b"{}")
    with pytest.raises(RuntimeError, match="code 403"):
        github.search("x")