"""Shared fixtures: canned GitHub GraphQL payloads."""

import os
import sys
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


def make_response(status_code=200, payload=None, reason="OK"):
    """Build a stand-in for requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    resp.json.return_value = payload
    return resp


@pytest.fixture
def example_payload():
    """One repository "example" with two issues (one labelled bug) and one PR by alice."""
    return {
        "data": {
            "organization": {
                "repositories": {
                    "nodes": [
                        {
                            "name": "example",
                            "url": "https://github.com/mage-os/example",
                            "updatedAt": "2024-03-02T10:00:00Z",
                            "issues": {
                                "totalCount": 2,
                                "nodes": [
                                    {
                                        "title": "Crash on checkout",
                                        "url": "https://github.com/mage-os/example/issues/2",
                                        "createdAt": "2024-02-01T08:30:00Z",
                                        "updatedAt": "2024-03-01T12:00:00Z",
                                        "labels": {"nodes": [{"name": "bug", "color": "d73a4a"}]},
                                    },
                                    {
                                        "title": "Document setup",
                                        "url": "https://github.com/mage-os/example/issues/1",
                                        "createdAt": "2024-01-15T09:00:00Z",
                                        "updatedAt": "2024-01-20T09:00:00Z",
                                        "labels": {"nodes": []},
                                    },
                                ],
                            },
                            "pullRequests": {
                                "totalCount": 1,
                                "nodes": [
                                    {
                                        "title": "Fix checkout crash",
                                        "url": "https://github.com/mage-os/example/pull/3",
                                        "createdAt": "2024-03-01T13:00:00Z",
                                        "updatedAt": "2024-03-02T10:00:00Z",
                                        "author": {"login": "alice"},
                                    }
                                ],
                            },
                        }
                    ]
                }
            }
        }
    }
