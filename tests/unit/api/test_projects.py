"""Unit tests – project lookup."""
from __future__ import annotations

import pytest

from modrinth_client.api import ProjectRequest
from modrinth_client.kernel.errors import DecodeError, HttpStatusError
from modrinth_client.kernel.types.base62 import Base62Id
from modrinth_client.models import ProjectIdentifier
from modrinth_client.testing.fakes import FakeTransport

_PROJECT = {
    "id": "3D7",
    "slug": "sodium",
    "project_type": "mod",
    "team": "10",
    "title": "Sodium",
    "description": "d",
    "body": "b",
    "published": "2021-01-03T07:55:34Z",
    "updated": "2024-06-01T10:00:00Z",
    "status": "approved",
    "license": {"id": "MIT", "name": "MIT"},
    "client_side": "required",
    "server_side": "optional",
    "downloads": 5,
    "followers": 1,
    "categories": [],
    "versions": [],
}


class TestProjectRequest:
    @pytest.mark.parametrize(
        ("identifier", "path"),
        [
            (12345, "/project/3D7"),
            (Base62Id(62), "/project/10"),
            ("sodium", "/project/sodium"),
            (ProjectIdentifier(slug="a b/c"), "/project/a%20b%2Fc"),
        ],
    )
    def test_url(self, identifier: object, path: str) -> None:
        request = ProjectRequest(FakeTransport(), "https://api.test/v2")
        assert request.url_for(identifier) == f"https://api.test/v2{path}"  # type: ignore[arg-type]

    def test_execute(self, transport: FakeTransport) -> None:
        transport.reply(_PROJECT)
        project = ProjectRequest(transport).execute("sodium", token="tok")
        assert project.id == Base62Id(12345)
        assert project.team == Base62Id(62)
        assert transport.calls[0].url == "https://api.modrinth.com/v2/project/sodium"
        assert transport.calls[0].token == "tok"

    def test_not_found_propagates(self, transport: FakeTransport) -> None:
        transport.fail(HttpStatusError(404, url="u"))
        with pytest.raises(HttpStatusError):
            ProjectRequest(transport).execute("missing")

    def test_bad_body(self, transport: FakeTransport) -> None:
        transport.reply("not json")
        with pytest.raises(DecodeError):
            ProjectRequest(transport).execute("x")
