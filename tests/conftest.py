"""Pytest fixtures for the tokenmap tests."""

import pytest
import requests


GUID_CLASS = "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4"
WEBFLOW_ID = "w-node-abcdefab-cdef-abcd-efab-cdefabcdef01-a1b2c3"


@pytest.fixture
def sample_html():
    """HTML with a mix of generated and authored tokens."""
    return (
        '<html><body>\n'
        f'<div class="btn-primary {GUID_CLASS}" id="{WEBFLOW_ID}">\n'
        '  <a href="#' + WEBFLOW_ID + '">jump</a>\n'
        '  <a href="#footer">footer</a>\n'
        "  <span class='Xy9_kLmN0pQr fa-HomeIconLarge'>x</span>\n"
        '  <svg><use xlink:href="#SvgSpriteIcon_88af1"></use></svg>\n'
        '</div>\n'
        '<footer id="footer"></footer>\n'
        '<i id="SvgSpriteIcon_88af1"></i>\n'
        '</body></html>\n'
    )


@pytest.fixture
def sample_css():
    """CSS referencing the same tokens plus things that must not be touched."""
    return (
        f".{GUID_CLASS} {{ margin: 1.5em; color: #FFFFFF; }}\n"
        ".btn-primary { padding: .5rem; }\n"
        ".Xy9_kLmN0pQr > .fa-HomeIconLarge { width: 10px; }\n"
        f"#{WEBFLOW_ID} {{ grid-area: 1 / 1 / 2 / 2; }}\n"
        "#footer { background: url(./img/bg.png); }\n"
    )


class FakeResponse:
    def __init__(self, content=b"", status=200):
        self.content = content
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, responses=None, errors=None):
        self.responses = responses or {}
        self.errors = errors or {}
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        if url in self.errors:
            raise self.errors[url]
        if url in self.responses:
            return self.responses[url]
        return FakeResponse(b"// " + url.encode("utf-8"))

    def close(self):
        pass


@pytest.fixture
def fake_session():
    return FakeSession()
