import sys
from pathlib import Path

import pytest
import requests
from requests.structures import CaseInsensitiveDict

# Make the package importable without installing it
ROOT = Path(__file__).resolve().parent.parent
if ROOT.as_posix() not in sys.path:
    sys.path.insert(0, ROOT.as_posix())


class FakeResponse:
    """Just enough of requests.Response for the catalog client."""

    def __init__(self, text="", status_code=200, headers=None, content=b""):
        self.text = text
        self.status_code = status_code
        self.headers = CaseInsensitiveDict(headers or {})
        self.content = content
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.closed = True

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i : i + chunk_size]


def make_row(cells, name_href="/crackme/abc", author_link=True):
    """Build a result-table <tr>; the first two cells get links like the real site."""
    tds = []
    for i, cell in enumerate(cells):
        if i == 0 and name_href is not None:
            cell = f'<a href="{name_href}">{cell}</a>'
        elif i == 1 and author_link:
            cell = f'<a href="/user/{cell}">{cell}</a>'
        tds.append(f"<td>{cell}</td>")
    return "<tr>" + "".join(tds) + "</tr>"


def make_page(*rows):
    return (
        "<html><body><table><thead><tr><th>Name</th></tr></thead>"
        '<tbody id="content-list">' + "".join(rows) + "</tbody></table></body></html>"
    )


SEARCH_PAGE = """
<html><body>
<form method="post" action="/search">
  <input type="text" name="name" id="name">
  <input type="hidden" name="token" id="token" value="tok-xyz">
</form>
</body></html>
"""

GOOD_CELLS = ["Foo", "Bar", "C/C++", "x86-64", "3.5", "4.0", "Windows", "2020-01-01", "2"]


@pytest.fixture
def search_page():
    return FakeResponse(text=SEARCH_PAGE, headers={"Set-Cookie": "gosess=abc123; Path=/"})


@pytest.fixture
def good_cells():
    return list(GOOD_CELLS)
