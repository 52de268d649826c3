"""Shared fixtures: LPSN pages and isolated configuration paths."""

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from lpsnapi.config.models import LPSNConfig
from lpsnapi.species.document import LPSNDocument
from lpsnapi.species.lpsn_client import LPSNClient
from lpsnapi.system.path_resolver import PathResolver

SEARCH_PAGE = """
<html>
  <body>
    <div id="search-results">
      <p>2 results for Escherichia</p>
      <a href="/genus/escherichia">Escherichia</a>
      <ul>
        <li><a href="/species/123">"Escherichia coli"</a></li>
        <li><a href="/species/124">  Escherichia fergusonii
        </a></li>
      </ul>
      <a href="/about">About LPSN</a>
    </div>
  </body>
</html>
"""

EMPTY_SEARCH_PAGE = """
<html><body><div id="search-results"><p>No results</p></div></body></html>
"""

DETAIL_PAGE = """
<html>
  <body>
    <div id="detail-page">
      <h1>Species Escherichia coli</h1>
      <p><b>Name:</b> "Escherichia coli" (Migula 1895) Castellani and Chalmers 1919</p>
      <p><b>Category:</b> Species</p>
      <p><b>Type strain:</b>   ATCC 11775; CCUG 24;
         DSM 30083</p>
      <p><a href="#strain"></a> <b>16S rRNA gene:</b> X80725 Analyse FASTA</p>
      <p><b>Etymology:</b> N.L. gen. n. coli, of the colon.</p>
      <p><b>Valid publication:</b> Skerman VBD, McGowan V, Sneath PHA. Approved Lists of
         Bacterial Names. Int J Syst Bacteriol 1980; 30:225-420.</p>
      <p><b>Original publication:</b> Castellani A, Chalmers AJ. Manual of Tropical
         Medicine, 3rd ed. 1919.</p>
      <div class="tree-arrow-open">
        <span class="open">Notes: (3)</span>
        <ul>
          <li>Valid publication: Skerman VBD, McGowan V, Sneath PHA. Approved Lists of
              Bacterial Names. Int J Syst Bacteriol 1980; 30:225-420.</li>
          <li>Emendation PUBLICATION:   Tindall BJ. Int J Syst Evol Microbiol 2008.</li>
          <li>Gender: feminine</li>
          <li>Effective publication:   </li>
        </ul>
      </div>
      <div class="tree-arrow-open">
        <span class="open">Synonyms: (3)</span>
        <table>
          <tbody>
            <tr><td><a href="/species/bacillus-coli">Bacillus coli</a></td><td>basonym</td></tr>
            <tr><td>no link in this row</td></tr>
            <tr><td><a href="/species/blank"> </a></td></tr>
            <tr>
              <td><a href="/species/bacterium-coli">Bacterium <i>coli</i> commune</a></td>
              <td><a href="/reference/1">Reference</a></td>
            </tr>
          </tbody>
        </table>
      </div>
    </div>
  </body>
</html>
"""

MINIMAL_DETAIL_PAGE = """
<html>
  <body>
    <div id="detail-page">
      <p>Name: Escherichia fergusonii Farmer et al. 1985</p>
      <p>Etymology: foo.</p>
    </div>
  </body>
</html>
"""


@pytest.fixture
def search_html() -> str:
    """Search results page with two species links."""
    return SEARCH_PAGE


@pytest.fixture
def empty_search_html() -> str:
    """Search results page without species links."""
    return EMPTY_SEARCH_PAGE


@pytest.fixture
def detail_html() -> str:
    """Fully populated detail page for Escherichia coli."""
    return DETAIL_PAGE


@pytest.fixture
def parse_page() -> Callable[[str], LPSNDocument]:
    """Parse an HTML snippet into an LPSNDocument."""
    return LPSNDocument.parse


@pytest.fixture
def detail_document() -> LPSNDocument:
    """Fully populated detail page for Escherichia coli."""
    return LPSNDocument.parse(DETAIL_PAGE)


@pytest.fixture
def path_resolver(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PathResolver:
    """Provide a PathResolver whose config and data paths live in tmp_path."""
    monkeypatch.delenv("LPSNAPI_CONFIG", raising=False)
    monkeypatch.setenv("LPSNAPI_DATA", str(tmp_path / "data"))
    return PathResolver()


@pytest.fixture
def lpsn_pages() -> dict[str, httpx.Response]:
    """Upstream responses keyed by request path."""
    return {
        "/search": httpx.Response(200, text=SEARCH_PAGE),
        "/species/123": httpx.Response(200, text=DETAIL_PAGE),
        "/species/124": httpx.Response(200, text=MINIMAL_DETAIL_PAGE),
    }


@pytest.fixture
def requested_urls() -> list[httpx.URL]:
    """Collect the URLs a mock transport has been asked for."""
    return []


@pytest.fixture
def lpsn_transport(lpsn_pages, requested_urls) -> httpx.MockTransport:
    """Serve lpsn_pages by path, 404 for anything else."""

    def handler(request: httpx.Request) -> httpx.Response:
        requested_urls.append(request.url)
        return lpsn_pages.get(request.url.path, httpx.Response(404, text="Not Found"))

    return httpx.MockTransport(handler)


@pytest.fixture
def lpsn_client(lpsn_transport) -> LPSNClient:
    """LPSNClient talking to the mock transport."""
    return LPSNClient(LPSNConfig(base_url="https://lpsn.test"), transport=lpsn_transport)
