# tests/conftest.py

"""
Pytest Fixtures - a trimmed-down Finviz quote page and fake HTTP sessions.

SAMPLE PAGE CONTENTS:
- Snapshot: 12 label/value pairs, including both "EPS next Y" cells
- Ratings:  3 rows (upgrade, initiation without prior rating/target, downgrade)
- News:     2 days, 4 headlines
- Insider:  header row + 2 transactions
"""

import pytest
import requests


# =============================================================================
# SAMPLE HTML
# =============================================================================

SNAPSHOT_HTML = """
<table class="snapshot-table2">
  <tr>
    <td>Index</td><td><b>S&amp;P 500</b></td>
    <td>P/E</td><td><b>28.50</b></td>
    <td>EPS next Y</td><td><b>5.20</b></td>
  </tr>
  <tr>
    <td>Market Cap</td><td><b>2,100.50B</b></td>
    <td>EPS next Y</td><td><b>5.00%</b></td>
    <td>52W Range</td><td><b>10.00 - 20.00</b></td>
  </tr>
  <tr>
    <td>Volatility</td><td><b>2.10% 4.30%</b></td>
    <td>Dividend %</td><td><b>0.82%</b></td>
    <td>Optionable</td><td><b>Yes</b></td>
  </tr>
  <tr>
    <td>Avg Volume</td><td><b>850.2K</b></td>
    <td>Earnings</td><td><b>Oct 30 AMC</b></td>
    <td>Shs Outstand</td><td><b>16.41B</b></td>
  </tr>
</table>
"""

RATINGS_HTML = """
<table class="fullview-ratings-outer">
  <tr><td class="fullview-ratings-inner"><table><tr>
    <td>Jan-02-20</td><td>Upgrade</td><td>Firm X</td>
    <td>Neutral &rarr; Buy</td><td>$10.00 &rarr; $12.00</td>
  </tr></table></td></tr>
  <tr><td class="fullview-ratings-inner"><table><tr>
    <td>Dec-15-19</td><td>Initiated</td><td>Some Bank</td>
    <td>Outperform</td><td>$300</td>
  </tr></table></td></tr>
  <tr><td class="fullview-ratings-inner"><table><tr>
    <td>Nov-01-19</td><td>Downgrade</td><td>Research Co</td>
    <td>Buy &rarr; Hold</td><td>$1,250.00 &rarr; $1,100.00</td>
  </tr></table></td></tr>
</table>
"""

NEWS_HTML = """
<table class="fullview-news-outer">
  <tr>
    <td align="right" width="130">Jan-02-20 09:30PM&nbsp;&nbsp;</td>
    <td align="left"><a href="https://news.example.com/1">Company beats estimates</a></td>
  </tr>
  <tr>
    <td align="right" width="130">10:15AM&nbsp;&nbsp;</td>
    <td align="left"><a href="https://news.example.com/2">Shares move higher</a></td>
  </tr>
  <tr>
    <td align="right" width="130">Jan-01-20 11:00AM&nbsp;&nbsp;</td>
    <td align="left"><a href="https://news.example.com/3">New product announced</a></td>
  </tr>
  <tr>
    <td align="right" width="130">08:05AM&nbsp;&nbsp;</td>
    <td align="left"><a href="https://news.example.com/4">Analysts weigh in</a></td>
  </tr>
</table>
"""

INSIDER_HTML = """
<table class="body-table">
  <tr>
    <td>Insider Trading</td><td>Relationship</td><td>Date</td><td>Transaction</td>
    <td>Cost</td><td>#Shares</td><td>Value ($)</td><td>#Shares Total</td><td>SEC Form 4</td>
  </tr>
  <tr>
    <td><a href="/insidertrading.ashx?oc=1">COOK TIMOTHY D</a></td><td>Chief Executive Officer</td>
    <td>Aug 23</td><td>Sale</td><td>208.24</td><td>265,160</td><td>55,216,954</td><td>837,374</td>
    <td><a href="http://www.sec.gov/Archives/edgar/data/1">Aug 26 06:30 PM</a></td>
  </tr>
  <tr>
    <td><a href="/insidertrading.ashx?oc=2">WILLIAMS JEFFREY E</a></td><td>COO</td>
    <td>Aug 01</td><td>Option Exercise</td><td>0.00</td><td>1,000</td><td>0</td><td>45,000</td>
    <td><a href="http://www.sec.gov/Archives/edgar/data/2">Aug 02 08:15 AM</a></td>
  </tr>
</table>
"""

SAMPLE_PAGE = (
    "<html><body>"
    + SNAPSHOT_HTML
    + RATINGS_HTML
    + NEWS_HTML
    + INSIDER_HTML
    + "</body></html>"
)


# =============================================================================
# FAKE HTTP
# =============================================================================

class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for requests.Session; records every get() call."""

    def __init__(self, status_code=200, text=SAMPLE_PAGE, exc=None):
        self.status_code = status_code
        self.text = text
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return FakeResponse(self.status_code, self.text)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def sample_page():
    """Quote page with all four tables."""
    return SAMPLE_PAGE


@pytest.fixture
def empty_page():
    """Quote page for a ticker with no tables at all."""
    return "<html><body><p>No data.</p></body></html>"


@pytest.fixture
def ok_session():
    return FakeSession()


@pytest.fixture
def not_found_session():
    return FakeSession(status_code=404, text="<html>Not found</html>")


@pytest.fixture
def broken_session():
    return FakeSession(exc=requests.exceptions.ConnectionError("connection refused"))
