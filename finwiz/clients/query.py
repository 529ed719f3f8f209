"""Column queries over an HTML page using BeautifulSoup CSS selectors."""
import re
from typing import Dict, List, Mapping, Sequence, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import QueryError

# "td a@href" -> ("td a", "href")
_ATTR_SUFFIX = re.compile(r"^(?P<selector>.*?)@(?P<attr>[\w:-]+)$")

ColumnSchema = Mapping[str, Union[str, Sequence[str]]]


def find_table(page: Union[str, BeautifulSoup], root_selector: str) -> Tag:
    """Return the first element matching root_selector. Raises QueryError if there is none."""
    soup = page if isinstance(page, BeautifulSoup) else BeautifulSoup(page, "html.parser")
    root = soup.select_one(root_selector)
    if root is None:
        raise QueryError(root_selector)
    return root


def _select_values(root: Tag, selector: str) -> List[str]:
    m = _ATTR_SUFFIX.match(selector.strip())
    if m:
        values = []
        for el in root.select(m.group("selector")):
            attr = el.get(m.group("attr"))
            if attr is None:
                continue
            values.append(" ".join(attr) if isinstance(attr, list) else attr)
        return values
    return [el.get_text(" ", strip=True) for el in root.select(selector)]


def select_columns(root: Tag, schema: ColumnSchema) -> Dict[str, List[str]]:
    """
    For each column run its selector(s) under root and collect one string per
    matching element, in document order. A selector ending in @attr yields the
    attribute instead of the element text; several selectors for one column are
    concatenated.
    """
    out: Dict[str, List[str]] = {}
    for name, selectors in schema.items():
        if isinstance(selectors, str):
            selectors = [selectors]
        values: List[str] = []
        for sel in selectors:
            values.extend(_select_values(root, sel))
        out[name] = values
    return out


def query_columns(
    page: Union[str, BeautifulSoup],
    root_selector: str,
    schema: ColumnSchema,
) -> Dict[str, List[str]]:
    """find_table + select_columns."""
    return select_columns(find_table(page, root_selector), schema)
