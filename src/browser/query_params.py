"""Read/write access to the current page's URL query string.

The controller never reaches into the browsing context directly; it is
handed one of these accessors. Streamlit pages use StreamlitQueryParams,
tests and the CLI use InMemoryQueryParams.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol
from urllib.parse import parse_qs, urlencode, urlsplit

import streamlit as st


class QueryParamsAccessor(Protocol):
    """Minimal interface the controller needs for URL persistence."""

    def to_dict(self) -> Dict[str, Any]:
        ...

    def replace(self, params: Mapping[str, str]) -> None:
        ...


def parse_query_string(query: str) -> Dict[str, List[str]]:
    """
    Parse a query string or relative URL into a parameter mapping.

    Accepts ``"?page=2"``, ``"page=2"`` and ``"/?page=2"`` alike.
    """
    if "?" in query or query.startswith("/"):
        query = urlsplit(query).query
    return parse_qs(query, keep_blank_values=True)


class InMemoryQueryParams:
    """
    Query parameters held in memory.

    Every write is appended to ``history`` as a canonical relative URL so
    tests can assert on the sequence of URLs the controller produced.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None, path: str = "/"):
        self.path = path
        self._params: Dict[str, Any] = dict(initial or {})
        self.history: List[str] = []

    @classmethod
    def from_query_string(cls, query: str, path: str = "/") -> "InMemoryQueryParams":
        return cls(parse_query_string(query), path=path)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._params)

    def replace(self, params: Mapping[str, str]) -> None:
        self._params = dict(params)
        self.history.append(self.url)

    @property
    def url(self) -> str:
        if not self._params:
            return self.path
        return f"{self.path}?{urlencode(self._params, doseq=True)}"


class StreamlitQueryParams:
    """Query parameters backed by ``st.query_params``.

    Writing updates the browser URL in place; it does not reload the page.
    """

    def to_dict(self) -> Dict[str, Any]:
        # Every value of a repeated key, so the first one wins as in memory
        return {key: st.query_params.get_all(key) for key in st.query_params}

    def replace(self, params: Mapping[str, str]) -> None:
        if params:
            st.query_params.from_dict(dict(params))
        else:
            st.query_params.clear()
