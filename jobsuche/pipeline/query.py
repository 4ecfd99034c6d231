# jobsuche/pipeline/query.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from jobsuche.models.job import SearchFilters, SearchJobsParams

# ---------------------------
# Controlled vocabularies
# ---------------------------
EMPLOYMENT_TYPES: dict[str, tuple[str, ...]] = {
    "vz": ("fulltime", "full", "vollzeit", "vz"),
    "tz": ("parttime", "part", "teilzeit", "tz"),
    "minijob": ("mini", "minijob", "mini_job"),
    "ho": ("home", "homeoffice", "home_office", "ho"),
    "snw": ("shift", "schicht", "snw"),
}

# befristung: 1 = temporary, 2 = permanent
CONTRACT_TYPES: dict[int, tuple[str, ...]] = {
    1: ("temporary", "befristet"),
    2: ("permanent", "unbefristet"),
}

_EMPLOYMENT_LOOKUP = {syn: code for code, syns in EMPLOYMENT_TYPES.items() for syn in syns}
_CONTRACT_LOOKUP = {syn: code for code, syns in CONTRACT_TYPES.items() for syn in syns}


def parse_employment_type(tag: str) -> Optional[str]:
    return _EMPLOYMENT_LOOKUP.get((tag or "").strip().lower())


def parse_contract_type(tag: str) -> Optional[int]:
    return _CONTRACT_LOOKUP.get((tag or "").strip().lower())


def _translate(tags: Optional[Iterable[str]], parse) -> list:
    """Map tags through a vocabulary, dropping unknown ones and duplicates."""
    out = []
    for tag in tags or []:
        code = parse(tag)
        if code is not None and code not in out:
            out.append(code)
    return out


def resolve_page_size(requested: Optional[int], default: int, maximum: int) -> int:
    return min(requested or default, maximum)


# ---------------------------
# Query parameters
# ---------------------------
@dataclass
class SearchQuery:
    """Query string for GET /pc/v4/jobs, using the API's own parameter names."""

    was: Optional[str] = None
    wo: Optional[str] = None
    umkreis: Optional[int] = None
    size: Optional[int] = None
    page: Optional[int] = None
    veroeffentlichtseit: Optional[int] = None
    arbeitszeit: list[str] = field(default_factory=list)
    befristung: list[int] = field(default_factory=list)

    def to_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        for key in ("was", "wo", "umkreis", "size", "page", "veroeffentlichtseit"):
            value = getattr(self, key)
            if value is not None:
                params.append((key, str(value)))
        params.extend(("arbeitszeit", az) for az in self.arbeitszeit)
        params.extend(("befristung", str(b)) for b in self.befristung)
        return params


def search_terms(filters: SearchFilters) -> Optional[str]:
    terms = [t for t in (filters.job_title, filters.employer, filters.branch) if t]
    return " ".join(terms) if terms else None


def build_search_query(
    filters: SearchFilters,
    *,
    page_size: int,
    page: Optional[int] = None,
) -> SearchQuery:
    return SearchQuery(
        was=search_terms(filters),
        wo=filters.location or None,
        umkreis=filters.radius_km,
        size=page_size,
        page=page,
        veroeffentlichtseit=filters.published_since_days,
        arbeitszeit=_translate(filters.employment_type, parse_employment_type),
        befristung=_translate(filters.contract_type, parse_contract_type),
    )


def build_from_params(params: SearchJobsParams, *, default_page_size: int, max_page_size: int) -> SearchQuery:
    """Query for a single caller-facing search, clamping the page size to the configured bounds."""
    size = resolve_page_size(params.page_size, default_page_size, max_page_size)
    return build_search_query(params, page_size=size, page=params.page)
