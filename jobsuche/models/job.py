from pydantic import BaseModel, Field
from typing import Optional


class JobSummary(BaseModel):
    reference_number: str
    title: str
    employer: str
    location: str
    published_date: Optional[str] = None
    external_url: Optional[str] = None
    application_url: str


class JobDetail(BaseModel):
    reference_number: str
    title: str
    description: Optional[str] = None
    employer: str
    location: str
    employment_type: Optional[str] = None
    salary: Optional[str] = None
    contract_duration: Optional[str] = None
    job_type: Optional[str] = None
    first_published: Optional[str] = None
    publication_period: str = ""
    entry_period: str = ""
    only_for_disabled: Optional[bool] = None
    fulltime: Optional[bool] = None
    is_minor_employment: Optional[bool] = None
    is_temp_agency: Optional[bool] = None
    is_private_placement: Optional[bool] = None
    career_changer_suitable: Optional[bool] = None
    cipher_number: Optional[str] = None
    partner_url: Optional[str] = None
    external_url: Optional[str] = None
    application_url: str


class SearchFilters(BaseModel):
    job_title: Optional[str] = Field(default=None, description='Job title or keywords, e.g. "Software Engineer"')
    location: Optional[str] = Field(default=None, description='Location name, e.g. "Berlin" or "München"')
    radius_km: Optional[int] = Field(default=None, ge=0, description="Search radius around the location in km")
    employment_type: Optional[list[str]] = Field(
        default=None, description='Employment types: "fulltime", "parttime", "mini_job", "home_office", "shift"'
    )
    contract_type: Optional[list[str]] = Field(default=None, description='Contract types: "permanent", "temporary"')
    published_since_days: Optional[int] = Field(default=None, ge=0, le=100, description="Days since publication")
    employer: Optional[str] = Field(default=None, description="Employer name to search for")
    branch: Optional[str] = Field(default=None, description="Branch or industry to search in")


class SearchJobsParams(SearchFilters):
    page_size: Optional[int] = Field(default=None, ge=1, description="Results per page")
    page: Optional[int] = Field(default=None, ge=1, description="Page number, starting from 1")


class SearchJobsResult(BaseModel):
    total_results: Optional[int] = None
    current_page: Optional[int] = None
    page_size: Optional[int] = None
    jobs_count: int
    jobs: list[JobSummary] = []
    search_duration_ms: int


class GetJobDetailsParams(BaseModel):
    reference_number: str = Field(min_length=1, description="Job reference number (refnr from search results)")


class BatchSearchItem(SearchFilters):
    name: str = Field(description="Identifier echoed back on the matching outcome")


class BatchSearchParams(BaseModel):
    searches: list[BatchSearchItem] = Field(description="Searches to run; only the first 5 are processed")
    max_details_per_search: Optional[int] = Field(
        default=None, description="Details fetched per search (default 2, at most 5)"
    )


class BatchSearchOutcome(BaseModel):
    search_name: str
    total_results: Optional[int] = None
    jobs_count: int = 0
    jobs: list[JobDetail] = []
    error: Optional[str] = None


class BatchSearchResult(BaseModel):
    results: list[BatchSearchOutcome]
    total_searches: int
    successful_searches: int
    failed_searches: int
    total_jobs: int
    total_duration_ms: int


class ServerStatus(BaseModel):
    server_name: str
    version: str
    uptime_seconds: int
    api_url: str
    api_connection_status: str
    tools_count: int
