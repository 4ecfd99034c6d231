# jobsuche/pipeline/normalize.py
from typing import Optional

from jobsuche.models.api import ApiArbeitsort, ApiDateRange, ApiJobDetails, ApiJobListing
from jobsuche.models.job import JobDetail, JobSummary

CANONICAL_JOB_URL = "https://www.arbeitsagentur.de/jobsuche/jobdetail/{reference}"

# ---------------------
# Rendering helpers
# ---------------------
def render_location(town: Optional[str], postal_code: Optional[str]) -> str:
    """
    "Berlin (10115)", "Berlin", "(10115)" or "" depending on what is known.
    """
    suffix = f" ({postal_code})" if postal_code else ""
    return f"{town or ''}{suffix}".strip()

def render_date_range(period: Optional[ApiDateRange]) -> str:
    if period is None:
        return ""
    if period.von and period.bis:
        return f"{period.von} - {period.bis}"
    if period.von:
        return f"ab {period.von}"
    if period.bis:
        return f"bis {period.bis}"
    return ""

def canonical_job_url(reference: str) -> str:
    return CANONICAL_JOB_URL.format(reference=reference)

def application_url(reference: str, external_url: Optional[str], partner_url: Optional[str] = None) -> str:
    # employer link first, then the partner portal, then the public listing page
    return external_url or partner_url or canonical_job_url(reference)

# ---------------------
# Record mapping
# ---------------------
def to_summary(job: ApiJobListing) -> JobSummary:
    reference = job.refnr or ""
    place = job.arbeitsort or ApiArbeitsort()
    return JobSummary(
        reference_number=reference,
        title=job.titel or job.beruf or "",
        employer=job.arbeitgeber or "",
        location=render_location(place.ort, place.plz),
        published_date=job.aktuelle_veroeffentlichungsdatum,
        external_url=job.externe_url,
        application_url=application_url(reference, job.externe_url),
    )

def _detail_location(details: ApiJobDetails) -> str:
    # only the first workplace is rendered
    for place in details.arbeitsorte[:1]:
        if place.adresse is not None:
            return render_location(place.adresse.ort, place.adresse.plz)
    return ""

def _employment_type(fulltime: Optional[bool]) -> Optional[str]:
    if fulltime is None:
        return None
    return "Vollzeit" if fulltime else "Teilzeit"

def to_detail(reference: str, details: ApiJobDetails) -> JobDetail:
    """
    Map a jobdetails document onto the stable detail record.
    The reference is passed in because the detail document does not repeat it.
    """
    return JobDetail(
        reference_number=reference,
        title=details.titel or "",
        description=details.stellenbeschreibung,
        employer=details.arbeitgeber or "",
        location=_detail_location(details),
        employment_type=_employment_type(details.arbeitszeit_vollzeit),
        salary=details.verguetung,
        contract_duration=details.vertragsdauer,
        job_type=details.stellenangebots_art,
        first_published=details.erste_veroeffentlichungsdatum,
        publication_period=render_date_range(details.veroeffentlichungszeitraum),
        entry_period=render_date_range(details.eintrittszeitraum),
        only_for_disabled=details.nur_fuer_schwerbehinderte,
        fulltime=details.arbeitszeit_vollzeit,
        is_minor_employment=details.ist_geringfuegige_beschaeftigung,
        is_temp_agency=details.ist_arbeitnehmer_ueberlassung,
        is_private_placement=details.ist_private_arbeitsvermittlung,
        career_changer_suitable=details.quereinstieg_geeignet,
        cipher_number=details.chiffrenummer,
        partner_url=details.allianzpartner_url,
        external_url=details.externe_url,
        application_url=application_url(reference, details.externe_url, details.allianzpartner_url),
    )
