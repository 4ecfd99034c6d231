from jobsuche.models.api import ApiDateRange, ApiJobDetails, ApiJobListing, ApiSearchResponse
from jobsuche.pipeline.normalize import (
    application_url,
    render_date_range,
    render_location,
    to_detail,
    to_summary,
)

from conftest import details, listing


def test_title_prefers_display_title():
    job = ApiJobListing.model_validate(listing("1", titel="Backend Dev"))
    assert to_summary(job).title == "Backend Dev"


def test_title_falls_back_to_occupation():
    raw = listing("1")
    del raw["titel"]
    assert to_summary(ApiJobListing.model_validate(raw)).title == "Softwareentwickler/in"


def test_title_empty_when_both_missing():
    raw = listing("1")
    del raw["titel"], raw["beruf"]
    assert to_summary(ApiJobListing.model_validate(raw)).title == ""


def test_summary_application_url_fallbacks():
    with_url = ApiJobListing.model_validate(listing("1", externeUrl="https://acme.example/jobs/1"))
    assert to_summary(with_url).application_url == "https://acme.example/jobs/1"

    without = to_summary(ApiJobListing.model_validate(listing("10001-123-S")))
    assert without.external_url is None
    assert without.application_url == "https://www.arbeitsagentur.de/jobsuche/jobdetail/10001-123-S"


def test_detail_application_url_fallbacks():
    partner = ApiJobDetails.model_validate(details(allianzpartnerUrl="https://partner.example/1"))
    assert to_detail("R1", partner).application_url == "https://partner.example/1"

    both = ApiJobDetails.model_validate(
        details(allianzpartnerUrl="https://partner.example/1", externeUrl="https://acme.example/1")
    )
    assert to_detail("R1", both).application_url == "https://acme.example/1"

    neither = ApiJobDetails.model_validate(details())
    assert to_detail("R1", neither).application_url == "https://www.arbeitsagentur.de/jobsuche/jobdetail/R1"


def test_application_url_ignores_empty_strings():
    assert application_url("R1", "", "") == "https://www.arbeitsagentur.de/jobsuche/jobdetail/R1"


def test_render_date_range():
    assert render_date_range(ApiDateRange(von="2024-01-01", bis="2024-06-01")) == "2024-01-01 - 2024-06-01"
    assert render_date_range(ApiDateRange(von="2024-01-01")) == "ab 2024-01-01"
    assert render_date_range(ApiDateRange(bis="2024-06-01")) == "bis 2024-06-01"
    assert render_date_range(ApiDateRange()) == ""
    assert render_date_range(None) == ""


def test_render_location():
    assert render_location("Berlin", "10115") == "Berlin (10115)"
    assert render_location("Berlin", None) == "Berlin"
    assert render_location(None, "10115") == "(10115)"
    assert render_location(None, None) == ""


def test_summary_with_missing_location():
    raw = listing("1")
    raw["arbeitsort"] = None
    assert to_summary(ApiJobListing.model_validate(raw)).location == ""


def test_unknown_fields_do_not_change_output():
    plain = listing("1")
    noisy = listing("1", neuesFeld={"x": 1}, arbeitsort={**plain["arbeitsort"], "koordinaten": {"lat": 52.5}})
    assert to_summary(ApiJobListing.model_validate(noisy)) == to_summary(ApiJobListing.model_validate(plain))


def test_missing_results_list_is_empty():
    assert ApiSearchResponse.model_validate({"maxErgebnisse": 0}).stellenangebote == []
    assert ApiSearchResponse.model_validate({"stellenangebote": None}).stellenangebote == []


def test_detail_mapping():
    doc = ApiJobDetails.model_validate(
        details(
            verguetung="nach Vereinbarung",
            vertragsdauer="unbefristet",
            stellenangebotsArt="ARBEIT",
            ersteVeroeffentlichungsdatum="2024-05-01",
            nurFuerSchwerbehinderte=False,
            istGeringfuegigeBeschaeftigung=False,
            istArbeitnehmerUeberlassung=True,
            istPrivateArbeitsvermittlung=False,
            quereinstiegGeeignet=True,
            veroeffentlichungszeitraum={"von": "2024-05-01", "bis": "2024-07-01"},
            chiffrenummer="C-42",
        )
    )
    d = to_detail("R1", doc)
    assert d.reference_number == "R1"
    assert d.location == "Berlin (10115)"
    assert d.employment_type == "Vollzeit"
    assert d.fulltime is True
    assert d.entry_period == "ab 2024-06-01"
    assert d.publication_period == "2024-05-01 - 2024-07-01"
    assert d.is_temp_agency is True
    assert d.career_changer_suitable is True
    assert d.cipher_number == "C-42"
    assert d.salary == "nach Vereinbarung"


def test_detail_with_empty_document():
    d = to_detail("R1", ApiJobDetails.model_validate({}))
    assert d.title == ""
    assert d.location == ""
    assert d.entry_period == ""
    assert d.employment_type is None
    assert d.application_url.endswith("/R1")


def test_detail_parttime_and_first_address_only():
    doc = ApiJobDetails.model_validate(
        details(
            arbeitszeitVollzeit=False,
            arbeitsorte=[{"adresse": {"ort": "Hamburg"}}, {"adresse": {"ort": "Berlin", "plz": "10115"}}],
        )
    )
    d = to_detail("R1", doc)
    assert d.employment_type == "Teilzeit"
    assert d.location == "Hamburg"
