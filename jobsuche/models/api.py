"""Wire models for the Bundesagentur für Arbeit jobsuche API.

The upstream schema is open: fields appear, disappear and gain siblings over
time. Every field is optional and unknown keys are dropped, so only a body
that is not a JSON object at all (or has the wrong shape for a known field)
fails to decode.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ApiArbeitsort(_ApiModel):
    ort: Optional[str] = None
    plz: Optional[str] = None
    region: Optional[str] = None
    land: Optional[str] = None


class ApiJobListing(_ApiModel):
    beruf: Optional[str] = None
    titel: Optional[str] = None
    refnr: Optional[str] = None
    arbeitgeber: Optional[str] = None
    arbeitsort: ApiArbeitsort = Field(default_factory=ApiArbeitsort)
    aktuelle_veroeffentlichungsdatum: Optional[str] = Field(default=None, alias="aktuelleVeroeffentlichungsdatum")
    externe_url: Optional[str] = Field(default=None, alias="externeUrl")

    @field_validator("arbeitsort", mode="before")
    @classmethod
    def _null_arbeitsort(cls, v):
        return {} if v is None else v


class ApiSearchResponse(_ApiModel):
    stellenangebote: list[ApiJobListing] = Field(default_factory=list)
    max_ergebnisse: Optional[int] = Field(default=None, alias="maxErgebnisse")
    page: Optional[int] = None
    size: Optional[int] = None

    @field_validator("stellenangebote", mode="before")
    @classmethod
    def _null_results(cls, v):
        return [] if v is None else v


class ApiAddress(_ApiModel):
    ort: Optional[str] = None
    plz: Optional[str] = None
    strasse: Optional[str] = None
    region: Optional[str] = None
    land: Optional[str] = None


class ApiJobLocation(_ApiModel):
    adresse: Optional[ApiAddress] = None


class ApiDateRange(_ApiModel):
    von: Optional[str] = None
    bis: Optional[str] = None


class ApiJobDetails(_ApiModel):
    titel: Optional[str] = None
    stellenbeschreibung: Optional[str] = None
    arbeitgeber: Optional[str] = None
    arbeitsorte: list[ApiJobLocation] = Field(default_factory=list)
    arbeitszeit_vollzeit: Optional[bool] = Field(default=None, alias="arbeitszeitVollzeit")
    verguetung: Optional[str] = None
    vertragsdauer: Optional[str] = None
    stellenangebots_art: Optional[str] = Field(default=None, alias="stellenangebotsArt")
    erste_veroeffentlichungsdatum: Optional[str] = Field(default=None, alias="ersteVeroeffentlichungsdatum")
    nur_fuer_schwerbehinderte: Optional[bool] = Field(default=None, alias="nurFuerSchwerbehinderte")
    eintrittszeitraum: Optional[ApiDateRange] = None
    veroeffentlichungszeitraum: Optional[ApiDateRange] = None
    ist_geringfuegige_beschaeftigung: Optional[bool] = Field(default=None, alias="istGeringfuegigeBeschaeftigung")
    ist_arbeitnehmer_ueberlassung: Optional[bool] = Field(default=None, alias="istArbeitnehmerUeberlassung")
    ist_private_arbeitsvermittlung: Optional[bool] = Field(default=None, alias="istPrivateArbeitsvermittlung")
    quereinstieg_geeignet: Optional[bool] = Field(default=None, alias="quereinstiegGeeignet")
    chiffrenummer: Optional[str] = None
    allianzpartner_url: Optional[str] = Field(default=None, alias="allianzpartnerUrl")
    externe_url: Optional[str] = Field(default=None, alias="externeUrl")

    @field_validator("arbeitsorte", mode="before")
    @classmethod
    def _null_locations(cls, v):
        return [] if v is None else v
