"""Species data models returned by the LPSN scraper."""

from pydantic import BaseModel, ConfigDict, Field


class Identification(BaseModel):
    """A search match before its detail page has been fetched."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Path segment following /species/ in the result link")
    name: str = Field(..., description="Display name of the species")


class SpeciesRecord(BaseModel):
    """Normalized record for a single bacterial species."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="LPSN species identifier")
    name: str = Field(..., description="Display name of the species")
    author: str | None = Field(None, description="Naming authority of the species name")
    strain: str | None = Field(None, description="Type strain designations")
    sequence_accession_no: str | None = Field(
        None, description="16S rRNA gene sequence accession number"
    )
    etymology: str | None = Field(None, description="Etymology of the name")
    refs: list[str] = Field(default_factory=list, description="Reference publications")
    synonyms: list[str] = Field(default_factory=list, description="Synonym names")
