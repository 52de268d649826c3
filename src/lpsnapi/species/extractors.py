"""Field extraction from LPSN search and species detail pages.

LPSN renders species details as loosely structured HTML: most values live in
``<p>`` blocks of the form ``Label: value`` inside ``#detail-page``, while
notes and synonyms are nested inside collapsible tree sections. The helpers
in this module turn those blocks into typed values. Structural absence is
never an error: missing labels yield ``None`` and missing sections yield an
empty list.
"""

import re

from lpsnapi.species.document import LPSNDocument
from lpsnapi.species.models import Identification, SpeciesRecord

SPECIES_PATH_PREFIX = "/species/"
PUBLICATION_MARKER = "publication:"
NOTES_HEADER = "notes:"
SYNONYMS_HEADER = "synonyms:"

_EMPTY_ANCHOR_RE = re.compile(r"<a[^>]*></a>\s*")
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Strip embedded markup, collapse whitespace runs and trim."""
    text = _EMPTY_ANCHOR_RE.sub("", text, count=1)
    text = _TAG_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def dedupe(values: list[str]) -> list[str]:
    """Remove exact duplicates keeping the first occurrence."""
    return list(dict.fromkeys(values))


def extract_field(document: LPSNDocument, label: str) -> str | None:
    """Extract the value of a labelled paragraph on a detail page.

    The first paragraph whose text contains ``"<label>:"`` (case-insensitive)
    wins. Matching is substring based, so a label contained in another
    label's text can match the wrong paragraph.

    Args:
        document: Parsed species detail page
        label: Label name without the trailing colon, e.g. ``"type strain"``

    Returns:
        The trimmed text following the label, or None if no paragraph matches
    """
    page = document.detail_page()
    if page is None:
        return None

    marker = f"{label.lower()}:"
    for paragraph in document.find_by_tag(page, "p"):
        text = normalize_text(paragraph.get_text())
        if marker in text.lower():
            prefix = re.compile(re.escape(f"{label}:"), re.IGNORECASE)
            return prefix.sub("", text, count=1).strip()
    return None


def derive_author(document: LPSNDocument, name: str) -> str | None:
    """Derive the naming authority from the ``name`` field.

    The field reads e.g. ``"Escherichia coli" (Migula 1895) Castellani and
    Chalmers 1919``; removing the display name (optionally quoted) leaves
    the authority.
    """
    value = extract_field(document, "name")
    if value is None:
        return None
    quoted_name = re.compile(f'"?{re.escape(name)}"?')
    return quoted_name.sub("", value, count=1).strip()


def _text_after_marker(text: str, marker: str) -> str | None:
    match = re.search(re.escape(marker), text, re.IGNORECASE)
    if match is None:
        return None
    return text[match.end() :].strip()


def extract_refs(document: LPSNDocument) -> list[str]:
    """Extract publication references listed in the "Notes" tree section."""
    section = document.tree_section(NOTES_HEADER)
    if section is None:
        return []

    refs = []
    for item in document.find_by_tag(section, "li"):
        note = _WHITESPACE_RE.sub(" ", item.get_text())
        ref = _text_after_marker(note, PUBLICATION_MARKER)
        if ref:
            refs.append(ref)
    return refs


def collect_refs(document: LPSNDocument) -> list[str]:
    """Combine the publication fields and the notes references, deduplicated."""
    publications = [
        extract_field(document, "valid publication"),
        extract_field(document, "original publication"),
    ]
    return dedupe([p for p in publications if p] + extract_refs(document))


def extract_synonyms(document: LPSNDocument) -> list[str]:
    """Extract synonym names from the "Synonyms" tree section.

    Each table row contributes the text of its first link. Rows without a
    link, or whose link text is empty, are skipped.
    """
    section = document.tree_section(SYNONYMS_HEADER)
    if section is None:
        return []

    # html.parser keeps tables as written, so tbody may be missing
    tables = document.find_by_tag(section, "tbody") or document.find_by_tag(section, "table")
    if not tables:
        return []

    synonyms = []
    for row in document.find_by_tag(tables[0], "tr"):
        links = document.find_by_tag(row, "a")
        if not links:
            continue
        synonym = _TAG_RE.sub("", links[0].get_text()).strip()
        if synonym:
            synonyms.append(synonym)
    return synonyms


def extract_sequence_accession(document: LPSNDocument) -> str | None:
    """Return the accession number from the ``16S rRNA gene`` field."""
    value = extract_field(document, "16S rRNA gene")
    if value is None:
        return None
    return value.split(" ")[0]


def extract_identifications(document: LPSNDocument) -> list[Identification]:
    """Collect every species link of a search results page, in document order."""
    identifications = []
    for anchor in document.find_by_tag(document.root, "a"):
        href = anchor.get("href")
        if not isinstance(href, str) or not href.startswith(SPECIES_PATH_PREFIX):
            continue
        identifications.append(
            Identification(
                id=href.replace(SPECIES_PATH_PREFIX, "", 1),
                name=anchor.get_text().replace('"', "").strip(),
            )
        )
    return identifications


def build_species_record(document: LPSNDocument, species_id: str, name: str) -> SpeciesRecord:
    """Compose all field extractors into a record for one detail page."""
    return SpeciesRecord(
        id=species_id,
        name=name,
        author=derive_author(document, name),
        strain=extract_field(document, "type strain"),
        sequence_accession_no=extract_sequence_accession(document),
        etymology=extract_field(document, "etymology"),
        refs=collect_refs(document),
        synonyms=extract_synonyms(document),
    )
