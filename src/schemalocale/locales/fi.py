"""Finnish messages.

Size messages name their subject in the genitive ("merkkijonon täytyy
olla >=3 merkkiä"). Origins without sizing information fall back to
"arvon".

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "FinnishFormatter", "config_fi", "format_message_fi"]

SIZABLE = {
    "string": SizingInfo("merkkiä", subject="merkkijonon"),
    "file": SizingInfo("tavua", subject="tiedoston"),
    "array": SizingInfo("alkiota", subject="listan"),
    "slice": SizingInfo("alkiota", subject="listan"),
    "set": SizingInfo("alkiota", subject="joukon"),
    "map": SizingInfo("merkintää", subject="kartan"),
    "number": SizingInfo("", subject="luvun"),
    "bigint": SizingInfo("", subject="suuren kokonaisluvun"),
    "int": SizingInfo("", subject="kokonaisluvun"),
    "date": SizingInfo("", subject="päivämäärän"),
}

FORMAT_NOUNS = {
    "regex": "säännöllinen lauseke",
    "email": "sähköpostiosoite",
    "url": "URL-osoite",
    "emoji": "emoji",
    "uuid": "UUID",
    "uuidv4": "UUIDv4",
    "uuidv6": "UUIDv6",
    "nanoid": "nanoid",
    "guid": "GUID",
    "cuid": "cuid",
    "cuid2": "cuid2",
    "ulid": "ULID",
    "xid": "XID",
    "ksuid": "KSUID",
    "datetime": "ISO-aikaleima",
    "date": "ISO-päivämäärä",
    "time": "ISO-aika",
    "duration": "ISO-kesto",
    "ipv4": "IPv4-osoite",
    "ipv6": "IPv6-osoite",
    "mac": "MAC-osoite",
    "cidrv4": "IPv4-alue",
    "cidrv6": "IPv6-alue",
    "base64": "base64-koodattu merkkijono",
    "base64url": "base64url-koodattu merkkijono",
    "json_string": "JSON-merkkijono",
    "e164": "E.164-luku",
    "jwt": "JWT",
    "template_literal": "templaattimerkkijono",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "numero",
    "array": "lista",
    "slice": "lista",
    "string": "merkkijono",
    "bool": "totuusarvo",
    "object": "objekti",
    "map": "kartta",
    "nil": "null",
    "undefined": "määrittelemätön",
    "function": "funktio",
    "date": "päivämäärä",
    "file": "tiedosto",
    "set": "joukko",
}

CATALOG = MessageCatalog(
    invalid_type="Virheellinen tyyppi: odotettiin {expected}, oli {received}",
    invalid_value_empty="Virheellinen arvo",
    invalid_value_single="Virheellinen syöte: täytyy olla {value}",
    invalid_value_multiple="Virheellinen valinta: täytyy olla yksi seuraavista: {values}",
    value_separator="|",
    invalid_format_empty="Virheellinen muoto",
    not_multiple_of_empty="Virheellinen luku: täytyy olla monikerta",
    not_multiple_of="Virheellinen luku: täytyy olla luvun {divisor} monikerta",
    unrecognized_keys_empty="Tuntematon avain",
    key_separator=", ",
    unrecognized_key="Tuntematon avain: {keys}",
    unrecognized_keys="Tuntemattomat avaimet: {keys}",
    invalid_key_empty="Virheellinen avain tietueessa",
    invalid_union="Virheellinen unioni",
    invalid_element_empty="Virheellinen arvo joukossa",
    default_field_type="kenttä",
    missing_required="Pakollinen {field_type} puuttuu",
    missing_required_named="Pakollinen {field_type} puuttuu: {field_name}",
    unknown_type="tuntematon",
    type_conversion="Tyyppimuunnos epäonnistui: {from_type} ei voida muuntaa tyypiksi {to_type}",
    invalid_schema="Virheellinen skeema: {reason}",
    invalid_schema_empty="Virheellinen skeemamäärittely",
    default_discriminator="erottelija",
    invalid_discriminator="Virheellinen tai puuttuva erottelukenttä: {field}",
    default_conflict_type="arvot",
    incompatible_types="Ei voida yhdistää {conflict_type}: yhteensopimattomat tyypit",
    nil_pointer="Tyhjä osoitin havaittu",
    too_small="Liian pieni",
    too_big="Liian suuri",
    starts_with_empty="Virheellinen syöte: täytyy alkaa tietyllä merkkijonolla",
    starts_with='Virheellinen syöte: täytyy alkaa "{operand}"',
    ends_with_empty="Virheellinen syöte: täytyy loppua tiettyyn merkkijonoon",
    ends_with='Virheellinen syöte: täytyy loppua "{operand}"',
    includes_empty="Virheellinen syöte: täytyy sisältää tietty merkkijono",
    includes='Virheellinen syöte: täytyy sisältää "{operand}"',
    regex_empty="Virheellinen syöte: täytyy vastata säännöllistä lauseketta",
    regex="Virheellinen syöte: täytyy vastata säännöllistä lauseketta {operand}",
    invalid_format_noun="Virheellinen {noun}",
    invalid_input="Virheellinen syöte",
    invalid_key="Virheellinen avain tietueessa",
    invalid_element="Virheellinen arvo joukossa",
    default_origin="arvo",
    too_small_sized="Liian pieni: {subject} täytyy olla {adj}{threshold} {unit}",
    too_big_sized="Liian suuri: {subject} täytyy olla {adj}{threshold} {unit}",
    too_small_unsized="Liian pieni: {subject} täytyy olla {adj}{threshold}",
    too_big_unsized="Liian suuri: {subject} täytyy olla {adj}{threshold}",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

# Genitive subject for origins without sizing information.
_DEFAULT_SUBJECT = "arvon"


class FinnishFormatter(IssueFormatter):
    """Finnish formatter that declines the size subject into the genitive."""

    __slots__ = ()

    def size_fields(self, origin: str, is_too_small: bool) -> dict[str, str]:  # noqa: ARG002
        if self.sizing_for(origin) is None:
            return {"subject": _DEFAULT_SUBJECT}
        return {}


FORMATTER = FinnishFormatter(CATALOG, "fi")


def format_message_fi(issue: Issue) -> str:
    """Render an issue in Finnish."""
    return FORMATTER(issue)


def config_fi() -> LocaleConfig:
    """Configuration installing the Finnish formatter."""
    return LocaleConfig(FORMATTER, "fi")
