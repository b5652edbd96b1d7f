"""Italian messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_it", "format_message_it"]

SIZABLE = {
    "string": SizingInfo("caratteri", "avere"),
    "file": SizingInfo("byte", "avere"),
    "array": SizingInfo("elementi", "avere"),
    "slice": SizingInfo("elementi", "avere"),
    "set": SizingInfo("elementi", "avere"),
    "map": SizingInfo("voci", "avere"),
}

FORMAT_NOUNS = {
    "regex": "input",
    "email": "indirizzo email",
    "url": "URL",
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
    "datetime": "data e ora ISO",
    "date": "data ISO",
    "time": "ora ISO",
    "duration": "durata ISO",
    "ipv4": "indirizzo IPv4",
    "ipv6": "indirizzo IPv6",
    "mac": "indirizzo MAC",
    "cidrv4": "intervallo IPv4",
    "cidrv6": "intervallo IPv6",
    "base64": "stringa codificata in base64",
    "base64url": "URL codificata in base64",
    "json_string": "stringa JSON",
    "e164": "numero E.164",
    "jwt": "JWT",
    "template_literal": "input",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "numero",
    "array": "vettore",
    "slice": "vettore",
    "string": "stringa",
    "bool": "booleano",
    "object": "oggetto",
    "map": "mappa",
    "nil": "nullo",
    "undefined": "indefinito",
    "function": "funzione",
    "date": "data",
    "file": "file",
    "set": "insieme",
}

CATALOG = MessageCatalog(
    invalid_type="Input non valido: atteso {expected}, ricevuto {received}",
    invalid_value_empty="Valore non valido",
    invalid_value_single="Input non valido: atteso {value}",
    invalid_value_multiple="Opzione non valida: atteso uno tra {values}",
    value_separator="|",
    invalid_format_empty="Formato non valido",
    not_multiple_of_empty="Numero non valido: deve essere un multiplo",
    not_multiple_of="Numero non valido: deve essere un multiplo di {divisor}",
    unrecognized_keys_empty="Chiave non riconosciuta",
    key_separator=", ",
    unrecognized_key="Chiave non riconosciuta: {keys}",
    unrecognized_keys="Chiavi non riconosciute: {keys}",
    invalid_key_empty="Chiave non valida",
    invalid_key="Chiave non valida in {origin}",
    invalid_union="Input non valido",
    invalid_element_empty="Elemento non valido",
    invalid_element="Valore non valido in {origin}",
    default_field_type="campo",
    missing_required="Manca {field_type} obbligatorio",
    missing_required_named="Manca {field_type} obbligatorio: {field_name}",
    unknown_type="sconosciuto",
    type_conversion="Conversione di tipo fallita: impossibile convertire {from_type} in {to_type}",
    invalid_schema="Schema non valido: {reason}",
    invalid_schema_empty="Definizione dello schema non valida",
    default_discriminator="discriminatore",
    invalid_discriminator="Campo discriminatore non valido o mancante: {field}",
    default_conflict_type="valori",
    incompatible_types="Impossibile unire {conflict_type}: tipi incompatibili",
    nil_pointer="Puntatore nullo rilevato",
    default_origin="valore",
    too_small="Troppo piccolo",
    too_big="Troppo grande",
    too_small_sized="Troppo piccolo: {origin} deve avere {adj}{threshold} {unit}",
    too_big_sized="Troppo grande: {origin} deve avere {adj}{threshold} {unit}",
    too_small_unsized="Troppo piccolo: {origin} deve essere {adj}{threshold}",
    too_big_unsized="Troppo grande: {origin} deve essere {adj}{threshold}",
    starts_with_empty="Stringa non valida: deve iniziare con il prefisso specificato",
    starts_with='Stringa non valida: deve iniziare con "{operand}"',
    ends_with_empty="Stringa non valida: deve terminare con il suffisso specificato",
    ends_with='Stringa non valida: deve terminare con "{operand}"',
    includes_empty="Stringa non valida: deve includere la sottostringa specificata",
    includes='Stringa non valida: deve includere "{operand}"',
    regex_empty="Stringa non valida: deve corrispondere al pattern",
    regex="Stringa non valida: deve corrispondere al pattern {operand}",
    invalid_format_noun="{noun} non valido",
    invalid_input="Input non valido",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "it")


def format_message_it(issue: Issue) -> str:
    """Render an issue in Italian."""
    return FORMATTER(issue)


def config_it() -> LocaleConfig:
    """Configuration installing the Italian formatter."""
    return LocaleConfig(FORMATTER, "it")
