"""French messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_fr", "format_message_fr"]

SIZABLE = {
    "string": SizingInfo("caractères", "avoir"),
    "file": SizingInfo("octets", "avoir"),
    "array": SizingInfo("éléments", "avoir"),
    "slice": SizingInfo("éléments", "avoir"),
    "set": SizingInfo("éléments", "avoir"),
    "map": SizingInfo("entrées", "avoir"),
}

FORMAT_NOUNS = {
    "regex": "entrée",
    "email": "adresse e-mail",
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
    "datetime": "date et heure ISO",
    "date": "date ISO",
    "time": "heure ISO",
    "duration": "durée ISO",
    "ipv4": "adresse IPv4",
    "ipv6": "adresse IPv6",
    "mac": "adresse MAC",
    "cidrv4": "plage IPv4",
    "cidrv6": "plage IPv6",
    "base64": "chaîne encodée en base64",
    "base64url": "chaîne encodée en base64url",
    "json_string": "chaîne JSON",
    "e164": "numéro E.164",
    "jwt": "JWT",
    "template_literal": "entrée",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "nombre",
    "array": "tableau",
    "slice": "tableau",
    "string": "chaîne",
    "bool": "booléen",
    "object": "objet",
    "map": "map",
    "nil": "null",
    "undefined": "undefined",
    "function": "fonction",
    "date": "date",
    "file": "fichier",
    "set": "ensemble",
}

CATALOG = MessageCatalog(
    invalid_type="Entrée invalide : {expected} attendu, {received} reçu",
    invalid_value_empty="Valeur invalide",
    invalid_value_single="Entrée invalide : {value} attendu",
    invalid_value_multiple="Option invalide : une valeur parmi {values} attendue",
    value_separator="|",
    invalid_format_empty="Format invalide",
    not_multiple_of_empty="Nombre invalide : doit être un multiple",
    not_multiple_of="Nombre invalide : doit être un multiple de {divisor}",
    unrecognized_keys_empty="Clé non reconnue",
    key_separator=", ",
    unrecognized_key="Clé non reconnue : {keys}",
    unrecognized_keys="Clés non reconnues : {keys}",
    invalid_key_empty="Clé invalide",
    invalid_key="Clé invalide dans {origin}",
    invalid_union="Entrée invalide",
    invalid_element_empty="Élément invalide",
    invalid_element="Valeur invalide dans {origin}",
    default_field_type="champ",
    missing_required="{field_type} requis manquant",
    missing_required_named="{field_type} requis manquant : {field_name}",
    unknown_type="inconnu",
    type_conversion="Échec de la conversion de type : impossible de convertir {from_type} en {to_type}",
    invalid_schema="Schéma invalide : {reason}",
    invalid_schema_empty="Définition de schéma invalide",
    default_discriminator="discriminateur",
    invalid_discriminator="Champ discriminateur invalide ou manquant : {field}",
    default_conflict_type="valeurs",
    incompatible_types="Impossible de fusionner {conflict_type} : types incompatibles",
    nil_pointer="Pointeur nul rencontré",
    default_origin="valeur",
    too_small="Trop petit",
    too_big="Trop grand",
    too_small_sized="Trop petit : {origin} doit {verb} {adj}{threshold} {unit}",
    too_big_sized="Trop grand : {origin} doit {verb} {adj}{threshold} {unit}",
    too_small_unsized="Trop petit : {origin} doit être {adj}{threshold}",
    too_big_unsized="Trop grand : {origin} doit être {adj}{threshold}",
    starts_with_empty="Chaîne invalide : doit commencer par le préfixe spécifié",
    starts_with='Chaîne invalide : doit commencer par "{operand}"',
    ends_with_empty="Chaîne invalide : doit se terminer par le suffixe spécifié",
    ends_with='Chaîne invalide : doit se terminer par "{operand}"',
    includes_empty="Chaîne invalide : doit inclure la sous-chaîne spécifiée",
    includes='Chaîne invalide : doit inclure "{operand}"',
    regex_empty="Chaîne invalide : doit correspondre au modèle",
    regex="Chaîne invalide : doit correspondre au modèle {operand}",
    invalid_format_noun="{noun} invalide",
    invalid_input="Entrée invalide",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "fr")


def format_message_fr(issue: Issue) -> str:
    """Render an issue in French."""
    return FORMATTER(issue)


def config_fr() -> LocaleConfig:
    """Configuration installing the French formatter."""
    return LocaleConfig(FORMATTER, "fr")
