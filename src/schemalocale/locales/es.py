"""Spanish messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_es", "format_message_es"]

SIZABLE = {
    "string": SizingInfo("caracteres", "tener"),
    "file": SizingInfo("bytes", "tener"),
    "array": SizingInfo("elementos", "tener"),
    "slice": SizingInfo("elementos", "tener"),
    "set": SizingInfo("elementos", "tener"),
    "map": SizingInfo("entradas", "tener"),
}

FORMAT_NOUNS = {
    "regex": "entrada",
    "email": "dirección de correo electrónico",
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
    "datetime": "fecha y hora ISO",
    "date": "fecha ISO",
    "time": "hora ISO",
    "duration": "duración ISO",
    "ipv4": "dirección IPv4",
    "ipv6": "dirección IPv6",
    "mac": "dirección MAC",
    "cidrv4": "rango IPv4",
    "cidrv6": "rango IPv6",
    "base64": "cadena codificada en base64",
    "base64url": "URL codificada en base64",
    "json_string": "cadena JSON",
    "e164": "número E.164",
    "jwt": "JWT",
    "template_literal": "entrada",
}

TYPE_NAMES = {
    "nan": "NaN",
    "string": "texto",
    "number": "número",
    "boolean": "booleano",
    "bool": "booleano",
    "array": "arreglo",
    "slice": "arreglo",
    "object": "objeto",
    "set": "conjunto",
    "file": "archivo",
    "date": "fecha",
    "bigint": "número grande",
    "symbol": "símbolo",
    "undefined": "indefinido",
    "nil": "nulo",
    "null": "nulo",
    "function": "función",
    "map": "mapa",
    "record": "registro",
    "tuple": "tupla",
    "enum": "enumeración",
    "union": "unión",
    "literal": "literal",
    "promise": "promesa",
    "void": "vacío",
    "never": "nunca",
    "unknown": "desconocido",
    "any": "cualquiera",
}

CATALOG = MessageCatalog(
    invalid_type="Entrada inválida: se esperaba {expected}, recibido {received}",
    invalid_value_empty="Valor inválido",
    invalid_value_single="Entrada inválida: se esperaba {value}",
    invalid_value_multiple="Opción inválida: se esperaba una de {values}",
    value_separator="|",
    invalid_format_empty="Formato inválido",
    not_multiple_of_empty="Número inválido: debe ser múltiplo",
    not_multiple_of="Número inválido: debe ser múltiplo de {divisor}",
    unrecognized_keys_empty="Llave desconocida",
    key_separator=", ",
    unrecognized_key="Llave desconocida: {keys}",
    unrecognized_keys="Llaves desconocidas: {keys}",
    invalid_key_empty="Llave inválida",
    invalid_key="Llave inválida en {origin}",
    invalid_union="Entrada inválida",
    invalid_element_empty="Elemento inválido",
    invalid_element="Valor inválido en {origin}",
    default_field_type="campo",
    missing_required="Falta {field_type} requerido",
    missing_required_named="Falta {field_type} requerido: {field_name}",
    unknown_type="desconocido",
    type_conversion="Error de conversión de tipo: no se puede convertir {from_type} a {to_type}",
    invalid_schema="Esquema inválido: {reason}",
    invalid_schema_empty="Definición de esquema inválida",
    default_discriminator="discriminador",
    invalid_discriminator="Campo discriminador inválido o faltante: {field}",
    default_conflict_type="valores",
    incompatible_types="No se pueden fusionar {conflict_type}: tipos incompatibles",
    nil_pointer="Se encontró un puntero nulo",
    default_origin="valor",
    too_small="Demasiado pequeño",
    too_big="Demasiado grande",
    too_small_sized="Demasiado pequeño: se esperaba que {origin} tuviera {adj}{threshold} {unit}",
    too_big_sized="Demasiado grande: se esperaba que {origin} tuviera {adj}{threshold} {unit}",
    too_small_unsized="Demasiado pequeño: se esperaba que {origin} fuera {adj}{threshold}",
    too_big_unsized="Demasiado grande: se esperaba que {origin} fuera {adj}{threshold}",
    starts_with_empty="Cadena inválida: debe comenzar con el prefijo especificado",
    starts_with='Cadena inválida: debe comenzar con "{operand}"',
    ends_with_empty="Cadena inválida: debe terminar con el sufijo especificado",
    ends_with='Cadena inválida: debe terminar en "{operand}"',
    includes_empty="Cadena inválida: debe incluir la subcadena especificada",
    includes='Cadena inválida: debe incluir "{operand}"',
    regex_empty="Cadena inválida: debe coincidir con el patrón",
    regex="Cadena inválida: debe coincidir con el patrón {operand}",
    invalid_format_noun="Inválido {noun}",
    invalid_input="Entrada inválida",
    translate_origin=True,
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "es")


def format_message_es(issue: Issue) -> str:
    """Render an issue in Spanish."""
    return FORMATTER(issue)


def config_es() -> LocaleConfig:
    """Configuration installing the Spanish formatter."""
    return LocaleConfig(FORMATTER, "es")
