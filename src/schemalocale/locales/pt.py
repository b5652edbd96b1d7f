"""Portuguese messages.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemalocale.config import LocaleConfig
from schemalocale.formatting import IssueFormatter, MessageCatalog, SizingInfo

if TYPE_CHECKING:
    from schemalocale.issues import Issue

__all__ = ["CATALOG", "FORMATTER", "config_pt", "format_message_pt"]

SIZABLE = {
    "string": SizingInfo("caracteres", "ter"),
    "file": SizingInfo("bytes", "ter"),
    "array": SizingInfo("itens", "ter"),
    "slice": SizingInfo("itens", "ter"),
    "set": SizingInfo("itens", "ter"),
    "map": SizingInfo("entradas", "ter"),
}

FORMAT_NOUNS = {
    "regex": "padrão",
    "email": "endereço de e-mail",
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
    "datetime": "data e hora ISO",
    "date": "data ISO",
    "time": "hora ISO",
    "duration": "duração ISO",
    "ipv4": "endereço IPv4",
    "ipv6": "endereço IPv6",
    "mac": "endereço MAC",
    "cidrv4": "faixa de IPv4",
    "cidrv6": "faixa de IPv6",
    "base64": "texto codificado em base64",
    "base64url": "URL codificada em base64",
    "json_string": "texto JSON",
    "e164": "número E.164",
    "jwt": "JWT",
    "template_literal": "entrada",
}

TYPE_NAMES = {
    "nan": "NaN",
    "number": "número",
    "array": "array",
    "slice": "array",
    "string": "texto",
    "bool": "booleano",
    "object": "objeto",
    "map": "mapa",
    "nil": "nulo",
    "undefined": "indefinido",
    "function": "função",
    "date": "data",
    "file": "arquivo",
    "set": "conjunto",
}

CATALOG = MessageCatalog(
    invalid_type="Tipo inválido: esperado {expected}, recebido {received}",
    invalid_value_empty="Valor inválido",
    invalid_value_single="Entrada inválida: esperado {value}",
    invalid_value_multiple="Opção inválida: esperada uma das {values}",
    value_separator="|",
    invalid_format_empty="Formato inválido",
    not_multiple_of_empty="Número inválido: deve ser múltiplo",
    not_multiple_of="Número inválido: deve ser múltiplo de {divisor}",
    unrecognized_keys_empty="Chave desconhecida",
    key_separator=", ",
    unrecognized_key="Chave desconhecida: {keys}",
    unrecognized_keys="Chaves desconhecidas: {keys}",
    invalid_key_empty="Chave inválida",
    invalid_key="Chave inválida em {origin}",
    invalid_union="Entrada inválida",
    invalid_element_empty="Elemento inválido",
    invalid_element="Valor inválido em {origin}",
    default_field_type="campo",
    missing_required="Falta {field_type} obrigatório",
    missing_required_named="Falta {field_type} obrigatório: {field_name}",
    unknown_type="desconhecido",
    type_conversion="Falha na conversão de tipo: não é possível converter {from_type} para {to_type}",
    invalid_schema="Esquema inválido: {reason}",
    invalid_schema_empty="Definição de esquema inválida",
    default_discriminator="discriminador",
    invalid_discriminator="Campo discriminador inválido ou ausente: {field}",
    default_conflict_type="valores",
    incompatible_types="Não é possível mesclar {conflict_type}: tipos incompatíveis",
    nil_pointer="Ponteiro nulo encontrado",
    default_origin="valor",
    too_small="Muito pequeno",
    too_big="Muito grande",
    too_small_sized="Muito pequeno: esperado que {origin} tivesse {adj}{threshold} {unit}",
    too_big_sized="Muito grande: esperado que {origin} tivesse {adj}{threshold} {unit}",
    too_small_unsized="Muito pequeno: esperado que {origin} fosse {adj}{threshold}",
    too_big_unsized="Muito grande: esperado que {origin} fosse {adj}{threshold}",
    starts_with_empty="Texto inválido: deve começar com o prefixo especificado",
    starts_with='Texto inválido: deve começar com "{operand}"',
    ends_with_empty="Texto inválido: deve terminar com o sufixo especificado",
    ends_with='Texto inválido: deve terminar com "{operand}"',
    includes_empty="Texto inválido: deve incluir a substring especificada",
    includes='Texto inválido: deve incluir "{operand}"',
    regex_empty="Texto inválido: deve corresponder ao padrão",
    regex="Texto inválido: deve corresponder ao padrão {operand}",
    invalid_format_noun="{noun} inválido",
    invalid_input="Campo inválido",
    type_names=TYPE_NAMES,
    format_nouns=FORMAT_NOUNS,
    sizable=SIZABLE,
)

FORMATTER = IssueFormatter(CATALOG, "pt")


def format_message_pt(issue: Issue) -> str:
    """Render an issue in Portuguese."""
    return FORMATTER(issue)


def config_pt() -> LocaleConfig:
    """Configuration installing the Portuguese formatter."""
    return LocaleConfig(FORMATTER, "pt")
