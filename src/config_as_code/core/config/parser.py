"""
Parser canônico de documentos de configuração.

Converte o stream binário de uma fonte em um documento: um dicionário
de chave (string) para valor estruturado arbitrário.

Decisões arquiteturais:
    - YAML é lido com `yaml.safe_load` (nenhuma construção de objeto arbitrário)
    - Documento vazio é interpretado como dicionário vazio
    - Raiz que não é mapa, ou chave de topo que não é string, é `ParseError`
    - A ordem das chaves é a ordem do documento (determinística)

Limites explícitos:
    - Não abre nem fecha streams
    - Não resolve configurators
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict

import yaml  # PyYAML

from ..errors import ParseError


def parse_document(stream: BinaryIO, *, source_name: str) -> Dict[str, Any]:
    """
    Lê um documento YAML e valida sua estrutura mínima.

    Args:
        stream (BinaryIO): Stream da fonte, já aberto pelo chamador.
        source_name (str): Nome de exibição da fonte, usado nas mensagens.

    Returns:
        Dict[str, Any]: Documento com chaves de topo na ordem original.

    Raises:
        ParseError: Se o conteúdo for YAML inválido ou estruturalmente incompatível.
    """
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as exc:
        raise ParseError(source_name, str(exc)) from exc

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ParseError(
            source_name,
            f"raiz deve ser um mapa, recebido: {type(data).__name__}",
        )

    for key in data:
        if not isinstance(key, str):
            raise ParseError(
                source_name,
                f"chave de topo deve ser string, recebido: {key!r}",
            )

    return data
