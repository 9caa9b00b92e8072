"""
Hashing canônico de documentos de configuração.

Gera um identificador determinístico para cada documento aplicado,
registrado no resultado da carga para rastreabilidade.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Chaves de mapas aninhados são convertidas para `str` (o YAML produz
      mapas com chaves mistas, ex.: `{1: a, name: b}`)
    - Valores não JSON (ex.: datas do YAML) são serializados via `str`
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Documentos estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def _canonicalize(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _canonicalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonicalize(v) for v in value]
    return value


def compute_document_hash(document: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico de um documento parseado.

    Args:
        document (Dict[str, Any]): Documento resultante do parse de uma fonte.

    Returns:
        str: Hash SHA-256 hexadecimal do documento.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(document, dict):
        raise TypeError(
            f"Documento para hashing deve ser dict, recebido: {type(document).__name__}"
        )

    canonical_json = json.dumps(
        _canonicalize(document),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
