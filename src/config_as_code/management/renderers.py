# src/config_as_code/management/renderers.py
"""
Management UI Adapter (v1)

Objetivo:
- Renderizar as visões de leitura do engine (fontes, última carga,
  configurators) como HTML legível na página de gestão.
- NÃO altera payloads.
- NÃO acessa o engine nem o registry (recebe apenas dados já extraídos).

Saídas:
- HTML (string) quando possível
- fallback seguro em string (JSON pretty ou repr)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple
import html
import json


@dataclass(frozen=True)
class RenderResult:
    """Resultado de renderização (apenas apresentação)."""
    html: Optional[str]  # HTML string (quando aplicável)
    text: str            # fallback textual (sempre preenchido)


def _escape(s: Any) -> str:
    return html.escape("" if s is None else str(s))


def _as_pretty_json(payload: Any) -> str:
    try:
        return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True, default=str)
    except TypeError:
        return repr(payload)


def render_payload(payload: Any) -> RenderResult:
    """
    Renderizador genérico v1:
    - dict -> tabela key/value
    - list -> tabela
    - caso contrário -> JSON pretty (fallback)
    """
    if isinstance(payload, Mapping):
        return RenderResult(html=render_kv_table_html(payload), text=_as_pretty_json(payload))
    if isinstance(payload, Sequence) and not isinstance(payload, (str, bytes, bytearray)):
        return RenderResult(html=render_table_html(payload), text=_as_pretty_json(payload))
    return RenderResult(html=None, text=_as_pretty_json(payload))


def render_kv_table_html(
    payload: Mapping[str, Any],
    title: Optional[str] = None,
    labels: Tuple[str, str] = ("key", "value"),
) -> str:
    """Renderiza dict como tabela de duas colunas (HTML puro)."""
    rows = "".join(
        f"<tr><td><code>{_escape(k)}</code></td><td>{_escape(v)}</td></tr>"
        for k, v in payload.items()
    )
    heading = f"<h4>{_escape(title)}</h4>" if title else ""
    return (
        f"{heading}<table>"
        f"<thead><tr><th>{_escape(labels[0])}</th><th>{_escape(labels[1])}</th></tr></thead>"
        f"<tbody>{rows}</tbody></table>"
    )


def render_table_html(payload: Sequence[Any], title: Optional[str] = None, max_rows: int = 500) -> str:
    """
    Renderiza list payload como tabela:
    - list[dict] -> colunas = união das chaves (ordem de primeira aparição)
    - caso contrário -> tabela de 1 coluna (value)
    """
    items = list(payload)[:max_rows]
    heading = f"<h4>{_escape(title)}</h4>" if title else ""

    if not items:
        return f"{heading}<div><em>(empty)</em></div>"

    if not all(isinstance(x, Mapping) for x in items):
        trs = "".join(f"<tr><td>{_escape(x)}</td></tr>" for x in items)
        return f"{heading}<table><thead><tr><th>value</th></tr></thead><tbody>{trs}</tbody></table>"

    columns: List[str] = []
    for row in items:
        columns.extend(k for k in row.keys() if k not in columns)

    th = "".join(f"<th>{_escape(c)}</th>" for c in columns)
    trs = "".join(
        "<tr>" + "".join(f"<td>{_escape(row.get(c))}</td>" for c in columns) + "</tr>"
        for row in items
    )
    return f"{heading}<table><thead><tr>{th}</tr></thead><tbody>{trs}</tbody></table>"


def render_section_html(title: str, body_html: str, subtitle: Optional[str] = None) -> str:
    """Envolve um fragmento HTML em uma seção com título (apresentação pura)."""
    st = f"<p class='subtitle'>{_escape(subtitle)}</p>" if subtitle else ""
    return f"<section><h3>{_escape(title)}</h3>{st}{body_html}</section>"


def render_page_html(title: str, sections: Sequence[str]) -> str:
    """Monta o documento HTML completo da página de gestão."""
    return (
        "<!DOCTYPE html><html><head><meta charset='utf-8'>"
        f"<title>{_escape(title)}</title></head>"
        f"<body><h2>{_escape(title)}</h2>{''.join(sections)}</body></html>"
    )
