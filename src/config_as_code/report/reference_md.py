"""
src/config_as_code/report/reference_md.py

Gerador canônico da referência de configuração em Markdown (v1).

Regras:
- A referência é derivada EXCLUSIVAMENTE dos configurators recebidos.
- Não consulta registry nem engine; não infere atributos ausentes.
- Mesma entrada => mesmo Markdown (ordem = ordem recebida; atributos em
  ordem determinística).

Estrutura mínima obrigatória:
# Configuration Reference

## Root Elements
## Configurators
"""

from __future__ import annotations

from typing import List, Sequence

from config_as_code.core.configurator.configurator import Configurator, describe_configurator


REQUIRED_SECTIONS: List[str] = [
    "# Configuration Reference",
    "## Root Elements",
    "## Configurators",
]


def _attribute_line(attribute: dict) -> str:
    suffix = "[]" if attribute["multiple"] else ""
    return f"- `{attribute['name']}`: `{attribute['type']}{suffix}`"


def generate_reference_md(
    roots: Sequence[Configurator],
    configurators: Sequence[Configurator],
) -> str:
    """Gera a referência completa: elementos raiz seguidos de todos os configurators."""
    lines: List[str] = []

    lines.append("# Configuration Reference\n")

    lines.append("## Root Elements")
    if roots:
        for c in roots:
            d = describe_configurator(c)
            lines.append(f"- **{d['label']}**")
    else:
        lines.append("No root elements registered.")
    lines.append("")

    lines.append("## Configurators")
    if not configurators:
        lines.append("No configurators discovered.")
    for c in configurators:
        d = describe_configurator(c)
        lines.append(f"### {d['label']}")
        if d["target"]:
            lines.append(f"Target: `{d['target']}`\n")
        if d["attributes"]:
            lines.extend(_attribute_line(a) for a in d["attributes"])
        else:
            lines.append("No attributes.")
        lines.append("")

    content = "\n".join(lines)

    for sec in REQUIRED_SECTIONS:
        if sec not in content:
            raise RuntimeError(f"Reference generation failed: missing required section: {sec}")

    return content
