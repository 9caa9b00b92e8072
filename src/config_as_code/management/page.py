"""
Página de gestão "Configuration as Code".

Adapter fino entre a camada de transporte do host (HTTP, permissões) e o
engine. Expõe:
    - a ação administrativa de reload (POST, somente administradores)
    - as visões de leitura: fontes, última carga, última falha,
      root configurators e todos os configurators descobertos
    - a renderização HTML dessas visões e a referência em Markdown

Decisões arquiteturais:
    - Requisições não autorizadas são ignoradas silenciosamente
    - Falhas de `configure()` propagam ao transporte (fail-fast)
    - Nenhuma visão é cacheada: cada chamada relê o estado do engine
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from config_as_code.core.configurator.configurator import describe_configurator
from config_as_code.core.engine.engine import ConfigurationEngine
from config_as_code.report.reference_md import generate_reference_md

from .renderers import (
    RenderResult,
    render_kv_table_html,
    render_page_html,
    render_payload,
    render_section_html,
    render_table_html,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReloadRequest:
    """Requisição recebida pela ação de reload, já autenticada pelo host."""

    method: str
    is_admin: bool


@dataclass(frozen=True)
class ActionResponse:
    """Resposta de uma ação: status HTTP e, para redirects, o destino."""

    status: int
    location: Optional[str] = None


class ManagementPage:
    icon_file_name = "/plugin/configuration-as-code/img/logo-head.svg"
    display_name = "Configuration as Code"
    url_name = "configuration-as-code"
    description = (
        "An opinionated way to configure the application based on "
        "human-readable declarative configuration files"
    )

    def __init__(self, engine: ConfigurationEngine):
        self.engine = engine

    def do_reload(self, request: ReloadRequest) -> Optional[ActionResponse]:
        """
        Recarrega a configuração de forma síncrona.

        Returns:
            ActionResponse: 405 para métodos diferentes de POST; redirect (302)
                para a própria página após reload bem-sucedido.
            None: requisição sem permissão de administrador (no-op silencioso).
        """
        if request.method.upper() != "POST":
            return ActionResponse(status=405)
        if not request.is_admin:
            logger.debug("Reload ignorado: requisição sem permissão de administrador")
            return None

        self.engine.configure()
        return ActionResponse(status=302, location="")

    def view(self) -> Dict[str, Any]:
        loaded = self.engine.last_time_loaded
        failure = self.engine.last_failure
        return {
            "sources": self.engine.sources,
            "last_time_loaded": loaded.isoformat() if loaded else None,
            "last_failure": failure.to_dict() if failure else None,
            "root_configurators": [
                describe_configurator(c) for c in self.engine.get_root_configurators()
            ],
            "configurators": [
                describe_configurator(c) for c in self.engine.get_configurators()
            ],
        }

    def render(self) -> RenderResult:
        data = self.view()

        status = {
            "last_time_loaded": data["last_time_loaded"] or "never",
            "sources": ", ".join(data["sources"]) or "(none)",
        }
        sections = [
            render_section_html("Status", render_kv_table_html(status)),
        ]
        if data["last_failure"]:
            sections.append(
                render_section_html(
                    "Last failure",
                    render_payload(data["last_failure"]).html or "",
                    subtitle=data["last_failure"]["message"],
                )
            )

        rows = [
            {
                "configurator": c["label"],
                "root": "yes" if c["root"] else "",
                "attributes": ", ".join(a["name"] for a in c["attributes"]),
            }
            for c in data["configurators"]
        ]
        sections.append(render_section_html("Configurators", render_table_html(rows)))

        html = render_page_html(self.display_name, sections)
        return RenderResult(html=html, text=self.reference())

    def reference(self) -> str:
        return generate_reference_md(
            self.engine.get_root_configurators(),
            self.engine.get_configurators(),
        )
