from .page import ActionResponse, ManagementPage, ReloadRequest
from .renderers import (
    RenderResult,
    render_kv_table_html,
    render_page_html,
    render_payload,
    render_section_html,
    render_table_html,
)

__all__ = [
    "ActionResponse",
    "ManagementPage",
    "ReloadRequest",
    "RenderResult",
    "render_kv_table_html",
    "render_page_html",
    "render_payload",
    "render_section_html",
    "render_table_html",
]
