# tests/management/test_management_renderers.py

import copy

from config_as_code.management.renderers import (
    render_kv_table_html,
    render_page_html,
    render_payload,
    render_section_html,
    render_table_html,
)


def test_render_kv_table_html_basic():
    payload = {"sources": "casc.yaml", "last_time_loaded": "never"}
    html = render_kv_table_html(payload, title="status")
    assert "<table>" in html
    assert "status" in html
    assert "casc.yaml" in html
    assert "<th>key</th>" in html


def test_render_kv_table_html_custom_labels():
    html = render_kv_table_html({"a": 1}, labels=("field", "content"))
    assert "<th>field</th>" in html
    assert "<th>content</th>" in html


def test_render_table_html_list_of_dicts_uses_union_of_keys():
    payload = [{"configurator": "jenkins"}, {"configurator": "Tool", "root": ""}]
    html = render_table_html(payload, title="configurators")
    assert "<th>configurator</th>" in html
    assert "<th>root</th>" in html
    assert html.index("<th>configurator</th>") < html.index("<th>root</th>")


def test_render_table_html_empty_and_truncated():
    assert "(empty)" in render_table_html([])
    html = render_table_html([{"n": i} for i in range(10)], max_rows=3)
    assert html.count("<tr>") == 4  # cabeçalho + 3 linhas


def test_values_are_html_escaped():
    html = render_kv_table_html({"message": "<script>alert(1)</script>"})
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_render_payload_fallback_unknown_payload_to_text():
    result = render_payload(object())
    assert result.text
    assert result.html is None


def test_section_and_page_wrap_fragments():
    section = render_section_html("Status", "<p>ok</p>", subtitle="loaded")
    page = render_page_html("Configuration as Code", [section])
    assert page.startswith("<!DOCTYPE html>")
    assert "<h3>Status</h3>" in page
    assert "loaded" in page
    assert "<p>ok</p>" in page


def test_purity_renderer_does_not_mutate_input():
    payload = {"details": {"key": "x"}, "sources": ["a.yaml", "b.yml"]}
    before = copy.deepcopy(payload)
    _ = render_payload(payload)
    assert payload == before
