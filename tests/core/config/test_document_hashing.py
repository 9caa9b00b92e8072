# tests/core/config/test_document_hashing.py
"""
Testes do hashing de documentos.

Os testes asseguram que:
- o hash é determinístico e independente da ordem das chaves
- o algoritmo corresponde ao SHA-256 do JSON canônico
- valores não JSON produzidos pelo YAML (datas) são aceitos
"""

import datetime
import hashlib
import json

import pytest

from config_as_code.core.config.hashing import compute_document_hash


def _canonical_json_bytes(obj: dict) -> bytes:
    s = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def test_hash_is_deterministic():
    h1 = compute_document_hash({"b": 2, "a": 1})
    h2 = compute_document_hash({"a": 1, "b": 2})
    assert h1 == h2
    assert isinstance(h1, str)
    assert len(h1) == 64


def test_hash_matches_sha256_of_canonical_json():
    doc = {"jenkins": {"systemMessage": "hi", "numExecutors": 2}, "tool": {"git": {}}}
    expected = hashlib.sha256(_canonical_json_bytes(doc)).hexdigest()
    assert compute_document_hash(doc) == expected


def test_hash_changes_with_content():
    assert compute_document_hash({"a": 1}) != compute_document_hash({"a": 2})


def test_hash_accepts_yaml_dates():
    doc = {"released": datetime.date(2026, 1, 16)}
    assert len(compute_document_hash(doc)) == 64


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError):
        compute_document_hash(["a"])  # type: ignore[arg-type]


def test_hash_accepts_nested_mapping_with_mixed_key_types():
    doc = {"jenkins": {1: "one", "name": "two"}, "tool": [{2: "x", "b": None}]}
    h = compute_document_hash(doc)
    assert len(h) == 64
    assert h == compute_document_hash({"jenkins": {"name": "two", 1: "one"}, "tool": [{"b": None, 2: "x"}]})
