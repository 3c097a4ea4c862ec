"""Tests for payload models."""

from __future__ import annotations

from gptzator.schemas import AppsMenuItem, Collection, Project, Thread, Vault


def test_models_read_camel_case_and_keep_unknown_fields() -> None:
    project = Project.model_validate(
        {"id": "p1", "generating": True, "lastGenerationError": None, "isDemo": True, "newField": 1},
    )

    assert project.generating is True
    assert project.is_demo is True
    assert project.model_extra == {"newField": 1}


def test_vault_keeps_snake_case_wire_names() -> None:
    vault = Vault.model_validate({"id": "v1", "llm_instructions": "be brief", "valueTitle": "Answer"})

    assert vault.llm_instructions == "be brief"
    assert vault.to_payload() == {"id": "v1", "llm_instructions": "be brief", "valueTitle": "Answer"}


def test_nested_menu_and_relations_parse() -> None:
    menu = AppsMenuItem.model_validate(
        {"id": "g1", "type": "group", "children": [{"id": "a1", "type": "action", "isSelected": True}]},
    )
    thread = Thread.model_validate({"id": "t1", "model": {"id": "m1", "name": "gpt"}, "vault": ["v1"]})

    assert menu.children is not None and menu.children[0].is_selected is True
    assert thread.model is not None and not isinstance(thread.model, str)
    assert thread.vault == ["v1"]


def test_empty_collection_defaults() -> None:
    page = Collection[Vault].model_validate({})

    assert page.docs == []
    assert page.total_docs == 0
