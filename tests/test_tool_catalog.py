"""
Tests for the tool catalog and prompt composition.
"""
import allure
from hypothesis import given, settings, strategies as st

from think_tool.prompt import compose_prompt
from think_tool.tools import ToolCatalog, ToolDefinition, build_think_tool


@allure.feature("Tool Catalog")
@allure.story("Think tool schema")
def test_think_tool_wire_format():
    assert build_think_tool().to_dict() == {
        "type": "custom",
        "name": "think",
        "description": "A tool to analyze and verify thinking processes",
        "input_schema": {
            "type": "object",
            "properties": {
                "thought": {
                    "type": "string",
                    "description": "The thought content to be analyzed and verified",
                }
            },
            "required": ["thought"],
        },
    }


def test_think_tool_is_built_fresh():
    first = build_think_tool()
    first.input_schema["required"].append("mutated")

    assert build_think_tool().input_schema["required"] == ["thought"]


def test_catalog_defaults_to_think_tool():
    assert ToolCatalog().tools == [build_think_tool()]


def test_catalog_hands_out_copies():
    catalog = ToolCatalog()
    catalog.tools.append(ToolDefinition(name="search", description="Search notes"))

    assert [tool.name for tool in catalog.tools] == ["think"]


def test_catalog_with_custom_tools():
    extra = ToolDefinition(name="search", description="Search notes")
    catalog = ToolCatalog([build_think_tool(), extra])

    assert [tool.to_dict()["name"] for tool in catalog.tools] == ["think", "search"]


def test_compose_prompt_default():
    assert compose_prompt("Launch it") == "Please analyze the following thought: Launch it"


def test_compose_prompt_empty_template_uses_default():
    assert compose_prompt("x", "") == "Please analyze the following thought: x"


def test_compose_prompt_with_template():
    assert compose_prompt("Launch it", "Critique:") == "Critique: Launch it"


# **Property: a template is joined to the thought with one space**
@settings(max_examples=100)
@given(thought=st.text(max_size=50), template=st.text(min_size=1, max_size=30))
def test_compose_prompt_template_property(thought, template):
    assert compose_prompt(thought, template) == template + " " + thought
