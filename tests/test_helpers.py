import pytest

from staticwire.core.nodes import Component, Node
from staticwire.helpers.case import camel_case, dash_case
from staticwire.helpers.clone import fast_clone
from staticwire.helpers.components import is_component
from staticwire.helpers.formatting import format_html
from staticwire.helpers.state import get_state_object_string
from staticwire.helpers.styles import collect_css, collect_styles


@pytest.mark.parametrize(
    "value,expected",
    [
        ("div", "div"),
        ("h1", "h1"),
        ("MyButton", "my-button"),
        ("backgroundColor", "background-color"),
        ("XMLHttpRequest", "xml-http-request"),
        ("my-div", "my-div"),
    ],
)
def test_dash_case(value: str, expected: str) -> None:
    assert dash_case(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("on-div-1-click", "onDiv1Click"),
        ("on-my-input-a3-change", "onMyInputA3Change"),
        ("foo_bar baz", "fooBarBaz"),
        ("", ""),
    ],
)
def test_camel_case(value: str, expected: str) -> None:
    assert camel_case(value) == expected


def test_is_component() -> None:
    assert is_component(Node(name="MyButton"))
    assert not is_component(Node(name="button"))
    assert not is_component(Node(name="my-element"))


def test_fast_clone_shares_nothing() -> None:
    original = Component(
        state={"items": [1, 2]},
        children=[Node(name="div", properties={"id": "a"}, children=[Node(name="p")])],
    )

    copy = fast_clone(original)
    copy.state["items"].append(3)
    copy.children[0].properties["id"] = "b"
    copy.children[0].children.clear()

    assert original.state == {"items": [1, 2]}
    assert original.children[0].properties == {"id": "a"}
    assert len(original.children[0].children) == 1


class TestStateObjectString:
    def test_empty(self) -> None:
        assert get_state_object_string(Component()) == "{}"

    def test_literals(self) -> None:
        component = Component(
            state={"count": 0, "name": "x", "on-off": True, "tags": ["a"], "none": None}
        )

        assert get_state_object_string(component) == (
            '{ count: 0, name: "x", "on-off": true, tags: ["a"], none: null }'
        )

    def test_code_values(self) -> None:
        component = Component(
            state={
                "inc": "@function:function () { state.count++ }",
                "reset": "@method:reset() { this.count = 0 }",
                "double": "@getter:get double() { return this.count * 2 }",
            }
        )

        assert get_state_object_string(component) == (
            "{ inc: function () { state.count++ }, "
            "reset() { this.count = 0 }, "
            "get double() { return this.count * 2 } }"
        )


class TestCollectCss:
    def test_moves_css_binding_to_class(self) -> None:
        card = Node(
            name="div",
            properties={"class": "card"},
            bindings={"css": '{"backgroundColor": "red", "padding": "4px"}', "title": "t"},
        )
        component = Component(children=[card])

        css = collect_css(component)

        assert css == ".div-1 {\n  background-color: red;\n  padding: 4px;\n}\n"
        assert card.properties["class"] == "card div-1"
        assert card.bindings == {"title": "t"}

    def test_indexes_per_name_and_headings(self) -> None:
        first = Node(name="MyCard", bindings={"css": '{"margin": 0}'})
        second = Node(name="MyCard", bindings={"css": '{"margin": 1}'})
        heading = Node(name="h2", bindings={"css": '{"margin": 2}'})
        component = Component(
            children=[Node(name="section", children=[first, second, heading])]
        )

        styles = collect_styles(component)

        assert list(styles) == ["my-card-1", "my-card-2", "h2-1"]
        assert heading.properties["class"] == "h2-1"

    def test_media_queries(self) -> None:
        node = Node(
            name="h1",
            bindings={
                "css": '{"color": "red", "@media (max-width: 640px)": {"display": "none"}}'
            },
        )

        css = collect_css(Component(children=[node]))

        assert css == (
            ".h1-1 {\n  color: red;\n}\n"
            "@media (max-width: 640px) {\n.h1-1 {\n  display: none;\n}\n}\n"
        )

    def test_invalid_css_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        node = Node(name="div", bindings={"css": "{color: red"})

        css = collect_css(Component(children=[node]))

        assert css == ""
        assert "css" not in node.bindings
        assert "class" not in node.properties
        assert "Skipping invalid css binding" in caplog.text


class TestFormatHtml:
    def test_indents_between_block_tags_only(self) -> None:
        source = '<div class="box"><p>Hi &amp; <em>there</em></p><pre>  a\n b</pre></div>'

        assert format_html(source) == (
            '<div class="box">\n'
            "  <p>Hi &amp; <em>there</em></p>\n"
            "  <pre>  a\n b</pre>\n"
            "</div>\n"
        )

    def test_keeps_component_tag_case(self) -> None:
        source = '<MyCard data-uid="my-card-1"><CardBody>x</CardBody></MyCard>'

        assert format_html(source) == source + "\n"

    def test_inline_whitespace_untouched(self) -> None:
        source = "<p>Hello\n<b>world</b> <a href=\"#\">link</a></p>"

        assert format_html(source) == source + "\n"

    def test_script_body_verbatim(self) -> None:
        script = "\n  var a = 1;\n      if (a < 2) { a++; }\n"
        source = f"<div></div>\n<script>{script}</script>\n"

        formatted = format_html(source)

        assert formatted == f"<div></div>\n<script>{script}</script>\n"
