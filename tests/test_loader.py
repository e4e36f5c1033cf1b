import json
import shutil
import tempfile
import unittest
from pathlib import Path

from staticwire.compiler.exceptions import ComponentLoadError, StaticWireError
from staticwire.compiler.loader import load_component, parse_component
from staticwire.core.nodes import Component, Node


class TestLoader(unittest.TestCase):
    def setUp(self) -> None:
        self.test_dir = tempfile.mkdtemp()
        self.tmp_path = Path(self.test_dir).resolve()

    def tearDown(self) -> None:
        shutil.rmtree(self.test_dir)

    def test_load_file(self) -> None:
        path = self.tmp_path / "counter.json"
        path.write_text(
            json.dumps(
                {
                    "@type": "component",
                    "name": "Counter",
                    "state": {"count": 0},
                    "children": [
                        {
                            "@type": "node",
                            "name": "button",
                            "properties": {"class": "btn"},
                            "bindings": {"onClick": {"code": "state.count++"}},
                            "children": [{"properties": {"_text": "+"}}],
                        }
                    ],
                }
            )
        )

        component = load_component(path)

        self.assertEqual(component.name, "Counter")
        self.assertEqual(component.state, {"count": 0})
        button = component.children[0]
        self.assertEqual(button.name, "button")
        self.assertEqual(button.properties, {"class": "btn"})
        self.assertEqual(button.bindings, {"onClick": "state.count++"})
        self.assertEqual(button.children[0], Node(name="div", properties={"_text": "+"}))

    def test_defaults(self) -> None:
        self.assertEqual(parse_component("{}"), Component())

    def test_invalid_json(self) -> None:
        path = self.tmp_path / "broken.json"
        path.write_text('{"children": [')

        with self.assertRaises(ComponentLoadError) as cm:
            load_component(path)

        self.assertEqual(cm.exception.file_path, str(path))
        self.assertIn("Invalid JSON", str(cm.exception))
        self.assertIn(str(path), str(cm.exception))

    def test_missing_file(self) -> None:
        with self.assertRaises(StaticWireError):
            load_component(self.tmp_path / "missing.json")

    def test_not_an_object(self) -> None:
        with self.assertRaises(ComponentLoadError) as cm:
            parse_component("[]")
        self.assertIn("must be a JSON object", str(cm.exception))

    def test_wrong_container_types(self) -> None:
        with self.assertRaises(ComponentLoadError) as cm:
            parse_component('{"state": []}')
        self.assertIn("'state' must be a JSON object", str(cm.exception))

        with self.assertRaises(ComponentLoadError) as cm:
            parse_component('{"children": {}}')
        self.assertIn("'children' must be a JSON array", str(cm.exception))

        with self.assertRaises(ComponentLoadError) as cm:
            parse_component('{"children": [{"children": [{"bindings": "x"}]}]}')
        self.assertIn("'children[0].children[0].bindings'", str(cm.exception))

    def test_unknown_shapes_pass_through(self) -> None:
        component = parse_component(
            '{"children": [{"name": "Whatever", "bindings": {"_spread": "props"}}]}'
        )

        self.assertEqual(component.children[0].bindings, {"_spread": "props"})


if __name__ == "__main__":
    unittest.main()
