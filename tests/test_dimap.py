#!/usr/bin/env python3
"""
End-to-end tests for containers built from element maps.
"""

import unittest
from dataclasses import dataclass, field
from itertools import count
from typing import Any

from dimap import BadElementDefinitionError, Container, UnknownElementError, create_container

_ids = count()


@dataclass
class Bar:
    id: int = field(default_factory=lambda: next(_ids))


@dataclass
class Foo:
    bar: Bar


@dataclass
class Translator:
    language: str | None


@dataclass
class Greeter:
    translator: Translator


class Recorder:
    def __init__(self, *args: Any):
        self.args = args


def create_container_with_classes(element_map: dict[str, Any], parent: Container | None = None) -> Container:
    container = create_container(element_map, parent=parent)
    assert container.factory is not None
    for cls in (Bar, Foo, Translator, Greeter, Recorder):
        container.factory.class_loader.register(cls.__name__, cls)
    return container


class TestEndToEnd(unittest.TestCase):
    """Test shared and private resolution through a real Factory."""

    def test_shared_dependency_is_reused(self):
        container = create_container_with_classes({"Foo": {"args": ["@Bar"], "class": "Foo"}, "Bar": {"class": "Bar"}})

        foo = container.get_shared_element("Foo")
        bar = container.get_shared_element("Bar")

        self.assertIsInstance(foo, Foo)
        self.assertIs(foo.bar, bar)

    def test_unknown_key(self):
        container = create_container_with_classes({"Foo": "Foo"})

        self.assertFalse(container.is_element_known("Baz"))
        with self.assertRaises(UnknownElementError):
            container.get_shared_element("Baz")

    def test_shared_element_is_created_once(self):
        calls: list[int] = []

        def creator() -> Bar:
            calls.append(1)
            return Bar()

        container = create_container_with_classes({"Bar": {"creator": creator}})

        self.assertIs(container.get_shared_element("Bar"), container.get_shared_element("Bar"))
        self.assertEqual(len(calls), 1)

    def test_private_elements_are_independent(self):
        container = create_container_with_classes({"Bar": "Bar"})
        shared = container.get_shared_element("Bar")

        privates = [container.create_private_element("Bar") for _ in range(3)]

        self.assertEqual(len({id(element) for element in privates}), 3)
        self.assertNotIn(shared, privates)
        self.assertIs(container.get_shared_element("Bar"), shared)

    def test_private_reference_creates_new_dependency(self):
        container = create_container_with_classes({"Foo": {"args": "#Bar", "class": "Foo"}, "Bar": "Bar"})

        first = container.create_private_element("Foo")
        second = container.create_private_element("Foo")

        self.assertIsNot(first.bar, second.bar)

    def test_longer_alias_takes_precedence(self):
        container = create_container_with_classes(
            {
                "Translator": {"class": "Translator", "args": "$"},
                "Translator.en": {"class": "Translator", "args": ["english"]},
            }
        )

        self.assertEqual(container.get_shared_element("Translator.en").language, "english")
        self.assertEqual(container.get_shared_element("Translator.de").language, "de")

    def test_qualifier_propagation(self):
        container = create_container_with_classes({"Recorder": {"class": "Recorder", "args": "$"}})

        self.assertEqual(container.get_shared_element("Recorder.xyz").args, ("xyz",))

    def test_qualifier_forwarding(self):
        container = create_container_with_classes(
            {
                "Greeter": {"class": "Greeter", "args": "@Translator.$"},
                "Translator": {"class": "Translator", "args": "$"},
            }
        )

        greeter = container.get_shared_element("Greeter.en")

        self.assertEqual(greeter.translator, Translator("en"))
        self.assertIs(container.get_shared_element("Translator.en"), greeter.translator)
        self.assertIsNot(container.get_shared_element("Greeter.fr"), greeter)

    def test_shorthand_equivalence(self):
        container = create_container_with_classes({"Short": "Bar", "Long": {"class": "Bar"}})

        self.assertEqual(container.factory.can_create_element("Short"), container.factory.can_create_element("Long"))
        self.assertIs(type(container.get_shared_element("Short")), type(container.get_shared_element("Long")))

    def test_scalar_args_shorthand(self):
        container = create_container_with_classes(
            {"Scalar": {"args": "x", "class": "Recorder"}, "Sequence": {"args": ["x"], "class": "Recorder"}}
        )

        self.assertEqual(container.get_shared_element("Scalar").args, container.get_shared_element("Sequence").args)

    def test_creator_may_return_none(self):
        container = create_container_with_classes({"Nothing": {"creator": lambda: None}})

        self.assertIsNone(container.get_shared_element("Nothing"))
        self.assertIsNone(container.create_private_element("Nothing"))

    def test_set_element_map_keeps_shared_elements(self):
        container = create_container_with_classes({"Bar": "Bar"})
        bar = container.get_shared_element("Bar")

        container.factory.set_element_map({"Foo": {"class": "Foo", "args": "@Bar"}})

        self.assertIs(container.get_shared_element("Bar"), bar)
        self.assertIs(container.get_shared_element("Foo").bar, bar)

    def test_container_reference(self):
        container = create_container_with_classes({"Recorder": {"class": "Recorder", "args": "@Container"}})

        self.assertIs(container.get_shared_element("Recorder").args[0], container)

    def test_definition_errors_surface_on_creation(self):
        container = create_container_with_classes({"Broken": {"args": "@Bar"}, "Bar": "Bar"})

        self.assertTrue(container.is_element_known("Broken"))
        with self.assertRaises(BadElementDefinitionError):
            container.get_shared_element("Broken")

    def test_circular_dependency_exhausts_recursion(self):
        container = create_container_with_classes(
            {"A": {"creator": lambda b: b, "args": "@B"}, "B": {"creator": lambda a: a, "args": "@A"}}
        )

        with self.assertRaises(RecursionError):
            container.get_shared_element("A")


class TestScopes(unittest.TestCase):
    """Test parent delegation, shadowing and submap isolation."""

    def test_parent_delegation(self):
        parent = create_container_with_classes({"Bar": "Bar"})
        child = parent.create_child_container()

        self.assertTrue(child.is_element_known("Bar"))
        self.assertFalse(child.is_element_known_locally("Bar"))
        self.assertIs(child.get_shared_element("Bar"), parent.get_shared_element("Bar"))
        with self.assertRaises(UnknownElementError):
            child.get_shared_local_element("Bar")

    def test_child_shadows_parent(self):
        parent = create_container_with_classes({"Bar": "Bar"})
        parent_bar = parent.get_shared_element("Bar")
        child = create_container_with_classes({"Bar": "Bar"}, parent=parent)

        child_bar = child.get_shared_element("Bar")

        self.assertIsNot(child_bar, parent_bar)
        self.assertIs(parent.get_shared_element("Bar"), parent_bar)

    def test_child_elements_use_parent_dependencies(self):
        parent = create_container_with_classes({"Bar": "Bar"})
        child = create_container_with_classes({"Foo": {"class": "Foo", "args": "@Bar"}}, parent=parent)

        self.assertIs(child.get_shared_element("Foo").bar, parent.get_shared_element("Bar"))
        self.assertFalse(parent.is_element_known("Foo"))

    def test_submap_isolation(self):
        container = create_container_with_classes(
            {
                "Foo": {
                    "class": "Foo",
                    "args": "@Bar",
                    "submap": {"Bar": {"creator": lambda: Bar(-1)}},
                }
            }
        )

        foo = container.get_shared_element("Foo")

        self.assertEqual(foo.bar.id, -1)
        self.assertFalse(container.is_element_known("Bar"))

    def test_submap_elements_reference_each_other(self):
        container = create_container_with_classes(
            {
                "Greeter": {
                    "class": "Greeter",
                    "args": "@Translator",
                    "submap": {
                        "Translator": {"class": "Translator", "args": "@Language"},
                        "Language": {"creator": lambda: "fr"},
                    },
                }
            }
        )

        self.assertEqual(container.get_shared_element("Greeter").translator.language, "fr")

    def test_submap_shadows_outer_definition(self):
        container = create_container_with_classes(
            {
                "Translator": {"class": "Translator", "args": ["outer"]},
                "Greeter": {
                    "class": "Greeter",
                    "args": "@Translator",
                    "submap": {"Translator": {"class": "Translator", "args": ["inner"]}},
                },
            }
        )

        self.assertEqual(container.get_shared_element("Greeter").translator.language, "inner")
        self.assertEqual(container.get_shared_element("Translator").language, "outer")

    def test_submap_receives_qualifier(self):
        container = create_container_with_classes(
            {
                "Greeter": {
                    "class": "Greeter",
                    "args": "@Translator.$",
                    "submap": {"Translator": {"class": "Translator", "args": "$"}},
                }
            }
        )

        self.assertEqual(container.get_shared_element("Greeter.es").translator.language, "es")

    def test_retained_submap_container_keeps_shared_elements(self):
        container = create_container_with_classes(
            {"Scope": {"creator": lambda scope: scope, "args": "@Container", "submap": {"Bar": "Bar"}}}
        )

        scope = container.get_shared_element("Scope")

        self.assertIs(scope.parent, container)
        self.assertIs(scope.get_shared_element("Bar"), scope.get_shared_element("Bar"))
        self.assertFalse(container.is_element_known("Bar"))


if __name__ == "__main__":
    unittest.main()
