#!/usr/bin/env python3
"""
Demonstration of submaps: element definitions with their own nested scope.
"""

from dimap import UnknownElementError, create_container, create_locator


class Handler:
    def __init__(self, name: str, formatter: "Formatter"):
        self.name = name
        self.formatter = formatter

    def handle(self, message: str) -> str:
        return f"{self.name}: {self.formatter.format(message)}"


class Formatter:
    def __init__(self, prefix: str):
        self.prefix = prefix

    def format(self, message: str) -> str:
        return f"{self.prefix}{message}"


ELEMENT_MAP = {
    "Formatter": {"creator": Formatter, "args": ["> "]},
    "Handler": {
        "creator": Handler,
        "args": ["$", "@Formatter"],
        "submap": {"Formatter": {"creator": Formatter, "args": ["* "]}},
    },
    "PlainHandler": {"creator": Handler, "args": ["plain", "@Formatter"]},
    "Scope": {
        "creator": lambda container: container,
        "args": "@Container",
        "submap": {"Secret": {"creator": lambda: "only visible inside the scope"}},
    },
}


def main() -> None:
    print("=== submap demo ===\n")
    container = create_container(ELEMENT_MAP)

    print(container.get_shared_element("Handler.audit").handle("submap formatter"))
    print(container.get_shared_element("PlainHandler").handle("outer formatter"))

    scope = container.get_shared_element("Scope")
    print(f"\nscope secret: {scope.get_shared_element('Secret')}")
    print(f"outer container knows Secret: {container.is_element_known('Secret')}")

    locator = create_locator(scope)
    print(f"locator has Secret: {locator.has('Secret')}")
    print(f"locator has Formatter (parent only): {locator.has('Formatter')}")
    try:
        locator.get("Formatter")
    except UnknownElementError as e:
        print(f"locator.get: {e}")

    print("\n✅ Demo finished")


if __name__ == "__main__":
    main()
