#!/usr/bin/env python3
"""
Demonstration of dimap element maps.

This demo shows:
1. Class name and creator function definitions
2. Shared and private elements
3. Element qualifiers and qualifier forwarding
4. Parent and child containers
"""

from dataclasses import dataclass

from dimap import create_container


@dataclass
class Config:
    app_name: str
    debug: bool = False


class Database:
    def __init__(self, connection_string: str):
        self.connection_string = connection_string

    def query(self, sql: str) -> str:
        return f"DB[{self.connection_string}]: {sql}"


class Translator:
    def __init__(self, language: str | None):
        self.language = language or "en"

    def translate(self, text: str) -> str:
        return f"[{self.language}] {text}"


class Greeter:
    def __init__(self, translator: Translator, config: Config):
        self.translator = translator
        self.config = config

    def greet(self, name: str) -> str:
        return self.translator.translate(f"Hello {name}, welcome to {self.config.app_name}")


class Request:
    _counter = 0

    def __init__(self, db: Database):
        Request._counter += 1
        self.id = Request._counter
        self.db = db


ELEMENT_MAP = {
    "Config": {"creator": Config, "args": ["DemoApp", True]},
    "Database": {"class": "Database", "args": "postgresql://localhost/demo"},
    "Translator": {"class": "Translator", "args": "$"},
    "Greeter": {"class": "Greeter", "args": ["@Translator.$", "@Config"]},
    "Request": {"class": "Request", "args": "@Database"},
}


def main() -> None:
    print("=== dimap demo ===\n")

    container = create_container(ELEMENT_MAP)
    assert container.factory is not None
    for cls in (Database, Translator, Greeter, Request):
        container.factory.class_loader.register(cls.__name__, cls)

    print("1. Shared elements")
    db = container.get_shared_element("Database")
    print(f"   {db.query('SELECT 1')}")
    print(f"   same instance on second lookup: {db is container.get_shared_element('Database')}")

    print("\n2. Private elements")
    first = container.create_private_element("Request")
    second = container.create_private_element("Request")
    print(f"   request ids: {first.id}, {second.id}")
    print(f"   requests share the database: {first.db is second.db is db}")

    print("\n3. Qualifiers")
    for key in ("Greeter", "Greeter.de", "Greeter.fr"):
        print(f"   {key}: {container.get_shared_element(key).greet('Alice')}")

    print("\n4. Child containers")
    child = container.create_child_container()
    child.set_shared_element("Config", Config("ChildApp"))
    print(f"   child sees parent database: {child.get_shared_element('Database') is db}")
    print(f"   child config: {child.get_shared_element('Config').app_name}")
    print(f"   parent config: {container.get_shared_element('Config').app_name}")

    print("\n✅ Demo finished")


if __name__ == "__main__":
    main()
