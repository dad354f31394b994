"""
Pytest configuration and shared fixtures for BuilderGen tests.

This module provides common type descriptors, configuration and
helpers used across the test suite.
"""

import pytest

from buildergen.model import AccessorDescriptor, ConstructorDescriptor, TypeDescriptor
from buildergen.utils.config import BuilderGenConfig, set_config


def getter(name, return_type, ignored=False):
    """Parameterless accessor."""
    return AccessorDescriptor(name, return_type, (), ignored)


def setter(name, param_type):
    """Single-argument void accessor."""
    return AccessorDescriptor(name, None, (param_type,))


def pojo(simple_name, package=None, fields=(), constructors=None, extra=(), annotations=("BuilderPattern",)):
    """
    Build a POJO descriptor from (suffix, type) pairs, with a getter and a
    setter per pair plus any ``extra`` accessors.
    """
    accessors = []
    for suffix, type_name in fields:
        accessors.append(getter("get" + suffix, type_name))
        accessors.append(setter("set" + suffix, type_name))
    accessors.extend(extra)
    if constructors is None:
        constructors = [ConstructorDescriptor()]
    return TypeDescriptor(
        simple_name=simple_name,
        enclosing_package=package,
        declared_accessors=accessors,
        constructors=constructors,
        annotations=tuple(annotations),
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test on default configuration, independent of the working directory."""
    monkeypatch.delenv("BUILDERGEN_STRICT_POJO", raising=False)
    monkeypatch.delenv("BUILDERGEN_OUTPUT_DIR", raising=False)
    config = BuilderGenConfig(str(tmp_path / "absent.json"))
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def person_type():
    """The Person type: a String name and a List<String> of tags."""
    return pojo("Person", "org.example", fields=[("Name", "String"), ("Tags", "List<String>")])


@pytest.fixture
def mixed_type():
    """A type with members in every category."""
    return pojo(
        "Order",
        "shop",
        fields=[
            ("Id", "long"),
            ("Customer", "java.lang.String"),
            ("Items", "java.util.List<shop.Item>"),
            ("Codes", "java.util.Set<java.lang.Integer>"),
            ("Paid", "boolean"),
            ("Owner", "shop.Customer"),
        ],
    )


@pytest.fixture
def sample_java_source():
    """A small annotated Java compilation unit."""
    return """
package org.example;

import java.util.List;
import java.util.Set;
import info.narmontas.jpatterns.annotation.BuilderPattern;
import info.narmontas.jpatterns.annotation.BuilderPatternIgnore;

@BuilderPattern
public class Person {
    private String name;
    private int age;
    private List<String> tags;
    private Set<Address> addresses;

    public Person() {
    }

    public String getName() { return name; }
    public void setName(String name) { this.name = name; }

    public int getAge() { return age; }
    public void setAge(int age) { this.age = age; }

    public List<String> getTags() { return tags; }
    public void setTags(List<String> tags) { this.tags = tags; }

    public Set<Address> getAddresses() { return addresses; }
    public void setAddresses(Set<Address> addresses) { this.addresses = addresses; }

    @BuilderPatternIgnore
    public String getDisplayName() { return name + " (" + age + ")"; }
    public void setDisplayName(String ignored) { }

    public static Person empty() { return new Person(); }
}
"""


@pytest.fixture
def make_pojo():
    """Factory for POJO descriptors; see ``pojo``."""
    return pojo


# Pytest hooks for test collection
def pytest_collection_modifyitems(config, items):
    """Add markers based on the test directory."""
    for item in items:
        if "/unit/" in item.nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/filecheck/" in item.nodeid:
            item.add_marker(pytest.mark.filecheck)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "filecheck: FileCheck-style validation of generated builders"
    )
