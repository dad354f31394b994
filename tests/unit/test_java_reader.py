"""
Unit tests for the Java source reader.

Tests the TypeDescriptors built from Java compilation units: accessors,
rendered types, ignore markers, constructors and superclass linking.
"""

import pytest

from buildergen.model import DiagnosticKind
from buildergen.sources import JavaSourceReader
from buildergen.utils.exceptions import SourceParseError


def accessor_map(type_desc):
    return {a.name: a for a in type_desc.declared_accessors}


class TestParsing:
    """Test a single compilation unit."""

    def test_class_metadata(self, sample_java_source):
        """Test name, package and annotations."""
        types = JavaSourceReader().parse(sample_java_source)
        assert len(types) == 1
        person = types[0]
        assert person.simple_name == "Person"
        assert person.enclosing_package == "org.example"
        assert person.qualified_name == "org.example.Person"
        assert person.is_annotated_with("BuilderPattern")

    def test_accessors(self, sample_java_source):
        """Test rendered return and parameter types."""
        person = JavaSourceReader().parse(sample_java_source)[0]
        accessors = accessor_map(person)
        assert accessors["getName"].return_type == "String"
        assert accessors["getAge"].return_type == "int"
        assert accessors["getTags"].return_type == "java.util.List<String>"
        assert accessors["getAddresses"].return_type == "java.util.Set<Address>"
        assert accessors["setName"].return_type is None
        assert accessors["setName"].parameter_types == ("String",)
        assert accessors["setTags"].parameter_types == ("java.util.List<String>",)

    def test_ignore_marker(self, sample_java_source):
        """Test that the ignore annotation is read from methods."""
        accessors = accessor_map(JavaSourceReader().parse(sample_java_source)[0])
        assert accessors["getDisplayName"].is_ignored
        assert not accessors["getName"].is_ignored

    def test_static_methods_skipped(self, sample_java_source):
        """Test that static methods are not accessors."""
        accessors = accessor_map(JavaSourceReader().parse(sample_java_source)[0])
        assert "empty" not in accessors

    def test_declared_constructor(self, sample_java_source):
        """Test the declared no-argument constructor."""
        person = JavaSourceReader().parse(sample_java_source)[0]
        assert person.has_no_arg_constructor()

    def test_implicit_default_constructor(self):
        """Test that a class without constructors gets the implicit one."""
        code = "package p; public class A { public int getX() { return 0; } }"
        assert JavaSourceReader().parse(code)[0].has_no_arg_constructor()

    def test_argument_constructor_only(self):
        """Test a class whose only constructor takes arguments."""
        code = "package p; public class A { private int x; public A(int x) { this.x = x; } }"
        type_desc = JavaSourceReader().parse(code)[0]
        assert not type_desc.has_no_arg_constructor()
        assert type_desc.constructors[0].parameter_types == ("int",)

    def test_default_package(self):
        """Test a compilation unit without a package declaration."""
        type_desc = JavaSourceReader().parse("public class A { }")[0]
        assert type_desc.enclosing_package is None
        assert type_desc.qualified_name == "A"

    def test_interfaces_and_enums_skipped(self):
        """Test that only classes are read."""
        code = "package p; interface I { int getX(); } enum E { ONE } class C { }"
        assert [t.simple_name for t in JavaSourceReader().parse(code)] == ["C"]

    def test_qualified_annotation(self):
        """Test a fully qualified class annotation."""
        code = "package p; @info.narmontas.jpatterns.annotation.BuilderPattern public class A { }"
        assert JavaSourceReader().parse(code)[0].is_annotated_with("BuilderPattern")

    def test_syntax_error(self):
        """Test that invalid Java raises SourceParseError."""
        with pytest.raises(SourceParseError) as exc_info:
            JavaSourceReader().parse("public class { }", source_file="Broken.java")
        assert exc_info.value.source_file == "Broken.java"


class TestTypeRendering:
    """Test how declared types are rendered and qualified."""

    def parse_return(self, declaration, imports=""):
        code = f"package p; {imports} public class A {{ public {declaration} getX() {{ return null; }} }}"
        return accessor_map(JavaSourceReader().parse(code)[0])["getX"].return_type

    def test_qualified_type_kept(self):
        """Test a type written fully qualified."""
        assert self.parse_return("java.util.List<java.lang.Integer>") == "java.util.List<java.lang.Integer>"

    def test_explicit_import_resolved(self):
        """Test qualification through a single-type import."""
        assert self.parse_return("Item", "import shop.Item;") == "shop.Item"

    def test_wildcard_java_util_import(self):
        """Test qualification of common java.util names under a wildcard import."""
        assert self.parse_return("Set<Item>", "import java.util.*;") == "java.util.Set<Item>"

    def test_unresolved_name_kept_simple(self):
        """Test that names without an import stay as written."""
        assert self.parse_return("Item") == "Item"

    def test_wildcards(self):
        """Test wildcard type arguments."""
        assert self.parse_return("List<? extends Item>") == "List<? extends Item>"
        assert self.parse_return("List<?>") == "List<?>"

    def test_multiple_arguments_and_nesting(self):
        """Test nested generic arguments."""
        assert self.parse_return("Map<String, List<Integer>>") == "Map<String, List<Integer>>"

    def test_arrays(self):
        """Test array dimensions."""
        assert self.parse_return("int[]") == "int[]"
        assert self.parse_return("String[][]") == "String[][]"


class TestLinking:
    """Test superclass resolution across files."""

    def test_superclass_in_same_package(self):
        """Test linking a parent declared in another unit."""
        reader = JavaSourceReader()
        reader.parse("package p; public class Base { public long getId() { return 0; } public void setId(long id) { } }")
        child = reader.parse("package p; public class Child extends Base { }")[0]
        reader.link()
        assert child.superclass is not None
        assert child.superclass.qualified_name == "p.Base"
        assert [a.name for a in child.accessors()] == ["getId", "setId"]

    def test_superclass_through_import(self):
        """Test linking a parent from another package."""
        reader = JavaSourceReader()
        reader.parse("package base; public class Entity { }")
        child = reader.parse("package app; import base.Entity; public class User extends Entity { }")[0]
        reader.link()
        assert child.superclass.qualified_name == "base.Entity"

    def test_qualified_superclass(self):
        """Test a superclass written fully qualified."""
        reader = JavaSourceReader()
        reader.parse("package base; public class Entity { }")
        child = reader.parse("package app; public class User extends base.Entity { }")[0]
        reader.link()
        assert child.superclass.qualified_name == "base.Entity"

    def test_unknown_superclass(self):
        """Test that a parent outside the sources leaves the type unlinked."""
        reader = JavaSourceReader()
        child = reader.parse("package p; public class A extends java.util.ArrayList<String> { }")[0]
        reader.link()
        assert child.superclass is None


class TestReadPaths:
    """Test reading files and directories."""

    def test_directory_walk(self, tmp_path, sample_java_source):
        """Test recursive discovery of .java files."""
        pkg = tmp_path / "org" / "example"
        pkg.mkdir(parents=True)
        (pkg / "Person.java").write_text(sample_java_source)
        (pkg / "Address.java").write_text("package org.example; public class Address { }")
        (pkg / "notes.txt").write_text("not java")

        types, diagnostics = JavaSourceReader().read_paths([str(tmp_path)])
        assert sorted(t.simple_name for t in types) == ["Address", "Person"]
        assert diagnostics == []

    def test_invalid_file_reported(self, tmp_path):
        """Test that a broken file becomes a diagnostic and the rest is read."""
        (tmp_path / "Good.java").write_text("package p; public class Good { }")
        (tmp_path / "Bad.java").write_text("package p; public class { }")

        types, diagnostics = JavaSourceReader().read_paths([str(tmp_path)])
        assert [t.simple_name for t in types] == ["Good"]
        assert len(diagnostics) == 1
        assert diagnostics[0].kind is DiagnosticKind.SOURCE_PARSE_FAILURE
        assert diagnostics[0].subject_type.endswith("Bad.java")

    def test_missing_file_reported(self, tmp_path):
        """Test that an unreadable path becomes a diagnostic."""
        types, diagnostics = JavaSourceReader().read_paths([str(tmp_path / "Missing.java")])
        assert types == []
        assert diagnostics[0].kind is DiagnosticKind.SOURCE_PARSE_FAILURE

    def test_undecodable_file_reported(self, tmp_path):
        """Test that a file that is not UTF-8 becomes a diagnostic."""
        (tmp_path / "Good.java").write_text("package p; public class Good { }")
        (tmp_path / "Latin.java").write_bytes(b"package p; public class Latin { String s = \"\xff\xfe\"; }")

        types, diagnostics = JavaSourceReader().read_paths([str(tmp_path)])
        assert [t.simple_name for t in types] == ["Good"]
        assert [d.kind for d in diagnostics] == [DiagnosticKind.SOURCE_PARSE_FAILURE]
        assert "not valid UTF-8" in diagnostics[0].message

    def test_read_file_undecodable(self, tmp_path):
        """Test that read_file raises SourceParseError for bad bytes."""
        path = tmp_path / "Bad.java"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(SourceParseError) as exc_info:
            JavaSourceReader().read_file(str(path))
        assert exc_info.value.source_file == str(path)
