"""
Java source reader.

Builds TypeDescriptors from Java compilation units using javalang, standing
in for a compiler's reflection API:

- top-level classes with their package and class annotations
- non-static methods with rendered return and parameter types
- ``@BuilderPatternIgnore`` on a method as the ignore marker
- declared constructors, or Java's implicit default constructor
- superclasses declared anywhere in the same set of sources

Type names are qualified through single-type imports (and the common
``java.util`` names under ``import java.util.*``) so the generated builder
compiles without imports of its own.
"""

import os
from typing import Dict, Iterable, List, Optional, Tuple

import javalang

from ..model import (
    AccessorDescriptor,
    ConstructorDescriptor,
    Diagnostic,
    DiagnosticKind,
    TypeDescriptor,
)
from ..utils.constants import IGNORE_ANNOTATION
from ..utils.exceptions import SourceParseError
from ..utils.logging import get_logger
from ..utils.naming import raw_type

logger = get_logger(__name__)

_JAVA_UTIL_NAMES = frozenset({
    "List", "Set", "Map", "Collection", "ArrayList", "LinkedList",
    "HashSet", "LinkedHashSet", "TreeSet", "HashMap", "LinkedHashMap",
    "TreeMap", "Optional", "Date", "UUID",
})


def _annotation_name(annotation) -> str:
    # annotations may be written qualified
    return annotation.name.rsplit(".", 1)[-1]


class _ImportScope:
    """Resolves simple type names against one compilation unit's imports."""

    def __init__(self, imports):
        self.explicit: Dict[str, str] = {}
        self.wildcards: List[str] = []
        for imp in imports or []:
            if imp.static:
                continue
            if imp.wildcard:
                self.wildcards.append(imp.path)
            else:
                self.explicit[imp.path.rsplit(".", 1)[-1]] = imp.path

    def resolve(self, name: str) -> str:
        if "." in name:
            return name
        if name in self.explicit:
            return self.explicit[name]
        if "java.util" in self.wildcards and name in _JAVA_UTIL_NAMES:
            return f"java.util.{name}"
        return name


class JavaSourceReader:
    """
    Reads Java sources into TypeDescriptors.

    A reader accumulates every class it has parsed so that ``link()`` can
    attach superclasses found in other files.
    """

    def __init__(self):
        self._by_qualified: Dict[str, TypeDescriptor] = {}
        self._pending: List[Tuple[TypeDescriptor, str]] = []

    @property
    def types(self) -> List[TypeDescriptor]:
        return list(self._by_qualified.values())

    # ------------------------------------------------------------------
    # Parsing entry points
    # ------------------------------------------------------------------

    def parse(self, code: str, source_file: Optional[str] = None) -> List[TypeDescriptor]:
        """Parse one compilation unit and return its top-level classes."""
        try:
            tree = javalang.parse.parse(code)
        except javalang.parser.JavaSyntaxError as e:
            raise SourceParseError(f"Java syntax error: {e.description}", source_file) from e
        except javalang.tokenizer.LexerError as e:
            raise SourceParseError(f"Java lexer error: {e}", source_file) from e

        package = tree.package.name if tree.package is not None else None
        scope = _ImportScope(tree.imports)

        parsed: List[TypeDescriptor] = []
        for decl in tree.types:
            if not isinstance(decl, javalang.tree.ClassDeclaration):
                continue
            type_desc = self._describe_class(decl, package, scope)
            self._by_qualified[type_desc.qualified_name] = type_desc
            if decl.extends is not None:
                self._pending.append((type_desc, raw_type(self.render_type(decl.extends, scope))))
            parsed.append(type_desc)

        logger.debug(f"Parsed {len(parsed)} classes from {source_file or '<memory>'}")
        return parsed

    def read_file(self, path: str) -> List[TypeDescriptor]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                code = f.read()
        except OSError as e:
            raise SourceParseError(f"Cannot read source: {e}", path) from e
        except UnicodeDecodeError as e:
            raise SourceParseError(f"Source is not valid UTF-8: {e}", path) from e
        return self.parse(code, source_file=path)

    def read_paths(self, paths: Iterable[str]) -> Tuple[List[TypeDescriptor], List[Diagnostic]]:
        """
        Read files and directories (recursively, ``*.java``), then link.

        Unreadable or invalid files are reported as diagnostics and skipped.
        """
        diagnostics: List[Diagnostic] = []
        for path in self._expand(paths):
            try:
                self.read_file(path)
            except SourceParseError as e:
                logger.warning(str(e))
                diagnostics.append(Diagnostic(DiagnosticKind.SOURCE_PARSE_FAILURE, str(e), path))
        self.link()
        return self.types, diagnostics

    def link(self) -> None:
        """Attach superclasses; same-package matches win over other packages."""
        for type_desc, super_name in self._pending:
            parent = self._lookup(super_name, type_desc.enclosing_package)
            if parent is None or parent is type_desc:
                logger.debug(f"Superclass {super_name} of {type_desc.qualified_name} not in sources")
                continue
            type_desc.superclass = parent
        self._pending = []

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _expand(paths: Iterable[str]) -> List[str]:
        files: List[str] = []
        for path in paths:
            if os.path.isdir(path):
                for root, dirs, names in os.walk(path):
                    dirs.sort()
                    for name in sorted(names):
                        if name.endswith(".java"):
                            files.append(os.path.join(root, name))
            else:
                files.append(path)
        return files

    def _lookup(self, name: str, package: Optional[str]) -> Optional[TypeDescriptor]:
        if name in self._by_qualified:
            return self._by_qualified[name]
        if package and f"{package}.{name}" in self._by_qualified:
            return self._by_qualified[f"{package}.{name}"]
        for type_desc in self._by_qualified.values():
            if type_desc.simple_name == name:
                return type_desc
        return None

    def _describe_class(self, decl, package: Optional[str], scope: _ImportScope) -> TypeDescriptor:
        accessors = []
        for method in decl.methods:
            if "static" in (method.modifiers or set()):
                continue
            accessors.append(AccessorDescriptor(
                name=method.name,
                return_type=self.render_type(method.return_type, scope),
                parameter_types=tuple(self.render_type(p.type, scope) for p in method.parameters),
                is_ignored=any(_annotation_name(a) == IGNORE_ANNOTATION for a in method.annotations or []),
            ))

        constructors = [
            ConstructorDescriptor(tuple(self.render_type(p.type, scope) for p in ctor.parameters))
            for ctor in decl.constructors
        ]
        if not constructors:
            constructors = [ConstructorDescriptor()]

        return TypeDescriptor(
            simple_name=decl.name,
            enclosing_package=package,
            declared_accessors=accessors,
            constructors=constructors,
            annotations=tuple(_annotation_name(a) for a in decl.annotations or []),
        )

    def render_type(self, node, scope: Optional[_ImportScope] = None, resolve: bool = True) -> Optional[str]:
        """Render a javalang type node as Java text; None stands for ``void``."""
        if node is None:
            return None

        name = node.name
        if isinstance(node, javalang.tree.ReferenceType):
            sub_type = getattr(node, "sub_type", None)
            if scope is not None and resolve and sub_type is None:
                name = scope.resolve(name)
            arguments = getattr(node, "arguments", None)
            if arguments is not None:
                name += "<" + ", ".join(self._render_argument(a, scope) for a in arguments) + ">"
            if sub_type is not None:
                # qualified name such as java.util.List: segments are never import-resolved
                name += "." + self.render_type(sub_type, scope, resolve=False)

        dimensions = getattr(node, "dimensions", None) or []
        return name + "[]" * len(dimensions)

    def _render_argument(self, argument, scope: Optional[_ImportScope]) -> str:
        pattern = argument.pattern_type
        if argument.type is None:
            return "?"
        rendered = self.render_type(argument.type, scope)
        if pattern in ("extends", "super"):
            return f"? {pattern} {rendered}"
        return rendered
