#!/usr/bin/env python3
"""
Basic usage example for BuilderGen.

This example describes a Person POJO by hand, runs it through the
processor and prints the generated PersonBuilder source.
"""

from buildergen import (
    AccessorDescriptor,
    BuilderProcessor,
    ConstructorDescriptor,
    MemorySink,
    TypeDescriptor,
)


def main():
    """Demonstrate builder generation for a hand-built descriptor."""
    print("BuilderGen - Basic Usage Example")
    print("=" * 40)

    person = TypeDescriptor(
        simple_name="Person",
        enclosing_package="org.example",
        declared_accessors=[
            AccessorDescriptor("getName", "String"),
            AccessorDescriptor("setName", None, ("String",)),
            AccessorDescriptor("getAge", "int"),
            AccessorDescriptor("setAge", None, ("int",)),
            AccessorDescriptor("getTags", "java.util.List<String>"),
            AccessorDescriptor("setTags", None, ("java.util.List<String>",)),
        ],
        constructors=[ConstructorDescriptor()],
        annotations=("BuilderPattern",),
    )

    sink = MemorySink()
    result = BuilderProcessor(sink).process_round([person])

    if not result.ok:
        for diag in result.diagnostics:
            print(f"✗ {diag}")
        return

    for name in result.generated:
        print(f"\n✓ Generated {name}\n")
        print(sink[name])


if __name__ == "__main__":
    main()
