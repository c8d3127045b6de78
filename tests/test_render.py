"""Tests for the debug tree renderer."""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from javastruct import parse
from javastruct.render import render_tree


def test_render_full_unit():
    source = """
    package com.example;
    import java.util.List;
    @Entity(name="t")
    public class Foo {
        @Id() private Long id;
        String name;
        public String getName(int a) { return name; }
    }
    """
    assert render_tree(parse(source)) == "\n".join([
        "CompilationUnit",
        "  package: com.example",
        "  imports:",
        "    java.util.List",
        "  annotations:",
        '    @Entity(name="t")',
        "  classes:",
        "    public class Foo",
        "      annotations:",
        "        @Id()",
        "      fields:",
        "        private Long id",
        "        String name",
        "      methods:",
        "        public String getName(int a)",
    ])


def test_render_empty_unit():
    assert render_tree(parse("")) == "CompilationUnit\n  package: <default>"


def test_render_named_types():
    rendered = render_tree(parse("class A { java.util.Date when; Result run() {} }"))
    assert "java.util.Date when" in rendered
    assert "Result run()" in rendered
