import pytest

from quark.reflection import (
    ReflectionFieldInfo,
    ReflectionInfo,
    ReflectionParser,
    parse_struct_dump,
)


def test_simple_struct():
    info = parse_struct_dump(["struct Foo {", "int x : ", "float y : ", "}"], 8)
    assert info == ReflectionInfo(
        "Foo",
        8,
        [ReflectionFieldInfo("int", "x"), ReflectionFieldInfo("float", "y")],
    )


def test_c_style_struct_name():
    info = parse_struct_dump(["Bar {", "int value : "], 4)
    assert info.name == "Bar"
    assert info.fields == [ReflectionFieldInfo("int", "value")]


def test_nested_struct_fields_skipped():
    lines = [
        "struct Outer {",
        "int a : ",
        "struct Inner inner : ",
        "struct Inner {",
        "int b : ",
        "  }",
        "int c : ",
        "}",
    ]
    info = parse_struct_dump(lines, 12)
    assert [f.name for f in info.fields] == ["a", "inner", "c"]
    assert info.fields[1].type == "Inner"


def test_single_character_lines_ignored():
    parser = ReflectionParser(0)
    parser.feed("x")
    parser.feed("")
    assert parser.finish() == ReflectionInfo(None, 0, [])


def test_capacity_exceeded_raises():
    parser = ReflectionParser(0, capacity=1)
    parser.feed("struct S {")
    parser.feed("int a : ")
    with pytest.raises(ValueError):
        parser.feed("int b : ")