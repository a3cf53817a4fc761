import pytest

from dbuswire.containers import DictEntry, Struct, Variant
from dbuswire.integers import Int32, Uint32
from dbuswire.ostream import MessageOStream
from dbuswire.scalars import Byte, Double, ObjectPath, String
from dbuswire.validation import InvalidTypeError


def _marshalled(value):
    stream = MessageOStream()
    value.marshall(stream)
    return bytes(stream.data)


def test_struct_of_two_uint32_marshalls_in_order():
    s = Struct()
    s.add(Uint32(56))
    s.add(Uint32(78))
    assert _marshalled(s) == bytes([56, 0, 0, 0, 78, 0, 0, 0])


def test_struct_entries_and_indexing():
    s = Struct(Uint32(12345), Uint32(864))
    assert len(s) == 2
    assert s[0].as_string() == "12345"
    assert s[1].as_string() == "864"
    assert s.signature == "(uu)"


def test_struct_starts_on_8_byte_boundary():
    stream = MessageOStream()
    stream.write_byte(7)
    Struct(Byte(1)).marshall(stream)
    assert bytes(stream.data) == bytes([7, 0, 0, 0, 0, 0, 0, 0, 1])


def test_struct_clear():
    s = Struct(Uint32(1), Uint32(2))
    s.clear()
    assert len(s) == 0
    assert s.signature == "()"


def test_struct_rejects_non_dbus_values():
    with pytest.raises(TypeError):
        Struct().add(5)


def test_struct_to_string_and_as_string():
    s = Struct(Double(4.5), Byte(32))
    assert s.to_string() == "Struct (dy) <\n   Double 4.5\n   Byte 32 (0x20)\n>\n"
    assert s.as_string() == "[struct]"


def test_dictentry_string_uint32_marshall():
    entry = DictEntry(String("Dictionary"), Uint32(24))
    expected = (
        bytes([10, 0, 0, 0]) + b"Dictionary" + bytes([0, 0]) + bytes([24, 0, 0, 0])
    )
    assert _marshalled(entry) == expected


def test_dictentry_string_uint32_to_string():
    entry = DictEntry(String("Dictionary"), Uint32(24))
    assert entry.signature == "{su}"
    assert entry.to_string() == (
        "DictEntry ({su}) : {\n"
        '   key:      String (10) "Dictionary"\n'
        "   value:    Uint32 24 (0x0018)\n"
        "}\n"
    )


def test_dictentry_with_struct_value():
    entry = DictEntry(Int32(85), Struct(Double(4.5), Byte(32)))
    assert entry.signature == "{i(dy)}"
    assert entry.to_string() == (
        "DictEntry ({i(dy)}) : {\n"
        "   key:      Int32 85 (0x0055)\n"
        "   value:    Struct (dy) <\n"
        "      Double 4.5\n"
        "      Byte 32 (0x20)\n"
        "   >\n"
        "}\n"
    )
    expected = (
        bytes([85, 0, 0, 0, 0, 0, 0, 0])
        + bytes([0, 0, 0, 0, 0, 0, 0x12, 0x40])
        + bytes([32])
    )
    assert _marshalled(entry) == expected


def test_dictentry_nested_to_string():
    entry = DictEntry(String("KeyKey"), Struct(Byte(85), String("BrightSign")))
    assert entry.to_string() == (
        "DictEntry ({s(ys)}) : {\n"
        '   key:      String (6) "KeyKey"\n'
        "   value:    Struct (ys) <\n"
        "      Byte 85 (0x55)\n"
        '      String (10) "BrightSign"\n'
        "   >\n"
        "}\n"
    )


def test_dictentry_rejects_non_basic_key():
    with pytest.raises(InvalidTypeError, match="Invalid basic type: v"):
        DictEntry(Variant(String("Key")), Uint32(5))


def test_dictentry_set_keeps_old_value_on_bad_key():
    entry = DictEntry(String("a"), Uint32(1))
    with pytest.raises(InvalidTypeError):
        entry.set(Struct(Uint32(1)), Uint32(2))
    assert entry.signature == "{su}"
    assert entry.value.as_string() == "1"


def test_dictentry_plain_python_values():
    assert DictEntry("name", "value").signature == "{ss}"
    entry = DictEntry("count", 3)
    assert entry.signature == "{su}"
    assert entry.value.as_string() == "3"
    assert entry.as_string() == "[DictEntry]"


def test_variant_uint32_marshall():
    variant = Variant(Uint32(42))
    assert _marshalled(variant) == bytes([1, ord("u"), 0, 0, 42, 0, 0, 0])
    assert variant.as_string() == "42"


def test_variant_to_string():
    assert Variant(Uint32(42)).to_string() == "Variant (u)\n   Uint32 42 (0x002a)\n"


def test_variant_object_path():
    variant = Variant(ObjectPath("/object/path"))
    assert variant.contained_signature == "o"
    assert variant.signature == "v"
    assert _marshalled(variant)[:3] == bytes([1, ord("o"), 0])


def test_variant_rejects_non_dbus_value():
    with pytest.raises(TypeError):
        Variant("plain")