"""
Tests for EnumMember and the shared symbol tables.

Covers:
- Symbol registration (fluent value() calls, buffered until registration)
- to_string / from_string bijection over registered symbols
- Lookup failures raising SymbolNotFoundError without side effects
- Symbol tables shared per (owner type, enum type)
- Conflicting and late symbol registration
- One-time table creation under concurrent first use
"""

import threading
from dataclasses import dataclass
from enum import Enum, IntEnum

import pytest
from bidict import frozenbidict

from memberwise import enum_member, member
from memberwise.fields.symbol_table import SymbolTable, SymbolTableRegistry
from memberwise.registration.type_members import TypeMembers
from memberwise.utilities.errors import RegistrationError, SymbolNotFoundError


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class Priority(IntEnum):
    LOW = 0
    HIGH = 1


@dataclass
class Shape:
    color: Color = Color.RED
    name: str = ""


@dataclass
class Car:
    paint: Color = Color.RED
    trim: Color = Color.GREEN
    priority: Priority = Priority.LOW


class Lamp:
    def __init__(self):
        self._color = Color.RED

    def get_color(self) -> Color:
        return self._color

    def set_color(self, color: Color) -> None:
        self._color = color


@pytest.fixture
def symbol_tables():
    return SymbolTableRegistry()


@pytest.fixture
def shape_color(symbol_tables):
    color = enum_member("color", "color").value("RED", Color.RED).value("GREEN", Color.GREEN)
    TypeMembers(Shape, [color], symbol_tables)
    return color


# ===========================================================================
# A. Symbols
# ===========================================================================

class TestSymbols:

    def test_to_string(self, shape_color):
        assert shape_color.to_string(Color.RED) == "RED"
        assert shape_color.to_string(Color.GREEN) == "GREEN"

    def test_from_string(self, shape_color):
        assert shape_color.from_string("RED") is Color.RED
        assert shape_color.from_string("GREEN") is Color.GREEN

    def test_bijection_over_registered_symbols(self, shape_color):
        for value in (Color.RED, Color.GREEN):
            assert shape_color.from_string(shape_color.to_string(value)) is value
        for name in ("RED", "GREEN"):
            assert shape_color.to_string(shape_color.from_string(name)) == name

    def test_unregistered_value(self, shape_color, symbol_tables):
        with pytest.raises(SymbolNotFoundError) as exc_info:
            shape_color.to_string(Color.BLUE)
        assert exc_info.value.symbol is Color.BLUE
        assert exc_info.value.enum_type is Color
        # Failed lookups never insert a default entry
        assert len(symbol_tables.find(Shape, Color)) == 2

    def test_unregistered_name(self, shape_color, symbol_tables):
        with pytest.raises(SymbolNotFoundError):
            shape_color.from_string("BLUE")
        with pytest.raises(LookupError):
            shape_color.from_string("")
        assert len(symbol_tables.find(Shape, Color)) == 2

    def test_symbols_snapshot(self, shape_color):
        symbols = shape_color.symbols()
        assert isinstance(symbols, frozenbidict)
        assert dict(symbols) == {"RED": Color.RED, "GREEN": Color.GREEN}
        assert symbols.inverse[Color.GREEN] == "GREEN"

    def test_register_symbol_alias(self, symbol_tables):
        color = enum_member("color", "color").register_symbol("BLUE", Color.BLUE)
        TypeMembers(Shape, [color], symbol_tables)
        assert color.to_string(Color.BLUE) == "BLUE"

    def test_accessor_enum_member(self, symbol_tables):
        color = enum_member("color", Lamp.get_color, Lamp.set_color).value("BLUE", Color.BLUE)
        TypeMembers(Lamp, [color], symbol_tables)
        lamp = Lamp()
        color.set(lamp, color.from_string("BLUE"))
        assert lamp.get_color() is Color.BLUE

    def test_is_enum(self, shape_color):
        assert shape_color.is_enum()
        assert shape_color.as_enum() is shape_color
        assert shape_color.enum_type is Color

    def test_int_enum(self, symbol_tables):
        priority = enum_member("priority", "priority").value("low", Priority.LOW).value("high", Priority.HIGH)
        TypeMembers(Car, [priority], symbol_tables)
        assert priority.to_string(Priority.HIGH) == "high"
        assert priority.from_string("low") is Priority.LOW


# ===========================================================================
# B. Shared tables
# ===========================================================================

class TestSharedTables:

    def test_members_of_one_owner_share_a_table(self, symbol_tables):
        paint = enum_member("paint", "paint").value("RED", Color.RED)
        trim = enum_member("trim", "trim").value("GREEN", Color.GREEN)
        TypeMembers(Car, [paint, trim], symbol_tables)
        assert paint.to_string(Color.GREEN) == "GREEN"
        assert trim.from_string("RED") is Color.RED

    def test_owners_have_separate_tables(self, symbol_tables, shape_color):
        paint = enum_member("paint", "paint").value("crimson", Color.RED)
        TypeMembers(Car, [paint], symbol_tables)
        assert paint.to_string(Color.RED) == "crimson"
        assert shape_color.to_string(Color.RED) == "RED"
        assert symbol_tables.find(Car, Color) is not symbol_tables.find(Shape, Color)

    def test_same_pair_twice_is_a_no_op(self, symbol_tables):
        paint = enum_member("paint", "paint").value("RED", Color.RED)
        trim = enum_member("trim", "trim").value("RED", Color.RED)
        TypeMembers(Car, [paint, trim], symbol_tables)
        assert len(symbol_tables.find(Car, Color)) == 1

    def test_table_created_once_under_concurrency(self, symbol_tables):
        tables = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            tables.append(symbol_tables.table_for(Shape, Color))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(tables) == 8
        assert all(table is tables[0] for table in tables)


# ===========================================================================
# C. Registration errors
# ===========================================================================

class TestSymbolRegistrationErrors:

    def test_value_with_two_names(self, symbol_tables):
        color = enum_member("color", "color").value("RED", Color.RED).value("CRIMSON", Color.RED)
        with pytest.raises(RegistrationError):
            TypeMembers(Shape, [color], symbol_tables)

    def test_name_with_two_values(self, symbol_tables):
        color = enum_member("color", "color").value("RED", Color.RED).value("RED", Color.GREEN)
        with pytest.raises(RegistrationError):
            TypeMembers(Shape, [color], symbol_tables)

    def test_value_of_wrong_type(self, symbol_tables):
        color = enum_member("color", "color").value("ONE", 1)
        with pytest.raises(RegistrationError):
            TypeMembers(Shape, [color], symbol_tables)

    def test_conflict_writes_no_symbols(self, symbol_tables):
        color = enum_member("color", "color").value("RED", Color.RED).value("ROUGE", Color.RED)
        with pytest.raises(RegistrationError):
            TypeMembers(Shape, [color], symbol_tables)
        assert len(symbol_tables.find(Shape, Color)) == 0

    def test_conflict_leaves_member_unattached(self, symbol_tables):
        color = enum_member("color", "color").value("RED", Color.RED).value("ROUGE", Color.RED)
        with pytest.raises(RegistrationError):
            TypeMembers(Shape, [color], symbol_tables)
        assert not color.is_attached()
        # Registering it again fails the same way instead of being skipped
        with pytest.raises(RegistrationError):
            TypeMembers(Shape, [color], symbol_tables)
        with pytest.raises(RegistrationError):
            color.to_string(Color.RED)

    def test_conflict_with_shared_table_writes_nothing(self, symbol_tables, shape_color):
        other = enum_member("color", "color").value("BLUE", Color.BLUE).value("CRIMSON", Color.RED)
        with pytest.raises(RegistrationError):
            TypeMembers(Shape, [other], symbol_tables)
        with pytest.raises(SymbolNotFoundError):
            shape_color.to_string(Color.BLUE)

    def test_late_symbol_registration(self, shape_color):
        with pytest.raises(RegistrationError):
            shape_color.value("BLUE", Color.BLUE)
        with pytest.raises(SymbolNotFoundError):
            shape_color.to_string(Color.BLUE)

    def test_symbols_unavailable_before_registration(self):
        color = enum_member("color", "color").value("RED", Color.RED)
        with pytest.raises(RegistrationError):
            color.to_string(Color.RED)

    def test_explicit_non_enum_type(self):
        with pytest.raises(RegistrationError):
            enum_member("name", "name", value_type=str)

    def test_inferred_non_enum_type(self, symbol_tables):
        with pytest.raises(RegistrationError):
            TypeMembers(Shape, [enum_member("name", "name")], symbol_tables)

    def test_plain_member_on_enum_field_has_no_symbols(self, symbol_tables):
        color = member("color", "color")
        TypeMembers(Shape, [color], symbol_tables)
        assert color.value_type.is_enum()
        assert not color.is_enum()


# ===========================================================================
# D. SymbolTable
# ===========================================================================

class TestSymbolTable:

    def test_register_and_lookup(self):
        table = SymbolTable(Color)
        table.register("BLUE", Color.BLUE)
        assert table.to_string(Color.BLUE) == "BLUE"
        assert table.from_string("BLUE") is Color.BLUE
        assert len(table) == 1

    def test_conflict_leaves_table_unchanged(self):
        table = SymbolTable(Color)
        table.register("BLUE", Color.BLUE)
        with pytest.raises(RegistrationError):
            table.register("AZURE", Color.BLUE)
        assert dict(table.snapshot()) == {"BLUE": Color.BLUE}

    def test_rejected_batch_leaves_table_unchanged(self):
        table = SymbolTable(Color)
        table.register("RED", Color.RED)
        with pytest.raises(RegistrationError):
            table.register_all([("GREEN", Color.GREEN), ("CRIMSON", Color.RED)])
        assert dict(table.snapshot()) == {"RED": Color.RED}

    def test_unhashable_value_has_no_symbol(self):
        table = SymbolTable(Color)
        table.register("RED", Color.RED)
        with pytest.raises(SymbolNotFoundError):
            table.to_string(["RED"])
        with pytest.raises(SymbolNotFoundError):
            table.from_string(["RED"])
