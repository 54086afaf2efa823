"""Unit tests for injectable field declaration and discovery."""

from typing import ClassVar, Final, Optional, Protocol

import pytest

from autoinject.injection import (
    FieldDeclarationError,
    Injectable,
    Mutability,
    describe_injected,
    injectable_fields,
    register_field,
    type_identifier,
)


class Shape(Protocol):
    def area(self) -> float:
        ...


class Palette(Protocol):
    def colors(self) -> list:
        ...


class Circle:
    def area(self) -> float:
        return 3.14


class Drawing:
    outline: Shape = Injectable()
    palette: Palette = Injectable()
    title: str = "untitled"


class Sketch(Drawing):
    detail: Shape = Injectable()


class Pinned:
    shape: Final[Shape] = Injectable()


class Frozen:
    shape: Shape = Injectable(readonly=True)


class Shared:
    default_shape: ClassVar[Shape] = Injectable()
    shape: Shape = Injectable()


class Overridden:
    shape: object = Injectable(Shape)


class Maybe:
    shape: Optional[Shape] = Injectable()


class Dangling:
    shape: "DoesNotExist" = Injectable()  # noqa: F821


class Untyped:
    shape = Injectable()


class Board:
    def __init__(self):
        self._shape = None

    def set_shape(self, shape):
        self._shape = shape


register_field(Board, "shape", Shape, setter=Board.set_shape)


class Tray:
    def __init__(self):
        self._shape = None

    def set_shape(self, shape):
        self._shape = shape

    def get_shape(self):
        return self._shape


register_field(Tray, "shape", Shape, setter=Tray.set_shape, getter=Tray.get_shape)


class TestInjectableFields:
    """Test injectable_fields() discovery."""

    def test_type_without_declarations_has_no_fields(self):
        assert injectable_fields(Circle) == []

    def test_fields_in_declaration_order(self):
        fields = injectable_fields(Drawing)

        assert [f.name for f in fields] == ["outline", "palette"]
        assert fields[0].abstraction is Shape
        assert fields[1].abstraction is Palette
        assert all(f.mutability is Mutability.NORMAL for f in fields)
        assert all(f.owner is Drawing for f in fields)

    def test_inherited_fields_are_not_included(self):
        assert [f.name for f in injectable_fields(Sketch)] == ["detail"]

    def test_final_annotation_is_read_only(self):
        (field,) = injectable_fields(Pinned)

        assert field.mutability is Mutability.READ_ONLY
        assert field.setter is None
        assert field.abstraction is Shape

    def test_readonly_flag_is_read_only(self):
        (field,) = injectable_fields(Frozen)

        assert field.mutability is Mutability.READ_ONLY
        assert field.setter is None

    def test_classvar_annotation_is_static(self):
        shared, shape = injectable_fields(Shared)

        assert shared.static is True
        assert shared.abstraction is Shape
        assert shape.static is False

    def test_explicit_abstraction_wins_over_annotation(self):
        (field,) = injectable_fields(Overridden)

        assert field.abstraction is Shape

    def test_optional_annotation_is_unwrapped(self):
        (field,) = injectable_fields(Maybe)

        assert field.abstraction is Shape

    def test_unannotated_field_has_no_abstraction(self):
        (field,) = injectable_fields(Untyped)

        assert field.abstraction is None

    def test_unresolvable_annotation_raises(self):
        with pytest.raises(FieldDeclarationError, match="Dangling"):
            injectable_fields(Dangling)

    def test_registered_setter_field(self):
        (field,) = injectable_fields(Board)

        assert field.name == "shape"
        assert field.abstraction is Shape
        assert field.setter is Board.set_shape

    def test_registered_field_without_setter_is_read_only(self):
        class Locked:
            pass

        register_field(Locked, "shape", Shape, setter=None)

        (field,) = injectable_fields(Locked)
        assert field.mutability is Mutability.READ_ONLY

    def test_registering_same_name_twice_replaces_declaration(self):
        class Twice:
            pass

        register_field(Twice, "shape", Shape, setter=None)
        register_field(Twice, "shape", Palette, setter=lambda obj, value: None)

        (field,) = injectable_fields(Twice)
        assert field.abstraction is Palette
        assert field.mutability is Mutability.NORMAL

    def test_abstraction_id_is_module_and_qualname(self):
        (field, _) = injectable_fields(Drawing)

        assert field.abstraction_id == f"{Shape.__module__}.Shape"


class TestInjectableDescriptor:
    """Test the Injectable descriptor's attribute behaviour."""

    def test_reading_uninjected_field_raises_attribute_error(self):
        with pytest.raises(AttributeError, match="has not been injected"):
            Drawing().outline

    def test_class_access_returns_descriptor(self):
        assert isinstance(Drawing.__dict__["outline"], Injectable)
        assert isinstance(Drawing.outline, Injectable)

    def test_setter_writes_instance_state(self):
        drawing = Drawing()
        circle = Circle()

        injectable_fields(Drawing)[0].setter(drawing, circle)

        assert drawing.outline is circle
        assert "outline" not in vars(Drawing())

    def test_readonly_field_accepts_a_single_assignment(self):
        frozen = Frozen()
        frozen.shape = Circle()

        with pytest.raises(AttributeError, match="read-only"):
            frozen.shape = Circle()

    def test_normal_field_can_be_reassigned(self):
        drawing = Drawing()
        drawing.outline = Circle()
        replacement = Circle()

        drawing.outline = replacement

        assert drawing.outline is replacement

    def test_repr(self):
        assert repr(Injectable()) == "Injectable()"
        assert repr(Injectable(Shape, readonly=True)) == (
            f"Injectable({type_identifier(Shape)}, readonly=True)"
        )


class TestDescribeInjected:
    """Test the per-field injection report."""

    def test_reports_none_for_uninjected_fields(self):
        report = describe_injected(Drawing())

        assert report == [
            ("outline", type_identifier(Shape), None),
            ("palette", type_identifier(Palette), None),
        ]

    def test_reports_implementation_of_injected_fields(self):
        drawing = Drawing()
        drawing.outline = Circle()

        report = describe_injected(drawing)

        assert report[0] == ("outline", type_identifier(Shape), type_identifier(Circle))

    def test_registered_getter_reads_stored_value(self):
        tray = Tray()
        assert describe_injected(tray) == [("shape", type_identifier(Shape), None)]

        tray.set_shape(Circle())

        assert describe_injected(tray) == [
            ("shape", type_identifier(Shape), type_identifier(Circle))
        ]

    def test_registered_field_without_getter_reads_attribute(self):
        board = Board()
        board.set_shape(Circle())

        assert describe_injected(board) == [("shape", type_identifier(Shape), None)]
