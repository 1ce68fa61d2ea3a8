"""Unit tests for domain value objects and entities.

These tests verify:
- CarcassDimensions validation and replacement
- CarcassMaterial thickness mirroring and shared-reference edits
- LayoutDefaults validation
- PanelDescriptor derived extents
- CarcassConfig cardinality checks
"""

import pytest

from cabinetry.domain import (
    CabinetType,
    CardinalityError,
    CarcassConfig,
    CarcassDimensions,
    CarcassMaterial,
    DoorMaterial,
    InvalidDimensionsError,
    LayoutDefaults,
    PanelDescriptor,
    PanelType,
    Position3D,
    Slab,
    SlabCategory,
)


class TestCarcassDimensions:
    """Tests for CarcassDimensions."""

    def test_valid(self) -> None:
        dims = CarcassDimensions(600, 720, 560)
        assert (dims.width, dims.height, dims.depth) == (600, 720, 560)

    def test_non_positive_fields_reported(self) -> None:
        with pytest.raises(InvalidDimensionsError) as exc_info:
            CarcassDimensions(0, 720, -1)

        assert exc_info.value.fields == ("width", "depth")

    def test_with_changes_returns_new_value(self) -> None:
        dims = CarcassDimensions(600, 720, 560)

        changed = dims.with_changes(height=900)

        assert changed == CarcassDimensions(600, 900, 560)
        assert dims.height == 720

    def test_immutable(self) -> None:
        dims = CarcassDimensions(600, 720, 560)
        with pytest.raises(AttributeError):
            dims.width = 800  # type: ignore[misc]


class TestCabinetType:
    """Tests for CabinetType."""

    @pytest.mark.parametrize(
        "cabinet_type,expected",
        [(CabinetType.TOP, False), (CabinetType.BASE, True), (CabinetType.TALL, True)],
    )
    def test_has_legs(self, cabinet_type: CabinetType, expected: bool) -> None:
        assert cabinet_type.has_legs is expected

    def test_from_string(self) -> None:
        assert CabinetType("tall") == CabinetType.TALL


class TestCarcassMaterial:
    """Tests for CarcassMaterial."""

    def test_back_thickness_mirrors_panel_thickness(self) -> None:
        material = CarcassMaterial(panel_thickness=18, back_thickness=9)
        assert material.back_thickness == 18

    def test_update_panel_thickness(self) -> None:
        material = CarcassMaterial()

        material.update(panel_thickness=19)

        assert material.panel_thickness == 19
        assert material.back_thickness == 19

    def test_update_back_thickness(self) -> None:
        material = CarcassMaterial()

        material.update(back_thickness=12, colour="#000000")

        assert material.panel_thickness == 12
        assert material.colour == "#000000"

    def test_update_rejects_unknown_field(self) -> None:
        with pytest.raises(ValueError, match="Unknown material field"):
            CarcassMaterial().update(grain="vertical")

    def test_update_rejects_non_positive_thickness(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            CarcassMaterial().update(panel_thickness=0)

    def test_update_same_thickness_twice(self) -> None:
        material = CarcassMaterial()

        material.update(panel_thickness=18, back_thickness=18)

        assert material.back_thickness == 18

    def test_update_rejects_conflicting_thicknesses(self) -> None:
        material = CarcassMaterial()

        with pytest.raises(ValueError, match="Conflicting thicknesses"):
            material.update(panel_thickness=18, back_thickness=12)
        assert material.panel_thickness == 16

    @pytest.mark.parametrize("opacity", [-0.1, 1.5])
    def test_update_rejects_bad_opacity(self, opacity: float) -> None:
        material = CarcassMaterial()

        with pytest.raises(ValueError, match="Opacity"):
            material.update(opacity=opacity, colour="#000000")
        assert material.opacity == 0.9
        assert material.colour == "#ffffff"

    def test_invalid_opacity(self) -> None:
        with pytest.raises(ValueError, match="Opacity"):
            CarcassMaterial(opacity=1.5)

    def test_shared_reference_sees_edits(self) -> None:
        """Panels resolved from one config see a later material edit."""
        material = CarcassMaterial()
        panel = PanelDescriptor(
            PanelType.BOTTOM, 568, 16, 544, Position3D(0, 0, 0), material=material
        )

        material.update(colour="#123456")

        assert panel.material.colour == "#123456"

    def test_clone_for_independent_edit(self) -> None:
        material = CarcassMaterial()

        clone = material.clone_for_independent_edit()
        clone.update(colour="#123456")

        assert clone is not material
        assert material.colour == "#ffffff"

    def test_to_dict(self) -> None:
        assert CarcassMaterial().to_dict() == {
            "colour": "#ffffff",
            "panel_thickness": 16.0,
            "back_thickness": 16.0,
            "opacity": 0.9,
            "transparent": True,
        }

    def test_door_material_thickness(self) -> None:
        with pytest.raises(ValueError):
            DoorMaterial(thickness=0)


class TestLayoutDefaults:
    """Tests for LayoutDefaults."""

    def test_standard_values(self) -> None:
        defaults = LayoutDefaults()

        assert defaults.kicker_height == 100
        assert defaults.leg_diameter == 50
        assert defaults.wall_cabinet_elevation == 2400

    def test_with_kicker_height(self) -> None:
        defaults = LayoutDefaults()

        changed = defaults.with_kicker_height(150)

        assert changed.kicker_height == 150
        assert defaults.kicker_height == 100

    def test_negative_kicker_rejected(self) -> None:
        with pytest.raises(ValueError, match="Kicker height"):
            LayoutDefaults(kicker_height=-1)


class TestPanelDescriptor:
    """Tests for PanelDescriptor derived extents."""

    def test_face_size_excludes_thickness_axis(self) -> None:
        panel = PanelDescriptor(
            PanelType.LEFT_END, 16, 720, 560, Position3D(8, 360, 280), thickness_axis="x"
        )

        assert panel.thickness == 16
        assert panel.face_size == (720, 560)

    def test_face_size_larger_first(self) -> None:
        panel = PanelDescriptor(
            PanelType.BASE_RAIL, 568, 60, 16, Position3D(0, 0, 0), thickness_axis="z"
        )
        assert panel.face_size == (568, 60)

    def test_vertical_extent(self) -> None:
        panel = PanelDescriptor(PanelType.LEG, 50, 100, 50, Position3D(0, -50, 0))

        assert panel.bottom_y == -100
        assert panel.top_y == 0


class TestCarcassConfig:
    """Tests for CarcassConfig."""

    def test_defaults(self) -> None:
        config = CarcassConfig()

        assert config.door_enabled is True
        assert config.door_count == 2
        assert config.drawer_enabled is False
        assert config.drawer_heights == []

    def test_configs_do_not_share_material(self) -> None:
        assert CarcassConfig().material is not CarcassConfig().material

    @pytest.mark.parametrize("door_count", [0, 3])
    def test_door_count_checked(self, door_count: int) -> None:
        with pytest.raises(CardinalityError, match="door_count must be 1 or 2"):
            CarcassConfig(door_count=door_count)

    @pytest.mark.parametrize("quantity", [0, 7])
    def test_drawer_quantity_checked(self, quantity: int) -> None:
        with pytest.raises(CardinalityError, match="between 1 and 6"):
            CarcassConfig(drawer_quantity=quantity)

    def test_negative_shelf_count(self) -> None:
        with pytest.raises(ValueError, match="Shelf count"):
            CarcassConfig(shelf_count=-1)

    def test_for_cabinet_type(self) -> None:
        assert CarcassConfig.for_cabinet_type(CabinetType.TOP).overhang_door is True
        assert CarcassConfig.for_cabinet_type(CabinetType.TALL).overhang_door is False
        assert (
            CarcassConfig.for_cabinet_type(CabinetType.TOP, overhang_door=False).overhang_door
            is False
        )


class TestSlab:
    """Tests for Slab."""

    def test_extents(self) -> None:
        slab = Slab("bt-1", SlabCategory.BENCHTOP, 100, 820, 0, 600, 38, 600)

        assert slab.right_x == 700
        assert slab.top_y == 858
        assert slab.front_z == 600
        assert slab.material == "Unknown"

    def test_non_positive_size(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            Slab("bt-1", SlabCategory.BENCHTOP, 0, 0, 0, 0, 38, 600)
