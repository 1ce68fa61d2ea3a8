"""Unit tests for configuration schemas, loading and adapters.

These tests verify:
- Carcass and merge documents validate types, ranges and versions
- Loader errors carry a type, a path and per-field details
- Adapters build the matching domain objects
"""

import pytest
from pydantic import ValidationError

from cabinetry.application.config import (
    CarcassDocument,
    ConfigError,
    SlabMergeDocument,
    config_to_carcass_config,
    config_to_defaults,
    config_to_material,
    config_to_slabs,
    load_config,
    load_config_from_dict,
    load_merge_config,
    load_merge_config_from_dict,
)
from cabinetry.application.config.loader import _format_json_path
from cabinetry.domain import CabinetType, SlabCategory


class TestCarcassDocument:
    """Tests for the CarcassDocument schema."""

    def test_minimal_document(self, carcass_document) -> None:
        document = CarcassDocument.model_validate(carcass_document())

        assert document.cabinet_type == CabinetType.BASE
        assert document.dimensions.width == 600
        assert document.material.panel_thickness == 16
        assert document.config.door_count == 2
        assert document.config.overhang_door is None
        assert document.defaults.kicker_height is None

    def test_newer_minor_version_accepted(self, carcass_document) -> None:
        document = CarcassDocument.model_validate(carcass_document(schema_version="1.3"))
        assert document.schema_version == "1.3"

    def test_unsupported_major_version(self, carcass_document) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            CarcassDocument.model_validate(carcass_document(schema_version="2.0"))

    def test_unknown_cabinet_type(self, carcass_document) -> None:
        with pytest.raises(ValidationError):
            CarcassDocument.model_validate(carcass_document(cabinet_type="island"))

    def test_extra_fields_forbidden(self, carcass_document) -> None:
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            CarcassDocument.model_validate(carcass_document(colour="#ffffff"))

    @pytest.mark.parametrize("width", [0, -10, 20000])
    def test_dimension_bounds(self, carcass_document, width: float) -> None:
        with pytest.raises(ValidationError):
            CarcassDocument.model_validate(
                carcass_document(dimensions={"width": width, "height": 720, "depth": 560})
            )

    @pytest.mark.parametrize("door_count", [0, 3])
    def test_door_count_bounds(self, carcass_document, door_count: int) -> None:
        with pytest.raises(ValidationError):
            CarcassDocument.model_validate(
                carcass_document(config={"door_count": door_count})
            )

    @pytest.mark.parametrize("quantity", [0, 7])
    def test_drawer_quantity_bounds(self, carcass_document, quantity: int) -> None:
        with pytest.raises(ValidationError):
            CarcassDocument.model_validate(
                carcass_document(config={"drawer_quantity": quantity})
            )

    def test_too_many_drawer_heights(self, carcass_document) -> None:
        with pytest.raises(ValidationError):
            CarcassDocument.model_validate(
                carcass_document(config={"drawer_heights": [100] * 7})
            )

    def test_invalid_colour(self, carcass_document) -> None:
        with pytest.raises(ValidationError):
            CarcassDocument.model_validate(carcass_document(material={"colour": "white"}))


class TestSlabMergeDocument:
    """Tests for the SlabMergeDocument schema."""

    def test_valid_document(self, merge_document) -> None:
        document = SlabMergeDocument.model_validate(merge_document())

        assert document.category == SlabCategory.BENCHTOP
        assert [s.id for s in document.slabs] == ["bt-1", "bt-2"]
        assert document.slabs[0].material == "Unknown"

    def test_duplicate_ids_rejected(self, merge_document) -> None:
        slab = {"id": "bt-1", "width": 600, "height": 38, "depth": 600}

        with pytest.raises(ValidationError, match="Duplicate slab id 'bt-1'"):
            SlabMergeDocument.model_validate(merge_document(slabs=[slab, dict(slab)]))

    def test_unknown_category(self, merge_document) -> None:
        with pytest.raises(ValidationError):
            SlabMergeDocument.model_validate(merge_document(category="plinth"))


class TestLoader:
    """Tests for load_config and load_merge_config."""

    def test_load_valid_file(self, write_json, carcass_document) -> None:
        path = write_json("base.json", carcass_document(id="cab-1"))

        document = load_config(path)

        assert document.id == "cab-1"

    def test_file_not_found(self, tmp_path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",\n  "cabinet_type": }', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 2

    def test_validation_error_paths(self, carcass_document) -> None:
        data = carcass_document(config={"drawer_heights": [100, -5]})

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "config.drawer_heights[1]"
        assert error.details[0]["value"] == -5
        assert "Configuration validation failed" in error.message

    def test_load_merge_file(self, write_json, merge_document) -> None:
        path = write_json("merge.json", merge_document())

        document = load_merge_config(path)

        assert len(document.slabs) == 2

    def test_merge_validation_error(self, merge_document) -> None:
        data = merge_document(slabs=[{"id": "bt-1", "width": 0, "height": 38, "depth": 600}])

        with pytest.raises(ConfigError) as exc_info:
            load_merge_config_from_dict(data)

        assert exc_info.value.details[0]["path"] == "slabs[0].width"

    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("dimensions", "width"), "dimensions.width"),
            (("slabs", 2, "depth"), "slabs[2].depth"),
            ((0,), "[0]"),
        ],
    )
    def test_format_json_path(self, loc, expected: str) -> None:
        assert _format_json_path(loc) == expected


class TestAdapters:
    """Tests for the config-to-domain adapters."""

    def test_back_thickness_overrides_panel_thickness(self, carcass_document) -> None:
        document = load_config_from_dict(
            carcass_document(material={"panel_thickness": 16, "back_thickness": 18})
        )

        material = config_to_material(document.material)

        assert material.panel_thickness == 18
        assert material.back_thickness == 18

    def test_carcass_config_fields(self, carcass_document) -> None:
        document = load_config_from_dict(
            carcass_document(
                config={
                    "shelf_count": 1,
                    "door_count": 1,
                    "door_material": {"colour": "#000000", "thickness": 22},
                    "drawer_enabled": True,
                    "drawer_quantity": 2,
                    "drawer_heights": [360, 360],
                }
            )
        )

        config = config_to_carcass_config(document)

        assert config.shelf_count == 1
        assert config.door_count == 1
        assert config.door_material.thickness == 22
        assert config.drawer_heights == [360, 360]
        assert config.overhang_door is False

    def test_top_cabinet_overhang_default(self, carcass_document) -> None:
        document = load_config_from_dict(carcass_document(cabinet_type="top"))
        assert config_to_carcass_config(document).overhang_door is True

    def test_explicit_overhang_kept(self, carcass_document) -> None:
        document = load_config_from_dict(
            carcass_document(cabinet_type="top", config={"overhang_door": False})
        )
        assert config_to_carcass_config(document).overhang_door is False

    def test_defaults_overrides(self, carcass_document) -> None:
        document = load_config_from_dict(
            carcass_document(defaults={"kicker_height": 150, "door_gap": 3})
        )

        defaults = config_to_defaults(document.defaults)

        assert defaults.kicker_height == 150
        assert defaults.door_gap == 3
        assert defaults.leg_diameter == 50

    def test_slabs(self, merge_document) -> None:
        document = load_merge_config_from_dict(merge_document())

        slabs = config_to_slabs(document)

        assert [s.slab_id for s in slabs] == ["bt-1", "bt-2"]
        assert all(s.category == SlabCategory.BENCHTOP for s in slabs)
        assert slabs[1].x == 600
