"""Tests for schema nodes and the resource descriptors."""

import pytest
from mcprovider.catalog import KINDS, SDK_TYPES, describe
from mcprovider.catalog.nodes import (
    Attribute,
    Block,
    FieldKind,
    block,
    boolean,
    integer,
    string,
    sdk_field_name,
)
from mcprovider.utils.errors import ValidationError


class TestNodeConstruction:
    """Test node builders and their consistency checks."""

    def test_sdk_field_name(self):
        """Test snake_case to SDK member name conversion."""
        assert sdk_field_name("qvbr_settings") == "QvbrSettings"
        assert sdk_field_name("gop_size") == "GopSize"

    def test_explicit_sdk_name_wins(self):
        """Test that an explicit SDK name overrides the derived one."""
        node = string("slowpal", sdk="SlowPal")
        assert node.sdk_name == "SlowPal"
        assert node.response_name == "SlowPal"

    def test_read_from_changes_response_name_only(self):
        """Test that read_from affects responses but not requests."""
        node = block("reservation_plan_settings", string("commitment"), read_from="ReservationPlan")
        assert node.sdk_name == "ReservationPlanSettings"
        assert node.response_name == "ReservationPlan"

    def test_required_and_computed_conflict(self):
        """Test that a node cannot be both required and computed."""
        with pytest.raises(ValueError, match="both required and computed"):
            string("arn", required=True, computed=True)

    def test_unknown_enum_category(self):
        """Test that enum references must be registered."""
        with pytest.raises(ValueError, match="unknown enum category"):
            string("codec", enum="NotACategory")

    def test_enum_default_must_be_member(self):
        """Test that an enum default must be one of its literals."""
        with pytest.raises(ValueError, match="is not a PricingPlan value"):
            string("pricing_plan", enum="PricingPlan", default="FREE")

    def test_duplicate_child(self):
        """Test that children must be unique within a block."""
        with pytest.raises(ValueError, match="duplicate child"):
            block("b", string("x"), integer("x"))

    def test_map_key_must_be_required_string(self):
        """Test that a keyed block needs a required string key child."""
        with pytest.raises(ValueError, match="map key"):
            block("selector", string("name"), map_key="name")

    def test_variants_need_discriminator(self):
        """Test that variants cannot be declared without a discriminator."""
        with pytest.raises(ValueError, match="without a discriminator"):
            block("s", block("a", string("x")), variants={"A": ("a",)})

    def test_variant_literal_must_be_enum_member(self):
        """Test that variant literals are checked against the discriminator enum."""
        with pytest.raises(ValueError, match="variant literal"):
            block(
                "codec_settings",
                string("codec", enum="VideoCodec"),
                block("h264_settings", string("x")),
                discriminator="codec",
                variants={"H_263": ("h264_settings",)},
            )

    def test_omit_zero_only_for_positive_minimum(self):
        """Test that zero is treated as unset only when it is out of range."""
        assert integer("bitrate", minimum=1000).omit_zero
        assert not integer("softness", minimum=0).omit_zero
        assert not integer("offset").omit_zero

    def test_zero_values(self):
        """Test zero values per kind."""
        assert string("x").zero() == ""
        assert integer("x").zero() == 0
        assert boolean("x").zero() is False
        assert block("b", string("x")).zero() == []

    def test_block_shapes(self):
        """Test object, array and map shapes."""
        assert block("one", string("x")).shape == "object"
        assert block("many", string("x"), many=True).shape == "array"
        keyed = block("keyed", string("name", required=True), map_key="name")
        assert keyed.shape == "map"
        assert keyed.many
        assert keyed.max_items is None

    def test_required_block_needs_one_item(self):
        """Test that a required block has min_items of one."""
        assert block("settings", string("x"), required=True).min_items == 1


class TestResourceSchemas:
    """Test the preset, job template and queue descriptors."""

    def test_kinds(self):
        """Test that all three kinds are registered."""
        assert set(KINDS) == {"preset", "job_template", "queue"}

    def test_describe_by_alias(self):
        """Test lookups by alias."""
        assert describe("aws_media_convert_preset").kind == "preset"
        assert describe("job_templates").kind == "job_template"
        assert describe("queues").kind == "queue"

    def test_describe_unknown_kind(self):
        """Test that unknown kinds raise ValidationError naming the valid ones."""
        with pytest.raises(ValidationError, match="unknown resource kind 'channel'"):
            describe("channel")

    def test_name_forces_replacement(self):
        """Test that renaming any resource forces replacement."""
        for kind in KINDS:
            schema = describe(kind)
            assert "name" in schema.force_new_paths()
            assert schema.attributes["name"].required

    def test_queue_pricing_plan(self):
        """Test queue pricing plan default and replacement semantics."""
        schema = describe("queue")
        node = schema.attributes["pricing_plan"]
        assert node.default == "ON_DEMAND"
        assert node.force_new
        assert schema.attributes["status"].default == "ACTIVE"

    def test_computed_attributes(self):
        """Test that arn and type are computed on every kind."""
        for kind in KINDS:
            schema = describe(kind)
            assert schema.attributes["arn"].computed
            assert schema.attributes["type"].computed

    def test_node_at(self):
        """Test resolving dotted paths with list indices."""
        schema = describe("preset")
        node = schema.node_at("settings.0.video_description.0.codec_settings.0.h264_settings.0.gop_size")
        assert isinstance(node, Attribute)
        assert node.kind == FieldKind.FLOAT
        with pytest.raises(KeyError):
            schema.node_at("settings.0.nope")

    def test_sum_type_blocks(self):
        """Test discriminated blocks and their variants."""
        codec = describe("preset").node_at("settings.video_description.codec_settings")
        assert isinstance(codec, Block)
        assert codec.discriminator == "codec"
        assert codec.allowed_variants("H_264") == ("h264_settings",)
        assert codec.allowed_variants("AV1") == ("av1_settings",)
        container = describe("preset").node_at("settings.container_settings")
        assert container.allowed_variants("CMFC") == ("cmfc_settings",)
        assert container.allowed_variants("RAW") == ()

    def test_keyed_blocks(self):
        """Test that job template selectors are keyed by name."""
        selector = describe("job_template").node_at("settings.input.audio_selector")
        assert selector.shape == "map"
        assert selector.map_key == "name"
        assert selector.sdk_name == "AudioSelectors"

    def test_sdk_type_registry(self):
        """Test that SDK types resolve to catalog blocks across kinds."""
        for name in ("Preset", "JobTemplate", "Queue", "H264Settings", "AacSettings",
                     "VideoCodecSettings", "AudioSelector", "ReservationPlanSettings"):
            assert name in SDK_TYPES, name
        assert SDK_TYPES["H264QvbrSettings"].children["qvbr_quality_level"].maximum == 10

    def test_to_dict(self):
        """Test the serialisable schema description."""
        data = describe("queue").to_dict()
        assert data["kind"] == "queue"
        assert data["sdk_type"] == "Queue"
        keys = [attribute["key"] for attribute in data["attributes"]]
        assert "pricing_plan" in keys
        pricing = next(a for a in data["attributes"] if a["key"] == "pricing_plan")
        assert pricing["default"] == "ON_DEMAND"
        assert pricing["force_new"] is True
        assert "RESERVED" in pricing["values"]
