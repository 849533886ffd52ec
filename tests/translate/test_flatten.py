"""Tests for the flatten translator and expand/flatten round trips."""

import pytest
from mcprovider.catalog import SDK_TYPES, apply_defaults, enums, normalize
from mcprovider.catalog.nodes import Attribute
from mcprovider.translate import expand_object, expand_resource, flatten_object, flatten_resource, flattener_for
from mcprovider.utils.errors import InternalError


class TestFlatten:
    """Test reading SDK responses back into configuration."""

    def test_absent_members_zero_filled(self):
        """Test that every attribute is materialised."""
        result = flattener_for("H264QvbrSettings")({})
        assert result == {
            "max_average_bitrate": 0,
            "qvbr_quality_level": 0,
            "qvbr_quality_level_fine_tune": 0.0,
        }

    def test_numbers_become_floats(self):
        """Test that float attributes are read as floats."""
        result = flattener_for("H264Settings")({"GopSize": 90, "RateControlMode": "QVBR"})
        assert result["gop_size"] == 90.0
        assert isinstance(result["gop_size"], float)
        assert result["rate_control_mode"] == "QVBR"
        assert result["qvbr_settings"] == []

    def test_cleared_object_with_required_members_is_absent(self):
        """Test that an empty object for a block with required members reads back as absent."""
        result = flatten_resource("job_template", {"Name": "vod", "AccelerationSettings": {}, "HopDestinations": []})
        assert result["acceleration_settings"] == []
        assert result["hop_destinations"] == []
        qvbr = flattener_for("H264Settings")({"QvbrSettings": {}})["qvbr_settings"]
        assert qvbr == [{"max_average_bitrate": 0, "qvbr_quality_level": 0, "qvbr_quality_level_fine_tune": 0.0}]

    def test_keyed_map_sorted_with_key(self):
        """Test that keyed objects become sorted blocks carrying their key."""
        result = flattener_for("InputTemplate")({
            "AudioSelectors": {
                "b": {"DefaultSelection": "NOT_DEFAULT"},
                "a": {"DefaultSelection": "DEFAULT", "Tracks": [2, 1]},
            },
        })
        selectors = result["audio_selector"]
        assert [s["name"] for s in selectors] == ["a", "b"]
        assert selectors[0]["tracks"] == [1, 2]
        assert selectors[1]["default_selection"] == "NOT_DEFAULT"

    def test_unselected_variants_blank(self):
        """Test that variants the discriminator does not select flatten to empty."""
        result = flattener_for("VideoCodecSettings")({
            "Codec": "H_264",
            "H264Settings": {"Bitrate": 5000000},
            "H265Settings": {"Bitrate": 5000000},
        })
        assert result["h265_settings"] == []
        assert result["h264_settings"][0]["bitrate"] == 5000000

    def test_read_from(self):
        """Test that reservation settings are read from ReservationPlan."""
        result = flatten_resource("queue", {
            "Name": "reserved",
            "PricingPlan": "RESERVED",
            "ReservationPlan": {
                "Commitment": "ONE_YEAR",
                "RenewalType": "AUTO_RENEW",
                "ReservedSlots": 2,
                "Status": "ACTIVE",
            },
        })
        assert result["reservation_plan_settings"] == [{
            "commitment": "ONE_YEAR",
            "renewal_type": "AUTO_RENEW",
            "reserved_slots": 2,
        }]

    def test_computed_attributes_read(self):
        """Test that computed attributes come back from the response."""
        result = flatten_resource("preset", {
            "Name": "p",
            "Arn": "arn:aws:mediaconvert:us-east-1:123456789012:presets/p",
            "Type": "CUSTOM",
            "Settings": {"ContainerSettings": {"Container": "MP4"}},
        })
        assert result["arn"].endswith(":presets/p")
        assert result["type"] == "CUSTOM"
        assert result["settings"][0]["container_settings"][0]["container"] == "MP4"
        assert result["settings"][0]["audio_description"] == []

    def test_non_mapping_response(self):
        """Test that a malformed response is an internal error."""
        with pytest.raises(InternalError):
            flattener_for("H264Settings")(["not", "an", "object"])

    def test_unknown_sdk_type(self):
        """Test that unknown SDK types raise KeyError."""
        with pytest.raises(KeyError, match="No flattener for SDK type"):
            flattener_for("H263Settings")


class TestEnumClosure:
    """Every accepted enum literal survives expand and flatten unchanged."""

    def test_every_enum_literal_round_trips(self):
        """Test each enum attribute of each SDK type with each of its literals."""
        checked = 0
        for sdk_type, block in SDK_TYPES.items():
            for key, child in block.children.items():
                if not isinstance(child, Attribute) or not child.enum or child.computed:
                    continue
                for literal in enums.values(child.enum):
                    expanded = expand_object(block, {key: literal})
                    assert expanded[child.sdk_name] == literal, f"{sdk_type}.{key}={literal}"
                    flattened = flatten_object(block, {child.response_name: literal})
                    assert flattened[key] == literal, f"{sdk_type}.{key}={literal}"
                    checked += 1
        assert checked > 1000


class TestRoundTrip:
    """flatten(expand(t)) reproduces t modulo defaults and zero values."""

    @pytest.mark.parametrize("fixture_name,kind", [
        ("audio_preset_config", "preset"),
        ("video_preset_config", "preset"),
        ("job_template_config", "job_template"),
        ("queue_config", "queue"),
    ])
    def test_round_trip(self, request, fixture_name, kind):
        """Test the round trip for each sample configuration."""
        config = request.getfixturevalue(fixture_name)
        sdk_object = expand_resource(kind, apply_defaults(kind, config))
        assert flatten_resource(kind, sdk_object) == normalize(kind, config)

    def test_audio_only_round_trip_keeps_values(self, audio_preset_config):
        """Test that the audio-only preset reads back its configured values."""
        result = flatten_resource("preset", expand_resource("preset", audio_preset_config))
        aac = result["settings"][0]["audio_description"][0]["codec_settings"][0]["aac_settings"][0]
        assert aac["bitrate"] == 96000
        assert aac["coding_mode"] == "CODING_MODE_2_0"
        assert aac["raw_format"] == "NONE"
        container = result["settings"][0]["container_settings"][0]
        assert container["container"] == "CMFC"
        assert container["cmfc_settings"][0]["scte35_source"] == "NONE"
        assert result == normalize("preset", audio_preset_config)

    def test_rich_job_template_round_trip(self, job_template_config):
        """Test a job template with keyed selectors, hops and nested outputs."""
        job_template_config["hop_destinations"] = [{"wait_minutes": 15, "queue": "overflow", "priority": -5}]
        job_template_config["acceleration_settings"] = [{"mode": "PREFERRED"}]
        settings = job_template_config["settings"][0]
        settings["input"][0]["caption_selector"] = [{
            "name": "Captions",
            "source_settings": [{
                "source_type": "SRT",
                "file_source_settings": [{"source_file": "s3://bucket/captions.srt"}],
            }],
        }]
        settings["input"][0]["audio_selector"].append({"name": "Alt", "tracks": [2]})
        settings["output_group"][0]["output"].append({
            "name_modifier": "_video",
            "container_settings": [{"container": "MP4"}],
            "video_description": [{
                "codec_settings": [{
                    "codec": "H_264",
                    "h264_settings": [{"rate_control_mode": "QVBR", "max_bitrate": 3000000}],
                }],
            }],
        })
        sdk_object = expand_resource("job_template", apply_defaults("job_template", job_template_config))
        assert set(sdk_object["Settings"]["Inputs"][0]["AudioSelectors"]) == {"Alt", "Audio Selector 1"}
        assert flatten_resource("job_template", sdk_object) == normalize("job_template", job_template_config)
