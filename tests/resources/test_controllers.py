"""Tests for the resource controllers against an in-memory MediaConvert client."""

import pytest
from mcprovider.catalog import apply_defaults
from mcprovider.plan import PlanAction, plan_resource
from mcprovider.resources import (
    JobTemplateController,
    OperationContext,
    PresetController,
    QueueController,
    ResourceData,
    controller_for,
)
from mcprovider.translate import expand_resource
from mcprovider.utils.errors import (
    ConflictingStateError,
    DeadlineExceededError,
    NotFoundError,
    ValidationError,
)

H264 = ("settings", 0, "video_description", 0, "codec_settings", 0, "h264_settings", 0)


def _h264(attributes):
    node = attributes
    for step in H264:
        node = node[step]
    return node


def _settings_request(config):
    return expand_resource("preset", config)["Settings"]


@pytest.fixture
def presets(client_factory, fast_retry):
    return PresetController(client_factory, fast_retry)


@pytest.fixture
def queues(client_factory, fast_retry):
    return QueueController(client_factory, fast_retry)


@pytest.fixture
def job_templates(client_factory, fast_retry):
    return JobTemplateController(client_factory, fast_retry)


class TestControllerLookup:
    """Test controller_for."""

    def test_by_kind_and_alias(self, client_factory):
        """Test lookups by kind and by alias."""
        assert isinstance(controller_for("preset", client_factory), PresetController)
        assert isinstance(controller_for("aws_media_convert_queue", client_factory), QueueController)
        assert isinstance(controller_for("job_templates", client_factory), JobTemplateController)

    def test_unknown_kind(self, client_factory):
        """Test that unknown kinds are rejected."""
        with pytest.raises(ValidationError, match="unknown resource kind"):
            controller_for("channel", client_factory)


class TestPresetLifecycle:
    """Create, read, update, delete and import presets."""

    def test_create_audio_only(self, presets, fake_client, audio_preset_config):
        """Test that create sends the expanded request and returns read-back state."""
        state = presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        assert state.id == "audio-only"
        request = fake_client.calls_to("create_preset")[0]
        assert request["Settings"]["ContainerSettings"]["Container"] == "CMFC"
        assert request["Settings"]["AudioDescriptions"][0]["CodecSettings"]["Codec"] == "AAC"
        assert state.attributes["arn"] == "arn:aws:mediaconvert:us-east-1:123456789012:presets/audio-only"
        assert state.attributes["type"] == "CUSTOM"
        aac = state.attributes["settings"][0]["audio_description"][0]["codec_settings"][0]["aac_settings"][0]
        assert aac["bitrate"] == 96000
        assert aac["sample_rate"] == 48000

    def test_create_rejects_invalid_config(self, presets, fake_client, audio_preset_config):
        """Test that validation fails before any remote call."""
        audio_preset_config["settings"][0]["container_settings"][0]["container"] = "AVI"
        with pytest.raises(ValidationError) as exc_info:
            presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        assert exc_info.value.paths == ["settings.0.container_settings.0.container"]
        assert fake_client.calls == []

    def test_create_sends_tags(self, presets, fake_client, audio_preset_config):
        """Test that tags are sent on create and read back."""
        audio_preset_config["tags"] = {"env": "test"}
        state = presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        assert fake_client.calls_to("create_preset")[0]["Tags"] == {"env": "test"}
        assert state.attributes["tags"] == {"env": "test"}

    def test_create_conflict(self, presets, audio_preset_config):
        """Test that creating an existing name surfaces a conflict."""
        presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        with pytest.raises(ConflictingStateError):
            presets.create(ResourceData(kind="preset", attributes=audio_preset_config))

    def test_create_retries_throttling(self, presets, fake_client, audio_preset_config, make_client_error):
        """Test that a throttled create is retried."""
        fake_client.fail("create_preset", make_client_error("TooManyRequestsException", 429, "CreatePreset"))
        state = presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        assert state.exists
        assert len(fake_client.calls_to("create_preset")) == 2

    def test_update_in_place(self, presets, fake_client, make_h264_preset):
        """Test changing quality tuning and QVBR level without replacement."""
        first = make_h264_preset(
            "basic", rate_control_mode="QVBR", quality_tuning_level="SINGLE_PASS",
            qvbr_settings=[{"qvbr_quality_level": 9}],
        )
        second = make_h264_preset(
            "basic", rate_control_mode="QVBR", quality_tuning_level="MULTI_PASS_HQ",
            qvbr_settings=[{"qvbr_quality_level": 7}],
        )
        prior = presets.create(ResourceData(kind="preset", attributes=first))

        planned = plan_resource("preset", prior, second)
        assert planned.action == PlanAction.UPDATE
        assert planned.replace_paths == []

        state = presets.update(prior, second)
        assert fake_client.calls_to("delete_preset") == []
        request = fake_client.calls_to("update_preset")[0]
        assert request["Name"] == "basic"
        assert "Tags" not in request
        h264 = _h264(state.attributes)
        assert h264["quality_tuning_level"] == "MULTI_PASS_HQ"
        assert h264["qvbr_settings"][0]["qvbr_quality_level"] == 7

        refreshed = presets.read(ResourceData(kind="preset", id="basic"))
        assert _h264(refreshed.attributes)["qvbr_settings"][0]["qvbr_quality_level"] == 7

    def test_update_rejects_rename(self, presets, audio_preset_config):
        """Test that a force-new change cannot be applied in place."""
        prior = presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        with pytest.raises(ValidationError, match="must be replaced"):
            presets.update(prior, dict(audio_preset_config, name="renamed"))

    def test_update_reconciles_tags(self, presets, fake_client, audio_preset_config):
        """Test that tag changes go through TagResource and UntagResource."""
        audio_preset_config["tags"] = {"env": "test", "owner": "media"}
        prior = presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        state = presets.update(prior, dict(audio_preset_config, tags={"env": "prod"}))
        arn = prior.attributes["arn"]
        assert fake_client.calls_to("untag_resource") == [{"Arn": arn, "TagKeys": ["owner"]}]
        assert fake_client.calls_to("tag_resource") == [{"Arn": arn, "Tags": {"env": "prod"}}]
        assert state.attributes["tags"] == {"env": "prod"}

    def test_update_missing_resource(self, presets, fake_client, audio_preset_config):
        """Test that updating a resource deleted out of band raises NotFoundError."""
        prior = presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        fake_client.store["Preset"].clear()
        with pytest.raises(NotFoundError):
            presets.update(prior, audio_preset_config)

    def test_update_clears_removed_attributes(self, presets, fake_client, audio_preset_config):
        """Test that dropping optional strings clears them remotely and the plan settles."""
        prior = presets.create(ResourceData(kind="preset", attributes=dict(audio_preset_config, category="audio")))
        desired = {key: value for key, value in audio_preset_config.items() if key != "description"}
        state = presets.update(prior, desired)
        request = fake_client.calls_to("update_preset")[0]
        assert request["Description"] == ""
        assert request["Category"] == ""
        assert state.attributes["description"] == ""
        assert state.attributes["category"] == ""
        assert plan_resource("preset", state, desired).action == PlanAction.NO_OP

    def test_read_missing_resource(self, presets, audio_preset_config):
        """Test that a vanished resource reads back with an empty id."""
        state = presets.read(ResourceData(kind="preset", id="gone", attributes=audio_preset_config))
        assert state.id == ""
        assert not state.exists
        assert state.attributes == audio_preset_config

    def test_read_without_id(self, presets, fake_client):
        """Test that reading an absent resource makes no call."""
        state = presets.read(ResourceData(kind="preset"))
        assert not state.exists
        assert fake_client.calls == []

    def test_delete(self, presets, fake_client, audio_preset_config):
        """Test deleting an existing preset."""
        prior = presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        state = presets.delete(prior)
        assert not state.exists
        assert fake_client.store["Preset"] == {}

    def test_delete_missing(self, presets, fake_client):
        """Test that deleting something already gone succeeds."""
        state = presets.delete(ResourceData(kind="preset", id="deleted-out-of-band"))
        assert not state.exists
        assert fake_client.calls_to("delete_preset") == [{"Name": "deleted-out-of-band"}]

    def test_delete_twice(self, presets, audio_preset_config):
        """Test that delete is idempotent."""
        prior = presets.create(ResourceData(kind="preset", attributes=audio_preset_config))
        presets.delete(prior)
        assert not presets.delete(prior).exists

    def test_import_then_plan_is_empty(self, presets, fake_client, audio_preset_config):
        """Test adopting an existing preset leaves nothing to change."""
        fake_client.create_preset(
            Name="audio-only",
            Description="AAC stereo",
            Settings=_settings_request(audio_preset_config),
        )
        state = presets.import_resource("audio-only")
        assert state.id == "audio-only"
        assert state.attributes["arn"].endswith(":presets/audio-only")
        planned = plan_resource("preset", state, audio_preset_config)
        assert planned.action == PlanAction.NO_OP
        assert planned.changed_paths == []

    def test_import_missing(self, presets):
        """Test that importing an unknown name raises NotFoundError."""
        with pytest.raises(NotFoundError, match="GetPreset preset 'nope' failed: resource does not exist"):
            presets.import_resource("nope")

    def test_deadline_respected(self, presets, fake_client, audio_preset_config, make_client_error):
        """Test that a retry that cannot fit in the deadline stops the operation."""
        fake_client.fail("create_preset", make_client_error("ServiceUnavailableException", 503, "CreatePreset"))
        presets.retry = presets.retry.model_copy(update={"base_delay": 30.0, "max_delay": 30.0})
        with pytest.raises(DeadlineExceededError):
            presets.create(ResourceData(kind="preset", attributes=audio_preset_config), OperationContext(timeout=1))


class TestQueueLifecycle:
    """Create, update and delete queues."""

    def test_create_with_defaults(self, queues, fake_client, queue_config):
        """Test that defaults are sent on create."""
        state = queues.create(ResourceData(kind="queue", attributes=queue_config))
        request = fake_client.calls_to("create_queue")[0]
        assert request["PricingPlan"] == "ON_DEMAND"
        assert request["Status"] == "ACTIVE"
        assert state.attributes["status"] == "ACTIVE"
        assert state.attributes["reservation_plan_settings"] == []
        assert state.attributes["tags"] == {"team": "media"}

    def test_reserved_queue(self, queues, queue_config):
        """Test that reservation settings are read back from ReservationPlan."""
        config = dict(
            queue_config,
            pricing_plan="RESERVED",
            reservation_plan_settings=[{"commitment": "ONE_YEAR", "renewal_type": "AUTO_RENEW", "reserved_slots": 2}],
        )
        state = queues.create(ResourceData(kind="queue", attributes=config))
        assert state.attributes["pricing_plan"] == "RESERVED"
        assert state.attributes["reservation_plan_settings"] == [
            {"commitment": "ONE_YEAR", "renewal_type": "AUTO_RENEW", "reserved_slots": 2},
        ]
        assert plan_resource("queue", state, config).action == PlanAction.NO_OP

    def test_reserved_requires_plan(self, queues, fake_client, queue_config):
        """Test that a reserved queue needs reservation settings."""
        with pytest.raises(ValidationError, match="reservation_plan_settings: is required when pricing_plan is RESERVED"):
            queues.create(ResourceData(kind="queue", attributes=dict(queue_config, pricing_plan="RESERVED")))
        assert fake_client.calls == []

    def test_update_pauses_queue(self, queues, fake_client, queue_config):
        """Test that status updates are sent without the pricing plan."""
        prior = queues.create(ResourceData(kind="queue", attributes=queue_config))
        state = queues.update(prior, dict(queue_config, status="PAUSED"))
        request = fake_client.calls_to("update_queue")[0]
        assert request["Status"] == "PAUSED"
        assert "PricingPlan" not in request
        assert state.attributes["status"] == "PAUSED"

    def test_update_clears_description(self, queues, fake_client, queue_config):
        """Test that removing the description clears it and the plan settles."""
        prior = queues.create(ResourceData(kind="queue", attributes=queue_config))
        desired = {"name": "standard", "tags": {"team": "media"}}
        state = queues.update(prior, desired)
        request = fake_client.calls_to("update_queue")[0]
        assert request["Description"] == ""
        assert "ReservationPlanSettings" not in request
        assert state.attributes["description"] == ""
        assert plan_resource("queue", state, desired).action == PlanAction.NO_OP

    def test_pricing_plan_change_forces_replacement(self, queues, queue_config):
        """Test that switching pricing plan is planned as a replacement."""
        prior = queues.create(ResourceData(kind="queue", attributes=queue_config))
        desired = dict(
            queue_config,
            pricing_plan="RESERVED",
            reservation_plan_settings=[{"commitment": "ONE_YEAR", "renewal_type": "EXPIRE", "reserved_slots": 1}],
        )
        planned = plan_resource("queue", prior, desired)
        assert planned.action == PlanAction.REPLACE
        assert "pricing_plan" in planned.replace_paths

    def test_delete_and_import(self, queues, fake_client, queue_config):
        """Test import followed by delete."""
        fake_client.create_queue(Name="existing", PricingPlan="ON_DEMAND", Status="ACTIVE")
        state = queues.import_resource("existing")
        assert state.attributes["status"] == "ACTIVE"
        assert not queues.delete(state).exists
        assert "existing" not in fake_client.store["Queue"]


class TestJobTemplateLifecycle:
    """Create, update and delete job templates."""

    def test_create(self, job_templates, fake_client, job_template_config):
        """Test that keyed selectors and output groups reach the request."""
        state = job_templates.create(ResourceData(kind="job_template", attributes=job_template_config))
        request = fake_client.calls_to("create_job_template")[0]
        assert request["Queue"] == "standard"
        assert request["Settings"]["Inputs"][0]["AudioSelectors"] == {
            "Audio Selector 1": {"DefaultSelection": "DEFAULT"},
        }
        assert state.attributes["priority"] == 10
        selectors = state.attributes["settings"][0]["input"][0]["audio_selector"]
        assert selectors[0]["name"] == "Audio Selector 1"

    def test_output_needs_preset_or_streams(self, job_templates, job_template_config):
        """Test that an output must name a preset or describe a stream."""
        output = job_template_config["settings"][0]["output_group"][0]["output"][0]
        del output["preset"]
        with pytest.raises(ValidationError) as exc_info:
            job_templates.create(ResourceData(kind="job_template", attributes=job_template_config))
        assert exc_info.value.paths == ["settings.0.output_group.0.output.0"]

    def test_update_priority(self, job_templates, fake_client, job_template_config):
        """Test an in-place update."""
        prior = job_templates.create(ResourceData(kind="job_template", attributes=job_template_config))
        desired = dict(job_template_config, priority=-20)
        assert plan_resource("job_template", prior, desired).action == PlanAction.UPDATE
        state = job_templates.update(prior, desired)
        assert fake_client.calls_to("update_job_template")[0]["Priority"] == -20
        assert state.attributes["priority"] == -20

    def test_no_op_after_create(self, job_templates, job_template_config):
        """Test that read-back state matches the configuration it came from."""
        state = job_templates.create(ResourceData(kind="job_template", attributes=job_template_config))
        assert plan_resource("job_template", state, job_template_config).action == PlanAction.NO_OP

    def test_update_clears_removed_members(self, job_templates, fake_client, job_template_config):
        """Test that removed strings, numbers and blocks are cleared and the plan settles."""
        rich = dict(
            job_template_config,
            category="vod",
            status_update_interval="SECONDS_10",
            acceleration_settings=[{"mode": "ENABLED"}],
            hop_destinations=[{"queue": "overflow", "wait_minutes": 5}],
        )
        prior = job_templates.create(ResourceData(kind="job_template", attributes=rich))
        desired = {"name": "vod", "settings": job_template_config["settings"]}
        assert plan_resource("job_template", prior, desired).action == PlanAction.UPDATE

        state = job_templates.update(prior, desired)
        request = fake_client.calls_to("update_job_template")[0]
        assert request["Queue"] == ""
        assert request["Priority"] == 0
        assert request["AccelerationSettings"] == {}
        assert request["HopDestinations"] == []
        assert request["StatusUpdateInterval"] == "SECONDS_60"
        assert state.attributes["queue"] == ""
        assert state.attributes["category"] == ""
        assert state.attributes["acceleration_settings"] == []
        assert state.attributes["hop_destinations"] == []
        assert plan_resource("job_template", state, desired).action == PlanAction.NO_OP

    def test_delete_missing(self, job_templates):
        """Test that deleting a missing job template succeeds."""
        assert not job_templates.delete(ResourceData(kind="job_template", id="gone")).exists


class TestPreparedDefaults:
    """Defaults the controller fills in before sending."""

    def test_prepare_applies_defaults(self, presets, make_h264_preset):
        """Test that prepare validates and fills defaults."""
        config = make_h264_preset(bitrate=5000000, rate_control_mode="CBR")
        assert presets.prepare(config) == apply_defaults("preset", config)
