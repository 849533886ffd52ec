"""Shared fixtures: an in-memory MediaConvert client and sample configurations."""

import copy

import pytest
from botocore.exceptions import ClientError

from mcprovider.config.models import RetryPolicy

ACCOUNT_ARN = "arn:aws:mediaconvert:us-east-1:123456789012"

_COLLECTIONS = {
    "Preset": "presets",
    "JobTemplate": "jobTemplates",
    "Queue": "queues",
}


def client_error(code, status, operation="GetPreset", message=None):
    """Build the ClientError botocore raises for a failed call."""
    return ClientError(
        {
            "Error": {"Code": code, "Message": message or f"{code} raised"},
            "ResponseMetadata": {"HTTPStatusCode": status},
        },
        operation,
    )


class FakeMediaConvertClient:
    """Stand-in for a boto3 ``mediaconvert`` client backed by dictionaries."""

    def __init__(self):
        self.store = {noun: {} for noun in _COLLECTIONS}
        self.tags = {}
        self.calls = []
        self._failures = {}

    def fail(self, method, *errors):
        """Raise ``errors`` one per call on ``method`` before behaving normally."""
        self._failures.setdefault(method, []).extend(errors)

    def calls_to(self, method):
        return [params for name, params in self.calls if name == method]

    def _record(self, method, params):
        self.calls.append((method, copy.deepcopy(params)))
        pending = self._failures.get(method)
        if pending:
            raise pending.pop(0)

    def _not_found(self, noun, name):
        return client_error("NotFoundException", 404, f"Get{noun}", f"{noun} {name} not found")

    def _create(self, noun, method, params):
        self._record(method, params)
        name = params["Name"]
        if name in self.store[noun]:
            raise client_error("ConflictException", 409, f"Create{noun}", f"{noun} {name} already exists")
        item = {key: copy.deepcopy(value) for key, value in params.items() if key != "Tags"}
        item["Arn"] = f"{ACCOUNT_ARN}:{_COLLECTIONS[noun]}/{name}"
        item["Type"] = "CUSTOM"
        if noun == "Queue":
            item.setdefault("PricingPlan", "ON_DEMAND")
            item.setdefault("Status", "ACTIVE")
            plan = item.pop("ReservationPlanSettings", None)
            if plan:
                item["ReservationPlan"] = dict(plan, Status="ACTIVE")
        self.store[noun][name] = item
        self.tags[item["Arn"]] = dict(params.get("Tags") or {})
        return {noun: copy.deepcopy(item)}

    def _get(self, noun, method, params):
        self._record(method, params)
        item = self.store[noun].get(params["Name"])
        if item is None:
            raise self._not_found(noun, params["Name"])
        return {noun: copy.deepcopy(item)}

    def _update(self, noun, method, params):
        self._record(method, params)
        item = self.store[noun].get(params["Name"])
        if item is None:
            raise self._not_found(noun, params["Name"])
        for key, value in params.items():
            if key == "ReservationPlanSettings":
                item["ReservationPlan"] = dict(value, Status="ACTIVE")
            else:
                item[key] = copy.deepcopy(value)
        return {noun: copy.deepcopy(item)}

    def _delete(self, noun, method, params):
        self._record(method, params)
        item = self.store[noun].pop(params["Name"], None)
        if item is None:
            raise self._not_found(noun, params["Name"])
        self.tags.pop(item["Arn"], None)
        return {}

    def create_preset(self, **params):
        return self._create("Preset", "create_preset", params)

    def get_preset(self, **params):
        return self._get("Preset", "get_preset", params)

    def update_preset(self, **params):
        return self._update("Preset", "update_preset", params)

    def delete_preset(self, **params):
        return self._delete("Preset", "delete_preset", params)

    def create_job_template(self, **params):
        return self._create("JobTemplate", "create_job_template", params)

    def get_job_template(self, **params):
        return self._get("JobTemplate", "get_job_template", params)

    def update_job_template(self, **params):
        return self._update("JobTemplate", "update_job_template", params)

    def delete_job_template(self, **params):
        return self._delete("JobTemplate", "delete_job_template", params)

    def create_queue(self, **params):
        return self._create("Queue", "create_queue", params)

    def get_queue(self, **params):
        return self._get("Queue", "get_queue", params)

    def update_queue(self, **params):
        return self._update("Queue", "update_queue", params)

    def delete_queue(self, **params):
        return self._delete("Queue", "delete_queue", params)

    def list_tags_for_resource(self, **params):
        self._record("list_tags_for_resource", params)
        return {"ResourceTags": {"Arn": params["Arn"], "Tags": dict(self.tags.get(params["Arn"], {}))}}

    def tag_resource(self, **params):
        self._record("tag_resource", params)
        self.tags.setdefault(params["Arn"], {}).update(params["Tags"])
        return {}

    def untag_resource(self, **params):
        self._record("untag_resource", params)
        current = self.tags.setdefault(params["Arn"], {})
        for key in params.get("TagKeys") or []:
            current.pop(key, None)
        return {}


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user config, project config and AWS settings out of every test."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for name in ("AWS_REGION", "AWS_PROFILE", "MCPROVIDER_REGION", "MCPROVIDER_PROFILE", "MCPROVIDER_ENDPOINT_URL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def fake_client():
    """In-memory MediaConvert client."""
    return FakeMediaConvertClient()


@pytest.fixture
def client_factory(fake_client):
    """Factory handing out the shared fake client."""
    return lambda: fake_client


@pytest.fixture
def fast_retry():
    """Retry policy with millisecond backoff."""
    return RetryPolicy(max_attempts=3, base_delay=0.001, max_delay=0.01, multiplier=2.0)


@pytest.fixture
def audio_preset_config():
    """Audio-only CMFC preset with a single AAC track."""
    return {
        "name": "audio-only",
        "description": "AAC stereo",
        "settings": [{
            "container_settings": [{
                "container": "CMFC",
                "cmfc_settings": [{"scte35_source": "NONE"}],
            }],
            "audio_description": [{
                "codec_settings": [{
                    "codec": "AAC",
                    "aac_settings": [{
                        "bitrate": 96000,
                        "coding_mode": "CODING_MODE_2_0",
                        "sample_rate": 48000,
                        "specification": "MPEG4",
                        "codec_profile": "LC",
                        "rate_control_mode": "CBR",
                        "raw_format": "NONE",
                    }],
                }],
            }],
        }],
    }


def h264_preset(name="video", **h264):
    """Preset with an MP4 container and one H.264 video description."""
    return {
        "name": name,
        "settings": [{
            "container_settings": [{"container": "MP4"}],
            "video_description": [{
                "width": 1280,
                "height": 720,
                "codec_settings": [{
                    "codec": "H_264",
                    "h264_settings": [h264],
                }],
            }],
        }],
    }


@pytest.fixture
def video_preset_config():
    """H.264 QVBR preset."""
    return h264_preset(
        rate_control_mode="QVBR",
        quality_tuning_level="SINGLE_PASS",
        qvbr_settings=[{"qvbr_quality_level": 9}],
        max_bitrate=5000000,
    )


@pytest.fixture
def queue_config():
    """On-demand queue."""
    return {"name": "standard", "description": "default work queue", "tags": {"team": "media"}}


@pytest.fixture
def job_template_config():
    """Job template with one file output group referencing a preset and a queue."""
    return {
        "name": "vod",
        "queue": "standard",
        "priority": 10,
        "settings": [{
            "input": [{
                "audio_selector": [{"name": "Audio Selector 1", "default_selection": "DEFAULT"}],
            }],
            "output_group": [{
                "name": "File Group",
                "output_group_settings": [{
                    "type": "FILE_GROUP_SETTINGS",
                    "file_group_settings": [{"destination": "s3://bucket/out/"}],
                }],
                "output": [{"preset": "audio-only", "name_modifier": "_audio"}],
            }],
        }],
    }


@pytest.fixture
def make_h264_preset():
    """Builder for H.264 presets: ``make_h264_preset("name", rate_control_mode="QVBR")``."""
    return h264_preset


@pytest.fixture
def make_client_error():
    """Builder for botocore ClientErrors: ``make_client_error("NotFoundException", 404)``."""
    return client_error
