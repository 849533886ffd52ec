"""Job template descriptor."""

from .nodes import Block, ResourceSchema, block, int_set, integer, number, string, string_set, tags
from .shared import (
    audio_description,
    caption_description,
    container_settings,
    hdr10_metadata,
    image_inserter,
    rectangle,
    remix_settings,
    video_description,
)

CAPTION_SOURCE_VARIANTS = {
    "ANCILLARY": ("ancillary_source_settings",),
    "DVB_SUB": ("dvb_sub_source_settings",),
    "EMBEDDED": ("embedded_source_settings",),
    "SCTE20": ("embedded_source_settings",),
    "IMSC": ("file_source_settings", "track_source_settings"),
    "SCC": ("file_source_settings",),
    "SMI": ("file_source_settings",),
    "SMPTE_TT": ("file_source_settings",),
    "SRT": ("file_source_settings",),
    "STL": ("file_source_settings",),
    "TTML": ("file_source_settings",),
    "WEBVTT": ("file_source_settings",),
    "TELETEXT": ("teletext_source_settings",),
    "NULL_SOURCE": (),
}

OUTPUT_GROUP_VARIANTS = {
    "CMAF_GROUP_SETTINGS": ("cmaf_group_settings",),
    "DASH_ISO_GROUP_SETTINGS": ("dash_iso_group_settings",),
    "FILE_GROUP_SETTINGS": ("file_group_settings",),
    "HLS_GROUP_SETTINGS": ("hls_group_settings",),
    "MS_SMOOTH_GROUP_SETTINGS": ("ms_smooth_group_settings",),
}


def _audio_selector() -> Block:
    return block(
        "audio_selector",
        string("name", required=True),
        string("custom_language_code", min_length=3, max_length=10),
        string("default_selection", enum="AudioDefaultSelection"),
        string("external_audio_file_input"),
        string("language_code", enum="LanguageCode"),
        integer("offset", minimum=-2147483648, maximum=2147483647),
        int_set("pids", minimum=1),
        integer("program_selection", minimum=0, maximum=8),
        remix_settings(),
        string("selector_type", enum="AudioSelectorType"),
        int_set("tracks", minimum=1),
        sdk="AudioSelectors",
        sdk_type="AudioSelector",
        map_key="name",
    )


def _caption_selector() -> Block:
    source_settings = block(
        "source_settings",
        block(
            "ancillary_source_settings",
            string("convert_608_to_708", enum="AncillaryConvert608To708"),
            integer("source_ancillary_channel_number", minimum=1, maximum=4),
            string("terminate_captions", enum="AncillaryTerminateCaptions"),
        ),
        block(
            "dvb_sub_source_settings",
            integer("pid", minimum=1, maximum=2147483647),
        ),
        block(
            "embedded_source_settings",
            string("convert_608_to_708", enum="EmbeddedConvert608To708"),
            integer("source_608_channel_number", minimum=1, maximum=4),
            integer("source_608_track_number", minimum=1, maximum=1),
            string("terminate_captions", enum="EmbeddedTerminateCaptions"),
        ),
        block(
            "file_source_settings",
            string("convert_608_to_708", enum="FileSourceConvert608To708"),
            block(
                "framerate",
                integer("framerate_denominator", minimum=1, maximum=1001),
                integer("framerate_numerator", minimum=1, maximum=60000),
                sdk_type="CaptionSourceFramerate",
            ),
            string("source_file", min_length=14),
            integer("time_delta", minimum=-2147483648, maximum=2147483647),
        ),
        string("source_type", enum="CaptionSourceType"),
        block(
            "teletext_source_settings",
            string("page_number", min_length=3, max_length=3),
        ),
        block(
            "track_source_settings",
            integer("track_number", minimum=1, maximum=2147483647),
        ),
        sdk_type="CaptionSourceSettings",
        discriminator="source_type",
        variants=CAPTION_SOURCE_VARIANTS,
    )
    return block(
        "caption_selector",
        string("name", required=True),
        string("custom_language_code", pattern=r"^[A-Za-z]{3}$"),
        string("language_code", enum="LanguageCode"),
        source_settings,
        sdk="CaptionSelectors",
        sdk_type="CaptionSelector",
        map_key="name",
    )


def _input() -> Block:
    return block(
        "input",
        block(
            "audio_selector_group",
            string("name", required=True),
            string_set("audio_selector_names"),
            sdk="AudioSelectorGroups",
            sdk_type="AudioSelectorGroup",
            map_key="name",
        ),
        _audio_selector(),
        _caption_selector(),
        rectangle("crop"),
        string("deblock_filter", enum="InputDeblockFilter"),
        string("denoise_filter", enum="InputDenoiseFilter"),
        string("filter_enable", enum="InputFilterEnable"),
        integer("filter_strength", minimum=-5, maximum=5),
        image_inserter(),
        block(
            "input_clippings",
            string("end_timecode", pattern=r"^([01][0-9]|2[0-4]):[0-5][0-9]:[0-5][0-9][:;][0-9]{2}$"),
            string("start_timecode", pattern=r"^([01][0-9]|2[0-4]):[0-5][0-9]:[0-5][0-9][:;][0-9]{2}$"),
            sdk_type="InputClipping",
            many=True,
        ),
        string("input_scan_type", enum="InputScanType"),
        rectangle("position"),
        integer("program_number", minimum=1, maximum=2147483647),
        string("psi_control", enum="InputPsiControl"),
        string("timecode_source", enum="InputTimecodeSource"),
        string("timecode_start", min_length=11, max_length=11),
        block(
            "video_selector",
            string("alpha_behavior", enum="AlphaBehavior"),
            string("color_space", enum="ColorSpace"),
            string("color_space_usage", enum="ColorSpaceUsage"),
            hdr10_metadata(),
            integer("pid", minimum=1, maximum=2147483647),
            integer("program_number", minimum=-2147483648, maximum=2147483647),
            string("rotate", enum="InputRotate"),
        ),
        sdk="Inputs",
        sdk_type="InputTemplate",
        many=True,
    )


def _destination_settings() -> Block:
    return block(
        "destination_settings",
        block(
            "s3_settings",
            block(
                "access_control",
                string("canned_acl", enum="S3ObjectCannedAcl"),
                sdk_type="S3DestinationAccessControl",
            ),
            block(
                "encryption",
                string("encryption_type", enum="S3ServerSideEncryptionType"),
                string("kms_key_arn", pattern=r"^arn:aws(-us-gov|-cn)?:kms:"),
                sdk_type="S3EncryptionSettings",
            ),
            sdk_type="S3DestinationSettings",
        ),
        sdk_type="DestinationSettings",
    )


def _output_group_settings() -> Block:
    return block(
        "output_group_settings",
        block(
            "cmaf_group_settings",
            string("base_url"),
            string("client_cache", enum="CmafClientCache"),
            string("code_specification", enum="CmafCodecSpecification"),
            string("destination", pattern=r"^s3:\/\/"),
            _destination_settings(),
            integer("fragment_length", minimum=1, maximum=2147483647),
            string("manifest_compression", enum="CmafManifestCompression"),
            string("manifest_duration_format", enum="CmafManifestDurationFormat"),
            integer("min_buffer_time", minimum=0, maximum=2147483647),
            number("min_final_segment_length", minimum=0.0),
            string("mpd_profile", enum="CmafMpdProfile"),
            string("segment_control", enum="CmafSegmentControl"),
            integer("segment_length", minimum=1, maximum=2147483647),
            string("stream_inf_resolution", enum="CmafStreamInfResolution"),
            string("write_dash_manifest", enum="CmafWriteDASHManifest", sdk="WriteDashManifest"),
            string("write_hls_manifest", enum="CmafWriteHLSManifest", sdk="WriteHlsManifest"),
            string(
                "write_segment_timeline_in_representation",
                enum="CmafWriteSegmentTimelineInRepresentation",
            ),
        ),
        block(
            "dash_iso_group_settings",
            string("base_url"),
            string("destination", pattern=r"^s3:\/\/"),
            _destination_settings(),
            integer("fragment_length", minimum=1, maximum=2147483647),
            string("hbbtv_compliance", enum="DashIsoHbbtvCompliance"),
            integer("min_buffer_time", minimum=0, maximum=2147483647),
            number("min_final_segment_length", minimum=0.0),
            string("mpd_profile", enum="DashIsoMpdProfile"),
            string("segment_control", enum="DashIsoSegmentControl"),
            integer("segment_length", minimum=1, maximum=2147483647),
            string(
                "write_segment_timeline_in_representation",
                enum="DashIsoWriteSegmentTimelineInRepresentation",
            ),
        ),
        block(
            "file_group_settings",
            string("destination", pattern=r"^s3:\/\/"),
            _destination_settings(),
        ),
        block(
            "hls_group_settings",
            string("base_url"),
            string("client_cache", enum="HlsClientCache"),
            string("codec_specification", enum="HlsCodecSpecification"),
            string("destination", pattern=r"^s3:\/\/"),
            _destination_settings(),
            string("directory_structure", enum="HlsDirectoryStructure"),
            string("manifest_compression", enum="HlsManifestCompression"),
            string("manifest_duration_format", enum="HlsManifestDurationFormat"),
            number("min_final_segment_length", minimum=0.0),
            integer("min_segment_length", minimum=0, maximum=2147483647),
            string("output_selection", enum="HlsOutputSelection"),
            string("program_date_time", enum="HlsProgramDateTime"),
            integer("program_date_time_period", minimum=0, maximum=3600),
            string("segment_control", enum="HlsSegmentControl"),
            integer("segment_length", minimum=1, maximum=2147483647),
            integer("segments_per_subdirectory", minimum=1, maximum=2147483647),
            string("stream_inf_resolution", enum="HlsStreamInfResolution"),
            string("timed_metadata_id3_frame", enum="HlsTimedMetadataId3Frame"),
            integer("timed_metadata_id3_period", minimum=-2147483648, maximum=2147483647),
            integer("timestamp_delta_milliseconds", minimum=-2147483648, maximum=2147483647),
        ),
        block(
            "ms_smooth_group_settings",
            string("audio_deduplication", enum="MsSmoothAudioDeduplication"),
            string("destination", pattern=r"^s3:\/\/"),
            _destination_settings(),
            integer("fragment_length", minimum=1, maximum=2147483647),
            string("manifest_encoding", enum="MsSmoothManifestEncoding"),
        ),
        string("type", enum="OutputGroupType"),
        sdk_type="OutputGroupSettings",
        discriminator="type",
        variants=OUTPUT_GROUP_VARIANTS,
    )


def _output_group() -> Block:
    output = block(
        "output",
        audio_description(),
        caption_description(),
        container_settings(),
        string("extension"),
        string("name_modifier", min_length=1),
        string("preset", description="Name or ARN of a preset providing the output settings"),
        video_description(),
        sdk="Outputs",
        sdk_type="Output",
        many=True,
    )
    return block(
        "output_group",
        string("custom_name"),
        string("name"),
        _output_group_settings(),
        output,
        sdk="OutputGroups",
        sdk_type="OutputGroup",
        many=True,
    )


def _settings() -> Block:
    return block(
        "settings",
        integer("ad_avail_offset", minimum=-1000, maximum=1000),
        block(
            "avail_blanking",
            string("avail_blanking_image", min_length=14),
        ),
        block(
            "esam",
            block(
                "manifest_confirm_condition_notification",
                string("mcc_xml", pattern=r"^\s*<(.|\n)*ManifestConfirmConditionNotification(.|\n)*>\s*$"),
                sdk_type="EsamManifestConfirmConditionNotification",
            ),
            integer("response_signal_preroll", minimum=0, maximum=30000),
            block(
                "signal_processing_notification",
                string("scc_xml", pattern=r"^\s*<(.|\n)*SignalProcessingNotification(.|\n)*>\s*$"),
                sdk_type="EsamSignalProcessingNotification",
            ),
            sdk_type="EsamSettings",
        ),
        _input(),
        block(
            "motion_image_inserter",
            block(
                "framerate",
                integer("framerate_denominator", minimum=1, maximum=17895697),
                integer("framerate_numerator", minimum=1, maximum=2147483640),
                sdk_type="MotionImageInsertionFramerate",
            ),
            string("input", min_length=14),
            string("insertion_mode", enum="MotionImageInsertionMode"),
            block(
                "offset",
                integer("image_x", minimum=0, maximum=2147483647),
                integer("image_y", minimum=0, maximum=2147483647),
                sdk_type="MotionImageInsertionOffset",
            ),
            string("playback", enum="MotionImagePlayback"),
            string("start_time", min_length=11, max_length=11),
        ),
        _output_group(),
        block(
            "timecode_config",
            string("anchor"),
            string("source", enum="TimecodeSource"),
            string("start"),
            string("timestamp_offset"),
        ),
        sdk_type="JobTemplateSettings",
        required=True,
    )


def build() -> ResourceSchema:
    root = block(
        "job_template",
        block(
            "acceleration_settings",
            string("mode", enum="AccelerationMode", required=True),
        ),
        string("arn", computed=True),
        string("category"),
        string("description"),
        block(
            "hop_destinations",
            integer("priority", minimum=-50, maximum=50),
            string("queue"),
            integer("wait_minutes", minimum=1, maximum=2147483647, required=True),
            sdk_type="HopDestination",
            many=True,
        ),
        string("name", required=True, force_new=True),
        integer("priority", minimum=-50, maximum=50),
        string("queue", description="Name or ARN of the default queue for jobs created from this template"),
        _settings(),
        string("status_update_interval", enum="StatusUpdateInterval", default="SECONDS_60"),
        tags(),
        string("type", computed=True),
        sdk_type="JobTemplate",
    )
    return ResourceSchema(
        "job_template", "JobTemplate", root, aliases=("aws_media_convert_job_template", "job_templates"),
    )
