"""Sub-trees shared by presets and job template outputs.

Each builder returns a fresh block; the same SDK type may appear at several
places in a resource tree (``Rectangle`` for crop and position, the output
descriptions inside job template output groups).
"""

from typing import Tuple

from .nodes import Block, Node, block, int_list, int_set, integer, number, string, string_set


def rectangle(key: str) -> Block:
    return block(
        key,
        integer("height", minimum=2),
        integer("width", minimum=2),
        integer("x", minimum=0),
        integer("y", minimum=0),
        sdk_type="Rectangle",
    )


def hdr10_metadata() -> Block:
    return block(
        "hdr10_metadata",
        integer("blue_primary_x", minimum=0, maximum=50000),
        integer("blue_primary_y", minimum=0, maximum=50000),
        integer("green_primary_x", minimum=0, maximum=50000),
        integer("green_primary_y", minimum=0, maximum=50000),
        integer("max_content_light_level", minimum=0, maximum=65535),
        integer("max_frame_average_light_level", minimum=0, maximum=65535),
        integer("max_luminance", minimum=0),
        integer("min_luminance", minimum=0),
        integer("red_primary_x", minimum=0, maximum=50000),
        integer("red_primary_y", minimum=0, maximum=50000),
        integer("white_point_x", minimum=0, maximum=50000),
        integer("white_point_y", minimum=0, maximum=50000),
        sdk_type="Hdr10Metadata",
    )


def image_inserter() -> Block:
    return block(
        "image_inserter",
        block(
            "insertable_image",
            integer("duration", minimum=0),
            integer("fade_in", minimum=0),
            integer("fade_out", minimum=0),
            integer("height", minimum=0),
            string("image_inserter_input", min_length=14),
            integer("image_x", minimum=0),
            integer("image_y", minimum=0),
            integer("layer", minimum=0, maximum=99),
            integer("opacity", minimum=0, maximum=100, default=50),
            string("start_time"),
            integer("width", minimum=0),
            sdk="InsertableImages",
            sdk_type="InsertableImage",
            many=True,
        ),
        sdk_type="ImageInserter",
    )


def remix_settings() -> Block:
    return block(
        "remix_settings",
        block(
            "channel_mapping",
            block(
                "output_channels",
                int_list("input_channels", minimum=-60, maximum=6),
                sdk_type="OutputChannelMapping",
                many=True,
            ),
            sdk_type="ChannelMapping",
        ),
        integer("channels_in", minimum=1, maximum=64),
        integer("channels_out", minimum=1, maximum=64),
        sdk_type="RemixSettings",
    )


# Audio

AUDIO_CODEC_VARIANTS = {
    "AAC": ("aac_settings",),
    "AC3": ("ac3_settings",),
    "AIFF": ("aiff_settings",),
    "EAC3": ("eac3_settings",),
    "EAC3_ATMOS": ("eac3_atmos_settings",),
    "MP2": ("mp2_settings",),
    "MP3": ("mp3_settings",),
    "OPUS": ("opus_settings",),
    "VORBIS": ("vorbis_settings",),
    "WAV": ("wav_settings",),
    "PASSTHROUGH": (),
}


def _mix_levels() -> Tuple[Node, ...]:
    return (
        number("lo_ro_center_mix_level"),
        number("lo_ro_surround_mix_level"),
        number("lt_rt_center_mix_level"),
        number("lt_rt_surround_mix_level"),
    )


def audio_codec_settings() -> Block:
    return block(
        "codec_settings",
        block(
            "aac_settings",
            string("audio_description_broadcaster_mix", enum="AacAudioDescriptionBroadcasterMix"),
            integer("bitrate", minimum=6000, maximum=1024000),
            string("codec_profile", enum="AacCodecProfile"),
            string("coding_mode", enum="AacCodingMode"),
            string("rate_control_mode", enum="AacRateControlMode"),
            string("raw_format", enum="AacRawFormat"),
            integer("sample_rate", minimum=8000, maximum=96000),
            string("specification", enum="AacSpecification"),
            string("vbr_quality", enum="AacVbrQuality"),
        ),
        block(
            "ac3_settings",
            integer("bitrate", minimum=64000, maximum=640000),
            string("bitstream_mode", enum="Ac3BitstreamMode"),
            string("coding_mode", enum="Ac3CodingMode"),
            integer("dialnorm", minimum=1, maximum=31),
            string("dynamic_range_compression_profile", enum="Ac3DynamicRangeCompressionProfile"),
            string("lfe_filter", enum="Ac3LfeFilter"),
            string("metadata_control", enum="Ac3MetadataControl"),
            integer("sample_rate", minimum=48000, maximum=48000),
        ),
        block(
            "aiff_settings",
            integer("bitdepth", minimum=16, maximum=24),
            integer("channels", minimum=1, maximum=64),
            integer("sample_rate", minimum=8000, maximum=192000),
        ),
        block(
            "eac3_atmos_settings",
            integer("bitrate", minimum=384000, maximum=768000),
            string("bitstream_mode", enum="Eac3AtmosBitstreamMode"),
            string("coding_mode", enum="Eac3AtmosCodingMode"),
            string("dialogue_intelligence", enum="Eac3AtmosDialogueIntelligence"),
            string("dynamic_range_compression_line", enum="Eac3AtmosDynamicRangeCompressionLine"),
            string("dynamic_range_compression_rf", enum="Eac3AtmosDynamicRangeCompressionRf"),
            *_mix_levels(),
            string("metering_mode", enum="Eac3AtmosMeteringMode"),
            integer("sample_rate", minimum=48000, maximum=48000),
            integer("speech_threshold", minimum=1, maximum=100),
            string("stereo_downmix", enum="Eac3AtmosStereoDownmix"),
            string("surround_ex_mode", enum="Eac3AtmosSurroundExMode"),
        ),
        block(
            "eac3_settings",
            string("attenuation_control", enum="Eac3AttenuationControl"),
            integer("bitrate", minimum=64000, maximum=640000),
            string("bitstream_mode", enum="Eac3BitstreamMode"),
            string("coding_mode", enum="Eac3CodingMode"),
            string("dc_filter", enum="Eac3DcFilter"),
            integer("dialnorm", minimum=1, maximum=31),
            string("dynamic_range_compression_line", enum="Eac3DynamicRangeCompressionLine"),
            string("dynamic_range_compression_rf", enum="Eac3DynamicRangeCompressionRf"),
            string("lfe_control", enum="Eac3LfeControl"),
            string("lfe_filter", enum="Eac3LfeFilter"),
            *_mix_levels(),
            string("metadata_control", enum="Eac3MetadataControl"),
            string("passthrough_control", enum="Eac3PassthroughControl"),
            string("phase_control", enum="Eac3PhaseControl"),
            integer("sample_rate", minimum=48000, maximum=48000),
            string("stereo_downmix", enum="Eac3StereoDownmix"),
            string("surround_ex_mode", enum="Eac3SurroundExMode"),
            string("surround_mode", enum="Eac3SurroundMode"),
        ),
        block(
            "mp2_settings",
            integer("bitrate", minimum=32000, maximum=384000),
            integer("channels", minimum=1, maximum=2),
            integer("sample_rate", minimum=32000, maximum=48000),
        ),
        block(
            "mp3_settings",
            integer("bitrate", minimum=16000, maximum=320000),
            integer("channels", minimum=1, maximum=2),
            string("rate_control_mode", enum="Mp3RateControlMode"),
            integer("sample_rate", minimum=22050, maximum=48000),
            integer("vbr_quality", minimum=0, maximum=9),
        ),
        block(
            "opus_settings",
            integer("bitrate", minimum=32000, maximum=192000),
            integer("channels", minimum=1, maximum=2),
            integer("sample_rate", minimum=16000, maximum=48000),
        ),
        block(
            "vorbis_settings",
            integer("channels", minimum=1, maximum=2),
            integer("sample_rate", minimum=22050, maximum=48000),
            integer("vbr_quality", minimum=-1, maximum=10),
        ),
        block(
            "wav_settings",
            integer("bitdepth", minimum=16, maximum=24),
            integer("channels", minimum=1, maximum=64),
            string("format", enum="WavFormat"),
            integer("sample_rate", minimum=8000, maximum=192000),
        ),
        string("codec", enum="AudioCodec"),
        sdk_type="AudioCodecSettings",
        discriminator="codec",
        variants=AUDIO_CODEC_VARIANTS,
    )


def audio_description() -> Block:
    return block(
        "audio_description",
        block(
            "audio_channel_tagging_settings",
            string("channel_tag", enum="AudioChannelTag"),
        ),
        block(
            "audio_normalization_settings",
            string("algorithm", enum="AudioNormalizationAlgorithm"),
            string("algorithm_control", enum="AudioNormalizationAlgorithmControl"),
            integer("correction_gate_level", minimum=-70, maximum=0),
            string("loudness_logging", enum="AudioNormalizationLoudnessLogging"),
            string("peak_calculation", enum="AudioNormalizationPeakCalculation"),
            number("target_lkfs", minimum=-59.0, maximum=0.0),
        ),
        string("audio_source_name", max_length=2048),
        integer("audio_type", minimum=0, maximum=255),
        string("audio_type_control", enum="AudioTypeControl"),
        audio_codec_settings(),
        string("custom_language_code", pattern=r"^[A-Za-z]{2,3}(-[A-Za-z-]+)?$"),
        string("language_code", enum="LanguageCode"),
        string("language_code_control", enum="AudioLanguageCodeControl"),
        remix_settings(),
        string("stream_name", pattern=r"^[\w\s]*$"),
        sdk="AudioDescriptions",
        sdk_type="AudioDescription",
        many=True,
    )


# Captions

CAPTION_DESTINATION_VARIANTS = {
    "BURN_IN": ("burnin_destination_settings",),
    "DVB_SUB": ("dvb_sub_destination_settings",),
    "EMBEDDED": ("embedded_destination_settings",),
    "EMBEDDED_PLUS_SCTE20": ("embedded_destination_settings",),
    "SCTE20_PLUS_EMBEDDED": ("embedded_destination_settings",),
    "IMSC": ("imsc_destination_settings",),
    "SCC": ("scc_destination_settings",),
    "TELETEXT": ("teletext_destination_settings",),
    "TTML": ("ttml_destination_settings",),
    "SRT": (),
    "SMI": (),
    "WEBVTT": (),
}


def _subtitle_style(prefix: str) -> Tuple[Node, ...]:
    return (
        string("alignment", enum=f"{prefix}Alignment"),
        string("background_color", enum=f"{prefix}BackgroundColor"),
        integer("background_opacity", minimum=0, maximum=255),
        string("font_color", enum=f"{prefix}FontColor"),
        integer("font_opacity", minimum=0, maximum=255),
        integer("font_resolution", minimum=96, maximum=600),
        string("font_script", enum="FontScript"),
        integer("font_size", minimum=0, maximum=96),
        string("outline_color", enum=f"{prefix}OutlineColor"),
        integer("outline_size", minimum=0, maximum=10),
        string("shadow_color", enum=f"{prefix}ShadowColor"),
        integer("shadow_opacity", minimum=0, maximum=255),
        integer("shadow_x_offset"),
        integer("shadow_y_offset"),
    )


def caption_destination_settings() -> Block:
    return block(
        "destination_settings",
        block(
            "burnin_destination_settings",
            *_subtitle_style("BurninSubtitle"),
            string("teletext_spacing", enum="BurninSubtitleTeletextSpacing"),
            integer("x_position", minimum=0),
            integer("y_position", minimum=0),
        ),
        string("destination_type", enum="CaptionDestinationType"),
        block(
            "dvb_sub_destination_settings",
            *_subtitle_style("DvbSubtitle"),
            string("subtitling_type", enum="DvbSubtitlingType"),
            string("teletext_spacing", enum="DvbSubtitleTeletextSpacing"),
            integer("x_position", minimum=0),
            integer("y_position", minimum=0),
        ),
        block(
            "embedded_destination_settings",
            integer("destination_608_channel_number", minimum=1, maximum=4),
            integer("destination_708_service_number", minimum=1, maximum=6),
        ),
        block(
            "imsc_destination_settings",
            string("style_passthrough", enum="ImscStylePassthrough"),
        ),
        block(
            "scc_destination_settings",
            string("framerate", enum="SccDestinationFramerate"),
        ),
        block(
            "teletext_destination_settings",
            string("page_number", min_length=3, max_length=3),
            string_set("page_types", enum="TeletextPageType"),
        ),
        block(
            "ttml_destination_settings",
            string("style_passthrough", enum="TtmlStylePassthrough"),
        ),
        sdk_type="CaptionDestinationSettings",
        discriminator="destination_type",
        variants=CAPTION_DESTINATION_VARIANTS,
    )


def _caption_fields() -> Tuple[Node, ...]:
    return (
        string("custom_language_code", pattern=r"^[A-Za-z]{2,3}(-[A-Za-z-]+)?$"),
        caption_destination_settings(),
        string("language_code", enum="LanguageCode"),
        string("language_description"),
    )


def caption_description_preset() -> Block:
    return block(
        "caption_description",
        *_caption_fields(),
        sdk="CaptionDescriptions",
        sdk_type="CaptionDescriptionPreset",
        many=True,
    )


def caption_description() -> Block:
    """Output caption description; unlike the preset variant it names its caption selector."""
    return block(
        "caption_description",
        string("caption_selector_name", required=True),
        *_caption_fields(),
        sdk="CaptionDescriptions",
        sdk_type="CaptionDescription",
        many=True,
    )


# Containers

CONTAINER_VARIANTS = {
    "CMFC": ("cmfc_settings",),
    "F4V": ("f4v_settings",),
    "M2TS": ("m2ts_settings",),
    "M3U8": ("m3u8_settings",),
    "MOV": ("mov_settings",),
    "MP4": ("mp4_settings",),
    "MPD": ("mpd_settings",),
    "MXF": ("mxf_settings",),
    "ISMV": (),
    "WEBM": (),
    "RAW": (),
}


def _m2ts_settings() -> Block:
    return block(
        "m2ts_settings",
        string("audio_buffer_model", enum="M2tsAudioBufferModel"),
        string("audio_duration", enum="M2tsAudioDuration"),
        integer("audio_frames_per_pes", minimum=0),
        int_set("audio_pids", minimum=32),
        integer("bitrate", minimum=0),
        string("buffer_model", enum="M2tsBufferModel"),
        block(
            "dvb_nit_settings",
            integer("network_id", minimum=0, maximum=65535),
            string("network_name", min_length=1, max_length=256),
            integer("nit_interval", minimum=25, maximum=10000),
        ),
        block(
            "dvb_sdt_settings",
            string("output_sdt", enum="OutputSdt"),
            integer("sdt_interval", minimum=25, maximum=2000),
            string("service_name", min_length=1, max_length=256),
            string("service_provider_name", min_length=1, max_length=256),
        ),
        int_set("dvb_sub_pids", minimum=32),
        block(
            "dvb_tdt_settings",
            integer("tdt_interval", minimum=1000, maximum=30000),
        ),
        integer("dvb_teletext_pid", minimum=32, maximum=8182, default=499),
        string("ebp_audio_interval", enum="M2tsEbpAudioInterval"),
        string("ebp_placement", enum="M2tsEbpPlacement"),
        string("es_rate_in_pes", enum="M2tsEsRateInPes"),
        string("force_ts_video_ebp_order", enum="M2tsForceTsVideoEbpOrder"),
        number("fragment_time", minimum=0.0),
        integer("max_pcr_interval", minimum=0, maximum=500),
        integer("min_ebp_interval", minimum=0, maximum=10000),
        string("nielsen_id3", enum="M2tsNielsenId3"),
        number("null_packet_bitrate", minimum=0.0),
        integer("pat_interval", minimum=0, maximum=1000),
        string("pcr_control", enum="M2tsPcrControl"),
        integer("pcr_pid", minimum=32, maximum=8182),
        integer("pmt_interval", minimum=0, maximum=1000),
        integer("pmt_pid", minimum=32, maximum=8182, default=48),
        integer("private_metadata_pid", minimum=32, maximum=8182, default=503),
        integer("program_number", minimum=0, maximum=65535, default=1),
        string("rate_mode", enum="M2tsRateMode"),
        block(
            "scte_35_esam",
            integer("scte_35_esam_pid", minimum=32, maximum=8182),
            sdk_type="M2tsScte35Esam",
        ),
        integer("scte_35_pid", minimum=32, maximum=8182),
        string("scte_35_source", enum="M2tsScte35Source"),
        string("segmentation_markers", enum="M2tsSegmentationMarkers"),
        string("segmentation_style", enum="M2tsSegmentationStyle"),
        number("segmentation_time", minimum=0.0),
        integer("timed_metadata_pid", minimum=32, maximum=8182, default=502),
        integer("transport_stream_id", minimum=0, maximum=65535),
        integer("video_pid", minimum=32, maximum=8182),
    )


def _m3u8_settings() -> Block:
    return block(
        "m3u8_settings",
        string("audio_duration", enum="M3u8AudioDuration"),
        integer("audio_frames_per_pes", minimum=0),
        int_set("audio_pids", minimum=32),
        string("nielsen_id3", enum="M3u8NielsenId3"),
        integer("pat_interval", minimum=0, maximum=1000),
        string("pcr_control", enum="M3u8PcrControl"),
        integer("pcr_pid", minimum=32, maximum=8182),
        integer("pmt_interval", minimum=0, maximum=1000),
        integer("pmt_pid", minimum=32, maximum=8182),
        integer("private_metadata_pid", minimum=32, maximum=8182),
        integer("program_number", minimum=0, maximum=65535),
        integer("scte_35_pid", minimum=32, maximum=8182),
        string("scte_35_source", enum="M3u8Scte35Source"),
        string("timed_metadata", enum="TimedMetadata"),
        integer("timed_metadata_pid", minimum=32, maximum=8182),
        integer("transport_stream_id", minimum=0, maximum=65535),
        integer("video_pid", minimum=32, maximum=8182),
    )


def container_settings(required: bool = False) -> Block:
    return block(
        "container_settings",
        block(
            "cmfc_settings",
            string("audio_duration", enum="CmfcAudioDuration"),
            string("scte35_esam", enum="CmfcScte35Esam"),
            string("scte35_source", enum="CmfcScte35Source"),
        ),
        string("container", enum="ContainerType"),
        block(
            "f4v_settings",
            string("moov_placement", enum="F4vMoovPlacement"),
        ),
        _m2ts_settings(),
        _m3u8_settings(),
        block(
            "mov_settings",
            string("clap_atom", enum="MovClapAtom"),
            string("cslg_atom", enum="MovCslgAtom"),
            string("mpeg2_fourcc_control", enum="MovMpeg2FourCCControl", sdk="Mpeg2FourCCControl"),
            string("padding_control", enum="MovPaddingControl"),
            string("reference", enum="MovReference"),
        ),
        block(
            "mp4_settings",
            string("audio_duration", enum="CmfcAudioDuration"),
            string("cslg_atom", enum="Mp4CslgAtom"),
            integer("ctts_version", minimum=0, maximum=1),
            string("free_space_box", enum="Mp4FreeSpaceBox"),
            string("moov_placement", enum="Mp4MoovPlacement"),
            string("mp4_major_brand"),
        ),
        block(
            "mpd_settings",
            string("accessibility_caption_hints", enum="MpdAccessibilityCaptionHints"),
            string("audio_duration", enum="MpdAudioDuration"),
            string("caption_container_type", enum="MpdCaptionContainerType"),
            string("scte35_esam", enum="MpdScte35Esam"),
            string("scte35_source", enum="MpdScte35Source"),
        ),
        block(
            "mxf_settings",
            string("afd_signaling", enum="MxfAfdSignaling"),
            string("profile", enum="MxfProfile"),
        ),
        sdk_type="ContainerSettings",
        required=required,
        discriminator="container",
        variants=CONTAINER_VARIANTS,
    )


# Video

VIDEO_CODEC_VARIANTS = {
    "AV1": ("av1_settings",),
    "AVC_INTRA": ("avc_intra_settings",),
    "FRAME_CAPTURE": ("frame_capture_settings",),
    "H_264": ("h264_settings",),
    "H_265": ("h265_settings",),
    "MPEG2": ("mpeg2_settings",),
    "PRORES": ("prores_settings",),
    "VC3": ("vc3_settings",),
    "VP8": ("vp8_settings",),
    "VP9": ("vp9_settings",),
}


def _framerate(prefix: str, numerator_minimum: int = 1) -> Tuple[Node, ...]:
    return (
        string("framerate_control", enum=f"{prefix}FramerateControl"),
        string("framerate_conversion_algorithm", enum=f"{prefix}FramerateConversionAlgorithm"),
        integer("framerate_denominator", minimum=1, maximum=1001),
        integer("framerate_numerator", minimum=numerator_minimum, maximum=60000),
    )


def _par(prefix: str) -> Tuple[Node, ...]:
    return (
        string("par_control", enum=f"{prefix}ParControl"),
        integer("par_denominator", minimum=1),
        integer("par_numerator", minimum=1),
    )


def _qvbr(prefix: str) -> Block:
    return block(
        "qvbr_settings",
        integer("max_average_bitrate", minimum=1000, maximum=1152000000),
        integer("qvbr_quality_level", minimum=1, maximum=10),
        number("qvbr_quality_level_fine_tune", minimum=0.0, maximum=1.0),
        sdk_type=f"{prefix}QvbrSettings",
    )


def _h264_settings() -> Block:
    return block(
        "h264_settings",
        string("adaptive_quantization", enum="H264AdaptiveQuantization"),
        integer("bitrate", minimum=1000, maximum=1152000000),
        string("codec_level", enum="H264CodecLevel"),
        string("codec_profile", enum="H264CodecProfile"),
        string("dynamic_sub_gop", enum="H264DynamicSubGop"),
        string("entropy_encoding", enum="H264EntropyEncoding"),
        string("field_encoding", enum="H264FieldEncoding"),
        string("flicker_adaptive_quantization", enum="H264FlickerAdaptiveQuantization"),
        *_framerate("H264"),
        string("gop_b_reference", enum="H264GopBReference"),
        integer("gop_closed_cadence", minimum=0),
        number("gop_size", minimum=0.0),
        string("gop_size_units", enum="H264GopSizeUnits"),
        integer("hrd_buffer_initial_fill_percentage", minimum=0, maximum=100),
        integer("hrd_buffer_size", minimum=0, maximum=1152000000),
        string("interlace_mode", enum="H264InterlaceMode"),
        integer("max_bitrate", minimum=1000, maximum=1152000000),
        integer("min_i_interval", minimum=0, maximum=30),
        integer("number_b_frames_between_reference_frames", minimum=0, maximum=7),
        integer("number_reference_frames", minimum=1, maximum=6),
        *_par("H264"),
        string("quality_tuning_level", enum="H264QualityTuningLevel"),
        _qvbr("H264"),
        string("rate_control_mode", enum="H264RateControlMode"),
        string("repeat_pps", enum="H264RepeatPps"),
        string("scene_change_detect", enum="H264SceneChangeDetect"),
        integer("slices", minimum=1, maximum=32),
        string("slow_pal", enum="H264SlowPal", default="DISABLED"),
        integer("softness", minimum=0, maximum=128),
        string("spatial_adaptive_quantization", enum="H264SpatialAdaptiveQuantization"),
        string("syntax", enum="H264Syntax", default="DEFAULT"),
        string("telecine", enum="H264Telecine", default="NONE"),
        string("temporal_adaptive_quantization", enum="H264TemporalAdaptiveQuantization", default="ENABLED"),
        string("unregistered_sei_timecode", enum="H264UnregisteredSeiTimecode"),
    )


def _h265_settings() -> Block:
    return block(
        "h265_settings",
        string("adaptive_quantization", enum="H265AdaptiveQuantization"),
        string("alternate_transfer_function_sei", enum="H265AlternateTransferFunctionSei"),
        integer("bitrate", minimum=1000, maximum=1466400000),
        string("codec_level", enum="H265CodecLevel"),
        string("codec_profile", enum="H265CodecProfile"),
        string("dynamic_sub_gop", enum="H265DynamicSubGop"),
        string("flicker_adaptive_quantization", enum="H265FlickerAdaptiveQuantization"),
        *_framerate("H265"),
        string("gop_b_reference", enum="H265GopBReference"),
        integer("gop_closed_cadence", minimum=0),
        number("gop_size", minimum=0.0),
        string("gop_size_units", enum="H265GopSizeUnits"),
        integer("hrd_buffer_initial_fill_percentage", minimum=0, maximum=100),
        integer("hrd_buffer_size", minimum=0, maximum=1466400000),
        string("interlace_mode", enum="H265InterlaceMode", default="PROGRESSIVE"),
        integer("max_bitrate", minimum=1000, maximum=1466400000),
        integer("min_i_interval", minimum=0, maximum=30),
        integer("number_b_frames_between_reference_frames", minimum=0, maximum=7),
        integer("number_reference_frames", minimum=1, maximum=6),
        *_par("H265"),
        string("quality_tuning_level", enum="H265QualityTuningLevel"),
        _qvbr("H265"),
        string("rate_control_mode", enum="H265RateControlMode"),
        string("sample_adaptive_offset_filter_mode", enum="H265SampleAdaptiveOffsetFilterMode"),
        string("scene_change_detect", enum="H265SceneChangeDetect"),
        integer("slices", minimum=1, maximum=32),
        string("slow_pal", enum="H265SlowPal", default="DISABLED"),
        string("spatial_adaptive_quantization", enum="H265SpatialAdaptiveQuantization", default="ENABLED"),
        string("telecine", enum="H265Telecine"),
        string("temporal_adaptive_quantization", enum="H265TemporalAdaptiveQuantization"),
        string("temporal_ids", enum="H265TemporalIds"),
        string("tiles", enum="H265Tiles"),
        string("unregistered_sei_timecode", enum="H265UnregisteredSeiTimecode"),
        string("write_mp4_packaging_type", enum="H265WriteMp4PackagingType"),
    )


def _mpeg2_settings() -> Block:
    return block(
        "mpeg2_settings",
        string("adaptive_quantization", enum="Mpeg2AdaptiveQuantization"),
        integer("bitrate", minimum=1000, maximum=288000000),
        string("codec_level", enum="Mpeg2CodecLevel"),
        string("codec_profile", enum="Mpeg2CodecProfile"),
        string("dynamic_sub_gop", enum="Mpeg2DynamicSubGop"),
        *_framerate("Mpeg2", numerator_minimum=24),
        integer("gop_closed_cadence", minimum=0),
        number("gop_size", minimum=0.0),
        string("gop_size_units", enum="Mpeg2GopSizeUnits"),
        integer("hrd_buffer_initial_fill_percentage", minimum=0, maximum=100),
        integer("hrd_buffer_size", minimum=0, maximum=47185920),
        string("interlace_mode", enum="Mpeg2InterlaceMode", default="PROGRESSIVE"),
        string("intra_dc_precision", enum="Mpeg2IntraDcPrecision"),
        integer("max_bitrate", minimum=1000, maximum=300000000),
        integer("min_i_interval", minimum=0, maximum=30),
        integer("number_b_frames_between_reference_frames", minimum=0, maximum=7),
        *_par("Mpeg2"),
        string("quality_tuning_level", enum="Mpeg2QualityTuningLevel", default="SINGLE_PASS"),
        string("rate_control_mode", enum="Mpeg2RateControlMode"),
        string("scene_change_detect", enum="Mpeg2SceneChangeDetect"),
        string("slowpal", enum="Mpeg2SlowPal", sdk="SlowPal", default="DISABLED"),
        integer("softness", minimum=17, maximum=128),
        string("spatial_adaptive_quantization", enum="Mpeg2SpatialAdaptiveQuantization"),
        string("syntax", enum="Mpeg2Syntax", default="DEFAULT"),
        string("telecine", enum="Mpeg2Telecine", default="NONE"),
        string("temporal_adaptive_quantization", enum="Mpeg2TemporalAdaptiveQuantization", default="ENABLED"),
    )


def video_codec_settings() -> Block:
    return block(
        "codec_settings",
        block(
            "av1_settings",
            string("adaptive_quantization", enum="Av1AdaptiveQuantization"),
            *_framerate("Av1"),
            number("gop_size", minimum=0.0),
            integer("max_bitrate", minimum=1000, maximum=1152000000),
            integer("number_b_frames_between_reference_frames", minimum=7, maximum=15),
            block(
                "qvbr_settings",
                integer("qvbr_quality_level", minimum=1, maximum=10),
                number("qvbr_quality_level_fine_tune", minimum=0.0, maximum=1.0),
                sdk_type="Av1QvbrSettings",
            ),
            string("rate_control_mode", enum="Av1RateControlMode"),
            integer("slices", minimum=1, maximum=32),
            string("spatial_adaptive_quantization", enum="Av1SpatialAdaptiveQuantization", default="ENABLED"),
        ),
        block(
            "avc_intra_settings",
            string("avc_intra_class", enum="AvcIntraClass"),
            *_framerate("AvcIntra", numerator_minimum=24),
            string("interlace_mode", enum="AvcIntraInterlaceMode"),
            string("slow_pal", enum="AvcIntraSlowPal", default="DISABLED"),
            string("telecine", enum="AvcIntraTelecine", default="NONE"),
        ),
        string("codec", enum="VideoCodec"),
        block(
            "frame_capture_settings",
            integer("framerate_denominator", minimum=1, maximum=2147483647),
            integer("framerate_numerator", minimum=1, maximum=2147483647),
            integer("max_captures", minimum=1, maximum=10000000),
            integer("quality", minimum=1, maximum=100),
        ),
        _h264_settings(),
        _h265_settings(),
        _mpeg2_settings(),
        block(
            "prores_settings",
            string("codec_profile", enum="ProresCodecProfile"),
            *_framerate("Prores"),
            string("interlace_mode", enum="ProresInterlaceMode", default="PROGRESSIVE"),
            *_par("Prores"),
            string("slow_pal", enum="ProresSlowPal"),
            string("telecine", enum="ProresTelecine", default="NONE"),
        ),
        block(
            "vc3_settings",
            *_framerate("Vc3", numerator_minimum=24),
            string("interlace_mode", enum="Vc3InterlaceMode"),
            string("slowpal", enum="Vc3SlowPal", sdk="SlowPal"),
            string("telecine", enum="Vc3Telecine"),
            string("vc3_class", enum="Vc3Class"),
        ),
        block(
            "vp8_settings",
            integer("bitrate", minimum=1000, maximum=1152000000),
            *_framerate("Vp8"),
            number("gop_size", minimum=0.0),
            integer("hrd_buffer_size", minimum=0, maximum=47185920),
            integer("max_bitrate", minimum=1000, maximum=1152000000),
            *_par("Vp8"),
            string("quality_tuning_level", enum="Vp8QualityTuningLevel", default="MULTI_PASS"),
            string("rate_control_mode", enum="Vp8RateControlMode"),
        ),
        block(
            "vp9_settings",
            integer("bitrate", minimum=1000, maximum=480000000),
            *_framerate("Vp9"),
            number("gop_size", minimum=0.0),
            integer("hrd_buffer_size", minimum=0, maximum=47185920),
            integer("max_bitrate", minimum=1000, maximum=480000000),
            *_par("Vp9"),
            string("quality_tuning_level", enum="Vp9QualityTuningLevel", default="MULTI_PASS"),
            string("rate_control_mode", enum="Vp9RateControlMode"),
        ),
        sdk_type="VideoCodecSettings",
        discriminator="codec",
        variants=VIDEO_CODEC_VARIANTS,
    )


def video_preprocessors() -> Block:
    return block(
        "video_preprocessors",
        block(
            "color_corrector",
            integer("brightness", minimum=1, maximum=100),
            string("color_space_conversion", enum="ColorSpaceConversion"),
            integer("contrast", minimum=1, maximum=100),
            hdr10_metadata(),
            integer("hue", minimum=-180, maximum=180),
            integer("saturation", minimum=1, maximum=100),
        ),
        block(
            "deinterlacer",
            string("algorithm", enum="DeinterlaceAlgorithm"),
            string("control", enum="DeinterlacerControl"),
            string("mode", enum="DeinterlacerMode"),
        ),
        block(
            "dolby_vision",
            block(
                "l6_metadata",
                integer("max_cll", minimum=0, maximum=65535),
                integer("max_fall", minimum=0, maximum=65535),
                sdk_type="DolbyVisionLevel6Metadata",
            ),
            string("l6_mode", enum="DolbyVisionLevel6Mode"),
            string("profile", enum="DolbyVisionProfile"),
        ),
        image_inserter(),
        block(
            "noise_reducer",
            string("filter", enum="NoiseReducerFilter"),
            block(
                "filter_settings",
                integer("strength", minimum=0, maximum=3),
                sdk_type="NoiseReducerFilterSettings",
            ),
            block(
                "spatial_filter_settings",
                integer("post_filter_sharpen_strength", minimum=0, maximum=3),
                integer("speed", minimum=-2, maximum=3),
                integer("strength", minimum=0, maximum=16),
                sdk_type="NoiseReducerSpatialFilterSettings",
            ),
            block(
                "temporal_filter_settings",
                integer("aggressive_mode", minimum=0, maximum=4),
                string("post_temporal_sharpening", enum="NoiseFilterPostTemporalSharpening", default="AUTO"),
                integer("speed", minimum=-1, maximum=3),
                integer("strength", minimum=0, maximum=16),
                sdk_type="NoiseReducerTemporalFilterSettings",
            ),
        ),
        block(
            "partner_watermarking",
            block(
                "nexguard_file_marker_settings",
                string("license", min_length=1, max_length=100000),
                integer("payload", minimum=1, maximum=4194303),
                string("preset", min_length=1, max_length=256),
                string("strength", enum="WatermarkingStrength", default="DEFAULT"),
                sdk_type="NexGuardFileMarkerSettings",
            ),
        ),
        block(
            "timecode_burnin",
            integer("font_size", minimum=10, maximum=48),
            string("position", enum="TimecodeBurninPosition"),
            string("prefix", pattern=r"^[ -~]+$"),
        ),
        sdk_type="VideoPreprocessor",
    )


def video_description() -> Block:
    return block(
        "video_description",
        string("afd_signaling", enum="AfdSignaling"),
        string("anti_alias", enum="AntiAlias"),
        video_codec_settings(),
        string("color_metadata", enum="ColorMetadata", default="INSERT"),
        rectangle("crop"),
        string("drop_frame_timecode", enum="DropFrameTimecode"),
        integer("fixed_afd", minimum=0, maximum=15),
        integer("height", minimum=32, maximum=8192),
        rectangle("position"),
        string("respond_to_afd", enum="RespondToAfd"),
        string("scaling_behavior", enum="ScalingBehavior", default="DEFAULT"),
        integer("sharpness", minimum=0, maximum=100),
        string("timecode_insertion", enum="VideoTimecodeInsertion", default="DISABLED"),
        video_preprocessors(),
        integer("width", minimum=32, maximum=8192),
        sdk_type="VideoDescription",
    )
