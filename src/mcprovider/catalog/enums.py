"""Enum registry: every string literal MediaConvert accepts, keyed by SDK enum type.

Categories are declared once here and referenced by name from the schema
catalog. Validation and the sum-type discriminators both read from this
module, so it is the only place an accepted value is spelled out.
"""

from typing import Dict, FrozenSet, List, Tuple

_ENABLED = ("DISABLED", "ENABLED")
_INCLUDE = ("INCLUDE", "EXCLUDE")
_INSERT = ("INSERT", "NONE")
_PASSTHROUGH = ("PASSTHROUGH", "NONE")
_FOLLOW_INPUT = ("FOLLOW_INPUT", "USE_CONFIGURED")
_AUDIO_DURATION = ("DEFAULT_CODEC_DURATION", "MATCH_VIDEO_DURATION")
_PCR_CONTROL = ("PCR_EVERY_PES_PACKET", "CONFIGURED_PCR_PERIOD")
_MOOV_PLACEMENT = ("PROGRESSIVE_DOWNLOAD", "NORMAL")
_FRAMERATE_CONTROL = ("INITIALIZE_FROM_SOURCE", "SPECIFIED")
_FRAMERATE_CONVERSION = ("DUPLICATE_DROP", "INTERPOLATE", "FRAMEFORMER")
_PAR_CONTROL = ("INITIALIZE_FROM_SOURCE", "SPECIFIED")
_INTERLACE_MODE = ("PROGRESSIVE", "TOP_FIELD", "BOTTOM_FIELD", "FOLLOW_TOP_FIELD", "FOLLOW_BOTTOM_FIELD")
_GOP_SIZE_UNITS = ("FRAMES", "SECONDS")
_DYNAMIC_SUB_GOP = ("ADAPTIVE", "STATIC")
_SCENE_CHANGE_DETECT = ("DISABLED", "ENABLED", "TRANSITION_DETECTION")
_QUALITY_TUNING = ("SINGLE_PASS", "SINGLE_PASS_HQ", "MULTI_PASS_HQ")
_RATE_CONTROL = ("VBR", "CBR", "QVBR")
_TELECINE = ("NONE", "SOFT", "HARD")
_HARD_TELECINE = ("NONE", "HARD")
_ADAPTIVE_QUANTIZATION = ("OFF", "LOW", "MEDIUM", "HIGH", "HIGHER", "MAX")
_DRC = ("NONE", "FILM_STANDARD", "FILM_LIGHT", "MUSIC_STANDARD", "MUSIC_LIGHT", "SPEECH")
_SURROUND = ("NOT_INDICATED", "ENABLED", "DISABLED")
_LOUDNESS_METERING = ("ITU_BS_1770_1", "ITU_BS_1770_2", "ITU_BS_1770_3", "ITU_BS_1770_4")
_SUBTITLE_ALIGNMENT = ("CENTERED", "LEFT")
_SUBTITLE_BACKGROUND = ("NONE", "BLACK", "WHITE")
_SUBTITLE_FONT_COLOR = ("WHITE", "BLACK", "YELLOW", "RED", "GREEN", "BLUE")
_SUBTITLE_OUTLINE_COLOR = ("BLACK", "WHITE", "YELLOW", "RED", "GREEN", "BLUE")
_TELETEXT_SPACING = ("FIXED_GRID", "PROPORTIONAL")
_CONVERT_608_TO_708 = ("UPCONVERT", "DISABLED")
_TERMINATE_CAPTIONS = ("END_OF_INPUT", "DISABLED")
_CLIENT_CACHE = ("DISABLED", "ENABLED")
_CODEC_SPECIFICATION = ("RFC_6381", "RFC_4281")
_MANIFEST_COMPRESSION = ("GZIP", "NONE")
_MANIFEST_DURATION_FORMAT = ("FLOATING_POINT", "INTEGER")
_MPD_PROFILE = ("MAIN_PROFILE", "ON_DEMAND_PROFILE")
_SEGMENT_CONTROL = ("SINGLE_FILE", "SEGMENTED_FILES")
_TIMECODE_SOURCE = ("EMBEDDED", "ZEROBASED", "SPECIFIEDSTART")

LANGUAGE_CODES = (
    "ENG", "SPA", "FRA", "DEU", "GER", "ZHO", "ARA", "HIN", "JPN", "RUS", "POR", "ITA", "URD",
    "VIE", "KOR", "PAN", "ABK", "AAR", "AFR", "AKA", "SQI", "AMH", "ARG", "HYE", "ASM", "AVA",
    "AVE", "AYM", "AZE", "BAM", "BAK", "EUS", "BEL", "BEN", "BIH", "BIS", "BOS", "BRE", "BUL",
    "MYA", "CAT", "KHM", "CHA", "CHE", "NYA", "CHU", "CHV", "COR", "COS", "CRE", "HRV", "CES",
    "DAN", "DIV", "NLD", "DZO", "ENM", "EPO", "EST", "EWE", "FAO", "FIJ", "FIN", "FRM", "FUL",
    "GLA", "GLG", "LUG", "KAT", "ELL", "GRN", "GUJ", "HAT", "HAU", "HEB", "HER", "HMO", "HUN",
    "ISL", "IDO", "IBO", "IND", "INA", "ILE", "IKU", "IPK", "GLE", "JAV", "KAL", "KAN", "KAU",
    "KAS", "KAZ", "KIK", "KIN", "KIR", "KOM", "KON", "KUA", "KUR", "LAO", "LAT", "LAV", "LIM",
    "LIN", "LIT", "LUB", "LTZ", "MKD", "MLG", "MSA", "MAL", "MLT", "GLV", "MRI", "MAR", "MAH",
    "MON", "NAU", "NAV", "NDE", "NBL", "NDO", "NEP", "SME", "NOR", "NOB", "NNO", "OCI", "OJI",
    "ORI", "ORM", "OSS", "PLI", "FAS", "POL", "PUS", "QUE", "QAA", "RON", "ROH", "RUN", "SMO",
    "SAG", "SAN", "SRD", "SRB", "SNA", "III", "SND", "SIN", "SLK", "SLV", "SOM", "SOT", "SUN",
    "SWA", "SSW", "SWE", "TGL", "TAH", "TGK", "TAM", "TAT", "TEL", "THA", "BOD", "TIR", "TON",
    "TSO", "TSN", "TUR", "TUK", "TWI", "UIG", "UKR", "UZB", "VEN", "VOL", "WLN", "CYM", "FRY",
    "WOL", "XHO", "YID", "YOR", "ZHA", "ZUL", "ORJ", "QPC", "TNG", "SRP",
)

ENUMS: Dict[str, Tuple[str, ...]] = {
    "LanguageCode": LANGUAGE_CODES,

    # Audio description
    "AudioTypeControl": _FOLLOW_INPUT,
    "AudioLanguageCodeControl": _FOLLOW_INPUT,
    "AudioChannelTag": (
        "L", "R", "C", "LFE", "LS", "RS", "LC", "RC", "CS", "LSD", "RSD", "TCS", "VHL", "VHC", "VHR",
    ),
    "AudioNormalizationAlgorithm": _LOUDNESS_METERING,
    "AudioNormalizationAlgorithmControl": ("CORRECT_AUDIO", "MEASURE_ONLY"),
    "AudioNormalizationLoudnessLogging": ("LOG", "DONT_LOG"),
    "AudioNormalizationPeakCalculation": ("TRUE_PEAK", "NONE"),
    "AudioCodec": (
        "AAC", "MP2", "MP3", "WAV", "AIFF", "AC3", "EAC3", "EAC3_ATMOS", "VORBIS", "OPUS", "PASSTHROUGH",
    ),

    # AAC
    "AacAudioDescriptionBroadcasterMix": ("BROADCASTER_MIXED_AD", "NORMAL"),
    "AacCodecProfile": ("LC", "HEV1", "HEV2"),
    "AacCodingMode": ("AD_RECEIVER_MIX", "CODING_MODE_1_0", "CODING_MODE_1_1", "CODING_MODE_2_0", "CODING_MODE_5_1"),
    "AacRateControlMode": ("CBR", "VBR"),
    "AacRawFormat": ("LATM_LOAS", "NONE"),
    "AacSpecification": ("MPEG2", "MPEG4"),
    "AacVbrQuality": ("LOW", "MEDIUM_LOW", "MEDIUM_HIGH", "HIGH"),

    # AC3
    "Ac3BitstreamMode": (
        "COMPLETE_MAIN", "COMMENTARY", "DIALOGUE", "EMERGENCY", "HEARING_IMPAIRED",
        "MUSIC_AND_EFFECTS", "VISUALLY_IMPAIRED", "VOICE_OVER",
    ),
    "Ac3CodingMode": ("CODING_MODE_1_0", "CODING_MODE_1_1", "CODING_MODE_2_0", "CODING_MODE_3_2_LFE"),
    "Ac3DynamicRangeCompressionProfile": ("FILM_STANDARD", "NONE"),
    "Ac3LfeFilter": ("ENABLED", "DISABLED"),
    "Ac3MetadataControl": _FOLLOW_INPUT,

    # EAC3 Atmos
    "Eac3AtmosBitstreamMode": ("COMPLETE_MAIN",),
    "Eac3AtmosCodingMode": ("CODING_MODE_9_1_6",),
    "Eac3AtmosDialogueIntelligence": ("ENABLED", "DISABLED"),
    "Eac3AtmosDynamicRangeCompressionLine": _DRC,
    "Eac3AtmosDynamicRangeCompressionRf": _DRC,
    "Eac3AtmosMeteringMode": ("LEQ_A",) + _LOUDNESS_METERING,
    "Eac3AtmosStereoDownmix": ("NOT_INDICATED", "STEREO", "SURROUND", "DPL2"),
    "Eac3AtmosSurroundExMode": _SURROUND,

    # EAC3
    "Eac3AttenuationControl": ("ATTENUATE_3_DB", "NONE"),
    "Eac3BitstreamMode": ("COMPLETE_MAIN", "COMMENTARY", "EMERGENCY", "HEARING_IMPAIRED", "VISUALLY_IMPAIRED"),
    "Eac3CodingMode": ("CODING_MODE_1_0", "CODING_MODE_2_0", "CODING_MODE_3_2"),
    "Eac3DcFilter": ("ENABLED", "DISABLED"),
    "Eac3DynamicRangeCompressionLine": _DRC,
    "Eac3DynamicRangeCompressionRf": _DRC,
    "Eac3LfeControl": ("LFE", "NO_LFE"),
    "Eac3LfeFilter": ("ENABLED", "DISABLED"),
    "Eac3MetadataControl": _FOLLOW_INPUT,
    "Eac3PassthroughControl": ("WHEN_POSSIBLE", "NO_PASSTHROUGH"),
    "Eac3PhaseControl": ("SHIFT_90_DEGREES", "NO_SHIFT"),
    "Eac3StereoDownmix": ("NOT_INDICATED", "LO_RO", "LT_RT", "DPL2"),
    "Eac3SurroundExMode": _SURROUND,
    "Eac3SurroundMode": _SURROUND,

    # Other audio codecs
    "Mp3RateControlMode": ("CBR", "VBR"),
    "WavFormat": ("RIFF", "RF64"),

    # Captions
    "CaptionDestinationType": (
        "BURN_IN", "DVB_SUB", "EMBEDDED", "EMBEDDED_PLUS_SCTE20", "IMSC", "SCTE20_PLUS_EMBEDDED",
        "SCC", "SRT", "SMI", "TELETEXT", "TTML", "WEBVTT",
    ),
    "BurninSubtitleAlignment": _SUBTITLE_ALIGNMENT,
    "BurninSubtitleBackgroundColor": _SUBTITLE_BACKGROUND,
    "BurninSubtitleFontColor": _SUBTITLE_FONT_COLOR,
    "BurninSubtitleOutlineColor": _SUBTITLE_OUTLINE_COLOR,
    "BurninSubtitleShadowColor": _SUBTITLE_BACKGROUND,
    "BurninSubtitleTeletextSpacing": _TELETEXT_SPACING,
    "DvbSubtitleAlignment": _SUBTITLE_ALIGNMENT,
    "DvbSubtitleBackgroundColor": _SUBTITLE_BACKGROUND,
    "DvbSubtitleFontColor": _SUBTITLE_FONT_COLOR,
    "DvbSubtitleOutlineColor": _SUBTITLE_OUTLINE_COLOR,
    "DvbSubtitleShadowColor": _SUBTITLE_BACKGROUND,
    "DvbSubtitleTeletextSpacing": _TELETEXT_SPACING,
    "DvbSubtitlingType": ("HEARING_IMPAIRED", "STANDARD"),
    "FontScript": ("AUTOMATIC", "HANS", "HANT"),
    "ImscStylePassthrough": ("ENABLED", "DISABLED"),
    "SccDestinationFramerate": (
        "FRAMERATE_23_97", "FRAMERATE_24", "FRAMERATE_25",
        "FRAMERATE_29_97_DROPFRAME", "FRAMERATE_29_97_NON_DROPFRAME",
    ),
    "TeletextPageType": (
        "PAGE_TYPE_INITIAL", "PAGE_TYPE_SUBTITLE", "PAGE_TYPE_ADDL_INFO",
        "PAGE_TYPE_PROGRAM_SCHEDULE", "PAGE_TYPE_HEARING_IMPAIRED_SUBTITLE",
    ),
    "TtmlStylePassthrough": ("ENABLED", "DISABLED"),

    # Containers
    "ContainerType": ("F4V", "ISMV", "M2TS", "M3U8", "CMFC", "MOV", "MP4", "MPD", "MXF", "WEBM", "RAW"),
    "CmfcAudioDuration": _AUDIO_DURATION,
    "CmfcScte35Esam": _INSERT,
    "CmfcScte35Source": _PASSTHROUGH,
    "F4vMoovPlacement": _MOOV_PLACEMENT,
    "M2tsAudioBufferModel": ("DVB", "ATSC"),
    "M2tsAudioDuration": _AUDIO_DURATION,
    "M2tsBufferModel": ("MULTIPLEX", "NONE"),
    "M2tsEbpAudioInterval": ("VIDEO_AND_FIXED_INTERVALS", "VIDEO_INTERVAL"),
    "M2tsEbpPlacement": ("VIDEO_AND_AUDIO_PIDS", "VIDEO_PID"),
    "M2tsEsRateInPes": _INCLUDE,
    "M2tsForceTsVideoEbpOrder": ("FORCE", "DEFAULT"),
    "M2tsNielsenId3": _INSERT,
    "M2tsPcrControl": _PCR_CONTROL,
    "M2tsRateMode": ("VBR", "CBR"),
    "M2tsScte35Source": _PASSTHROUGH,
    "M2tsSegmentationMarkers": ("NONE", "RAI_SEGSTART", "RAI_ADAPT", "PSI_SEGSTART", "EBP", "EBP_LEGACY"),
    "M2tsSegmentationStyle": ("MAINTAIN_CADENCE", "RESET_CADENCE"),
    "OutputSdt": ("SDT_FOLLOW", "SDT_FOLLOW_IF_PRESENT", "SDT_MANUAL", "SDT_NONE"),
    "M3u8AudioDuration": _AUDIO_DURATION,
    "M3u8NielsenId3": _INSERT,
    "M3u8PcrControl": _PCR_CONTROL,
    "M3u8Scte35Source": _PASSTHROUGH,
    "TimedMetadata": _PASSTHROUGH,
    "MovClapAtom": _INCLUDE,
    "MovCslgAtom": _INCLUDE,
    "MovMpeg2FourCCControl": ("XDCAM", "MPEG"),
    "MovPaddingControl": ("OMNEON", "NONE"),
    "MovReference": ("SELF_CONTAINED", "EXTERNAL"),
    "Mp4CslgAtom": _INCLUDE,
    "Mp4FreeSpaceBox": _INCLUDE,
    "Mp4MoovPlacement": _MOOV_PLACEMENT,
    "MpdAccessibilityCaptionHints": _INCLUDE,
    "MpdAudioDuration": _AUDIO_DURATION,
    "MpdCaptionContainerType": ("RAW", "FRAGMENTED_MP4"),
    "MpdScte35Esam": _INSERT,
    "MpdScte35Source": _PASSTHROUGH,
    "MxfAfdSignaling": ("NO_COPY", "COPY_FROM_VIDEO"),
    "MxfProfile": ("D10", "XDCAM", "OP1A"),

    # Video description
    "AfdSignaling": ("NONE", "AUTO", "FIXED"),
    "AntiAlias": _ENABLED,
    "ColorMetadata": ("IGNORE", "INSERT"),
    "DropFrameTimecode": _ENABLED,
    "RespondToAfd": ("NONE", "RESPOND", "PASSTHROUGH"),
    "ScalingBehavior": ("DEFAULT", "STRETCH_TO_OUTPUT"),
    "VideoTimecodeInsertion": ("DISABLED", "PIC_TIMING_SEI"),
    "VideoCodec": ("AV1", "AVC_INTRA", "FRAME_CAPTURE", "H_264", "H_265", "MPEG2", "PRORES", "VC3", "VP8", "VP9"),

    # AV1
    "Av1AdaptiveQuantization": _ADAPTIVE_QUANTIZATION,
    "Av1FramerateControl": _FRAMERATE_CONTROL,
    "Av1FramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "Av1RateControlMode": ("QVBR",),
    "Av1SpatialAdaptiveQuantization": _ENABLED,

    # AVC-Intra
    "AvcIntraClass": ("CLASS_50", "CLASS_100", "CLASS_200"),
    "AvcIntraFramerateControl": _FRAMERATE_CONTROL,
    "AvcIntraFramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "AvcIntraInterlaceMode": _INTERLACE_MODE,
    "AvcIntraSlowPal": _ENABLED,
    "AvcIntraTelecine": _HARD_TELECINE,

    # H.264
    "H264AdaptiveQuantization": ("OFF", "AUTO", "LOW", "MEDIUM", "HIGH", "HIGHER", "MAX"),
    "H264CodecLevel": (
        "AUTO", "LEVEL_1", "LEVEL_1_1", "LEVEL_1_2", "LEVEL_1_3", "LEVEL_2", "LEVEL_2_1", "LEVEL_2_2",
        "LEVEL_3", "LEVEL_3_1", "LEVEL_3_2", "LEVEL_4", "LEVEL_4_1", "LEVEL_4_2", "LEVEL_5",
        "LEVEL_5_1", "LEVEL_5_2",
    ),
    "H264CodecProfile": ("BASELINE", "HIGH", "HIGH_10BIT", "HIGH_422", "HIGH_422_10BIT", "MAIN"),
    "H264DynamicSubGop": _DYNAMIC_SUB_GOP,
    "H264EntropyEncoding": ("CABAC", "CAVLC"),
    "H264FieldEncoding": ("PAFF", "FORCE_FIELD"),
    "H264FlickerAdaptiveQuantization": _ENABLED,
    "H264FramerateControl": _FRAMERATE_CONTROL,
    "H264FramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "H264GopBReference": _ENABLED,
    "H264GopSizeUnits": _GOP_SIZE_UNITS,
    "H264InterlaceMode": _INTERLACE_MODE,
    "H264ParControl": _PAR_CONTROL,
    "H264QualityTuningLevel": _QUALITY_TUNING,
    "H264RateControlMode": _RATE_CONTROL,
    "H264RepeatPps": _ENABLED,
    "H264SceneChangeDetect": _SCENE_CHANGE_DETECT,
    "H264SlowPal": _ENABLED,
    "H264SpatialAdaptiveQuantization": _ENABLED,
    "H264Syntax": ("DEFAULT", "RP2027"),
    "H264Telecine": _TELECINE,
    "H264TemporalAdaptiveQuantization": _ENABLED,
    "H264UnregisteredSeiTimecode": _ENABLED,

    # H.265
    "H265AdaptiveQuantization": _ADAPTIVE_QUANTIZATION,
    "H265AlternateTransferFunctionSei": _ENABLED,
    "H265CodecLevel": (
        "AUTO", "LEVEL_1", "LEVEL_2", "LEVEL_2_1", "LEVEL_3", "LEVEL_3_1", "LEVEL_4", "LEVEL_4_1",
        "LEVEL_5", "LEVEL_5_1", "LEVEL_5_2", "LEVEL_6", "LEVEL_6_1", "LEVEL_6_2",
    ),
    "H265CodecProfile": (
        "MAIN_MAIN", "MAIN_HIGH", "MAIN10_MAIN", "MAIN10_HIGH", "MAIN_422_8BIT_MAIN",
        "MAIN_422_8BIT_HIGH", "MAIN_422_10BIT_MAIN", "MAIN_422_10BIT_HIGH",
    ),
    "H265DynamicSubGop": _DYNAMIC_SUB_GOP,
    "H265FlickerAdaptiveQuantization": _ENABLED,
    "H265FramerateControl": _FRAMERATE_CONTROL,
    "H265FramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "H265GopBReference": _ENABLED,
    "H265GopSizeUnits": _GOP_SIZE_UNITS,
    "H265InterlaceMode": _INTERLACE_MODE,
    "H265ParControl": _PAR_CONTROL,
    "H265QualityTuningLevel": _QUALITY_TUNING,
    "H265RateControlMode": _RATE_CONTROL,
    "H265SampleAdaptiveOffsetFilterMode": ("DEFAULT", "ADAPTIVE", "OFF"),
    "H265SceneChangeDetect": _SCENE_CHANGE_DETECT,
    "H265SlowPal": _ENABLED,
    "H265SpatialAdaptiveQuantization": _ENABLED,
    "H265Telecine": _TELECINE,
    "H265TemporalAdaptiveQuantization": _ENABLED,
    "H265TemporalIds": _ENABLED,
    "H265Tiles": _ENABLED,
    "H265UnregisteredSeiTimecode": _ENABLED,
    "H265WriteMp4PackagingType": ("HVC1", "HEV1"),

    # MPEG-2
    "Mpeg2AdaptiveQuantization": ("OFF", "LOW", "MEDIUM", "HIGH"),
    "Mpeg2CodecLevel": ("AUTO", "LOW", "MAIN", "HIGH1440", "HIGH"),
    "Mpeg2CodecProfile": ("MAIN", "PROFILE_422"),
    "Mpeg2DynamicSubGop": _DYNAMIC_SUB_GOP,
    "Mpeg2FramerateControl": _FRAMERATE_CONTROL,
    "Mpeg2FramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "Mpeg2GopSizeUnits": _GOP_SIZE_UNITS,
    "Mpeg2InterlaceMode": _INTERLACE_MODE,
    "Mpeg2IntraDcPrecision": (
        "AUTO", "INTRA_DC_PRECISION_8", "INTRA_DC_PRECISION_9",
        "INTRA_DC_PRECISION_10", "INTRA_DC_PRECISION_11",
    ),
    "Mpeg2ParControl": _PAR_CONTROL,
    "Mpeg2QualityTuningLevel": ("SINGLE_PASS", "MULTI_PASS"),
    "Mpeg2RateControlMode": ("VBR", "CBR"),
    "Mpeg2SceneChangeDetect": _ENABLED,
    "Mpeg2SlowPal": _ENABLED,
    "Mpeg2SpatialAdaptiveQuantization": _ENABLED,
    "Mpeg2Syntax": ("DEFAULT", "D_10"),
    "Mpeg2Telecine": _TELECINE,
    "Mpeg2TemporalAdaptiveQuantization": _ENABLED,

    # ProRes
    "ProresCodecProfile": (
        "APPLE_PRORES_422", "APPLE_PRORES_422_HQ", "APPLE_PRORES_422_LT", "APPLE_PRORES_422_PROXY",
    ),
    "ProresFramerateControl": _FRAMERATE_CONTROL,
    "ProresFramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "ProresInterlaceMode": _INTERLACE_MODE,
    "ProresParControl": _PAR_CONTROL,
    "ProresSlowPal": _ENABLED,
    "ProresTelecine": _HARD_TELECINE,

    # VC3
    "Vc3Class": ("CLASS_145_8BIT", "CLASS_220_8BIT", "CLASS_220_10BIT"),
    "Vc3FramerateControl": _FRAMERATE_CONTROL,
    "Vc3FramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "Vc3InterlaceMode": ("INTERLACED", "PROGRESSIVE"),
    "Vc3SlowPal": _ENABLED,
    "Vc3Telecine": _HARD_TELECINE,

    # VP8 / VP9
    "Vp8FramerateControl": _FRAMERATE_CONTROL,
    "Vp8FramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "Vp8ParControl": _PAR_CONTROL,
    "Vp8QualityTuningLevel": ("MULTI_PASS", "MULTI_PASS_HQ"),
    "Vp8RateControlMode": ("VBR",),
    "Vp9FramerateControl": _FRAMERATE_CONTROL,
    "Vp9FramerateConversionAlgorithm": _FRAMERATE_CONVERSION,
    "Vp9ParControl": _PAR_CONTROL,
    "Vp9QualityTuningLevel": ("MULTI_PASS", "MULTI_PASS_HQ"),
    "Vp9RateControlMode": ("VBR",),

    # Video preprocessors
    "ColorSpaceConversion": ("NONE", "FORCE_601", "FORCE_709", "FORCE_HDR10", "FORCE_HLG_2020"),
    "DeinterlaceAlgorithm": ("INTERPOLATE", "INTERPOLATE_TICKER", "BLEND", "BLEND_TICKER"),
    "DeinterlacerControl": ("FORCE_ALL_FRAMES", "NORMAL"),
    "DeinterlacerMode": ("DEINTERLACE", "INVERSE_TELECINE", "ADAPTIVE"),
    "DolbyVisionLevel6Mode": ("PASSTHROUGH", "RECALCULATE", "SPECIFY"),
    "DolbyVisionProfile": ("PROFILE_5",),
    "NoiseReducerFilter": (
        "BILATERAL", "MEAN", "GAUSSIAN", "LANCZOS", "SHARPEN", "CONSERVE", "SPATIAL", "TEMPORAL",
    ),
    "NoiseFilterPostTemporalSharpening": ("DISABLED", "ENABLED", "AUTO"),
    "WatermarkingStrength": ("LIGHTEST", "LIGHTER", "DEFAULT", "STRONGER", "STRONGEST"),
    "TimecodeBurninPosition": (
        "TOP_CENTER", "TOP_LEFT", "TOP_RIGHT", "MIDDLE_LEFT", "MIDDLE_CENTER", "MIDDLE_RIGHT",
        "BOTTOM_LEFT", "BOTTOM_CENTER", "BOTTOM_RIGHT",
    ),

    # Job template
    "AccelerationMode": ("DISABLED", "ENABLED", "PREFERRED"),
    "StatusUpdateInterval": (
        "SECONDS_10", "SECONDS_12", "SECONDS_15", "SECONDS_20", "SECONDS_30", "SECONDS_60",
        "SECONDS_120", "SECONDS_180", "SECONDS_240", "SECONDS_300", "SECONDS_360", "SECONDS_420",
        "SECONDS_480", "SECONDS_540", "SECONDS_600",
    ),
    "AudioDefaultSelection": ("DEFAULT", "NOT_DEFAULT"),
    "AudioSelectorType": ("PID", "TRACK", "LANGUAGE_CODE"),
    "AncillaryConvert608To708": _CONVERT_608_TO_708,
    "AncillaryTerminateCaptions": _TERMINATE_CAPTIONS,
    "EmbeddedConvert608To708": _CONVERT_608_TO_708,
    "EmbeddedTerminateCaptions": _TERMINATE_CAPTIONS,
    "FileSourceConvert608To708": _CONVERT_608_TO_708,
    "CaptionSourceType": (
        "ANCILLARY", "DVB_SUB", "EMBEDDED", "SCTE20", "SCC", "TTML", "STL", "SRT", "SMI",
        "SMPTE_TT", "TELETEXT", "NULL_SOURCE", "IMSC", "WEBVTT",
    ),
    "InputDeblockFilter": ("ENABLED", "DISABLED"),
    "InputDenoiseFilter": ("ENABLED", "DISABLED"),
    "InputFilterEnable": ("AUTO", "DISABLE", "FORCE"),
    "InputScanType": ("AUTO", "PSF"),
    "InputPsiControl": ("IGNORE_PSI", "USE_PSI"),
    "InputTimecodeSource": _TIMECODE_SOURCE,
    "AlphaBehavior": ("DISCARD", "REMAP_TO_LUMA"),
    "ColorSpace": ("FOLLOW", "REC_601", "REC_709", "HDR10", "HLG_2020"),
    "ColorSpaceUsage": ("FORCE", "FALLBACK"),
    "InputRotate": ("DEGREE_0", "DEGREES_90", "DEGREES_180", "DEGREES_270", "AUTO"),
    "TimecodeSource": _TIMECODE_SOURCE,
    "MotionImageInsertionMode": ("MOV", "PNG"),
    "MotionImagePlayback": ("ONCE", "REPEAT"),
    "OutputGroupType": (
        "HLS_GROUP_SETTINGS", "DASH_ISO_GROUP_SETTINGS", "FILE_GROUP_SETTINGS",
        "MS_SMOOTH_GROUP_SETTINGS", "CMAF_GROUP_SETTINGS",
    ),
    "S3ServerSideEncryptionType": ("SERVER_SIDE_ENCRYPTION_S3", "SERVER_SIDE_ENCRYPTION_KMS"),
    "S3ObjectCannedAcl": ("PUBLIC_READ", "AUTHENTICATED_READ", "BUCKET_OWNER_READ", "BUCKET_OWNER_FULL_CONTROL"),
    "CmafClientCache": _CLIENT_CACHE,
    "CmafCodecSpecification": _CODEC_SPECIFICATION,
    "CmafManifestCompression": _MANIFEST_COMPRESSION,
    "CmafManifestDurationFormat": _MANIFEST_DURATION_FORMAT,
    "CmafMpdProfile": _MPD_PROFILE,
    "CmafSegmentControl": _SEGMENT_CONTROL,
    "CmafStreamInfResolution": _INCLUDE,
    "CmafWriteDASHManifest": _ENABLED,
    "CmafWriteHLSManifest": _ENABLED,
    "CmafWriteSegmentTimelineInRepresentation": ("ENABLED", "DISABLED"),
    "HlsClientCache": _CLIENT_CACHE,
    "HlsCodecSpecification": _CODEC_SPECIFICATION,
    "HlsDirectoryStructure": ("SINGLE_DIRECTORY", "SUBDIRECTORY_PER_STREAM"),
    "HlsManifestCompression": _MANIFEST_COMPRESSION,
    "HlsManifestDurationFormat": _MANIFEST_DURATION_FORMAT,
    "HlsOutputSelection": ("MANIFESTS_AND_SEGMENTS", "SEGMENTS_ONLY"),
    "HlsProgramDateTime": _INCLUDE,
    "HlsSegmentControl": _SEGMENT_CONTROL,
    "HlsStreamInfResolution": _INCLUDE,
    "HlsTimedMetadataId3Frame": ("NONE", "PRIV", "TDRL"),
    "DashIsoHbbtvCompliance": ("HBBTV_1_5", "NONE"),
    "DashIsoMpdProfile": _MPD_PROFILE,
    "DashIsoSegmentControl": _SEGMENT_CONTROL,
    "DashIsoWriteSegmentTimelineInRepresentation": ("ENABLED", "DISABLED"),
    "MsSmoothAudioDeduplication": ("COMBINE_DUPLICATE_STREAMS", "NONE"),
    "MsSmoothManifestEncoding": ("UTF8", "UTF16"),

    # Queue
    "PricingPlan": ("ON_DEMAND", "RESERVED"),
    "QueueStatus": ("ACTIVE", "PAUSED"),
    "Commitment": ("ONE_YEAR",),
    "RenewalType": ("AUTO_RENEW", "EXPIRE"),
}

_FROZEN: Dict[str, FrozenSet[str]] = {name: frozenset(literals) for name, literals in ENUMS.items()}


def values(category: str) -> FrozenSet[str]:
    """Return the accepted literals for an enum category.

    Raises:
        KeyError: If the category is not registered
    """
    try:
        return _FROZEN[category]
    except KeyError:
        raise KeyError(f"Unknown enum category: {category}") from None


def contains(category: str, value: str) -> bool:
    """Check membership. The empty string means "not set" and is never a member."""
    if not value:
        return False
    return value in values(category)


def categories() -> List[str]:
    """List every registered category name, sorted."""
    return sorted(ENUMS)
