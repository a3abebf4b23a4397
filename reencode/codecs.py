"""Decoders, encoders, hardware accelerators and tunes known to ffmpeg."""

from __future__ import annotations

from enum import Enum


class Decoder(Enum):
    """Hardware decoders the application can use."""

    NONE = "none"
    AV1_CUVID = "av1_cuvid"
    AV1_QSV = "av1_qsv"
    H264_CUVID = "h264_cuvid"
    H264_QSV = "h264_qsv"
    HEVC_CUVID = "hevc_cuvid"
    HEVC_QSV = "hevc_qsv"

    def __str__(self) -> str:
        return self.value


class Encoder(Enum):
    """Video encoders the application can use."""

    AV1 = "av1"
    AV1_AMF = "av1_amf"
    AV1_NVENC = "av1_nvenc"
    AV1_QSV = "av1_qsv"
    H264 = "h264"
    H264_AMF = "h264_amf"
    H264_NVENC = "h264_nvenc"
    H264_QSV = "h264_qsv"
    HEVC = "hevc"
    HEVC_AMF = "hevc_amf"
    HEVC_NVENC = "hevc_nvenc"
    HEVC_QSV = "hevc_qsv"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Encoder:
        """Return the encoder named ``name``, or INVALID if there is none."""
        try:
            return cls(name)
        except ValueError:
            return cls.INVALID

    def is_h264(self) -> bool:
        return self in _H264

    def is_hevc(self) -> bool:
        return self in _HEVC

    def is_av1(self) -> bool:
        return self in _AV1

    def is_hardware(self) -> bool:
        """Return True for AMF, NVENC and QSV encoders."""
        return self in _HARDWARE


_H264 = frozenset(
    {Encoder.H264, Encoder.H264_AMF, Encoder.H264_NVENC, Encoder.H264_QSV}
)
_HEVC = frozenset(
    {Encoder.HEVC, Encoder.HEVC_AMF, Encoder.HEVC_NVENC, Encoder.HEVC_QSV}
)
_AV1 = frozenset({Encoder.AV1, Encoder.AV1_AMF, Encoder.AV1_NVENC, Encoder.AV1_QSV})
_HARDWARE = (_H264 | _HEVC | _AV1) - {Encoder.H264, Encoder.HEVC, Encoder.AV1}


class HWAccelerator(Enum):
    """Hardware acceleration methods passed to ``-hwaccel``."""

    NONE = "none"
    AMD = "opencl"
    NVIDIA = "cuda"
    INTEL = "qsv"
    VULKAN = "vaapi"

    def __str__(self) -> str:
        return self.value


class Tune(Enum):
    """Encoder tunings passed to ``-tune``."""

    FILM = "film"
    ANIMATION = "animation"
    GRAIN = "grain"
    STILL_IMAGE = "still_image"
    PSNR = "psnr"
    SSIM = "ssim"
    FAST_DECODE = "fast_decode"
    ZERO_LATENCY = "zero_latency"
    TEXTURE_COMPRESSION = "texture_compression"
    PROXY = "proxy"
    HIGH_QUALITY = "high_quality"
    LOW_LATENCY = "low_latency"
    ZERO_LATENCY_LOW_LATENCY = "zero_latency_low_latency"
    LOSSLESS = "lossless"
    DEFAULT = "default"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, value: str) -> Tune:
        """Return the tune named ``value`` in any case, or DEFAULT."""
        lowered = value.lower()
        for tune in cls:
            if tune.value == lowered:
                return tune
        return cls.DEFAULT