"""Data models for hardware encoder probing."""

from dataclasses import dataclass
from enum import Enum


class HardwareEncoder(Enum):
    """Hardware video encoders that can be probed.

    Values are ffmpeg encoder names.
    """

    NVIDIA_H264 = "h264_nvenc"
    NVIDIA_HEVC = "hevc_nvenc"
    AMD_H264 = "h264_amf"
    AMD_HEVC = "hevc_amf"
    QSV_H264 = "h264_qsv"
    QSV_HEVC = "hevc_qsv"
    VAAPI_H264 = "h264_vaapi"
    VAAPI_HEVC = "hevc_vaapi"

    @classmethod
    def from_name(cls, name: str) -> "HardwareEncoder":
        """Look up an encoder by ffmpeg name or member name (case-insensitive).

        Raises:
            ValueError: If the name matches no encoder.
        """
        key = name.strip().casefold()
        for member in cls:
            if key in (member.value, member.name.casefold()):
                return member
        raise ValueError(f"Unknown hardware encoder: {name}")


@dataclass(frozen=True)
class EncoderFamily:
    """A hardware encoder back-end (NVENC, AMF, ...).

    ``tag`` identifies the family inside an encoder's trial parameters.
    ``transient_false_negative`` marks back-ends known to fail a cold first
    trial encode and succeed right after.
    """

    name: str
    label: str
    tag: str
    transient_false_negative: bool = False

    def matches(self, trial_params: tuple[str, ...]) -> bool:
        return self.tag in " ".join(trial_params)


@dataclass(frozen=True)
class EncoderProfile:
    """Trial encode parameters for one hardware encoder."""

    encoder: HardwareEncoder
    label: str  # e.g. "NVIDIA H.264"
    group: str  # e.g. "NVIDIA"
    trial_params: tuple[str, ...]  # passed after -c:v

    @property
    def trial_params_text(self) -> str:
        return " ".join(self.trial_params)


@dataclass(frozen=True)
class HardwareProbeResult:
    """Outcome of probing one hardware encoder.

    ``output`` is the text the final trial encode printed, kept for
    diagnostics. ``attempts`` is 0 when no trial could be run.
    """

    encoder: HardwareEncoder
    usable: bool
    output: str = ""
    attempts: int = 1
