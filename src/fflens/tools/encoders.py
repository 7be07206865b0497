"""Static table of probeable hardware encoders.

The table is an explicitly constructed value passed to the probe; there is
no module-level lazily initialized state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from fflens.tools.models import EncoderFamily, EncoderProfile, HardwareEncoder

logger = logging.getLogger(__name__)

NVIDIA = EncoderFamily(name="nvidia", label="NVIDIA", tag="nvenc")
# AMF reports failure on the first trial after a cold start, then passes.
AMD = EncoderFamily(
    name="amd", label="AMD", tag="amf", transient_false_negative=True
)
INTEL_QSV = EncoderFamily(name="qsv", label="Intel QSV", tag="qsv")
VAAPI = EncoderFamily(name="vaapi", label="VAAPI", tag="vaapi")

DEFAULT_FAMILIES: tuple[EncoderFamily, ...] = (NVIDIA, AMD, INTEL_QSV, VAAPI)

DEFAULT_PROFILES: tuple[EncoderProfile, ...] = (
    EncoderProfile(
        HardwareEncoder.NVIDIA_H264, "NVIDIA H.264", "NVIDIA", ("h264_nvenc",)
    ),
    EncoderProfile(
        HardwareEncoder.NVIDIA_HEVC, "NVIDIA H.265", "NVIDIA", ("hevc_nvenc",)
    ),
    EncoderProfile(HardwareEncoder.AMD_H264, "AMD H.264", "AMD", ("h264_amf",)),
    EncoderProfile(HardwareEncoder.AMD_HEVC, "AMD H.265", "AMD", ("hevc_amf",)),
    EncoderProfile(
        HardwareEncoder.QSV_H264, "Intel QSV H.264", "Intel QSV", ("h264_qsv",)
    ),
    EncoderProfile(
        HardwareEncoder.QSV_HEVC,
        "Intel QSV H.265",
        "Intel QSV",
        ("hevc_qsv", "-global_quality", "28", "-load_plugin", "hevc_hw"),
    ),
    EncoderProfile(
        HardwareEncoder.VAAPI_H264, "VAAPI H.264", "VAAPI", ("h264_vaapi",)
    ),
    EncoderProfile(
        HardwareEncoder.VAAPI_HEVC, "VAAPI H.265", "VAAPI", ("hevc_vaapi",)
    ),
)


class EncoderTable:
    """Lookup table of encoder trial profiles and their families."""

    def __init__(
        self,
        profiles: Iterable[EncoderProfile],
        families: Iterable[EncoderFamily],
    ) -> None:
        self._profiles: dict[HardwareEncoder, EncoderProfile] = {}
        for profile in profiles:
            if profile.encoder in self._profiles:
                raise ValueError(f"Duplicate encoder profile: {profile.encoder.value}")
            self._profiles[profile.encoder] = profile
        self._families = tuple(families)

    @classmethod
    def default(cls) -> EncoderTable:
        """Build the table of encoders fflens knows how to probe."""
        return cls(DEFAULT_PROFILES, DEFAULT_FAMILIES)

    def __iter__(self) -> Iterator[EncoderProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, encoder: object) -> bool:
        return encoder in self._profiles

    def get(self, encoder: HardwareEncoder | str) -> EncoderProfile:
        """Return the profile for an encoder.

        Args:
            encoder: Enum member or encoder name ("h264_nvenc").

        Raises:
            KeyError: If the encoder is not in the table.
            ValueError: If a name matches no known encoder.
        """
        if isinstance(encoder, str):
            encoder = HardwareEncoder.from_name(encoder)
        try:
            return self._profiles[encoder]
        except KeyError:
            raise KeyError(f"No trial profile for encoder {encoder.value}") from None

    def family_for(self, profile: EncoderProfile) -> EncoderFamily | None:
        """Return the family whose tag appears in the profile's trial params."""
        for family in self._families:
            if family.matches(profile.trial_params):
                return family
        logger.debug("No encoder family matches '%s'", profile.trial_params_text)
        return None

    def groups(self) -> dict[str, list[EncoderProfile]]:
        """Profiles grouped by vendor label, in table order."""
        grouped: dict[str, list[EncoderProfile]] = {}
        for profile in self:
            grouped.setdefault(profile.group, []).append(profile)
        return grouped
