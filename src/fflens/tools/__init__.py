"""External tool handling for fflens.

- ToolInvoker / SubprocessToolInvoker: run ffmpeg and capture its output
- find_tool / require_tool: resolve the ffmpeg executable
- EncoderTable: trial profiles for the probeable hardware encoders
- HardwareCapabilityProbe: trial-encode based encoder availability check
"""

from fflens.tools.detection import ToolNotFoundError, find_tool, require_tool
from fflens.tools.encoders import DEFAULT_FAMILIES, DEFAULT_PROFILES, EncoderTable
from fflens.tools.hwprobe import (
    HardwareCapabilityProbe,
    build_trial_arguments,
    is_trial_successful,
)
from fflens.tools.invoker import ExecuteResult, SubprocessToolInvoker, ToolInvoker
from fflens.tools.models import (
    EncoderFamily,
    EncoderProfile,
    HardwareEncoder,
    HardwareProbeResult,
)

__all__ = [
    "DEFAULT_FAMILIES",
    "DEFAULT_PROFILES",
    "EncoderFamily",
    "EncoderProfile",
    "EncoderTable",
    "ExecuteResult",
    "HardwareCapabilityProbe",
    "HardwareEncoder",
    "HardwareProbeResult",
    "SubprocessToolInvoker",
    "ToolInvoker",
    "ToolNotFoundError",
    "build_trial_arguments",
    "find_tool",
    "is_trial_successful",
    "require_tool",
]
