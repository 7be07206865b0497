"""FFmpeg-based implementation of MediaIntrospector protocol."""

import logging
from pathlib import Path

from fflens.domain.models import MediaDescriptor
from fflens.introspector.interface import MediaIntrospectionError
from fflens.introspector.parsers import find_read_failure, parse_ffmpeg_output
from fflens.logging.context import analysis_context
from fflens.tools.detection import ToolNotFoundError, require_tool
from fflens.tools.invoker import SubprocessToolInvoker, ToolInvoker

logger = logging.getLogger(__name__)


class FFmpegIntrospector:
    """ffmpeg-based implementation of MediaIntrospector protocol.

    Runs ``ffmpeg -hide_banner -i <file>`` and parses the stream listing
    ffmpeg prints before complaining that no output file was given.
    """

    def __init__(
        self,
        ffmpeg_path: Path | None = None,
        invoker: ToolInvoker | None = None,
        timeout: float = 120,
    ) -> None:
        """Initialize the introspector.

        Args:
            ffmpeg_path: Optional explicit path to ffmpeg. If not provided,
                ffmpeg is looked up on PATH at read time.
            invoker: Runs ffmpeg. Defaults to a SubprocessToolInvoker.
            timeout: Seconds to wait for ffmpeg when no invoker is given.
        """
        self._ffmpeg_path = ffmpeg_path
        self._invoker = invoker or SubprocessToolInvoker(timeout=timeout)

    def get_file_info(self, path: Path) -> MediaDescriptor:
        """Extract stream information from a media file.

        Args:
            path: Path to the media file.

        Returns:
            MediaDescriptor with container fields and every recognized stream.

        Raises:
            MediaIntrospectionError: If the file or ffmpeg is missing, ffmpeg
                times out, or its output does not describe the file.
        """
        path = Path(path)
        with analysis_context(file_path=path):
            output = self._run_ffmpeg(path)
            logger.debug("Video Information:\n%s", output)
            return parse_ffmpeg_output(output, path)

    def read(self, path: Path) -> MediaDescriptor:
        """Read stream information, never raising for a failed read.

        Args:
            path: Path to the media file.

        Returns:
            MediaDescriptor, or an empty one if the read failed. The failure
            is logged at ERROR level.
        """
        path = Path(path)
        try:
            return self.get_file_info(path)
        except MediaIntrospectionError as e:
            with analysis_context(file_path=path):
                logger.error("Failed reading ffmpeg info: %s", e)
            return MediaDescriptor.empty(path)

    def _run_ffmpeg(self, path: Path) -> str:
        """Run ffmpeg against ``path`` and return the validated output.

        Raises:
            MediaIntrospectionError: On any hard failure of the read.
        """
        if not path.exists():
            raise MediaIntrospectionError(f"File not found: {path}")

        try:
            ffmpeg = require_tool("ffmpeg", self._ffmpeg_path)
        except ToolNotFoundError as e:
            raise MediaIntrospectionError(f"FFmpeg not found: {e}") from e

        result = self._invoker.execute(ffmpeg, ["-hide_banner", "-i", str(path)])
        if result.timed_out:
            raise MediaIntrospectionError(f"ffmpeg timed out reading {path}")

        reason = find_read_failure(result.output)
        if reason is not None:
            raise MediaIntrospectionError(f"ffmpeg failed for {path}: {reason}")
        return result.output
