"""fflens: media stream metadata from ffmpeg diagnostic output.

Reads the loosely formatted text ffmpeg prints when asked to inspect a file
and turns it into typed stream descriptors. Also probes whether hardware
video encoders are usable on the current machine by running trial encodes.
"""

__version__ = "0.1.0"
