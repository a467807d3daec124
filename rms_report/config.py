"""Configuration constants for rms-report."""

# Accepted sample file extensions (matched without the leading dot)
ACCEPTED_EXTENSIONS = ("wav",)

# Channel analyzed in each file
DEFAULT_CHANNEL_INDEX = 0

# Frames read per decode block
DECODE_BLOCK_FRAMES = 1024

# Report header row
CSV_HEADER = "File Name,Raw RMS,RMS dBFS"

# Suffix appended to the output path when --csv-suffix is given
CSV_SUFFIX = ".csv"
