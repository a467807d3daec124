"""Decode one channel of a sample file into a float32 buffer."""

import os
from pathlib import Path

import numpy as np
import soundfile as sf

from rms_report.config import DECODE_BLOCK_FRAMES, DEFAULT_CHANNEL_INDEX
from rms_report.errors import DecodeError
from rms_report.utils.logger import get_logger

logger = get_logger(__name__)


class SampleDecoder:
    """Read a single channel of an uncompressed audio file in fixed-size blocks."""

    def __init__(self, block_frames: int = DECODE_BLOCK_FRAMES):
        if block_frames <= 0:
            raise ValueError("Block size must be a positive number of frames")
        self.block_frames = block_frames

    def read_channel(
        self,
        path: Path,
        channel_index: int = DEFAULT_CHANNEL_INDEX,
    ) -> np.ndarray:
        """Decode every frame of one channel.

        Args:
            path: Path to the audio file
            channel_index: Channel to keep (0 = first)

        Returns:
            1-D float32 array with one sample per frame, in file order

        Raises:
            DecodeError: If the file cannot be opened or read, or the
                channel does not exist
        """
        try:
            # bytes path so names that are not valid UTF-8 still open
            with sf.SoundFile(os.fsencode(path)) as audio:
                if channel_index >= audio.channels:
                    raise DecodeError(
                        f"{path} has {audio.channels} channel(s), "
                        f"cannot read channel {channel_index}"
                    )
                return self._read_blocks(audio, path, channel_index)
        except (RuntimeError, OSError) as e:
            # LibsndfileError is a RuntimeError subclass
            raise DecodeError(f"Unable to read file at path {path}: {e}") from e

    def _read_blocks(
        self,
        audio: sf.SoundFile,
        path: Path,
        channel_index: int,
    ) -> np.ndarray:
        blocks = []
        position = 0

        while position < audio.frames:
            block = audio.read(self.block_frames, dtype="float32", always_2d=True)
            if len(block) == 0:
                raise DecodeError(
                    f"Decoding {path} stalled at frame {position} of {audio.frames}"
                )
            blocks.append(block[:, channel_index])
            position += len(block)

        logger.debug(
            f"Decoded {position} frames from {path.name} "
            f"({audio.samplerate} Hz, {audio.channels}ch, {audio.subtype})"
        )

        if not blocks:
            return np.empty(0, dtype=np.float32)
        return np.concatenate(blocks)
