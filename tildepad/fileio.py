"""File collaborator: text reads and atomic text writes."""

import logging
import os
import tempfile

from .constants import EditorConstants
from .errors import DecodeError, FileIOError

logger = logging.getLogger(__name__)


class FileStore:
    """Reads and writes UTF-8 text files for the editor session."""

    def read_text(self, path: str) -> str:
        """Read ``path`` as UTF-8.

        Raises:
            FileNotFoundError: The file does not exist (callers may treat
                this as a new file).
            FileIOError: Any other OS-level failure.
            DecodeError: The contents are not valid UTF-8.
        """
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except FileNotFoundError:
            raise
        except OSError as e:
            raise FileIOError(path, e.strerror or str(e)) from e
        try:
            text = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeError(path, e.start) from e
        logger.debug(f"Read {len(data)} bytes from {path}")
        return text

    def write_text(self, path: str, text: str) -> int:
        """Save ``text`` to ``path`` atomically and return bytes written.

        The data goes to a temporary file in the same directory, which is
        then renamed over the target, so a failed save never truncates the
        existing file.
        """
        data = text.encode('utf-8')
        dir_name = os.path.dirname(path) or '.'
        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(mode='wb', dir=dir_name,
                                             prefix='.' + os.path.basename(path) + '.',
                                             suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(data)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_filename, path)
        except OSError as e:
            if temp_filename is not None and os.path.exists(temp_filename):
                try:
                    os.remove(temp_filename)
                except OSError:
                    logger.warning(f"Could not remove temporary file {temp_filename}")
            logger.warning(f"Saving {path} failed: {e}")
            raise FileIOError(path, e.strerror or str(e)) from e
        logger.debug(f"Wrote {len(data)} bytes to {path}")
        return len(data)
