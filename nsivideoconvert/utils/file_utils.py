"""
File utility functions for video uploads
"""
import base64
import os


class FileEncoder:
    """Encode local video files for inline conversion"""

    @staticmethod
    def encode_file(file_path: str) -> str:
        """Read a file and return its base64 text"""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"Video file not found: {file_path}")

        with open(file_path, 'rb') as f:
            return base64.b64encode(f.read()).decode('ascii')

    @staticmethod
    def filename_for(file_path: str) -> str:
        """Filename sent to the node, which uses its extension to pick codecs"""
        return os.path.basename(file_path)
