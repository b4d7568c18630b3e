"""Project-wide constants for SPConverter."""

VERSION = "1.0.0"

# Suffix inserted before the extension of converted files and after the
# name of mirrored output directories
CONVERTED_SUFFIX = "-SPC"

# Extensions accepted as input (exact, case-sensitive match)
ALLOWED_EXTENSIONS: tuple[str, ...] = (".wav", ".flac", ".ogg", ".mp3")

# Block size used when copying files byte for byte
COPY_CHUNK_SIZE = 1024 * 1024
