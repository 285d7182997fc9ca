"""Fixed widths and limits shared by the stream codecs."""

# Encoded widths in bytes
BOOLEAN_SIZE = 1
BYTE_SIZE = 1
SHORT_SIZE = 2
INT_SIZE = 4
FLOAT_SIZE = 4
DOUBLE_SIZE = 8

# write_utf carries its byte length in an unsigned 16-bit prefix
MAX_UTF_BYTES = 0xFFFF

# Compression levels accepted by zlib (-1 selects the codec default)
MIN_COMPRESSION_LEVEL = -1
MAX_COMPRESSION_LEVEL = 9
